# -*- coding: utf-8 -*-
"""Constants used throughout the frcs_walls_lib library.

This module centralizes all constant values to ensure consistency
and avoid magic numbers/strings scattered across the codebase.
"""

# -----------------------------------------------------------------------------
# Encodings
# -----------------------------------------------------------------------------

#: Encoding used for JSON files
JSON_ENCODING = "utf-8"

#: Version tag written into the JSON form of a Walls project
WPJ_JSON_VERSION = "1.0"

# -----------------------------------------------------------------------------
# Unit Conversions
# -----------------------------------------------------------------------------

#: Conversion factor from feet to meters
FEET_TO_METERS: float = 0.3048

#: Conversion factor from meters to feet
METERS_TO_FEET: float = 1.0 / FEET_TO_METERS

#: Number of inches in one foot
INCHES_PER_FOOT: float = 12.0

#: Number of mils in a full circle
MILS_PER_CIRCLE: float = 6400.0

#: Number of gradians in a full circle
GRADIANS_PER_CIRCLE: float = 400.0

# -----------------------------------------------------------------------------
# Shot Conversion
# -----------------------------------------------------------------------------

#: Allowed frontsight/backsight disagreement before Walls flags a shot
BACKSIGHT_TOLERANCE_DEGREES: float = 2.0

#: Absolute inclination of a plumb shot; such shots need no azimuth
VERTICAL_INCLINATION_DEGREES: float = 90.0

#: Azimuth given to non-vertical shots that were recorded without one
DEFAULT_AZIMUTH_DEGREES: float = 0.0

#: Inclination recorded for diagonal and horizontal shots
LEVEL_INCLINATION_DEGREES: float = 0.0

# -----------------------------------------------------------------------------
# Project Layout
# -----------------------------------------------------------------------------

#: Title of the survey holding a cave's fixed stations
FIXED_STATIONS_TITLE: str = "Fixed Stations"

#: Short name (before prefixing) of the fixed stations survey
FIXED_STATIONS_NAME: str = "fix"

#: Book option declaring the station name prefix of a cave
NAME_PREFIX_OPTION: str = "PREFIX={prefix}"

# -----------------------------------------------------------------------------
# Team Comments
# -----------------------------------------------------------------------------

#: Separator between team members
TEAM_SEPARATOR: str = ", "

#: Separator used when a member name already contains a comma
TEAM_SEPARATOR_WITH_COMMAS: str = "; "
