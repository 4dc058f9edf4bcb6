# -*- coding: utf-8 -*-
"""Enumerations for FRCS and Walls survey data.

This module contains all enumerations shared by the FRCS input models,
the Walls output models and the conversion engine: measurement units,
shot kinds, taping conventions and LRUD styles.
"""

from enum import Enum
from math import atan
from math import degrees
from math import radians
from math import tan

from frcs_walls_lib.constants import FEET_TO_METERS
from frcs_walls_lib.constants import GRADIANS_PER_CIRCLE
from frcs_walls_lib.constants import INCHES_PER_FOOT
from frcs_walls_lib.constants import MILS_PER_CIRCLE


class FormatIdentifier(str, Enum):
    """Format identifiers used in JSON files.

    Attributes:
        WALLS_WPJ: Format identifier for Walls project trees in JSON
    """

    WALLS_WPJ = "walls_wpj"


class LengthUnit(str, Enum):
    """Unit for distance measurements.

    Attributes:
        FEET: Decimal feet
        METERS: Metric meters
        INCHES: Inches (FRCS only, never a Walls working unit)
    """

    FEET = "F"
    METERS = "M"
    INCHES = "I"

    def to_meters(self, value: float) -> float:
        """Convert a value expressed in this unit to meters."""
        if self == LengthUnit.METERS:
            return value
        if self == LengthUnit.INCHES:
            return value / INCHES_PER_FOOT * FEET_TO_METERS
        return value * FEET_TO_METERS

    def from_meters(self, value: float) -> float:
        """Convert a value in meters to this unit."""
        if self == LengthUnit.METERS:
            return value
        if self == LengthUnit.INCHES:
            return value / FEET_TO_METERS * INCHES_PER_FOOT
        return value / FEET_TO_METERS


class AngleUnit(str, Enum):
    """Unit for azimuth and inclination measurements.

    Attributes:
        DEGREES: Standard degrees (360 per circle)
        GRADIANS: Gradians (400 per circle)
        MILS: Mils (6400 per circle)
        PERCENT_GRADE: Percentage gradient (tan(angle) * 100), inclinations only
    """

    DEGREES = "D"
    GRADIANS = "G"
    MILS = "M"
    PERCENT_GRADE = "P"

    def to_degrees(self, value: float) -> float:
        """Convert a value expressed in this unit to degrees."""
        if self == AngleUnit.GRADIANS:
            return value * 360 / GRADIANS_PER_CIRCLE
        if self == AngleUnit.MILS:
            return value * 360 / MILS_PER_CIRCLE
        if self == AngleUnit.PERCENT_GRADE:
            return degrees(atan(value / 100))
        return value

    def from_degrees(self, value: float) -> float:
        """Convert a value in degrees to this unit."""
        if self == AngleUnit.GRADIANS:
            return value * GRADIANS_PER_CIRCLE / 360
        if self == AngleUnit.MILS:
            return value * MILS_PER_CIRCLE / 360
        if self == AngleUnit.PERCENT_GRADE:
            return tan(radians(value)) * 100
        return value


class FrcsShotKind(str, Enum):
    """How the distance of an FRCS shot was taped.

    Attributes:
        NORMAL: Slope distance with inclination
        DIAGONAL: Slope distance to the station, vertical offset recorded apart
        HORIZONTAL: Horizontal distance, vertical offset recorded apart
    """

    NORMAL = "N"
    DIAGONAL = "D"
    HORIZONTAL = "H"


class TapingMethod(str, Enum):
    """Walls taping convention (``TAPE=`` units option).

    Attributes:
        INSTRUMENT_TO_TARGET: Tape runs from the instrument to the target
        INSTRUMENT_TO_STATION: Tape runs from the instrument to the station
        STATION_TO_TARGET: Tape runs from the station to the target
        STATION_TO_STATION: Tape runs between the two stations
    """

    INSTRUMENT_TO_TARGET = "IT"
    INSTRUMENT_TO_STATION = "IS"
    STATION_TO_TARGET = "ST"
    STATION_TO_STATION = "SS"


class LrudStyle(str, Enum):
    """Walls LRUD orientation (``LRUD=`` units option).

    Attributes:
        FROM_STATION_PERPENDICULAR: Perpendicular to the shot, at the FROM station
        FROM_STATION_BISECTOR: Bisecting the adjacent shots, at the FROM station
        TO_STATION_PERPENDICULAR: Perpendicular to the shot, at the TO station
        TO_STATION_BISECTOR: Bisecting the adjacent shots, at the TO station
    """

    FROM_STATION_PERPENDICULAR = "F"
    FROM_STATION_BISECTOR = "FB"
    TO_STATION_PERPENDICULAR = "T"
    TO_STATION_BISECTOR = "TB"


class DisplayLatLongFormat(str, Enum):
    """How Walls displays geographic coordinates of a georeferenced book.

    Attributes:
        DEGREES: Decimal degrees
        DEGREES_MINUTES: Degrees and decimal minutes
        DEGREES_MINUTES_SECONDS: Degrees, minutes and decimal seconds
    """

    DEGREES = "D"
    DEGREES_MINUTES = "DM"
    DEGREES_MINUTES_SECONDS = "DMS"
