# -*- coding: utf-8 -*-
"""FRCS to Walls conversion library.

A Python library converting parsed FRCS cave survey data (trips, shots,
trip summaries) into a Walls project tree of books and surveys, ready to
be written as .WPJ and .SRV files.

Usage:
    from frcs_walls_lib import InputCave
    from frcs_walls_lib import convert_to_walls

    project = convert_to_walls(
        "FRCS and Surrounding Caves",
        [InputCave(subdir="fr", survey=survey, summaries=summaries)],
        name="FRCS",
    )

    for survey in project.root.iter_surveys():
        print(f"{survey.name}: {len(survey.content.shots)} shots")

    # The project tree round-trips through JSON
    json_str = project.model_dump_json(indent=2)
"""

__version__ = "0.1.0"

# Constants
from frcs_walls_lib.constants import BACKSIGHT_TOLERANCE_DEGREES
from frcs_walls_lib.constants import FEET_TO_METERS
from frcs_walls_lib.constants import JSON_ENCODING
from frcs_walls_lib.constants import METERS_TO_FEET
from frcs_walls_lib.convert import InputCave
from frcs_walls_lib.convert import convert_cave
from frcs_walls_lib.convert import convert_shot
from frcs_walls_lib.convert import convert_to_walls
from frcs_walls_lib.convert import convert_trip
from frcs_walls_lib.convert import format_team

# Enums
from frcs_walls_lib.enums import AngleUnit
from frcs_walls_lib.enums import DisplayLatLongFormat
from frcs_walls_lib.enums import FormatIdentifier
from frcs_walls_lib.enums import FrcsShotKind
from frcs_walls_lib.enums import LengthUnit
from frcs_walls_lib.enums import LrudStyle
from frcs_walls_lib.enums import TapingMethod
from frcs_walls_lib.errors import ShotLocation
from frcs_walls_lib.errors import WallsConversionError
from frcs_walls_lib.frcs.models import FrcsShot
from frcs_walls_lib.frcs.models import FrcsSurveyFile
from frcs_walls_lib.frcs.models import FrcsTrip
from frcs_walls_lib.frcs.models import FrcsTripHeader
from frcs_walls_lib.frcs.models import FrcsTripSummary
from frcs_walls_lib.frcs.models import FrcsTripSummaryFile
from frcs_walls_lib.models import Angle
from frcs_walls_lib.models import Georeference
from frcs_walls_lib.models import Length
from frcs_walls_lib.models import Lruds
from frcs_walls_lib.walls.srv import FixDirective
from frcs_walls_lib.walls.srv import WallsShot
from frcs_walls_lib.walls.srv import WallsSrvFile
from frcs_walls_lib.walls.wpj import WallsProjectBook
from frcs_walls_lib.walls.wpj import WallsProjectSurvey
from frcs_walls_lib.walls.wpj import WallsWpjFile

__all__ = [
    # Constants
    "BACKSIGHT_TOLERANCE_DEGREES",
    "FEET_TO_METERS",
    "JSON_ENCODING",
    "METERS_TO_FEET",
    # Base Models
    "Angle",
    # Enums
    "AngleUnit",
    "DisplayLatLongFormat",
    "FixDirective",
    "FormatIdentifier",
    "FrcsShot",
    "FrcsShotKind",
    # FRCS Models
    "FrcsSurveyFile",
    "FrcsTrip",
    "FrcsTripHeader",
    "FrcsTripSummary",
    "FrcsTripSummaryFile",
    "Georeference",
    # Conversion
    "InputCave",
    "Length",
    "LengthUnit",
    "Lruds",
    "LrudStyle",
    # Errors
    "ShotLocation",
    "TapingMethod",
    "WallsConversionError",
    # Walls Models
    "WallsProjectBook",
    "WallsProjectSurvey",
    "WallsShot",
    "WallsSrvFile",
    "WallsWpjFile",
    "convert_cave",
    "convert_shot",
    "convert_to_walls",
    "convert_trip",
    "format_team",
]
