# -*- coding: utf-8 -*-
"""Walls module: models for .SRV survey records and .WPJ project trees."""

from frcs_walls_lib.walls.srv import BacksightAzimuthTypeOption
from frcs_walls_lib.walls.srv import BacksightInclinationTypeOption
from frcs_walls_lib.walls.srv import CommentLine
from frcs_walls_lib.walls.srv import DateDirective
from frcs_walls_lib.walls.srv import DistanceUnitOption
from frcs_walls_lib.walls.srv import FixDirective
from frcs_walls_lib.walls.srv import FrontsightAzimuthUnitOption
from frcs_walls_lib.walls.srv import FrontsightInclinationUnitOption
from frcs_walls_lib.walls.srv import LrudStyleOption
from frcs_walls_lib.walls.srv import SrvLine
from frcs_walls_lib.walls.srv import StationLruds
from frcs_walls_lib.walls.srv import TapingMethodOption
from frcs_walls_lib.walls.srv import UnitsDirective
from frcs_walls_lib.walls.srv import UnitsOption
from frcs_walls_lib.walls.srv import WallsShot
from frcs_walls_lib.walls.srv import WallsSrvFile
from frcs_walls_lib.walls.wpj import WallsProjectBook
from frcs_walls_lib.walls.wpj import WallsProjectNode
from frcs_walls_lib.walls.wpj import WallsProjectSurvey
from frcs_walls_lib.walls.wpj import WallsWpjFile

__all__ = [
    "BacksightAzimuthTypeOption",
    "BacksightInclinationTypeOption",
    "CommentLine",
    "DateDirective",
    "DistanceUnitOption",
    "FixDirective",
    "FrontsightAzimuthUnitOption",
    "FrontsightInclinationUnitOption",
    "LrudStyleOption",
    "SrvLine",
    "StationLruds",
    "TapingMethodOption",
    "UnitsDirective",
    "UnitsOption",
    "WallsProjectBook",
    "WallsProjectNode",
    "WallsProjectSurvey",
    "WallsShot",
    "WallsSrvFile",
    "WallsWpjFile",
]
