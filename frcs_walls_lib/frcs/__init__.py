# -*- coding: utf-8 -*-
"""FRCS module: models for parsed FRCS survey and trip summary files."""

from frcs_walls_lib.frcs.models import FrcsShot
from frcs_walls_lib.frcs.models import FrcsSurveyFile
from frcs_walls_lib.frcs.models import FrcsTrip
from frcs_walls_lib.frcs.models import FrcsTripHeader
from frcs_walls_lib.frcs.models import FrcsTripSummary
from frcs_walls_lib.frcs.models import FrcsTripSummaryFile

__all__ = [
    "FrcsShot",
    "FrcsSurveyFile",
    "FrcsTrip",
    "FrcsTripHeader",
    "FrcsTripSummary",
    "FrcsTripSummaryFile",
]
