# -*- coding: utf-8 -*-
"""Pytest configuration and fixtures.

This module provides shared builders and fixtures for FRCS survey data.
The Fisher Ridge fixtures mirror a real FRCS survey file and its trip
summary file, trimmed to the shots that exercise the conversion rules.
"""

from __future__ import annotations

import logging
from datetime import date
from pathlib import Path

import pytest

from frcs_walls_lib.enums import DisplayLatLongFormat
from frcs_walls_lib.enums import FrcsShotKind
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

logger = logging.getLogger(__name__)
logger.setLevel(logging.INFO)


# =============================================================================
# Path Constants
# =============================================================================

ARTIFACTS_DIR = Path(__file__).parent / "artifacts"


# =============================================================================
# Builders
# =============================================================================


def ft(value: float) -> Length:
    return Length.feet(value)


def deg(value: float) -> Angle:
    return Angle.degrees(value)


def lruds(
    left: float | None,
    right: float | None,
    up: float | None,
    down: float | None,
) -> Lruds:
    """Build LRUDs in feet; ``None`` marks a missing clearance."""
    return Lruds(
        left=None if left is None else ft(left),
        right=None if right is None else ft(right),
        up=None if up is None else ft(up),
        down=None if down is None else ft(down),
    )


def shot(
    from_station: str | None,
    to_station: str | None,
    distance: float | None = None,
    fs_azimuth: float | None = None,
    bs_azimuth: float | None = None,
    fs_inclination: float | None = None,
    bs_inclination: float | None = None,
    **kwargs,
) -> FrcsShot:
    """Build a shot with feet distances and degree angles."""
    return FrcsShot(
        from_station=from_station,
        to_station=to_station,
        distance=None if distance is None else ft(distance),
        frontsight_azimuth=None if fs_azimuth is None else deg(fs_azimuth),
        backsight_azimuth=None if bs_azimuth is None else deg(bs_azimuth),
        frontsight_inclination=None if fs_inclination is None else deg(fs_inclination),
        backsight_inclination=None if bs_inclination is None else deg(bs_inclination),
        **kwargs,
    )


def header(name: str = "TEST TRIP", **kwargs) -> FrcsTripHeader:
    return FrcsTripHeader(name=name, **kwargs)


# =============================================================================
# Fisher Ridge Survey
# =============================================================================


def _trip_1() -> FrcsTrip:
    return FrcsTrip(
        header=header(
            "ENTRANCE DROPS, JOE'S \"I LOVE MY WIFE TRAVERSE\", TRICKY TRAVERSE",
            team=["Peter Quick", "Keith Ortiz"],
            date=date(1981, 2, 15),
            has_backsight_azimuth=True,
            backsight_azimuth_corrected=True,
        ),
        shots=[
            shot(
                "AE20", "AE19", 9.3, 60, 60, -36,
                from_lruds=lruds(1, 3, 0, 2),
                to_lruds=lruds(2, 12, 0, 20),
                comment="AE20     0        0        0        Bug-can't put before",
            ),
            shot("AE19", "AE18", 24.5, 0, 0, -90, to_lruds=lruds(6, 10, 25, 0)),
            shot(
                "AE13", "AE12", 20.7, 236, 236, 34,
                to_lruds=lruds(3, 5, 4, 4),
                comment="SHORT CANYON AT THE BASE OF THE SECOND DROP",
            ),
            shot(
                "AE12", "AE11", 26.8, None, None, -90,
                to_lruds=lruds(None, 7, 20, 5),
                comment="Multiline\nComment\nTest",
            ),
        ],
    )


def _trip_2() -> FrcsTrip:
    return FrcsTrip(
        header=header(
            "TRICKY TRAVERSE AND THEN FIRST SURVEY IN UPPER CROWLWAY",
            distance_unit="I",
            has_backsight_azimuth=True,
        ),
        shots=[
            shot(
                "A1", "A2", 48.83, 292, 110, -42,
                from_lruds=lruds(2, 7, 3, 4.5),
                to_lruds=lruds(5, 10, 35, 5),
            ),
            shot("A3", "A4", 4.17, 0, 0, 90, to_lruds=lruds(3, 1, 10, 10)),
        ],
    )


def _trip_3() -> FrcsTrip:
    return FrcsTrip(
        header=header(
            "CONNECT UPPER HILTON TO FISHER AVE AND SURVEY IN PRESSURE PASSAGE.",
            has_backsight_azimuth=True,
            has_backsight_inclination=True,
        ),
        shots=[
            shot("J6", "ML$1", 50, 124, 303.5, 11, -11, to_lruds=lruds(12, 12, 35, 15)),
            shot("ML$3", "ML$4", 6, None, None, -90, 90, to_lruds=lruds(0, 4, 11, 1)),
        ],
    )


def _trip_5() -> FrcsTrip:
    return FrcsTrip(
        header=header(
            "DOUG'S DEMISE (50 FT DROP), CHRIS CROSS, CRAWL ABOVE DROP",
            has_backsight_azimuth=True,
            backsight_azimuth_corrected=True,
        ),
        shots=[
            shot(
                "B29", "B30", None, 320, 321,
                kind=FrcsShotKind.HORIZONTAL,
                horizontal_distance=ft(29.5),
                vertical_distance=ft(0.5),
                to_lruds=lruds(2, 3, 4, 2),
            ),
            shot("B30", "B30sp", 13.7, 0, 0, 40, to_lruds=lruds(2, 4, 6, None)),
            shot("B32", "B33", 0, None, None, -1, to_lruds=lruds(6, 7, 8, 9)),
        ],
    )


def _trip_6() -> FrcsTrip:
    return FrcsTrip(
        header=header(
            "CONTINUATION OF E SURVEY TO WEST ROOM",
            has_backsight_azimuth=True,
            backsight_azimuth_corrected=True,
        ),
        shots=[
            shot(
                "E36", "E37", 31.6, 231, 232,
                kind=FrcsShotKind.DIAGONAL,
                vertical_distance=ft(2),
            ),
            shot(
                "E37", "E38", 19.2, 258.5, 259,
                kind=FrcsShotKind.DIAGONAL,
                vertical_distance=ft(-1),
            ),
            shot("E38", "E39", 36.5, 227, 228, 0),
            shot("E39", "E40", 27, 0, 0, -90),
            shot(
                "E40", "E41", 18.5, 260, 261.5,
                kind=FrcsShotKind.DIAGONAL,
                vertical_distance=ft(2.2),
            ),
        ],
    )


def build_fisher_ridge_survey() -> FrcsSurveyFile:
    """Trips 1, 2, 3, 5 and 6; slot 4 is empty."""
    return FrcsSurveyFile(
        cave="Fisher Ridge Cave System",
        trips=[_trip_1(), _trip_2(), _trip_3(), None, _trip_5(), _trip_6()],
    )


def build_fisher_ridge_summaries() -> FrcsTripSummaryFile:
    return FrcsTripSummaryFile(
        trip_summaries=[
            FrcsTripSummary(
                trip_number=1,
                date=date(1981, 2, 15),
                team=["Peter Quick", "Keith Ortiz"],
            ),
            FrcsTripSummary(
                trip_number=2,
                date=date(1981, 2, 14),
                team=[
                    "Dan Crowl",
                    "Keith Ortiz",
                    "Chip Hopper",
                    "Peter Quick",
                    "Larry Bean",
                ],
            ),
            FrcsTripSummary(
                trip_number=3,
                date=date(1982, 5, 16),
                team=["J.SAUNDERS", "NANCY COLTER", "TOM JOHENGEN"],
            ),
            None,
            FrcsTripSummary(
                trip_number=5,
                date=date(1981, 3, 6),
                team=["PETER QUICK", "CHIP HOPPER"],
            ),
        ],
    )


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture
def artifacts_dir() -> Path:
    """Return path to test artifacts directory."""
    return ARTIFACTS_DIR


@pytest.fixture
def fisher_ridge_survey() -> FrcsSurveyFile:
    return build_fisher_ridge_survey()


@pytest.fixture
def fisher_ridge_summaries() -> FrcsTripSummaryFile:
    return build_fisher_ridge_summaries()


@pytest.fixture
def georeference() -> Georeference:
    return Georeference(
        display_lat_long_format=DisplayLatLongFormat.DEGREES,
        utm_zone=14,
        utm_northing=Length.meters(0),
        utm_easting=Length.meters(0),
        utm_convergence_angle=deg(0),
        elevation=Length.meters(0),
        latitude=0,
        longitude=0,
        walls_datum_index=0,
        datum="WGS1984",
    )


@pytest.fixture
def fixed_stations() -> list[FixDirective]:
    return [
        FixDirective(
            station="A20",
            easting=Length.meters(50),
            northing=Length.meters(40),
            elevation=Length.meters(80),
        )
    ]
