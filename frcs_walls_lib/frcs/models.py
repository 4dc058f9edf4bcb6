# -*- coding: utf-8 -*-
"""Data models for parsed FRCS survey data.

This module contains Pydantic models for the output of an FRCS parser:
- FrcsShot: A single shot, possibly with only one station
- FrcsTripHeader: Metadata and units of a trip
- FrcsTrip: A trip with its header and ordered shots
- FrcsSurveyFile: A cave's survey file, a sparse list of trips
- FrcsTripSummary / FrcsTripSummaryFile: authoritative trip metadata

Measurements keep the units they were recorded in; the conversion engine
hands them to Walls without any arithmetic.
"""

from __future__ import annotations

import datetime  # noqa: TC003

from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field

from frcs_walls_lib.enums import AngleUnit
from frcs_walls_lib.enums import FrcsShotKind
from frcs_walls_lib.enums import LengthUnit
from frcs_walls_lib.models import Angle  # noqa: TC001
from frcs_walls_lib.models import Length  # noqa: TC001
from frcs_walls_lib.models import Lruds  # noqa: TC001


class FrcsShot(BaseModel):
    """A single FRCS shot.

    Either station may be missing: a shot without a TO station only
    records LRUDs (or a lone reading) at its FROM station.
    """

    model_config = ConfigDict(
        populate_by_name=True,
        extra="ignore",
    )

    kind: FrcsShotKind = FrcsShotKind.NORMAL
    from_station: str | None = Field(default=None, alias="from")
    to_station: str | None = Field(default=None, alias="to")
    distance: Length | None = None
    horizontal_distance: Length | None = None
    vertical_distance: Length | None = None
    frontsight_azimuth: Angle | None = None
    backsight_azimuth: Angle | None = None
    frontsight_inclination: Angle | None = None
    backsight_inclination: Angle | None = None
    from_lruds: Lruds | None = None
    to_lruds: Lruds | None = None
    comment: str | None = None

    # NOTE: a HORIZONTAL shot without horizontal_distance is accepted here.
    # It is rejected when the shot is converted.


class FrcsTripHeader(BaseModel):
    """Metadata and measurement settings for a trip."""

    model_config = ConfigDict(populate_by_name=True)

    name: str
    comment: str | None = None
    section: str | None = None
    team: list[str] | None = None
    date: datetime.date | None = None
    distance_unit: LengthUnit = LengthUnit.FEET
    azimuth_unit: AngleUnit = AngleUnit.DEGREES
    inclination_unit: AngleUnit = AngleUnit.DEGREES
    has_backsight_azimuth: bool = False
    has_backsight_inclination: bool = False
    backsight_azimuth_corrected: bool = False
    backsight_inclination_corrected: bool = False


class FrcsTrip(BaseModel):
    """A survey trip with header and shots."""

    model_config = ConfigDict(populate_by_name=True)

    header: FrcsTripHeader
    shots: list[FrcsShot] = Field(default_factory=list)


class FrcsSurveyFile(BaseModel):
    """An FRCS survey file.

    ``trips`` is sparse: a ``None`` slot stands for a trip number that has
    no data, and later trips keep their position.
    """

    model_config = ConfigDict(populate_by_name=True)

    cave: str | None = None
    trips: list[FrcsTrip | None] = Field(default_factory=list)

    @property
    def total_shots(self) -> int:
        return sum(len(trip.shots) for trip in self.trips if trip is not None)

    def get_all_stations(self) -> set[str]:
        stations: set[str] = set()
        for trip in self.trips:
            if trip is None:
                continue
            for shot in trip.shots:
                if shot.from_station:
                    stations.add(shot.from_station)
                if shot.to_station:
                    stations.add(shot.to_station)
        return stations


class FrcsTripSummary(BaseModel):
    """Authoritative number, date and team of a trip."""

    model_config = ConfigDict(populate_by_name=True)

    trip_number: int
    name: str | None = None
    date: datetime.date | None = None
    team: list[str] = Field(default_factory=list)


class FrcsTripSummaryFile(BaseModel):
    """Trip summaries, index-aligned with ``FrcsSurveyFile.trips``."""

    model_config = ConfigDict(populate_by_name=True)

    trip_summaries: list[FrcsTripSummary | None] = Field(default_factory=list)

    def get(self, trip_index: int) -> FrcsTripSummary | None:
        """Return the summary for a trip index, or None if there is none."""
        if 0 <= trip_index < len(self.trip_summaries):
            return self.trip_summaries[trip_index]
        return None
