# -*- coding: utf-8 -*-
"""Record models for Walls .SRV survey files.

Uses Pydantic discriminated unions for polymorphic record handling, both
for the lines of a survey file and for the options of a ``#UNITS``
directive. Rendering the records as .SRV text is left to the writer.
"""

from __future__ import annotations

import datetime  # noqa: TC003
from typing import Annotated
from typing import Any
from typing import Literal

from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Discriminator
from pydantic import Field
from pydantic import Tag
from pydantic import field_validator

from frcs_walls_lib.enums import AngleUnit
from frcs_walls_lib.enums import LengthUnit
from frcs_walls_lib.enums import LrudStyle
from frcs_walls_lib.enums import TapingMethod
from frcs_walls_lib.models import Angle
from frcs_walls_lib.models import Length  # noqa: TC001
from frcs_walls_lib.models import Lruds  # noqa: TC001

#: A single sight, or a (frontsight, backsight) pair
AngleReading = Angle | tuple[Angle | None, Angle | None] | None


def _get_type(v: Any) -> str:
    """Extract the discriminator value of a record or units option.

    Handles both dict input (from JSON) and already-instantiated models.
    """
    if isinstance(v, dict):
        return v.get("type", "")
    return getattr(v, "type", "")


# --- Units Options ---


class DistanceUnitOption(BaseModel):
    """Working unit of distances (``Feet`` / ``Meters``)."""

    type: Literal["distance_unit"] = "distance_unit"
    unit: LengthUnit

    @field_validator("unit")
    @classmethod
    def validate_unit(cls, v: LengthUnit) -> LengthUnit:
        if v == LengthUnit.INCHES:
            raise ValueError("Walls does not accept inches as a distance unit")
        return v


class FrontsightAzimuthUnitOption(BaseModel):
    """Unit of frontsight azimuths (``A=``)."""

    type: Literal["frontsight_azimuth_unit"] = "frontsight_azimuth_unit"
    unit: AngleUnit

    @field_validator("unit")
    @classmethod
    def validate_unit(cls, v: AngleUnit) -> AngleUnit:
        if v == AngleUnit.PERCENT_GRADE:
            raise ValueError("azimuths cannot be expressed in percent grade")
        return v


class FrontsightInclinationUnitOption(BaseModel):
    """Unit of frontsight inclinations (``V=``)."""

    type: Literal["frontsight_inclination_unit"] = "frontsight_inclination_unit"
    unit: AngleUnit


class LrudStyleOption(BaseModel):
    """Orientation of LRUD clearances (``LRUD=``)."""

    type: Literal["lrud_style"] = "lrud_style"
    style: LrudStyle


class BacksightAzimuthTypeOption(BaseModel):
    """Backsight azimuth handling (``TYPEAB=``).

    Attributes:
        corrected: Backsights are already reduced to the frontsight direction
        tolerance: Allowed frontsight/backsight disagreement
        do_not_average: Keep the frontsight instead of averaging both sights
    """

    type: Literal["backsight_azimuth_type"] = "backsight_azimuth_type"
    corrected: bool
    tolerance: Angle | None = None
    do_not_average: bool = False


class BacksightInclinationTypeOption(BaseModel):
    """Backsight inclination handling (``TYPEVB=``).

    Attributes:
        corrected: Backsights are already reduced to the frontsight direction
        tolerance: Allowed frontsight/backsight disagreement
        do_not_average: Keep the frontsight instead of averaging both sights
    """

    type: Literal["backsight_inclination_type"] = "backsight_inclination_type"
    corrected: bool
    tolerance: Angle | None = None
    do_not_average: bool = False


class TapingMethodOption(BaseModel):
    """Taping convention of the following shots (``TAPE=``)."""

    type: Literal["taping_method"] = "taping_method"
    method: TapingMethod


UnitsOption = Annotated[
    Annotated[DistanceUnitOption, Tag("distance_unit")]
    | Annotated[FrontsightAzimuthUnitOption, Tag("frontsight_azimuth_unit")]
    | Annotated[FrontsightInclinationUnitOption, Tag("frontsight_inclination_unit")]
    | Annotated[LrudStyleOption, Tag("lrud_style")]
    | Annotated[BacksightAzimuthTypeOption, Tag("backsight_azimuth_type")]
    | Annotated[BacksightInclinationTypeOption, Tag("backsight_inclination_type")]
    | Annotated[TapingMethodOption, Tag("taping_method")],
    Discriminator(_get_type),
]


# --- Survey Records ---


class CommentLine(BaseModel):
    """A comment; comments spanning several lines become a block comment."""

    type: Literal["comment"] = "comment"
    comment: str

    @property
    def is_block(self) -> bool:
        return "\n" in self.comment


class DateDirective(BaseModel):
    """Survey date directive (``#DATE``)."""

    type: Literal["date"] = "date"
    date: datetime.date


class UnitsDirective(BaseModel):
    """Units directive (``#UNITS``) carrying one or more options."""

    type: Literal["units"] = "units"
    options: list[UnitsOption] = Field(default_factory=list)

    def get_option(self, option_type: str) -> Any | None:
        """Return the first option with the given ``type`` tag, if any."""
        for option in self.options:
            if option.type == option_type:
                return option
        return None


class StationLruds(BaseModel):
    """LRUD clearances at a station, outside of any shot."""

    type: Literal["station_lruds"] = "station_lruds"
    station: str
    lruds: Lruds


class WallsShot(BaseModel):
    """A compass-and-tape shot between two stations.

    ``azimuth`` and ``inclination`` hold either the frontsight alone or a
    (frontsight, backsight) pair. ``target_height`` is measured from the
    target down to the TO station.
    """

    model_config = ConfigDict(populate_by_name=True)

    type: Literal["shot"] = "shot"
    from_station: str = Field(alias="from")
    to_station: str = Field(alias="to")
    distance: Length | None = None
    azimuth: AngleReading = None
    inclination: AngleReading = None
    lruds: Lruds | None = None
    target_height: Length | None = None
    comment: str | None = None

    @property
    def frontsight_azimuth(self) -> Angle | None:
        return _frontsight(self.azimuth)

    @property
    def backsight_azimuth(self) -> Angle | None:
        return _backsight(self.azimuth)

    @property
    def frontsight_inclination(self) -> Angle | None:
        return _frontsight(self.inclination)

    @property
    def backsight_inclination(self) -> Angle | None:
        return _backsight(self.inclination)


def _frontsight(reading: AngleReading) -> Angle | None:
    if isinstance(reading, tuple):
        return reading[0]
    return reading


def _backsight(reading: AngleReading) -> Angle | None:
    if isinstance(reading, tuple):
        return reading[1]
    return None


class FixDirective(BaseModel):
    """Fixed station directive (``#FIX``): absolute station coordinates."""

    type: Literal["fix"] = "fix"
    station: str
    easting: Length
    northing: Length
    elevation: Length
    comment: str | None = None


SrvLine = Annotated[
    Annotated[CommentLine, Tag("comment")]
    | Annotated[DateDirective, Tag("date")]
    | Annotated[UnitsDirective, Tag("units")]
    | Annotated[StationLruds, Tag("station_lruds")]
    | Annotated[WallsShot, Tag("shot")]
    | Annotated[FixDirective, Tag("fix")],
    Discriminator(_get_type),
]


class WallsSrvFile(BaseModel):
    """The ordered records of a Walls .SRV file."""

    lines: list[SrvLine] = Field(default_factory=list)

    @property
    def shots(self) -> list[WallsShot]:
        return [line for line in self.lines if isinstance(line, WallsShot)]

    @property
    def units_directives(self) -> list[UnitsDirective]:
        return [line for line in self.lines if isinstance(line, UnitsDirective)]
