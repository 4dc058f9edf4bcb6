# -*- coding: utf-8 -*-
"""Core data models shared by the FRCS and Walls models.

This module contains the base Pydantic models used across the input
survey models, the output project models and the conversion engine:
unit-tagged quantities, LRUD clearances and georeference metadata.
"""

from __future__ import annotations

from typing import Annotated

from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field
from pydantic import field_validator
from pydantic_extra_types.coordinate import Latitude  # noqa: TC002
from pydantic_extra_types.coordinate import Longitude  # noqa: TC002

from frcs_walls_lib.enums import AngleUnit
from frcs_walls_lib.enums import DisplayLatLongFormat
from frcs_walls_lib.enums import LengthUnit


class Length(BaseModel):
    """A distance measurement tagged with its unit.

    Attributes:
        value: Numeric value, expressed in ``unit``
        unit: The length unit of ``value``
    """

    model_config = ConfigDict(frozen=True)

    value: float
    unit: LengthUnit = LengthUnit.FEET

    @classmethod
    def feet(cls, value: float) -> Length:
        return cls(value=value, unit=LengthUnit.FEET)

    @classmethod
    def meters(cls, value: float) -> Length:
        return cls(value=value, unit=LengthUnit.METERS)

    @classmethod
    def inches(cls, value: float) -> Length:
        return cls(value=value, unit=LengthUnit.INCHES)

    def get(self, unit: LengthUnit) -> float:
        """Return the value of this length expressed in ``unit``."""
        if unit == self.unit:
            return self.value
        return unit.from_meters(self.unit.to_meters(self.value))

    def abs(self) -> Length:
        return Length(value=abs(self.value), unit=self.unit)

    def negate(self) -> Length:
        return Length(value=-self.value, unit=self.unit)

    def __neg__(self) -> Length:
        return self.negate()

    def __str__(self) -> str:
        return f"{self.value:g} {self.unit.name.lower()}"


class Angle(BaseModel):
    """An azimuth or inclination measurement tagged with its unit.

    Attributes:
        value: Numeric value, expressed in ``unit``
        unit: The angle unit of ``value``
    """

    model_config = ConfigDict(frozen=True)

    value: float
    unit: AngleUnit = AngleUnit.DEGREES

    @classmethod
    def degrees(cls, value: float) -> Angle:
        return cls(value=value, unit=AngleUnit.DEGREES)

    @classmethod
    def gradians(cls, value: float) -> Angle:
        return cls(value=value, unit=AngleUnit.GRADIANS)

    @classmethod
    def mils(cls, value: float) -> Angle:
        return cls(value=value, unit=AngleUnit.MILS)

    @classmethod
    def percent_grade(cls, value: float) -> Angle:
        return cls(value=value, unit=AngleUnit.PERCENT_GRADE)

    def get(self, unit: AngleUnit) -> float:
        """Return the value of this angle expressed in ``unit``."""
        if unit == self.unit:
            return self.value
        return unit.from_degrees(self.unit.to_degrees(self.value))

    def abs(self) -> Angle:
        return Angle(value=abs(self.value), unit=self.unit)

    def negate(self) -> Angle:
        return Angle(value=-self.value, unit=self.unit)

    def __neg__(self) -> Angle:
        return self.negate()

    def __str__(self) -> str:
        return f"{self.value:g} {self.unit.name.lower()}"


class Lruds(BaseModel):
    """Left/right/up/down clearances measured at a station.

    A component set to ``None`` means the clearance was not recorded.
    """

    model_config = ConfigDict(frozen=True)

    left: Length | None = None
    right: Length | None = None
    up: Length | None = None
    down: Length | None = None

    def as_tuple(
        self,
    ) -> tuple[Length | None, Length | None, Length | None, Length | None]:
        """Return the clearances in left, right, up, down order."""
        return (self.left, self.right, self.up, self.down)


class Georeference(BaseModel):
    """Coordinate system metadata attached to a Walls project book."""

    display_lat_long_format: DisplayLatLongFormat = DisplayLatLongFormat.DEGREES

    utm_zone: Annotated[
        int,
        Field(
            ge=-60,
            le=60,
            description="UTM zone number (1-60 north, -1 to -60 south, 0 not allowed)",
        ),
    ]

    utm_northing: Length
    utm_easting: Length
    utm_convergence_angle: Angle = Field(default_factory=lambda: Angle.degrees(0))
    elevation: Length = Field(default_factory=lambda: Length.meters(0))

    latitude: Latitude
    longitude: Longitude

    walls_datum_index: Annotated[
        int,
        Field(ge=0, description="Index of the datum in the Walls datum table"),
    ]

    datum: Annotated[str, Field(min_length=1, description="Walls datum name")]

    @field_validator("utm_zone")
    @classmethod
    def validate_zone(cls, v: int) -> int:
        """Validate UTM zone number.

        Args:
            v: Zone number

        Returns:
            Validated zone number

        Raises:
            ValueError: If zone is 0
        """
        if v == 0:
            raise ValueError(
                "UTM zone cannot be 0. Use 1-60 for north, -1 to -60 for south."
            )
        return v

    @property
    def is_northern_hemisphere(self) -> bool:
        return self.utm_zone > 0
