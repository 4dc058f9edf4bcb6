# -*- coding: utf-8 -*-
"""Error handling for FRCS to Walls conversion.

This module provides the exception raised when survey data cannot be
converted, together with the location of the offending shot so the
caller can report a helpful message.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ShotLocation:
    """Identifies a shot inside the FRCS survey being converted.

    Attributes:
        trip_number: Effective trip number (summary number or index + 1)
        trip_name: Name of the trip from its header
        shot_index: Position of the shot within the trip (0-based)
        from_station: FROM station name, if any
        to_station: TO station name, if any
    """

    trip_number: int
    trip_name: str
    shot_index: int
    from_station: str | None = None
    to_station: str | None = None

    def __str__(self) -> str:
        """Format as human-readable location string."""
        stations = f"{self.from_station or '?'} -> {self.to_station or '?'}"
        return (
            f"(in trip {self.trip_number} {self.trip_name!r}, "
            f"shot {self.shot_index + 1}, {stations})"
        )


class WallsConversionError(Exception):
    """Exception raised when a shot cannot be expressed in Walls.

    Attributes:
        message: Error message
        location: Shot where the error occurred
    """

    def __init__(self, message: str, location: ShotLocation | None = None):
        self.message = message
        self.location = location
        super().__init__(str(self))

    def __str__(self) -> str:
        """Format as human-readable exception string."""
        if self.location:
            return f"{self.message} {self.location}"
        return self.message
