# -*- coding: utf-8 -*-
"""Conversion of FRCS survey data into a Walls project tree.

The conversion walks the FRCS data top-down:

- ``convert_to_walls``: a project, made of one or several caves
- ``convert_cave``: one cave, becomes a project book
- ``convert_trip``: one trip, becomes a survey of that book
- ``convert_shot``: one shot, becomes zero or more survey records

Within a trip the shots are converted in order, each call receiving the
taping method left by the previous shot, so that a ``#UNITS TAPE=``
directive is only emitted when the taping method actually changes.

Example:
    project = convert_to_walls(
        "Fisher Ridge",
        [InputCave(subdir="fr", survey=survey, summaries=summaries)],
        name="FRCS",
    )
"""

from __future__ import annotations

import logging
from collections import Counter
from typing import TYPE_CHECKING

from pydantic import BaseModel
from pydantic import ConfigDict

from frcs_walls_lib.constants import BACKSIGHT_TOLERANCE_DEGREES
from frcs_walls_lib.constants import DEFAULT_AZIMUTH_DEGREES
from frcs_walls_lib.constants import FIXED_STATIONS_NAME
from frcs_walls_lib.constants import FIXED_STATIONS_TITLE
from frcs_walls_lib.constants import LEVEL_INCLINATION_DEGREES
from frcs_walls_lib.constants import NAME_PREFIX_OPTION
from frcs_walls_lib.constants import TEAM_SEPARATOR
from frcs_walls_lib.constants import TEAM_SEPARATOR_WITH_COMMAS
from frcs_walls_lib.constants import VERTICAL_INCLINATION_DEGREES
from frcs_walls_lib.enums import AngleUnit
from frcs_walls_lib.enums import FrcsShotKind
from frcs_walls_lib.enums import LengthUnit
from frcs_walls_lib.enums import LrudStyle
from frcs_walls_lib.enums import TapingMethod
from frcs_walls_lib.errors import ShotLocation
from frcs_walls_lib.errors import WallsConversionError
from frcs_walls_lib.frcs.models import FrcsSurveyFile  # noqa: TC001
from frcs_walls_lib.frcs.models import FrcsTripSummaryFile  # noqa: TC001
from frcs_walls_lib.models import Angle
from frcs_walls_lib.models import Georeference  # noqa: TC001
from frcs_walls_lib.walls.srv import BacksightAzimuthTypeOption
from frcs_walls_lib.walls.srv import BacksightInclinationTypeOption
from frcs_walls_lib.walls.srv import CommentLine
from frcs_walls_lib.walls.srv import DateDirective
from frcs_walls_lib.walls.srv import DistanceUnitOption
from frcs_walls_lib.walls.srv import FixDirective  # noqa: TC001
from frcs_walls_lib.walls.srv import FrontsightAzimuthUnitOption
from frcs_walls_lib.walls.srv import FrontsightInclinationUnitOption
from frcs_walls_lib.walls.srv import LrudStyleOption
from frcs_walls_lib.walls.srv import StationLruds
from frcs_walls_lib.walls.srv import TapingMethodOption
from frcs_walls_lib.walls.srv import UnitsDirective
from frcs_walls_lib.walls.srv import WallsShot
from frcs_walls_lib.walls.srv import WallsSrvFile
from frcs_walls_lib.walls.wpj import WallsProjectBook
from frcs_walls_lib.walls.wpj import WallsProjectSurvey
from frcs_walls_lib.walls.wpj import WallsWpjFile

if TYPE_CHECKING:
    from collections.abc import Sequence

    from frcs_walls_lib.frcs.models import FrcsShot
    from frcs_walls_lib.frcs.models import FrcsTrip
    from frcs_walls_lib.frcs.models import FrcsTripHeader
    from frcs_walls_lib.frcs.models import FrcsTripSummary
    from frcs_walls_lib.walls.srv import SrvLine
    from frcs_walls_lib.walls.srv import UnitsOption

logger = logging.getLogger(__name__)


class InputCave(BaseModel):
    """One cave of a project, as handed to the converter.

    Attributes:
        subdir: Directory of the cave's survey files, also its name prefix
            when several caves share a project
        name_prefix: Explicit survey name prefix, overriding the default
        survey: The cave's parsed FRCS survey file
        summaries: Trip summaries, index-aligned with ``survey.trips``
        fixed_stations: Fixed station records, copied as-is
        georeference: Coordinate system of the cave
    """

    model_config = ConfigDict(populate_by_name=True)

    subdir: str
    name_prefix: str | None = None
    survey: FrcsSurveyFile
    summaries: FrcsTripSummaryFile | None = None
    fixed_stations: list[FixDirective] | None = None
    georeference: Georeference | None = None


def convert_to_walls(
    title: str,
    caves: Sequence[InputCave],
    name: str | None = None,
) -> WallsWpjFile:
    """Convert one or more FRCS caves into a Walls project.

    A single cave becomes the root book itself. Several caves (or none)
    are grouped under a new root book, each cave prefixing its station
    and survey names with its ``subdir``.

    Args:
        title: Project title
        caves: Caves to convert, in display order
        name: Optional project short name

    Returns:
        The Walls project

    Raises:
        WallsConversionError: If a shot cannot be converted
    """
    if len(caves) == 1:
        logger.info("Converting single cave project %r", title)
        root = convert_cave(caves[0])
        root.title = title
        root.name = name
        return WallsWpjFile(root=root)

    logger.info("Converting %d caves into project %r", len(caves), title)
    root = WallsProjectBook(
        title=title,
        name=name,
        review_distance_unit=LengthUnit.FEET,
    )
    for cave in caves:
        root.children.append(convert_cave(cave, multicave=True))
    return WallsWpjFile(root=root)


def convert_cave(cave: InputCave, *, multicave: bool = False) -> WallsProjectBook:
    """Convert one cave into a Walls project book.

    Args:
        cave: The cave to convert
        multicave: The cave shares its project with other caves

    Returns:
        A book holding the fixed stations survey (if any) then one survey
        per trip, in trip order
    """
    name_prefix = cave.name_prefix
    if name_prefix is None:
        name_prefix = cave.subdir if multicave else ""

    book = WallsProjectBook(
        title=cave.survey.cave or cave.subdir,
        path=cave.subdir,
        options=NAME_PREFIX_OPTION.format(prefix=cave.subdir) if multicave else None,
        review_distance_unit=LengthUnit.FEET,
        georeference=cave.georeference,
    )

    if cave.fixed_stations is not None:
        book.children.append(
            WallsProjectSurvey(
                title=FIXED_STATIONS_TITLE,
                name=f"{name_prefix}{FIXED_STATIONS_NAME}",
                content=WallsSrvFile(lines=list(cave.fixed_stations)),
            )
        )

    for trip_index, trip in enumerate(cave.survey.trips):
        if trip is None:
            logger.debug("%s: no trip at index %d", cave.subdir, trip_index)
            continue
        summary = cave.summaries.get(trip_index) if cave.summaries else None
        book.children.append(
            convert_trip(trip_index, trip, summary=summary, name_prefix=name_prefix)
        )

    duplicates = [
        survey_name
        for survey_name, count in Counter(book.survey_names).items()
        if count > 1
    ]
    if duplicates:
        logger.warning(
            "%s: duplicate survey names %s", cave.subdir, ", ".join(duplicates)
        )

    logger.info("Converted cave %r: %d surveys", book.title, len(book.children))
    return book


def format_team(team: Sequence[str]) -> str:
    """Join team members, using ``; `` if a member name contains a comma."""
    if any("," in member for member in team):
        return TEAM_SEPARATOR_WITH_COMMAS.join(team)
    return TEAM_SEPARATOR.join(team)


def _backsight_tolerance() -> Angle:
    return Angle.degrees(BACKSIGHT_TOLERANCE_DEGREES)


def _baseline_units_options(
    header: FrcsTripHeader,
    distance_unit: LengthUnit,
) -> list[UnitsOption]:
    options: list[UnitsOption] = [
        DistanceUnitOption(unit=distance_unit),
        FrontsightAzimuthUnitOption(unit=header.azimuth_unit),
        FrontsightInclinationUnitOption(unit=header.inclination_unit),
        LrudStyleOption(style=LrudStyle.TO_STATION_BISECTOR),
    ]
    if header.has_backsight_azimuth:
        options.append(
            BacksightAzimuthTypeOption(
                corrected=header.backsight_azimuth_corrected,
                tolerance=_backsight_tolerance(),
                do_not_average=False,
            )
        )
    if header.has_backsight_inclination:
        options.append(
            BacksightInclinationTypeOption(
                corrected=header.backsight_inclination_corrected,
                tolerance=_backsight_tolerance(),
                do_not_average=False,
            )
        )
    return options


def convert_trip(
    trip_index: int,
    trip: FrcsTrip,
    summary: FrcsTripSummary | None = None,
    name_prefix: str = "",
) -> WallsProjectSurvey:
    """Convert one FRCS trip into a Walls survey.

    The trip number, team and date of the summary (when there is one)
    take precedence over the trip's own header, except for a non-empty
    header team.

    Args:
        trip_index: Position of the trip in the survey file (0-based)
        trip: The trip to convert
        summary: The trip's summary, if any
        name_prefix: Prefix of the survey's short name

    Returns:
        The survey, named ``<name_prefix><trip number>``

    Raises:
        WallsConversionError: If a shot cannot be converted
    """
    header = trip.header
    trip_number = summary.trip_number if summary is not None else trip_index + 1
    team = header.team or (summary.team if summary is not None else None)
    date = (summary.date if summary is not None else None) or header.date

    distance_unit = header.distance_unit
    if distance_unit == LengthUnit.INCHES:
        # inches is really a mis-tagged feet reading
        logger.debug("Trip %d: distance unit inches read as feet", trip_number)
        distance_unit = LengthUnit.FEET

    title = f"{trip_number} {header.name}"
    lines: list[SrvLine] = [CommentLine(comment=title)]
    if team:
        lines.append(CommentLine(comment=format_team(team)))
    if date:
        lines.append(DateDirective(date=date))
    lines.append(UnitsDirective(options=_baseline_units_options(header, distance_unit)))

    taping_method = TapingMethod.INSTRUMENT_TO_TARGET
    for shot_index, shot in enumerate(trip.shots):
        location = ShotLocation(
            trip_number=trip_number,
            trip_name=header.name,
            shot_index=shot_index,
            from_station=shot.from_station,
            to_station=shot.to_station,
        )
        shot_lines, taping_method = convert_shot(
            shot, taping_method, location=location
        )
        lines.extend(shot_lines)

    return WallsProjectSurvey(
        title=title,
        name=f"{name_prefix}{trip_number}",
        content=WallsSrvFile(lines=lines),
        name_defines_segment=True,
        review_distance_unit=LengthUnit.FEET,
    )


def _is_inclined(inclination: Angle | None) -> bool:
    """True if an inclination was recorded and is not plumb."""
    return (
        inclination is not None
        and inclination.abs().get(AngleUnit.DEGREES) != VERTICAL_INCLINATION_DEGREES
    )


def _taping_method(kind: FrcsShotKind) -> TapingMethod:
    if kind == FrcsShotKind.DIAGONAL:
        return TapingMethod.INSTRUMENT_TO_STATION
    return TapingMethod.INSTRUMENT_TO_TARGET


def convert_shot(
    shot: FrcsShot,
    last_taping_method: TapingMethod = TapingMethod.INSTRUMENT_TO_TARGET,
    *,
    location: ShotLocation | None = None,
) -> tuple[list[SrvLine], TapingMethod]:
    """Convert one FRCS shot into Walls survey records.

    Args:
        shot: The shot to convert
        last_taping_method: Taping method in effect before this shot
        location: Position of the shot, for error messages

    Returns:
        The records to append (possibly none) and the taping method in
        effect after this shot

    Raises:
        WallsConversionError: If a horizontal shot has no horizontal distance
    """
    lines: list[SrvLine] = []

    frontsight_azimuth = shot.frontsight_azimuth
    if (
        frontsight_azimuth is None
        and shot.backsight_azimuth is None
        and (
            _is_inclined(shot.frontsight_inclination)
            or _is_inclined(shot.backsight_inclination)
        )
    ):
        frontsight_azimuth = Angle.degrees(DEFAULT_AZIMUTH_DEGREES)

    distance = shot.distance
    if shot.kind == FrcsShotKind.HORIZONTAL:
        if shot.horizontal_distance is None:
            raise WallsConversionError(
                "horizontal_distance must be provided when kind is horizontal",
                location,
            )
        distance = shot.horizontal_distance

    taping_method = _taping_method(shot.kind)
    if taping_method != last_taping_method:
        logger.debug(
            "Taping method %s -> %s %s",
            last_taping_method.value,
            taping_method.value,
            location or "",
        )
        lines.append(UnitsDirective(options=[TapingMethodOption(method=taping_method)]))

    if shot.from_station and shot.from_lruds is not None:
        lines.append(StationLruds(station=shot.from_station, lruds=shot.from_lruds))

    if not (shot.from_station and shot.to_station):
        return lines, taping_method

    if shot.backsight_azimuth is not None:
        azimuth = (frontsight_azimuth, shot.backsight_azimuth)
    else:
        azimuth = frontsight_azimuth

    target_height = None
    if shot.kind == FrcsShotKind.NORMAL:
        if shot.backsight_inclination is not None:
            inclination = (shot.frontsight_inclination, shot.backsight_inclination)
        else:
            inclination = shot.frontsight_inclination
    else:
        # the vertical offset goes in the target height
        inclination = Angle.degrees(LEVEL_INCLINATION_DEGREES)
        if shot.vertical_distance is not None:
            target_height = shot.vertical_distance.negate()

    comment = shot.comment
    if comment and "\n" in comment:
        lines.append(CommentLine(comment=comment))
        comment = None

    lines.append(
        WallsShot(
            from_station=shot.from_station,
            to_station=shot.to_station,
            distance=distance,
            azimuth=azimuth,
            inclination=inclination,
            lruds=shot.to_lruds,
            target_height=target_height,
            comment=comment,
        )
    )
    return lines, taping_method
