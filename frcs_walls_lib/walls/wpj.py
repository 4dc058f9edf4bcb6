# -*- coding: utf-8 -*-
"""Project tree models for Walls .WPJ project files.

A project is a tree of books (folders) and surveys (leaves). Each survey
carries the records of one .SRV file. Book children use a Pydantic
discriminated union, so a whole project can be serialized to JSON and
validated back:

    json_str = project.model_dump_json(indent=2)
    project = WallsWpjFile.model_validate_json(json_str)
"""

from __future__ import annotations

from typing import TYPE_CHECKING
from typing import Annotated
from typing import Any
from typing import Literal

from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Discriminator
from pydantic import Field
from pydantic import Tag

from frcs_walls_lib.constants import WPJ_JSON_VERSION
from frcs_walls_lib.enums import FormatIdentifier
from frcs_walls_lib.enums import LengthUnit  # noqa: TC001
from frcs_walls_lib.models import Georeference  # noqa: TC001
from frcs_walls_lib.walls.srv import WallsSrvFile

if TYPE_CHECKING:
    from collections.abc import Iterator


class WallsProjectSurvey(BaseModel):
    """A survey leaf of the project tree.

    Attributes:
        title: Display name of the survey
        name: Short name, used as the .SRV file name
        content: Records of the survey file
        name_defines_segment: The short name is also the station naming segment
        review_distance_unit: Distance unit used when reviewing the survey
    """

    model_config = ConfigDict(populate_by_name=True)

    type: Literal["survey"] = "survey"
    title: str
    name: str | None = None
    content: WallsSrvFile = Field(default_factory=WallsSrvFile)
    name_defines_segment: bool = False
    review_distance_unit: LengthUnit | None = None


def _get_node_type(v: Any) -> str:
    """Extract the discriminator value of a project tree node."""
    if isinstance(v, dict):
        return v.get("type", "")
    return getattr(v, "type", "")


class WallsProjectBook(BaseModel):
    """A book (folder) of the project tree.

    Attributes:
        title: Display name of the book
        name: Optional short name
        path: Directory holding the .SRV files of the book's surveys
        options: Free text options, e.g. ``PREFIX=fr``
        review_distance_unit: Distance unit used when reviewing the book
        georeference: Coordinate system of the book
        children: Nested books and surveys, in display order
    """

    model_config = ConfigDict(populate_by_name=True)

    type: Literal["book"] = "book"
    title: str
    name: str | None = None
    path: str | None = None
    options: str | None = None
    review_distance_unit: LengthUnit | None = None
    georeference: Georeference | None = None
    children: list[WallsProjectNode] = Field(default_factory=list)

    @property
    def surveys(self) -> list[WallsProjectSurvey]:
        return [c for c in self.children if isinstance(c, WallsProjectSurvey)]

    @property
    def books(self) -> list[WallsProjectBook]:
        return [c for c in self.children if isinstance(c, WallsProjectBook)]

    @property
    def survey_names(self) -> list[str | None]:
        return [survey.name for survey in self.surveys]

    def iter_surveys(self) -> Iterator[WallsProjectSurvey]:
        """Yield every survey below this book, depth first."""
        for child in self.children:
            if isinstance(child, WallsProjectBook):
                yield from child.iter_surveys()
            else:
                yield child

    def iter_books(self) -> Iterator[WallsProjectBook]:
        """Yield this book and every nested book, depth first."""
        yield self
        for book in self.books:
            yield from book.iter_books()


WallsProjectNode = Annotated[
    Annotated[WallsProjectBook, Tag("book")]
    | Annotated[WallsProjectSurvey, Tag("survey")],
    Discriminator(_get_node_type),
]

WallsProjectBook.model_rebuild()


class WallsWpjFile(BaseModel):
    """A Walls .WPJ project.

    Serialization is fully automatic via Pydantic:
        json_str = project.model_dump_json(indent=2)
        project = WallsWpjFile.model_validate_json(json_str)
    """

    model_config = ConfigDict(populate_by_name=True)

    # Wrapper format fields (for JSON compatibility)
    version: str = WPJ_JSON_VERSION
    format: str = Field(default=FormatIdentifier.WALLS_WPJ.value)
    root: WallsProjectBook

    @property
    def total_surveys(self) -> int:
        return sum(1 for _ in self.root.iter_surveys())

    @property
    def total_shots(self) -> int:
        return sum(len(s.content.shots) for s in self.root.iter_surveys())
