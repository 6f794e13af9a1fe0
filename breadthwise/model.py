"""Input documents and settings models."""

from __future__ import annotations

import re
from typing import Annotated, Any

from pydantic import AfterValidator, BaseModel, Field, field_validator

_INT_TEXT = re.compile(r"-?[0-9]+")


def coerce_vertex(value: Any) -> Any:
    """Read integer-looking text as an int, so ``"1"`` and ``1`` name one vertex.

    The CLI receives every vertex as text, so documents go through the same rule.
    """
    if isinstance(value, str) and _INT_TEXT.fullmatch(value.strip()):
        return int(value)
    return value


VertexId = Annotated[int | str, AfterValidator(coerce_vertex)]


class GraphDocument(BaseModel):
    directed: bool = False
    vertices: list[VertexId] = Field(default_factory=list)
    edges: list[tuple[VertexId, VertexId]] = Field(default_factory=list)


class InputDocument(BaseModel):
    """Top-level YAML document consumed by the CLI."""

    graph: GraphDocument | None = None
    grid: list[list[int]] | None = None

    @field_validator("grid")
    @classmethod
    def _rectangular(cls, value: list[list[int]] | None) -> list[list[int]] | None:
        if value and len({len(row) for row in value}) > 1:
            raise ValueError("grid rows must all have the same length")
        return value


class RenderSettings(BaseModel):
    separator: str = " -> "
    no_path: str = "No path found"
    open_cell: str = "."
    blocked_cell: str = "#"
    path_cell: str = "*"


class BreadthwiseConfig(BaseModel):
    render: RenderSettings = Field(default_factory=RenderSettings)
