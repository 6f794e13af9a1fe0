"""Input loader — YAML documents into Graph and Grid objects."""

from __future__ import annotations

from pathlib import Path
from typing import Any, TypeVar

import yaml
from pydantic import BaseModel, ValidationError

from breadthwise.graph import Graph
from breadthwise.grid import Grid
from breadthwise.logger import logger
from breadthwise.model import GraphDocument, InputDocument

M = TypeVar("M", bound=BaseModel)


class InputError(ValueError):
    """Raised when a YAML file cannot be read, parsed or validated."""


def read_mapping(path: Path) -> dict[str, Any] | None:
    """Parse *path* as YAML. None for an empty file, InputError unless a mapping."""
    try:
        text = Path(path).read_text(encoding="utf-8")
    except OSError as e:
        raise InputError(f"Cannot read {path}: {e}") from e

    try:
        raw = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise InputError(f"Malformed YAML in {path}: {e}") from e

    if raw is None:
        return None
    if not isinstance(raw, dict):
        raise InputError(f"{path} is not a YAML mapping")
    return raw


def validate(model: type[M], raw: dict[str, Any], path: Path) -> M:
    try:
        return model.model_validate(raw)
    except ValidationError as e:
        raise InputError(f"Invalid {model.__name__} in {path}: {e}") from e


def load_document(path: Path) -> InputDocument:
    raw = read_mapping(path)
    if raw is None:
        raise InputError(f"Input file {path} is empty")
    doc = validate(InputDocument, raw, path)
    logger.debug(
        "Loaded %s (graph=%s, grid=%s)", path, doc.graph is not None, doc.grid is not None
    )
    return doc


def build_graph(doc: GraphDocument) -> Graph:
    """Build a Graph, isolated vertices first, then edges in document order."""
    return Graph.from_edges(doc.edges, directed=doc.directed, vertices=doc.vertices)


def load_graph(path: Path) -> Graph:
    doc = load_document(path)
    if doc.graph is None:
        raise InputError(f"Input file {path} has no 'graph' section")
    return build_graph(doc.graph)


def load_grid(path: Path) -> Grid:
    doc = load_document(path)
    if doc.grid is None:
        raise InputError(f"Input file {path} has no 'grid' section")
    return Grid(doc.grid)
