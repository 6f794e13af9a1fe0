"""Render settings — optional breadthwise.yml."""

from __future__ import annotations

from typing import TYPE_CHECKING

from breadthwise.loader import InputError, read_mapping, validate
from breadthwise.logger import logger
from breadthwise.model import BreadthwiseConfig

if TYPE_CHECKING:
    from pathlib import Path


def load_config(path: Path | None = None) -> BreadthwiseConfig:
    """Settings from *path*, or defaults.

    A settings file only changes how results are printed, so any problem with
    it is logged and the defaults are used instead of failing the command.
    """
    if path is None:
        return BreadthwiseConfig()
    try:
        raw = read_mapping(path)
        if raw is None:
            logger.debug("Settings file %s is empty", path)
            return BreadthwiseConfig()
        return validate(BreadthwiseConfig, raw, path)
    except InputError as e:
        logger.warning("%s; using default settings", e)
        return BreadthwiseConfig()
