# SPDX-License-Identifier: Apache-2.0
# This file was created or modified with the assistance of an AI (Large Language Model).
"""Weathermap configuration loading."""

from __future__ import annotations

import logging
import os
from pathlib import Path

import yaml

from models import WeathermapConfig

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path(__file__).with_name("config.default.yaml")
CONFIG_FILENAME = "config.yaml"


def parse_config(raw: str) -> WeathermapConfig:
    """Parse YAML (or JSON) text into a validated config."""
    return WeathermapConfig.model_validate(yaml.safe_load(raw))


def resolve_config_path(path: str | os.PathLike[str] | None = None) -> Path:
    if path:
        return Path(path)
    return Path(os.environ.get("WEATHERMAP_CONFIG") or CONFIG_FILENAME)


def load_config(path: str | os.PathLike[str] | None = None) -> WeathermapConfig:
    config_path = resolve_config_path(path)
    try:
        raw = config_path.read_text(encoding="utf-8")
    except FileNotFoundError:
        logger.warning("%s not found, using %s", config_path, DEFAULT_CONFIG_PATH.name)
        raw = DEFAULT_CONFIG_PATH.read_text(encoding="utf-8")
    return parse_config(raw)
