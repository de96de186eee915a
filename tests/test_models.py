# SPDX-License-Identifier: Apache-2.0
# This file was created or modified with the assistance of an AI (Large Language Model).
from __future__ import annotations

import json
from typing import Any

import pytest
from pydantic import ValidationError

from models import DEFAULT_COLORS, ConnectionData, RenderData, WeathermapConfig
from services.config import DEFAULT_CONFIG_PATH, load_config, parse_config


def test_config_defaults_to_builtin_colors(config_payload: dict[str, Any]) -> None:
    config = WeathermapConfig.model_validate(config_payload)
    assert config.colors is None
    assert config.color_bands() == DEFAULT_COLORS
    assert config.requires_librenms()
    assert config.devices[1].label_position == "bottom"


def test_rejects_duplicate_device_names(config_payload: dict[str, Any]) -> None:
    config_payload["devices"][1]["name"] = "rt1"
    with pytest.raises(ValueError, match="device names must be unique"):
        WeathermapConfig.model_validate(config_payload)


def test_rejects_unknown_speed_in_config(config_payload: dict[str, Any]) -> None:
    config_payload["devices"][0]["connections"][0]["speed"] = "25G"
    with pytest.raises(ValidationError):
        WeathermapConfig.model_validate(config_payload)


def test_rejects_empty_color_table(config_payload: dict[str, Any]) -> None:
    config_payload["colors"] = {}
    with pytest.raises(ValueError, match="at least one band"):
        WeathermapConfig.model_validate(config_payload)


def test_parse_config_accepts_json_with_string_thresholds(config_payload: dict[str, Any]) -> None:
    config_payload["colors"] = {"-1": "#999999", "0": "#000000", "1000000": "#0000ff"}
    config = parse_config(json.dumps(config_payload))
    assert config.color_bands() == {-1: "#999999", 0: "#000000", 1000000: "#0000ff"}


def test_render_data_is_immutable() -> None:
    data = RenderData(title="t", width=10, height=10)
    with pytest.raises(ValidationError):
        data.title = "changed"  # type: ignore[misc]
    link = ConnectionData(from_x=0, from_y=0, to_x=1, to_y=1, speed="unknown")
    assert link.outboundTraffic == -1
    assert link.inboundTraffic == -1


def test_load_config_reads_given_path(tmp_path, static_config_payload: dict[str, Any]) -> None:
    path = tmp_path / "weathermap.yaml"
    path.write_text(json.dumps(static_config_payload), encoding="utf-8")
    assert load_config(path).title == "Lab"


def test_load_config_uses_env_path(tmp_path, monkeypatch) -> None:
    path = tmp_path / "from-env.yaml"
    path.write_text("title: From Env\nwidth: 100\nheight: 100\n", encoding="utf-8")
    monkeypatch.setenv("WEATHERMAP_CONFIG", str(path))
    assert load_config().title == "From Env"


def test_load_config_falls_back_to_bundled_default(tmp_path, caplog) -> None:
    with caplog.at_level("WARNING"):
        config = load_config(tmp_path / "missing.yaml")
    assert config == parse_config(DEFAULT_CONFIG_PATH.read_text(encoding="utf-8"))
    assert not config.requires_librenms()
    assert "missing.yaml not found" in caplog.text


def test_load_config_propagates_yaml_errors(tmp_path) -> None:
    import yaml

    path = tmp_path / "bad.yaml"
    path.write_text("title: [unclosed\n", encoding="utf-8")
    with pytest.raises(yaml.YAMLError):
        load_config(path)
