# SPDX-License-Identifier: Apache-2.0
# This file was created or modified with the assistance of an AI (Large Language Model).
from __future__ import annotations

import json
import os
from typing import Any

import pytest

from cli import build_parser, main


def test_parser_defaults() -> None:
    args = build_parser().parse_args([])
    assert args.config is None
    assert args.output is None
    assert args.log_level == "INFO"


def test_main_writes_svg_to_stdout(tmp_path, capsys, static_config_payload: dict[str, Any]) -> None:
    path = tmp_path / "config.yaml"
    path.write_text(json.dumps(static_config_payload), encoding="utf-8")
    assert main([str(path)]) == 0
    out = capsys.readouterr().out
    assert out.startswith("<!-- Rendered with librenms-weathermap -->")
    assert out.endswith("</svg>")


def test_main_writes_svg_to_output_file(tmp_path, static_config_payload: dict[str, Any]) -> None:
    path = tmp_path / "config.yaml"
    path.write_text(json.dumps(static_config_payload), encoding="utf-8")
    output = tmp_path / "map.svg"
    assert main([str(path), "-o", str(output)]) == 0
    assert "<title>Lab</title>" in output.read_text(encoding="utf-8")


def test_main_reports_invalid_config(tmp_path, caplog) -> None:
    path = tmp_path / "config.yaml"
    path.write_text("title: x\nwidth: -5\nheight: 10\n", encoding="utf-8")
    assert main([str(path)]) == 1
    assert "validation error" in caplog.text


def test_main_fails_without_librenms_settings(tmp_path, monkeypatch, caplog, config_payload) -> None:
    monkeypatch.delenv("LIBRENMS_TOKEN", raising=False)
    monkeypatch.setattr("cli.load_dotenv", lambda *args, **kwargs: False)
    path = tmp_path / "config.yaml"
    path.write_text(json.dumps(config_payload), encoding="utf-8")
    assert main([str(path)]) == 1
    assert "LIBRENMS_TOKEN is not set" in caplog.text


def test_log_level_is_case_insensitive() -> None:
    assert build_parser().parse_args(["--log-level", "debug"]).log_level == "DEBUG"


def test_unknown_log_level_is_a_usage_error(capsys) -> None:
    with pytest.raises(SystemExit) as excinfo:
        build_parser().parse_args(["--log-level", "bogus"])
    assert excinfo.value.code == 2
    assert "invalid choice" in capsys.readouterr().err


def test_main_loads_dotenv_from_working_directory(tmp_path, monkeypatch, static_config_payload) -> None:
    for name in ("LIBRENMS_TOKEN", "LIBRENMS_SERVER"):
        # registered first so teardown removes what .env adds
        monkeypatch.setenv(name, "placeholder")
        monkeypatch.delenv(name)
    (tmp_path / ".env").write_text(
        "LIBRENMS_TOKEN=dotenv-token\nLIBRENMS_SERVER=https://nms.example\n", encoding="utf-8"
    )
    (tmp_path / "config.yaml").write_text(json.dumps(static_config_payload), encoding="utf-8")
    monkeypatch.chdir(tmp_path)

    assert main(["config.yaml", "-o", "map.svg"]) == 0
    assert os.environ["LIBRENMS_TOKEN"] == "dotenv-token"
    assert os.environ["LIBRENMS_SERVER"] == "https://nms.example"
    assert (tmp_path / "map.svg").exists()
