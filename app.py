# SPDX-License-Identifier: Apache-2.0
# This file was created or modified with the assistance of an AI (Large Language Model).
"""Flask app serving the live weathermap."""

from __future__ import annotations

import os

from flask import Flask, Response, jsonify, redirect, request, url_for
from pydantic import ValidationError
from yaml import YAMLError

from models import RenderData
from services.collector import collect
from services.config import load_config, parse_config
from services.librenms import WeathermapError
from services.render_svg import render

SVG_MIMETYPE = "image/svg+xml"


def config_error_response(exc: Exception, status: int = 400) -> Response:
    if isinstance(exc, YAMLError):
        message = f"YAML parse error: {exc}"
    elif isinstance(exc, ValidationError):
        message = f"Validation error: {exc.error_count()} error(s) — {exc.errors()[0]['msg']}"
    else:
        message = f"Config error: {exc}"
    return Response(message, status=status, mimetype="text/plain")


def create_app(config_path: str | None = None) -> Flask:
    app = Flask(__name__)
    app.config["MAX_CONTENT_LENGTH"] = 1024 * 1024
    app.config["WEATHERMAP_CONFIG"] = config_path or os.environ.get("WEATHERMAP_CONFIG")

    def collect_configured() -> RenderData | Response:
        try:
            config = load_config(app.config["WEATHERMAP_CONFIG"])
        except (YAMLError, ValidationError, OSError) as exc:
            # server-side config problem
            return config_error_response(exc, status=500)
        try:
            return collect(config)
        except WeathermapError as exc:
            return Response(str(exc), status=502, mimetype="text/plain")

    @app.get("/")
    def index() -> Response:
        return redirect(url_for("weathermap_svg"))

    @app.get("/weathermap.svg")
    def weathermap_svg() -> Response:
        data = collect_configured()
        if isinstance(data, Response):
            return data
        return Response(render(data), mimetype=SVG_MIMETYPE)

    @app.get("/render-data.json")
    def render_data_json() -> Response:
        data = collect_configured()
        if isinstance(data, Response):
            return data
        return jsonify(data.model_dump(mode="json"))

    @app.post("/render")
    def render_upload() -> Response:
        file = request.files.get("config_yaml")
        if not file or not file.filename:
            return Response("Please select a config file", status=400, mimetype="text/plain")
        try:
            config = parse_config(file.read().decode("utf-8"))
        except UnicodeDecodeError:
            return Response("Config file must be UTF-8 text", status=400, mimetype="text/plain")
        except (YAMLError, ValidationError) as exc:
            return config_error_response(exc)
        try:
            data = collect(config)
        except WeathermapError as exc:
            return Response(str(exc), status=502, mimetype="text/plain")
        return Response(render(data), mimetype=SVG_MIMETYPE)

    return app


if __name__ == "__main__":
    create_app().run(host="0.0.0.0", port=5000, debug=True)
