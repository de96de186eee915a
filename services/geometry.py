# SPDX-License-Identifier: Apache-2.0
# This file was created or modified with the assistance of an AI (Large Language Model).
"""Arrow and traffic-label geometry for a single connection."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from math import hypot

from models import ConnectionData
from services.colors import ColorBands, as_color_bands

# 10M = 0.5px, 100M = 1px, 1G = 2px, 10G = 4px, 40G = 6px, 100G = 8px
STROKE_WIDTHS: dict[str, float] = {
    "10M": 0.5,
    "100M": 1,
    "1G": 2,
    "10G": 4,
    "40G": 6,
    "100G": 8,
}

TRAFFIC_FONT_SIZE = 12
TRAFFIC_LABEL_WIDTH = TRAFFIC_FONT_SIZE * 6
LABEL_GAP = 8
STROKE_CLEARANCE = 6

# steep, horizontally short links get their labels pulled towards the midpoint
VERTICAL_SPAN_MIN = 48
HORIZONTAL_SPAN_MAX = 192
VERTICAL_LABEL_GAP = 12


@dataclass(frozen=True)
class Point:
    x: float
    y: float


@dataclass(frozen=True)
class MarkerDef:
    color: str
    marker_id: str
    markup: str


@dataclass(frozen=True)
class ArrowSpec:
    start: Point
    end: Point
    color: str
    stroke_width: float
    marker_id: str


@dataclass(frozen=True)
class LabelSpec:
    anchor: Point
    traffic: float


@dataclass(frozen=True)
class ConnectionLayout:
    arrows: tuple[ArrowSpec, ArrowSpec]
    labels: tuple[LabelSpec, LabelSpec]
    marker_defs: tuple[MarkerDef, ...]


def stroke_width(speed: str) -> float:
    return STROKE_WIDTHS.get(speed, 0)


def arrow_marker_id(color: str) -> str:
    return f"arrow-{str(color).replace('#', '')}"


def arrow_marker(color: str) -> MarkerDef:
    marker_id = arrow_marker_id(color)
    markup = (
        f'<marker id="{marker_id}" viewBox="0 0 10 10" refX="8" refY="5" markerWidth="6" '
        f'markerHeight="6" markerUnits="strokeWidth" orient="auto-start-reverse" '
        f'fill="{color}"><use xlink:href="#arrow-marker"/></marker>'
    )
    return MarkerDef(color=color, marker_id=marker_id, markup=markup)


def label_offset(span_x: float, span_y: float, unit_y: float, width: float) -> float:
    if span_y > VERTICAL_SPAN_MIN and span_x < HORIZONTAL_SPAN_MAX:
        return (VERTICAL_LABEL_GAP + width * STROKE_CLEARANCE) / abs(unit_y)
    return TRAFFIC_LABEL_WIDTH / 2 + LABEL_GAP + width * STROKE_CLEARANCE


def layout_connection(
    connection: ConnectionData, bands: Mapping[int, str] | ColorBands
) -> ConnectionLayout:
    """Place both half-arrows and both traffic labels of ``connection``.

    The outbound arrow runs from ``from`` to the midpoint and the inbound one
    from ``to`` to the midpoint. Labels sit on the link axis, the outbound one
    on the ``from`` side. A zero-length link yields coincident geometry.
    """
    bands = as_color_bands(bands)
    dx = connection.to_x - connection.from_x
    dy = connection.to_y - connection.from_y
    middle = Point(connection.from_x + dx / 2, connection.from_y + dy / 2)
    length = hypot(dx, dy)
    unit_x = dx / length if length else 0.0
    unit_y = dy / length if length else 0.0

    width = stroke_width(connection.speed)
    offset = label_offset(abs(dx), abs(dy), unit_y, width)

    outbound_marker = arrow_marker(bands.resolve(connection.outboundTraffic))
    inbound_marker = arrow_marker(bands.resolve(connection.inboundTraffic))
    arrows = (
        ArrowSpec(
            start=Point(connection.from_x, connection.from_y),
            end=middle,
            color=outbound_marker.color,
            stroke_width=width,
            marker_id=outbound_marker.marker_id,
        ),
        ArrowSpec(
            start=Point(connection.to_x, connection.to_y),
            end=middle,
            color=inbound_marker.color,
            stroke_width=width,
            marker_id=inbound_marker.marker_id,
        ),
    )
    labels = (
        LabelSpec(
            Point(middle.x - unit_x * offset, middle.y - unit_y * offset),
            connection.outboundTraffic,
        ),
        LabelSpec(
            Point(middle.x + unit_x * offset, middle.y + unit_y * offset),
            connection.inboundTraffic,
        ),
    )
    return ConnectionLayout(arrows=arrows, labels=labels, marker_defs=(outbound_marker, inbound_marker))
