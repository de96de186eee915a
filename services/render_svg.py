# SPDX-License-Identifier: Apache-2.0
# This file was created or modified with the assistance of an AI (Large Language Model).
"""SVG rendering of the weathermap: primitives and document assembly."""

from __future__ import annotations

from collections.abc import Mapping
from datetime import datetime, timezone
from decimal import ROUND_DOWN, Decimal
from html import escape

from models import ConnectionData, DeviceData, RenderData, SiteData
from services.colors import ColorBands, as_color_bands
from services.geometry import TRAFFIC_FONT_SIZE, layout_connection

GENERATOR_COMMENT = "<!-- Rendered with librenms-weathermap -->"

DEVICE_ICON_HEIGHTS = {
    "switch": 50,
    "router": 50,
    "cloud": 80,
}

BACKGROUND_FILL = "#f2f2f2"
TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"

ICON_DEFS = """\
  <g id="router" transform="translate(-25, -25)">
    <ellipse cx="25" cy="25" rx="25" ry="25" fill="#fafafa" stroke="none"/>
    <path d="M 38.08 40.38 L 31.77 34.19 L 29.2 36.81 L 27.24 27.37 L 36.75 29.12 L 34.2 31.72 L 40.51 37.9 Z M 23.92 28.37 L 17.74 34.68 L 20.36 37.25 L 10.92 39.21 L 12.67 29.71 L 15.26 32.25 L 21.45 25.95 Z M 12.02 9.57 L 18.33 15.76 L 20.89 13.14 L 22.86 22.58 L 13.35 20.83 L 15.9 18.24 L 9.59 12.05 Z M 25.91 21.51 L 32.1 15.2 L 29.48 12.63 L 38.92 10.67 L 37.17 20.17 L 34.58 17.62 L 28.39 23.94 Z M 25 0 C 11.2 0 0 11.2 0 25 C 0 38.8 11.2 50 25 50 C 38.8 50 50 38.8 50 25 C 50 11.2 38.8 0 25 0 Z M 25 0.63 C 38.46 0.63 49.37 11.54 49.37 25 C 49.37 38.46 38.46 49.37 25 49.37 C 11.54 49.37 0.63 38.46 0.63 25 C 0.63 11.54 11.54 0.63 25 0.63 Z" fill="#005073" stroke="none"/>
  </g>
  <g id="switch" transform="translate(-25, -25)">
    <path d="M 3.07 0 C 1.38 0 0 1.37 0 3.05 L 0 46.95 C 0 48.63 1.38 50 3.07 50 L 46.93 50 C 48.62 50 50 48.63 50 46.95 L 50 3.05 C 50 1.37 48.62 0 46.93 0 Z" fill="#fafafa" stroke="none"/>
    <path d="M 23.38 40.52 L 23.38 36.53 L 12.78 36.53 L 12.78 33.39 L 3.75 38.71 L 12.78 43.96 L 12.78 40.52 Z M 28.32 21.46 L 28.32 17.48 L 17.73 17.48 L 17.73 14.33 L 8.7 19.66 L 17.73 24.9 L 17.73 21.46 Z M 22.38 31.06 L 22.38 27.08 L 32.98 27.08 L 32.98 23.93 L 42 29.26 L 32.98 34.51 L 32.98 31.06 Z M 26.96 12.32 L 26.96 8.34 L 37.55 8.34 L 37.55 5.2 L 46.58 10.52 L 37.55 15.77 L 37.55 12.32 Z M 3.07 0 C 1.38 0 0 1.37 0 3.05 L 0 46.95 C 0 48.63 1.38 50 3.07 50 L 46.93 50 C 48.62 50 50 48.63 50 46.95 L 50 3.05 C 50 1.37 48.62 0 46.93 0 Z M 3.07 1.38 L 46.93 1.38 C 47.88 1.38 48.62 2.11 48.62 3.05 L 48.62 46.95 C 48.62 47.89 47.88 48.62 46.93 48.62 L 3.07 48.62 C 2.12 48.62 1.38 47.89 1.38 46.95 L 1.38 3.05 C 1.38 2.11 2.12 1.38 3.07 1.38 Z" fill="#005073" stroke="none"/>
  </g>
  <g id="cloud" transform="translate(-64, -40)">
    <path d="M 30 20 C 6 20 0 40 19.2 44 C 0 52.8 21.6 72 37.2 64 C 48 80 84 80 96 64 C 120 64 120 48 105 40 C 120 24 96 8 75 16 C 60 4 36 4 30 20 Z" fill="#ffffff" stroke="#000000" stroke-miterlimit="10"/>
  </g>
  <path id="arrow-marker" d="M 0 0 L 10 5 L 0 10 z"/>
  <marker id="arrow" viewBox="0 0 10 10" refX="8" refY="5" markerWidth="6" markerHeight="6" markerUnits="strokeWidth" orient="auto-start-reverse" fill="context-stroke"><use xlink:href="#arrow-marker"/></marker>"""


def fmt(value: float) -> str:
    """Format a coordinate without a trailing ``.0`` on integral values."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def format_traffic(traffic: float) -> str:
    if traffic < 0:
        return "Inactive"
    if traffic < 100000:
        divisor, unit = 1000, "kbps"
    elif traffic < 100000000:
        divisor, unit = 1000000, "Mbps"
    else:
        divisor, unit = 1000000000, "Gbps"
    scaled = (Decimal(str(traffic)) / divisor).quantize(Decimal("0.01"), rounding=ROUND_DOWN)
    return f"{scaled} {unit}"


def render_background(width: float, height: float) -> str:
    return f'<rect x="0" y="0" width="{fmt(width)}" height="{fmt(height)}" fill="{BACKGROUND_FILL}" stroke="none"/>'


def render_title(title: str, font_size: int = 24) -> str:
    return f'<text x="50%" y="{font_size * 2}" text-anchor="middle" font-size="{font_size}">{escape(title)}</text>'


def render_site(site: SiteData) -> str:
    rect = (
        f'<rect x="{fmt(site.render_x)}" y="{fmt(site.render_y)}" width="{fmt(site.width)}" '
        f'height="{fmt(site.height)}" rx="16" fill="#ffffff" stroke="#000000" stroke-miterlimit="10"/>'
    )
    if site.label_position == "top":
        label_y = site.render_y + 24
    else:
        label_y = site.render_y + site.height - 8
    label = (
        f'<text x="{fmt(site.render_x + site.width / 2)}" y="{fmt(label_y)}" text-anchor="middle" '
        f'font-size="16" fill="#000000" stroke="none">{escape(site.name)}</text>'
    )
    return f"{rect}\n{label}"


def render_device(device: DeviceData) -> str:
    icon_height = DEVICE_ICON_HEIGHTS[device.type]
    icon = f'<use xlink:href="#{device.type}" x="{fmt(device.render_x)}" y="{fmt(device.render_y)}"/>'
    if device.label_position == "top":
        label_y = device.render_y - (icon_height / 2 + 4)
    else:
        label_y = device.render_y + (icon_height / 2 + 20)
    label = (
        f'<text x="{fmt(device.render_x)}" y="{fmt(label_y)}" text-anchor="middle" '
        f'font-size="16" fill="#000000" stroke="none">{escape(device.name)}</text>'
    )
    return f"{icon}\n{label}"


def render_traffic_label(x: float, y: float, traffic: float, font_size: int = TRAFFIC_FONT_SIZE) -> str:
    width = font_size * 6
    rect = (
        f'<rect x="{fmt(x - width / 2)}" y="{fmt(y - font_size * 0.75)}" width="{width}" '
        f'height="{fmt(font_size * 1.5)}" fill="#ffffff" stroke="#000000" stroke-miterlimit="10"/>'
    )
    text = (
        f'<text x="{fmt(x)}" y="{fmt(y + font_size / 2)}" text-anchor="middle" font-size="{font_size}" '
        f'fill="#000000" stroke="none">{escape(format_traffic(traffic))}</text>'
    )
    return f"{rect}\n{text}"


def render_connection(
    connection: ConnectionData, bands: Mapping[int, str] | ColorBands
) -> tuple[list[str], list[str], list[str]]:
    """Return ``(arrow_elements, label_elements, defs_elements)`` for one link."""
    layout = layout_connection(connection, bands)
    arrows = [
        f'<path d="M {fmt(a.start.x)} {fmt(a.start.y)} L {fmt(a.end.x)} {fmt(a.end.y)}" '
        f'stroke="{a.color}" stroke-width="{fmt(a.stroke_width)}" marker-end="url(#{a.marker_id})"/>'
        for a in layout.arrows
    ]
    labels = [render_traffic_label(lbl.anchor.x, lbl.anchor.y, lbl.traffic) for lbl in layout.labels]
    defs = [marker.markup for marker in layout.marker_defs]
    return arrows, labels, defs


def render_timestamp(width: float, height: float, now: datetime | None = None) -> str:
    if now is None:
        now = datetime.now(timezone.utc)
    elif now.tzinfo is not None:
        now = now.astimezone(timezone.utc)
    stamp = now.strftime(TIMESTAMP_FORMAT)
    return (
        f'<text x="{fmt(width - 8)}" y="{fmt(height - 8)}" text-anchor="end" font-size="12" '
        f'fill="#000000" stroke="none">{escape(stamp)}</text>'
    )


def render_document(
    title: str, width: float, height: float, elements: list[str], defs_elements: list[str]
) -> str:
    defs = "\n  ".join(defs_elements)
    content = "\n".join(elements)
    return (
        f"{GENERATOR_COMMENT}\n"
        f'<svg xmlns="http://www.w3.org/2000/svg" xmlns:xlink="http://www.w3.org/1999/xlink" '
        f'viewBox="0 0 {fmt(width)} {fmt(height)}" font-family="sans-serif">\n'
        f"<defs>\n{ICON_DEFS}\n  {defs}\n</defs>\n"
        f"<title>{escape(title)}</title>\n"
        f"{content}\n"
        "</svg>"
    )


def render(data: RenderData, now: datetime | None = None) -> str:
    """Render ``data`` to a standalone SVG document.

    Layers, back to front: background, title, sites, link arrows, traffic
    labels, devices, timestamp. Per-color arrow markers are emitted once each,
    in first-use order.
    """
    bands = as_color_bands(data.colors)
    elements = [render_background(data.width, data.height), render_title(data.title)]
    elements.extend(render_site(site) for site in data.sites)

    arrow_elements: list[str] = []
    label_elements: list[str] = []
    defs_elements: list[str] = []
    for connection in data.connections:
        arrows, labels, defs = render_connection(connection, bands)
        arrow_elements.extend(arrows)
        label_elements.extend(labels)
        defs_elements.extend(defs)
    elements.extend(arrow_elements)
    elements.extend(label_elements)

    elements.extend(render_device(device) for device in data.devices)
    elements.append(render_timestamp(data.width, data.height, now))
    return render_document(
        data.title, data.width, data.height, elements, list(dict.fromkeys(defs_elements))
    )
