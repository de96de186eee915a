# SPDX-License-Identifier: Apache-2.0
# This file was created or modified with the assistance of an AI (Large Language Model).
from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

import pytest

from models import DEFAULT_COLORS, ConnectionData, DeviceData, RenderData, SiteData

FIXED_NOW = datetime(2024, 5, 6, 7, 8, 9, tzinfo=timezone.utc)


def connection(
    from_xy: tuple[float, float],
    to_xy: tuple[float, float],
    speed: str = "10G",
    outbound: float = -1,
    inbound: float = -1,
) -> ConnectionData:
    return ConnectionData(
        from_x=from_xy[0],
        from_y=from_xy[1],
        to_x=to_xy[0],
        to_y=to_xy[1],
        speed=speed,
        outboundTraffic=outbound,
        inboundTraffic=inbound,
    )


@pytest.fixture
def router_switch_data() -> RenderData:
    """Router above a switch, joined by a busy 10G link."""
    return RenderData(
        title="Core & Edge",
        width=800,
        height=600,
        devices=(
            DeviceData(type="router", name="core-rt1", render_x=100, render_y=100, label_position="top"),
            DeviceData(type="switch", name="core-sw1", render_x=100, render_y=300, label_position="bottom"),
        ),
        sites=(
            SiteData(name="DC1", render_x=20, render_y=40, width=200, height=320, label_position="top"),
        ),
        connections=(connection((100, 100), (100, 300), "10G", 5000000000, 1000000000),),
        colors=dict(DEFAULT_COLORS),
    )


@pytest.fixture
def config_payload() -> dict[str, Any]:
    return {
        "title": "Lab",
        "width": 640,
        "height": 480,
        "sites": [
            {
                "name": "Rack A",
                "render_x": 10,
                "render_y": 40,
                "width": 300,
                "height": 400,
                "label_position": "bottom",
            }
        ],
        "devices": [
            {
                "type": "router",
                "name": "rt1",
                "render_x": 100,
                "render_y": 100,
                "label_position": "top",
                "librenms_hostname": "rt1.example.net",
                "connections": [
                    {"peer": "sw1", "interface_name": "xe-0/0/0", "speed": "10G"},
                    {"peer": "sw2", "interface_name": "xe-0/0/1", "speed": "10G"},
                    {"peer": "cloud", "interface_name": "ge-0/0/9", "speed": "1G"},
                    {"peer": "ghost", "interface_name": "xe-0/0/0", "speed": "10G"},
                ],
            },
            {"type": "switch", "name": "sw1", "render_x": 100, "render_y": 300},
            {"type": "switch", "name": "sw2", "render_x": 300, "render_y": 300},
            {"type": "cloud", "name": "cloud", "render_x": 500, "render_y": 100},
        ],
    }


@pytest.fixture
def static_config_payload(config_payload: dict[str, Any]) -> dict[str, Any]:
    """The same map with no device polled from LibreNMS."""
    for device in config_payload["devices"]:
        device.pop("librenms_hostname", None)
        device.pop("connections", None)
    return config_payload
