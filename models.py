# SPDX-License-Identifier: Apache-2.0
# This file was created or modified with the assistance of an AI (Large Language Model).
"""Configuration input models and the immutable render data model."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator

ConnectionSpeed = Literal["10M", "100M", "1G", "10G", "40G", "100G"]
DeviceType = Literal["switch", "router", "cloud"]
LabelPosition = Literal["top", "bottom"]

# bps -> CSS color; -1 is the inactive band
DEFAULT_COLORS: dict[int, str] = {
    -1: "#cccccc",
    0: "#000000",
    1000000: "#0000ff",
    10000000: "#00cccc",
    25000000: "#00ff00",
    50000000: "#cccc00",
    75000000: "#ee7000",
    100000000: "#ff0000",
}


class ConnectionDefinition(BaseModel):
    model_config = ConfigDict(extra="forbid")

    peer: str
    interface_name: str
    speed: ConnectionSpeed


class DeviceDefinition(BaseModel):
    model_config = ConfigDict(extra="forbid")

    type: DeviceType
    name: str
    render_x: float
    render_y: float
    label_position: LabelPosition = "bottom"
    librenms_hostname: str | None = None
    connections: list[ConnectionDefinition] = Field(default_factory=list)

    @property
    def needs_polling(self) -> bool:
        return bool(self.librenms_hostname and self.connections)


class SiteDefinition(BaseModel):
    model_config = ConfigDict(extra="forbid")

    name: str
    render_x: float
    render_y: float
    width: float = Field(gt=0)
    height: float = Field(gt=0)
    label_position: LabelPosition = "top"


class WeathermapConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    title: str
    width: int = Field(gt=0)
    height: int = Field(gt=0)
    devices: list[DeviceDefinition] = Field(default_factory=list)
    sites: list[SiteDefinition] = Field(default_factory=list)
    colors: dict[int, str] | None = None

    @model_validator(mode="after")
    def validate_devices(self) -> "WeathermapConfig":
        names = [device.name for device in self.devices]
        if len(set(names)) != len(names):
            raise ValueError("device names must be unique")
        if self.colors is not None and not self.colors:
            raise ValueError("colors must contain at least one band")
        return self

    def color_bands(self) -> dict[int, str]:
        return dict(self.colors) if self.colors else dict(DEFAULT_COLORS)

    def requires_librenms(self) -> bool:
        return any(device.needs_polling for device in self.devices)


class DeviceData(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: DeviceType
    name: str
    render_x: float
    render_y: float
    label_position: LabelPosition


class SiteData(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    render_x: float
    render_y: float
    width: float
    height: float
    label_position: LabelPosition


class ConnectionData(BaseModel):
    """One polled link between two device positions.

    Traffic values are in bits per second, ``-1`` when the interface is
    inactive or its rate is unknown. ``speed`` is kept as a plain string so a
    value outside ``ConnectionSpeed`` still renders (with a zero-width
    stroke).
    """

    model_config = ConfigDict(frozen=True)

    from_x: float
    from_y: float
    to_x: float
    to_y: float
    speed: str
    outboundTraffic: float = -1
    inboundTraffic: float = -1


class RenderData(BaseModel):
    model_config = ConfigDict(frozen=True)

    title: str
    width: float = Field(gt=0)
    height: float = Field(gt=0)
    devices: tuple[DeviceData, ...] = ()
    sites: tuple[SiteData, ...] = ()
    connections: tuple[ConnectionData, ...] = ()
    colors: dict[int, str] = Field(default_factory=lambda: dict(DEFAULT_COLORS))
