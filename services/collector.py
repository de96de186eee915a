# SPDX-License-Identifier: Apache-2.0
# This file was created or modified with the assistance of an AI (Large Language Model).
"""Build render data from configuration and polled LibreNMS traffic."""

from __future__ import annotations

import logging
from typing import Any

from models import (
    ConnectionData,
    ConnectionDefinition,
    DeviceData,
    DeviceDefinition,
    RenderData,
    SiteData,
    WeathermapConfig,
)
from services.librenms import ConfigurationError, LibreNMSClient, LibreNMSSettings

logger = logging.getLogger(__name__)

INACTIVE = -1


def bits_per_second(octet_rate: Any) -> float:
    if octet_rate is None:
        return INACTIVE
    return float(octet_rate) * 8


def _find_port_id(ports: list[dict[str, Any]], interface_name: str) -> int | None:
    return next((p.get("port_id") for p in ports if p.get("ifName") == interface_name), None)


def _poll_connection(
    client: LibreNMSClient,
    device: DeviceDefinition,
    peer: DeviceDefinition,
    connection: ConnectionDefinition,
    ports: list[dict[str, Any]],
) -> ConnectionData | None:
    outbound = inbound = INACTIVE
    port_id = _find_port_id(ports, connection.interface_name)
    if port_id:
        port = client.port(port_id)
        if not port or port.get("ifOperStatus") != "up":
            logger.info(
                "%s %s is not up, skipping link to %s",
                device.name,
                connection.interface_name,
                peer.name,
            )
            return None
        outbound = bits_per_second(port.get("ifOutOctets_rate"))
        inbound = bits_per_second(port.get("ifInOctets_rate"))
    else:
        logger.warning("%s: interface %s not found", device.name, connection.interface_name)
    return ConnectionData(
        from_x=device.render_x,
        from_y=device.render_y,
        to_x=peer.render_x,
        to_y=peer.render_y,
        speed=connection.speed,
        outboundTraffic=outbound,
        inboundTraffic=inbound,
    )


def fetch_render_data(config: WeathermapConfig, client: LibreNMSClient | None = None) -> RenderData:
    """Resolve every configured connection against LibreNMS.

    A link whose port is operationally down is left out. A link whose
    interface cannot be found is drawn as inactive.
    """
    by_name = {device.name: device for device in config.devices}
    devices: list[DeviceData] = []
    connections: list[ConnectionData] = []
    for device in config.devices:
        devices.append(
            DeviceData(
                type=device.type,
                name=device.name,
                render_x=device.render_x,
                render_y=device.render_y,
                label_position=device.label_position,
            )
        )
        if not device.needs_polling:
            continue
        if client is None:
            raise ConfigurationError(f"{device.name} needs a LibreNMS client to poll traffic")
        device_id = client.device_id(device.librenms_hostname or "")
        ports = client.ports(device_id)
        for connection in device.connections:
            peer = by_name.get(connection.peer)
            if peer is None:
                logger.warning("%s: unknown peer %s", device.name, connection.peer)
                continue
            data = _poll_connection(client, device, peer, connection, ports)
            if data is not None:
                connections.append(data)

    sites = [
        SiteData(
            name=site.name,
            render_x=site.render_x,
            render_y=site.render_y,
            width=site.width,
            height=site.height,
            label_position=site.label_position,
        )
        for site in config.sites
    ]
    return RenderData(
        title=config.title,
        width=config.width,
        height=config.height,
        devices=tuple(devices),
        sites=tuple(sites),
        connections=tuple(connections),
        colors=config.color_bands(),
    )


def collect(config: WeathermapConfig) -> RenderData:
    """Like ``fetch_render_data`` but opens a client from the environment when polling is needed."""
    if not config.requires_librenms():
        return fetch_render_data(config)
    with LibreNMSClient(LibreNMSSettings.from_env()) as client:
        return fetch_render_data(config, client)
