# SPDX-License-Identifier: Apache-2.0
# This file was created or modified with the assistance of an AI (Large Language Model).
"""Traffic-rate to color banding."""

from __future__ import annotations

from collections.abc import Mapping

FALLBACK_COLOR = "#000000"


class ColorBands:
    """Threshold -> color table with the thresholds pre-sorted for lookup.

    A rate takes the color of the largest threshold at or below it. Rates
    below every threshold take the color of the smallest one.
    """

    def __init__(self, colors: Mapping[int, str]):
        self.colors = dict(colors)
        self.thresholds = sorted(self.colors, reverse=True)

    def resolve(self, traffic: float) -> str:
        if not self.thresholds:
            return FALLBACK_COLOR
        threshold = next((t for t in self.thresholds if t <= traffic), self.thresholds[-1])
        return self.colors.get(threshold) or FALLBACK_COLOR


def as_color_bands(bands: Mapping[int, str] | ColorBands) -> ColorBands:
    return bands if isinstance(bands, ColorBands) else ColorBands(bands)


def resolve_color(traffic: float, bands: Mapping[int, str] | ColorBands) -> str:
    return as_color_bands(bands).resolve(traffic)
