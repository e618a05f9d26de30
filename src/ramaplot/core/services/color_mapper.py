"""Deterministic series colors for Ramachandran plots."""

import math
from typing import Tuple

from ..domain.models.plot_point import RGB

HUE_SPAN = 260.0
HUE_OFFSET = 20.0
# Ramp positions below this take hue ``hp - 20``, the rest ``hp + 20``, so
# hues from 35 to 75 degrees are never produced.
HUE_SKIP_START = 55.0


def hsv_to_rgb(hue: float, saturation: float, value: float) -> RGB:
    """
    Convert HSV to 8-bit RGB with the six-sector algorithm.

    Args:
        hue: Hue in degrees
        saturation: Saturation in [0, 1]
        value: Value in [0, 1]

    Returns:
        (r, g, b) tuple of ints in [0, 255]
    """
    if saturation == 0.0:
        grey = _channel(value)
        return grey, grey, grey
    h = hue / 60.0
    i = math.floor(h)
    f = h - i
    p = value * (1 - saturation)
    q = value * (1 - saturation * f)
    t = value * (1 - saturation * (1 - f))
    sector = int(i) % 6
    if sector == 0:
        r, g, b = value, t, p
    elif sector == 1:
        r, g, b = q, value, p
    elif sector == 2:
        r, g, b = p, value, t
    elif sector == 3:
        r, g, b = p, q, value
    elif sector == 4:
        r, g, b = t, p, value
    else:
        r, g, b = value, p, q
    return _channel(r), _channel(g), _channel(b)


def _channel(fraction: float) -> int:
    return min(255, max(0, int(round(fraction * 255))))


class ColorMapper:
    """Maps a series position to a hue on a fixed ramp."""

    saturation = 1.0
    value = 1.0

    @staticmethod
    def hue_for(series_index: int, total_series: int) -> float:
        """Hue in degrees for ``series_index`` out of ``total_series``."""
        if total_series <= 0:
            raise ValueError(f"total_series must be positive, got {total_series}")
        norm = HUE_SPAN / total_series
        hp = series_index * norm + HUE_OFFSET
        if hp < HUE_SKIP_START:
            return hp - HUE_OFFSET
        return hp + HUE_OFFSET

    def color_for(self, series_index: int, total_series: int) -> RGB:
        """RGB color of ``series_index`` out of ``total_series``."""
        return hsv_to_rgb(
            self.hue_for(series_index, total_series), self.saturation, self.value
        )

    def palette(self, total_series: int) -> Tuple[RGB, ...]:
        return tuple(self.color_for(i, total_series) for i in range(total_series))
