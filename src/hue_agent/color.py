"""
RGB to Hue color conversion.

The bridge encodes color as hue (0-65535) and saturation (0-254) rather than
RGB. Hue 0 is red, 21845 is green and 43690 is blue.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Tuple

MAX_HUE = 65535
MAX_SAT = 254
DEFAULT_BRIGHTNESS = 255


@dataclass(frozen=True)
class HueColor:
    hue: int
    saturation: int
    brightness: int = DEFAULT_BRIGHTNESS

    def to_state(self) -> Dict[str, Any]:
        """Light state payload for the bridge (turns the light on)."""
        return {"on": True, "hue": self.hue, "sat": self.saturation, "bri": self.brightness}


def _clamp(value: float, low: int, high: int) -> int:
    return max(low, min(high, int(value)))


def rgb_to_hue_sat(red: int, green: int, blue: int) -> Tuple[int, int]:
    """Convert an RGB triple (0-255 per channel) to (hue, saturation)."""
    r = _clamp(red, 0, 255) / 255.0
    g = _clamp(green, 0, 255) / 255.0
    b = _clamp(blue, 0, 255) / 255.0

    max_c = max(r, g, b)
    min_c = min(r, g, b)
    delta = max_c - min_c

    if delta == 0:
        h = 0.0
    elif max_c == r:
        h = (60 * ((g - b) / delta + 6)) % 360
    elif max_c == g:
        h = 60 * ((b - r) / delta + 2)
    else:
        h = 60 * ((r - g) / delta + 4)

    s = 0.0 if max_c == 0 else delta / max_c

    # int() truncates toward zero; both values are non-negative here
    hue = _clamp(h / 360.0 * MAX_HUE, 0, MAX_HUE)
    sat = _clamp(s * MAX_SAT, 0, MAX_SAT)
    return hue, sat


def rgb_to_hue_color(red: int, green: int, blue: int,
                     brightness: int = DEFAULT_BRIGHTNESS) -> HueColor:
    hue, sat = rgb_to_hue_sat(red, green, blue)
    return HueColor(hue=hue, saturation=sat, brightness=brightness)
