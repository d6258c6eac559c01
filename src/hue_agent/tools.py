"""
Philips Hue Light Tools

Let an agent list lights, switch them on and off, and change their color.

Environment variables:
    HUE_BRIDGE_IP: IP address of your Hue Bridge (discovered automatically if unset)
    HUE_USERNAME: API username registered on the bridge
    HUE_DISCOVERY_URL: Discovery endpoint (optional)
    HUE_TIMEOUT: HTTP timeout in seconds (optional)

Tools
-----
- get_lights
    Parameters: none
- change_state
    Parameters: id (optional - omit to change all lights), is_on (required)
- change_light_color
    Parameters: id (optional - omit to change all lights), red, green, blue (0-255)

Notes:
  - Every tool returns a dict with a "success" key; failures carry "error" and "error_type"
  - Hue values: 0-65535 (red=0, green=21845, blue=43690)
  - Saturation: 0-254 (0=white, 254=full color)
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from strands import tool

from hue_agent.color import rgb_to_hue_color
from hue_agent.config import BridgeConfig
from hue_agent.lights import LightsClient

_client: Optional[LightsClient] = None


def configure(config: BridgeConfig) -> LightsClient:
    """Point the tools at a specific bridge."""
    global _client
    _client = LightsClient(config)
    return _client


def reset_client() -> None:
    global _client
    _client = None


def _get_client() -> LightsClient:
    global _client
    if _client is None:
        _client = LightsClient(BridgeConfig.from_env())
    return _client


def _ok(**data: Any) -> Dict[str, Any]:
    out: Dict[str, Any] = {"success": True}
    out.update(data)
    return out


def _err(message: str, *, error_type: Optional[str] = None, **data: Any) -> Dict[str, Any]:
    out: Dict[str, Any] = {"success": False, "error": message}
    if error_type:
        out["error_type"] = error_type
    out.update(data)
    return out


@tool
def get_lights() -> Dict[str, Any]:
    """
    Gets a list of lights and their current state.

    Returns:
        dict with success status, "lights" (each with id, name, is_on) and "count"
    """
    try:
        lights = _get_client().list_lights()
    except Exception as e:
        return _err(str(e), error_type=type(e).__name__, action="get_lights")

    return _ok(
        action="get_lights",
        lights=[light.to_dict() for light in lights],
        count=len(lights),
    )


@tool
def change_state(is_on: bool, id: Optional[int] = None) -> Dict[str, Any]:
    """
    Changes the state of the light. Set id to null to change all lights.

    Args:
        is_on: True to turn the light on, False to turn it off
        id: ID of the light from get_lights; null to change all lights

    Returns:
        dict whose "success" is True if the status change was a success
    """
    try:
        changed = _get_client().set_power(id, is_on)
    except Exception as e:
        return _err(str(e), error_type=type(e).__name__, action="change_state", id=id)

    if not changed:
        return _err("The bridge did not accept the state change", action="change_state", id=id, is_on=is_on)
    return _ok(action="change_state", id=id, is_on=is_on)


@tool
def change_light_color(red: int, green: int, blue: int, id: Optional[int] = None) -> Dict[str, Any]:
    """
    Changes the color of the light to an RGB value. Set id to null to change all lights.

    Args:
        red: Red channel 0-255
        green: Green channel 0-255
        blue: Blue channel 0-255
        id: ID of the light from get_lights; null to change all lights

    Returns:
        dict whose "success" is True if the color change was a success
    """
    color = rgb_to_hue_color(red, green, blue)
    try:
        changed = _get_client().set_hue_color(id, color)
    except Exception as e:
        return _err(str(e), error_type=type(e).__name__, action="change_light_color", id=id)

    if not changed:
        return _err("The bridge did not accept the color change", action="change_light_color",
                    id=id, hue=color.hue, saturation=color.saturation)
    return _ok(action="change_light_color", id=id, hue=color.hue, saturation=color.saturation)
