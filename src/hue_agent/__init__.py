"""
hue-agent: chat with an AI model to control Philips Hue lights.

The Strands tools in ``hue_agent.tools`` wrap a small REST client for the
Hue bridge.
"""

from hue_agent.bridge import BridgeLocator
from hue_agent.color import HueColor, rgb_to_hue_color, rgb_to_hue_sat
from hue_agent.config import BridgeConfig
from hue_agent.errors import DiscoveryError, HueError, MalformedResponseError, UpstreamError
from hue_agent.lights import Light, LightsClient
from hue_agent.tools import change_light_color, change_state, configure, get_lights, reset_client

__version__ = "0.1.0"

__all__ = [
    "BridgeConfig",
    "BridgeLocator",
    "DiscoveryError",
    "HueColor",
    "HueError",
    "Light",
    "LightsClient",
    "MalformedResponseError",
    "UpstreamError",
    "change_light_color",
    "change_state",
    "configure",
    "get_lights",
    "reset_client",
    "rgb_to_hue_color",
    "rgb_to_hue_sat",
]
