"""
Light listing and control against the Hue bridge REST API.

Bridge JSON (string ids, nested ``state`` records) is normalized into
:class:`Light` here and does not leak past this module.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional

import requests

from hue_agent.bridge import BridgeLocator
from hue_agent.color import HueColor, rgb_to_hue_color
from hue_agent.config import BridgeConfig
from hue_agent.errors import MalformedResponseError, UpstreamError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Light:
    id: int
    name: str
    is_on: Optional[bool] = None

    def to_dict(self) -> Dict[str, Any]:
        return {"id": self.id, "name": self.name, "is_on": self.is_on}


def _bridge_error(data: Any) -> Optional[str]:
    """Description of the first error in a bridge error list, if any."""
    if not isinstance(data, list):
        return None
    for item in data:
        if isinstance(item, dict) and isinstance(item.get("error"), dict):
            return item["error"].get("description") or "unknown bridge error"
    return None


def _parse_light(key: str, record: Any) -> Light:
    try:
        light_id = int(key)
    except (TypeError, ValueError):
        raise MalformedResponseError(f"Light id {key!r} is not numeric") from None

    if not isinstance(record, dict):
        raise MalformedResponseError(f"Light {key} record is not an object")

    state = record.get("state")
    is_on = state.get("on") if isinstance(state, dict) else None
    return Light(id=light_id, name=record.get("name") or "", is_on=is_on)


class LightsClient:
    def __init__(self, config: BridgeConfig, session: Optional[requests.Session] = None,
                 locator: Optional[BridgeLocator] = None):
        self.config = config
        self.session = session or requests.Session()
        self.locator = locator or BridgeLocator(config, session=self.session)

    def _get(self, api_path: str) -> Any:
        url = f"{self.locator.resolve_base_url()}{api_path}"
        response = self.session.get(url, timeout=self.config.timeout)
        if not response.ok:
            logger.error("GET %s failed: %s %s", api_path, response.status_code, response.reason)
            raise UpstreamError(response.reason or "request failed", status_code=response.status_code)

        try:
            data = response.json()
        except ValueError:
            raise MalformedResponseError(f"GET {api_path} returned invalid JSON") from None

        error = _bridge_error(data)
        if error:
            logger.error("GET %s rejected by bridge: %s", api_path, error)
            raise UpstreamError(error, status_code=response.status_code)
        return data

    def _put(self, api_path: str, content: Dict[str, Any]) -> bool:
        url = f"{self.locator.resolve_base_url()}{api_path}"
        response = self.session.put(url, json=content, timeout=self.config.timeout)
        if not response.ok:
            logger.warning("PUT %s failed: %s %s", api_path, response.status_code, response.reason)
        return response.ok

    def list_lights(self) -> List[Light]:
        """All lights known to the bridge, in the bridge's listing order."""
        data = self._get("lights")
        if not isinstance(data, dict):
            raise MalformedResponseError("Expected an object mapping light ids to lights")
        return [_parse_light(key, record) for key, record in data.items()]

    def _apply_to_all(self, apply: Callable[[int], bool]) -> bool:
        # Every light is attempted; the result is False if any one failed.
        results = [apply(light.id) for light in self.list_lights()]
        return all(results)

    def set_power(self, light_id: Optional[int], is_on: bool) -> bool:
        """Turn one light (or every light when light_id is None) on or off."""
        if light_id is None:
            return self._apply_to_all(lambda lid: self.set_power(lid, is_on))

        return self._put(f"lights/{light_id}/state", {"on": bool(is_on)})

    def set_color(self, light_id: Optional[int], red: int, green: int, blue: int) -> bool:
        """Set one light (or every light when light_id is None) to an RGB color."""
        return self.set_hue_color(light_id, rgb_to_hue_color(red, green, blue))

    def set_hue_color(self, light_id: Optional[int], color: HueColor) -> bool:
        """Send an already converted color to one light, or every light when light_id is None."""
        if light_id is None:
            return self._apply_to_all(lambda lid: self.set_hue_color(lid, color))

        return self._put(f"lights/{light_id}/state", color.to_state())
