"""
Bridge address resolution.

A statically configured address is used as is. Otherwise the first bridge
reported by the Philips discovery service is used and remembered for the
lifetime of the locator.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

import requests

from hue_agent.config import BridgeConfig
from hue_agent.errors import DiscoveryError

logger = logging.getLogger(__name__)


class BridgeLocator:
    def __init__(self, config: BridgeConfig, session: Optional[requests.Session] = None):
        self.config = config
        self.session = session or requests.Session()
        self._discovered_ip: Optional[str] = None

    @property
    def bridge_ip(self) -> Optional[str]:
        return self.config.bridge_ip or self._discovered_ip

    def discover_bridges(self) -> List[Dict[str, Any]]:
        """Return the candidate bridges reported by the discovery endpoint."""
        url = self.config.discovery_url
        try:
            response = self.session.get(url, timeout=self.config.timeout)
            response.raise_for_status()
            data = response.json()
        except requests.RequestException as e:
            raise DiscoveryError(f"Bridge discovery request failed: {e}") from e
        except ValueError as e:
            raise DiscoveryError(f"Bridge discovery returned invalid JSON: {e}") from e

        if not isinstance(data, list):
            raise DiscoveryError("Unexpected response from Hue discovery service.")
        return data

    def resolve_base_url(self) -> str:
        """Base URL for API calls, e.g. ``http://10.0.0.5/api/abc/``."""
        ip = self.bridge_ip
        if not ip:
            bridges = self.discover_bridges()
            if not bridges:
                raise DiscoveryError("No Philips Hue bridges found.")

            first = bridges[0]
            ip = first.get("internalipaddress") if isinstance(first, dict) else None
            if not ip:
                raise DiscoveryError(f"Discovered bridge has no internal IP address: {first!r}")

            logger.info("Discovered Hue bridge %s at %s", first.get("id", "?"), ip)
            self._discovered_ip = ip

        return f"http://{ip}/api/{self.config.username}/"

    def reset(self) -> None:
        """Forget a discovered address so the next call discovers again."""
        self._discovered_ip = None
