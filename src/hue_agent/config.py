"""Bridge connection settings."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

DISCOVERY_URL = "https://discovery.meethue.com/"


@dataclass(frozen=True)
class BridgeConfig:
    """
    Where the bridge lives and which API user to talk to it as.

    Leave ``bridge_ip`` as None to locate the bridge through the discovery
    endpoint on first use. ``timeout`` of None keeps the transport default.
    """

    bridge_ip: Optional[str] = None
    username: str = ""
    discovery_url: str = DISCOVERY_URL
    timeout: Optional[float] = None

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "BridgeConfig":
        env = os.environ if environ is None else environ

        timeout: Optional[float] = None
        raw_timeout = (env.get("HUE_TIMEOUT") or "").strip()
        if raw_timeout:
            try:
                timeout = float(raw_timeout)
            except ValueError:
                raise ValueError(f"HUE_TIMEOUT must be a number of seconds, got {raw_timeout!r}") from None

        return cls(
            bridge_ip=(env.get("HUE_BRIDGE_IP") or "").strip() or None,
            username=(env.get("HUE_USERNAME") or "").strip(),
            discovery_url=(env.get("HUE_DISCOVERY_URL") or "").strip() or DISCOVERY_URL,
            timeout=timeout,
        )
