"""Tests for the Hue agent tools."""

from unittest.mock import MagicMock, patch

import pytest

from hue_agent.errors import DiscoveryError, UpstreamError
from hue_agent.lights import Light


@pytest.fixture
def mock_client():
    with patch("hue_agent.tools._get_client") as mock_get_client:
        client = MagicMock()
        mock_get_client.return_value = client
        yield client


def test_get_lights_success(mock_client):
    from hue_agent import get_lights

    mock_client.list_lights.return_value = [Light(1, "Lamp", True), Light(2, "Porch", None)]

    result = get_lights()

    assert result["success"] is True
    assert result["count"] == 2
    assert result["lights"] == [
        {"id": 1, "name": "Lamp", "is_on": True},
        {"id": 2, "name": "Porch", "is_on": None},
    ]


def test_get_lights_upstream_error(mock_client):
    from hue_agent import get_lights

    mock_client.list_lights.side_effect = UpstreamError("unauthorized user", status_code=200)

    result = get_lights()

    assert result["success"] is False
    assert result["error_type"] == "UpstreamError"
    assert "unauthorized user" in result["error"]


def test_change_state_all_lights(mock_client):
    from hue_agent import change_state

    mock_client.set_power.return_value = True

    result = change_state(is_on=False)

    assert result["success"] is True
    assert result["id"] is None
    mock_client.set_power.assert_called_once_with(None, False)


def test_change_state_rejected(mock_client):
    from hue_agent import change_state

    mock_client.set_power.return_value = False

    result = change_state(is_on=True, id=4)

    assert result["success"] is False
    assert result["id"] == 4
    assert "did not accept" in result["error"]


def test_change_state_discovery_error(mock_client):
    from hue_agent import change_state

    mock_client.set_power.side_effect = DiscoveryError("No Philips Hue bridges found.")

    result = change_state(is_on=True, id=1)

    assert result["success"] is False
    assert result["error_type"] == "DiscoveryError"


def test_change_light_color_success(mock_client):
    from hue_agent import change_light_color

    mock_client.set_hue_color.return_value = True

    result = change_light_color(red=0, green=0, blue=255, id=2)

    assert result["success"] is True
    assert result["saturation"] == 254
    assert abs(result["hue"] - 43690) <= 1
    sent_id, sent_color = mock_client.set_hue_color.call_args.args
    assert sent_id == 2
    assert (sent_color.hue, sent_color.saturation) == (result["hue"], result["saturation"])


def test_change_light_color_transport_error(mock_client):
    import requests

    from hue_agent import change_light_color

    mock_client.set_hue_color.side_effect = requests.ConnectionError("bridge unreachable")

    result = change_light_color(red=255, green=0, blue=0)

    assert result["success"] is False
    assert result["error_type"] == "ConnectionError"


def test_client_built_from_environment():
    from hue_agent import tools

    tools.reset_client()
    try:
        with patch.dict("os.environ", {"HUE_BRIDGE_IP": "10.0.0.5", "HUE_USERNAME": "abc"}, clear=True):
            client = tools._get_client()

        assert client.config.bridge_ip == "10.0.0.5"
        assert client.locator.resolve_base_url() == "http://10.0.0.5/api/abc/"
        assert tools._get_client() is client
    finally:
        tools.reset_client()


def test_configure_replaces_client():
    from hue_agent import BridgeConfig, tools

    try:
        client = tools.configure(BridgeConfig(bridge_ip="10.0.0.9", username="u"))
        assert tools._get_client() is client
    finally:
        tools.reset_client()
