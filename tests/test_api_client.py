"""Tests for the front end's gateway client."""
import subprocess
import sys
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest
import requests

from src.ui.api_client import GatewayClient


def _response(status_code: int, body) -> MagicMock:
    response = MagicMock()
    response.status_code = status_code
    response.json.return_value = body
    return response


@pytest.fixture
def gateway() -> GatewayClient:
    return GatewayClient("http://gateway.test/", timeout=5)


class TestSendMessage:

    def test_success(self, gateway) -> None:
        with patch("src.ui.api_client.requests.post") as post:
            post.return_value = _response(200, {"success": True, "reply": "Hi"})

            result = gateway.send_message("Hello")

        post.assert_called_once_with(
            "http://gateway.test/api/chat",
            json={"message": "Hello"},
            timeout=5,
        )
        assert result == {"success": True, "reply": "Hi", "status": 200}

    def test_model_is_sent_when_given(self, gateway) -> None:
        with patch("src.ui.api_client.requests.post") as post:
            post.return_value = _response(200, {"success": True, "reply": "Hi"})

            gateway.send_message("Hello", model="gemini-1.5-pro")

        assert post.call_args.kwargs["json"] == {"message": "Hello", "model": "gemini-1.5-pro"}

    def test_failure_envelope_passed_through(self, gateway) -> None:
        body = {"success": False, "error": "An error occurred", "errorCode": "UNKNOWN_ERROR"}
        with patch("src.ui.api_client.requests.post") as post:
            post.return_value = _response(500, body)

            result = gateway.send_message("Hello")

        assert result["errorCode"] == "UNKNOWN_ERROR"
        assert result["status"] == 500

    @pytest.mark.parametrize("error", [
        requests.exceptions.ConnectionError("Connection refused"),
        requests.exceptions.Timeout("Read timed out"),
    ])
    def test_transport_failure_becomes_network_error(self, gateway, error) -> None:
        with patch("src.ui.api_client.requests.post", side_effect=error):
            result = gateway.send_message("Hello")

        assert result == {
            "success": False,
            "error": str(error),
            "errorCode": "NETWORK_ERROR",
        }

    def test_non_json_body_becomes_network_error(self, gateway) -> None:
        response = MagicMock(status_code=502)
        response.json.side_effect = ValueError("Expecting value")
        with patch("src.ui.api_client.requests.post", return_value=response):
            result = gateway.send_message("Hello")

        assert result["success"] is False
        assert result["errorCode"] == "NETWORK_ERROR"


class TestCheckHealth:

    def test_healthy(self, gateway) -> None:
        with patch("src.ui.api_client.requests.get", return_value=_response(200, {})) as get:
            assert gateway.check_health() is True

        get.assert_called_once_with("http://gateway.test/api/health", timeout=10)

    def test_unreachable(self, gateway) -> None:
        with patch(
            "src.ui.api_client.requests.get",
            side_effect=requests.exceptions.ConnectionError("down"),
        ):
            assert gateway.check_health() is False


class TestFrontEndImports:

    def test_front_end_modules_do_not_load_gemini_sdk(self) -> None:
        # A fresh interpreter, since the test session has already imported the SDK
        code = (
            "import sys\n"
            "import src.llm.catalog, src.ui.api_client, src.ui.renderer\n"
            "assert 'google.generativeai' not in sys.modules, 'Gemini SDK was imported'\n"
        )

        result = subprocess.run(
            [sys.executable, "-c", code],
            cwd=Path(__file__).resolve().parent.parent,
            capture_output=True,
            text=True,
        )

        assert result.returncode == 0, result.stderr
