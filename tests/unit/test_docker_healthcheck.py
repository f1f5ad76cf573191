"""Tests for the container healthcheck script."""

from __future__ import annotations

import os
import runpy
import urllib.error
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

SCRIPT = Path(__file__).resolve().parents[2] / "docker" / "healthcheck.py"


def _response(status: int) -> MagicMock:
    resp = MagicMock()
    resp.status = status
    resp.__enter__.return_value = resp
    return resp


def _run_script() -> int:
    with pytest.raises(SystemExit) as exc_info:
        runpy.run_path(str(SCRIPT), run_name="__main__")
    return exc_info.value.code


class TestHealthcheckScript:
    def test_exits_zero_when_admitting(self) -> None:
        with patch("urllib.request.urlopen", return_value=_response(200)) as mock_open:
            assert _run_script() == 0
        assert mock_open.call_args.args[0] == "http://127.0.0.1:8080/health"

    def test_uses_server_port(self) -> None:
        with (
            patch.dict(os.environ, {"SERVER_PORT": "9191"}),
            patch("urllib.request.urlopen", return_value=_response(200)) as mock_open,
        ):
            assert _run_script() == 0
        assert mock_open.call_args.args[0] == "http://127.0.0.1:9191/health"

    def test_exits_one_on_503(self) -> None:
        error = urllib.error.HTTPError("http://127.0.0.1:8080/health", 503, "Service Unavailable", None, None)
        with patch("urllib.request.urlopen", side_effect=error):
            assert _run_script() == 1

    def test_exits_one_when_unreachable(self) -> None:
        with patch("urllib.request.urlopen", side_effect=urllib.error.URLError("refused")):
            assert _run_script() == 1
