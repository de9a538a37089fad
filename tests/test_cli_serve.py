"""
Tests for the osrs-serve entry point.
"""

from unittest.mock import patch

from osrs_mcp.cli_serve import main


class TestCliServe:
    """Test cases for the osrs-serve entry point."""

    def test_runs_uvicorn_with_settings(self, test_settings, monkeypatch):
        test_settings.host = "0.0.0.0"
        test_settings.port = 9123
        test_settings.reload = True
        monkeypatch.setattr("osrs_mcp.cli_serve.settings", test_settings)

        with patch("osrs_mcp.cli_serve.uvicorn.run") as mock_run:
            assert main([]) == 0

        mock_run.assert_called_once_with(
            "osrs_mcp.main:app", host="0.0.0.0", port=9123, reload=True
        )
