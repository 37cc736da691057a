"""Tests for Steam Store responses."""

import pytest

from steam_idler.core.store import app_name_from_details


class TestAppNameFromDetails:
    def test_success(self) -> None:
        details = {"440": {"success": True, "data": {"name": "Team Fortress 2", "steam_appid": 440}}}
        assert app_name_from_details(details, 440) == "Team Fortress 2"

    def test_unknown_app(self) -> None:
        with pytest.raises(ValueError, match="doesn't exist"):
            app_name_from_details({"1": {"success": False}}, 1)

    @pytest.mark.parametrize("details", [
        {},
        None,
        {"2": {"success": True}},
        {"1": None},
        {"1": {"success": True}},
        {"1": {"success": True, "data": None}},
    ])
    def test_unexpected_response(self, details: object) -> None:
        with pytest.raises(ValueError, match="Unexpected response"):
            app_name_from_details(details, 1)  # type: ignore
