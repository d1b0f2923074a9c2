"""
Tests for tools/mcp_server.py

Drives the FastMCP server in memory through fastmcp.Client, the same way
the narrator agent reaches it over stdio.
"""

from __future__ import annotations

import asyncio
import json

from fastmcp import Client

from tools.mcp_server import mcp


def _call(tool: str, **arguments) -> dict:
    async def run():
        async with Client(mcp) as client:
            result = await client.call_tool(tool, arguments)
            return json.loads(result.content[0].text)

    return asyncio.run(run())


def _tool_names() -> set[str]:
    async def run():
        async with Client(mcp) as client:
            return {tool.name for tool in await client.list_tools()}

    return asyncio.run(run())


class TestToolRegistry:

    def test_tools_registered(self):
        assert _tool_names() == {
            "list_travel_profiles",
            "get_travel_profile",
            "get_country_colors",
        }


class TestGetTravelProfile:

    def test_returns_page_payload(self, data_dir):
        result = _call("get_travel_profile", username="test-user")
        assert result["user"]["name"] == "Test User"
        assert result["stats"]["countriesVisited"] == 2
        assert result["stats"]["mostVisitedCountry"] == {"name": "France", "cities": 2}
        assert set(result["colors"]) == {"US", "FR"}

    def test_unknown_user_returns_error_dict(self, data_dir):
        result = _call("get_travel_profile", username="ghost")
        assert result["error"] == "User 'ghost' not found."
        assert result["available_users"] == ["test-user"]

    def test_invalid_username_returns_error_dict(self, data_dir):
        result = _call("get_travel_profile", username="no")
        assert "error" in result

    def test_undecodable_user_file_returns_error_dict(self, data_dir):
        (data_dir / "users" / "badbytes.json").write_bytes(b'{"name": "\xff"}')
        result = _call("get_travel_profile", username="badbytes")
        assert result["error"] == "User 'badbytes' not found."


class TestOtherTools:

    def test_list_travel_profiles(self, data_dir):
        assert _call("list_travel_profiles") == {"usernames": ["test-user"]}

    def test_get_country_colors(self, data_dir):
        result = _call("get_country_colors", username="test-user")
        assert result == {"colors": {"US": "#c9a227", "FR": "#d4a84b"}}

    def test_get_country_colors_unknown_user(self, data_dir):
        assert "error" in _call("get_country_colors", username="ghost")
