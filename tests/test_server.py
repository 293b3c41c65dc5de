"""
Unit tests for the MCP tool functions in server.py
"""

import uuid

import pytest

from termacraft_mcp import server


@pytest.fixture
def session_id():
    """Creates a unique session id so tests do not share state"""
    return f"test-{uuid.uuid4()}"


class TestTerminalTools:
    """Tests for terminal, history and reset_session tools"""

    @pytest.mark.asyncio
    async def test_terminal_success(self, session_id):
        response = await server.terminal(None, "ls /home", session_id)
        assert response == {
            "status": "success",
            "result": {"kind": "ls", "entries": ["projects"]},
            "cwd": "/",
            "prompt": "/ $",
        }

    @pytest.mark.asyncio
    async def test_terminal_error(self, session_id):
        response = await server.terminal(None, "cat nothing.txt", session_id)
        assert response["status"] == "error"
        assert response["result"]["code"] == "not_found"
        assert response["result"]["message"] == "cat: nothing.txt: No such file or directory"

    @pytest.mark.asyncio
    async def test_terminal_blank_line(self, session_id):
        response = await server.terminal(None, "  ", session_id)
        assert response["status"] == "success"
        assert response["result"] is None

    @pytest.mark.asyncio
    async def test_terminal_tracks_cwd(self, session_id):
        await server.terminal(None, "cd home", session_id)
        response = await server.terminal(None, "cd projects", session_id)
        assert response["cwd"] == "/home/projects"
        assert response["prompt"] == "/home/projects $"

    @pytest.mark.asyncio
    async def test_history_and_reset(self, session_id):
        await server.terminal(None, "mkdir notes", session_id)
        await server.terminal(None, "help", session_id)
        response = await server.history(None, session_id)
        assert [record["command"] for record in response["result"]] == ["mkdir notes", "help"]

        response = await server.reset_session(None, session_id)
        assert response == {"status": "success", "cwd": "/", "prompt": "/ $"}
        response = await server.history(None, session_id)
        assert response["result"] == []

    @pytest.mark.asyncio
    async def test_unexpected_failure_is_reported(self, session_id, monkeypatch):
        def boom():
            raise RuntimeError("storage unavailable")

        monkeypatch.setattr(server, "get_session_manager", boom)
        response = await server.terminal(None, "ls", session_id)
        assert response == {"status": "error", "error": "storage unavailable"}

    def test_guide_prompt_mentions_commands(self):
        guide = server.get_terminal_guide()
        assert "Available commands:" in guide
        assert "reset_session" in guide
