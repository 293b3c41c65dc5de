"""
Unit tests for the built-in terminal commands
"""

import pytest

from termacraft_mcp.commands import (
    CatCommand,
    CdCommand,
    ClearCommand,
    CommandError,
    HelpCommand,
    LsCommand,
    MkdirCommand,
)
from termacraft_mcp.commands import HELP_TEXT, get_builtin_commands
from termacraft_mcp.models.results import CatResult, EmptyResult, LsResult, TextResult
from termacraft_mcp.models.session import Session
from termacraft_mcp.vfs import VirtualFileSystem
from termacraft_mcp.vfs.seed import HELLO_CONTENT


@pytest.fixture
def session():
    """Creates a fresh seeded Session"""
    return Session()


class TestLsCommand:
    """Tests for LsCommand"""

    def test_defaults_to_cwd(self, session):
        session.cwd = "/home"
        assert LsCommand().execute([], session) == LsResult(entries=["projects"])

    def test_only_first_argument_is_used(self, session):
        result = LsCommand().execute(["home", "story.txt"], session)
        assert result.entries == ["projects"]

    def test_content_joins_entries(self, session):
        result = LsCommand().execute(["/"], session)
        assert result.content == "README.txt\nhello.txt\nstory.txt\nhome"

    def test_missing_directory(self, session):
        with pytest.raises(CommandError) as exc_info:
            LsCommand().execute(["nope"], session)
        assert exc_info.value.code == "not_found"
        assert exc_info.value.message == "ls: cannot access 'nope': No such file or directory"


class TestCatCommand:
    """Tests for CatCommand"""

    def test_reads_relative_file(self, session):
        assert CatCommand().execute(["hello.txt"], session) == CatResult(content=HELLO_CONTENT)

    def test_reads_absolute_file_from_subdirectory(self, session):
        session.cwd = "/home/projects"
        assert CatCommand().execute(["/hello.txt"], session).content == HELLO_CONTENT

    def test_joins_arguments_with_spaces(self, session):
        session.filesystem = VirtualFileSystem.from_seed({"/my notes.txt": {"content": "hi"}})
        assert CatCommand().execute(["my", "notes.txt"], session).content == "hi"

    def test_missing_operand(self, session):
        with pytest.raises(CommandError) as exc_info:
            CatCommand().execute([], session)
        assert exc_info.value.code == "missing_operand"
        assert exc_info.value.message == "cat: missing file operand"

    def test_directory_is_not_readable(self, session):
        with pytest.raises(CommandError) as exc_info:
            CatCommand().execute(["home"], session)
        assert exc_info.value.message == "cat: home: No such file or directory"


class TestMkdirCommand:
    """Tests for MkdirCommand"""

    def test_replaces_filesystem(self, session):
        before = session.filesystem
        assert MkdirCommand().execute(["newdir"], session) == EmptyResult()
        assert session.filesystem is not before
        assert session.filesystem.exists("/newdir")
        assert not before.exists("/newdir")

    def test_relative_to_cwd(self, session):
        session.cwd = "/home"
        MkdirCommand().execute(["music"], session)
        assert session.filesystem.exists("/home/music")

    def test_joins_arguments_with_spaces(self, session):
        MkdirCommand().execute(["my", "folder"], session)
        assert session.filesystem.exists("/my folder")

    def test_missing_operand(self, session):
        with pytest.raises(CommandError) as exc_info:
            MkdirCommand().execute([], session)
        assert exc_info.value.code == "missing_operand"
        assert exc_info.value.message == "mkdir: missing operand"

    def test_already_exists(self, session):
        before = session.filesystem
        with pytest.raises(CommandError) as exc_info:
            MkdirCommand().execute(["home/projects"], session)
        assert exc_info.value.code == "already_exists"
        assert exc_info.value.message == "mkdir: cannot create directory 'home/projects': File exists"
        assert session.filesystem is before

    @pytest.mark.parametrize("operand", ["home/.", "home/.."])
    def test_dot_names_already_exist(self, session, operand):
        before = session.filesystem
        with pytest.raises(CommandError) as exc_info:
            MkdirCommand().execute([operand], session)
        assert exc_info.value.code == "already_exists"
        assert exc_info.value.message == f"mkdir: cannot create directory '{operand}': File exists"
        assert session.filesystem is before
        assert LsCommand().execute(["home"], session).entries == ["projects"]

    def test_missing_parent_keeps_distinct_code(self, session):
        before = session.filesystem
        with pytest.raises(CommandError) as exc_info:
            MkdirCommand().execute(["a/b"], session)
        assert exc_info.value.code == "not_found"
        assert exc_info.value.message.startswith("mkdir: cannot create directory 'a/b'")
        assert session.filesystem is before


class TestCdCommand:
    """Tests for CdCommand"""

    def test_defaults_to_root(self, session):
        session.cwd = "/home/projects"
        assert CdCommand().execute([], session) == EmptyResult()
        assert session.cwd == "/"

    def test_relative_and_absolute(self, session):
        CdCommand().execute(["home"], session)
        assert session.cwd == "/home"
        CdCommand().execute(["projects"], session)
        assert session.cwd == "/home/projects"
        CdCommand().execute(["/home"], session)
        assert session.cwd == "/home"

    def test_parent_directory(self, session):
        session.cwd = "/home/projects"
        CdCommand().execute([".."], session)
        assert session.cwd == "/home"
        CdCommand().execute([".."], session)
        assert session.cwd == "/"
        CdCommand().execute([".."], session)
        assert session.cwd == "/"

    def test_dot_keeps_cwd(self, session):
        session.cwd = "/home"
        CdCommand().execute(["."], session)
        assert session.cwd == "/home"

    def test_file_target_keeps_cwd(self, session):
        with pytest.raises(CommandError) as exc_info:
            CdCommand().execute(["hello.txt"], session)
        assert exc_info.value.message == "cd: hello.txt: No such file or directory"
        assert session.cwd == "/"

    def test_embedded_parent_segment_does_not_resolve(self, session):
        with pytest.raises(CommandError):
            CdCommand().execute(["home/../home"], session)
        assert session.cwd == "/"


class TestBuiltins:
    """Tests for ClearCommand and HelpCommand"""

    def test_clear_empties_history(self, session):
        session.execute("ls")
        session.execute("help")
        assert ClearCommand().execute([], session) == EmptyResult()
        assert session.history == []

    def test_clear_is_not_recorded(self):
        assert ClearCommand.records_history is False
        assert HelpCommand.records_history is True

    def test_help_text_wording(self, session):
        help_command = get_builtin_commands()[-1]
        result = help_command.execute([], session)
        assert result == TextResult(content=EXPECTED_HELP)
        assert HELP_TEXT == EXPECTED_HELP

    def test_help_is_built_from_command_metadata(self, session):
        commands = [LsCommand(), CatCommand()]
        result = HelpCommand(commands).execute([], session)
        assert result.content == (
            "Available commands:\n"
            "  ls [dir]       - list files and directories\n"
            "  cat <file>     - display file contents"
        )

    def test_standalone_help_lists_itself(self, session):
        result = HelpCommand().execute([], session)
        assert result.content == "Available commands:\n  help           - show this help message"


EXPECTED_HELP = (
    "Available commands:\n"
    "  ls [dir]       - list files and directories\n"
    "  cat <file>     - display file contents\n"
    "  mkdir <dir>    - create a new directory\n"
    "  cd <dir>       - change directory\n"
    "  clear          - clear the terminal\n"
    "  help           - show this help message"
)
