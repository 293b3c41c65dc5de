"""Defines the prompts served alongside the terminal tools."""

from termacraft_mcp.commands import HELP_TEXT

TERMINAL_GUIDE = f"""You have access to a small learning terminal with an in-memory filesystem.
Send one command line at a time to the `terminal` tool and read the structured result it returns.

{HELP_TEXT}

Things to keep in mind:
- Paths may be absolute (`/home/projects`) or relative to the current directory (`projects`).
- `cd ..` moves to the parent directory and `cd` with no argument returns to `/`.
- `..` and `.` are only understood on their own; a path like `home/../story.txt` will not resolve.
- `mkdir` creates a single directory. Its parent must already exist.
- Every error result has a `code` (`missing_operand`, `not_found`, `already_exists`, `command_not_found`) and a shell-style `message`.
- Nothing is written to disk. Use `reset_session` to start over from the initial files.
"""


def get_prompts() -> dict[str, str]:
    return {"terminal-guide": TERMINAL_GUIDE}
