"""Initial tree every new terminal session starts from."""

from .filesystem import VirtualFileSystem

README_CONTENT = (
    "Welcome to TermaCraft!\n"
    "\n"
    "This is a fun terminal for learning basic commands.\n"
    "\n"
    "Try these commands:\n"
    "- ls (list files)\n"
    "- cat README.txt (read this file)\n"
    "- mkdir myfolder (create a folder)\n"
    "- cd myfolder (change directory)"
)

HELLO_CONTENT = "Hello, young programmer!"

STORY_CONTENT = (
    "Once upon a time, in a land of code...\n"
    "\n"
    "There was a terminal that made learning fun!\n"
    "\n"
    "The End."
)

# Order matters: it is the order `ls` reports entries in.
DEFAULT_SEED: dict[str, dict[str, str]] = {
    "/README.txt": {"content": README_CONTENT},
    "/hello.txt": {"content": HELLO_CONTENT},
    "/story.txt": {"content": STORY_CONTENT},
    "/home": {},
    "/home/projects": {},
}


def create_default_filesystem() -> VirtualFileSystem:
    return VirtualFileSystem.from_seed(DEFAULT_SEED)
