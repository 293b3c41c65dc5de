"""Discriminated result payloads produced by terminal commands."""

from typing import Annotated, Literal

from pydantic import BaseModel, Field

ErrorCode = Literal["missing_operand", "not_found", "already_exists", "command_not_found"]


class LsResult(BaseModel):
    kind: Literal["ls"] = "ls"
    entries: list[str] = Field(default_factory=list)

    @property
    def content(self) -> str:
        return "\n".join(self.entries)


class CatResult(BaseModel):
    kind: Literal["cat"] = "cat"
    content: str


class TextResult(BaseModel):
    kind: Literal["text"] = "text"
    content: str


class EmptyResult(BaseModel):
    """Returned by commands that succeed without anything to display."""

    kind: Literal["empty"] = "empty"


class ErrorResult(BaseModel):
    kind: Literal["error"] = "error"
    source: str  # Name of the command that failed
    code: ErrorCode
    message: str


Result = Annotated[
    LsResult | CatResult | TextResult | EmptyResult | ErrorResult,
    Field(discriminator="kind"),
]
