"""Nested code blocks inside function bodies."""

from typing import Any, Self, Union

from pydantic import BaseModel, Field

from .formatter import Formatter


class Block(BaseModel):
    """A braced block of statements, e.g. an ``if`` arm or a loop body.

    ``before`` is written ahead of the opening brace (``"if ready"``) and
    ``trailer`` directly after the closing one (``";"`` or ``" else"``).
    """

    before: str = ""
    trailer: str = ""
    body: list[Union[str, "Block"]] = Field(default_factory=list)

    def __init__(self, before: str = "", **data: Any) -> None:
        super().__init__(before=before, **data)

    def line(self, line: Any) -> Self:
        self.body.append(str(line))
        return self

    def push_block(self, block: "Block") -> Self:
        self.body.append(block.model_copy(deep=True))
        return self

    def after(self, after: str) -> Self:
        self.trailer = after
        return self

    def fmt(self, fmt: Formatter) -> None:
        if self.before:
            fmt.write(self.before)

        with fmt.block(after=self.trailer):
            fmt_body(self.body, fmt)


Body = Union[str, Block]


def fmt_body(body: list[Body], fmt: Formatter) -> None:
    for entry in body:
        if isinstance(entry, Block):
            entry.fmt(fmt)
        else:
            fmt.write(f"{entry}\n")


Block.model_rebuild()
