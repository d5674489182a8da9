"""Indentation-tracking text emitter used by every item's ``fmt`` method."""

from __future__ import annotations

import contextlib
from typing import TYPE_CHECKING, Iterator, Sequence

if TYPE_CHECKING:
    from .models import Bound, Generic, Type

DEFAULT_INDENT = 4


class Formatter:
    """Accumulates rendered source text.

    Text is written through :meth:`write`. Indentation is applied lazily at the
    start of every non-empty line, so callers never emit leading spaces
    themselves and blank lines stay free of trailing whitespace.

    Example:
        >>> fmt = Formatter()
        >>> fmt.write("fn main()")
        >>> with fmt.block():
        ...     fmt.write("run();\\n")
        >>> print(fmt.getvalue(), end="")
        fn main() {
            run();
        }
    """

    def __init__(self, indent: int = DEFAULT_INDENT) -> None:
        self._dst = ""
        self._spaces = 0
        self._indent = indent

    @property
    def depth(self) -> int:
        """Current nesting depth in indentation units."""
        return self._spaces // self._indent if self._indent else 0

    def is_start_of_line(self) -> bool:
        return not self._dst or self._dst.endswith("\n")

    def write(self, text: str) -> None:
        should_indent = self.is_start_of_line()

        for i, line in enumerate(text.split("\n")):
            if i != 0:
                self._dst += "\n"
                should_indent = True

            if line and should_indent:
                self._dst += " " * self._spaces

            self._dst += line

    @contextlib.contextmanager
    def indent(self) -> Iterator[None]:
        self._spaces += self._indent
        try:
            yield
        finally:
            self._spaces -= self._indent

    @contextlib.contextmanager
    def block(self, after: str = "") -> Iterator[None]:
        """Wrap everything written inside the ``with`` body in braces.

        The opening brace goes on the current line. If nothing is written
        inside, the pair collapses to ``{}``.

        Args:
            after: Text written directly after the closing brace (e.g. ``","``).
        """
        if not self.is_start_of_line():
            self.write(" ")

        self.write("{\n")
        start = len(self._dst)

        with self.indent():
            yield

        if len(self._dst) == start:
            # Nothing was emitted, keep the delimiters together
            self._dst = self._dst[:-1]

        self.write("}" + after + "\n")

    def getvalue(self) -> str:
        return self._dst


def fmt_generics(generics: Sequence[Generic], fmt: Formatter) -> None:
    """Write ``<A, B: Bound>`` for a non-empty generic parameter list."""
    if generics:
        fmt.write("<" + ", ".join(str(g) for g in generics) + ">")


def fmt_bound_rhs(tys: Sequence[Type | str], fmt: Formatter) -> None:
    fmt.write(" + ".join(str(ty) for ty in tys))


def fmt_bounds(bounds: Sequence[Bound], fmt: Formatter) -> None:
    """Write a ``where`` clause, one bound per line."""
    if not bounds:
        return

    fmt.write("\n")
    fmt.write("where\n")

    with fmt.indent():
        for bound in bounds:
            fmt.write(f"{bound.name}: ")
            fmt_bound_rhs(bound.bound, fmt)
            fmt.write(",\n")
