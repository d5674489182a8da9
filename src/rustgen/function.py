"""Function definitions, free-standing or inside traits and impl blocks."""

from typing import Any, Literal, Optional, Self

from pydantic import BaseModel
from pydantic import Field as ModelField

from .block import Block, Body, fmt_body
from .formatter import Formatter, fmt_bounds, fmt_generics
from .models import (
    Bound,
    Field,
    Generic,
    Type,
    TypeText,
    doc_lines,
    fmt_attr,
    fmt_docs,
)


class Function(BaseModel):
    """A function definition.

    ``body`` is ``None`` for a bare signature (``fn name(&self);``), which is
    what :meth:`Trait.new_fn` creates. Adding a line or a block turns it into a
    full definition again.
    """

    kind: Literal["fn"] = "fn"
    name: str
    visibility: Optional[str] = None
    docs: list[str] = ModelField(default_factory=list)
    allows: list[str] = ModelField(default_factory=list)
    attributes: list[str] = ModelField(default_factory=list)
    generics: list[Generic] = ModelField(default_factory=list)
    receiver: Optional[str] = None
    args: list[Field] = ModelField(default_factory=list)
    returns: Optional[TypeText] = None
    bounds: list[Bound] = ModelField(default_factory=list)
    abi: Optional[str] = None
    is_async: bool = False
    body: Optional[list[Body]] = ModelField(default_factory=list)

    def __init__(self, name: str, **data: Any) -> None:
        super().__init__(name=name, **data)

    def doc(self, text: str) -> Self:
        self.docs.extend(doc_lines(text))
        return self

    def allow(self, lint: str) -> Self:
        self.allows.append(lint)
        return self

    def attr(self, attribute: str) -> Self:
        self.attributes.append(attribute)
        return self

    def vis(self, vis: str) -> Self:
        self.visibility = vis
        return self

    def set_async(self, is_async: bool = True) -> Self:
        self.is_async = is_async
        return self

    def extern_abi(self, abi: str) -> Self:
        self.abi = abi
        return self

    def generic(self, name: str, *bounds: "Type | str") -> Self:
        self.generics.append(Generic(name=name, bounds=[str(b) for b in bounds]))
        return self

    def arg_self(self) -> Self:
        self.receiver = "self"
        return self

    def arg_ref_self(self) -> Self:
        self.receiver = "&self"
        return self

    def arg_mut_self(self) -> Self:
        self.receiver = "&mut self"
        return self

    def arg(self, name: str, ty: "Type | str") -> Self:
        self.args.append(Field(name, ty))
        return self

    def ret(self, ty: "Type | str") -> Self:
        self.returns = str(ty)
        return self

    def bound(self, name: str, ty: "Type | str") -> Self:
        self.bounds.append(Bound(name=name, bound=[str(ty)]))
        return self

    def line(self, line: Any) -> Self:
        if self.body is None:
            self.body = []
        self.body.append(str(line))
        return self

    def push_block(self, block: Block) -> Self:
        if self.body is None:
            self.body = []
        self.body.append(block.model_copy(deep=True))
        return self

    def fmt(self, fmt: Formatter, is_trait: bool = False) -> None:
        fmt_docs(self.docs, fmt)

        for lint in self.allows:
            fmt.write(f"#[allow({lint})]\n")

        for attribute in self.attributes:
            fmt.write(fmt_attr(attribute) + "\n")

        if self.visibility:
            fmt.write(f"{self.visibility} ")
        if self.is_async:
            fmt.write("async ")
        if self.abi is not None:
            fmt.write(f'extern "{self.abi}" ')

        fmt.write(f"fn {self.name}")
        fmt_generics(self.generics, fmt)

        params = [f"{arg.name}: {arg.ty}" for arg in self.args]
        if self.receiver is not None:
            params.insert(0, self.receiver)
        fmt.write("(" + ", ".join(params) + ")")

        if self.returns is not None:
            fmt.write(f" -> {self.returns}")

        fmt_bounds(self.bounds, fmt)

        if self.body is None and is_trait:
            fmt.write(";\n")
            return

        with fmt.block():
            fmt_body(self.body or [], fmt)
