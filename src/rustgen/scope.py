"""The root container, modules, imports and raw text items."""

from typing import Annotated, Any, Literal, Optional, Self, Union

from pydantic import BaseModel
from pydantic import Field as ModelField

from .declarations import Enum, Impl, Struct, Trait
from .formatter import DEFAULT_INDENT, Formatter
from .function import Function
from .models import Type, doc_lines, fmt_attr, fmt_docs


class Import(BaseModel):
    """A ``use`` declaration.

    ``Import("std::io", ["Read", "Write"])`` renders ``use std::io::{Read, Write};``.
    """

    kind: Literal["import"] = "import"
    path: str
    names: list[str] = ModelField(default_factory=list)
    visibility: Optional[str] = None

    def __init__(self, path: str, names: Optional[list[str]] = None, **data: Any) -> None:
        super().__init__(path=path, names=names or [], **data)

    def vis(self, vis: str) -> Self:
        self.visibility = vis
        return self

    def fmt(self, fmt: Formatter) -> None:
        if self.visibility:
            fmt.write(f"{self.visibility} ")

        if not self.names:
            fmt.write(f"use {self.path};\n")
        elif len(self.names) == 1:
            fmt.write(f"use {self.path}::{self.names[0]};\n")
        else:
            fmt.write(f"use {self.path}::{{{', '.join(self.names)}}};\n")


class Raw(BaseModel):
    """Text written verbatim, for anything the model does not cover."""

    kind: Literal["raw"] = "raw"
    text: str

    def fmt(self, fmt: Formatter) -> None:
        fmt.write(f"{self.text}\n")


class Module(BaseModel):
    """A ``mod name { ... }`` block owning its own scope."""

    kind: Literal["module"] = "module"
    name: str
    visibility: Optional[str] = None
    docs: list[str] = ModelField(default_factory=list)
    attributes: list[str] = ModelField(default_factory=list)
    scope: "Scope" = ModelField(default_factory=lambda: Scope())

    def __init__(self, name: str, **data: Any) -> None:
        super().__init__(name=name, **data)

    def vis(self, vis: str) -> Self:
        self.visibility = vis
        return self

    def doc(self, text: str) -> Self:
        self.docs.extend(doc_lines(text))
        return self

    def attr(self, attribute: str) -> Self:
        self.attributes.append(attribute)
        return self

    def import_(self, path: str, *names: str) -> Self:
        """Add a ``use`` declaration to the module's scope."""
        self.scope.import_(path, *names)
        return self

    def raw(self, text: str) -> Self:
        self.scope.raw(text)
        return self

    def new_module(self, name: str) -> "Module":
        return self.scope.new_module(name)

    def get_module(self, name: str) -> Optional["Module"]:
        return self.scope.get_module(name)

    def get_or_new_module(self, name: str) -> "Module":
        return self.scope.get_or_new_module(name)

    def push_module(self, module: "Module") -> Self:
        self.scope.push_module(module)
        return self

    def new_struct(self, name: str) -> Struct:
        return self.scope.new_struct(name)

    def push_struct(self, item: Struct) -> Self:
        self.scope.push_struct(item)
        return self

    def new_enum(self, name: str) -> Enum:
        return self.scope.new_enum(name)

    def push_enum(self, item: Enum) -> Self:
        self.scope.push_enum(item)
        return self

    def new_trait(self, name: str) -> Trait:
        return self.scope.new_trait(name)

    def push_trait(self, item: Trait) -> Self:
        self.scope.push_trait(item)
        return self

    def new_impl(self, target: "Type | str") -> Impl:
        return self.scope.new_impl(target)

    def push_impl(self, item: Impl) -> Self:
        self.scope.push_impl(item)
        return self

    def new_fn(self, name: str) -> Function:
        return self.scope.new_fn(name)

    def push_fn(self, item: Function) -> Self:
        self.scope.push_fn(item)
        return self

    def fmt(self, fmt: Formatter) -> None:
        fmt_docs(self.docs, fmt)
        for attribute in self.attributes:
            fmt.write(fmt_attr(attribute) + "\n")

        if self.visibility:
            fmt.write(f"{self.visibility} ")

        fmt.write(f"mod {self.name}")
        with fmt.block():
            self.scope.fmt(fmt)


Item = Annotated[
    Union[Import, Module, Struct, Enum, Trait, Impl, Function, Raw],
    ModelField(discriminator="kind"),
]


class Scope(BaseModel):
    """Ordered collection of items; the root of every generated file.

    Items render in the order they were added, separated by blank lines
    (consecutive imports stay together). ``new_*`` methods return the stored
    item for further building; ``push_*`` methods store a copy, so a pushed
    item can be reused without the scope seeing later changes.

    Example:
        >>> scope = Scope()
        >>> foo = scope.new_struct("Foo").vis("pub").derive("Debug")
        >>> foo = foo.field("one", "usize")
        >>> print(scope.render())
        #[derive(Debug)]
        pub struct Foo {
            one: usize,
        }
    """

    items: list[Item] = ModelField(default_factory=list)

    def _push(self, item: Any) -> Any:
        self.items.append(item)
        return item

    def import_(self, path: str, *names: str) -> Import:
        """Add ``use path::name;`` (or ``use path::{a, b};`` for several names)."""
        return self._push(Import(path, list(names)))

    def raw(self, text: str) -> Raw:
        return self._push(Raw(text=text))

    def new_module(self, name: str) -> Module:
        return self._push(Module(name))

    def push_module(self, item: Module) -> Self:
        self._push(item.model_copy(deep=True))
        return self

    def get_module(self, name: str) -> Optional[Module]:
        """Return the first module called ``name``, or ``None``."""
        for item in self.items:
            if isinstance(item, Module) and item.name == name:
                return item
        return None

    def get_or_new_module(self, name: str) -> Module:
        module = self.get_module(name)
        if module is None:
            module = self.new_module(name)
        return module

    def new_struct(self, name: str) -> Struct:
        return self._push(Struct(name))

    def push_struct(self, item: Struct) -> Self:
        self._push(item.model_copy(deep=True))
        return self

    def new_enum(self, name: str) -> Enum:
        return self._push(Enum(name))

    def push_enum(self, item: Enum) -> Self:
        self._push(item.model_copy(deep=True))
        return self

    def new_trait(self, name: str) -> Trait:
        return self._push(Trait(name))

    def push_trait(self, item: Trait) -> Self:
        self._push(item.model_copy(deep=True))
        return self

    def new_impl(self, target: "Type | str") -> Impl:
        return self._push(Impl(target))

    def push_impl(self, item: Impl) -> Self:
        self._push(item.model_copy(deep=True))
        return self

    def new_fn(self, name: str) -> Function:
        return self._push(Function(name))

    def push_fn(self, item: Function) -> Self:
        self._push(item.model_copy(deep=True))
        return self

    def fmt(self, fmt: Formatter) -> None:
        previous: Optional[str] = None

        for item in self.items:
            if previous is not None and not (previous == item.kind == "import"):
                fmt.write("\n")
            item.fmt(fmt)
            previous = item.kind

    def render(self, indent: int = DEFAULT_INDENT) -> str:
        """Render every item to source text, without a trailing newline."""
        fmt = Formatter(indent)
        self.fmt(fmt)

        out = fmt.getvalue()
        if out.endswith("\n"):
            out = out[:-1]
        return out

    def __str__(self) -> str:
        return self.render()


Module.model_rebuild()
Scope.model_rebuild()
