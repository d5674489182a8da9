"""Header shared by structs, enums and traits."""

from typing import Any, Optional, Self, Sequence

from pydantic import BaseModel, Field

from .formatter import Formatter, fmt_bounds, fmt_generics
from .models import Bound, Generic, Type, TypeText, doc_lines, fmt_attr, fmt_docs


class TypeDef(BaseModel):
    """Name, visibility, generics and the attribute lines above a type."""

    name: str
    visibility: Optional[str] = None
    generics: list[Generic] = Field(default_factory=list)
    bounds: list[Bound] = Field(default_factory=list)
    docs: list[str] = Field(default_factory=list)
    derives: list[str] = Field(default_factory=list)
    allows: list[str] = Field(default_factory=list)
    representation: Optional[str] = None
    attributes: list[str] = Field(default_factory=list)

    def __init__(self, name: str, **data: Any) -> None:
        super().__init__(name=name, **data)

    def ty(self) -> Type:
        """The declared type, with its generic parameter names as arguments."""
        return Type(self.name, generics=[g.name for g in self.generics])

    def vis(self, vis: str) -> Self:
        self.visibility = vis
        return self

    def generic(self, name: str, *bounds: "Type | str") -> Self:
        self.generics.append(Generic(name=name, bounds=[str(b) for b in bounds]))
        return self

    def bound(self, name: str, ty: "Type | str") -> Self:
        """Add a ``where`` clause entry."""
        self.bounds.append(Bound(name=name, bound=[str(ty)]))
        return self

    def doc(self, text: str) -> Self:
        self.docs.extend(doc_lines(text))
        return self

    def derive(self, name: str) -> Self:
        self.derives.append(name)
        return self

    def allow(self, lint: str) -> Self:
        self.allows.append(lint)
        return self

    def repr(self, repr: str) -> Self:
        self.representation = repr
        return self

    def attr(self, attribute: str) -> Self:
        self.attributes.append(attribute)
        return self

    def macro(self, text: str) -> Self:
        """Add an attribute macro such as ``#[async_trait]``."""
        return self.attr(text)

    def fmt_head(
        self, keyword: str, fmt: Formatter, parents: Sequence[TypeText] = ()
    ) -> None:
        fmt_docs(self.docs, fmt)

        for lint in self.allows:
            fmt.write(f"#[allow({lint})]\n")

        # All derives share one marker
        if self.derives:
            fmt.write(f"#[derive({', '.join(self.derives)})]\n")

        if self.representation is not None:
            fmt.write(f"#[repr({self.representation})]\n")

        for attribute in self.attributes:
            fmt.write(fmt_attr(attribute) + "\n")

        if self.visibility:
            fmt.write(f"{self.visibility} ")

        fmt.write(f"{keyword} {self.name}")
        fmt_generics(self.generics, fmt)

        if parents:
            fmt.write(": " + " + ".join(parents))

        fmt_bounds(self.bounds, fmt)
