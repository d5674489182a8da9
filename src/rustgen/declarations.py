"""Struct, enum, trait and impl declarations."""

from typing import Any, Literal, Optional, Self

from pydantic import BaseModel, field_validator
from pydantic import Field as ModelField

from .formatter import Formatter, fmt_bounds, fmt_generics
from .function import Function
from .models import (
    AssociatedType,
    Binding,
    Bound,
    Field,
    Fields,
    FieldsKind,
    Generic,
    Type,
    TypeText,
    Variant,
    doc_lines,
    fmt_attr,
    fmt_docs,
)
from .type_def import TypeDef


class Struct(TypeDef):
    """A struct with named fields, tuple fields or no fields at all.

    A struct without fields renders as ``struct Foo {}``; call :meth:`unit`
    to get ``struct Foo;`` instead.
    """

    kind: Literal["struct"] = "struct"
    fields: Fields = ModelField(default_factory=Fields)

    def field(self, name: str, ty: "Type | str") -> Self:
        self.fields.push_named(Field(name, ty))
        return self

    def push_field(self, field: Field) -> Self:
        self.fields.push_named(field.model_copy(deep=True))
        return self

    def tuple_field(self, ty: "Type | str") -> Self:
        self.fields.push_tuple(ty)
        return self

    def unit(self) -> Self:
        self.fields.mark_unit()
        return self

    def fmt(self, fmt: Formatter) -> None:
        self.fmt_head("struct", fmt)

        if self.fields.kind is FieldsKind.NAMED:
            self.fields.fmt(fmt)
        elif self.fields.kind is FieldsKind.EMPTY:
            with fmt.block():
                pass
        else:
            self.fields.fmt(fmt, after=";\n")


class Enum(TypeDef):
    """An enumeration; variants render in the order they were added."""

    kind: Literal["enum"] = "enum"
    variants: list[Variant] = ModelField(default_factory=list)

    def new_variant(self, name: str) -> Variant:
        variant = Variant(name)
        self.variants.append(variant)
        return variant

    def push_variant(self, variant: Variant) -> Self:
        self.variants.append(variant.model_copy(deep=True))
        return self

    def fmt(self, fmt: Formatter) -> None:
        self.fmt_head("enum", fmt)

        with fmt.block():
            for variant in self.variants:
                variant.fmt(fmt)


def fmt_members(assoc: list[Any], fns: list[Function], fmt: Formatter, is_trait: bool) -> None:
    """Associated types first, then functions separated by blank lines."""
    for ty in assoc:
        ty.fmt(fmt)

    for i, func in enumerate(fns):
        if i != 0 or assoc:
            fmt.write("\n")
        func.fmt(fmt, is_trait=is_trait)


class Trait(TypeDef):
    """A trait definition with supertraits, associated types and methods."""

    kind: Literal["trait"] = "trait"
    parents: list[TypeText] = ModelField(default_factory=list)
    associated_types: list[AssociatedType] = ModelField(default_factory=list)
    fns: list[Function] = ModelField(default_factory=list)

    @field_validator("fns", mode="before")
    @classmethod
    def _signatures_by_default(cls, v: Any) -> Any:
        # A method loaded without a body is a signature, as with new_fn
        if isinstance(v, list):
            return [
                {**func, "body": None} if isinstance(func, dict) and "body" not in func else func
                for func in v
            ]
        return v

    def parent(self, ty: "Type | str") -> Self:
        self.parents.append(str(ty))
        return self

    def associated_type(self, name: str, *bounds: "Type | str") -> AssociatedType:
        assoc = AssociatedType(name=name, bounds=[str(b) for b in bounds])
        self.associated_types.append(assoc)
        return assoc

    def new_fn(self, name: str) -> Function:
        """Add a method signature; give it lines to provide a default body."""
        func = Function(name, body=None)
        self.fns.append(func)
        return func

    def push_fn(self, func: Function) -> Self:
        self.fns.append(func.model_copy(deep=True))
        return self

    def fmt(self, fmt: Formatter) -> None:
        self.fmt_head("trait", fmt, parents=self.parents)

        with fmt.block():
            fmt_members(self.associated_types, self.fns, fmt, is_trait=True)


class Impl(BaseModel):
    """An ``impl`` block for a target type, optionally implementing a trait."""

    kind: Literal["impl"] = "impl"
    target: Type
    generics: list[Generic] = ModelField(default_factory=list)
    trait_ref: Optional[TypeText] = None
    associated_types: list[Binding] = ModelField(default_factory=list)
    bounds: list[Bound] = ModelField(default_factory=list)
    docs: list[str] = ModelField(default_factory=list)
    attributes: list[str] = ModelField(default_factory=list)
    fns: list[Function] = ModelField(default_factory=list)

    def __init__(self, target: "Type | str", **data: Any) -> None:
        if isinstance(target, Type):
            target = target.model_copy(deep=True)
        super().__init__(target=target, **data)

    def generic(self, name: str, *bounds: "Type | str") -> Self:
        """Add a generic to the block itself (``impl<T>``), not the target."""
        self.generics.append(Generic(name=name, bounds=[str(b) for b in bounds]))
        return self

    def target_generic(self, ty: "Type | str") -> Self:
        self.target.generic(ty)
        return self

    def impl_trait(self, ty: "Type | str") -> Self:
        self.trait_ref = str(ty)
        return self

    def associated_type(self, name: str, ty: "Type | str") -> Self:
        self.associated_types.append(Binding(name=name, ty=str(ty)))
        return self

    associate_type = associated_type

    def bound(self, name: str, ty: "Type | str") -> Self:
        self.bounds.append(Bound(name=name, bound=[str(ty)]))
        return self

    def doc(self, text: str) -> Self:
        self.docs.extend(doc_lines(text))
        return self

    def attr(self, attribute: str) -> Self:
        self.attributes.append(attribute)
        return self

    def macro(self, text: str) -> Self:
        return self.attr(text)

    def new_fn(self, name: str) -> Function:
        func = Function(name)
        self.fns.append(func)
        return func

    def push_fn(self, func: Function) -> Self:
        self.fns.append(func.model_copy(deep=True))
        return self

    def fmt(self, fmt: Formatter) -> None:
        fmt_docs(self.docs, fmt)
        for attribute in self.attributes:
            fmt.write(fmt_attr(attribute) + "\n")

        fmt.write("impl")
        fmt_generics(self.generics, fmt)

        if self.trait_ref is not None:
            fmt.write(f" {self.trait_ref} for")
        fmt.write(f" {self.target}")

        fmt_bounds(self.bounds, fmt)

        with fmt.block():
            fmt_members(self.associated_types, self.fns, fmt, is_trait=False)
