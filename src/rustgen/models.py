"""Value models shared by the declarable items.

Types, generics and field types are kept as opaque text: whatever the caller
passes is copied verbatim into the output. ``Type`` exists only as a
convenience for assembling ``Name<A, B>`` strings.
"""

from enum import StrEnum
from typing import Annotated, Any, Self, Sequence

from pydantic import BaseModel, BeforeValidator, field_validator, model_validator
from pydantic import Field as ModelField

from .formatter import Formatter


class Type(BaseModel):
    """A type name with optional generic arguments."""

    name: str
    generics: list[str] = ModelField(default_factory=list)

    def __init__(self, name: str, **data: Any) -> None:
        super().__init__(name=name, **data)

    @model_validator(mode="before")
    @classmethod
    def _from_text(cls, data: Any) -> Any:
        if isinstance(data, str):
            return {"name": data}
        return data

    def generic(self, ty: "Type | str") -> Self:
        self.generics.append(str(ty))
        return self

    def __str__(self) -> str:
        if not self.generics:
            return self.name
        return f"{self.name}<{', '.join(self.generics)}>"


def _as_text(value: Any) -> Any:
    if isinstance(value, Type):
        return str(value)
    if isinstance(value, dict):
        return str(Type.model_validate(value))
    return value


# A type accepted either as text or as a ``Type``, stored as text
TypeText = Annotated[str, BeforeValidator(_as_text)]


class Generic(BaseModel):
    """A generic parameter, rendered ``T`` or ``T: A + B``."""

    name: str
    bounds: list[TypeText] = ModelField(default_factory=list)

    @model_validator(mode="before")
    @classmethod
    def _from_text(cls, data: Any) -> Any:
        if isinstance(data, str):
            return {"name": data}
        return data

    def __str__(self) -> str:
        if not self.bounds:
            return self.name
        return f"{self.name}: {' + '.join(self.bounds)}"


class Bound(BaseModel):
    """One entry of a ``where`` clause."""

    name: str
    bound: list[TypeText] = ModelField(default_factory=list)

    @field_validator("bound", mode="before")
    @classmethod
    def _single_bound(cls, v: Any) -> Any:
        if isinstance(v, (str, Type)):
            return [v]
        return v


def fmt_docs(docs: Sequence[str], fmt: Formatter) -> None:
    for line in docs:
        fmt.write(f"/// {line}\n" if line else "///\n")


def fmt_attr(text: str) -> str:
    """Wrap ``text`` as ``#[text]`` unless it is already a complete attribute."""
    if text.startswith("#"):
        return text
    return f"#[{text}]"


def doc_lines(text: str) -> list[str]:
    return text.splitlines() or [""]


class Field(BaseModel):
    """A named struct field (also used for function arguments)."""

    name: str
    ty: TypeText
    docs: list[str] = ModelField(default_factory=list)
    annotations: list[str] = ModelField(default_factory=list)

    def __init__(self, name: str, ty: "Type | str", **data: Any) -> None:
        super().__init__(name=name, ty=ty, **data)

    def doc(self, text: str) -> Self:
        self.docs.extend(doc_lines(text))
        return self

    def annotation(self, text: str) -> Self:
        """Add a line written verbatim above the field (e.g. ``#[serde(skip)]``)."""
        self.annotations.append(text)
        return self


class FieldsKind(StrEnum):
    """Shape of a struct or variant body."""

    EMPTY = "empty"
    UNIT = "unit"
    TUPLE = "tuple"
    NAMED = "named"


class Fields(BaseModel):
    """Body of a struct or enum variant.

    The first field pushed fixes the kind. Pushing a named field into a tuple
    body (or the reverse) raises ``TypeError``.
    """

    kind: FieldsKind = FieldsKind.EMPTY
    named: list[Field] = ModelField(default_factory=list)
    types: list[TypeText] = ModelField(default_factory=list)

    @model_validator(mode="before")
    @classmethod
    def _from_list(cls, data: Any) -> Any:
        if data is None:
            return {}
        if isinstance(data, list):
            if not data:
                return {}
            if all(isinstance(item, (str, Type)) for item in data):
                return {"kind": FieldsKind.TUPLE, "types": data}
            return {"kind": FieldsKind.NAMED, "named": data}
        return data

    def _claim(self, kind: FieldsKind) -> None:
        if self.kind is FieldsKind.EMPTY:
            self.kind = kind
        elif self.kind is not kind:
            raise TypeError(f"cannot add {kind.value} fields to a {self.kind.value} body")

    def push_named(self, field: Field) -> Self:
        self._claim(FieldsKind.NAMED)
        self.named.append(field)
        return self

    def push_tuple(self, ty: "Type | str") -> Self:
        self._claim(FieldsKind.TUPLE)
        self.types.append(str(ty))
        return self

    def mark_unit(self) -> Self:
        self._claim(FieldsKind.UNIT)
        return self

    def fmt(self, fmt: Formatter, after: str = "") -> None:
        if self.kind is FieldsKind.NAMED:
            with fmt.block(after=after):
                for field in self.named:
                    fmt_docs(field.docs, fmt)
                    for annotation in field.annotations:
                        fmt.write(f"{annotation}\n")
                    fmt.write(f"{field.name}: {field.ty},\n")
        elif self.kind is FieldsKind.TUPLE:
            fmt.write("(" + ", ".join(self.types) + ")" + after)
        else:
            fmt.write(after)


class Variant(BaseModel):
    """An enum variant: unit, tuple or with named fields."""

    name: str
    docs: list[str] = ModelField(default_factory=list)
    fields: Fields = ModelField(default_factory=Fields)

    def __init__(self, name: str, **data: Any) -> None:
        super().__init__(name=name, **data)

    @model_validator(mode="before")
    @classmethod
    def _from_text(cls, data: Any) -> Any:
        if isinstance(data, str):
            return {"name": data}
        return data

    def named(self, name: str, ty: "Type | str") -> Self:
        self.fields.push_named(Field(name, ty))
        return self

    def tuple(self, ty: "Type | str") -> Self:
        self.fields.push_tuple(ty)
        return self

    def doc(self, text: str) -> Self:
        self.docs.extend(doc_lines(text))
        return self

    def fmt(self, fmt: Formatter) -> None:
        fmt_docs(self.docs, fmt)
        fmt.write(self.name)
        if self.fields.kind is FieldsKind.NAMED:
            self.fields.fmt(fmt, after=",")
        else:
            self.fields.fmt(fmt, after=",\n")


class AssociatedType(BaseModel):
    """An associated type declared by a trait, e.g. ``type Item: Clone;``."""

    name: str
    bounds: list[TypeText] = ModelField(default_factory=list)

    def bound(self, ty: "Type | str") -> Self:
        self.bounds.append(str(ty))
        return self

    def fmt(self, fmt: Formatter) -> None:
        fmt.write(f"type {self.name}")
        if self.bounds:
            fmt.write(": " + " + ".join(self.bounds))
        fmt.write(";\n")


class Binding(BaseModel):
    """An associated type bound inside an impl block, e.g. ``type Item = u8;``."""

    name: str
    ty: TypeText

    def fmt(self, fmt: Formatter) -> None:
        fmt.write(f"type {self.name} = {self.ty};\n")
