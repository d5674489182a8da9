"""rustgen - Rust source code builder.

Build Rust items (structs, enums, traits, impls, functions, modules) through
chained builder calls and render them to source text.

Example usage:
    >>> from rustgen import Scope
    >>>
    >>> scope = Scope()
    >>> point = scope.new_struct("Point").vis("pub").derive("Debug")
    >>> point = point.field("x", "f64").field("y", "f64")
    >>>
    >>> imp = scope.new_impl("Point")
    >>> norm = imp.new_fn("norm").vis("pub").arg_ref_self().ret("f64").line(
    ...     "(self.x * self.x + self.y * self.y).sqrt()"
    ... )
    >>>
    >>> source = scope.render()

The output is structurally balanced but not canonically spaced; pipe it through
``rustfmt`` before treating it as final source.
"""

from .block import Block
from .config import BaseConfig, ScopeConfig
from .declarations import Enum, Impl, Struct, Trait
from .formatter import Formatter
from .function import Function
from .generator import CodeGenerator
from .models import (
    AssociatedType,
    Binding,
    Bound,
    Field,
    Fields,
    FieldsKind,
    Generic,
    Type,
    Variant,
)
from .scope import Import, Item, Module, Raw, Scope
from .templates import RUSTGEN_TEMPLATES_DIR_ENV, get_env

__all__ = [
    # Builder
    "Scope",
    "Module",
    "Import",
    "Raw",
    "Item",
    "Struct",
    "Enum",
    "Trait",
    "Impl",
    "Function",
    "Block",
    # Models
    "Type",
    "Generic",
    "Bound",
    "Field",
    "Fields",
    "FieldsKind",
    "Variant",
    "AssociatedType",
    "Binding",
    # Rendering
    "Formatter",
    # Generation
    "BaseConfig",
    "ScopeConfig",
    "CodeGenerator",
    "RUSTGEN_TEMPLATES_DIR_ENV",
    "get_env",
]
