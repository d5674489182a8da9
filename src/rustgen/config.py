"""YAML-facing configuration models."""

from typing import Optional

from pydantic import BaseModel, Field

from .scope import Item, Scope


class BaseConfig(BaseModel):
    """Fields every generation config has."""

    name: str
    file: Optional[str] = None

    @property
    def output_filename(self) -> str:
        return self.file or self.name.lower()


class ScopeConfig(BaseConfig):
    """A whole generated file: its items plus how to write it.

    Items are the builder models themselves, discriminated by ``kind``
    (``import``, ``module``, ``struct``, ``enum``, ``trait``, ``impl``,
    ``fn``, ``raw``).
    """

    header: bool = True
    indent: int = Field(default=4, ge=1)
    items: list[Item] = Field(default_factory=list)

    def to_scope(self) -> Scope:
        return Scope(items=[item.model_copy(deep=True) for item in self.items])
