"""Constant values of enums, and the synthetic ``values`` list."""

from __future__ import annotations

from docxref.entity_kind import EntityKind
from docxref.member import Member


class EnumField(Member):
    """An enum value, or the static ``values`` field of an enum."""

    @property
    def kind(self) -> EntityKind:
        return EntityKind.ENUM_VALUE

    @property
    def is_values_list(self) -> bool:
        return self.element.is_synthetic and self.name == "values"

    @property
    def constant_value(self) -> str:
        value = self.element.raw.get("value")
        if value is not None:
            return str(value)
        enum = self.declaring_element
        return f"{enum.name}.{self.name}" if enum is not None else self.name
