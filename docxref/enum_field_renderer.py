"""Rendering of enum values on enum pages."""

from abc import ABC, abstractmethod

from docxref.enum_field import EnumField
from docxref.markdown import md_code, md_link


class EnumFieldRenderer(ABC):
    """Renders the value and the linked name of an enum field."""

    @abstractmethod
    def render_value(self, field: EnumField) -> str:
        """Render the constant value of ``field``."""

    @abstractmethod
    def render_linked_name(self, field: EnumField) -> str:
        """Render the name of ``field`` linked to its documentation."""


class EnumFieldRendererMarkdown(EnumFieldRenderer):
    """Markdown rendering used on generated enum pages."""

    def render_value(self, field: EnumField) -> str:
        if field.is_values_list:
            enum = field.declaring_element
            return md_code(f"const List<{enum.name if enum else ''}>")
        return md_code(field.constant_value)

    def render_linked_name(self, field: EnumField) -> str:
        link = md_link(field.name, field.href or f"#{field.anchor}")
        return f"~~{link}~~" if field.is_deprecated else link
