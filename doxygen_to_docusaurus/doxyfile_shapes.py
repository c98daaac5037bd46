"""Shapes for ``Doxyfile.xml``, the record of the build options."""

from dataclasses import dataclass, field

from doxygen_to_docusaurus.attributed_node import AttributedNode, get_attribute_str
from doxygen_to_docusaurus.errors import SchemaViolation
from doxygen_to_docusaurus.schema_node import (
    Shape,
    check_attributes,
    iter_elements,
    optional_str,
    parse_text_only,
    shape_label,
)

OptionValue = str | list[str]


@dataclass(frozen=True)
class DoxyfileOption(Shape):
    """One option; list-typed options keep all their values."""

    id: str
    option_type: str
    values: list[str] = field(default_factory=list)
    default: str | None = None

    @property
    def value(self) -> OptionValue:
        if self.option_type == "stringlist":
            return list(self.values)
        return self.values[0] if self.values else ""

    @classmethod
    def from_node(cls, node: AttributedNode) -> "DoxyfileOption":
        label = shape_label(cls, node)
        check_attributes(node, ("id", "default", "type"), label)
        values = []
        for child in iter_elements(node, label):
            if child.name != "value":
                raise SchemaViolation(child.name, label)
            values.append(parse_text_only(child, label))
        return cls(
            node.name,
            id=get_attribute_str(node, "id"),
            option_type=get_attribute_str(node, "type"),
            values=values,
            default=optional_str(node, "default"),
        )


@dataclass(frozen=True)
class Doxyfile(Shape):
    """The ``<doxyfile>`` root, consulted as a flat option lookup."""

    options: list[DoxyfileOption]
    version: str | None = None

    def as_dict(self) -> dict[str, OptionValue]:
        """Return ``{option id: value}`` for all options."""
        return {option.id: option.value for option in self.options}

    @classmethod
    def from_node(cls, node: AttributedNode) -> "Doxyfile":
        label = shape_label(cls, node)
        if node.name != "doxyfile":
            raise SchemaViolation(node.name, label)
        check_attributes(
            node, ("version", "xml:lang", "xsi:noNamespaceSchemaLocation"), label
        )
        options = []
        for child in iter_elements(node, label):
            if child.name != "option":
                raise SchemaViolation(child.name, label)
            options.append(DoxyfileOption.from_node(child))
        return cls(node.name, options=options, version=optional_str(node, "version"))
