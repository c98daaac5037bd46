"""Shapes for the Doxygen ``index.xml`` document."""

from dataclasses import dataclass, field

from doxygen_to_docusaurus.attributed_node import AttributedNode, get_attribute_str
from doxygen_to_docusaurus.errors import MissingChildError, SchemaViolation
from doxygen_to_docusaurus.schema_node import (
    Shape,
    check_attributes,
    iter_elements,
    optional_str,
    parse_text_only,
    shape_label,
)


@dataclass(frozen=True)
class IndexMember(Shape):
    """A member listed under a compound in the index."""

    refid: str
    kind: str
    name: str

    @classmethod
    def from_node(cls, node: AttributedNode) -> "IndexMember":
        label = shape_label(cls, node)
        check_attributes(node, ("refid", "kind"), label)
        name = None
        for child in iter_elements(node, label):
            if child.name != "name":
                raise SchemaViolation(child.name, label)
            name = parse_text_only(child, label)
        if name is None:
            raise MissingChildError(node.name, "name")
        return cls(
            node.name,
            refid=get_attribute_str(node, "refid"),
            kind=get_attribute_str(node, "kind"),
            name=name,
        )


@dataclass(frozen=True)
class IndexCompound(Shape):
    """A compound listed in the index; its definition lives in ``<refid>.xml``."""

    refid: str
    kind: str
    name: str
    members: list[IndexMember] = field(default_factory=list)

    @classmethod
    def from_node(cls, node: AttributedNode) -> "IndexCompound":
        label = shape_label(cls, node)
        check_attributes(node, ("refid", "kind"), label)
        name = None
        members = []
        for child in iter_elements(node, label):
            if child.name == "name":
                name = parse_text_only(child, label)
            elif child.name == "member":
                members.append(IndexMember.from_node(child))
            else:
                raise SchemaViolation(child.name, label)
        if name is None:
            raise MissingChildError(node.name, "name")
        return cls(
            node.name,
            refid=get_attribute_str(node, "refid"),
            kind=get_attribute_str(node, "kind"),
            name=name,
            members=members,
        )


@dataclass(frozen=True)
class DoxygenIndex(Shape):
    """The ``<doxygenindex>`` root."""

    version: str
    compounds: list[IndexCompound]
    lang: str | None = None

    @classmethod
    def from_node(cls, node: AttributedNode) -> "DoxygenIndex":
        label = shape_label(cls, node)
        if node.name != "doxygenindex":
            raise SchemaViolation(node.name, label)
        check_attributes(
            node, ("version", "xml:lang", "xsi:noNamespaceSchemaLocation"), label
        )
        compounds = []
        for child in iter_elements(node, label):
            if child.name != "compound":
                raise SchemaViolation(child.name, label)
            compounds.append(IndexCompound.from_node(child))
        return cls(
            node.name,
            version=get_attribute_str(node, "version"),
            compounds=compounds,
            lang=optional_str(node, "xml:lang"),
        )
