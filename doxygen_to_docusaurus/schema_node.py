"""Shared base and construction helpers for schema shapes."""

from collections.abc import Callable, Collection, Iterator, Mapping
from dataclasses import dataclass
from typing import Any

from doxygen_to_docusaurus.attributed_node import (
    AttributedNode,
    get_attribute_bool,
    get_attribute_int,
    get_attribute_str,
    has_attribute,
)
from doxygen_to_docusaurus.errors import SchemaViolation


@dataclass(frozen=True)
class Shape:
    """Typed interpretation of one XML element."""

    element_name: str


ShapeFactory = Callable[[AttributedNode], Any]


def shape_label(cls: type, node: AttributedNode) -> str:
    """Return the name used in violations, e.g. ``MarkupSpan<bold>``."""
    return f"{cls.__name__}<{node.name}>"


def check_attributes(
    node: AttributedNode, known: Collection[str], shape_name: str
) -> None:
    """Fail on the first attribute not listed in ``known``."""
    for name in node.attributes:
        if name not in known:
            raise SchemaViolation(name, shape_name, is_attribute=True)


def iter_elements(node: AttributedNode, shape_name: str) -> Iterator[AttributedNode]:
    """Yield child elements of a structural node, skipping whitespace runs."""
    for child in node.children:
        if isinstance(child, str):
            if child.strip():
                raise SchemaViolation("#text", shape_name)
            continue
        yield child


def parse_mixed(
    node: AttributedNode,
    factories: Mapping[str, ShapeFactory],
    allowed: Collection[str],
    shape_name: str,
) -> list[Any]:
    """Interpret mixed text/element content in document order."""
    children: list[Any] = []
    for child in node.children:
        if isinstance(child, str):
            children.append(child)
        elif child.name in allowed and child.name in factories:
            children.append(factories[child.name](child))
        else:
            raise SchemaViolation(child.name, shape_name)
    return children


def parse_text_only(node: AttributedNode, shape_name: str) -> str:
    """Return the text of a node that must not contain elements."""
    parts = []
    for child in node.children:
        if not isinstance(child, str):
            raise SchemaViolation(child.name, shape_name)
        parts.append(child)
    return "".join(parts)


def optional_str(node: AttributedNode, name: str) -> str | None:
    """Return a string attribute, or None if absent."""
    return get_attribute_str(node, name) if has_attribute(node, name) else None


def optional_int(node: AttributedNode, name: str) -> int | None:
    """Return an integer attribute, or None if absent."""
    return get_attribute_int(node, name) if has_attribute(node, name) else None


def optional_bool(node: AttributedNode, name: str, default: bool = False) -> bool:
    """Return a yes/no attribute, or ``default`` if absent."""
    return get_attribute_bool(node, name) if has_attribute(node, name) else default
