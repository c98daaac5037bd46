"""Generic ordered, attributed XML node and read-only accessors over it."""

from dataclasses import dataclass, field

from doxygen_to_docusaurus.errors import MissingAttributeError, MissingChildError

AttributeValue = str | int | bool

_TRUE_VALUES = {"yes", "true"}
_FALSE_VALUES = {"no", "false"}


@dataclass
class AttributedNode:
    """One parsed XML element: its name, typed attributes and mixed children."""

    name: str
    attributes: dict[str, AttributeValue] = field(default_factory=dict)
    children: list["AttributedNode | str"] = field(default_factory=list)


def has_attributes(node: AttributedNode) -> bool:
    """Return True if the node carries at least one attribute."""
    return bool(node.attributes)


def get_attribute_names(node: AttributedNode) -> list[str]:
    """Return the attribute names in document order."""
    return list(node.attributes)


def has_attribute(node: AttributedNode, name: str) -> bool:
    """Return True if the node carries the named attribute."""
    return name in node.attributes


def get_attribute(node: AttributedNode, name: str) -> AttributeValue:
    """Return the raw typed value of an attribute."""
    if name not in node.attributes:
        raise MissingAttributeError(node.name, name)
    return node.attributes[name]


def get_attribute_str(node: AttributedNode, name: str) -> str:
    """Return an attribute as a string; numbers are converted."""
    value = get_attribute(node, name)
    if isinstance(value, bool):
        return "yes" if value else "no"
    return str(value)


def get_attribute_int(node: AttributedNode, name: str) -> int:
    """Return an attribute as an integer."""
    value = get_attribute(node, name)
    if isinstance(value, bool):
        raise MissingAttributeError(node.name, name, "not a number")
    if isinstance(value, int):
        return value
    try:
        return int(value)
    except ValueError:
        raise MissingAttributeError(node.name, name, "not a number") from None


def get_attribute_bool(node: AttributedNode, name: str) -> bool:
    """Return a yes/no attribute as a boolean."""
    value = get_attribute(node, name)
    if isinstance(value, bool):
        return value
    text = str(value).lower()
    if text in _TRUE_VALUES:
        return True
    if text in _FALSE_VALUES:
        return False
    raise MissingAttributeError(node.name, name, f"not a boolean ({value!r})")


def has_child(node: AttributedNode, name: str) -> bool:
    """Return True if at least one child element has the given name."""
    return any(
        isinstance(child, AttributedNode) and child.name == name
        for child in node.children
    )


def get_children(node: AttributedNode, name: str) -> list[AttributedNode]:
    """Return all child elements with the given name.

    Raises MissingChildError when there is none, so callers can tell an
    absent element from one that is present but empty.
    """
    found = [
        child
        for child in node.children
        if isinstance(child, AttributedNode) and child.name == name
    ]
    if not found:
        raise MissingChildError(node.name, name)
    return found


def is_text_element(node: AttributedNode) -> bool:
    """Return True if the node holds only text runs (or nothing)."""
    return all(isinstance(child, str) for child in node.children)


def has_text(node: AttributedNode) -> bool:
    """Return True if the node holds at least one non-empty text run."""
    return any(isinstance(child, str) and child for child in node.children)


def get_text(node: AttributedNode) -> str:
    """Concatenate the direct text runs of a node."""
    return "".join(child for child in node.children if isinstance(child, str))


def get_child_text(node: AttributedNode, name: str) -> str:
    """Return the text of the first leaf child with the given name."""
    child = get_children(node, name)[0]
    if not is_text_element(child):
        raise MissingChildError(node.name, f"{name} (text)")
    return get_text(child)


def get_child_int(node: AttributedNode, name: str) -> int:
    """Return the text of a leaf child parsed as an integer."""
    text = get_child_text(node, name).strip()
    try:
        return int(text)
    except ValueError:
        raise MissingChildError(node.name, f"{name} (number)") from None


def get_child_bool(node: AttributedNode, name: str) -> bool:
    """Return the text of a leaf child parsed as a boolean."""
    return get_child_text(node, name).strip().lower() in _TRUE_VALUES
