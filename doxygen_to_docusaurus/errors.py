"""Error types raised while reading and rendering Doxygen XML."""

from dataclasses import dataclass


class DoxygenModelError(Exception):
    """Base class for all conversion errors."""


class SchemaViolation(DoxygenModelError):
    """Raised when an element carries an attribute or child nobody recognizes."""

    def __init__(
        self, name: str, shape_name: str, *, is_attribute: bool = False
    ) -> None:
        """Record the offending name and the shape that rejected it."""
        self.name = f"@_{name}" if is_attribute else name
        self.shape_name = shape_name
        what = "attribute" if is_attribute else "element"
        super().__init__(f"{shape_name}: unrecognized {what} '{self.name}'")


class MissingAttributeError(DoxygenModelError):
    """Raised when a mandatory attribute is absent or has the wrong type."""

    def __init__(self, element: str, attribute: str, detail: str = "missing") -> None:
        """Name the element and attribute involved."""
        self.element = element
        self.attribute = f"@_{attribute}"
        super().__init__(f"<{element}>: attribute '{self.attribute}' is {detail}")


class MissingChildError(DoxygenModelError):
    """Raised when a mandatory child element is absent."""

    def __init__(self, element: str, child: str) -> None:
        """Name the parent element and the missing child."""
        self.element = element
        self.child = child
        super().__init__(f"<{element}>: child element <{child}> is missing")


class MissingPermalinkError(DoxygenModelError):
    """Raised when an entity without a permalink is referenced as a page."""

    def __init__(self, compound_id: str) -> None:
        """Name the compound that has no permalink."""
        self.compound_id = compound_id
        super().__init__(f"compound '{compound_id}' has no permalink")


class DispatchError(DoxygenModelError):
    """Raised when no renderer is registered for a shape type."""

    def __init__(self, type_name: str, family: str) -> None:
        """Name the shape type and the renderer family that was searched."""
        self.type_name = type_name
        self.family = family
        super().__init__(f"no {family} renderer for {type_name}")


class XmlLoadError(DoxygenModelError):
    """Raised when an XML document cannot be parsed."""


@dataclass(frozen=True)
class DanglingReference:
    """A cross-reference whose target is not registered in any collection."""

    refid: str
    kind: str
    referenced_from: str | None
