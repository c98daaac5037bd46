"""Base class for compound entities (classes, namespaces, files, pages...)."""

from dataclasses import dataclass, field

from doxygen_to_docusaurus.compound_shapes import CompoundDef
from doxygen_to_docusaurus.sections import Section


@dataclass(frozen=True)
class RenderedDescriptions:
    """Brief and detailed descriptions, rendered once during finalize."""

    brief: str = ""
    detailed_lines: list[str] = field(default_factory=list)


class CompoundEntity:
    """One documented compound and its place in a collection hierarchy."""

    slug = ""
    # The inner* element listing this entity's children, if it has any.
    child_element: str | None = None

    def __init__(self, compound_def: CompoundDef) -> None:
        """Wrap a parsed compounddef; relations are filled in later."""
        self.compound_def = compound_def
        self.id = compound_def.id
        self.kind = compound_def.kind
        self.compound_name = compound_def.compound_name
        self.parent: CompoundEntity | None = None
        self.children: list[CompoundEntity] = []
        self.permalink: str | None = None
        self.sections: list[Section] = []
        self.descriptions = RenderedDescriptions()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.id!r})"

    @property
    def name(self) -> str:
        """Unqualified display name."""
        return unqualified_name(self.compound_name)

    @property
    def path_name(self) -> str:
        """Name used for this entity's own permalink segment."""
        return self.compound_name

    @property
    def title(self) -> str:
        return self.compound_def.title or self.compound_name

    @property
    def page_title(self) -> str:
        """Heading used on the rendered page."""
        return f"The {self.name} {self.kind.capitalize()} Reference"

    @property
    def section_class_name(self) -> str | None:
        """Class name that marks constructors and destructors, if any."""
        return None

    def child_ids(self) -> list[str]:
        """Identifiers of the children this compound declares."""
        if self.child_element is None:
            return []
        return [ref.refid for ref in self.compound_def.inner_refs(self.child_element)]

    def add_child(self, child: "CompoundEntity") -> None:
        """Link ``child`` under this entity, ignoring repeated links."""
        if child not in self.children:
            self.children.append(child)
        if child.parent is None:
            child.parent = self


def unqualified_name(name: str) -> str:
    """Return the last ``::`` segment, ignoring ``::`` inside template args."""
    depth = 0
    start = 0
    for i, char in enumerate(name):
        if char == "<":
            depth += 1
        elif char == ">":
            depth -= 1
        elif depth == 0 and name.startswith("::", i):
            start = i + 2
    return name[start:]
