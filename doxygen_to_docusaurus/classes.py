"""Logic for the classes collection (classes, structs and unions)."""

import logging

from doxygen_to_docusaurus.collection_base import CollectionBase
from doxygen_to_docusaurus.compound_entity import CompoundEntity
from doxygen_to_docusaurus.compound_shapes import CompoundDef
from doxygen_to_docusaurus.permalinks import sanitize_anonymous_namespace

logger = logging.getLogger(__name__)


class Class(CompoundEntity):
    """A class, struct or union; may have several bases and derived classes."""

    slug = "classes"

    def __init__(self, compound_def: CompoundDef) -> None:
        """Wrap the compounddef; inheritance links are filled by the collection."""
        super().__init__(compound_def)
        self.base_classes: list[Class] = []

    @property
    def derived_classes(self) -> list[CompoundEntity]:
        return self.children

    @property
    def path_name(self) -> str:
        return sanitize_anonymous_namespace(self.compound_name).replace("::", "/")

    @property
    def section_class_name(self) -> str | None:
        return self.name.split("<")[0].strip()

    @property
    def is_template(self) -> bool:
        return self.compound_def.template_param_list is not None

    @property
    def page_title(self) -> str:
        kind = self.kind.capitalize()
        if self.is_template:
            kind += " Template"
        return f"The {self.name} {kind} Reference"

    def add_derived(self, derived: "Class") -> None:
        """Record ``derived`` as inheriting from this class, in both directions."""
        if derived not in self.children:
            self.children.append(derived)
        if self not in derived.base_classes:
            derived.base_classes.append(self)


class Classes(CollectionBase):
    """Collection of all classes, linked into an inheritance DAG."""

    name = "classes"
    kinds = frozenset({"class", "struct", "union"})

    def create_entity(self, compound_def: CompoundDef) -> Class:
        return Class(compound_def)

    def link_entities(self) -> None:
        """Link derived classes to their bases.

        A class may derive from several bases; its permalink parent is the
        first registered base in its own declaration order.
        """
        classes = [e for e in self.entities_by_id.values() if isinstance(e, Class)]
        for cls in classes:
            for ref in cls.compound_def.derived_compound_refs:
                derived = self.entities_by_id.get(ref.refid or "")
                if not isinstance(derived, Class):
                    logger.debug("%s ignored as derived class of %s", ref.text, cls.id)
                    continue
                cls.add_derived(derived)

        for cls in classes:
            declared = []
            for ref in cls.compound_def.base_compound_refs:
                if ref.refid in self.entities_by_id:
                    declared.append(ref.refid)
                else:
                    logger.debug("%s ignored as base class of %s", ref.text, cls.id)
            cls.base_classes.sort(
                key=lambda base: (
                    declared.index(base.id) if base.id in declared else len(declared)
                )
            )
            if cls.base_classes:
                cls.parent = cls.base_classes[0]
