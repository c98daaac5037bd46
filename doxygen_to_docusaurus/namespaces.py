"""Logic for the namespaces collection."""

import logging

from doxygen_to_docusaurus.collection_base import CollectionBase
from doxygen_to_docusaurus.compound_entity import CompoundEntity
from doxygen_to_docusaurus.compound_shapes import CompoundDef

logger = logging.getLogger(__name__)


class Namespace(CompoundEntity):
    """A namespace; nested namespaces form a tree."""

    slug = "namespaces"
    child_element = "innernamespace"

    @property
    def path_name(self) -> str:
        return self.name


def is_anonymous_namespace(name: str) -> bool:
    """Return True for unnamed namespaces, which get no page."""
    return not name or "anonymous_namespace{" in name.split("::")[-1]


class Namespaces(CollectionBase):
    """Collection of all named namespaces."""

    name = "namespaces"
    kinds = frozenset({"namespace"})

    def create_entity(self, compound_def: CompoundDef) -> Namespace | None:
        if is_anonymous_namespace(compound_def.compound_name):
            logger.debug("Anonymous namespace %s not registered", compound_def.id)
            return None
        return Namespace(compound_def)
