"""Logic for the groups (topics) collection."""

from doxygen_to_docusaurus.collection_base import CollectionBase
from doxygen_to_docusaurus.compound_entity import CompoundEntity
from doxygen_to_docusaurus.compound_shapes import CompoundDef


class Group(CompoundEntity):
    """A topic defined with ``\\defgroup``; subgroups form a tree."""

    slug = "groups"
    child_element = "innergroup"

    @property
    def page_title(self) -> str:
        return self.title


class Groups(CollectionBase):
    """Collection of all groups."""

    name = "groups"
    kinds = frozenset({"group"})

    def create_entity(self, compound_def: CompoundDef) -> Group:
        return Group(compound_def)
