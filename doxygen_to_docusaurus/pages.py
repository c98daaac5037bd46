"""Logic for the pages collection (``\\page`` compounds)."""

from doxygen_to_docusaurus.collection_base import CollectionBase
from doxygen_to_docusaurus.compound_entity import CompoundEntity
from doxygen_to_docusaurus.compound_shapes import CompoundDef

# The main page is rendered into the top index, not as a page of its own.
MAIN_PAGE_ID = "indexpage"


class Page(CompoundEntity):
    """A free-form documentation page; sub-pages form a tree."""

    slug = "pages"
    child_element = "innerpage"

    @property
    def page_title(self) -> str:
        return self.title


class Pages(CollectionBase):
    """Collection of all pages."""

    name = "pages"
    kinds = frozenset({"page"})

    def create_entity(self, compound_def: CompoundDef) -> Page:
        return Page(compound_def)
