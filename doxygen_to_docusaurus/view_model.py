"""Logic for registering compounds and finalizing them into a view model.

Compounds are added to a ``ViewModelBuilder``. ``finalize()`` builds every
hierarchy, computes permalinks, organizes sections and renders descriptions,
then returns the ``ViewModel`` the page writers query. Hierarchy-dependent
lookups exist only on the finalized model.
"""

import logging
from typing import TYPE_CHECKING, Any

from doxygen_to_docusaurus.classes import Classes
from doxygen_to_docusaurus.collection_base import CollectionBase
from doxygen_to_docusaurus.compound_entity import CompoundEntity, RenderedDescriptions
from doxygen_to_docusaurus.compound_page import render_compound_to_lines
from doxygen_to_docusaurus.compound_renderers import register_compound_renderers
from doxygen_to_docusaurus.compound_shapes import CompoundDef
from doxygen_to_docusaurus.description_renderers import register_description_renderers
from doxygen_to_docusaurus.errors import MissingPermalinkError
from doxygen_to_docusaurus.files_and_folders import FilesAndFolders
from doxygen_to_docusaurus.groups import Groups
from doxygen_to_docusaurus.namespaces import Namespaces
from doxygen_to_docusaurus.pages import MAIN_PAGE_ID, Pages
from doxygen_to_docusaurus.reference_resolver import ReferenceResolver
from doxygen_to_docusaurus.renderers import RenderContext, Renderers
from doxygen_to_docusaurus.sections import organize_sections

if TYPE_CHECKING:
    from doxygen_to_docusaurus.conversion_report import ConversionReport
    from doxygen_to_docusaurus.data_model import DataModel

logger = logging.getLogger(__name__)

TODO_BRIEF = "TODO: add a brief description."


def create_collections() -> dict[str, CollectionBase]:
    """Return one empty collection per category, in output order."""
    collections: list[CollectionBase] = [
        Groups(),
        Namespaces(),
        Classes(),
        FilesAndFolders(),
        Pages(),
    ]
    return {collection.name: collection for collection in collections}


class ViewModelBuilder:
    """Collects compounds until ``finalize()`` links and freezes them."""

    def __init__(
        self,
        *,
        base_url: str = "/",
        options: dict[str, Any] | None = None,
        report: "ConversionReport | None" = None,
    ) -> None:
        """Create a builder with empty collections."""
        self.base_url = base_url if base_url.endswith("/") else base_url + "/"
        self.options = options or {}
        self.report = report
        self.collections = create_collections()
        self.collection_by_kind = {
            kind: collection
            for collection in self.collections.values()
            for kind in collection.kinds
        }
        self.compounds_by_id: dict[str, CompoundEntity] = {}
        self.doxyfile_options: dict[str, Any] = {}
        self.main_page: CompoundDef | None = None
        self._finalized = False

    def add_compound(self, compound_def: CompoundDef) -> CompoundEntity | None:
        """Register a compound in the collection for its kind."""
        if self._finalized:
            msg = f"Cannot add {compound_def.id} after finalize()"
            raise RuntimeError(msg)
        skip_kinds = self.options.get("skip_kinds") or []
        collection = self.collection_by_kind.get(compound_def.kind)
        if collection is None or compound_def.kind in skip_kinds:
            logger.info(
                "Compound %s of kind %s skipped", compound_def.id, compound_def.kind
            )
            if self.report is not None:
                self.report.add_skipped_compound(compound_def.id, compound_def.kind)
            return None
        if compound_def.id == MAIN_PAGE_ID:
            self.main_page = compound_def
            return None
        if compound_def.id in self.compounds_by_id:
            logger.warning("Duplicate compound %s ignored", compound_def.id)
            return self.compounds_by_id[compound_def.id]
        entity = collection.add_compound(compound_def)
        if entity is not None:
            self.compounds_by_id[entity.id] = entity
        return entity

    def add_data_model(self, data_model: "DataModel") -> None:
        """Register every compound of a loaded XML folder."""
        for compound_def in data_model.compounds:
            self.add_compound(compound_def)
        if data_model.doxyfile is not None:
            self.doxyfile_options = data_model.doxyfile.as_dict()

    def finalize(self) -> "ViewModel":
        """Link, name and pre-render everything; callable once."""
        if self._finalized:
            msg = "finalize() already called"
            raise RuntimeError(msg)
        self._finalized = True

        for collection in self.collections.values():
            collection.build_hierarchy()
        for collection in self.collections.values():
            collection.compute_permalinks()

        view_model = ViewModel(
            self.compounds_by_id,
            self.collections,
            base_url=self.base_url,
            options=self.options,
            doxyfile_options=self.doxyfile_options,
            report=self.report,
            main_page=self.main_page,
        )
        self._initialize_entities(view_model)
        return view_model

    def _initialize_entities(self, view_model: "ViewModel") -> None:
        """Organize sections and render descriptions once links exist."""
        suggest_todo = bool(self.options.get("suggest_todo_descriptions", False))
        for entity in self.compounds_by_id.values():
            compound_def = entity.compound_def
            entity.sections = organize_sections(
                compound_def.section_defs, entity.section_class_name
            )
            ctx = RenderContext(dialect="html", compound_id=entity.id)
            brief = view_model.renderers.render_string(
                compound_def.brief_description, ctx
            ).strip()
            detailed = view_model.renderers.render_lines(
                compound_def.detailed_description, ctx
            )
            while detailed and not detailed[-1].strip():
                detailed.pop()
            if not brief and suggest_todo:
                brief = TODO_BRIEF
            entity.descriptions = RenderedDescriptions(
                brief=brief, detailed_lines=detailed
            )


class ViewModel:
    """The finalized registry: entities, permalinks and renderers."""

    def __init__(
        self,
        compounds_by_id: dict[str, CompoundEntity],
        collections: dict[str, CollectionBase],
        *,
        base_url: str,
        options: dict[str, Any],
        doxyfile_options: dict[str, Any],
        report: "ConversionReport | None" = None,
        main_page: CompoundDef | None = None,
    ) -> None:
        """Wrap finalized collections and set up reference resolution."""
        self._compounds_by_id = compounds_by_id
        self.collections = collections
        self.base_url = base_url
        self.options = options
        self.doxyfile_options = doxyfile_options
        self.report = report
        self.resolver = ReferenceResolver(self, report)
        self.main_page = main_page
        self.renderers = Renderers(self.resolver, images_url=self.images_url)
        register_description_renderers(self.renderers)
        register_compound_renderers(self.renderers)

    @property
    def compounds(self) -> list[CompoundEntity]:
        return list(self._compounds_by_id.values())

    @property
    def project_name(self) -> str:
        return str(self.doxyfile_options.get("PROJECT_NAME", ""))

    @property
    def project_brief(self) -> str:
        return str(self.doxyfile_options.get("PROJECT_BRIEF", ""))

    @property
    def images_url(self) -> str:
        """URL prefix under which the copied images are served."""
        site = str(self.options.get("base_url", "/")).rstrip("/")
        folder = str(self.options.get("images_folder", "img/doxygen")).strip("/")
        return f"{site}/{folder}/"

    def get_compound(self, compound_id: str) -> CompoundEntity | None:
        return self._compounds_by_id.get(compound_id)

    def top_level(self, collection_name: str) -> list[CompoundEntity]:
        """Entities of one collection that have no parent."""
        return self.collections[collection_name].top_level

    def page_path(self, compound_id: str) -> str:
        """Return ``<slug>/<permalink>`` for a registered compound."""
        entity = self.get_compound(compound_id)
        if entity is None or entity.permalink is None:
            raise MissingPermalinkError(compound_id)
        return f"{entity.slug}/{entity.permalink}"

    def get_page_permalink(self, compound_id: str) -> str:
        """Return the absolute URL path of a compound's page."""
        return self.base_url + self.page_path(compound_id)

    def resolve_reference(
        self, identifier: str, kind: str, current_id: str | None = None
    ) -> str | None:
        """Return a link for a compound or member reference, or None."""
        return self.resolver.resolve(identifier, kind, current_id)

    def render_compound_to_lines(self, entity: CompoundEntity) -> list[str]:
        return render_compound_to_lines(entity, self)

    def render_main_page_lines(self) -> list[str]:
        """Render the detailed description of the main page, if any."""
        if self.main_page is None:
            return []
        ctx = RenderContext(dialect="html", compound_id=MAIN_PAGE_ID)
        lines = self.renderers.render_lines(self.main_page.detailed_description, ctx)
        while lines and not lines[-1].strip():
            lines.pop()
        return lines
