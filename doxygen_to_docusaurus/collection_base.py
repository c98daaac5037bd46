"""Shared logic for the compound collections and their hierarchies."""

import logging

from doxygen_to_docusaurus.compound_entity import CompoundEntity
from doxygen_to_docusaurus.compound_shapes import CompoundDef
from doxygen_to_docusaurus.permalinks import sanitize_hierarchical_path

logger = logging.getLogger(__name__)

# Each collection folder holds its own index page under this name.
INDEX_PAGE_NAME = "index"


class CollectionBase:
    """Owns the entities of one category, keyed by compound id.

    Entities are added first; ``build_hierarchy`` links them once every
    compound of every collection exists, and ``compute_permalinks`` runs
    after all hierarchies are built.
    """

    name = ""
    kinds: frozenset[str] = frozenset()

    def __init__(self) -> None:
        """Initialize an empty collection."""
        self.entities_by_id: dict[str, CompoundEntity] = {}
        self._top_level: list[CompoundEntity] = []
        self._built = False

    def __len__(self) -> int:
        return len(self.entities_by_id)

    def create_entity(self, compound_def: CompoundDef) -> CompoundEntity | None:
        """Return the entity for a compounddef, or None to skip it."""
        raise NotImplementedError

    def add_compound(self, compound_def: CompoundDef) -> CompoundEntity | None:
        """Register a compound; relations are resolved later."""
        if self._built:
            msg = f"{self.name}: cannot add {compound_def.id} after build_hierarchy()"
            raise RuntimeError(msg)
        entity = self.create_entity(compound_def)
        if entity is None:
            return None
        self.entities_by_id[entity.id] = entity
        return entity

    @property
    def top_level(self) -> list[CompoundEntity]:
        """Entities without a parent, in registration order."""
        if not self._built:
            msg = f"{self.name}: top_level requested before build_hierarchy()"
            raise RuntimeError(msg)
        return list(self._top_level)

    def build_hierarchy(self) -> None:
        """Link parents and children; repeated calls are no-ops."""
        if self._built:
            logger.debug("Hierarchy of %s already built, skipping", self.name)
            return
        self.link_entities()
        self._top_level = [
            entity for entity in self.entities_by_id.values() if entity.parent is None
        ]
        self._built = True

    def link_entities(self) -> None:
        """Resolve each entity's declared child ids into parent/child links."""
        for entity in self.entities_by_id.values():
            for child_id in entity.child_ids():
                child = self.entities_by_id.get(child_id)
                if child is None:
                    logger.debug(
                        "%s: child %s of %s not found", self.name, child_id, entity.id
                    )
                    continue
                entity.add_child(child)

    def compute_permalinks(self) -> None:
        """Assign every entity a permalink derived from its parent chain.

        Collisions get ``-1``, ``-2``... appended to the colliding segment.
        The top-level ``index`` segment of each slug is reserved for the
        collection index page.
        """
        if not self._built:
            msg = f"{self.name}: permalinks requested before build_hierarchy()"
            raise RuntimeError(msg)
        used: set[tuple[str, str]] = {
            (e.slug, e.permalink)
            for e in self.entities_by_id.values()
            if e.permalink is not None
        }
        used.update((e.slug, INDEX_PAGE_NAME) for e in self.entities_by_id.values())
        for entity in self.entities_by_id.values():
            self._permalink_of(entity, used)

    def _permalink_of(
        self, entity: CompoundEntity, used: set[tuple[str, str]]
    ) -> str:
        if entity.permalink is not None:
            return entity.permalink
        prefix = ""
        if entity.parent is not None:
            prefix = self._permalink_of(entity.parent, used) + "/"
        segment = sanitize_hierarchical_path(entity.path_name)
        candidate = prefix + segment
        suffix = 0
        while (entity.slug, candidate) in used:
            suffix += 1
            candidate = f"{prefix}{segment}-{suffix}"
        if suffix:
            logger.warning(
                "Permalink %s of %s renamed to %s",
                prefix + segment,
                entity.id,
                candidate,
            )
        used.add((entity.slug, candidate))
        entity.permalink = candidate
        return candidate
