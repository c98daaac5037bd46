"""Logic for the files-and-folders collection."""

import logging

from doxygen_to_docusaurus.collection_base import CollectionBase
from doxygen_to_docusaurus.compound_entity import CompoundEntity
from doxygen_to_docusaurus.compound_shapes import CompoundDef

logger = logging.getLogger(__name__)


class Folder(CompoundEntity):
    """A source folder; holds sub-folders and files."""

    slug = "folders"

    @property
    def name(self) -> str:
        return self.compound_name.rstrip("/").split("/")[-1]

    @property
    def path_name(self) -> str:
        return self.name

    @property
    def page_title(self) -> str:
        return f"The {self.name} Folder Reference"

    def child_ids(self) -> list[str]:
        refs = self.compound_def.inner_refs("innerdir")
        refs = refs + self.compound_def.inner_refs("innerfile")
        return [ref.refid for ref in refs]


class File(CompoundEntity):
    """A source file; belongs to at most one folder."""

    slug = "files"

    @property
    def name(self) -> str:
        return self.compound_name.split("/")[-1]

    @property
    def path_name(self) -> str:
        return self.name

    @property
    def page_title(self) -> str:
        return f"The {self.name} File Reference"


class FilesAndFolders(CollectionBase):
    """Collection of all files and folders; folders own files and sub-folders."""

    name = "files"
    kinds = frozenset({"file", "dir"})

    def create_entity(self, compound_def: CompoundDef) -> CompoundEntity:
        if compound_def.kind == "dir":
            return Folder(compound_def)
        return File(compound_def)

    def link_entities(self) -> None:
        super().link_entities()
        for entity in self.entities_by_id.values():
            if isinstance(entity, File) and entity.parent is None:
                logger.debug("File %s is not in any folder", entity.compound_name)
