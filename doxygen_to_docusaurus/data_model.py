"""Logic for loading a Doxygen XML export into typed shapes."""

import logging
from dataclasses import dataclass, field
from pathlib import Path

from doxygen_to_docusaurus.compound_shapes import CompoundDef, DoxygenFile
from doxygen_to_docusaurus.doxyfile_shapes import Doxyfile
from doxygen_to_docusaurus.index_shapes import DoxygenIndex
from doxygen_to_docusaurus.xml_loader import load_xml_file

logger = logging.getLogger(__name__)


@dataclass
class DataModel:
    """Everything read from one XML output folder."""

    index: DoxygenIndex
    compounds: list[CompoundDef] = field(default_factory=list)
    doxyfile: Doxyfile | None = None

    @property
    def doxygen_version(self) -> str:
        return self.index.version


def load_data_model(xml_dir: Path) -> DataModel:
    """Read ``index.xml``, every compound it lists, and ``Doxyfile.xml``."""
    index_path = xml_dir / "index.xml"
    if not index_path.is_file():
        msg = f"No index.xml found under: {xml_dir} (is GENERATE_XML enabled?)"
        raise SystemExit(msg)

    index = DoxygenIndex.from_node(load_xml_file(index_path))
    data_model = DataModel(index=index)

    seen: set[str] = set()
    for compound in index.compounds:
        if compound.refid in seen:
            continue
        seen.add(compound.refid)
        compound_path = xml_dir / f"{compound.refid}.xml"
        if not compound_path.is_file():
            logger.warning("Compound file %s is missing", compound_path)
            continue
        doxygen_file = DoxygenFile.from_node(load_xml_file(compound_path))
        data_model.compounds.extend(doxygen_file.compound_defs)

    doxyfile_path = xml_dir / "Doxyfile.xml"
    if doxyfile_path.is_file():
        data_model.doxyfile = Doxyfile.from_node(load_xml_file(doxyfile_path))
    else:
        logger.warning("No Doxyfile.xml under %s, using empty options", xml_dir)

    print(f"Loaded {len(data_model.compounds)} compounds from: {xml_dir}")
    return data_model
