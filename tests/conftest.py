"""Shared fixtures for building Doxygen XML snippets."""

from collections.abc import Callable
from pathlib import Path

import pytest

from doxygen_to_docusaurus.compound_shapes import CompoundDef
from doxygen_to_docusaurus.xml_loader import load_xml_string

CompoundFactory = Callable[..., CompoundDef]


def compound_xml(compound_id: str, kind: str, name: str, body: str = "") -> str:
    """Return a ``<compounddef>`` element for the given id, kind and name."""
    return (
        f'<compounddef id="{compound_id}" kind="{kind}" language="C++">'
        f"<compoundname>{name}</compoundname>{body}</compounddef>"
    )


@pytest.fixture
def make_compound() -> CompoundFactory:
    """Build a CompoundDef from an id, kind, name and optional inner XML."""

    def factory(compound_id: str, kind: str, name: str, body: str = "") -> CompoundDef:
        return CompoundDef.from_node(
            load_xml_string(compound_xml(compound_id, kind, name, body))
        )

    return factory


@pytest.fixture
def xml_dir(tmp_path: Path) -> Path:
    """Write a small but complete Doxygen XML export and return its folder."""
    folder = tmp_path / "xml"
    folder.mkdir()
    compounds = {
        "classBase": (
            "class",
            "Base",
            '<derivedcompoundref refid="classDerived" prot="public" '
            'virt="non-virtual">Derived</derivedcompoundref>'
            "<briefdescription><para>The base.</para></briefdescription>"
            '<location file="base.h" line="3"/>',
        ),
        "classDerived": (
            "class",
            "Derived",
            '<basecompoundref refid="classBase" prot="public" '
            'virt="non-virtual">Base</basecompoundref>'
            '<includes refid="derived_8h" local="no">derived.h</includes>'
            '<sectiondef kind="public-func">'
            '<memberdef kind="function" id="classDerived_1a1" prot="public" '
            'static="no">'
            "<type>bool</type><definition>bool Derived::operator==</definition>"
            "<argsstring>(const Derived &amp;other) const</argsstring>"
            "<name>operator==</name>"
            "<param><type>const <ref refid=\"classDerived\" kindref=\"compound\">"
            "Derived</ref> &amp;</type><declname>other</declname></param>"
            "<briefdescription><para>Compare with "
            '<ref refid="classBase" kindref="compound">Base</ref> and '
            '<ref refid="classMissing" kindref="compound">Missing</ref>.'
            "</para></briefdescription>"
            '<location file="derived.h" line="9"/>'
            "</memberdef>"
            '<memberdef kind="function" id="classDerived_1a2" prot="public" '
            'static="no">'
            "<type/><definition>Derived::Derived</definition>"
            "<argsstring>()</argsstring><name>Derived</name>"
            '<location file="derived.h" line="7"/>'
            "</memberdef>"
            "</sectiondef>"
            "<briefdescription><para>The derived.</para></briefdescription>"
            "<detaileddescription><para>Details with "
            '<ref refid="classDerived_1a1" kindref="member">operator==</ref>.'
            "</para></detaileddescription>"
            '<location file="derived.h" line="5"/>'
            "<listofallmembers>"
            '<member refid="classDerived_1a2" prot="public" virt="non-virtual">'
            "<scope>Derived</scope><name>Derived</name></member>"
            '<member refid="classDerived_1a1" prot="public" virt="non-virtual">'
            "<scope>Derived</scope><name>operator==</name></member>"
            "</listofallmembers>",
        ),
        "dir_src": (
            "dir",
            "src",
            '<innerfile refid="derived_8h">derived.h</innerfile>'
            '<location file="src/"/>',
        ),
        "derived_8h": (
            "file",
            "derived.h",
            '<innerclass refid="classDerived" prot="public">Derived</innerclass>'
            '<location file="src/derived.h"/>',
        ),
        "namespacens": ("namespace", "ns", ""),
        "exampleA": ("example", "a.cpp", ""),
        "indexpage": (
            "page",
            "index",
            "<title>Demo</title><detaileddescription><para>Welcome to "
            '<ref refid="classBase" kindref="compound">Base</ref>.</para>'
            '<para><image type="html" name="logo.png">Logo</image></para>'
            "</detaileddescription>",
        ),
    }
    entries = []
    for refid, (kind, name, body) in compounds.items():
        entries.append(
            f'<compound refid="{refid}" kind="{kind}"><name>{name}</name></compound>'
        )
        (folder / f"{refid}.xml").write_text(
            f'<?xml version="1.0"?><doxygen version="1.9.8">'
            f"{compound_xml(refid, kind, name, body)}</doxygen>",
            encoding="utf-8",
        )
    (folder / "index.xml").write_text(
        f'<?xml version="1.0"?><doxygenindex version="1.9.8">{"".join(entries)}'
        "</doxygenindex>",
        encoding="utf-8",
    )
    (folder / "Doxyfile.xml").write_text(
        '<?xml version="1.0"?><doxyfile version="1.9.8">'
        '<option id="PROJECT_NAME" default="no" type="string"><value>Demo</value>'
        "</option>"
        '<option id="PROJECT_BRIEF" default="no" type="string">'
        "<value>Demo widgets</value></option></doxyfile>",
        encoding="utf-8",
    )
    return folder
