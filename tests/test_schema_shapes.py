"""Tests for building typed shapes from attributed nodes."""

import pytest

from doxygen_to_docusaurus.compound_shapes import CompoundDef, DoxygenFile, MemberDef
from doxygen_to_docusaurus.description_shapes import (
    CharacterEntity,
    DescriptionBlock,
    DocList,
    LinkedRef,
    MarkupSpan,
    Paragraph,
    ParameterList,
    Ref,
    SimpleSect,
    entity_char,
    parse_description,
)
from doxygen_to_docusaurus.doxyfile_shapes import Doxyfile
from doxygen_to_docusaurus.errors import (
    MissingAttributeError,
    MissingChildError,
    SchemaViolation,
)
from doxygen_to_docusaurus.index_shapes import DoxygenIndex
from doxygen_to_docusaurus.xml_loader import load_xml_string


def _description(xml: str) -> DescriptionBlock:
    return parse_description(load_xml_string(xml))


def test_unknown_attribute_is_a_schema_violation() -> None:
    """Verify an unrecognized attribute names the shape and the prefixed name."""
    with pytest.raises(SchemaViolation) as excinfo:
        _description("<briefdescription><para bogus='1'>x</para></briefdescription>")
    assert excinfo.value.name == "@_bogus"
    assert excinfo.value.shape_name == "Paragraph<para>"
    assert "@_bogus" in str(excinfo.value)


def test_unknown_child_is_a_schema_violation() -> None:
    """Verify an unrecognized element is fatal and named without prefix."""
    with pytest.raises(SchemaViolation) as excinfo:
        _description(
            "<briefdescription><para><blink>x</blink></para></briefdescription>"
        )
    assert excinfo.value.name == "blink"


def test_mixed_content_order_round_trip() -> None:
    """Verify paragraph children keep the source order of text and markup."""
    block = _description(
        "<detaileddescription><para>Use <bold>this</bold> and "
        "<computeroutput>that</computeroutput> now.</para></detaileddescription>"
    )
    para = next(c for c in block.children if isinstance(c, Paragraph))
    kinds = [c if isinstance(c, str) else c.element_name for c in para.children]
    assert kinds == ["Use ", "bold", " and ", "computeroutput", " now."]
    assert all(
        isinstance(c, MarkupSpan) for c in para.children if not isinstance(c, str)
    )


def test_ref_requires_refid_and_kindref() -> None:
    """Verify refs carry both mandatory attributes, non-empty."""
    block = _description(
        '<briefdescription><para><ref refid="classA" kindref="compound">A</ref>'
        "</para></briefdescription>"
    )
    ref = block.children[0].children[0]
    assert isinstance(ref, Ref)
    assert (ref.refid, ref.kindref, ref.text) == ("classA", "compound", "A")

    with pytest.raises(MissingAttributeError):
        _description(
            '<briefdescription><para><ref kindref="compound">A</ref>'
            "</para></briefdescription>"
        )
    with pytest.raises(MissingAttributeError):
        _description(
            '<briefdescription><para><ref refid="" kindref="member">A</ref>'
            "</para></briefdescription>"
        )


def test_description_ref_holds_inline_markup() -> None:
    """Verify a description ref keeps markup such as computeroutput."""
    block = _description(
        '<briefdescription><para><ref refid="classB" kindref="compound">'
        "<computeroutput>B</computeroutput>s</ref></para></briefdescription>"
    )
    ref = block.children[0].children[0]
    assert isinstance(ref.children[0], MarkupSpan)
    assert ref.children[0].element_name == "computeroutput"
    assert ref.text == "Bs"


def test_linked_text_refs_keep_tooltips() -> None:
    """Verify refs in types and code highlights accept a tooltip."""
    member = MemberDef.from_node(
        load_xml_string(
            '<memberdef kind="variable" id="classA_1a1" prot="public">'
            '<type><ref refid="classB" kindref="compound" tooltip="The B class.">'
            "B</ref> *</type><name>b</name></memberdef>"
        )
    )
    assert member.type is not None
    ref, rest = member.type.children
    assert isinstance(ref, LinkedRef)
    assert ref.tooltip == "The B class."
    assert rest == " *"
    assert member.type.plain_text == "B *"

    block = _description(
        "<detaileddescription><para><programlisting><codeline>"
        '<highlight class="normal"><ref refid="classB" kindref="compound" '
        'tooltip="The B class.">B</ref><sp/>b;</highlight>'
        "</codeline></programlisting></para></detaileddescription>"
    )
    listing = block.children[0].children[0]
    highlight = listing.lines[0].highlights[0]
    assert highlight.children[0].tooltip == "The B class."


def test_generic_shapes_share_one_type() -> None:
    """Verify element variants map to one shape type with their element name."""
    block = _description(
        "<detaileddescription><para>"
        "<itemizedlist><listitem><para>a</para></listitem></itemizedlist>"
        "<orderedlist><listitem><para>b</para></listitem></orderedlist>"
        '<simplesect kind="return"><para>r</para></simplesect>'
        '<simplesect kind="note"><para>n</para></simplesect>'
        "</para></detaileddescription>"
    )
    para = block.children[0]
    lists = [c for c in para.children if isinstance(c, DocList)]
    assert [d.element_name for d in lists] == ["itemizedlist", "orderedlist"]
    sects = [c for c in para.children if isinstance(c, SimpleSect)]
    assert [s.kind for s in sects] == ["return", "note"]


def test_parameter_list_shape() -> None:
    """Verify parameter items keep names, directions and descriptions."""
    block = _description(
        '<detaileddescription><para><parameterlist kind="param">'
        "<parameteritem><parameternamelist>"
        '<parametername direction="in">count</parametername>'
        "</parameternamelist>"
        "<parameterdescription><para>How many.</para></parameterdescription>"
        "</parameteritem></parameterlist></para></detaileddescription>"
    )
    params = block.children[0].children[0]
    assert isinstance(params, ParameterList)
    name = params.items[0].name_lists[0].names[0]
    assert name.direction == "in"
    assert name.plain_text == "count"


def test_character_entities() -> None:
    """Verify entity elements, including Doxygen aliases, map to characters."""
    block = _description(
        "<briefdescription><para>a<ndash/>b<nonbreakablespace/>c<copy/>"
        "</para></briefdescription>"
    )
    para = block.children[0]
    chars = [c.char for c in para.children if isinstance(c, CharacterEntity)]
    assert chars == ["\u2013", "\u00a0", "\u00a9"]
    assert entity_char("tm") == "\u2122"


COMPOUND_XML = """<?xml version='1.0' encoding='UTF-8' standalone='no'?>
<doxygen version="1.9.8" xml:lang="en-US">
  <compounddef id="classns_1_1Widget" kind="class" language="C++" prot="public">
    <compoundname>ns::Widget</compoundname>
    <basecompoundref refid="classns_1_1Base" prot="public"
        virt="non-virtual">ns::Base</basecompoundref>
    <includes refid="widget_8h" local="no">widget.h</includes>
    <innerclass refid="classns_1_1Widget_1_1Part"
        prot="private">ns::Widget::Part</innerclass>
    <sectiondef kind="public-func">
      <memberdef kind="function" id="classns_1_1Widget_1a1" prot="public"
          static="no" const="yes" explicit="no" inline="yes" virt="virtual">
        <type>int</type>
        <definition>virtual int ns::Widget::size</definition>
        <argsstring>() const</argsstring>
        <name>size</name>
        <qualifiedname>ns::Widget::size</qualifiedname>
        <briefdescription><para>Number of parts.</para></briefdescription>
        <detaileddescription></detaileddescription>
        <inbodydescription></inbodydescription>
        <location file="widget.h" line="12" column="15"/>
      </memberdef>
    </sectiondef>
    <briefdescription><para>A widget.</para></briefdescription>
    <detaileddescription></detaileddescription>
    <inheritancegraph>
      <node id="1"><label>ns::Widget</label></node>
    </inheritancegraph>
    <location file="widget.h" line="8" column="1"
        bodyfile="widget.h" bodystart="8" bodyend="20"/>
    <listofallmembers>
      <member refid="classns_1_1Widget_1a1" prot="public" virt="virtual">
        <scope>ns::Widget</scope><name>size</name>
      </member>
    </listofallmembers>
  </compounddef>
</doxygen>
"""


def test_compound_document() -> None:
    """Verify a compound document yields a fully typed compounddef."""
    doc = DoxygenFile.from_node(load_xml_string(COMPOUND_XML))
    assert doc.version == "1.9.8"
    assert doc.lang == "en-US"
    (compound,) = doc.compound_defs
    assert isinstance(compound, CompoundDef)
    assert compound.compound_name == "ns::Widget"
    assert [r.refid for r in compound.base_compound_refs] == ["classns_1_1Base"]
    assert compound.includes[0].local is False
    assert [r.refid for r in compound.inner_refs("innerclass")] == [
        "classns_1_1Widget_1_1Part"
    ]
    assert compound.location is not None
    assert compound.location.bodystart == 8  # noqa: PLR2004
    assert compound.all_members[0].scope == "ns::Widget"

    member = compound.section_defs[0].member_defs[0]
    assert isinstance(member, MemberDef)
    assert member.has_flag("const")
    assert member.has_flag("inline")
    assert not member.has_flag("static")
    assert member.virt == "virtual"
    assert member.argsstring == "() const"


def test_compounddef_requires_compoundname() -> None:
    """Verify a compounddef without a name is rejected."""
    with pytest.raises(MissingChildError):
        CompoundDef.from_node(load_xml_string('<compounddef id="x" kind="class"/>'))


def test_index_document() -> None:
    """Verify index.xml lists compounds with their members."""
    index = DoxygenIndex.from_node(
        load_xml_string(
            '<doxygenindex version="1.9.8">'
            '<compound refid="classA" kind="class"><name>A</name>'
            '<member refid="classA_1a1" kind="function"><name>f</name></member>'
            "</compound>"
            '<compound refid="a_8h" kind="file"><name>a.h</name></compound>'
            "</doxygenindex>"
        )
    )
    assert [c.refid for c in index.compounds] == ["classA", "a_8h"]
    assert index.compounds[0].members[0].name == "f"


def test_doxyfile_document() -> None:
    """Verify Doxyfile options expose scalar and list values."""
    doxyfile = Doxyfile.from_node(
        load_xml_string(
            "<doxyfile>"
            '<option id="PROJECT_NAME" default="no" type="string">'
            "<value>Demo</value></option>"
            '<option id="INPUT" default="no" type="stringlist">'
            "<value>src</value><value>include</value></option>"
            "</doxyfile>"
        )
    )
    assert doxyfile.as_dict()["PROJECT_NAME"] == "Demo"
    assert doxyfile.as_dict()["INPUT"] == ["src", "include"]
