"""Tests for the rendering dispatch and the shape renderers."""

from collections.abc import Callable

import pytest

from doxygen_to_docusaurus.compound_shapes import (
    CompoundDef,
    IncludeRef,
    Location,
    MemberDef,
)
from doxygen_to_docusaurus.description_shapes import DescriptionBlock, parse_description
from doxygen_to_docusaurus.errors import DispatchError
from doxygen_to_docusaurus.member_renderer import (
    join_with_and,
    member_prototype,
    render_member_to_lines,
)
from doxygen_to_docusaurus.renderers import RenderContext, Renderers, escape
from doxygen_to_docusaurus.sections import Member
from doxygen_to_docusaurus.view_model import ViewModel, ViewModelBuilder
from doxygen_to_docusaurus.xml_loader import load_xml_string

CompoundFactory = Callable[..., CompoundDef]

HTML = RenderContext(dialect="html", compound_id="classA")
MARKDOWN = RenderContext(dialect="markdown", compound_id="classA")
TEXT = RenderContext(dialect="text", compound_id="classA")


@pytest.fixture
def view_model(make_compound: CompoundFactory) -> ViewModel:
    """Return a finalized model holding classA and classB."""
    builder = ViewModelBuilder(base_url="/api")
    builder.add_compound(make_compound("classA", "class", "A"))
    builder.add_compound(make_compound("classB", "class", "B"))
    return builder.finalize()


@pytest.fixture
def renderers(view_model: ViewModel) -> Renderers:
    """Return the fully registered renderers of the model."""
    return view_model.renderers


def _detailed(body: str) -> DescriptionBlock:
    return parse_description(
        load_xml_string(f"<detaileddescription>{body}</detaileddescription>")
    )


def _member(attributes: str, body: str) -> Member:
    return Member(
        MemberDef.from_node(
            load_xml_string(
                f'<memberdef id="classA_1a1" prot="public" {attributes}>{body}'
                "</memberdef>"
            )
        )
    )


class _Bare:
    """A shape type nobody registers."""


def test_escape_per_dialect() -> None:
    """Verify each dialect escapes exactly its special characters."""
    text = "a<b & [c]*_"
    assert escape(text, "text") == text
    assert escape(text, "html") == "a&lt;b &amp; [c]*_"
    assert escape(text, "markdown") == "a&lt;b &amp; \\[c\\]\\*\\_"
    assert escape("Initialise with {0, 1}", "html") == (
        "Initialise with &#123;0, 1&#125;"
    )
    assert escape('say "hi"', "markdown") == "say &quot;hi&quot;"
    with pytest.raises(ValueError, match="dialect"):
        escape(text, "rst")


def test_unregistered_type_is_a_dispatch_error(renderers: Renderers) -> None:
    """Verify a type with no renderer in either family is fatal."""
    with pytest.raises(DispatchError) as excinfo:
        renderers.render_string(_Bare(), HTML)
    assert excinfo.value.type_name == "_Bare"
    with pytest.raises(DispatchError):
        renderers.render_lines([_Bare()], HTML)


def test_families_fall_back_to_each_other(view_model: ViewModel) -> None:
    """Verify a string-only renderer serves lines and vice versa."""
    renderers = Renderers(view_model.resolver)
    renderers.register_string(_Bare, lambda element, r, ctx: "one\ntwo")
    assert renderers.render_lines(_Bare(), HTML) == ["one", "two"]

    other = Renderers(view_model.resolver)
    other.register_lines(_Bare, lambda element, r, ctx: ["one", "two"])
    assert other.render_string(_Bare(), HTML) == "one\ntwo"


def test_none_strings_and_lists(renderers: Renderers) -> None:
    """Verify None and blank strings render empty and lists concatenate."""
    assert renderers.render_string(None, HTML) == ""
    assert renderers.render_lines(None, HTML) == []
    assert renderers.render_lines("   ", HTML) == []
    assert renderers.render_string(["a", "<b>"], HTML) == "a&lt;b&gt;"


def test_markup_per_dialect(renderers: Renderers) -> None:
    """Verify markup spans become Markdown markers or HTML tags."""
    block = _detailed(
        "<para>Use <bold>this</bold> and <computeroutput>that</computeroutput>"
        "</para>"
    )
    assert renderers.render_string(block, MARKDOWN) == "Use **this** and `that`"
    assert renderers.render_string(block, HTML) == (
        "Use <b>this</b> and <code>that</code>"
    )
    assert renderers.render_string(block, TEXT) == "Use this and that"
    assert renderers.render_lines(block, HTML) == [
        "Use <b>this</b> and <code>that</code>",
        "",
    ]


def test_refs_link_or_fall_back_to_text(renderers: Renderers) -> None:
    """Verify known refs become links and dangling refs plain text."""
    block = _detailed(
        '<para>See <ref refid="classB" kindref="compound">B</ref> and '
        '<ref refid="classGone" kindref="compound">Gone</ref>.</para>'
    )
    assert renderers.render_string(block, HTML) == (
        'See <a href="/api/classes/b">B</a> and Gone.'
    )
    assert renderers.render_string(block, MARKDOWN) == (
        "See [B](/api/classes/b) and Gone."
    )


def test_refs_wrap_inline_markup(renderers: Renderers) -> None:
    """Verify markup inside a description ref stays inside the link."""
    block = _detailed(
        '<para><ref refid="classB" kindref="compound">'
        "<computeroutput>B</computeroutput></ref></para>"
    )
    assert renderers.render_string(block, HTML) == (
        '<a href="/api/classes/b"><code>B</code></a>'
    )


def test_tooltips_become_link_titles(renderers: Renderers) -> None:
    """Verify type and code refs carry their tooltip as the link title."""
    member = _member(
        'kind="variable"',
        '<type><ref refid="classB" kindref="compound" tooltip="The &quot;B&quot;.">'
        "B</ref> *</type><name>b</name>",
    )
    assert renderers.render_string(member.definition.type, HTML) == (
        '<a href="/api/classes/b" title="The &quot;B&quot;.">B</a> *'
    )
    assert renderers.render_string(member.definition.type, MARKDOWN) == (
        '[B](/api/classes/b "The &quot;B&quot;.") \\*'
    )

    block = _detailed(
        '<para><programlisting><codeline><highlight class="normal">'
        '<ref refid="classB" kindref="compound" tooltip="The B.">B</ref>'
        "<sp/>b;</highlight></codeline></programlisting></para>"
    )
    assert renderers.render_lines(block, HTML)[1] == (
        '<a href="/api/classes/b" title="The B.">B</a> b;'
    )


def test_member_ref_on_same_page(renderers: Renderers) -> None:
    """Verify a ref to a member of the current compound is an anchor link."""
    block = _detailed(
        '<para><ref refid="classA_1_1run" kindref="member">run</ref></para>'
    )
    assert renderers.render_string(block, HTML) == '<a href="#run">run</a>'


def test_note_is_an_admonition(renderers: Renderers) -> None:
    """Verify note, warning and attention map to admonitions."""
    block = _detailed(
        '<para><simplesect kind="note"><para>Careful.</para></simplesect>'
        '<simplesect kind="attention"><para>Danger.</para></simplesect></para>'
    )
    assert renderers.render_lines(block, HTML) == [
        ":::note",
        "Careful.",
        ":::",
        "",
        ":::danger",
        "Danger.",
        ":::",
        "",
        "",
    ]


def test_return_section_is_a_definition_list(renderers: Renderers) -> None:
    """Verify other simple sections render with a titled definition list."""
    block = _detailed(
        '<para>Text.<simplesect kind="return"><para>The size.</para></simplesect>'
        "</para>"
    )
    lines = renderers.render_lines(block, HTML)
    assert lines[:4] == [
        "Text.",
        "",
        '<dl class="doxySectionUser return">',
        "<dt>Returns</dt>",
    ]
    assert "The size." in lines


def test_lists(renderers: Renderers) -> None:
    """Verify itemized and ordered lists render as HTML lists."""
    block = _detailed(
        "<para><itemizedlist><listitem><para>a</para></listitem>"
        "<listitem><para>b</para></listitem></itemizedlist>"
        "<orderedlist><listitem><para>c</para></listitem></orderedlist></para>"
    )
    lines = renderers.render_lines(block, HTML)
    assert lines[:4] == ["<ul>", "<li>a</li>", "<li>b</li>", "</ul>"]
    assert lines[5:8] == ["<ol>", "<li>c</li>", "</ol>"]


def test_parameter_list(renderers: Renderers) -> None:
    """Verify parameters render as a table with their directions."""
    block = _detailed(
        '<para><parameterlist kind="param"><parameteritem><parameternamelist>'
        '<parametername direction="in">count</parametername>'
        "</parameternamelist><parameterdescription><para>How many.</para>"
        "</parameterdescription></parameteritem></parameterlist></para>"
    )
    lines = renderers.render_lines(block, HTML)
    assert "<dt>Parameters</dt>" in lines
    assert (
        '<tr><td class="doxyParamName">[in] count</td>'
        '<td class="doxyParamDescription">How many.</td></tr>'
    ) in lines


def test_verbatim_is_a_code_block(renderers: Renderers) -> None:
    """Verify verbatim text leaves the paragraph as a fenced block."""
    block = _detailed("<para>Before<verbatim>x = 1\n</verbatim></para>")
    assert renderers.render_lines(block, HTML) == [
        "Before",
        "",
        "```",
        "x = 1",
        "```",
        "",
        "",
    ]


def test_program_listing(renderers: Renderers) -> None:
    """Verify listings keep line numbers and highlight classes."""
    block = _detailed(
        '<para><programlisting><codeline lineno="3">'
        '<highlight class="keyword">int</highlight>'
        '<highlight class="normal"><sp/>x;</highlight></codeline>'
        "</programlisting></para>"
    )
    lines = renderers.render_lines(block, HTML)
    assert lines[0] == '<pre class="doxyProgramListing">'
    assert lines[1] == (
        '<span class="doxyLineNumber">    3</span> '
        '<span class="doxyHighlight keyword">int</span> x;'
    )


def test_location_variants(renderers: Renderers) -> None:
    """Verify declaration and definition lines for each location shape."""

    def render(attributes: str) -> list[str]:
        location = Location.from_node(load_xml_string(f"<location {attributes}/>"))
        return renderers.render_lines(location, TEXT)

    assert render('file="a.h" line="3" bodyfile="a.cpp" bodystart="10"') == [
        "Declaration at line 3 of file a.h, definition at line 10 of file a.cpp.",
        "",
    ]
    assert render('file="a.h" line="3" bodyfile="a.h" bodystart="3"') == [
        "Definition at line 3 of file a.h.",
        "",
    ]
    assert render('file="a.h" line="3"') == ["Declaration at line 3 of file a.h.", ""]
    assert render('file="a.h"') == ["Declared in file a.h.", ""]


def test_include_line(renderers: Renderers) -> None:
    """Verify system and local includes use the matching delimiters."""
    system = IncludeRef.from_node(
        load_xml_string('<includes refid="classB" local="no">b.h</includes>')
    )
    local = IncludeRef.from_node(
        load_xml_string('<includes local="yes">util.h</includes>')
    )
    assert renderers.render_string(system, HTML) == (
        '#include &lt;<a href="/api/classes/b">b.h</a>&gt;'
    )
    assert renderers.render_string(local, TEXT) == '#include "util.h"'


def test_join_with_and() -> None:
    """Verify lists are joined with commas and a final ``and``."""
    assert join_with_and([]) == ""
    assert join_with_and(["a"]) == "a"
    assert join_with_and(["a", "b", "c"]) == "a, b and c"


def test_member_prototypes(renderers: Renderers) -> None:
    """Verify prototypes for functions, strong enums and macros."""
    function = _member(
        'kind="function" const="yes"',
        "<type>int</type><definition>int A::size</definition>"
        "<argsstring>() const</argsstring><name>size</name>",
    )
    assert member_prototype(function.definition, renderers, HTML) == (
        "int A::size() const"
    )
    enum = _member(
        'kind="enum" strong="yes"',
        "<type>int</type><name>Mode</name><qualifiedname>A::Mode</qualifiedname>",
    )
    assert member_prototype(enum.definition, renderers, HTML) == (
        "enum class A::Mode : int"
    )
    macro = _member(
        'kind="define"',
        "<name>MAX</name><param><defname>a</defname></param>"
        "<param><defname>b</defname></param>"
        "<initializer>((a) &gt; (b) ? (a) : (b))</initializer>",
    )
    assert member_prototype(macro.definition, renderers, HTML) == (
        "#define MAX(a, b) ((a) > (b) ? (a) : (b))"
    )


def test_member_detail_block(renderers: Renderers) -> None:
    """Verify a member renders heading, prototype, labels and docs in order."""
    member = _member(
        'kind="function" inline="yes" virt="virtual"',
        "<type>void</type><definition>virtual void A::run</definition>"
        "<argsstring>()</argsstring><name>run</name>"
        "<reimplements refid=\"classB_1a9\">run</reimplements>"
        "<briefdescription><para>Runs it.</para></briefdescription>"
        '<location file="a.h" line="4"/>',
    )
    lines = render_member_to_lines(member, renderers, HTML)
    assert lines[0] == "### run {#a1}"
    assert lines[2] == "```cpp\nvirtual void A::run()\n```"
    assert lines[4] == (
        '<span class="doxyMemberLabel">inline</span> '
        '<span class="doxyMemberLabel">virtual</span>'
    )
    assert "Runs it." in lines
    assert 'Reimplements <a href="/api/classes/b/#a9">run</a>.' in lines
    assert "Declaration at line 4 of file a.h." in lines

    quiet = render_member_to_lines(member, renderers, HTML, render_location=False)
    assert "Declaration at line 4 of file a.h." not in quiet


def test_enum_values_table(renderers: Renderers) -> None:
    """Verify enumerators are listed in a table with their anchors."""
    member = _member(
        'kind="enum"',
        "<name>Mode</name>"
        '<enumvalue id="classA_1a1aa2" prot="public"><name>Fast</name>'
        "<initializer>= 1</initializer>"
        "<briefdescription><para>Quick.</para></briefdescription></enumvalue>",
    )
    lines = render_member_to_lines(member, renderers, HTML)
    assert "| Enumeration values | Description |" in lines
    assert '| <a id="a1aa2"></a>Fast = 1 | Quick. |' in lines
