"""Shapes for Doxygen description content (paragraphs, markup, lists, tables).

Content models here are mixed: text runs and elements are kept together in
``children`` in document order, since rendering depends on that order.
Elements that differ only by their tag share one generic shape that keeps
the tag in ``element_name``.
"""

from dataclasses import dataclass
from html.entities import name2codepoint
from typing import Any

from doxygen_to_docusaurus.attributed_node import AttributedNode, get_attribute_str
from doxygen_to_docusaurus.errors import MissingAttributeError, SchemaViolation
from doxygen_to_docusaurus.schema_node import (
    Shape,
    ShapeFactory,
    check_attributes,
    iter_elements,
    optional_bool,
    optional_int,
    optional_str,
    parse_mixed,
    parse_text_only,
    shape_label,
)

Content = Any  # str | Shape

MARKUP_ELEMENTS = frozenset(
    {
        "bold",
        "s",
        "strike",
        "underline",
        "emphasis",
        "computeroutput",
        "subscript",
        "superscript",
        "center",
        "small",
        "cite",
        "del",
        "ins",
        "preformatted",
    }
)

DESCRIPTION_ELEMENTS = frozenset(
    {
        "briefdescription",
        "detaileddescription",
        "inbodydescription",
        "description",
        "parameterdescription",
        "xrefdescription",
        "internal",
        "blockquote",
        "parblock",
    }
)

RAW_TEXT_ELEMENTS = frozenset(
    {
        "verbatim",
        "htmlonly",
        "manonly",
        "xmlonly",
        "rtfonly",
        "latexonly",
        "docbookonly",
    }
)

TITLE_ELEMENTS = frozenset({"title", "term", "summary", "xreftitle"})

SECTION_ELEMENTS = frozenset(f"sect{level}" for level in range(1, 7))

_ENTITY_ALIASES = {
    "nonbreakablespace": "nbsp",
    "umlaut": "uml",
    "registered": "reg",
    "trademark": "trade",
    "tm": "trade",
    "nzwj": "zwnj",
}


@dataclass(frozen=True)
class Paragraph(Shape):
    """A ``<para>``: inline markup and embedded blocks, in order."""

    children: list[Content]

    @classmethod
    def from_node(cls, node: AttributedNode) -> "Paragraph":
        label = shape_label(cls, node)
        check_attributes(node, (), label)
        return cls(node.name, parse_mixed(node, FACTORIES, PARA_CONTENT, label))


@dataclass(frozen=True)
class DescriptionBlock(Shape):
    """Any paragraph container: brief, detailed, internal, blockquote, etc."""

    children: list[Content]

    @property
    def title(self) -> "Title | None":
        return next((c for c in self.children if isinstance(c, Title)), None)

    @property
    def is_empty(self) -> bool:
        return all(isinstance(c, str) and not c.strip() for c in self.children)

    @classmethod
    def from_node(cls, node: AttributedNode) -> "DescriptionBlock":
        label = shape_label(cls, node)
        check_attributes(node, (), label)
        allowed = {"para", "title", "internal"} | SECTION_ELEMENTS
        return cls(node.name, parse_mixed(node, FACTORIES, allowed, label))


@dataclass(frozen=True)
class Title(Shape):
    """Inline-only container: ``title``, ``term``, ``summary``, ``xreftitle``."""

    children: list[Content]

    @classmethod
    def from_node(cls, node: AttributedNode) -> "Title":
        label = shape_label(cls, node)
        check_attributes(node, (), label)
        return cls(node.name, parse_mixed(node, FACTORIES, INLINE_CONTENT, label))


@dataclass(frozen=True)
class MarkupSpan(Shape):
    """Bold, emphasis, computer output and the other text styles."""

    children: list[Content]

    @classmethod
    def from_node(cls, node: AttributedNode) -> "MarkupSpan":
        label = shape_label(cls, node)
        check_attributes(node, (), label)
        return cls(node.name, parse_mixed(node, FACTORIES, PARA_CONTENT, label))


@dataclass(frozen=True)
class Ref(Shape):
    """A cross-reference to a compound or a member, inside a description."""

    refid: str
    kindref: str
    children: list[Content]
    external: str | None = None

    @property
    def text(self) -> str:
        return content_text(self.children)

    @classmethod
    def from_node(cls, node: AttributedNode) -> "Ref":
        label = shape_label(cls, node)
        check_attributes(node, ("refid", "kindref", "external"), label)
        refid, kindref = _ref_target(node)
        return cls(
            node.name,
            refid=refid,
            kindref=kindref,
            children=parse_mixed(node, FACTORIES, INLINE_CONTENT, label),
            external=optional_str(node, "external"),
        )


@dataclass(frozen=True)
class LinkedRef(Shape):
    """A text-only reference inside linked text or a highlighted code run."""

    refid: str
    kindref: str
    children: list[str]
    external: str | None = None
    tooltip: str | None = None

    @property
    def text(self) -> str:
        return "".join(self.children)

    @classmethod
    def from_node(cls, node: AttributedNode) -> "LinkedRef":
        label = shape_label(cls, node)
        check_attributes(node, ("refid", "kindref", "external", "tooltip"), label)
        refid, kindref = _ref_target(node)
        return cls(
            node.name,
            refid=refid,
            kindref=kindref,
            children=[parse_text_only(node, label)],
            external=optional_str(node, "external"),
            tooltip=optional_str(node, "tooltip"),
        )


def _ref_target(node: AttributedNode) -> tuple[str, str]:
    refid = get_attribute_str(node, "refid")
    kindref = get_attribute_str(node, "kindref")
    if not refid:
        raise MissingAttributeError(node.name, "refid", "empty")
    if not kindref:
        raise MissingAttributeError(node.name, "kindref", "empty")
    return refid, kindref


def content_text(children: list[Content]) -> str:
    """Return the plain text of mixed content, dropping the markup."""
    parts = []
    for child in children:
        if isinstance(child, str):
            parts.append(child)
        elif isinstance(child, CharacterEntity):
            parts.append(child.char)
        elif isinstance(child, Sp):
            parts.append(" " * child.value)
        elif hasattr(child, "children"):
            parts.append(content_text(child.children))
        else:
            parts.append(getattr(child, "text", ""))
    return "".join(parts)


@dataclass(frozen=True)
class ULink(Shape):
    """An external URL link."""

    url: str
    children: list[Content]

    @classmethod
    def from_node(cls, node: AttributedNode) -> "ULink":
        label = shape_label(cls, node)
        check_attributes(node, ("url",), label)
        return cls(
            node.name,
            url=get_attribute_str(node, "url"),
            children=parse_mixed(node, FACTORIES, INLINE_CONTENT, label),
        )


@dataclass(frozen=True)
class Anchor(Shape):
    """A link target inside a description."""

    id: str

    @classmethod
    def from_node(cls, node: AttributedNode) -> "Anchor":
        label = shape_label(cls, node)
        check_attributes(node, ("id",), label)
        parse_text_only(node, label)
        return cls(node.name, id=get_attribute_str(node, "id"))


@dataclass(frozen=True)
class DocSection(Shape):
    """A ``sect1`` .. ``sect6`` block with optional title."""

    id: str | None
    children: list[Content]

    @property
    def level(self) -> int:
        return int(self.element_name[4:])

    @property
    def title(self) -> Title | None:
        return next((c for c in self.children if isinstance(c, Title)), None)

    @classmethod
    def from_node(cls, node: AttributedNode) -> "DocSection":
        label = shape_label(cls, node)
        check_attributes(node, ("id",), label)
        nested = f"sect{int(node.name[4:]) + 1}"
        allowed = {"title", "para", "internal", nested}
        return cls(
            node.name,
            id=optional_str(node, "id"),
            children=parse_mixed(node, FACTORIES, allowed, label),
        )


@dataclass(frozen=True)
class SimpleSect(Shape):
    """A ``\\note``, ``\\return``, ``\\see`` style block."""

    kind: str
    children: list[Content]

    @property
    def title(self) -> Title | None:
        return next((c for c in self.children if isinstance(c, Title)), None)

    @classmethod
    def from_node(cls, node: AttributedNode) -> "SimpleSect":
        label = shape_label(cls, node)
        check_attributes(node, ("kind",), label)
        return cls(
            node.name,
            kind=get_attribute_str(node, "kind"),
            children=parse_mixed(node, FACTORIES, {"title", "para"}, label),
        )


@dataclass(frozen=True)
class ListItem(Shape):
    """One item of an itemized, ordered or variable list."""

    children: list[Content]
    override: str | None = None
    value: int | None = None

    @classmethod
    def from_node(cls, node: AttributedNode) -> "ListItem":
        label = shape_label(cls, node)
        check_attributes(node, ("override", "value"), label)
        return cls(
            node.name,
            children=parse_mixed(node, FACTORIES, {"para"}, label),
            override=optional_str(node, "override"),
            value=optional_int(node, "value"),
        )


@dataclass(frozen=True)
class DocList(Shape):
    """An ``itemizedlist`` or ``orderedlist``."""

    items: list[ListItem]
    list_type: str | None = None
    start: int | None = None

    @classmethod
    def from_node(cls, node: AttributedNode) -> "DocList":
        label = shape_label(cls, node)
        check_attributes(node, ("type", "start"), label)
        items = []
        for child in iter_elements(node, label):
            if child.name != "listitem":
                raise SchemaViolation(child.name, label)
            items.append(ListItem.from_node(child))
        return cls(
            node.name,
            items=items,
            list_type=optional_str(node, "type"),
            start=optional_int(node, "start"),
        )


@dataclass(frozen=True)
class VarListEntry(Shape):
    """The term half of a variable list entry."""

    term: Title

    @classmethod
    def from_node(cls, node: AttributedNode) -> "VarListEntry":
        label = shape_label(cls, node)
        check_attributes(node, (), label)
        terms = []
        for child in iter_elements(node, label):
            if child.name != "term":
                raise SchemaViolation(child.name, label)
            terms.append(Title.from_node(child))
        if not terms:
            raise SchemaViolation("term (missing)", label)
        return cls(node.name, term=terms[0])


@dataclass(frozen=True)
class VariableList(Shape):
    """Alternating ``varlistentry`` / ``listitem`` pairs."""

    children: list[VarListEntry | ListItem]

    @classmethod
    def from_node(cls, node: AttributedNode) -> "VariableList":
        label = shape_label(cls, node)
        check_attributes(node, (), label)
        children: list[VarListEntry | ListItem] = []
        for child in iter_elements(node, label):
            if child.name == "varlistentry":
                children.append(VarListEntry.from_node(child))
            elif child.name == "listitem":
                children.append(ListItem.from_node(child))
            else:
                raise SchemaViolation(child.name, label)
        return cls(node.name, children=children)


@dataclass(frozen=True)
class LinkedText(Shape):
    """Text with embedded refs: types, initializers, parameter names."""

    children: list[Content]
    direction: str | None = None

    @property
    def plain_text(self) -> str:
        return content_text(self.children)

    @classmethod
    def from_node(cls, node: AttributedNode) -> "LinkedText":
        label = shape_label(cls, node)
        known = ("direction",) if node.name == "parametername" else ()
        check_attributes(node, known, label)
        return cls(
            node.name,
            children=parse_mixed(node, LINKED_TEXT_FACTORIES, {"ref"}, label),
            direction=optional_str(node, "direction"),
        )


@dataclass(frozen=True)
class ParameterNameList(Shape):
    """Types and names documented together in one parameter item."""

    types: list[LinkedText]
    names: list[LinkedText]

    @classmethod
    def from_node(cls, node: AttributedNode) -> "ParameterNameList":
        label = shape_label(cls, node)
        check_attributes(node, (), label)
        types, names = [], []
        for child in iter_elements(node, label):
            if child.name == "parametertype":
                types.append(LinkedText.from_node(child))
            elif child.name == "parametername":
                names.append(LinkedText.from_node(child))
            else:
                raise SchemaViolation(child.name, label)
        return cls(node.name, types=types, names=names)


@dataclass(frozen=True)
class ParameterItem(Shape):
    """One documented parameter (or exception, or template argument)."""

    name_lists: list[ParameterNameList]
    description: DescriptionBlock

    @classmethod
    def from_node(cls, node: AttributedNode) -> "ParameterItem":
        label = shape_label(cls, node)
        check_attributes(node, (), label)
        name_lists = []
        description = None
        for child in iter_elements(node, label):
            if child.name == "parameternamelist":
                name_lists.append(ParameterNameList.from_node(child))
            elif child.name == "parameterdescription":
                description = DescriptionBlock.from_node(child)
            else:
                raise SchemaViolation(child.name, label)
        if description is None:
            raise SchemaViolation("parameterdescription (missing)", label)
        return cls(node.name, name_lists=name_lists, description=description)


@dataclass(frozen=True)
class ParameterList(Shape):
    """A ``param``, ``retval``, ``exception`` or ``templateparam`` list."""

    kind: str
    items: list[ParameterItem]

    @classmethod
    def from_node(cls, node: AttributedNode) -> "ParameterList":
        label = shape_label(cls, node)
        check_attributes(node, ("kind",), label)
        items = []
        for child in iter_elements(node, label):
            if child.name != "parameteritem":
                raise SchemaViolation(child.name, label)
            items.append(ParameterItem.from_node(child))
        return cls(node.name, kind=get_attribute_str(node, "kind"), items=items)


@dataclass(frozen=True)
class Sp(Shape):
    """One or more spaces inside a code line."""

    value: int = 1

    @classmethod
    def from_node(cls, node: AttributedNode) -> "Sp":
        label = shape_label(cls, node)
        check_attributes(node, ("value",), label)
        parse_text_only(node, label)
        return cls(node.name, value=optional_int(node, "value") or 1)


@dataclass(frozen=True)
class Highlight(Shape):
    """A syntax-highlighted run inside a code line."""

    highlight_class: str
    children: list[Content]

    @classmethod
    def from_node(cls, node: AttributedNode) -> "Highlight":
        label = shape_label(cls, node)
        check_attributes(node, ("class",), label)
        return cls(
            node.name,
            highlight_class=get_attribute_str(node, "class"),
            children=parse_mixed(node, LINKED_TEXT_FACTORIES, {"sp", "ref"}, label),
        )


@dataclass(frozen=True)
class CodeLine(Shape):
    """One line of a program listing."""

    highlights: list[Highlight]
    lineno: int | None = None
    refid: str | None = None
    refkind: str | None = None
    external: str | None = None

    @classmethod
    def from_node(cls, node: AttributedNode) -> "CodeLine":
        label = shape_label(cls, node)
        check_attributes(node, ("lineno", "refid", "refkind", "external"), label)
        highlights = []
        for child in iter_elements(node, label):
            if child.name != "highlight":
                raise SchemaViolation(child.name, label)
            highlights.append(Highlight.from_node(child))
        return cls(
            node.name,
            highlights=highlights,
            lineno=optional_int(node, "lineno"),
            refid=optional_str(node, "refid"),
            refkind=optional_str(node, "refkind"),
            external=optional_str(node, "external"),
        )


@dataclass(frozen=True)
class ProgramListing(Shape):
    """A code block made of highlighted code lines."""

    lines: list[CodeLine]
    filename: str | None = None

    @classmethod
    def from_node(cls, node: AttributedNode) -> "ProgramListing":
        label = shape_label(cls, node)
        check_attributes(node, ("filename",), label)
        lines = []
        for child in iter_elements(node, label):
            if child.name != "codeline":
                raise SchemaViolation(child.name, label)
            lines.append(CodeLine.from_node(child))
        return cls(node.name, lines=lines, filename=optional_str(node, "filename"))


@dataclass(frozen=True)
class RawText(Shape):
    """Verbatim text: ``verbatim`` and the per-format ``*only`` blocks."""

    text: str
    block: bool = False

    @classmethod
    def from_node(cls, node: AttributedNode) -> "RawText":
        label = shape_label(cls, node)
        check_attributes(node, ("block",) if node.name == "htmlonly" else (), label)
        return cls(
            node.name,
            text=parse_text_only(node, label),
            block=optional_bool(node, "block"),
        )


@dataclass(frozen=True)
class Formula(Shape):
    """A LaTeX formula."""

    id: str
    text: str

    @classmethod
    def from_node(cls, node: AttributedNode) -> "Formula":
        label = shape_label(cls, node)
        check_attributes(node, ("id",), label)
        return cls(
            node.name,
            id=get_attribute_str(node, "id"),
            text=parse_text_only(node, label),
        )


@dataclass(frozen=True)
class Image(Shape):
    """An image, with its caption as inline content."""

    image_type: str
    name: str | None
    children: list[Content]
    width: str | None = None
    height: str | None = None
    alt: str | None = None
    inline: bool = False
    caption: str | None = None

    @classmethod
    def from_node(cls, node: AttributedNode) -> "Image":
        label = shape_label(cls, node)
        check_attributes(
            node,
            ("type", "name", "width", "height", "alt", "inline", "caption"),
            label,
        )
        return cls(
            node.name,
            image_type=get_attribute_str(node, "type"),
            name=optional_str(node, "name"),
            children=parse_mixed(node, FACTORIES, INLINE_CONTENT, label),
            width=optional_str(node, "width"),
            height=optional_str(node, "height"),
            alt=optional_str(node, "alt"),
            inline=optional_bool(node, "inline"),
            caption=optional_str(node, "caption"),
        )


@dataclass(frozen=True)
class Caption(Shape):
    """A table caption."""

    children: list[Content]
    id: str | None = None

    @classmethod
    def from_node(cls, node: AttributedNode) -> "Caption":
        label = shape_label(cls, node)
        check_attributes(node, ("id",), label)
        return cls(
            node.name,
            children=parse_mixed(node, FACTORIES, INLINE_CONTENT, label),
            id=optional_str(node, "id"),
        )


@dataclass(frozen=True)
class TableEntry(Shape):
    """A table cell."""

    children: list[Content]
    thead: bool = False
    colspan: int | None = None
    rowspan: int | None = None
    align: str | None = None
    valign: str | None = None
    width: str | None = None
    css_class: str | None = None

    @classmethod
    def from_node(cls, node: AttributedNode) -> "TableEntry":
        label = shape_label(cls, node)
        check_attributes(
            node,
            ("thead", "colspan", "rowspan", "align", "valign", "width", "class"),
            label,
        )
        return cls(
            node.name,
            children=parse_mixed(node, FACTORIES, {"para"}, label),
            thead=optional_bool(node, "thead"),
            colspan=optional_int(node, "colspan"),
            rowspan=optional_int(node, "rowspan"),
            align=optional_str(node, "align"),
            valign=optional_str(node, "valign"),
            width=optional_str(node, "width"),
            css_class=optional_str(node, "class"),
        )


@dataclass(frozen=True)
class TableRow(Shape):
    """A table row."""

    entries: list[TableEntry]

    @classmethod
    def from_node(cls, node: AttributedNode) -> "TableRow":
        label = shape_label(cls, node)
        check_attributes(node, (), label)
        entries = []
        for child in iter_elements(node, label):
            if child.name != "entry":
                raise SchemaViolation(child.name, label)
            entries.append(TableEntry.from_node(child))
        return cls(node.name, entries=entries)


@dataclass(frozen=True)
class Table(Shape):
    """A table with an optional caption."""

    rows: list[TableRow]
    cols: int
    caption: Caption | None = None
    width: str | None = None

    @classmethod
    def from_node(cls, node: AttributedNode) -> "Table":
        label = shape_label(cls, node)
        check_attributes(node, ("rows", "cols", "width"), label)
        rows = []
        caption = None
        for child in iter_elements(node, label):
            if child.name == "row":
                rows.append(TableRow.from_node(child))
            elif child.name == "caption":
                caption = Caption.from_node(child)
            else:
                raise SchemaViolation(child.name, label)
        return cls(
            node.name,
            rows=rows,
            cols=optional_int(node, "cols") or 0,
            caption=caption,
            width=optional_str(node, "width"),
        )


@dataclass(frozen=True)
class XrefSect(Shape):
    """A ``\\todo``, ``\\bug`` or ``\\deprecated`` cross-reference section."""

    id: str
    title: str
    description: DescriptionBlock

    @classmethod
    def from_node(cls, node: AttributedNode) -> "XrefSect":
        label = shape_label(cls, node)
        check_attributes(node, ("id",), label)
        title = ""
        description = None
        for child in iter_elements(node, label):
            if child.name == "xreftitle":
                title = parse_text_only(child, label)
            elif child.name == "xrefdescription":
                description = DescriptionBlock.from_node(child)
            else:
                raise SchemaViolation(child.name, label)
        if description is None:
            raise SchemaViolation("xrefdescription (missing)", label)
        return cls(
            node.name,
            id=get_attribute_str(node, "id"),
            title=title,
            description=description,
        )


@dataclass(frozen=True)
class TocItem(Shape):
    """One entry of an in-page table of contents."""

    id: str
    children: list[Content]

    @classmethod
    def from_node(cls, node: AttributedNode) -> "TocItem":
        label = shape_label(cls, node)
        check_attributes(node, ("id",), label)
        return cls(
            node.name,
            id=get_attribute_str(node, "id"),
            children=parse_mixed(node, FACTORIES, INLINE_CONTENT, label),
        )


@dataclass(frozen=True)
class TocList(Shape):
    """An in-page table of contents."""

    items: list[TocItem]

    @classmethod
    def from_node(cls, node: AttributedNode) -> "TocList":
        label = shape_label(cls, node)
        check_attributes(node, (), label)
        items = []
        for child in iter_elements(node, label):
            if child.name != "tocitem":
                raise SchemaViolation(child.name, label)
            items.append(TocItem.from_node(child))
        return cls(node.name, items=items)


@dataclass(frozen=True)
class Heading(Shape):
    """An HTML/Markdown heading written inside a description."""

    level: int
    children: list[Content]

    @classmethod
    def from_node(cls, node: AttributedNode) -> "Heading":
        label = shape_label(cls, node)
        check_attributes(node, ("level",), label)
        return cls(
            node.name,
            level=optional_int(node, "level") or 1,
            children=parse_mixed(node, FACTORIES, INLINE_CONTENT, label),
        )


@dataclass(frozen=True)
class Details(Shape):
    """A collapsible block with an optional summary."""

    children: list[Content]

    @property
    def summary(self) -> Title | None:
        return next((c for c in self.children if isinstance(c, Title)), None)

    @classmethod
    def from_node(cls, node: AttributedNode) -> "Details":
        label = shape_label(cls, node)
        check_attributes(node, (), label)
        allowed = {"summary", "para"}
        return cls(node.name, children=parse_mixed(node, FACTORIES, allowed, label))


@dataclass(frozen=True)
class Emoji(Shape):
    """An emoji, rendered from its unicode code points."""

    name: str
    unicode: str

    @classmethod
    def from_node(cls, node: AttributedNode) -> "Emoji":
        label = shape_label(cls, node)
        check_attributes(node, ("name", "unicode"), label)
        return cls(
            node.name,
            name=get_attribute_str(node, "name"),
            unicode=get_attribute_str(node, "unicode"),
        )


@dataclass(frozen=True)
class EmptyElement(Shape):
    """Content-free markers: ``linebreak`` and ``hruler``."""

    @classmethod
    def from_node(cls, node: AttributedNode) -> "EmptyElement":
        label = shape_label(cls, node)
        check_attributes(node, (), label)
        parse_text_only(node, label)
        return cls(node.name)


@dataclass(frozen=True)
class CharacterEntity(Shape):
    """A named character such as ``ndash`` or ``copy``."""

    char: str = ""

    @classmethod
    def from_node(cls, node: AttributedNode) -> "CharacterEntity":
        label = shape_label(cls, node)
        check_attributes(node, (), label)
        parse_text_only(node, label)
        return cls(node.name, char=entity_char(node.name))


def entity_char(name: str) -> str:
    """Return the character for a Doxygen entity element name."""
    return chr(name2codepoint[_ENTITY_ALIASES.get(name, name)])


FACTORIES: dict[str, ShapeFactory] = {
    "para": Paragraph.from_node,
    "ref": Ref.from_node,
    "ulink": ULink.from_node,
    "anchor": Anchor.from_node,
    "simplesect": SimpleSect.from_node,
    "itemizedlist": DocList.from_node,
    "orderedlist": DocList.from_node,
    "variablelist": VariableList.from_node,
    "parameterlist": ParameterList.from_node,
    "programlisting": ProgramListing.from_node,
    "sp": Sp.from_node,
    "formula": Formula.from_node,
    "image": Image.from_node,
    "table": Table.from_node,
    "xrefsect": XrefSect.from_node,
    "toclist": TocList.from_node,
    "heading": Heading.from_node,
    "details": Details.from_node,
    "emoji": Emoji.from_node,
    "linebreak": EmptyElement.from_node,
    "hruler": EmptyElement.from_node,
}
FACTORIES.update(dict.fromkeys(MARKUP_ELEMENTS, MarkupSpan.from_node))
FACTORIES.update(dict.fromkeys(DESCRIPTION_ELEMENTS, DescriptionBlock.from_node))
FACTORIES.update(dict.fromkeys(RAW_TEXT_ELEMENTS, RawText.from_node))
FACTORIES.update(dict.fromkeys(TITLE_ELEMENTS, Title.from_node))
FACTORIES.update(dict.fromkeys(SECTION_ELEMENTS, DocSection.from_node))

ENTITY_ELEMENTS = frozenset(
    name
    for name in set(name2codepoint) | set(_ENTITY_ALIASES)
    if name not in FACTORIES
)
FACTORIES.update(dict.fromkeys(ENTITY_ELEMENTS, CharacterEntity.from_node))

LINKED_TEXT_FACTORIES: dict[str, ShapeFactory] = {
    "ref": LinkedRef.from_node,
    "sp": Sp.from_node,
}

INLINE_CONTENT = frozenset(
    MARKUP_ELEMENTS
    | ENTITY_ELEMENTS
    | RAW_TEXT_ELEMENTS
    | {"ref", "ulink", "anchor", "formula", "image", "emoji", "linebreak"}
)

PARA_CONTENT = INLINE_CONTENT | {
    "simplesect",
    "itemizedlist",
    "orderedlist",
    "variablelist",
    "parameterlist",
    "programlisting",
    "table",
    "xrefsect",
    "toclist",
    "heading",
    "details",
    "blockquote",
    "parblock",
    "hruler",
}


def parse_description(node: AttributedNode) -> DescriptionBlock:
    """Build a description block, e.g. from ``<briefdescription>``."""
    if node.name not in DESCRIPTION_ELEMENTS:
        raise SchemaViolation(node.name, "DescriptionBlock")
    return DescriptionBlock.from_node(node)

