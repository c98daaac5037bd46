"""Renderers for description content: paragraphs, markup, lists, tables..."""

import html

from doxygen_to_docusaurus.description_shapes import (
    Anchor,
    CharacterEntity,
    CodeLine,
    Details,
    DescriptionBlock,
    DocList,
    DocSection,
    Emoji,
    EmptyElement,
    Formula,
    Heading,
    Highlight,
    Image,
    LinkedRef,
    LinkedText,
    ListItem,
    MarkupSpan,
    Paragraph,
    ParameterList,
    ProgramListing,
    RawText,
    Ref,
    SimpleSect,
    Sp,
    Table,
    TableEntry,
    Title,
    TocList,
    ULink,
    VariableList,
    VarListEntry,
    XrefSect,
)
from doxygen_to_docusaurus.md_codeblock import md_codeblock
from doxygen_to_docusaurus.renderers import RenderContext, Renderers, escape

_HTML_TAGS = {
    "bold": "b",
    "s": "s",
    "strike": "strike",
    "underline": "u",
    "emphasis": "em",
    "computeroutput": "code",
    "subscript": "sub",
    "superscript": "sup",
    "center": "center",
    "small": "small",
    "cite": "cite",
    "del": "del",
    "ins": "ins",
    "preformatted": "pre",
}

_MARKDOWN_MARKERS = {"bold": "**", "emphasis": "*", "computeroutput": "`"}

_ADMONITIONS = {"note": "note", "warning": "warning", "attention": "danger"}

SIMPLESECT_TITLES = {
    "return": "Returns",
    "see": "See Also",
    "author": "Author",
    "authors": "Authors",
    "version": "Version",
    "since": "Since",
    "date": "Date",
    "pre": "Precondition",
    "post": "Postcondition",
    "copyright": "Copyright",
    "invariant": "Invariant",
    "remark": "Remarks",
    "rcs": "RCS",
}

PARAMETER_LIST_TITLES = {
    "param": "Parameters",
    "retval": "Return values",
    "exception": "Exceptions",
    "templateparam": "Template Parameters",
}

# Shapes that break a paragraph into separate output lines.
BLOCK_TYPES = (
    DocList,
    VariableList,
    SimpleSect,
    ParameterList,
    ProgramListing,
    Table,
    XrefSect,
    TocList,
    Heading,
    Details,
    DescriptionBlock,
)


def _string(r: Renderers, element: object, ctx: RenderContext) -> str:
    return r.render_string(element, ctx)


def render_paragraph_lines(
    para: Paragraph, r: Renderers, ctx: RenderContext
) -> list[str]:
    """Render a paragraph, splitting out embedded blocks onto their own lines."""
    lines: list[str] = []
    buffer = ""
    for child in para.children:
        if isinstance(child, BLOCK_TYPES) or (
            isinstance(child, RawText) and child.element_name == "verbatim"
        ):
            if buffer.strip():
                lines.extend([buffer.strip(), ""])
            buffer = ""
            lines.extend(r.render_lines(child, ctx))
        else:
            buffer += _string(r, child, ctx)
    if buffer.strip():
        lines.append(buffer.strip())
    lines.append("")
    return lines


def render_description_lines(
    block: DescriptionBlock, r: Renderers, ctx: RenderContext
) -> list[str]:
    """Render a description container; blockquotes keep their wrapper."""
    body = [child for child in block.children if not isinstance(child, Title)]
    lines = r.render_lines(body, ctx)
    if block.element_name == "blockquote":
        return ["<blockquote>", *lines, "</blockquote>", ""]
    return lines


def render_description_string(
    block: DescriptionBlock, r: Renderers, ctx: RenderContext
) -> str:
    body = [child for child in block.children if not isinstance(child, Title)]
    return "".join(
        _string(r, child, ctx)
        for child in body
        if not (isinstance(child, str) and not child.strip())
    )


def render_markup_string(span: MarkupSpan, r: Renderers, ctx: RenderContext) -> str:
    content = _string(r, span.children, ctx)
    if ctx.dialect == "text":
        return content
    marker = _MARKDOWN_MARKERS.get(span.element_name)
    if ctx.dialect == "markdown" and marker is not None:
        return f"{marker}{content}{marker}"
    tag = _HTML_TAGS[span.element_name]
    return f"<{tag}>{content}</{tag}>"


def render_ref_string(ref: Ref, r: Renderers, ctx: RenderContext) -> str:
    return r.link(ref.refid, ref.kindref, _string(r, ref.children, ctx), ctx)


def render_linked_ref_string(
    ref: LinkedRef, r: Renderers, ctx: RenderContext
) -> str:
    text = escape(ref.text, ctx.dialect)
    return r.link(ref.refid, ref.kindref, text, ctx, title=ref.tooltip)


def render_ulink_string(link: ULink, r: Renderers, ctx: RenderContext) -> str:
    text = _string(r, link.children, ctx)
    if ctx.dialect == "text":
        return text
    if ctx.dialect == "markdown":
        return f"[{text}]({link.url})"
    return f'<a href="{link.url}">{text}</a>'


def render_anchor_string(anchor: Anchor, r: Renderers, ctx: RenderContext) -> str:
    if ctx.dialect == "text":
        return ""
    return f'<a id="{r.resolver.anchor_of(anchor.id)}"></a>'


def render_section_lines(
    section: DocSection, r: Renderers, ctx: RenderContext
) -> list[str]:
    """Render ``sectN`` as a Markdown heading one level below the page title."""
    lines = []
    title = _string(r, section.title, ctx).strip()
    if section.id:
        lines.append(f'<a id="{r.resolver.anchor_of(section.id)}"></a>')
    if title:
        lines.extend([f"{'#' * min(section.level + 1, 6)} {title}", ""])
    body = [child for child in section.children if not isinstance(child, Title)]
    lines.extend(r.render_lines(body, ctx))
    return lines


def render_simplesect_lines(
    sect: SimpleSect, r: Renderers, ctx: RenderContext
) -> list[str]:
    """Render notes and warnings as admonitions, the rest as definition lists."""
    body = [child for child in sect.children if not isinstance(child, Title)]
    content = r.render_lines(body, ctx)
    while content and not content[-1]:
        content.pop()
    admonition = _ADMONITIONS.get(sect.kind)
    if admonition is not None:
        return [f":::{admonition}", *content, ":::", ""]
    if sect.kind == "par":
        title = _string(r, sect.title, ctx).strip()
    else:
        title = SIMPLESECT_TITLES.get(sect.kind, sect.kind.capitalize())
    return [
        f'<dl class="doxySectionUser {sect.kind}">',
        f"<dt>{title}</dt>",
        "<dd>",
        *content,
        "</dd>",
        "</dl>",
        "",
    ]


def render_list_lines(doc_list: DocList, r: Renderers, ctx: RenderContext) -> list[str]:
    tag = "ol" if doc_list.element_name == "orderedlist" else "ul"
    attributes = ""
    if doc_list.list_type:
        attributes += f' type="{doc_list.list_type}"'
    if doc_list.start is not None:
        attributes += f' start="{doc_list.start}"'
    lines = [f"<{tag}{attributes}>"]
    lines.extend(_string(r, item, ctx) for item in doc_list.items)
    lines.extend([f"</{tag}>", ""])
    return lines


def render_list_item_string(item: ListItem, r: Renderers, ctx: RenderContext) -> str:
    content = "".join(_string(r, child, ctx) for child in item.children).strip()
    value = f' value="{item.value}"' if item.value is not None else ""
    return f"<li{value}>{content}</li>"


def render_variable_list_lines(
    var_list: VariableList, r: Renderers, ctx: RenderContext
) -> list[str]:
    lines = ["<dl>"]
    for child in var_list.children:
        if isinstance(child, VarListEntry):
            lines.append(f"<dt>{_string(r, child.term, ctx).strip()}</dt>")
        else:
            content = "".join(_string(r, c, ctx) for c in child.children).strip()
            lines.append(f"<dd>{content}</dd>")
    lines.extend(["</dl>", ""])
    return lines


def render_parameter_list_lines(
    params: ParameterList, r: Renderers, ctx: RenderContext
) -> list[str]:
    """Render documented parameters as a two-column table."""
    title = PARAMETER_LIST_TITLES.get(params.kind, params.kind.capitalize())
    lines = [
        f'<dl class="doxyParamsList {params.kind}">',
        f"<dt>{title}</dt>",
        "<dd>",
        '<table class="doxyParamsTable">',
    ]
    for item in params.items:
        names = []
        for name_list in item.name_lists:
            for name in name_list.names:
                text = _string(r, name, ctx).strip()
                if name.direction:
                    text = f"[{name.direction}] {text}"
                names.append(text)
        description = _string(r, item.description, ctx).strip()
        lines.append(
            f'<tr><td class="doxyParamName">{", ".join(names)}</td>'
            f'<td class="doxyParamDescription">{description}</td></tr>'
        )
    lines.extend(["</table>", "</dd>", "</dl>", ""])
    return lines


def render_linked_text_string(
    text: LinkedText, r: Renderers, ctx: RenderContext
) -> str:
    return _string(r, text.children, ctx)


def render_program_listing_lines(
    listing: ProgramListing, r: Renderers, ctx: RenderContext
) -> list[str]:
    """Render a listing as a ``<pre>`` block, one code line per line."""
    if ctx.dialect == "text":
        return [_string(r, line, ctx) for line in listing.lines]
    lines = ['<pre class="doxyProgramListing">']
    lines.extend(_string(r, line, ctx) for line in listing.lines)
    lines.extend(["</pre>", ""])
    return lines


def render_code_line_string(line: CodeLine, r: Renderers, ctx: RenderContext) -> str:
    content = "".join(_string(r, h, ctx) for h in line.highlights)
    if ctx.dialect == "text" or line.lineno is None:
        return content
    number = str(line.lineno).rjust(5)
    if line.refid and line.refkind:
        number = r.link(line.refid, line.refkind, number, ctx)
    return f'<span class="doxyLineNumber">{number}</span> {content}'


def render_highlight_string(
    highlight: Highlight, r: Renderers, ctx: RenderContext
) -> str:
    content = _string(r, highlight.children, ctx)
    if ctx.dialect == "text" or highlight.highlight_class == "normal":
        return content
    return f'<span class="doxyHighlight {highlight.highlight_class}">{content}</span>'


def render_sp_string(sp: Sp, r: Renderers, ctx: RenderContext) -> str:
    return " " * sp.value


def render_raw_text_lines(raw: RawText, r: Renderers, ctx: RenderContext) -> list[str]:
    """Verbatim becomes a code block; ``htmlonly`` passes through as is."""
    if raw.element_name == "verbatim":
        return [*md_codeblock("", raw.text).split("\n"), ""]
    if raw.element_name == "htmlonly" and ctx.dialect == "html":
        return raw.text.split("\n")
    return []


def render_raw_text_string(raw: RawText, r: Renderers, ctx: RenderContext) -> str:
    if raw.element_name == "verbatim":
        return f"<code>{escape(raw.text, ctx.dialect)}</code>"
    if raw.element_name == "htmlonly" and ctx.dialect == "html":
        return raw.text
    return ""


def render_formula_string(formula: Formula, r: Renderers, ctx: RenderContext) -> str:
    text = escape(formula.text, ctx.dialect)
    if ctx.dialect == "text":
        return text
    return f'<span class="doxyFormula">{text}</span>'


def render_image_string(image: Image, r: Renderers, ctx: RenderContext) -> str:
    if image.image_type != "html" or not image.name or ctx.dialect == "text":
        return ""
    src = image.name
    if "://" not in src:
        r.images.add(src)
        src = r.images_url + src
    attributes = [f'src="{src}"']
    alt = image.alt or _string(r, image.children, ctx.with_dialect("text")).strip()
    if alt:
        attributes.append(f'alt="{html.escape(alt)}"')
    if image.width:
        attributes.append(f'width="{image.width}"')
    if image.height:
        attributes.append(f'height="{image.height}"')
    return f"<img {' '.join(attributes)} />"


def render_table_lines(table: Table, r: Renderers, ctx: RenderContext) -> list[str]:
    lines = ['<table class="doxyTable">']
    if table.caption is not None:
        lines.append(f"<caption>{_string(r, table.caption.children, ctx)}</caption>")
    for row in table.rows:
        lines.append("<tr>")
        lines.extend(_string(r, entry, ctx) for entry in row.entries)
        lines.append("</tr>")
    lines.extend(["</table>", ""])
    return lines


def render_table_entry_string(
    entry: TableEntry, r: Renderers, ctx: RenderContext
) -> str:
    tag = "th" if entry.thead else "td"
    attributes = ""
    for name, value in (
        ("colspan", entry.colspan),
        ("rowspan", entry.rowspan),
        ("align", entry.align),
        ("valign", entry.valign),
        ("width", entry.width),
        ("class", entry.css_class),
    ):
        if value is not None:
            attributes += f' {name}="{value}"'
    content = "".join(_string(r, child, ctx) for child in entry.children).strip()
    return f"<{tag}{attributes}>{content}</{tag}>"


def render_xrefsect_lines(
    xref: XrefSect, r: Renderers, ctx: RenderContext
) -> list[str]:
    """Render ``\\todo``/``\\deprecated`` blocks with a link to their list page."""
    title = r.link(xref.id, "member", escape(xref.title, ctx.dialect), ctx)
    description = _string(r, xref.description, ctx).strip()
    return [
        '<dl class="doxyXrefSect">',
        f"<dt>{title}</dt>",
        f"<dd>{description}</dd>",
        "</dl>",
        "",
    ]


def render_toc_list_lines(toc: TocList, r: Renderers, ctx: RenderContext) -> list[str]:
    lines = ["<ul>"]
    for item in toc.items:
        text = _string(r, item.children, ctx).strip()
        lines.append(f"<li>{r.link(item.id, 'member', text, ctx)}</li>")
    lines.extend(["</ul>", ""])
    return lines


def render_heading_lines(
    heading: Heading, r: Renderers, ctx: RenderContext
) -> list[str]:
    title = _string(r, heading.children, ctx).strip()
    return [f"{'#' * min(heading.level + 1, 6)} {title}", ""]


def render_details_lines(
    details: Details, r: Renderers, ctx: RenderContext
) -> list[str]:
    lines = ["<details>"]
    if details.summary is not None:
        lines.append(f"<summary>{_string(r, details.summary, ctx).strip()}</summary>")
    body = [child for child in details.children if not isinstance(child, Title)]
    lines.extend(r.render_lines(body, ctx))
    lines.extend(["</details>", ""])
    return lines


def render_title_string(title: Title, r: Renderers, ctx: RenderContext) -> str:
    return _string(r, title.children, ctx)


def render_emoji_string(emoji: Emoji, r: Renderers, ctx: RenderContext) -> str:
    if ctx.dialect == "text":
        return html.unescape(emoji.unicode)
    return f'<span class="doxyEmoji" title="{emoji.name}">{emoji.unicode}</span>'


def render_empty_string(empty: EmptyElement, r: Renderers, ctx: RenderContext) -> str:
    if empty.element_name == "linebreak":
        return "\n" if ctx.dialect == "text" else "<br/>"
    return "" if ctx.dialect == "text" else "<hr/>"


def render_entity_string(
    entity: CharacterEntity, r: Renderers, ctx: RenderContext
) -> str:
    return escape(entity.char, ctx.dialect)


def register_description_renderers(renderers: Renderers) -> None:
    """Register every description shape with the dispatch registry."""
    renderers.register_lines(Paragraph, render_paragraph_lines)
    renderers.register_string(
        Paragraph, lambda para, r, ctx: _string(r, para.children, ctx)
    )
    renderers.register_lines(DescriptionBlock, render_description_lines)
    renderers.register_string(DescriptionBlock, render_description_string)
    renderers.register_string(Title, render_title_string)
    renderers.register_string(MarkupSpan, render_markup_string)
    renderers.register_string(Ref, render_ref_string)
    renderers.register_string(LinkedRef, render_linked_ref_string)
    renderers.register_string(ULink, render_ulink_string)
    renderers.register_string(Anchor, render_anchor_string)
    renderers.register_lines(DocSection, render_section_lines)
    renderers.register_lines(SimpleSect, render_simplesect_lines)
    renderers.register_lines(DocList, render_list_lines)
    renderers.register_string(ListItem, render_list_item_string)
    renderers.register_lines(VariableList, render_variable_list_lines)
    renderers.register_lines(ParameterList, render_parameter_list_lines)
    renderers.register_string(LinkedText, render_linked_text_string)
    renderers.register_lines(ProgramListing, render_program_listing_lines)
    renderers.register_string(CodeLine, render_code_line_string)
    renderers.register_string(Highlight, render_highlight_string)
    renderers.register_string(Sp, render_sp_string)
    renderers.register_lines(RawText, render_raw_text_lines)
    renderers.register_string(RawText, render_raw_text_string)
    renderers.register_string(Formula, render_formula_string)
    renderers.register_string(Image, render_image_string)
    renderers.register_lines(Table, render_table_lines)
    renderers.register_string(TableEntry, render_table_entry_string)
    renderers.register_lines(XrefSect, render_xrefsect_lines)
    renderers.register_lines(TocList, render_toc_list_lines)
    renderers.register_lines(Heading, render_heading_lines)
    renderers.register_lines(Details, render_details_lines)
    renderers.register_string(Emoji, render_emoji_string)
    renderers.register_string(EmptyElement, render_empty_string)
    renderers.register_string(CharacterEntity, render_entity_string)
