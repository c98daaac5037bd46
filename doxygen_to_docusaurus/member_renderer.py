"""Logic for rendering the detail block of one member."""

from doxygen_to_docusaurus.compound_shapes import EnumValue, MemberDef
from doxygen_to_docusaurus.md_codeblock import md_codeblock
from doxygen_to_docusaurus.md_table import md_table
from doxygen_to_docusaurus.renderers import RenderContext, Renderers, escape
from doxygen_to_docusaurus.sections import Member


def join_with_and(items: list[str]) -> str:
    """Join items as ``a, b and c``."""
    if len(items) < 2:
        return "".join(items)
    return ", ".join(items[:-1]) + " and " + items[-1]


def member_prototype(md: MemberDef, r: Renderers, ctx: RenderContext) -> str:
    """Return the declaration shown in the member's code block."""
    text_ctx = ctx.with_dialect("text")
    lines = []
    if md.template_param_list is not None:
        lines.append(r.render_string(md.template_param_list, text_ctx))
    if md.kind == "define":
        prototype = f"#define {md.name}"
        if md.params:
            names = [p.defname or p.declname or "" for p in md.params]
            prototype += f"({', '.join(names)})"
        if md.initializer is not None:
            prototype += " " + r.render_string(md.initializer, text_ctx).strip()
    elif md.kind == "enum":
        keyword = "enum class" if md.has_flag("strong") else "enum"
        prototype = f"{keyword} {md.qualified_name or md.name}"
        if md.type is not None:
            prototype += " : " + r.render_string(md.type, text_ctx).strip()
    else:
        prototype = (md.definition or md.name) + (md.argsstring or "")
        if md.bitfield:
            prototype += f" : {md.bitfield}"
        if md.initializer is not None and md.kind == "variable":
            prototype += " " + r.render_string(md.initializer, text_ctx).strip()
    lines.append(prototype)
    if md.requires_clause is not None:
        requires = r.render_string(md.requires_clause, text_ctx).strip()
        lines.append(f"  requires {requires}")
    return "\n".join(lines)


def render_enum_values(
    values: list[EnumValue], r: Renderers, ctx: RenderContext
) -> list[str]:
    rows = []
    for value in values:
        anchor = r.resolver.anchor_of(value.id)
        name = f'<a id="{anchor}"></a>{escape(value.name, ctx.dialect)}'
        if value.initializer is not None:
            name += " " + r.render_string(value.initializer, ctx).strip()
        description = " ".join(
            r.render_string(d, ctx).strip()
            for d in (value.brief_description, value.detailed_description)
            if d is not None and not d.is_empty
        )
        rows.append([name, description])
    lines = md_table(["Enumeration values", "Description"], rows)
    if lines:
        lines.append("")
    return lines


def render_member_to_lines(
    member: Member,
    r: Renderers,
    ctx: RenderContext,
    *,
    render_location: bool = True,
) -> list[str]:
    """Render a member's heading, prototype, labels and documentation."""
    md = member.definition
    anchor = r.resolver.anchor_of(md.id)
    parts = [f"### {escape(md.name, 'markdown')} {{#{anchor}}}", ""]
    parts += [md_codeblock("cpp", member_prototype(md, r, ctx)), ""]

    labels = member.labels
    if labels:
        spans = [f'<span class="doxyMemberLabel">{label}</span>' for label in labels]
        parts += [" ".join(spans), ""]

    for description in (
        md.brief_description,
        md.detailed_description,
        md.inbody_description,
    ):
        if description is not None and not description.is_empty:
            parts.extend(r.render_lines(description, ctx))

    if md.enum_values:
        parts.extend(render_enum_values(md.enum_values, r, ctx))

    if md.reimplements:
        links = [r.render_string(ref, ctx) for ref in md.reimplements]
        parts += [f"Reimplements {join_with_and(links)}.", ""]
    if md.reimplemented_by:
        links = [r.render_string(ref, ctx) for ref in md.reimplemented_by]
        parts += [f"Reimplemented in {join_with_and(links)}.", ""]

    if render_location and md.location is not None:
        parts.extend(r.render_lines(md.location, ctx))

    if md.references:
        links = [r.render_string(ref, ctx) for ref in md.references]
        parts += [f"References {join_with_and(links)}.", ""]
    if md.referenced_by:
        links = [r.render_string(ref, ctx) for ref in md.referenced_by]
        parts += [f"Referenced by {join_with_and(links)}.", ""]

    return parts
