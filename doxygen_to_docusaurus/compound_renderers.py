"""Renderers for the compound-level shapes: params, includes, base classes..."""

from doxygen_to_docusaurus.compound_shapes import (
    CompoundRef,
    IncludeRef,
    Location,
    MemberReference,
    Param,
    TemplateParamList,
)
from doxygen_to_docusaurus.renderers import RenderContext, Renderers, escape


def render_param_string(param: Param, r: Renderers, ctx: RenderContext) -> str:
    """Render one parameter as it appears in a prototype."""
    parts = []
    if param.attributes:
        parts.append(escape(param.attributes, ctx.dialect))
    if param.type is not None:
        parts.append(r.render_string(param.type, ctx).strip())
    name = param.declname or param.defname
    if name:
        parts.append(escape(name, ctx.dialect))
    text = " ".join(p for p in parts if p)
    if param.array:
        text += escape(param.array, ctx.dialect)
    if param.defval is not None:
        text += " = " + r.render_string(param.defval, ctx).strip()
    return text


def render_template_param_list_string(
    params: TemplateParamList, r: Renderers, ctx: RenderContext
) -> str:
    inner = ", ".join(r.render_string(p, ctx) for p in params.params)
    return escape("template <", ctx.dialect) + inner + escape(">", ctx.dialect)


def render_include_string(
    include: IncludeRef, r: Renderers, ctx: RenderContext
) -> str:
    """Render ``#include <x>`` or ``#include "x"``, linking the file if known."""
    opening, closing = ('"', '"') if include.local else ("<", ">")
    text = escape(include.text, ctx.dialect)
    if include.refid:
        text = r.link(include.refid, "compound", text, ctx)
    return (
        escape(f"#include {opening}", ctx.dialect) + text + escape(closing, ctx.dialect)
    )


def render_compound_ref_string(
    ref: CompoundRef, r: Renderers, ctx: RenderContext
) -> str:
    text = escape(ref.text, ctx.dialect)
    if ref.refid:
        return r.link(ref.refid, "compound", text, ctx)
    return text


def render_member_reference_string(
    ref: MemberReference, r: Renderers, ctx: RenderContext
) -> str:
    return r.link(ref.refid, "member", escape(ref.text, ctx.dialect), ctx)


def render_location_lines(
    location: Location, r: Renderers, ctx: RenderContext
) -> list[str]:
    """Render where a member or compound is declared and defined."""
    if location.bodyfile and location.bodystart and location.bodystart > 0:
        definition = (
            f"Definition at line {location.bodystart} "
            f"of file {escape(location.bodyfile, ctx.dialect)}"
        )
        if location.file != location.bodyfile and location.line:
            return [
                f"Declaration at line {location.line} of file "
                f"{escape(location.file, ctx.dialect)}, "
                f"{definition[0].lower()}{definition[1:]}.",
                "",
            ]
        return [f"{definition}.", ""]
    if location.line:
        return [
            f"Declaration at line {location.line} of file "
            f"{escape(location.file, ctx.dialect)}.",
            "",
        ]
    return [f"Declared in file {escape(location.file, ctx.dialect)}.", ""]


def register_compound_renderers(renderers: Renderers) -> None:
    """Register the compound-level shapes with the dispatch registry."""
    renderers.register_string(Param, render_param_string)
    renderers.register_string(TemplateParamList, render_template_param_list_string)
    renderers.register_string(IncludeRef, render_include_string)
    renderers.register_string(CompoundRef, render_compound_ref_string)
    renderers.register_string(MemberReference, render_member_reference_string)
    renderers.register_lines(Location, render_location_lines)
