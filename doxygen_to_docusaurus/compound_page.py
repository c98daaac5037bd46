"""Logic for rendering the body of a compound page."""

from typing import TYPE_CHECKING

from doxygen_to_docusaurus.classes import Class
from doxygen_to_docusaurus.compound_entity import CompoundEntity
from doxygen_to_docusaurus.md_table import md_table
from doxygen_to_docusaurus.member_renderer import render_member_to_lines
from doxygen_to_docusaurus.renderers import RenderContext, Renderers, escape
from doxygen_to_docusaurus.sections import Member, Section

if TYPE_CHECKING:
    from doxygen_to_docusaurus.view_model import ViewModel

# inner element -> index heading, in display order
INNER_INDEX_TITLES = {
    "innergroup": "Modules",
    "innernamespace": "Namespaces",
    "innerclass": "Classes",
    "innerdir": "Folders",
    "innerfile": "Files",
    "innerpage": "Pages",
}


def render_compound_to_lines(
    entity: CompoundEntity, view_model: "ViewModel"
) -> list[str]:
    """Render an entity's page body, without front matter or title."""
    r = view_model.renderers
    ctx = RenderContext(dialect="html", compound_id=entity.id)
    compound_def = entity.compound_def
    parts = []

    if entity.descriptions.brief:
        parts += [entity.descriptions.brief, ""]
        if entity.descriptions.detailed_lines:
            parts += ["[More...](#details)", ""]

    if isinstance(entity, Class):
        parts.extend(_render_includes(entity, r, ctx))
        parts.extend(_render_inheritance(entity, r, ctx))

    parts.extend(_render_inner_indices(entity, view_model, r, ctx))
    for section in entity.sections:
        parts.extend(_render_section_index(section, r, ctx))

    if entity.descriptions.detailed_lines:
        parts += ["## Description {#details}", ""]
        parts.extend(entity.descriptions.detailed_lines)
        parts.append("")

    render_location = bool(view_model.options.get("render_location", True))
    for section in entity.sections:
        parts.extend(
            _render_section_details(section, r, ctx, render_location=render_location)
        )
    if isinstance(entity, Class):
        parts.extend(_render_all_members(entity, r, ctx))

    if (
        compound_def.program_listing is not None
        and view_model.options.get("render_program_listing", False)
    ):
        parts += ["## Source", ""]
        parts.extend(r.render_lines(compound_def.program_listing, ctx))

    if render_location and compound_def.location is not None:
        parts.extend(r.render_lines(compound_def.location, ctx))

    return parts


def _render_includes(entity: Class, r: Renderers, ctx: RenderContext) -> list[str]:
    """Render the ``#include`` lines of a class."""
    parts = []
    for include in entity.compound_def.includes:
        parts.append(f"<code>{r.render_string(include, ctx)}</code>")
    if parts:
        parts.append("")
    return parts


def _render_inheritance(entity: Class, r: Renderers, ctx: RenderContext) -> list[str]:
    """Render the base and derived class lists."""
    parts = []
    compound_def = entity.compound_def
    if compound_def.base_compound_refs:
        parts += ["## Base classes", ""]
        rows = [
            [r.render_string(ref, ctx), ref.prot, ref.virt]
            for ref in compound_def.base_compound_refs
        ]
        parts.extend(md_table(["Class", "Protection", "Virtual"], rows))
        parts.append("")
    if compound_def.derived_compound_refs:
        parts += ["## Derived classes", ""]
        rows = [
            [r.render_string(ref, ctx), ref.prot, ref.virt]
            for ref in compound_def.derived_compound_refs
        ]
        parts.extend(md_table(["Class", "Protection", "Virtual"], rows))
        parts.append("")
    return parts


def _render_all_members(entity: Class, r: Renderers, ctx: RenderContext) -> list[str]:
    """Render the collapsed list of all members, inherited ones included."""
    rows = []
    for entry in entity.compound_def.all_members:
        link = r.link(entry.refid, "member", escape(entry.name, ctx.dialect), ctx)
        labels = [entry.prot] if entry.prot else []
        if entry.virt and entry.virt != "non-virtual":
            labels.append(entry.virt)
        rows.append([link, escape(entry.scope or "", ctx.dialect), " ".join(labels)])
    if not rows:
        return []
    parts = ["<details>", "<summary>List of all members</summary>", ""]
    parts.extend(md_table(["Name", "Scope", "Attributes"], rows))
    parts += ["", "</details>", ""]
    return parts


def _render_inner_indices(
    entity: CompoundEntity,
    view_model: "ViewModel",
    r: Renderers,
    ctx: RenderContext,
) -> list[str]:
    """Render one index table per kind of inner compound."""
    parts = []
    for element_name, title in INNER_INDEX_TITLES.items():
        refs = entity.compound_def.inner_refs(element_name)
        rows = []
        for ref in refs:
            target = view_model.get_compound(ref.refid)
            text = escape(target.name if target else ref.text, ctx.dialect)
            link = r.link(ref.refid, "compound", text, ctx)
            brief = target.descriptions.brief if target is not None else ""
            rows.append([link, brief])
        if rows:
            parts += [f"## {title}", ""]
            parts.extend(md_table(["Name", "Description"], rows))
            parts.append("")
    return parts


def _render_section_index(
    section: Section, r: Renderers, ctx: RenderContext
) -> list[str]:
    """Render a section's summary table; members link to their details."""
    parts = [f"## {section.title} Index", ""]
    rows = []
    for member in section.members:
        text = escape(member.name, ctx.dialect)
        link = r.link(member.id, "member", text, ctx)
        brief = ""
        if isinstance(member, Member):
            description = member.definition.brief_description
            if description is not None and not description.is_empty:
                brief = r.render_string(description, ctx)
        rows.append([link, brief])
    parts.extend(md_table(["Name", "Description"], rows))
    parts.append("")
    return parts


def _render_section_details(
    section: Section,
    r: Renderers,
    ctx: RenderContext,
    *,
    render_location: bool,
) -> list[str]:
    """Render the detail blocks of the members defined in this compound."""
    members = [m for m in section.members if isinstance(m, Member)]
    if not members:
        return []
    parts = [f"## {section.title} {{#{section.anchor}}}", ""]
    if section.description is not None and not section.description.is_empty:
        parts.extend(r.render_lines(section.description, ctx))
    for member in members:
        parts.extend(
            render_member_to_lines(member, r, ctx, render_location=render_location)
        )
    return parts
