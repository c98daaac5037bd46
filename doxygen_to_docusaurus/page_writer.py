"""Logic for rendering compound pages and collection indices to disk."""

import html
import re
from pathlib import Path
from typing import TYPE_CHECKING, Any

import yaml

from doxygen_to_docusaurus.collection_base import INDEX_PAGE_NAME
from doxygen_to_docusaurus.compound_entity import CompoundEntity
from doxygen_to_docusaurus.md_table import md_table
from doxygen_to_docusaurus.output_file_for_page import output_file_for_page
from doxygen_to_docusaurus.renderers import escape
from doxygen_to_docusaurus.sections import Member

if TYPE_CHECKING:
    from doxygen_to_docusaurus.conversion_report import ConversionReport
    from doxygen_to_docusaurus.view_model import ViewModel

COLLECTION_TITLES = {
    "groups": "Topics",
    "namespaces": "Namespaces",
    "classes": "Classes",
    "files": "Files and Folders",
    "pages": "Pages",
}

# Alphabetical indices of compounds and their members, one per collection.
INITIALS_INDEX_FOLDER = "indices"
INITIALS_INDEX_TITLES = {
    "namespaces": "Namespaces and Members Index",
    "classes": "Classes and Members Index",
    "files": "Files and Members Index",
}

_TAG_RE = re.compile(r"<[^>]*>")


def plain_text(fragment: str) -> str:
    """Strip tags and entities from a rendered fragment."""
    return " ".join(html.unescape(_TAG_RE.sub("", fragment)).split())


def front_matter(
    title: str, slug: str, description: str, keywords: list[str]
) -> list[str]:
    """Return the Docusaurus front matter block as lines."""
    data: dict[str, Any] = {
        "title": title,
        "slug": slug,
        "description": description,
        "custom_edit_url": None,
        "keywords": keywords,
    }
    dumped = yaml.safe_dump(data, sort_keys=False, allow_unicode=True, width=1000)
    return ["---", dumped.rstrip(), "---", ""]


def render_page(entity: CompoundEntity, view_model: "ViewModel") -> str:
    """Render a compound page in Markdown, front matter included."""
    api_folder = view_model.options.get("api_folder", "api")
    slug = f"/{api_folder}/{view_model.page_path(entity.id)}"
    keywords = ["doxygen", "reference", entity.kind, entity.name]
    parts = front_matter(
        entity.page_title,
        slug,
        plain_text(entity.descriptions.brief),
        keywords,
    )
    parts.extend(view_model.render_compound_to_lines(entity))
    return "\n".join(parts).rstrip() + "\n"


def _tree_lines(
    entities: list[CompoundEntity],
    view_model: "ViewModel",
    depth: int,
    ancestors: frozenset[str],
) -> list[str]:
    lines = []
    for entity in entities:
        if entity.id in ancestors:
            continue
        link = f"[{entity.name}]({view_model.get_page_permalink(entity.id)})"
        brief = entity.descriptions.brief
        lines.append(f"{'  ' * depth}- {link}" + (f": {brief}" if brief else ""))
        lines.extend(
            _tree_lines(
                entity.children, view_model, depth + 1, ancestors | {entity.id}
            )
        )
    return lines


def render_collection_index(collection_name: str, view_model: "ViewModel") -> str:
    """Render the index page of one collection as a nested list."""
    title = COLLECTION_TITLES.get(collection_name, collection_name.capitalize())
    api_folder = view_model.options.get("api_folder", "api")
    project = view_model.project_name or "this"
    parts = front_matter(
        title,
        f"/{api_folder}/{collection_name}",
        f"The {title.lower()} of the {project} project.",
        ["doxygen", "reference", collection_name],
    )
    top_level = view_model.top_level(collection_name)
    if top_level:
        parts.extend(_tree_lines(top_level, view_model, 0, frozenset()))
    else:
        parts.append(f"No {title.lower()} are documented.")
    return "\n".join(parts).rstrip() + "\n"


def render_top_index(view_model: "ViewModel") -> str:
    """Render the API landing page: topics, collections and the main page."""
    api_folder = view_model.options.get("api_folder", "api")
    project = view_model.project_brief or view_model.project_name
    title = view_model.options.get("main_page_title") or (
        f"{project} API Reference" if project else "API Reference"
    )
    description = view_model.project_brief or (
        f"The API reference of the {view_model.project_name or 'this'} project."
    )
    parts = front_matter(title, f"/{api_folder}", description, ["doxygen", "reference"])

    topics = [
        [
            f"[{escape(group.title, 'markdown')}]"
            f"({view_model.get_page_permalink(group.id)})",
            group.descriptions.brief,
        ]
        for group in view_model.top_level("groups")
    ]
    if topics:
        parts += ["## Topics", ""]
        parts.extend(md_table(["Name", "Description"], topics))
        parts.append("")

    parts += ["## Reference", ""]
    for name, collection in view_model.collections.items():
        if len(collection):
            collection_title = COLLECTION_TITLES.get(name, name.capitalize())
            parts.append(f"- [{collection_title}]({view_model.base_url}{name})")
            if name in INITIALS_INDEX_TITLES:
                index_title = INITIALS_INDEX_TITLES[name]
                parts.append(
                    f"  - [{index_title}]({view_model.base_url}"
                    f"{INITIALS_INDEX_FOLDER}/{name}/all)"
                )
    parts.append("")

    main_page_lines = view_model.render_main_page_lines()
    if main_page_lines:
        parts += ["## Description", ""]
        parts.extend(main_page_lines)
    return "\n".join(parts).rstrip() + "\n"


def _index_entries(
    collection_name: str, view_model: "ViewModel"
) -> list[tuple[str, str, str]]:
    """Return ``(name, text, link)`` for each compound and member to index."""
    entries = []
    for entity in view_model.collections[collection_name].entities_by_id.values():
        link = view_model.get_page_permalink(entity.id)
        entries.append((entity.name, f"{entity.kind} {entity.compound_name}", link))
        for section in entity.sections:
            for member in section.members:
                if not isinstance(member, Member):
                    continue
                indexed = [(member.id, member.name, member.kind)]
                indexed.extend(
                    (value.id, value.name, "enum value")
                    for value in member.definition.enum_values
                )
                for member_id, name, kind in indexed:
                    target = view_model.resolve_reference(member_id, "member")
                    if target is not None:
                        text = f"{kind} in {entity.kind} {entity.compound_name}"
                        entries.append((name, text, target))
    return entries


def _initial(name: str) -> str:
    return name.lstrip("~")[:1].upper()


def render_initials_index(collection_name: str, view_model: "ViewModel") -> str:
    """Render the alphabetical index of a collection, grouped by initial."""
    title = INITIALS_INDEX_TITLES[collection_name]
    api_folder = view_model.options.get("api_folder", "api")
    parts = front_matter(
        title,
        f"/{api_folder}/{INITIALS_INDEX_FOLDER}/{collection_name}/all",
        f"The {title.lower()} of the {view_model.project_name or 'this'} project.",
        ["doxygen", "reference", collection_name, "index"],
    )
    entries = sorted(
        _index_entries(collection_name, view_model),
        key=lambda entry: (entry[0].lstrip("~").lower(), entry[1]),
    )
    initials: dict[str, list[tuple[str, str, str]]] = {}
    for entry in entries:
        initials.setdefault(_initial(entry[0]), []).append(entry)
    for initial, group in initials.items():
        parts += [f"## {escape(initial, 'markdown') or '-'}", ""]
        parts.extend(
            f"- [{escape(name, 'markdown')}]({link}): {escape(text, 'html')}"
            for name, text, link in group
        )
        parts.append("")
    parts.append(f"Total: {len(entries)} entries.")
    return "\n".join(parts).rstrip() + "\n"


def write_pages(
    view_model: "ViewModel",
    out_root: Path,
    report: "ConversionReport | None" = None,
    *,
    dry_run: bool = False,
) -> int:
    """Render every page and index; write them unless this is a dry run."""
    written = 0
    entities = view_model.compounds
    total = len(entities)
    print(f"Rendering {total} compound pages...")
    pages: list[tuple[str, str]] = [
        (view_model.page_path(entity.id), render_page(entity, view_model))
        for entity in entities
    ]
    pages.extend(
        (f"{name}/{INDEX_PAGE_NAME}", render_collection_index(name, view_model))
        for name in view_model.collections
    )
    pages.extend(
        (
            f"{INITIALS_INDEX_FOLDER}/{name}/all",
            render_initials_index(name, view_model),
        )
        for name in INITIALS_INDEX_TITLES
        if len(view_model.collections[name])
    )
    pages.append((INDEX_PAGE_NAME, render_top_index(view_model)))
    if dry_run:
        return 0

    for page_path, md in pages:
        out_file = output_file_for_page(out_root, page_path)
        out_file.write_text(md, encoding="utf-8")
        if report is not None:
            report.add_written_page(str(out_file))
        written += 1
        if written % 50 == 0:
            print(f"  ... wrote {written}/{len(pages)} pages")
    return written
