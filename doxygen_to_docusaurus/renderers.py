"""Type-indexed dispatch of shapes to string and line renderers.

Every shape class is registered explicitly, once per family; lookup is a
single dictionary access on the concrete type. Generic shapes such as
``MarkupSpan`` cover all of their element names with one entry.
"""

from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from doxygen_to_docusaurus.errors import DispatchError

if TYPE_CHECKING:
    from doxygen_to_docusaurus.reference_resolver import ReferenceResolver

DIALECTS = ("text", "markdown", "html")

# MDX reads braces as expressions, so they are escaped along with the tags.
_HTML_ESCAPES = (
    ("&", "&amp;"),
    ("<", "&lt;"),
    (">", "&gt;"),
    ('"', "&quot;"),
    ("{", "&#123;"),
    ("}", "&#125;"),
)
# Backslash first, so later escapes are not doubled.
_MARKDOWN_ESCAPES = (
    ("\\", "\\\\"),
    ("[", "\\["),
    ("]", "\\]"),
    ("*", "\\*"),
    ("_", "\\_"),
    ("~", "\\~"),
)


@dataclass(frozen=True)
class RenderContext:
    """What is being rendered, and for which output dialect."""

    dialect: str = "html"
    compound_id: str | None = None

    def with_dialect(self, dialect: str) -> "RenderContext":
        return RenderContext(dialect=dialect, compound_id=self.compound_id)


StringRenderer = Callable[[Any, "Renderers", RenderContext], str]
LinesRenderer = Callable[[Any, "Renderers", RenderContext], list[str]]


def escape(text: str, dialect: str) -> str:
    """Escape plain text for the output dialect."""
    if dialect == "text":
        return text
    if dialect not in DIALECTS:
        msg = f"Unsupported dialect {dialect!r}"
        raise ValueError(msg)
    for char, replacement in _HTML_ESCAPES:
        text = text.replace(char, replacement)
    if dialect == "markdown":
        for char, replacement in _MARKDOWN_ESCAPES:
            text = text.replace(char, replacement)
    return text


class Renderers:
    """Registry of per-shape renderers plus the recursive composition rules."""

    def __init__(self, resolver: "ReferenceResolver", images_url: str = "") -> None:
        """Create an empty registry bound to a reference resolver.

        Local image names are prefixed with ``images_url`` and collected in
        ``images`` so the files can be copied next to the pages.
        """
        self.resolver = resolver
        self.images_url = images_url
        self.images: set[str] = set()
        self._string_renderers: dict[type, StringRenderer] = {}
        self._lines_renderers: dict[type, LinesRenderer] = {}

    def register_string(self, shape_type: type, renderer: StringRenderer) -> None:
        """Register the inline renderer for one shape class."""
        self._string_renderers[shape_type] = renderer

    def register_lines(self, shape_type: type, renderer: LinesRenderer) -> None:
        """Register the block renderer for one shape class."""
        self._lines_renderers[shape_type] = renderer

    def render_string(self, element: Any, context: RenderContext) -> str:
        """Render an element, a list of elements, or text to one fragment."""
        if element is None:
            return ""
        if isinstance(element, str):
            return escape(element, context.dialect)
        if isinstance(element, list):
            return "".join(self.render_string(e, context) for e in element)
        renderer = self._string_renderers.get(type(element))
        if renderer is not None:
            return renderer(element, self, context)
        lines_renderer = self._lines_renderers.get(type(element))
        if lines_renderer is not None:
            return "\n".join(lines_renderer(element, self, context))
        raise DispatchError(type(element).__name__, "string")

    def render_lines(self, element: Any, context: RenderContext) -> list[str]:
        """Render an element, a list of elements, or text to output lines."""
        if element is None:
            return []
        if isinstance(element, str):
            if not element.strip():
                return []
            return [escape(element, context.dialect)]
        if isinstance(element, list):
            lines: list[str] = []
            for e in element:
                lines.extend(self.render_lines(e, context))
            return lines
        renderer = self._lines_renderers.get(type(element))
        if renderer is not None:
            return renderer(element, self, context)
        string_renderer = self._string_renderers.get(type(element))
        if string_renderer is not None:
            return string_renderer(element, self, context).split("\n")
        raise DispatchError(type(element).__name__, "lines")

    def link(
        self,
        refid: str,
        kind: str,
        text: str,
        context: RenderContext,
        title: str | None = None,
    ) -> str:
        """Render ``text`` as a link to a reference, or plain if it dangles.

        A ``title`` becomes the hover text of the link.
        """
        permalink = self.resolver.resolve(refid, kind, context.compound_id)
        if permalink is None or context.dialect == "text":
            return text
        hover = f'"{escape(title, "html")}"' if title else ""
        if context.dialect == "markdown":
            target = f"{permalink} {hover}" if hover else permalink
            return f"[{text}]({target})"
        if hover:
            return f'<a href="{permalink}" title={hover}>{text}</a>'
        return f'<a href="{permalink}">{text}</a>'
