"""Logic for turning Doxygen refids into page links and anchors."""

import logging
from typing import TYPE_CHECKING

from doxygen_to_docusaurus.errors import DanglingReference
from doxygen_to_docusaurus.pages import MAIN_PAGE_ID
from doxygen_to_docusaurus.permalinks import candidate_prefixes, member_anchor

if TYPE_CHECKING:
    from doxygen_to_docusaurus.conversion_report import ConversionReport
    from doxygen_to_docusaurus.view_model import ViewModel

logger = logging.getLogger(__name__)


class ReferenceResolver:
    """Resolves compound and member references against a finalized view model."""

    def __init__(
        self, view_model: "ViewModel", report: "ConversionReport | None" = None
    ) -> None:
        """Bind the resolver to the registry it looks ids up in."""
        self.view_model = view_model
        self.report = report

    def resolve(
        self, target_id: str, kind: str, current_id: str | None = None
    ) -> str | None:
        """Return a link for ``target_id``, or None if it is dangling.

        Member targets on the page being rendered become ``#anchor``.
        """
        if kind == "compound":
            if target_id == MAIN_PAGE_ID and self.view_model.main_page is not None:
                return self.view_model.base_url
            if self.view_model.get_compound(target_id) is None:
                return self._dangling(target_id, kind, current_id)
            return self.view_model.get_page_permalink(target_id)
        if kind == "member":
            page_id = self.page_id_of_member(target_id)
            if page_id is None:
                return self._dangling(target_id, kind, current_id)
            anchor = member_anchor(target_id, page_id)
            if page_id == current_id:
                return f"#{anchor}"
            return f"{self.view_model.get_page_permalink(page_id)}/#{anchor}"
        logger.error("Unsupported reference kind %s for %s", kind, target_id)
        return None

    def page_id_of_member(self, member_id: str) -> str | None:
        """Return the id of the compound whose page holds ``member_id``."""
        for prefix in candidate_prefixes(member_id):
            if self.view_model.get_compound(prefix) is not None:
                return prefix
        return None

    def anchor_of(self, refid: str) -> str:
        """Return the in-page anchor under which ``refid`` is rendered."""
        page_id = self.page_id_of_member(refid)
        return member_anchor(refid, page_id) if page_id is not None else refid

    def _dangling(self, target_id: str, kind: str, current_id: str | None) -> None:
        logger.warning(
            "Reference to %s (%s) from %s not found", target_id, kind, current_id
        )
        if self.report is not None:
            self.report.add_dangling_reference(
                DanglingReference(target_id, kind, current_id)
            )
        return None
