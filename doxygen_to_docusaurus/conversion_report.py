"""Logic for collecting and writing a summary of a conversion run."""

import json
import time
from pathlib import Path
from typing import Any

from doxygen_to_docusaurus.errors import DanglingReference


class ConversionReport:
    """Collects dangling references, skipped compounds and written pages."""

    def __init__(self, doxygen_version: str | None = None) -> None:
        """Initialize the report with metadata."""
        self.doxygen_version = doxygen_version
        self.dangling_references: list[DanglingReference] = []
        self.skipped_compounds: list[tuple[str, str]] = []
        self.written_pages: list[str] = []
        self.start_time = time.time()

    def add_dangling_reference(self, reference: DanglingReference) -> None:
        """Record a reference whose target is not registered."""
        self.dangling_references.append(reference)

    def add_skipped_compound(self, compound_id: str, kind: str) -> None:
        """Record a compound whose kind has no collection."""
        self.skipped_compounds.append((compound_id, kind))

    def add_written_page(self, path: str) -> None:
        """Record an output file."""
        self.written_pages.append(path)

    def generate_report(self, path: str) -> None:
        """Write the summary report to a JSON file."""
        report = {
            "meta": {
                "timestamp": time.time(),
                "duration": time.time() - self.start_time,
                "doxygen_version": self.doxygen_version,
                "total_pages": len(self.written_pages),
            },
            "dangling_references": [
                {
                    "refid": r.refid,
                    "kind": r.kind,
                    "referenced_from": r.referenced_from,
                }
                for r in self.dangling_references
            ],
            "skipped_compounds": [
                {"id": compound_id, "kind": kind}
                for compound_id, kind in self.skipped_compounds
            ],
            "stats": self._compute_stats(),
        }

        out = Path(path)
        out.parent.mkdir(parents=True, exist_ok=True)
        out.write_text(json.dumps(report, indent=2), encoding="utf-8")

    def _compute_stats(self) -> dict[str, Any]:
        targets: dict[str, int] = {}
        for r in self.dangling_references:
            targets[r.refid] = targets.get(r.refid, 0) + 1
        most_referenced = sorted(targets.items(), key=lambda kv: (-kv[1], kv[0]))
        return {
            "dangling_total": len(self.dangling_references),
            "dangling_unique": len(targets),
            "skipped_total": len(self.skipped_compounds),
            "top_dangling": [
                {"refid": refid, "count": count}
                for refid, count in most_referenced[:20]
            ],
        }
