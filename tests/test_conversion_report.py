"""Tests for the conversion summary report."""

import json
from pathlib import Path

from doxygen_to_docusaurus.conversion_report import ConversionReport
from doxygen_to_docusaurus.errors import DanglingReference


def test_generate_report(tmp_path: Path) -> None:
    """Verify the JSON report lists dangling refs, skipped compounds and stats."""
    report = ConversionReport("1.9.8")
    report.add_dangling_reference(DanglingReference("classX", "compound", "classA"))
    report.add_dangling_reference(DanglingReference("classX", "compound", "classB"))
    report.add_dangling_reference(DanglingReference("classY_1a1", "member", None))
    report.add_skipped_compound("exampleA", "example")
    report.add_written_page("classes/a.md")

    out = tmp_path / "reports" / "report.json"
    report.generate_report(str(out))
    data = json.loads(out.read_text(encoding="utf-8"))

    assert data["meta"]["doxygen_version"] == "1.9.8"
    assert data["meta"]["total_pages"] == 1
    assert data["dangling_references"][0] == {
        "refid": "classX",
        "kind": "compound",
        "referenced_from": "classA",
    }
    assert data["skipped_compounds"] == [{"id": "exampleA", "kind": "example"}]
    stats = data["stats"]
    assert stats["dangling_total"] == 3  # noqa: PLR2004
    assert stats["dangling_unique"] == 2  # noqa: PLR2004
    assert stats["top_dangling"][0] == {"refid": "classX", "count": 2}


def test_empty_report(tmp_path: Path) -> None:
    """Verify a run with nothing to report still writes a valid file."""
    out = tmp_path / "report.json"
    ConversionReport().generate_report(str(out))
    data = json.loads(out.read_text(encoding="utf-8"))
    assert data["dangling_references"] == []
    assert data["stats"]["top_dangling"] == []
    assert data["meta"]["doxygen_version"] is None
