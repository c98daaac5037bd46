"""Convert Doxygen XML output to Docusaurus compatible Markdown.

This module reads the ``index.xml``, compound and ``Doxyfile.xml`` files of a
Doxygen XML export and generates one Markdown page per class, namespace,
group, file, folder and page, plus the index pages.
"""

import argparse
import logging
from pathlib import Path

from doxygen_to_docusaurus.errors import DoxygenModelError
from doxygen_to_docusaurus.run_conversion import run_conversion


def main(argv: list[str] | None = None) -> int:
    """Run the conversion process."""
    ap = argparse.ArgumentParser(
        description="Convert Doxygen XML output to Docusaurus Markdown.",
    )
    ap.add_argument(
        "xml_dir",
        type=Path,
        help="Directory containing the Doxygen index.xml and compound files",
    )
    ap.add_argument(
        "out_dir",
        type=Path,
        help="Output directory (usually docs/api inside the Docusaurus site)",
    )
    ap.add_argument(
        "--config",
        help="Path to a YAML configuration file",
    )
    ap.add_argument(
        "--base-url",
        help="Site URL prefix for generated links (default: /)",
    )
    ap.add_argument(
        "--dry-run",
        action="store_true",
        help="Parse and render everything without writing pages",
    )
    ap.add_argument(
        "--report",
        help="Write a JSON conversion report to this path",
    )
    ap.add_argument(
        "--verbose",
        action="store_true",
        help="Log debug details",
    )
    args = ap.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        return run_conversion(args)
    except DoxygenModelError as e:
        msg = f"Conversion failed: {e}"
        raise SystemExit(msg) from e


if __name__ == "__main__":
    raise SystemExit(main())
