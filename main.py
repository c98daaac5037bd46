"""Main orchestration script for running Doxygen and generating Docusaurus pages."""

import argparse
import subprocess
import sys
from collections.abc import Sequence
from pathlib import Path


def run_command(cmd_list: Sequence[str | Path], cwd: Path | str | None = None) -> None:
    """Run a command and exit if it fails."""
    cmd_str = " ".join(str(x) for x in cmd_list)
    print(f"Running: {cmd_str}")
    try:
        subprocess.run(cmd_list, check=True, cwd=cwd)
    except subprocess.CalledProcessError as e:
        print(f"Error executing command: {cmd_str}")
        sys.exit(e.returncode)


def main() -> None:
    """Run the full documentation generation pipeline."""
    parser = argparse.ArgumentParser(
        description="Run Doxygen and convert its XML output to Docusaurus pages."
    )
    parser.add_argument(
        "--doxyfile",
        default="Doxyfile",
        help="Doxygen configuration file (must set GENERATE_XML = YES)",
    )
    parser.add_argument(
        "--xml-dir",
        default="doxygen/xml",
        help="Folder Doxygen writes its XML output to",
    )
    parser.add_argument(
        "--out-dir",
        default="docs/api",
        help="Output folder for the generated Markdown pages",
    )
    parser.add_argument(
        "--skip-doxygen",
        action="store_true",
        help="Reuse existing XML output instead of running Doxygen",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Parse and render without writing files",
    )
    parser.add_argument(
        "--config",
        help="Path to configuration file",
    )
    args = parser.parse_args()

    root_dir = Path.cwd()

    if not args.skip_doxygen:
        print("--- Step 1: Generating Doxygen XML ---")
        run_command(["doxygen", args.doxyfile], cwd=root_dir)

    print("\n--- Step 2: Converting Doxygen XML to Docusaurus Markdown ---")
    xml_dir = root_dir / args.xml_dir
    out_dir = root_dir / args.out_dir

    cmd = [
        sys.executable,
        "-m",
        "doxygen_to_docusaurus.doxygen_xml_to_docusaurus",
        str(xml_dir),
        str(out_dir),
        "--report",
        str(out_dir / "conversion_report.json"),
    ]

    if args.dry_run:
        cmd.append("--dry-run")
    if args.config:
        cmd.extend(["--config", args.config])

    run_command(cmd)

    print(f"\nSUCCESS: Documentation generated in {out_dir}")


if __name__ == "__main__":
    main()
