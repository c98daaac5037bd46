"""Orchestration logic for converting Doxygen XML to Docusaurus Markdown."""

import argparse
import logging
from pathlib import Path
from typing import Any

from doxygen_to_docusaurus.conversion_report import ConversionReport
from doxygen_to_docusaurus.copy_image_files import copy_image_files
from doxygen_to_docusaurus.data_model import DataModel, load_data_model
from doxygen_to_docusaurus.load_config import load_config
from doxygen_to_docusaurus.page_writer import write_pages
from doxygen_to_docusaurus.view_model import ViewModel, ViewModelBuilder


def run_conversion(args: argparse.Namespace) -> int:
    """Execute the full conversion pipeline."""
    config = _init_config(args)
    data_model = load_data_model(args.xml_dir)
    report = ConversionReport(data_model.doxygen_version)

    view_model = _build_view_model(data_model, config, report)

    out_root = args.out_dir.resolve()
    if not args.dry_run:
        out_root.mkdir(parents=True, exist_ok=True)
    written = write_pages(view_model, out_root, report, dry_run=args.dry_run)
    if not args.dry_run:
        images_dir = Path(config["static_folder"]) / config["images_folder"].strip("/")
        copy_image_files(view_model.renderers.images, args.xml_dir, images_dir)

    if args.report:
        report.generate_report(args.report)
        print(f"Report generated at {args.report}")

    if args.dry_run:
        print(f"Dry run complete. {len(view_model.compounds)} pages rendered.")
    else:
        print(f"Generated {written} Markdown pages into: {out_root}")
    return 0


def _init_config(args: argparse.Namespace) -> dict[str, Any]:
    """Load the configuration and apply command line overrides."""
    config = load_config(args.config)
    if args.base_url:
        config["base_url"] = args.base_url
    if args.verbose:
        config["verbose"] = True
    if config["verbose"] or config["debug"]:
        logging.getLogger().setLevel(logging.DEBUG)
    return config


def _build_view_model(
    data_model: DataModel, config: dict[str, Any], report: ConversionReport
) -> ViewModel:
    """Register all compounds and finalize them into a view model."""
    base_url = config["base_url"].rstrip("/") + "/" + config["api_folder"].strip("/")
    builder = ViewModelBuilder(base_url=base_url, options=config, report=report)
    builder.add_data_model(data_model)
    view_model = builder.finalize()
    print(
        f"Registered {len(view_model.compounds)} compounds, "
        f"skipped {len(report.skipped_compounds)}."
    )
    return view_model
