"""Utility for copying the images referenced by the rendered pages."""

import logging
import shutil
from pathlib import Path

logger = logging.getLogger(__name__)


def copy_image_files(names: set[str], xml_dir: Path, dest_dir: Path) -> int:
    """Copy each named image from the Doxygen XML folder to ``dest_dir``.

    Doxygen copies the images of ``\\image html`` next to the XML files.
    Images it did not copy are logged and skipped. Returns the number of
    files copied.
    """
    if not names:
        return 0
    print(f"Copying {len(names)} image files...")
    copied = 0
    for name in sorted(names):
        source = xml_dir / name
        if not source.is_file():
            logger.warning("Image %s not found in %s", name, xml_dir)
            continue
        target = dest_dir / name
        target.parent.mkdir(parents=True, exist_ok=True)
        shutil.copyfile(source, target)
        copied += 1
    return copied
