import logging
import os
from pathlib import Path

from .copier import CopyError, copy_file
from .metadata import get_file_prefix
from .progress import NullProgress, ProgressReporter
from .types import CopyFailure, OrganizeResult


def destination_path(output_folder: Path, name: str, prefix: str) -> Path:
    """Return the path that the file `name` is copied to."""
    return Path(output_folder) / f"{prefix}{name}"


def organize_photos(
    folder: Path,
    output_folder: Path,
    *,
    reporter: ProgressReporter | None = None,
) -> OrganizeResult:
    """Copy every entry of folder into output_folder, prefixed by its capture time.

    Entries are processed in filename order, and none are skipped: a directory or
    a file without EXIF capture time stops the run with a MetadataError. Copy
    failures are recorded in the result and do not stop the run.

    Args:
        folder: Directory to read images from
        output_folder: Directory to copy images into; created if missing
        reporter: Receives a progress report after each entry

    Returns:
        Counts of entries processed and copied, and the copy failures
    """
    folder = Path(folder)
    output_folder = Path(output_folder)
    reporter = reporter or NullProgress()

    output_folder.mkdir(parents=True, exist_ok=True)
    names = sorted(os.listdir(folder))
    total = len(names)
    logging.debug(f"Found {total} entries in {folder}")

    result = OrganizeResult()
    for n, name in enumerate(names, start=1):
        source = folder / name
        prefix = get_file_prefix(source)
        target = destination_path(output_folder, name, prefix)

        logging.debug(f"Copying {source} -> {target}")
        try:
            copy_file(source, target)
        except (CopyError, OSError) as e:
            logging.debug(f"Failed to copy {source}: {e}")
            result.failures.append(CopyFailure(source, target, e))
        else:
            result.copied += 1
        result.processed += 1
        reporter.report(n, total)

    return result
