"""Read capture times from image EXIF metadata and turn them into filename prefixes."""

import logging
from datetime import datetime
from pathlib import Path
from typing import Final

import exifread

EXIF_DATE_FORMAT: Final = "%Y:%m:%d %H:%M:%S"
TIMESTAMP_FORMAT: Final = "%Y-%m-%d %H:%M:%S"
PREFIX_FORMAT: Final = "%Y_%m_%d-%H_%M_%S"
PREFIX_SEPARATOR: Final = "--"

# Capture-time tags in order of preference, each with the tag holding its UTC offset
DATE_TAGS: Final = (
    ("EXIF DateTimeOriginal", "EXIF OffsetTimeOriginal"),
    ("Image DateTime", "EXIF OffsetTime"),
)


class MetadataError(Exception):
    """Exception raised when a file has no usable capture time."""

    def __init__(self, path: Path, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"{path}: {reason}")


def read_capture_time(image_path: Path) -> datetime:
    """Read the capture time from image EXIF metadata.

    `EXIF DateTimeOriginal` is preferred over `Image DateTime`. When the matching
    offset tag is present the result is timezone-aware; otherwise it is naive.

    Args:
        image_path: Path to the image file

    Returns:
        The capture time

    Raises:
        MetadataError: if the file cannot be read, carries no EXIF data, or has no
            parseable capture-time tag
    """
    image_path = Path(image_path)
    try:
        with open(image_path, "rb") as f:
            logging.debug(f"Reading EXIF from {image_path}")
            tags = exifread.process_file(f, details=False)
    except OSError as e:
        raise MetadataError(image_path, f"cannot read file ({e.strerror or e})") from e
    except Exception as e:
        raise MetadataError(image_path, f"cannot decode EXIF data ({e})") from e

    if not tags:
        raise MetadataError(image_path, "no EXIF metadata found")
    logging.debug(f"Found EXIF tags: {list(tags.keys())}")

    for date_tag, offset_tag in DATE_TAGS:
        if date_tag not in tags:
            continue
        date_str = str(tags[date_tag]).strip("\x00 ")
        try:
            date = datetime.strptime(date_str, EXIF_DATE_FORMAT)
        except ValueError as e:
            raise MetadataError(image_path, f"invalid {date_tag} value {date_str!r}") from e
        logging.debug(f"Using {date_tag} = {date_str}")

        if offset_tag in tags:
            offset_str = str(tags[offset_tag]).strip("\x00 ")
            try:
                return datetime.strptime(f"{date_str} {offset_str}", f"{EXIF_DATE_FORMAT} %z")
            except ValueError:
                logging.debug(f"Ignoring unparseable {offset_tag} value {offset_str!r}")
        return date

    raise MetadataError(image_path, "no capture time in EXIF metadata")


def format_prefix(timestamp: datetime | str) -> str:
    """Format a capture time as a filename-safe prefix.

    Strings take the form ``YYYY-MM-DD HH:MM:SS``, optionally followed by a
    ``+TZ`` suffix which is ignored.

    >>> format_prefix("2023-05-01 10:15:30+02:00")
    '2023_05_01-10_15_30--'
    """
    if isinstance(timestamp, datetime):
        date = timestamp.replace(tzinfo=None)
    else:
        date = datetime.strptime(timestamp.split("+")[0].strip(), TIMESTAMP_FORMAT)
    return date.strftime(PREFIX_FORMAT).replace(":", "_") + PREFIX_SEPARATOR


def get_file_prefix(image_path: Path) -> str:
    """Return the filename prefix for an image, from its EXIF capture time."""
    return format_prefix(read_capture_time(image_path))
