"""A command-line tool that copies photos into a folder, prefixed by their EXIF capture time."""

from .copier import copy_file
from .metadata import get_file_prefix
from .organize import organize_photos

__all__ = ["copy_file", "get_file_prefix", "organize_photos"]

__version__ = "1.0.0"
