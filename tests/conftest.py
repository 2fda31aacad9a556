from collections.abc import Callable
from pathlib import Path

import pytest
from PIL import Image

# EXIF IFD0 DateTime
DATETIME_TAG = 0x0132


@pytest.fixture
def make_photo() -> Callable[..., Path]:
    """Return a function that writes a small JPEG, with an EXIF DateTime if given."""

    def make(path: Path, capture_time: str | None = None, color: str = "black") -> Path:
        img = Image.new("RGB", (8, 8), color=color)
        if capture_time is None:
            img.save(path, format="JPEG")
        else:
            exif = Image.Exif()
            exif[DATETIME_TAG] = capture_time
            img.save(path, format="JPEG", exif=exif)
        return path

    return make
