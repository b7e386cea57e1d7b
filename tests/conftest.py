"""Test configuration and fixtures for cl_thumbnails.

This module provides:
- Pytest configuration (markers)
- Function-scoped fixtures (image directories, synthetic images)
- A loguru capture fixture
"""

from collections.abc import Callable, Iterator
from pathlib import Path

import pytest
from loguru import logger
from PIL import Image, ImageDraw

ImageFactory = Callable[..., Path]


# ============================================================================
# Pytest Configuration
# ============================================================================


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line(
        "markers",
        "concurrency: exercises the thread pool with many images",
    )


# ============================================================================
# Function-Scoped Fixtures (Run Per Test)
# ============================================================================


@pytest.fixture
def image_dir(tmp_path: Path) -> Path:
    """Provide a clean directory to hold source images."""
    d = tmp_path / "images"
    d.mkdir()
    return d


@pytest.fixture
def make_image(image_dir: Path) -> ImageFactory:
    """Factory writing a synthetic image into ``image_dir``.

    Usage:
        path = make_image("photo.jpg", size=(800, 600))
    """

    def _make(
        name: str,
        size: tuple[int, int] = (800, 600),
        format: str | None = None,
        directory: Path | None = None,
    ) -> Path:
        target = (directory or image_dir) / name
        img = Image.new("RGB", size, color=(73, 109, 137))
        draw = ImageDraw.Draw(img)

        # Grid and a centred circle so resizing has something to do
        step = max(1, size[0] // 16)
        for x in range(0, size[0], step):
            draw.line([(x, 0), (x, size[1])], fill=(255, 255, 255), width=1)
        draw.ellipse(
            [size[0] // 4, size[1] // 4, 3 * size[0] // 4, 3 * size[1] // 4],
            fill=(200, 100, 100),
        )

        fmt = format or {"jpg": "JPEG", "jpeg": "JPEG", "png": "PNG", "gif": "GIF"}.get(
            target.suffix[1:].lower(), "PNG"
        )
        if fmt == "GIF":
            img = img.convert("P")
        img.save(target, fmt)
        return target

    return _make


@pytest.fixture
def synthetic_image(make_image: ImageFactory) -> Path:
    """An 800x600 JPEG source image."""
    return make_image("synthetic.jpg", size=(800, 600))


@pytest.fixture
def log_messages() -> Iterator[list[str]]:
    """Collect loguru messages emitted during a test."""
    messages: list[str] = []
    handler_id = logger.add(lambda m: messages.append(m.record["message"]), level="DEBUG")
    try:
        yield messages
    finally:
        logger.remove(handler_id)
