"""Generate thumbnails for the images in the current directory.

Usage:
    python -m cl_thumbnails
"""

import sys
from pathlib import Path

from .batch import run_batch
from .discovery import list_image_files
from .schemas import ThumbnailSpec


def main(directory: str | Path = ".", spec: ThumbnailSpec | None = None) -> int:
    """Thumbnail every supported image directly inside ``directory``.

    Returns:
        0 if every thumbnail was written, 1 otherwise
    """
    spec = spec or ThumbnailSpec()
    image_paths = list_image_files(directory, spec.allowed_extensions)
    results = run_batch(image_paths, spec)

    thumbnails = [str(r.thumbnail_path) for r in results if r.ok]
    for result in results:
        if not result.ok:
            print(f"Failed: {result.source_path}: {result.error}", file=sys.stderr)

    print(f"Thumbnails: {thumbnails}")
    print(f"Number of thumbnails: {len(thumbnails)}")

    return 0 if len(thumbnails) == len(results) else 1


if __name__ == "__main__":
    sys.exit(main())
