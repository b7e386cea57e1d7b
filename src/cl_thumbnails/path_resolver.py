"""Thumbnail directory derivation."""

from pathlib import Path

from loguru import logger

from .errors import ThumbnailErrorKind
from .schemas import SourcePath, ThumbnailError

THUMBNAIL_DIR_NAME = "thumbnails"


def resolve_thumbnail_dir(source_path: SourcePath) -> Path | ThumbnailError:
    """
    Compute ``<parent>/thumbnails`` for a source path and make sure it exists.

    The source itself need not exist; only its parent is inspected.
    Creation is idempotent, so concurrent callers sharing a parent
    directory all succeed.

    Args:
        source_path: Path to a (candidate) source image

    Returns:
        The thumbnail directory, or a ThumbnailError of kind
        NO_PARENT_PATH, PARENT_PATH_DOES_NOT_EXIST or DIRECTORY_CREATE_FAILED
    """
    path = Path(source_path)
    parent = path.parent

    # Root, "" and "." are their own parent
    if parent == path:
        return ThumbnailError(kind=ThumbnailErrorKind.NO_PARENT_PATH)

    if not parent.exists():
        return ThumbnailError(kind=ThumbnailErrorKind.PARENT_PATH_DOES_NOT_EXIST)

    thumbnail_dir = parent / THUMBNAIL_DIR_NAME
    try:
        thumbnail_dir.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        logger.warning(f"Failed to create thumbnail directory {thumbnail_dir}: {exc}")
        return ThumbnailError.from_exception(ThumbnailErrorKind.DIRECTORY_CREATE_FAILED, exc)

    return thumbnail_dir
