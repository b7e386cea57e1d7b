"""Single-image thumbnail generation."""

from pathlib import Path

from loguru import logger

from .codec import DECODE_ERRORS, decode_image, encode_image, resize_to_box
from .errors import ThumbnailErrorKind
from .path_resolver import resolve_thumbnail_dir
from .schemas import SourcePath, ThumbnailError, ThumbnailResult, ThumbnailSpec


def validate_source(source_path: Path, spec: ThumbnailSpec) -> ThumbnailError | None:
    """Return the first validation failure for ``source_path``, or None."""
    if not source_path.exists():
        return ThumbnailError(kind=ThumbnailErrorKind.NOT_FOUND)
    if not source_path.is_file():
        return ThumbnailError(kind=ThumbnailErrorKind.NOT_A_FILE)
    if not source_path.suffix:
        return ThumbnailError(kind=ThumbnailErrorKind.NO_FILE_EXTENSION)
    if not spec.is_supported_extension(source_path):
        return ThumbnailError(kind=ThumbnailErrorKind.UNSUPPORTED_EXTENSION)
    if not source_path.name:
        return ThumbnailError(kind=ThumbnailErrorKind.NO_FILE_NAME)
    return None


def generate_thumbnail(
    source_path: SourcePath,
    spec: ThumbnailSpec | None = None,
) -> ThumbnailResult:
    """
    Write a thumbnail of ``source_path`` to ``<parent>/thumbnails/<name>``.

    The thumbnail keeps the source file name and format, fits within the
    spec's bounding box and preserves aspect ratio. An existing thumbnail
    is overwritten.

    Args:
        source_path: Path to the source image
        spec: Bounding box and accepted extensions (defaults to 128x128)

    Returns:
        ThumbnailResult holding either the thumbnail path or a ThumbnailError.
        Failures are returned, not raised.
    """
    spec = spec or ThumbnailSpec()
    source = Path(source_path)

    error = validate_source(source, spec)
    if error is not None:
        logger.debug(f"Rejected {source}: {error}")
        return ThumbnailResult.failure(source, error)

    thumbnail_dir = resolve_thumbnail_dir(source)
    if isinstance(thumbnail_dir, ThumbnailError):
        logger.debug(f"Cannot resolve thumbnail directory for {source}: {thumbnail_dir}")
        return ThumbnailResult.failure(source, thumbnail_dir)

    destination = thumbnail_dir / source.name

    try:
        img = decode_image(source)
    except DECODE_ERRORS as exc:
        logger.warning(f"Failed to decode {source}: {exc}")
        return ThumbnailResult.failure(
            source, ThumbnailError.from_exception(ThumbnailErrorKind.DECODE_FAILED, exc)
        )

    with img:
        resize_to_box(img, spec.width, spec.height)
        try:
            _ = encode_image(img, destination, source.suffix)
        except (OSError, ValueError, KeyError) as exc:
            logger.warning(f"Failed to write thumbnail {destination}: {exc}")
            return ThumbnailResult.failure(
                source, ThumbnailError.from_exception(ThumbnailErrorKind.WRITE_FAILED, exc)
            )

    logger.debug(f"Thumbnail written: {source} -> {destination} ({img.width}x{img.height})")
    return ThumbnailResult.success(source, destination)
