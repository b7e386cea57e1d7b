"""cl_thumbnails - Concurrent thumbnail generation for image directories."""

from .batch import ThumbnailBatchRunner, run_batch
from .codec import get_pil_format
from .discovery import list_image_files
from .errors import ThumbnailErrorKind
from .generator import generate_thumbnail
from .path_resolver import THUMBNAIL_DIR_NAME, resolve_thumbnail_dir
from .schemas import (
    DEFAULT_ALLOWED_EXTENSIONS,
    DEFAULT_THUMBNAIL_SIZE,
    BatchSummary,
    ThumbnailError,
    ThumbnailResult,
    ThumbnailSpec,
)

__version__ = "0.1.0"

__all__ = [
    "BatchSummary",
    "DEFAULT_ALLOWED_EXTENSIONS",
    "DEFAULT_THUMBNAIL_SIZE",
    "THUMBNAIL_DIR_NAME",
    "ThumbnailBatchRunner",
    "ThumbnailError",
    "ThumbnailErrorKind",
    "ThumbnailResult",
    "ThumbnailSpec",
    "__version__",
    "generate_thumbnail",
    "get_pil_format",
    "list_image_files",
    "resolve_thumbnail_dir",
    "run_batch",
]
