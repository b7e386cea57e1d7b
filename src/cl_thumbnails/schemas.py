"""Pydantic schemas for thumbnail parameters and results."""

from collections import Counter
from collections.abc import Iterable
from os import PathLike
from pathlib import Path
from typing import ClassVar

from typing_extensions import override

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from .errors import ThumbnailErrorKind

DEFAULT_THUMBNAIL_SIZE = 128
DEFAULT_ALLOWED_EXTENSIONS: frozenset[str] = frozenset({"jpg", "jpeg", "png", "gif"})

SourcePath = str | PathLike[str]


# ─────────────────────────────────────────────────────────────
# Thumbnail parameters
# ─────────────────────────────────────────────────────────────


class ThumbnailSpec(BaseModel):
    """Bounding box and accepted extensions for thumbnail generation.

    Attributes:
        width: Maximum thumbnail width in pixels
        height: Maximum thumbnail height in pixels
        allowed_extensions: Extensions accepted as source images, stored
                            lower-cased and without the leading dot
    """

    width: int = Field(default=DEFAULT_THUMBNAIL_SIZE, gt=0, description="Bounding box width")
    height: int = Field(default=DEFAULT_THUMBNAIL_SIZE, gt=0, description="Bounding box height")
    allowed_extensions: frozenset[str] = Field(
        default=DEFAULT_ALLOWED_EXTENSIONS,
        description="Accepted source extensions (case-insensitive)",
    )

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True, extra="forbid")

    @field_validator("allowed_extensions")
    @classmethod
    def normalize_extensions(cls, v: frozenset[str]) -> frozenset[str]:
        """Lower-case extensions and strip leading dots."""
        normalized = frozenset(ext.strip().lstrip(".").lower() for ext in v)
        if not normalized or "" in normalized:
            raise ValueError("allowed_extensions must contain non-empty extensions")
        return normalized

    @property
    def box(self) -> tuple[int, int]:
        return (self.width, self.height)

    def is_supported_extension(self, path: SourcePath) -> bool:
        suffix = Path(path).suffix
        return bool(suffix) and suffix[1:].lower() in self.allowed_extensions

    def is_supported(self, path: SourcePath) -> bool:
        """True for a regular file with an accepted extension."""
        return Path(path).is_file() and self.is_supported_extension(path)


# ─────────────────────────────────────────────────────────────
# Errors and results
# ─────────────────────────────────────────────────────────────


class ThumbnailError(BaseModel):
    """A typed failure, optionally carrying the underlying cause."""

    kind: ThumbnailErrorKind
    cause: str | None = None

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True, extra="forbid")

    @classmethod
    def from_exception(cls, kind: ThumbnailErrorKind, exc: BaseException) -> "ThumbnailError":
        return cls(kind=kind, cause=str(exc) or type(exc).__name__)

    @property
    def message(self) -> str:
        return self.kind.message

    @property
    def retryable(self) -> bool:
        return self.kind.retryable

    @override
    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message


class ThumbnailResult(BaseModel):
    """Outcome of generating one thumbnail.

    Exactly one of ``thumbnail_path`` and ``error`` is set.
    """

    source_path: Path
    thumbnail_path: Path | None = None
    error: ThumbnailError | None = None

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True, extra="forbid")

    @model_validator(mode="after")
    def validate_outcome(self) -> "ThumbnailResult":
        if (self.thumbnail_path is None) == (self.error is None):
            raise ValueError("Exactly one of thumbnail_path and error must be set")
        return self

    @classmethod
    def success(cls, source_path: SourcePath, thumbnail_path: Path) -> "ThumbnailResult":
        return cls(source_path=Path(source_path), thumbnail_path=thumbnail_path)

    @classmethod
    def failure(cls, source_path: SourcePath, error: ThumbnailError) -> "ThumbnailResult":
        return cls(source_path=Path(source_path), error=error)

    @property
    def ok(self) -> bool:
        return self.error is None


class BatchSummary(BaseModel):
    """Aggregate counts over a batch of results."""

    total: int = 0
    succeeded: int = 0
    failed: int = 0
    failures_by_kind: dict[ThumbnailErrorKind, int] = Field(default_factory=dict)

    @classmethod
    def from_results(cls, results: Iterable[ThumbnailResult]) -> "BatchSummary":
        results = list(results)
        kinds = Counter(r.error.kind for r in results if r.error is not None)
        failed = sum(kinds.values())
        return cls(
            total=len(results),
            succeeded=len(results) - failed,
            failed=failed,
            failures_by_kind=dict(kinds),
        )
