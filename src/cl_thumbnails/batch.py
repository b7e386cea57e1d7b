"""Batch runner - fans thumbnail generation out across worker threads."""

import os
from collections.abc import Iterable
from concurrent.futures import Future, ThreadPoolExecutor
from pathlib import Path

from loguru import logger

from .errors import ThumbnailErrorKind
from .generator import generate_thumbnail
from .schemas import BatchSummary, SourcePath, ThumbnailError, ThumbnailResult, ThumbnailSpec
from .utils.profiling import timed


def default_max_workers() -> int:
    return os.cpu_count() or 4


class ThumbnailBatchRunner:
    """Runs thumbnail generation for many source paths concurrently.

    Responsibilities:
    - Optionally pre-filters candidates to supported image files
    - Dispatches one generate_thumbnail call per candidate to a thread pool
    - Gathers results in input order, isolating per-item failures

    Result order matches the dispatched candidates. With
    ``skip_unsupported=False`` (default) every candidate is dispatched, so
    results line up one-to-one with the input and ineligible candidates are
    reported with their validation error. With ``skip_unsupported=True``
    candidates that are not regular files with an accepted extension are
    omitted and results line up with the filtered sequence.

    Example:
        runner = ThumbnailBatchRunner(ThumbnailSpec(width=256, height=256))
        results = runner.run(list_image_files("photos", ["jpg"]))
        print(runner.last_summary)
    """

    def __init__(
        self,
        spec: ThumbnailSpec | None = None,
        max_workers: int | None = None,
        skip_unsupported: bool = False,
    ):
        """Initialize runner.

        Args:
            spec: Thumbnail parameters shared by all items (defaults to 128x128)
            max_workers: Worker thread limit. Defaults to the host CPU count.
            skip_unsupported: Omit candidates that are not supported image files

        Raises:
            ValueError: If max_workers is less than 1
        """
        if max_workers is not None and max_workers < 1:
            raise ValueError(f"max_workers must be positive, got {max_workers}")

        self.spec: ThumbnailSpec = spec or ThumbnailSpec()
        self.max_workers: int = max_workers if max_workers is not None else default_max_workers()
        self.skip_unsupported: bool = skip_unsupported
        self.last_summary: BatchSummary | None = None

    def select(self, candidate_paths: Iterable[SourcePath]) -> list[Path]:
        """Return the candidates that will be dispatched, in input order."""
        paths = [Path(p) for p in candidate_paths]
        if not self.skip_unsupported:
            return paths

        selected = [p for p in paths if self.spec.is_supported(p)]
        skipped = len(paths) - len(selected)
        if skipped:
            logger.debug(f"Skipping {skipped} unsupported candidate(s)")
        return selected

    @timed
    def run(self, candidate_paths: Iterable[SourcePath]) -> list[ThumbnailResult]:
        """Generate thumbnails for all selected candidates.

        Args:
            candidate_paths: Source image paths

        Returns:
            One ThumbnailResult per dispatched candidate, in input order.
        """
        paths = self.select(candidate_paths)
        if not paths:
            self.last_summary = BatchSummary()
            logger.info("No thumbnails to generate")
            return []

        workers = min(self.max_workers, len(paths))
        logger.info(f"Generating {len(paths)} thumbnail(s) with {workers} worker thread(s)")

        with ThreadPoolExecutor(max_workers=workers, thread_name_prefix="thumbnail") as pool:
            futures = [pool.submit(generate_thumbnail, path, self.spec) for path in paths]
            results = [self._gather(path, future) for path, future in zip(paths, futures)]

        summary = BatchSummary.from_results(results)
        self.last_summary = summary
        logger.info(
            f"Thumbnails done: {summary.succeeded} succeeded, {summary.failed} failed "
            + f"of {summary.total}"
        )
        return results

    def _gather(self, path: Path, future: "Future[ThumbnailResult]") -> ThumbnailResult:
        # An item's error is communicated in its result, it is not the batch's error
        try:
            return future.result()
        except Exception as exc:
            logger.exception(f"Unexpected failure generating thumbnail for {path}")
            return ThumbnailResult.failure(
                path, ThumbnailError.from_exception(ThumbnailErrorKind.UNEXPECTED_ERROR, exc)
            )


def run_batch(
    candidate_paths: Iterable[SourcePath],
    spec: ThumbnailSpec | None = None,
    max_workers: int | None = None,
    skip_unsupported: bool = False,
) -> list[ThumbnailResult]:
    """Generate thumbnails for ``candidate_paths`` concurrently.

    See ThumbnailBatchRunner for the ordering and filtering policy.
    """
    runner = ThumbnailBatchRunner(spec, max_workers=max_workers, skip_unsupported=skip_unsupported)
    return runner.run(candidate_paths)
