"""Non-recursive image file discovery."""

from collections.abc import Iterable
from pathlib import Path

from loguru import logger


def list_image_files(
    directory: str | Path,
    extensions: Iterable[str] | None = None,
) -> list[Path]:
    """
    List regular files directly inside ``directory``.

    Args:
        directory: Directory to scan (subdirectories are not entered)
        extensions: Optional extensions to keep, with or without the leading
                    dot, matched case-insensitively

    Returns:
        Matching file paths sorted by name. Empty if the directory cannot be read.
    """
    directory = Path(directory)
    wanted = (
        {ext.lstrip(".").lower() for ext in extensions} if extensions is not None else None
    )

    try:
        entries = list(directory.iterdir())
    except OSError as exc:
        logger.warning(f"Cannot read directory {directory}: {exc}")
        return []

    files: list[Path] = []
    for entry in entries:
        if not entry.is_file():
            continue
        if wanted is not None and entry.suffix[1:].lower() not in wanted:
            continue
        files.append(entry)

    return sorted(files, key=lambda p: p.name)
