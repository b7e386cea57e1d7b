"""Closed set of thumbnail failure kinds and their stable messages."""

from enum import StrEnum


class ThumbnailErrorKind(StrEnum):
    NOT_FOUND = "not_found"
    NOT_A_FILE = "not_a_file"
    NO_FILE_EXTENSION = "no_file_extension"
    UNSUPPORTED_EXTENSION = "unsupported_extension"
    NO_FILE_NAME = "no_file_name"
    NO_PARENT_PATH = "no_parent_path"
    PARENT_PATH_DOES_NOT_EXIST = "parent_path_does_not_exist"
    DIRECTORY_CREATE_FAILED = "directory_create_failed"
    DECODE_FAILED = "decode_failed"
    WRITE_FAILED = "write_failed"
    UNEXPECTED_ERROR = "unexpected_error"

    @property
    def message(self) -> str:
        return ERROR_MESSAGES[self]

    @property
    def retryable(self) -> bool:
        """True when a retry may succeed once the filesystem changes."""
        return self in RETRYABLE_KINDS


ERROR_MESSAGES: dict[ThumbnailErrorKind, str] = {
    ThumbnailErrorKind.NOT_FOUND: "Path does not exist",
    ThumbnailErrorKind.NOT_A_FILE: "Path is not a file",
    ThumbnailErrorKind.NO_FILE_EXTENSION: "No file extension found",
    ThumbnailErrorKind.UNSUPPORTED_EXTENSION: "File extension not allowed",
    ThumbnailErrorKind.NO_FILE_NAME: "No file name found",
    ThumbnailErrorKind.NO_PARENT_PATH: "No parent path found",
    ThumbnailErrorKind.PARENT_PATH_DOES_NOT_EXIST: "Parent path does not exist",
    ThumbnailErrorKind.DIRECTORY_CREATE_FAILED: "Could not create thumbnail directory",
    ThumbnailErrorKind.DECODE_FAILED: "Could not decode image",
    ThumbnailErrorKind.WRITE_FAILED: "Could not write thumbnail",
    ThumbnailErrorKind.UNEXPECTED_ERROR: "Unexpected error",
}

RETRYABLE_KINDS: frozenset[ThumbnailErrorKind] = frozenset(
    {
        ThumbnailErrorKind.PARENT_PATH_DOES_NOT_EXIST,
        ThumbnailErrorKind.DIRECTORY_CREATE_FAILED,
        ThumbnailErrorKind.WRITE_FAILED,
    }
)
