from __future__ import annotations

from pathlib import Path


class ValidationError(RuntimeError):
    pass


class DecodeError(ValidationError):
    """Raised when a byte buffer cannot be decoded as a movie playlist."""

    def __init__(self, message: str, offset: int | None = None) -> None:
        super().__init__(message)
        self.offset = offset


class UnexpectedEndError(DecodeError):
    """Fewer bytes remain than a field or record declares."""

    def __init__(self, offset: int, needed: int, remaining: int) -> None:
        super().__init__(
            f"need {needed} bytes at offset {offset}, but only {remaining} remain",
            offset,
        )
        self.needed = needed
        self.remaining = remaining


class ContentError(DecodeError):
    """Bytes are present but violate a closed constraint of the format."""


class TagMismatchError(ContentError):
    pass


class StreamEntryTypeError(ContentError):
    pass


class InvalidTextError(ContentError):
    pass


def assert_file_exists(path: Path, message: str | None = None) -> None:
    if not path.is_file():
        raise ValidationError(message or f"Expected file to exist: {path}")


def assert_in_out_dir(path: Path, out_dir: Path) -> None:
    try:
        resolved = path.resolve()
        base = out_dir.resolve()
    except FileNotFoundError:
        resolved = path.absolute()
        base = out_dir.absolute()
    if base not in resolved.parents and resolved != base:
        raise ValidationError(f"Path must be inside out_dir: {path}")
