"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/exceptions.py
Exception hierarchy for fcompare.
"""
import errno
from typing import Optional


class FCompareError(Exception):
    """Base exception for all fcompare errors."""


class FileAccessError(FCompareError):
    """A file could not be stat'ed, opened, read or updated."""

    def __init__(self, message: str, path: Optional[str] = None):
        self.path = path
        super().__init__(message)


class NotFoundError(FileAccessError):
    """File or directory does not exist."""


class PermissionDeniedError(FileAccessError):
    """Insufficient permissions for the file or directory."""


class IOFailureError(FileAccessError):
    """Read, seek or write failed."""


class AtimeRestoreError(FileAccessError):
    """Timestamps could not be written back after reading."""


class UnsupportedMethodError(FCompareError, ValueError):
    """Unknown comparison method."""

    def __init__(self, method):
        self.method = method
        super().__init__(
            f"Invalid compare method: '{method}'. Valid options: size, partial, full"
        )


class AtimeUnsupportedError(FCompareError):
    """Access time cannot be preserved on the target filesystem."""

    def __init__(self, path: str):
        self.path = path
        super().__init__(f"Can't keep access time on the filesystem of {path}")


def translate_os_error(exc: OSError, path: str, action: str = "read") -> FileAccessError:
    """Map an OSError onto the fcompare hierarchy."""
    if isinstance(exc, FileNotFoundError) or exc.errno == errno.ENOENT:
        return NotFoundError(f"File not found: {path}", path)
    if isinstance(exc, PermissionError) or exc.errno in (errno.EACCES, errno.EPERM):
        return PermissionDeniedError(f"Permission denied: {path}", path)
    reason = exc.strerror or str(exc)
    return IOFailureError(f"Failed to {action} {path}: {reason}", path)
