"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/atime.py
Access time capture, restore, and the capability probe that tells whether a
restore will stick on a given filesystem.

Availability depends on OS, filesystem and mount flags (noatime, relatime,
coarse timestamp granularity), and there is no portable way to query it, so
the probe tests it empirically next to the target file.
"""

import logging
import os
import tempfile
from contextlib import contextmanager
from datetime import datetime, timezone
from typing import Iterator

from fcompare.core.exceptions import (
    AtimeRestoreError, FileAccessError, translate_os_error
)
from fcompare.core.models import FileTimes

logger = logging.getLogger(__name__)

# Far from "now" so relatime-style heuristics can't produce a false positive
PROBE_SENTINEL = int(datetime(2000, 1, 1, tzinfo=timezone.utc).timestamp())
PROBE_PREFIX = "fcompare"


def probe_atime_preservation(reference_path: str) -> bool:
    """
    Checks whether access times can be set in the directory of reference_path.

    Creates a temporary file next to reference_path, sets its atime/mtime to
    PROBE_SENTINEL, reads the atime back and compares at one-second resolution.
    The temporary file is always removed before returning.

    Returns:
        True if the timestamp stuck, False if the filesystem ignored or coarsened it.

    Raises:
        FileAccessError: The directory is missing, unwritable, or the probe file
            could not be created, stat'ed or removed.
    """
    directory = os.path.dirname(os.path.abspath(reference_path))
    logger.debug(f"Probing access time preservation in {directory}")

    try:
        fd, probe_path = tempfile.mkstemp(prefix=PROBE_PREFIX, dir=directory)
    except OSError as e:
        raise translate_os_error(e, directory, action="create a probe file in") from e
    os.close(fd)

    try:
        try:
            os.utime(probe_path, (PROBE_SENTINEL, PROBE_SENTINEL))
            observed = int(os.stat(probe_path).st_atime)
        finally:
            os.remove(probe_path)
    except OSError as e:
        raise translate_os_error(e, probe_path, action="probe timestamps on") from e

    capable = observed == PROBE_SENTINEL
    if not capable:
        logger.debug(f"Probe atime {observed} != {PROBE_SENTINEL}: preservation unavailable")
    return capable


def read_file_times(path: str) -> FileTimes:
    """Captures the current atime/mtime of a file."""
    try:
        st = os.stat(path)
    except OSError as e:
        raise translate_os_error(e, path, action="stat") from e
    return FileTimes(atime_ns=st.st_atime_ns, mtime_ns=st.st_mtime_ns)


def restore_file_times(path: str, times: FileTimes) -> None:
    """Writes previously captured times back to a file."""
    try:
        os.utime(path, ns=(times.atime_ns, times.mtime_ns))
    except OSError as e:
        raise AtimeRestoreError(
            f"Failed to restore timestamps of {path}: {e.strerror or e}", path
        ) from e


@contextmanager
def preserved_times(path: str, enabled: bool = True, strict: bool = False) -> Iterator[FileTimes]:
    """
    Captures a file's times on entry and restores them on every exit path.

    A failed restore is logged as a warning; with strict=True it raises
    AtimeRestoreError instead, unless another error is already propagating.
    """
    times = read_file_times(path)
    if not enabled:
        yield times
        return

    failed = False
    try:
        yield times
    except BaseException:
        failed = True
        raise
    finally:
        try:
            restore_file_times(path, times)
        except FileAccessError as e:
            if strict and not failed:
                raise
            logger.warning(str(e))
