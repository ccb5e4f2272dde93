"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

hasher.py
Implements file content hashing with pluggable hash algorithms.

HasherImpl computes two kinds of digests:
  • full hash: the whole file streamed through one running hash
  • partial hash: head, middle and tail windows of a large file fed into one
    running hash, or the full hash when the file is small enough

The window layout below is a format contract: changing any of the constants
changes every partial fingerprint ever produced.
"""

import hashlib
import io
import logging
import os
from typing import Dict, Tuple

import xxhash

from fcompare.core.exceptions import IOFailureError, translate_os_error
from fcompare.core.interfaces import HashAlgorithm, HashState

logger = logging.getLogger(__name__)

WINDOW_SIZE = 1024 * 1024  # 1 MiB per sampled window
READ_CHUNK_SIZE = 1024 * 1024
# Up to this size, reading the file once beats three seeks + reads
MIN_PARTIAL_CHECKSUM_SIZE = 16 * 1024 * 1024


# Use the same way to implement and use any other hashing algorithm
class Sha256AlgorithmImpl(HashAlgorithm):
    name = "sha256"

    def new(self) -> HashState:
        return hashlib.sha256()


class XXHashAlgorithmImpl(HashAlgorithm):
    name = "xxh64"

    def new(self) -> HashState:
        return xxhash.xxh64()


# Keys must match models.SUPPORTED_ALGORITHMS, which CompareParams validates against
ALGORITHMS: Dict[str, HashAlgorithm] = {
    algorithm.name: algorithm for algorithm in (Sha256AlgorithmImpl(), XXHashAlgorithmImpl())
}


def get_algorithm(name: str) -> HashAlgorithm:
    try:
        return ALGORITHMS[name]
    except KeyError:
        raise ValueError(f"Unsupported hash algorithm: '{name}'") from None


def middle_window_offset(file_size: int) -> int:
    """Half the file size, rounded down to a window boundary."""
    mid = file_size // 2
    return mid - (mid % WINDOW_SIZE)


class HasherImpl:
    """
    A hasher implementation that supports any algorithm via the HashAlgorithm interface.
    Returns hex digests; all OS errors are translated into fcompare exceptions.
    """

    def __init__(self, algorithm: HashAlgorithm = None):
        self.algorithm = algorithm or Sha256AlgorithmImpl()

    def compute_full_hash(self, path: str) -> str:
        """Streams the whole file through the hash."""
        try:
            with open(path, 'rb') as f:
                h = self.algorithm.new()
                self._feed_all(f, h)
        except OSError as e:
            raise translate_os_error(e, path) from e
        return h.hexdigest()

    def compute_partial_hash(self, path: str) -> Tuple[str, bool]:
        """
        Hash of the head, middle and tail windows of a file, in that order,
        through a single running hash.

        Files of at most MIN_PARTIAL_CHECKSUM_SIZE bytes are hashed whole and
        reported with is_full=True: the digest then equals compute_full_hash().
        Windows are not checked for overlap.

        Returns:
            (hex digest, is_full)
        """
        try:
            file_size = os.stat(path).st_size
            with open(path, 'rb') as f:
                h = self.algorithm.new()
                if file_size <= MIN_PARTIAL_CHECKSUM_SIZE:
                    logger.debug(f"{path}: {file_size} bytes, hashing whole file")
                    self._feed_all(f, h)
                    return h.hexdigest(), True

                mid = middle_window_offset(file_size)
                logger.debug(f"{path}: sampling windows at 0, {mid}, {file_size - WINDOW_SIZE}")

                self._feed_window(f, h, path)

                f.seek(mid, io.SEEK_SET)
                self._feed_window(f, h, path)

                f.seek(-WINDOW_SIZE, io.SEEK_END)
                self._feed_all(f, h)
        except OSError as e:
            raise translate_os_error(e, path) from e

        return h.hexdigest(), False

    @staticmethod
    def _feed_all(f, h: HashState) -> None:
        """Feeds everything from the current position to EOF."""
        while True:
            chunk = f.read(READ_CHUNK_SIZE)
            if not chunk:
                break
            h.update(chunk)

    @staticmethod
    def _feed_window(f, h: HashState, path: str) -> None:
        """Feeds exactly one window; a short read means the file changed under us."""
        data = f.read(WINDOW_SIZE)
        if len(data) != WINDOW_SIZE:
            raise IOFailureError(
                f"Unexpected end of file in {path} at offset {f.tell()}", path
            )
        h.update(data)
