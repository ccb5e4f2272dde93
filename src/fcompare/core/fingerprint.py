"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/fingerprint.py
Computes the comparison key of a single file under a CompareMethod,
optionally restoring the file's timestamps after reading it.
"""

import logging
import os

from fcompare.core.atime import preserved_times
from fcompare.core.exceptions import UnsupportedMethodError, translate_os_error
from fcompare.core.hasher import HasherImpl, get_algorithm
from fcompare.core.interfaces import Fingerprinter, Hasher
from fcompare.core.models import CompareMethod, CompareParams, Fingerprint

logger = logging.getLogger(__name__)


class FingerprinterImpl(Fingerprinter):
    """
    Fingerprint engine.

    Size      : decimal byte count, no content read
    Partial   : hash of three 1 MiB windows, or the full hash for files up to 16 MiB
    Full      : hash of the entire content

    When keep_atime is set, the file's times are captured right before it is
    opened and written back afterwards, whether hashing succeeded or not.
    """

    def __init__(self, params: CompareParams = None, hasher: Hasher = None):
        self.params = params or CompareParams()
        self.hasher = hasher or HasherImpl(get_algorithm(self.params.algorithm))

    def fingerprint(self, path: str, method: CompareMethod = None) -> Fingerprint:
        method = self.params.method if method is None else method
        if not isinstance(method, CompareMethod):
            raise UnsupportedMethodError(method)

        with preserved_times(path, enabled=self.params.keep_atime, strict=self.params.strict_atime):
            result = self._compute(path, method)

        logger.debug(f"{method.value} fingerprint of {path}: {result.value}")
        return result

    def _compute(self, path: str, method: CompareMethod) -> Fingerprint:
        if method == CompareMethod.SIZE:
            try:
                size = os.stat(path).st_size
            except OSError as e:
                raise translate_os_error(e, path, action="stat") from e
            return Fingerprint(str(size), is_full_equivalent=False)

        elif method == CompareMethod.PARTIAL:
            value, is_full = self.hasher.compute_partial_hash(path)
            return Fingerprint(value, is_full_equivalent=is_full)

        elif method == CompareMethod.FULL:
            return Fingerprint(self.hasher.compute_full_hash(path), is_full_equivalent=True)

        raise UnsupportedMethodError(method)
