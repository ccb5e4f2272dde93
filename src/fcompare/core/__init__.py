"""
Core comparison engine: capability prober, hasher, fingerprinter, and grouper.

This package contains the I/O-critical foundation of fcompare:
- probe_atime_preservation: empirical check that access times can be restored
- HasherImpl + Sha256AlgorithmImpl / XXHashAlgorithmImpl: partial/full content hashing
- FingerprinterImpl: size / partial / full comparison keys with timestamp restore
- FileGrouperImpl: equivalence grouping and two-file comparison
- Models: CompareMethod, CompareParams, Fingerprint, FileTimes, FileInfo

All components are pure Python, single-threaded and synchronous.
"""

from .exceptions import (
    FCompareError, FileAccessError, NotFoundError, PermissionDeniedError,
    IOFailureError, AtimeRestoreError, UnsupportedMethodError, AtimeUnsupportedError)
from .models import (
    CompareMethod, CompareParams, Fingerprint, FileTimes, FileInfo, EquivalenceGrouping)
from .hasher import HasherImpl, Sha256AlgorithmImpl, XXHashAlgorithmImpl
from .atime import probe_atime_preservation, preserved_times, read_file_times
from .fingerprint import FingerprinterImpl
from .grouper import FileGrouperImpl

__all__ = [
    "FCompareError",
    "FileAccessError",
    "NotFoundError",
    "PermissionDeniedError",
    "IOFailureError",
    "AtimeRestoreError",
    "UnsupportedMethodError",
    "AtimeUnsupportedError",
    "CompareMethod",
    "CompareParams",
    "Fingerprint",
    "FileTimes",
    "FileInfo",
    "EquivalenceGrouping",
    "HasherImpl",
    "Sha256AlgorithmImpl",
    "XXHashAlgorithmImpl",
    "probe_atime_preservation",
    "preserved_times",
    "read_file_times",
    "FingerprinterImpl",
    "FileGrouperImpl",
]
