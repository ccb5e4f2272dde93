"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/models.py
Data models for file fingerprinting and comparison.
"""

from dataclasses import dataclass, field
from typing import Dict, List
from enum import Enum

from fcompare.core.exceptions import UnsupportedMethodError


# =============================
# Enums
# =============================

class CompareMethod(Enum):
    """
    Comparison method controlling how much of each file is read.
    """
    SIZE = "size"
    PARTIAL = "partial"
    FULL = "full"

    @property
    def display_name(self) -> str:
        """Human-readable name for UI display."""
        mapping = {
            CompareMethod.SIZE: "Size",
            CompareMethod.PARTIAL: "Partial",
            CompareMethod.FULL: "Full",
        }
        return mapping.get(self, self.value)

    @property
    def description(self) -> str:
        """Detailed description for help text."""
        mapping = {
            CompareMethod.SIZE:
                "Byte count only (no content read)",
            CompareMethod.PARTIAL:
                "Hash of head, middle and tail 1 MiB windows (whole file up to 16 MiB)",
            CompareMethod.FULL:
                "Hash of the entire file content (slowest)",
        }
        return mapping.get(self, self.value)

    @classmethod
    def from_value(cls, value: str) -> "CompareMethod":
        """Resolve a method name, rejecting anything unknown."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise UnsupportedMethodError(value) from None

    def __repr__(self) -> str:
        return self.value


# ======================
#  Core Data Models
# ======================

@dataclass(frozen=True)
class Fingerprint:
    """
    Comparison key of a single file under one method.
    is_full_equivalent is True when a partial fingerprint covered the whole file,
    i.e. it is bit-identical to the full fingerprint.
    """
    value: str
    is_full_equivalent: bool = False

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class FileTimes:
    """
    Access and modification times of a file, captured before it is read.
    Kept in nanoseconds so a restore writes back exactly what was read.
    """
    atime_ns: int
    mtime_ns: int

    @property
    def atime(self) -> int:
        """Access time in whole Unix seconds."""
        return self.atime_ns // 1_000_000_000

    @property
    def mtime(self) -> int:
        """Modification time in whole Unix seconds."""
        return self.mtime_ns // 1_000_000_000

    def __repr__(self):
        return f"<FileTimes atime={self.atime}, mtime={self.mtime}>"


@dataclass
class FileInfo:
    """
    Per-file report: metadata captured before reading plus the checksums
    computed for the selected method.
    """
    filename: str
    size: int = 0
    atime: int = 0
    mtime: int = 0
    partial_checksum: str = ""
    full_checksum: str = ""
    properties: Dict[str, str] = field(default_factory=dict)

    def to_json_dict(self) -> Dict[str, object]:
        """JSON layout shared with other tools reading fcompare output."""
        return {
            "Filename": self.filename,
            "Size": self.size,
            "Atime": self.atime,
            "Mtime": self.mtime,
            "PartialChecksum": self.partial_checksum,
            "FullChecksum": self.full_checksum,
            "Properties": dict(self.properties),
        }

    def __repr__(self):
        return f"<FileInfo filename={self.filename}, size={self.size}>"


"""
DTO for comparison parameters with built-in validation.
Interface-agnostic, passed explicitly to the grouper and fingerprinter.
"""

SUPPORTED_ALGORITHMS = ("sha256", "xxh64")


@dataclass
class CompareParams:
    """Parameters for a comparison run with validation."""
    method: CompareMethod = CompareMethod.PARTIAL
    keep_atime: bool = True
    verify_atime: bool = False
    strict_atime: bool = False
    algorithm: str = "sha256"

    def __post_init__(self):
        """Validate parameters immediately after creation."""
        self.method = CompareMethod.from_value(self.method)

        self.algorithm = self.algorithm.strip().lower()
        if self.algorithm not in SUPPORTED_ALGORITHMS:
            raise ValueError(
                f"Unsupported hash algorithm: '{self.algorithm}'. "
                f"Valid options: {', '.join(SUPPORTED_ALGORITHMS)}"
            )

    @staticmethod
    def from_strings(
            method: str = "partial",
            keep_atime: bool = True,
            verify_atime: bool = False,
            strict_atime: bool = False,
            algorithm: str = "sha256",
    ) -> 'CompareParams':
        """
        Factory method to create params from raw CLI strings.
        Raises UnsupportedMethodError for an unknown method name.
        """
        return CompareParams(
            method=CompareMethod.from_value(method),
            keep_atime=keep_atime,
            verify_atime=verify_atime,
            strict_atime=strict_atime,
            algorithm=algorithm,
        )


EquivalenceGrouping = List[List[int]]


def describe_groups(groups: EquivalenceGrouping, paths: List[str]) -> List[List[str]]:
    """Map index groups back to the paths they stand for."""
    return [[paths[i] for i in group] for group in groups]
