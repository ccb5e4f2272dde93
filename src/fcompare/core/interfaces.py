"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

interfaces.py

Defines core interfaces (Protocols) used throughout the comparison system.
These protocols enforce structural typing using Python's `typing.Protocol` to ensure
consistency across modules while maintaining flexibility and modularity.

Key Components:
---------------
- HashState: Running hash object fed incrementally (hashlib / xxhash style).
- HashAlgorithm: Factory for running hash objects (e.g., SHA-256, xxHash).
- Hasher: Interface for computing partial and full content hashes of a file.
- Fingerprinter: Interface for computing a file's comparison key under a method.
- FileGrouper: Interface for partitioning files into equivalence groups.
"""

from typing import Protocol, List, Tuple
from fcompare.core.models import CompareMethod, CompareParams, Fingerprint


# ===== Interfaces =====

class HashState(Protocol):
    def update(self, data: bytes) -> None: ...
    def hexdigest(self) -> str: ...


class HashAlgorithm(Protocol):
    """
    Interface for generic hash algorithms.

    Allows plugging in different hashing functions like SHA-256 or xxHash
    without affecting the window arithmetic.
    """
    name: str

    def new(self) -> HashState:
        """Returns a fresh running hash."""
        ...


class Hasher(Protocol):
    """Interface for hashing file content."""
    def compute_full_hash(self, path: str) -> str: ...
    def compute_partial_hash(self, path: str) -> Tuple[str, bool]: ...


class Fingerprinter(Protocol):
    """Interface for computing a file's comparison key."""
    def fingerprint(self, path: str, method: CompareMethod) -> Fingerprint: ...


class FileGrouper(Protocol):
    """
    Interface for grouping files by fingerprint.

    Methods:
        group_by_sameness: Partitions input indices into equivalence groups.
        are_same: Two-file reduction of the grouping.
    """
    def group_by_sameness(self, paths: List[str], params: CompareParams) -> List[List[int]]:
        ...

    def are_same(self, path_a: str, path_b: str, params: CompareParams) -> bool:
        ...
