"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/grouper.py
Partitions an ordered list of files into equivalence groups by fingerprint.
"""

import logging
from collections import defaultdict
from typing import Callable, Dict, List, Optional

from fcompare.core.atime import probe_atime_preservation
from fcompare.core.exceptions import AtimeUnsupportedError
from fcompare.core.fingerprint import FingerprinterImpl
from fcompare.core.interfaces import FileGrouper, Fingerprinter
from fcompare.core.models import CompareParams, EquivalenceGrouping

logger = logging.getLogger(__name__)


class FileGrouperImpl(FileGrouper):
    """
    Groups files by fingerprint, one file at a time in input order.
    The first failing file aborts the whole run; no partial groupings are returned.
    """

    def __init__(
            self,
            fingerprinter_factory: Optional[Callable[[CompareParams], Fingerprinter]] = None,
            prober: Optional[Callable[[str], bool]] = None,
    ):
        self.fingerprinter_factory = fingerprinter_factory or FingerprinterImpl
        self.prober = prober or probe_atime_preservation

    def group_by_sameness(self, paths: List[str], params: CompareParams) -> EquivalenceGrouping:
        """
        Returns groups of indices into paths sharing a fingerprint.
        Groups come in first-seen order; indices inside a group in input order.

        Raises:
            ValueError: paths is empty
            AtimeUnsupportedError: verification was requested and failed
            FCompareError: any per-file error
        """
        if not paths:
            raise ValueError("At least one file is required")

        if params.verify_atime:
            self.check_atime_capability(paths[0], params)

        fingerprinter = self.fingerprinter_factory(params)
        groups: Dict[str, List[int]] = defaultdict(list)
        for index, path in enumerate(paths):
            key = fingerprinter.fingerprint(path, params.method)
            groups[key.value].append(index)

        logger.debug(f"{len(paths)} files → {len(groups)} groups ({params.method.value})")
        return list(groups.values())

    def are_same(self, path_a: str, path_b: str, params: CompareParams) -> bool:
        """Two-file comparison: True if both land in one group."""
        groups = self.group_by_sameness([path_a, path_b], params)
        return len(groups) == 1

    def check_atime_capability(self, reference_path: str, params: CompareParams) -> None:
        """Fails fast if timestamps are to be kept but cannot be."""
        if params.keep_atime and not self.prober(reference_path):
            raise AtimeUnsupportedError(reference_path)
