"""
Unified command orchestrator for file comparison.
This is the SINGLE source of truth for business logic; the CLI only parses and prints.
"""
import os
from typing import List, Optional

from fcompare.core.atime import read_file_times
from fcompare.core.exceptions import translate_os_error
from fcompare.core.grouper import FileGrouperImpl
from fcompare.core.interfaces import Fingerprinter
from fcompare.core.models import CompareMethod, CompareParams, EquivalenceGrouping, FileInfo


class CompareCommand:
    """
    Orchestrates the comparison workflow:
    1. Optionally probe access time preservation next to the first file
    2. Fingerprint every file in input order
    3. Group, compare, or report

    Usage:
        params = CompareParams(method=CompareMethod.PARTIAL, verify_atime=True)
        command = CompareCommand()
        groups = command.execute(["a.raw", "b.raw", "c.raw"], params)
        same = command.compare("a.raw", "b.raw", params)
        infos = command.describe(["a.raw"], params)
    """

    def __init__(self, grouper: Optional[FileGrouperImpl] = None):
        self._grouper = grouper or FileGrouperImpl()

    def execute(self, paths: List[str], params: CompareParams) -> EquivalenceGrouping:
        """
        Group files by sameness.

        Returns:
            List of index groups into paths

        Raises:
            ValueError: If paths is empty
            FCompareError: On the first file that cannot be fingerprinted
        """
        return self._grouper.group_by_sameness(paths, params)

    def compare(self, path_a: str, path_b: str, params: CompareParams) -> bool:
        """True if the two files are the same under params.method."""
        return self._grouper.are_same(path_a, path_b, params)

    def describe(self, paths: List[str], params: CompareParams) -> List[FileInfo]:
        """
        Build a FileInfo report per file. Times and size are captured before
        any content is read; checksums follow params.method.
        """
        if not paths:
            raise ValueError("At least one file is required")

        if params.verify_atime:
            self._grouper.check_atime_capability(paths[0], params)

        fingerprinter = self._grouper.fingerprinter_factory(params)
        return [self._describe_file(path, params, fingerprinter) for path in paths]

    @staticmethod
    def _describe_file(path: str, params: CompareParams, fingerprinter: Fingerprinter) -> FileInfo:
        times = read_file_times(path)
        try:
            size = os.stat(path).st_size
        except OSError as e:
            raise translate_os_error(e, path, action="stat") from e

        info = FileInfo(filename=path, size=size, atime=times.atime, mtime=times.mtime)
        info.properties["method"] = params.method.value

        if params.method == CompareMethod.PARTIAL:
            fp = fingerprinter.fingerprint(path, CompareMethod.PARTIAL)
            info.partial_checksum = fp.value
            if fp.is_full_equivalent:
                info.full_checksum = fp.value
            info.properties["algorithm"] = params.algorithm
        elif params.method == CompareMethod.FULL:
            info.full_checksum = fingerprinter.fingerprint(path, CompareMethod.FULL).value
            info.properties["algorithm"] = params.algorithm

        return info
