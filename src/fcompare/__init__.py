"""
fcompare — tell whether files are the same without disturbing their access times.

Core features:
- Three comparison methods: SIZE (byte count), PARTIAL (head/middle/tail 1 MiB hash), FULL (whole content hash)
- Access time preservation with an empirical per-filesystem capability probe
- Equivalence grouping of any number of files, two-file same/different check
- CLI interface with text or JSON output
"""

# Get version
try:
    from importlib.metadata import version as _version
    __version__ = _version("fcompare")
except Exception:
    from pathlib import Path
    try:
        import tomllib  # Python 3.11+
    except ImportError:
        import tomli as tomllib  # Python < 3.11: pip install tomli

    with open(Path(__file__).resolve().parents[2] / "pyproject.toml", "rb") as f:
        __version__ = tomllib.load(f)["project"]["version"]

# Public API: only what users should import directly
from fcompare.commands import CompareCommand
from fcompare.core import (
    CompareMethod, CompareParams, Fingerprint, FileInfo,
    FingerprinterImpl, FileGrouperImpl, probe_atime_preservation,
    FCompareError, AtimeUnsupportedError, UnsupportedMethodError)

__all__ = [
    "CompareCommand",
    "CompareMethod",
    "CompareParams",
    "Fingerprint",
    "FileInfo",
    "FingerprinterImpl",
    "FileGrouperImpl",
    "probe_atime_preservation",
    "FCompareError",
    "AtimeUnsupportedError",
    "UnsupportedMethodError",
    "__version__",
]
