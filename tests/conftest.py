"""
Shared fixtures for comparison core tests.
Creates isolated temporary directories with controlled test files.
"""
import os
import pytest
import tempfile
from pathlib import Path
from typing import Callable, Dict
import sys

# Add src/ to sys.path so the 'fcompare' package is importable without installing
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root / "src"))

MIB = 1024 * 1024
OLD_ATIME = 1_000_000_000  # 2001-09-09, well before any read


def pattern_bytes(size: int, seed: int = 0) -> bytes:
    """Deterministic non-uniform content (a plain repeat would hash the same per window)."""
    block = bytes((i * 31 + seed) % 251 for i in range(4096))
    reps, rest = divmod(size, len(block))
    return block * reps + block[:rest]


@pytest.fixture
def temp_dir():
    """Creates isolated temporary directory, auto-cleanup after test."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def make_file(temp_dir) -> Callable[..., Path]:
    """Factory writing a file of given content (or pattern of given size) into temp_dir."""
    def _make(name: str, content: bytes = None, size: int = None, seed: int = 0) -> Path:
        path = temp_dir / name
        path.write_bytes(content if content is not None else pattern_bytes(size, seed))
        return path
    return _make


@pytest.fixture
def test_files(make_file) -> Dict[str, Path]:
    """
    Small files for comparison scenarios:
    - 2 identical files (same)
    - 1 file of the same size, different content
    - 1 file of another size
    - 1 empty file
    """
    files = {}
    files["same_a"] = make_file("same_a.txt", b"A" * 1024)
    files["same_b"] = make_file("same_b.txt", b"A" * 1024)
    files["same_size"] = make_file("same_size.txt", b"B" * 1024)
    files["other_size"] = make_file("other_size.txt", b"C" * 1500)
    files["empty"] = make_file("empty.txt", b"")
    return files


@pytest.fixture
def aged():
    """Sets a file's atime far in the past, keeping its mtime."""
    def _age(path: Path) -> os.stat_result:
        st = os.stat(path)
        os.utime(path, ns=(OLD_ATIME * 1_000_000_000, st.st_mtime_ns))
        return os.stat(path)
    return _age
