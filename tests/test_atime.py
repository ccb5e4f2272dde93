"""
Tests for the access time capability probe and the capture/restore scope.
"""
import errno
import logging
import os
from unittest import mock

import pytest

from fcompare.core import atime as atime_module
from fcompare.core.atime import (
    PROBE_SENTINEL, probe_atime_preservation, preserved_times, read_file_times
)
from fcompare.core.exceptions import (
    AtimeRestoreError, IOFailureError, NotFoundError, PermissionDeniedError
)
from conftest import OLD_ATIME


class TestProbeAtimePreservation:
    """Empirical check of whether a restored atime sticks."""

    def test_capable_directory(self, make_file):
        target = make_file("target.bin", b"data")
        assert probe_atime_preservation(str(target)) is True

    def test_sentinel_is_year_2000(self):
        assert PROBE_SENTINEL == 946684800

    def test_leaves_no_files_behind(self, temp_dir, make_file):
        target = make_file("target.bin", b"data")
        before = sorted(os.listdir(temp_dir))

        probe_atime_preservation(str(target))

        assert sorted(os.listdir(temp_dir)) == before

    def test_reference_file_need_not_exist(self, temp_dir):
        """Only the directory matters."""
        assert probe_atime_preservation(str(temp_dir / "not_yet_written.bin")) is True

    def test_ignored_timestamp_set_reports_not_capable(self, temp_dir, make_file):
        """A filesystem that silently drops the set is a normal False, not an error."""
        target = make_file("target.bin", b"data")
        before = sorted(os.listdir(temp_dir))

        with mock.patch.object(atime_module.os, "utime"):
            assert probe_atime_preservation(str(target)) is False

        assert sorted(os.listdir(temp_dir)) == before

    def test_coarsened_timestamp_reports_not_capable(self, make_file):
        target = make_file("target.bin", b"data")
        real_stat = os.stat

        def coarse_stat(path, *args, **kwargs):
            st = real_stat(path, *args, **kwargs)
            return mock.Mock(st_atime=st.st_atime + 1)

        with mock.patch.object(atime_module.os, "stat", side_effect=coarse_stat):
            assert probe_atime_preservation(str(target)) is False

    def test_missing_directory_raises_not_found(self, temp_dir):
        with pytest.raises(NotFoundError):
            probe_atime_preservation(str(temp_dir / "nope" / "file.bin"))

    def test_unwritable_directory_raises_permission_denied(self, make_file):
        target = make_file("target.bin", b"data")
        with mock.patch.object(atime_module.tempfile, "mkstemp",
                               side_effect=PermissionError(errno.EACCES, "Permission denied")):
            with pytest.raises(PermissionDeniedError):
                probe_atime_preservation(str(target))

    def test_probe_file_removed_on_error(self, temp_dir, make_file):
        target = make_file("target.bin", b"data")
        before = sorted(os.listdir(temp_dir))

        with mock.patch.object(atime_module.os, "stat",
                               side_effect=OSError(errno.EIO, "Input/output error")):
            with pytest.raises(IOFailureError):
                probe_atime_preservation(str(target))

        assert sorted(os.listdir(temp_dir)) == before


class TestPreservedTimes:
    """Capture on entry, restore on every exit path."""

    def test_restores_atime_after_read(self, make_file, aged):
        path = make_file("f.bin", b"x" * 4096)
        st = aged(path)

        with preserved_times(str(path)) as times:
            path.read_bytes()
            os.utime(path, None)  # force a visible change regardless of mount options

        after = os.stat(path)
        assert times.atime == OLD_ATIME
        assert int(after.st_atime) == OLD_ATIME
        assert after.st_mtime_ns == st.st_mtime_ns

    def test_restores_on_exception(self, make_file, aged):
        path = make_file("f.bin", b"x")
        aged(path)

        with pytest.raises(RuntimeError):
            with preserved_times(str(path)):
                os.utime(path, None)
                raise RuntimeError("boom")

        assert int(os.stat(path).st_atime) == OLD_ATIME

    def test_disabled_does_not_restore(self, make_file, aged):
        path = make_file("f.bin", b"x")
        aged(path)

        with preserved_times(str(path), enabled=False):
            os.utime(path, None)

        assert int(os.stat(path).st_atime) != OLD_ATIME

    def test_restore_failure_is_warning_by_default(self, make_file, caplog):
        path = make_file("f.bin", b"x")

        with caplog.at_level(logging.WARNING, logger="fcompare"):
            with mock.patch.object(atime_module.os, "utime",
                                   side_effect=PermissionError(errno.EPERM, "Operation not permitted")):
                with preserved_times(str(path)):
                    pass

        assert "Failed to restore timestamps" in caplog.text

    def test_restore_failure_raises_when_strict(self, make_file):
        path = make_file("f.bin", b"x")

        with mock.patch.object(atime_module.os, "utime",
                               side_effect=PermissionError(errno.EPERM, "Operation not permitted")):
            with pytest.raises(AtimeRestoreError):
                with preserved_times(str(path), strict=True):
                    pass

    def test_strict_restore_failure_does_not_mask_body_error(self, make_file):
        path = make_file("f.bin", b"x")

        with mock.patch.object(atime_module.os, "utime",
                               side_effect=PermissionError(errno.EPERM, "Operation not permitted")):
            with pytest.raises(RuntimeError, match="boom"):
                with preserved_times(str(path), strict=True):
                    raise RuntimeError("boom")

    def test_read_file_times_missing_file(self, temp_dir):
        with pytest.raises(NotFoundError):
            read_file_times(str(temp_dir / "missing.bin"))
