import errno
from unittest.mock import patch

import pytest

from filesearch.search.filesystem import AtomicFileWriter, LocalFileWriter
from filesearch.search.filesystem.writers import TEMP_SUFFIX


def test_local_writer_replaces_content(tmp_path):
    target = tmp_path / "doc"
    writer = LocalFileWriter()

    writer.write(target, b"first version, rather long")
    writer.write(target, b"second")

    assert target.read_bytes() == b"second"


def test_local_writer_propagates_os_errors(tmp_path):
    with pytest.raises(OSError):
        LocalFileWriter().write(tmp_path / "missing-dir" / "doc", b"{}")


@pytest.mark.parametrize("fsync", [False, True])
def test_atomic_writer_replaces_content(tmp_path, fsync):
    target = tmp_path / "doc"
    writer = AtomicFileWriter(fsync=fsync)

    writer.write(target, b"first")
    writer.write(target, b"second")

    assert target.read_bytes() == b"second"
    assert [p.name for p in tmp_path.iterdir()] == ["doc"]


def test_atomic_writer_keeps_previous_version_on_failure(tmp_path):
    target = tmp_path / "doc"
    writer = AtomicFileWriter()
    writer.write(target, b"previous")

    with patch(
        "filesearch.search.filesystem.writers.os.replace",
        side_effect=OSError(errno.ENOSPC, "No space left on device"),
    ):
        with pytest.raises(OSError):
            writer.write(target, b"next")

    assert target.read_bytes() == b"previous"
    assert not (tmp_path / ("doc" + TEMP_SUFFIX)).exists()
