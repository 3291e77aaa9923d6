"""
Integration tests for the filesystem staging area.
"""

import pytest
from confvault.adapters.filesystem_staging import FilesystemStagingArea
from confvault.errors import CleanupError, StorageError


def test_initialize_creates_empty_area(tmp_path):
    """Test a fresh staging directory is created."""
    area = FilesystemStagingArea(tmp_path / "staging")
    area.initialize()

    assert area.exists()
    assert area.list_staging_files() == []


def test_initialize_wipes_leftover_area(tmp_path):
    """Test crash recovery removes orphaned staging files."""
    leftover = tmp_path / "staging"
    (leftover / "nested").mkdir(parents=True)
    (leftover / "1234-orphan.stage").write_text("abc\tsecret\n")

    area = FilesystemStagingArea(leftover)
    area.initialize()

    assert area.exists()
    assert list(leftover.iterdir()) == []


def test_initialize_replaces_stray_file(tmp_path):
    """Test a plain file at the staging path is replaced."""
    path = tmp_path / "staging"
    path.write_text("not a directory")

    area = FilesystemStagingArea(path)
    area.initialize()

    assert path.is_dir()


def test_initialize_failure(tmp_path):
    """Test creation failure is a storage error."""
    blocker = tmp_path / "blocker"
    blocker.write_text("")

    area = FilesystemStagingArea(blocker / "staging")

    with pytest.raises(StorageError):
        area.initialize()


def test_staging_files_are_unique(tmp_path):
    """Test allocation never repeats a name, across adapter instances."""
    first = FilesystemStagingArea(tmp_path / "staging")
    first.initialize()
    second = FilesystemStagingArea(tmp_path / "staging")

    paths = [first.new_staging_file() for _ in range(50)]
    paths += [second.new_staging_file() for _ in range(50)]

    assert len(set(paths)) == 100
    assert all(p.exists() and p.suffix == ".stage" for p in paths)
    assert len(first.list_staging_files()) == 100


def test_new_staging_file_without_area(tmp_path):
    """Test allocation fails when the area is missing."""
    area = FilesystemStagingArea(tmp_path / "missing")

    with pytest.raises(StorageError):
        area.new_staging_file()


def test_list_ignores_subdirectories(tmp_path):
    """Test enumeration is not recursive."""
    area = FilesystemStagingArea(tmp_path / "staging")
    area.initialize()
    staged = area.new_staging_file()
    (area.path / "subdir").mkdir()
    (area.path / "subdir" / "deep.stage").write_text("x\ty\n")

    assert area.list_staging_files() == [staged]


def test_list_without_area(tmp_path):
    """Test enumeration fails when the area is missing."""
    with pytest.raises(StorageError):
        FilesystemStagingArea(tmp_path / "missing").list_staging_files()


def test_teardown(tmp_path):
    """Test teardown removes everything."""
    area = FilesystemStagingArea(tmp_path / "staging")
    area.initialize()
    area.new_staging_file()

    area.teardown()

    assert not area.exists()


def test_teardown_failure(tmp_path):
    """Test teardown of a missing area is a cleanup error."""
    area = FilesystemStagingArea(tmp_path / "missing")

    with pytest.raises(CleanupError):
        area.teardown()
