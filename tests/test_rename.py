import errno
import os
import sys
from unittest.mock import MagicMock

import pytest

from imagecam.browser import InvalidNameError, MoveConflictError, NotFoundError, RenameFailedError


@pytest.fixture
def opened(navigator, disk_tree):
    navigator.open_folder(str(disk_tree))
    return navigator


def test_rename_keeps_extension(opened, disk_tree):
    new_path = opened.rename(str(disk_tree / "cat.jpg"), "kitten")

    assert new_path == str(disk_tree / "kitten.jpg")
    assert (disk_tree / "kitten.jpg").read_bytes() == b"jpg"
    assert not (disk_tree / "cat.jpg").exists()


def test_rename_with_explicit_extension(opened, disk_tree):
    new_path = opened.rename(str(disk_tree / "beach.PNG"), "sea.png")
    assert new_path == str(disk_tree / "sea.png")
    assert (disk_tree / "sea.png").exists()


def test_rename_trims_name(opened, disk_tree):
    new_path = opened.rename(str(disk_tree / "cat.jpg"), "  tom  ")
    assert os.path.basename(new_path) == "tom.jpg"


@pytest.mark.parametrize("name", ["", "   ", None])
def test_rename_empty_name(opened, disk_tree, name):
    with pytest.raises(InvalidNameError):
        opened.rename(str(disk_tree / "cat.jpg"), name)
    assert (disk_tree / "cat.jpg").exists()


@pytest.mark.parametrize("name", ["..", ".", "a/b"])
def test_rename_rejects_paths(opened, disk_tree, name):
    with pytest.raises(InvalidNameError):
        opened.rename(str(disk_tree / "cat.jpg"), name)
    assert (disk_tree / "cat.jpg").exists()


def test_rename_missing_source(opened, disk_tree):
    with pytest.raises(NotFoundError):
        opened.rename(str(disk_tree / "gone.png"), "other")


def test_rename_conflict_is_rejected(opened, disk_tree):
    (disk_tree / "dog.jpg").write_bytes(b"dog")

    with pytest.raises(MoveConflictError) as exc_info:
        opened.rename(str(disk_tree / "cat.jpg"), "dog")

    assert exc_info.value.destination == str(disk_tree / "dog.jpg")
    assert (disk_tree / "cat.jpg").read_bytes() == b"jpg"
    assert (disk_tree / "dog.jpg").read_bytes() == b"dog"


def test_rename_to_same_name_is_noop(opened, disk_tree):
    handler = MagicMock()
    opened.listing_changed.connect(handler)

    assert opened.rename(str(disk_tree / "cat.jpg"), "cat") == str(disk_tree / "cat.jpg")
    handler.assert_not_called()


def test_rename_refreshes_parent_listing(opened, disk_tree):
    handler = MagicMock()
    opened.listing_changed.connect(handler)

    opened.rename(str(disk_tree / "cat.jpg"), "kitten")

    handler.assert_called_once()
    folder, listing = handler.call_args[0]
    assert folder == str(disk_tree)
    assert "kitten.jpg" in [e.name for e in listing]
    assert "cat.jpg" not in [e.name for e in listing]


def test_rename_failure_keeps_history(opened, disk_tree):
    before = opened.history.back_entries
    with pytest.raises(NotFoundError):
        opened.rename(str(disk_tree / "gone.png"), "x")
    assert opened.history.back_entries == before


def test_rename_folder_keeps_name_as_given(opened, disk_tree):
    new_path = opened.rename(str(disk_tree / "holiday"), "summer")
    assert new_path == str(disk_tree / "summer")
    assert (disk_tree / "summer").is_dir()


def test_rename_to_own_dotted_stem_is_noop(opened, disk_tree):
    (disk_tree / "img.v1.png").write_bytes(b"png")
    entry = next(e for e in opened.refresh() if e.name == "img.v1.png")

    assert entry.stem == "img.v1"
    assert opened.rename(entry.path, entry.stem) == entry.path
    assert (disk_tree / "img.v1.png").exists()
    assert not (disk_tree / "img.v1").exists()


def test_rename_dotted_name_keeps_extension(opened, disk_tree):
    new_path = opened.rename(str(disk_tree / "cat.jpg"), "trip.2024")
    assert new_path == str(disk_tree / "trip.2024.jpg")
    assert (disk_tree / "trip.2024.jpg").read_bytes() == b"jpg"


def test_rename_extension_matches_any_case(opened, disk_tree):
    new_path = opened.rename(str(disk_tree / "cat.jpg"), "kitten.JPG")
    assert os.path.basename(new_path) == "kitten.JPG"


def test_rename_name_too_long(opened, disk_tree):
    with pytest.raises(RenameFailedError) as exc_info:
        opened.rename(str(disk_tree / "cat.jpg"), "x" * 300)

    assert exc_info.value.source == str(disk_tree / "cat.jpg")
    assert (disk_tree / "cat.jpg").read_bytes() == b"jpg"


def test_rename_permission_denied(monkeypatch, opened, disk_tree):
    def deny(source, destination):
        raise PermissionError(errno.EACCES, "Permission denied")

    monkeypatch.setattr(os, "rename", deny)
    handler = MagicMock()
    opened.listing_changed.connect(handler)

    with pytest.raises(RenameFailedError, match="Permission denied"):
        opened.rename(str(disk_tree / "cat.jpg"), "kitten")

    handler.assert_not_called()


def test_rename_case_only(opened, disk_tree):
    new_path = opened.rename(str(disk_tree / "cat.jpg"), "Cat")

    assert new_path == str(disk_tree / "Cat.jpg")
    assert "Cat.jpg" in os.listdir(disk_tree)
    assert "cat.jpg" not in os.listdir(disk_tree)


@pytest.mark.skipif(sys.platform in ("win32", "darwin"), reason="needs symlinks on a case-sensitive volume")
def test_rename_case_only_onto_same_file(opened, disk_tree):
    # "Cat.jpg" resolving to "cat.jpg" is what a case-insensitive volume reports
    os.symlink(disk_tree / "cat.jpg", disk_tree / "Cat.jpg")

    new_path = opened.rename(str(disk_tree / "cat.jpg"), "Cat")

    assert new_path == str(disk_tree / "Cat.jpg")
    assert not (disk_tree / "Cat.jpg").is_symlink()
    assert (disk_tree / "Cat.jpg").read_bytes() == b"jpg"
    assert "cat.jpg" not in os.listdir(disk_tree)


def test_rename_case_only_onto_other_file_conflicts(opened, disk_tree):
    if sys.platform in ("win32", "darwin"):
        pytest.skip("case-insensitive volume")
    (disk_tree / "Cat.jpg").write_bytes(b"other")

    with pytest.raises(MoveConflictError):
        opened.rename(str(disk_tree / "cat.jpg"), "Cat")

    assert (disk_tree / "cat.jpg").read_bytes() == b"jpg"
    assert (disk_tree / "Cat.jpg").read_bytes() == b"other"
