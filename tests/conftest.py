import os

# Must be set before the first Qt import
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import numpy as np
import pytest

from imagecam.browser import DirectoryUnavailableError, FileSystemReader, Navigator, RawEntry
from imagecam.capture import CaptureDevice, CaptureError


class FakeReader(FileSystemReader):
    """In-memory folders: {folder: [names]}, names ending in '/' are folders."""

    def __init__(self, folders):
        self.folders = folders
        self.calls = []

    def list_entries(self, path):
        self.calls.append(path)
        if path not in self.folders:
            raise DirectoryUnavailableError(path, "folder does not exist")
        entries = []
        for name in self.folders[path]:
            is_dir = name.endswith("/")
            clean = name.rstrip("/")
            entries.append(RawEntry(clean, os.path.join(path, clean), is_dir))
        return entries


class FakeCaptureDevice(CaptureDevice):
    def __init__(self, frames=None, fail_open=False):
        self.frames = list(frames or [])
        self.fail_open = fail_open
        self._open = False
        self.closed = 0

    @property
    def is_open(self):
        return self._open

    def open(self):
        if self.fail_open:
            raise CaptureError("No camera available at index 0.")
        self._open = True

    def read_frame(self):
        if not self._open or not self.frames:
            return None
        return self.frames.pop(0) if len(self.frames) > 1 else self.frames[0]

    def close(self):
        self._open = False
        self.closed += 1


@pytest.fixture
def frame():
    img = np.zeros((48, 64, 3), dtype=np.uint8)
    img[:, :, 2] = 255  # red in BGR
    return img


@pytest.fixture
def fake_reader():
    root = os.path.abspath(os.sep + "photos")
    return FakeReader({
        root: ["b.txt", "a.png", "sub/"],
        os.path.join(root, "sub"): ["Zeta.JPG", "alpha.jpeg", "notes.md", "nested/"],
        os.path.join(root, "sub", "nested"): [],
    })


@pytest.fixture
def photos_root():
    return os.path.abspath(os.sep + "photos")


@pytest.fixture
def fake_navigator(fake_reader):
    return Navigator(fake_reader)


@pytest.fixture
def disk_tree(tmp_path):
    """
    tmp_path/
        holiday/            (folder)
        Archive/            (folder)
        beach.PNG
        cat.jpg
        readme.txt
    """
    (tmp_path / "holiday").mkdir()
    (tmp_path / "Archive").mkdir()
    (tmp_path / "beach.PNG").write_bytes(b"png")
    (tmp_path / "cat.jpg").write_bytes(b"jpg")
    (tmp_path / "readme.txt").write_text("hello")
    return tmp_path


@pytest.fixture
def navigator():
    return Navigator()


@pytest.fixture
def make_device():
    return FakeCaptureDevice
