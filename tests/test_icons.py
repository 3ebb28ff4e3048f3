import os

from imagecam.browser import EntryKind, IconResolver
from imagecam.browser.icons import DEFAULT_ICONS
from imagecam.core.config import IconSettings


def test_packaged_icons_exist():
    for kind in EntryKind:
        assert os.path.isfile(DEFAULT_ICONS[kind])


def test_default_resolution():
    resolver = IconResolver()
    assert resolver.resolve(EntryKind.FOLDER).endswith("folder.svg")
    assert resolver.resolve(EntryKind.IMAGE).endswith("image.svg")


def test_override_used_when_file_exists(tmp_path):
    custom = tmp_path / "my_folder.png"
    custom.write_bytes(b"icon")
    resolver = IconResolver({EntryKind.FOLDER: str(custom)})
    assert resolver.resolve(EntryKind.FOLDER) == str(custom)
    assert resolver.resolve(EntryKind.IMAGE) == DEFAULT_ICONS[EntryKind.IMAGE]


def test_missing_override_falls_back(tmp_path):
    resolver = IconResolver({EntryKind.IMAGE: str(tmp_path / "missing.png")})
    assert resolver.resolve(EntryKind.IMAGE) == DEFAULT_ICONS[EntryKind.IMAGE]


def test_from_settings(tmp_path):
    custom = tmp_path / "img.svg"
    custom.write_text("<svg/>")
    resolver = IconResolver.from_settings(IconSettings(image=str(custom)))
    assert resolver.resolve(EntryKind.IMAGE) == str(custom)
    assert resolver.resolve(EntryKind.FOLDER) == DEFAULT_ICONS[EntryKind.FOLDER]
