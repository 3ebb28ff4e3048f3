import os

from imagecam.bootstrap import build_navigator, parse_args
from imagecam.browser import EntryKind
from imagecam.core.config import ConfigManager


def test_parse_args_defaults():
    args = parse_args([])
    assert args.folder is None
    assert args.config == "config.json"
    assert args.debug is None


def test_parse_args_full():
    args = parse_args(["--config", "my.toml", "--debug", "/pictures"])
    assert args.folder == "/pictures"
    assert args.config == "my.toml"
    assert args.debug is True


def test_build_navigator_uses_config(tmp_path, disk_tree):
    config = ConfigManager(str(tmp_path / "config.json"))
    config.data.browser.image_extensions = ["txt"]

    navigator = build_navigator(config)
    listing = navigator.list_folder(str(disk_tree))

    assert [e.name for e in listing if e.kind is EntryKind.IMAGE] == ["readme.txt"]
    assert os.path.isfile(listing[0].icon_ref)
