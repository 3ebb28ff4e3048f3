"""
Bootstrap helpers: wire config, logging, the Navigator and the Qt shell.

Objects are built once here and passed down; nothing is looked up globally.
"""
import argparse
import asyncio
import sys
from typing import List, Optional

from PySide6.QtWidgets import QApplication
from qasync import QEventLoop
from loguru import logger

from .browser import IconResolver, LocalFileSystemReader, Navigator
from .capture import OpenCVCaptureDevice
from .core.config import ConfigManager
from .core.logging import setup_logging


def build_navigator(config: ConfigManager) -> Navigator:
    data = config.data
    return Navigator(
        LocalFileSystemReader(),
        icons=IconResolver.from_settings(data.icons),
        image_extensions=data.browser.image_extensions,
    )


def build_main_window(config: ConfigManager, device=None):
    """Create navigator, view model and window; ``device`` defaults to OpenCV."""
    from .ui.main_window import MainWindow
    from .ui.viewmodels.browser_viewmodel import BrowserViewModel

    data = config.data
    navigator = build_navigator(config)
    viewmodel = BrowserViewModel(navigator, data)
    if device is None and data.camera.enabled:
        device = OpenCVCaptureDevice(data.camera.device_index)
    return MainWindow(viewmodel, device, data)


def run_app(config_path: str = "config.json", start_folder: Optional[str] = None,
            debug: Optional[bool] = None) -> int:
    """
    Run the application until the main window closes.

    Handles:
    - Qt application and qasync event loop
    - Logging from config (``debug`` overrides ``general.debug_mode``)
    - Initial folder from the argument or ``browser.start_folder``
    - Camera shutdown
    """
    config = ConfigManager(config_path)
    general = config.data.general
    setup_logging(general.debug_mode if debug is None else debug, general.log_dir)

    app = QApplication.instance() or QApplication(sys.argv)
    app.setApplicationName("Image Camera Manager")
    loop = QEventLoop(app)
    asyncio.set_event_loop(loop)

    app_close_event = asyncio.Event()
    app.aboutToQuit.connect(app_close_event.set)

    with loop:
        window = build_main_window(config)
        window.show()
        window.start_camera()

        folder = start_folder or config.data.browser.start_folder
        if folder:
            window.viewmodel.browse(folder)

        logger.info("Image Camera Manager started")
        try:
            loop.run_until_complete(app_close_event.wait())
        except KeyboardInterrupt:
            logger.info("Application interrupted by user")
        finally:
            window.camera_view.stop()

    logger.info("Image Camera Manager shutdown complete")
    return 0


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="imagecam",
        description="Folder browser with webcam snapshots"
    )
    parser.add_argument("folder", nargs="?", help="Folder to open on start")
    parser.add_argument("--config", default="config.json", help="Settings file (JSON or TOML)")
    parser.add_argument("--debug", action="store_true", default=None, help="Verbose logging")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    return run_app(args.config, args.folder, args.debug)
