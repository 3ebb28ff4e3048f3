import os
from datetime import datetime
from typing import Optional

import cv2
import numpy as np
from loguru import logger

from .device import CaptureError


def snapshot_file_name(prefix: str = "selfie", now: Optional[datetime] = None) -> str:
    """``selfie_20240131235959.png`` style name, second resolution."""
    now = now or datetime.now()
    return f"{prefix}_{now:%Y%m%d%H%M%S}.png"


def save_snapshot(
    frame: Optional[np.ndarray],
    folder: Optional[str],
    prefix: str = "selfie",
    now: Optional[datetime] = None,
) -> str:
    """
    Write ``frame`` as PNG into ``folder`` and return the file path.

    A snapshot taken within the same second as a previous one replaces it.
    """
    if frame is None:
        raise CaptureError("No frame captured.")
    if not folder or not os.path.isdir(folder):
        raise CaptureError(f"Cannot save snapshot: '{folder}' is not a folder.")

    path = os.path.join(folder, snapshot_file_name(prefix, now))
    if not cv2.imwrite(path, frame):
        raise CaptureError(f"Failed to write snapshot to {path}.")

    logger.info(f"Snapshot saved to {path}")
    return path
