from .camera_view import CameraView
from .image_popup import ImagePopup

__all__ = ["CameraView", "ImagePopup"]
