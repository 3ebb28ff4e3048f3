"""
Image Camera Manager: a folder browser for images with webcam snapshots.
"""
__version__ = "0.1.0"
