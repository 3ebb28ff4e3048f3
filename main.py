"""
Image Camera Manager - Main Entry Point

Allows running from a source checkout: ``python main.py [FOLDER]``.
"""
import sys

from imagecam.bootstrap import main

if __name__ == "__main__":
    sys.exit(main())
