"""
Canvas Components - compile HTML component files into a bookmarklet.
"""

from canvascomponents.config import APP_VERSION as __version__

__all__ = ["__version__"]
