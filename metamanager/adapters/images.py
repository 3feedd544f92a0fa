"""Image size lookup backed by Pillow."""
import logging
from typing import Optional, Tuple

from PIL import Image

logger = logging.getLogger(__name__)


class PillowImageInspector:
    """Reads the pixel size of local image files."""

    def size(self, path: str) -> Optional[Tuple[int, int]]:
        """Return (width, height) of the image, or None if it cannot be read.

        Only the image header is parsed; pixel data is never decoded.
        """
        try:
            with Image.open(path) as image:
                return image.size
        except (OSError, Image.DecompressionBombError) as e:
            logger.warning(f"Cannot read image {path}: {e}")
            return None
