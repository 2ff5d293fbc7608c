"""Intrinsic image size lookup for local files and data URIs."""

from __future__ import annotations

import base64
import binascii
import logging
from io import BytesIO
from pathlib import Path
from typing import Optional, Tuple
from urllib.parse import unquote, urlparse

from PIL import Image, UnidentifiedImageError

logger = logging.getLogger(__name__)

REMOTE_SCHEMES = ('http', 'https', 'ftp')


class ImageSizeProbe:
    """Reads pixel dimensions with Pillow without decoding the full image."""

    def __init__(self, base_dir: Optional[Path] = None) -> None:
        self.base_dir = Path(base_dir) if base_dir else None

    def _open_source(self, source: str):
        if source.startswith('data:'):
            header, _, payload = source.partition(',')
            if ';base64' not in header:
                return None
            return BytesIO(base64.b64decode(payload, validate=False))

        parsed = urlparse(source)
        if parsed.scheme in REMOTE_SCHEMES:
            return None

        path = Path(unquote(parsed.path)) if parsed.scheme == 'file' else Path(source)
        if not path.is_absolute() and self.base_dir is not None:
            path = self.base_dir / path
        if not path.is_file():
            return None
        return path

    def size(self, source: Optional[str]) -> Optional[Tuple[int, int]]:
        """
        Return ``(width, height)`` of an image source.

        Args:
            source: Local path, ``file:`` URL or base64 ``data:`` URI

        Returns:
            Pixel size, or None for remote or unreadable sources
        """
        if not source:
            return None

        try:
            handle = self._open_source(source)
            if handle is None:
                return None
            with Image.open(handle) as image:
                width, height = image.size
        except (OSError, UnidentifiedImageError, binascii.Error, ValueError) as exc:
            logger.debug(f"Could not probe image size for {source[:64]!r}: {exc}")
            return None

        if not width or not height:
            return None
        return width, height
