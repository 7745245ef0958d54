from __future__ import annotations

import contextlib
import logging
import os
from typing import Optional, Union

from .codec import read_image, write_image
from .errors import SinkOpenFailed, SinkWriteFailed, SourceOpenFailed
from .image import Image
from .settings import CodecSettings

logger = logging.getLogger(__name__)

PathLike = Union[str, "os.PathLike[str]"]


def save(image: Image, path: PathLike) -> None:
    """Encode ``image`` into the file at ``path``, replacing it if present.

    A failed write removes the partially written file.
    """
    try:
        handle = open(path, "wb")
    except OSError as exc:
        raise SinkOpenFailed(exc, os.fspath(path)) from exc
    try:
        with handle:
            write_image(image, handle)
    except SinkWriteFailed:
        _discard_partial(path)
        raise
    except OSError as exc:
        # close() flushes buffered data and can fail after write_image returned.
        _discard_partial(path)
        raise SinkWriteFailed(exc, os.fspath(path)) from exc


def load(path: PathLike, settings: Optional[CodecSettings] = None) -> Image:
    """Decode the limg file at ``path``."""
    try:
        handle = open(path, "rb")
    except OSError as exc:
        raise SourceOpenFailed(exc, os.fspath(path)) from exc
    with handle:
        return read_image(handle, settings)


def _discard_partial(path: PathLike) -> None:
    logger.warning("Removing partial limg file after failed write: %s", os.fspath(path))
    with contextlib.suppress(OSError):
        os.remove(path)
