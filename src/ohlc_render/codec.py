"""PNG encoding of finished canvases.

The renderer hands a packed ``(height, width, 3)`` ``uint8`` buffer to
:func:`write_png`, which encodes it with Pillow as an 8-bit RGB PNG (no
alpha channel).  Encoder and file system failures are reported as
:class:`~ohlc_render.errors.CodecError`.
"""

from __future__ import annotations

from pathlib import Path
from typing import Union

import numpy as np
from PIL import Image

from .errors import CodecError


def write_png(buffer: np.ndarray, path: Union[str, Path]) -> Path:
    """Encode ``buffer`` as PNG at ``path`` and return the path."""
    if buffer.ndim != 3 or buffer.shape[2] != 3 or buffer.dtype != np.uint8:
        raise CodecError(f"Expected a (height, width, 3) uint8 buffer, got {buffer.shape} {buffer.dtype}")
    out_path = Path(path)
    try:
        image = Image.fromarray(np.ascontiguousarray(buffer))
        image.save(out_path, format="PNG")
    except (OSError, ValueError) as exc:
        raise CodecError(f"Failed to write PNG to {out_path}: {exc}") from exc
    return out_path
