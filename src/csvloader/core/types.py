"""Type aliases used across csvloader."""

from __future__ import annotations

from typing import BinaryIO, Union

Schema = tuple[str, ...]
InputStream = Union[BinaryIO, bytes, bytearray, None]
