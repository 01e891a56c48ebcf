"""Text acquisition: turn a file or stream into one in-memory string.

The lexer only ever scans complete strings. These helpers read the whole
input up front.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import IO


def read_source(source: str | os.PathLike[str] | IO[str] | IO[bytes], encoding: str = "utf-8") -> str:
    """Read a path or an open stream fully into a string.

    Args:
        source: A filesystem path, a text stream, or a binary stream
        encoding: Used for paths and binary streams

    Returns:
        The complete text

    Raises:
        TypeError: If `source` is None
        OSError: If the file cannot be read
    """
    if source is None:
        msg = "Null stream"
        raise TypeError(msg)

    if isinstance(source, (str, os.PathLike)):
        return Path(source).read_text(encoding=encoding)

    data = source.read()
    if isinstance(data, bytes):
        return data.decode(encoding)
    return data


__all__ = ["read_source"]
