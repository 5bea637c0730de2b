from __future__ import annotations

import logging
from itertools import islice
from pathlib import Path
from typing import Iterator, Optional, Union

from .codecs.kv_codec import DEFAULT_ENCODING, DEFAULT_MAX_DEPTH, TreeNode, decode_tree
from .codecs.shortcut_codec import ParseError, project

from steam_shortcuts.models.file import ShortcutsFile
from steam_shortcuts.models.shortcut import Shortcut

logger = logging.getLogger(__name__)

BytesLike = Union[str, Path, bytes, bytearray, memoryview]

SHORTCUTS_KEY = "shortcuts"


class InvalidStructureError(ParseError):
    pass


# -----------------------------
# Helpers
# -----------------------------

def _load_bytes(inp: BytesLike) -> bytes:
    # OSError from the filesystem propagates unchanged
    if isinstance(inp, (bytes, bytearray, memoryview)):
        return bytes(inp)
    p = Path(str(inp))
    return p.read_bytes()


def _source_name(inp: BytesLike) -> Optional[str]:
    if isinstance(inp, (str, Path)):
        return str(inp)
    return None


def _shortcuts_object(root: TreeNode) -> TreeNode:
    if SHORTCUTS_KEY not in root:
        raise InvalidStructureError(f"top-level {SHORTCUTS_KEY!r} object not found (keys: {sorted(root)})")
    entries = root[SHORTCUTS_KEY]
    if not isinstance(entries, dict):
        raise InvalidStructureError(
            f"top-level {SHORTCUTS_KEY!r} must be an object, got {type(entries).__name__}"
        )
    return entries


# -----------------------------
# Collection / iterator
# -----------------------------

class ShortcutCollection:
    """
    Lazy, single-pass view over the "shortcuts" object of a decoded file.

    Entries are looked up by the decimal string of a running index starting at
    0 and projected on demand. The first missing index ends iteration for
    good; entries after a gap are never reached. A failed projection raises
    for that entry and also ends iteration.
    """

    def __init__(self, root: TreeNode, *, source: Optional[str] = None):
        self._entries: TreeNode = _shortcuts_object(root)
        self._source = source
        self._idx = 0
        self._done = False

    @classmethod
    def from_bytes(
        cls,
        data: bytes | bytearray | memoryview,
        *,
        max_depth: int = DEFAULT_MAX_DEPTH,
        encoding: str = DEFAULT_ENCODING,
        source: Optional[str] = None,
    ) -> "ShortcutCollection":
        root = decode_tree(data, max_depth=max_depth, encoding=encoding)
        return cls(root, source=source)

    @classmethod
    def open(
        cls,
        path: BytesLike,
        *,
        max_depth: int = DEFAULT_MAX_DEPTH,
        encoding: str = DEFAULT_ENCODING,
    ) -> "ShortcutCollection":
        raw = _load_bytes(path)
        return cls.from_bytes(raw, max_depth=max_depth, encoding=encoding, source=_source_name(path))

    @property
    def source(self) -> Optional[str]:
        """Path the collection was opened from; None for in-memory data."""
        return self._source

    def __iter__(self) -> "ShortcutCollection":
        return self

    def __next__(self) -> Shortcut:
        if self._done:
            raise StopIteration
        key = str(self._idx)
        if key not in self._entries:
            self._done = True
            extra = len(self._entries) - self._idx
            if extra > 0:
                logger.debug("stopped at missing entry %r; %d entries not reached", key, extra)
            raise StopIteration
        try:
            sc = project(self._entries[key], self._idx)
        except ParseError:
            self._done = True
            raise
        self._idx += 1
        return sc


# -----------------------------
# Full parse
# -----------------------------

def parse_file(
    data: BytesLike,
    *,
    max_depth: int = DEFAULT_MAX_DEPTH,
    encoding: str = DEFAULT_ENCODING,
) -> ShortcutsFile:
    """Decode and project every contiguous entry into a ShortcutsFile."""
    coll = ShortcutCollection.open(data, max_depth=max_depth, encoding=encoding)
    return ShortcutsFile(source=coll.source, shortcuts=list(coll))


# -----------------------------
# Summary / streaming
# -----------------------------

def summarize_file(
    data: BytesLike,
    *,
    max_depth: int = DEFAULT_MAX_DEPTH,
    encoding: str = DEFAULT_ENCODING,
) -> int:
    """
    Number of entries iteration would visit (contiguous indices from 0),
    counted without projecting them.
    """
    root = decode_tree(_load_bytes(data), max_depth=max_depth, encoding=encoding)
    entries = _shortcuts_object(root)
    n = 0
    while str(n) in entries:
        n += 1
    return n


def iter_shortcuts(
    data: BytesLike,
    *,
    max_shortcuts: Optional[int] = None,
    max_depth: int = DEFAULT_MAX_DEPTH,
    encoding: str = DEFAULT_ENCODING,
) -> Iterator[Shortcut]:
    """Stream Shortcut records, stopping early after `max_shortcuts` if given."""
    coll = ShortcutCollection.open(data, max_depth=max_depth, encoding=encoding)
    yield from islice(coll, max_shortcuts)
