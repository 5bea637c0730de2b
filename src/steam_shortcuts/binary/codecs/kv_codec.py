from __future__ import annotations

import logging
from enum import IntEnum
from typing import Dict, List, Optional, Tuple, Union

from .bytecursor import Cursor, DecodeError, TruncatedInputError

logger = logging.getLogger(__name__)

DEFAULT_MAX_DEPTH = 64
DEFAULT_ENCODING = "utf-8"

TreeValue = Union["TreeNode", str, int]
TreeNode = Dict[str, TreeValue]


class KvType(IntEnum):
    OBJECT = 0x00
    STRING = 0x01
    INT = 0x02
    END = 0x08


class MalformedTextError(DecodeError):
    def __init__(self, raw: bytes, offset: int, encoding: str):
        super().__init__(f"invalid {encoding} text at {offset}: {raw!r}")
        self.raw = raw
        self.offset = offset
        self.encoding = encoding


class NestingTooDeepError(DecodeError):
    pass


__all__ = [
    "DEFAULT_ENCODING",
    "DEFAULT_MAX_DEPTH",
    "DecodeError",
    "KvType",
    "MalformedTextError",
    "NestingTooDeepError",
    "TreeNode",
    "TreeValue",
    "TruncatedInputError",
    "decode_object",
    "decode_tree",
]


def _read_text(cur: Cursor, encoding: str) -> str:
    start = cur.tell()
    raw = cur.read_cstring()
    try:
        return raw.decode(encoding)
    except UnicodeDecodeError as e:
        raise MalformedTextError(raw, start, encoding) from e


def decode_object(
    cur: Cursor,
    *,
    max_depth: int = DEFAULT_MAX_DEPTH,
    encoding: str = DEFAULT_ENCODING,
) -> TreeNode:
    """
    Decode one object scope starting at the cursor, as if its type tag and key
    were already consumed. Returns when the matching END tag has been read
    (nothing after it is consumed) or when input runs out.

    Nesting is tracked on an explicit frame stack rather than the Python call
    stack; each frame is (map being built, key it will be stored under in the
    parent). More than `max_depth` open nested objects raises
    NestingTooDeepError.
    """
    root: TreeNode = {}
    frames: List[Tuple[TreeNode, Optional[str]]] = [(root, None)]

    while True:
        tag_pos = cur.tell()
        tag = cur.next_byte()
        current, _ = frames[-1]

        if tag is None:
            if len(frames) > 1:
                logger.warning(
                    "input ended inside %d nested object(s) at %d; closing them implicitly",
                    len(frames) - 1, tag_pos,
                )
            # Unwind: each open object is stored into its parent as if terminated
            while len(frames) > 1:
                node, key = frames.pop()
                frames[-1][0][key] = node
            return root

        if tag == KvType.END:
            node, key = frames.pop()
            if not frames:
                return node
            frames[-1][0][key] = node
            logger.debug("end object %r (depth %d)", key, len(frames) - 1)
            continue

        key = _read_text(cur, encoding)

        if tag == KvType.OBJECT:
            if len(frames) > max_depth:
                raise NestingTooDeepError(
                    f"object {key!r} at {tag_pos} exceeds max_depth={max_depth}"
                )
            logger.debug("object %r (depth %d)", key, len(frames))
            frames.append(({}, key))
        elif tag == KvType.STRING:
            value = _read_text(cur, encoding)
            current[key] = value
            logger.debug("string %r = %r", key, value)
        elif tag == KvType.INT:
            try:
                value = cur.u32le()
            except TruncatedInputError as e:
                raise TruncatedInputError(f"integer {key!r} truncated at {tag_pos}: {e}") from e
            current[key] = value
            logger.debug("int %r = %d", key, value)
        else:
            # Width of an unknown value is not knowable; only the tag and key are dropped
            logger.warning("unrecognized type 0x%02x for key %r at %d; entry skipped", tag, key, tag_pos)


def decode_tree(
    data: bytes | bytearray | memoryview,
    *,
    max_depth: int = DEFAULT_MAX_DEPTH,
    encoding: str = DEFAULT_ENCODING,
) -> TreeNode:
    """Decode a whole buffer as the implicit root object."""
    return decode_object(Cursor(data), max_depth=max_depth, encoding=encoding)
