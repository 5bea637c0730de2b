from __future__ import annotations
from pydantic import BaseModel, Field
from typing import List
from .shortcut import Shortcut

class ShortcutsFile(BaseModel):
    source: str | None = None
    shortcuts: List[Shortcut] = Field(default_factory=list)

    @classmethod
    def from_binary(cls, data: bytes | str, **opts) -> "ShortcutsFile":
        from ..binary.reader import parse_file
        return parse_file(data, **opts)
