from __future__ import annotations
from datetime import datetime, timezone
from pydantic import BaseModel, Field
from typing import List


def _now() -> datetime:
    return datetime.now(timezone.utc)


class Shortcut(BaseModel):
    """One non-Steam application shortcut as stored in shortcuts.vdf.

    The defaults only apply to hand-built records; decoded records always
    carry every field from the file.
    """
    id: int = Field(0, ge=0)
    app_name: str = "Default Shortcut"
    exe: str = "calc.exe"
    start_dir: str = "/"
    is_hidden: bool = False
    icon: str = ""
    launch_options: str = ""
    allow_desktop_config: bool = True
    shortcut_path: str = ""
    last_play_time: datetime = Field(default_factory=_now)
    open_vr: bool = False
    # Always empty: the "tags" sub-object is not decoded yet
    tags: List[str] = Field(default_factory=list)
