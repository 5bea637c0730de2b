from __future__ import annotations
from dataclasses import dataclass
from typing import Callable, Dict, List, Tuple

from steam_shortcuts.binary.codecs.kv_codec import TreeNode, TreeValue
from steam_shortcuts.binary.scale import epoch_seconds_to_datetime, flag_to_bool
from ...models.shortcut import Shortcut


class ParseError(ValueError):
    pass


@dataclass(frozen=True)
class FieldProblem:
    field: str
    key: str
    problem: str  # "missing" or "expected <type>, got <type>"


class ShortcutEntryError(ParseError):
    def __init__(self, index: int, problems: Tuple[FieldProblem, ...]):
        detail = "; ".join(f"{p.field} ({p.key!r}): {p.problem}" for p in problems)
        super().__init__(f"malformed shortcut entry {index}: {detail}")
        self.index = index
        self.problems = problems


@dataclass(frozen=True)
class ShortcutField:
    name: str      # Shortcut attribute
    key: str       # key inside the entry object
    wire: type     # str (Text) or int (Integer)
    convert: Callable[[object], object]


def _text(v: object) -> object: return v

# On-wire names and types for every required entry child
SHORTCUT_FIELD_PLAN: Tuple[ShortcutField, ...] = (
    ShortcutField("app_name",             "AppName",            str, _text),
    ShortcutField("exe",                  "exe",                str, _text),
    ShortcutField("start_dir",            "StartDir",           str, _text),
    ShortcutField("is_hidden",            "IsHidden",           int, flag_to_bool),
    ShortcutField("icon",                 "icon",               str, _text),
    ShortcutField("launch_options",       "LaunchOptions",      str, _text),
    ShortcutField("allow_desktop_config", "AllowDesktopConfig", int, flag_to_bool),
    ShortcutField("open_vr",              "OpenVR",             int, flag_to_bool),
    ShortcutField("shortcut_path",        "ShortcutPath",       str, _text),
    ShortcutField("last_play_time",       "LastPlayTime",       int, epoch_seconds_to_datetime),
)

_WIRE_NAMES = {dict: "object", str: "text", int: "integer"}


def _wire_name(v: TreeValue) -> str:
    for t, name in _WIRE_NAMES.items():
        if isinstance(v, t):
            return name
    return type(v).__name__


def _lookup(node: TreeNode, key: str) -> Tuple[bool, TreeValue | None]:
    """Exact key first, then case-insensitive (Steam has written both AppName and appname)."""
    if key in node:
        return True, node[key]
    lk = key.lower()
    for k, v in node.items():
        if k.lower() == lk:
            return True, v
    return False, None


def project(node: TreeValue, assigned_id: int) -> Shortcut:
    """
    Interpret one entry of the "shortcuts" object as a Shortcut.

    `id` is always the caller's positional index, never read from the entry.
    Every missing or wrongly-typed field is collected before raising a single
    ShortcutEntryError, so one report names all offending keys.
    """
    if not isinstance(node, dict):
        raise ShortcutEntryError(
            assigned_id, (FieldProblem("<entry>", str(assigned_id), f"expected object, got {_wire_name(node)}"),)
        )

    values: Dict[str, object] = {}
    problems: List[FieldProblem] = []

    for f in SHORTCUT_FIELD_PLAN:
        found, raw = _lookup(node, f.key)
        if not found:
            problems.append(FieldProblem(f.name, f.key, "missing"))
            continue
        if not isinstance(raw, f.wire):
            problems.append(FieldProblem(f.name, f.key, f"expected {_WIRE_NAMES[f.wire]}, got {_wire_name(raw)}"))
            continue
        values[f.name] = f.convert(raw)

    if problems:
        raise ShortcutEntryError(assigned_id, tuple(problems))

    return Shortcut(id=assigned_id, tags=[], **values)
