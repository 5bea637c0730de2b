"""Byte builders for shortcuts.vdf fixtures."""

OBJ, STR, INT, END = b"\x00", b"\x01", b"\x02", b"\x08"


def cstr(s: str) -> bytes:
    return s.encode("utf-8") + b"\x00"


def text(key: str, value: str) -> bytes:
    return STR + cstr(key) + cstr(value)


def u32(key: str, value: int) -> bytes:
    return INT + cstr(key) + value.to_bytes(4, "little")


def obj(key: str, body: bytes) -> bytes:
    return OBJ + cstr(key) + body + END


def encode(tree: dict) -> bytes:
    """Entries of one object, without its terminator."""
    out = bytearray()
    for k, v in tree.items():
        if isinstance(v, dict):
            out += obj(k, encode(v))
        elif isinstance(v, str):
            out += text(k, v)
        else:
            out += u32(k, v)
    return bytes(out)


def entry(**overrides) -> dict:
    e = {
        "appid": 3141592653,
        "AppName": "Calc",
        "exe": "calc.exe",
        "StartDir": "/",
        "icon": "",
        "ShortcutPath": "",
        "LaunchOptions": "",
        "IsHidden": 0,
        "AllowDesktopConfig": 1,
        "AllowOverlay": 1,
        "OpenVR": 0,
        "Devkit": 0,
        "DevkitGameID": "",
        "LastPlayTime": 0,
        "tags": {},
    }
    e.update(overrides)
    return e


def shortcuts_file(entries: dict) -> bytes:
    """A complete file: root { shortcuts { ... } } with both terminators."""
    return encode({"shortcuts": entries}) + END
