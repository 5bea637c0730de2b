import pytest

from steam_shortcuts.binary.codecs.bytecursor import Cursor, TruncatedInputError


def test_next_byte_until_end():
    cur = Cursor(b"\x07\xff")
    assert cur.next_byte() == 0x07
    assert cur.next_byte() == 0xFF
    assert cur.next_byte() is None
    assert cur.next_byte() is None
    assert cur.tell() == 2


def test_u32le_assembles_low_byte_first():
    assert Cursor(bytes([0x01, 0x00, 0x00, 0x00])).u32le() == 1
    assert Cursor(bytes([0x00, 0x01, 0x00, 0x00])).u32le() == 256
    assert Cursor(bytes([0x78, 0x56, 0x34, 0x12])).u32le() == 0x12345678
    assert Cursor(b"\xff" * 4).u32le() == 0xFFFFFFFF


def test_u32le_truncated():
    cur = Cursor(b"\x01\x02\x03")
    with pytest.raises(TruncatedInputError):
        cur.u32le()


def test_read_cstring_consumes_terminator():
    cur = Cursor(b"exe\x00calc.exe\x00\x08")
    assert cur.read_cstring() == b"exe"
    assert cur.read_cstring() == b"calc.exe"
    assert cur.remaining() == 1


def test_read_cstring_empty():
    cur = Cursor(b"\x00rest")
    assert cur.read_cstring() == b""
    assert cur.tell() == 1


def test_read_cstring_unterminated():
    cur = Cursor(b"no terminator")
    with pytest.raises(TruncatedInputError):
        cur.read_cstring()
