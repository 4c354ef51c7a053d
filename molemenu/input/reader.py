"""Low-level terminal input decoding.

Reads raw bytes from the input fd and turns them into semantic menu events.
Handles ESC-sequence timing so arrow keys and a lone Esc press stay distinct.
"""

from __future__ import annotations

import os
import select
import time

from .keys import (
    ALL,
    DELETE,
    DOWN,
    ENTER,
    FILTER,
    HELP,
    LEFT,
    NONE,
    OTHER,
    QUIT,
    REVERSE,
    RIGHT,
    SORT,
    SPACE,
    UP,
    KeyEvent,
    char_event,
)

ESC_SEQUENCE_TIMEOUT_MS = 1000
CSI_BYTE_TIMEOUT_S = 0.05
MAX_CSI_LENGTH = 16
ESC = b"\x1b"

_BROWSE_KEYS: dict[bytes, str] = {
    b" ": SPACE,
    b"q": QUIT,
    b"Q": QUIT,
    b"a": ALL,
    b"A": ALL,
    b"n": NONE,
    b"N": NONE,
    b"?": HELP,
    b"s": SORT,
    b"S": SORT,
    b"r": REVERSE,
    b"R": REVERSE,
    b"f": FILTER,
    b"F": FILTER,
}

_ARROW_TAILS: dict[bytes, str] = {
    b"[A": UP,
    b"[B": DOWN,
    b"[C": RIGHT,
    b"[D": LEFT,
    b"OA": UP,
    b"OB": DOWN,
    b"OC": RIGHT,
    b"OD": LEFT,
}


def _read_ready_byte(fd: int, timeout_s: float) -> bytes | None:
    ready, _, _ = select.select([fd], [], [], max(0.0, timeout_s))
    if not ready:
        return None
    ch = os.read(fd, 1)
    if not ch:
        return None
    return ch


def _read_escape_tail(fd: int, timeout_ms: int) -> bytes:
    """Read up to two bytes following ESC before a shared deadline expires."""
    deadline = time.monotonic() + max(0, timeout_ms) / 1000.0
    tail = b""
    while len(tail) < 2:
        ch = _read_ready_byte(fd, deadline - time.monotonic())
        if ch is None:
            break
        tail += ch
    return tail


def _decode_escape(fd: int, timeout_ms: int) -> KeyEvent:
    tail = _read_escape_tail(fd, timeout_ms)
    if not tail:
        return KeyEvent(QUIT)
    name = _ARROW_TAILS.get(tail)
    if name is not None:
        return KeyEvent(name)
    if len(tail) == 2 and tail[:1] == b"[" and 0x30 <= tail[1] <= 0x3F:
        return _decode_csi(_read_csi_rest(fd, tail))
    return KeyEvent(OTHER)


def _read_csi_rest(fd: int, tail: bytes) -> bytes:
    """Consume a parameterized CSI sequence through its final byte (0x40-0x7E)."""
    seq = tail
    while len(seq) < MAX_CSI_LENGTH:
        ch = _read_ready_byte(fd, CSI_BYTE_TIMEOUT_S)
        if ch is None:
            break
        seq += ch
        if 0x40 <= ch[0] <= 0x7E:
            break
    return seq


def _decode_csi(seq: bytes) -> KeyEvent:
    # ESC [ 3 ~ is forward delete; ESC [ 1 ; 5 A and friends are modified arrows.
    if seq == b"[3~":
        return KeyEvent(DELETE)
    name = _ARROW_TAILS.get(b"[" + seq[-1:]) if seq[-1:] else None
    return KeyEvent(name) if name is not None else KeyEvent(OTHER)


def read_key(fd: int, *, editing: bool = False, timeout_ms: int = ESC_SEQUENCE_TIMEOUT_MS) -> KeyEvent:
    """Block for one key and return its menu event.

    ``editing`` selects the filter-editing keymap, where letters that are
    shortcuts while browsing are delivered as literal characters instead.
    An empty read (EOF) is reported as ``ENTER``.
    """
    ch = os.read(fd, 1)
    if not ch or ch in {b"\r", b"\n"}:
        return KeyEvent(ENTER)
    if ch == ESC:
        return _decode_escape(fd, timeout_ms)
    if ch in {b"\x7f", b"\x08"}:
        return KeyEvent(DELETE)

    if not editing:
        name = _BROWSE_KEYS.get(ch)
        return KeyEvent(name) if name is not None else KeyEvent(OTHER)

    text = ch.decode("utf-8", errors="ignore")
    if not text:
        text = _read_utf8_continuation(fd, ch)
    if text and text.isprintable():
        return char_event(text)
    return KeyEvent(OTHER)


def _read_utf8_continuation(fd: int, lead: bytes) -> str:
    """Complete a multi-byte UTF-8 character whose lead byte was ``lead``."""
    first = lead[0]
    if first >= 0xF0:
        needed = 3
    elif first >= 0xE0:
        needed = 2
    elif first >= 0xC0:
        needed = 1
    else:
        return ""
    data = lead
    for _ in range(needed):
        part = _read_ready_byte(fd, 0.05)
        if part is None:
            break
        data += part
    return data.decode("utf-8", errors="ignore")


def drain_pending_input(fd: int) -> int:
    """Discard bytes already queued on ``fd`` without blocking.

    Returns the number of bytes dropped.
    """
    dropped = 0
    while _read_ready_byte(fd, 0.0) is not None:
        dropped += 1
    return dropped
