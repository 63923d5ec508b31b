"""ASCII character table (codes 0-127).

Control characters carry their mnemonic, C escape (when there is one) and
meaning; printable characters are shown as themselves.
"""

from __future__ import annotations

from core.domain.models import CharEntry

_CONTROL_DISPLAYS: tuple[str, ...] = (
    r"NUL '\0' (null character)",
    "SOH (start of heading)",
    "STX (start of text)",
    "ETX (end of text)",
    "EOT (end of transmission)",
    "ENQ (enquiry)",
    "ACK (acknowledge)",
    r"BEL '\a' (bell)",
    r"BS  '\b' (backspace)",
    r"HT  '\t' (horizontal tab)",
    r"LF  '\n' (new line)",
    r"VT  '\v' (vertical tab)",
    r"FF  '\f' (form feed)",
    r"CR  '\r' (carriage ret)",
    "SO  (shift out)",
    "SI  (shift in)",
    "DLE (data link escape)",
    "DC1 (device control 1)",
    "DC2 (device control 2)",
    "DC3 (device control 3)",
    "DC4 (device control 4)",
    "NAK (negative ack.)",
    "SYN (synchronous idle)",
    "ETB (end of trans. blk)",
    "CAN (cancel)",
    "EM  (end of medium)",
    "SUB (substitute)",
    "ESC (escape)",
    "FS  (file separator)",
    "GS  (group separator)",
    "RS  (record separator)",
    "US  (unit separator)",
)

_SPECIAL_DISPLAYS: dict[int, str] = {
    0x20: "SPACE",
    0x5C: r"\  '\\'",
    0x7F: "DEL",
}


def _display(code: int) -> str:
    if code < len(_CONTROL_DISPLAYS):
        return _CONTROL_DISPLAYS[code]
    return _SPECIAL_DISPLAYS.get(code, chr(code))


ASCII_TABLE: tuple[CharEntry, ...] = tuple(
    CharEntry(code=code, display=_display(code)) for code in range(0x80)
)
