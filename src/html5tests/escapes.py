"""Decoding of ``\\xHH`` and ``\\uHHHH`` escapes embedded in fixture text."""

from __future__ import annotations

_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")

# Escape marker -> number of hex digits that must follow it.
_ESCAPE_WIDTHS = {"x": 2, "u": 4}


def _safe_chr(code: int) -> str:
    # Lone surrogates cannot be encoded as UTF-8.
    if 0xD800 <= code <= 0xDFFF:
        return "\ufffd"
    return chr(code)


def decode_escapes(text: str) -> str:
    """Resolve ``\\xHH`` and ``\\uHHHH`` escapes in ``text``.

    A marker not followed by the exact number of hex digits is copied
    verbatim. Text without any marker is returned as-is.
    """
    if "\\x" not in text and "\\u" not in text:
        return text

    out: list[str] = []
    i = 0
    length = len(text)
    while i < length:
        ch = text[i]
        if ch == "\\" and i + 1 < length:
            width = _ESCAPE_WIDTHS.get(text[i + 1])
            if width is not None:
                digits = text[i + 2 : i + 2 + width]
                if len(digits) == width and all(c in _HEX_DIGITS for c in digits):
                    out.append(_safe_chr(int(digits, 16)))
                    i += 2 + width
                    continue
        out.append(ch)
        i += 1
    return "".join(out)
