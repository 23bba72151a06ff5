"""String helpers used when parsing product headers and descriptor tables."""

from __future__ import annotations

_C_WHITESPACE = " \t\n\v\f\r"
_BLANK = " "
_INTEGER_CHARS = frozenset("0123456789+- ")
_POSITIVE_INT_CHARS = frozenset("0123456789 ")
_NUMERAL_CHARS = frozenset("0123456789+- .eE")


def sub_string(text: str | None, start: int, length: int) -> str | None:
    """Return at most ``length`` characters of ``text`` beginning at ``start``.

    Returns None if ``text`` is None.
    """
    if text is None:
        return None
    if start < 0 or length < 0:
        raise ValueError("sub_string: start and length must not be negative")
    return text[start:start + length]


def stricmp(s1: str, s2: str) -> int:
    """Compare two strings ignoring case.

    Returns zero if they are equal, otherwise the difference of the lower-cased
    character codes at the first position where they differ (an exhausted
    string counts as code zero there).
    """
    if s1 is None or s2 is None:
        raise ValueError("stricmp: arguments must not be None")
    for c1, c2 in zip(s1, s2):
        diff = ord(c1.lower()) - ord(c2.lower())
        if diff:
            return diff
    common = min(len(s1), len(s2))
    tail1 = ord(s1[common].lower()) if common < len(s1) else 0
    tail2 = ord(s2[common].lower()) if common < len(s2) else 0
    return tail1 - tail2


def equal_names(name1: str, name2: str) -> bool:
    """Return True if the two names are equal ignoring the case of each letter."""
    if name1 is None or name2 is None:
        raise ValueError("equal_names: names must not be None")
    return stricmp(name1, name2) == 0


def _finish_token(text: str, pos: int) -> tuple[str, int] | None:
    """Handle the end of the string when no further separator was found."""
    if not text:
        return None
    if pos == 0:
        return text, len(text) + 1
    return text[pos:], len(text)


def _check_args(text: str, pos: int) -> None:
    if text is None:
        raise ValueError("text must not be None")
    if pos < 0:
        raise ValueError("pos must not be negative")


def str_tok(text: str, seps: str, pos: int) -> tuple[str, int] | None:
    """Return the next token of ``text`` starting at ``pos`` and the position after it.

    A token ends at the next character contained in ``seps``. Returns None
    once ``pos`` has reached the end of the string.
    """
    _check_args(text, pos)
    if pos >= len(text):
        return None
    for i in range(pos, len(text)):
        if text[i] in seps:
            return text[pos:i], i + 1
    return _finish_token(text, pos)


def str_tok_tok(text: str, seps: str, exceptions: str, pos: int) -> tuple[str, int] | None:
    """Like :func:`str_tok`, but a separator directly preceded by a character
    from ``exceptions`` does not end a token."""
    _check_args(text, pos)
    if pos >= len(text):
        return None
    for i in range(pos, len(text)):
        if text[i] in seps and (i == 0 or text[i - 1] not in exceptions):
            return text[pos:i], i + 1
    return _finish_token(text, pos)


def find_first_not_white(text: str) -> int:
    """Return the index of the first non-blank character, or the length if there is none."""
    return next((i for i, ch in enumerate(text) if ch not in _BLANK), len(text))


def find_last_not_white(text: str) -> int:
    """Return the index of the last non-blank character, or -1 if there is none."""
    return next(
        (i for i in range(len(text) - 1, -1, -1) if text[i] not in _BLANK),
        -1,
    )


def trim_string(text: str) -> str:
    """Remove leading and trailing whitespace."""
    if text is None:
        raise ValueError("trim_string: text must not be None")
    return text.strip(_C_WHITESPACE)


def strip_string_r(text: str) -> str:
    """Remove all trailing characters that are not printable, non-blank ASCII."""
    if text is None:
        raise ValueError("strip_string_r: text must not be None")
    for i in range(len(text) - 1, -1, -1):
        if 33 <= ord(text[i]) <= 126:
            return text[:i + 1]
    return ""


def if_no_letters(text: str) -> bool:
    """Return True if the text holds only digits, signs and blanks."""
    return all(ch in _INTEGER_CHARS for ch in text)


def get_positive_int(text: str) -> int:
    """Parse a non-negative integer; return -1 if the text holds other characters.

    Like ``atoi``, leading blanks are skipped and parsing stops at the first
    non-digit; a text without digits gives zero.
    """
    if not all(ch in _POSITIVE_INT_CHARS for ch in text):
        return -1
    digits = []
    for ch in text.lstrip(_BLANK):
        if not ch.isdigit():
            break
        digits.append(ch)
    return int("".join(digits)) if digits else 0


def numeral_suspicion(text: str) -> bool:
    """Return True if the text may be an integer or floating point number."""
    return all(ch in _NUMERAL_CHARS for ch in text)