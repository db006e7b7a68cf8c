"""String helpers that keep the conventions of NUL-terminated text.

Positions are returned as indexes, and ``None`` means "not found". Functions
that fill a fixed-size destination return the new text with the length they
report.
"""

from __future__ import annotations

from typing import Callable, Optional, Tuple, Union

CharLike = Union[str, int]


def _as_char(ch: CharLike) -> str:
    """Turn a one-character string or a character code into a character."""
    if isinstance(ch, str):
        if len(ch) != 1:
            raise ValueError(f"expected a single character, got {ch!r}")
        return ch
    if isinstance(ch, bool) or not isinstance(ch, int):
        raise TypeError(f"expected a character or an int, got {type(ch).__name__}")
    return chr(ch % 256)


def _check_non_negative(**values: int) -> None:
    for name, value in values.items():
        if value < 0:
            raise ValueError(f"{name} must not be negative: {value}")


def split(text: str, sep: str) -> list[str]:
    """Split ``text`` on ``sep``, dropping the empty pieces between separators."""
    if len(sep) != 1:
        raise ValueError(f"separator must be a single character, got {sep!r}")
    return [piece for piece in text.split(sep) if piece]


def strchr(text: str, ch: CharLike) -> Optional[int]:
    """Return the index of the first ``ch`` in ``text``.

    Searching for NUL finds the terminator, at ``len(text)``. Character codes
    above 127 never match, as with a signed char.
    """
    if isinstance(ch, int) and not isinstance(ch, bool):
        if ch == 0:
            return len(text)
        if not 0 < ch <= 127:
            return None
        ch = chr(ch)
    target = _as_char(ch)
    if target == "\0":
        return len(text)
    index = text.find(target)
    return None if index == -1 else index


def strrchr(text: str, ch: CharLike) -> Optional[int]:
    """Return the index of the last ``ch`` in ``text``.

    Integer codes are reduced to a byte first. Searching for NUL finds the
    terminator, at ``len(text)``.
    """
    target = _as_char(ch)
    if target == "\0":
        return len(text)
    index = text.rfind(target)
    return None if index == -1 else index


def strdup(text: str) -> str:
    """Return a copy of ``text``."""
    if not isinstance(text, str):
        raise TypeError(f"expected a str, got {type(text).__name__}")
    return "".join(text)


def striteri(text: str, func: Callable[[int, str], Optional[str]]) -> str:
    """Call ``func(index, char)`` on every character and return the edited text.

    ``func`` may return a replacement character, or ``None`` to keep the
    character as it is.
    """
    result = []
    for index, char in enumerate(text):
        replacement = func(index, char)
        result.append(char if replacement is None else replacement)
    return "".join(result)


def strmapi(text: str, func: Callable[[int, str], str]) -> str:
    """Return the text made of ``func(index, char)`` for every character."""
    return "".join(func(index, char) for index, char in enumerate(text))


def strjoin(first: str, second: str) -> str:
    """Return ``first`` followed by ``second``."""
    return first + second


def strlcpy(dest: str, src: str, size: int) -> Tuple[str, int]:
    """Copy ``src`` into a destination of ``size`` slots, terminator included.

    Returns the new destination text and the length of ``src``. A size of
    zero leaves ``dest`` untouched.
    """
    _check_non_negative(size=size)
    if size == 0:
        return dest, len(src)
    return src[: size - 1], len(src)


def strlcat(dest: str, src: str, size: int) -> Tuple[str, int]:
    """Append ``src`` to ``dest`` within a buffer of ``size`` slots.

    Returns the new destination text and the length the full concatenation
    would have had; when ``size`` does not exceed ``len(dest)`` nothing is
    appended and the reported length is ``size + len(src)``.
    """
    _check_non_negative(size=size)
    if size > len(dest):
        room = size - len(dest) - 1
        return dest + src[:room], len(dest) + len(src)
    return dest, size + len(src)


def strlen(text: str) -> int:
    """Return the number of characters in ``text``."""
    return len(text)


def _code_at(text: str, index: int) -> int:
    return ord(text[index]) if index < len(text) else 0


def strncmp(first: str, second: str, n: int) -> int:
    """Compare at most ``n`` characters.

    Returns the difference of the first differing character codes, the end
    of a string counting as code 0, or 0 when they agree.
    """
    _check_non_negative(n=n)
    for index in range(n):
        a = _code_at(first, index)
        b = _code_at(second, index)
        if a != b or a == 0:
            return a - b
    return 0


def strnstr(haystack: str, needle: str, n: int) -> Optional[int]:
    """Return the index of ``needle`` lying wholly within the first ``n`` characters."""
    _check_non_negative(n=n)
    if not needle:
        return 0
    index = haystack[:n].find(needle)
    return None if index == -1 else index


def strtrim(text: str, charset: str) -> str:
    """Remove characters found in ``charset`` from both ends of ``text``."""
    return text.strip(charset)


def substr(text: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``text`` from ``start``.

    A start beyond the end gives the empty string.
    """
    _check_non_negative(start=start, length=length)
    if start > len(text):
        return ""
    return text[start:start + length]