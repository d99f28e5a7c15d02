"""String helpers: search, compare, slice, join, trim, split and bounded copies."""

from __future__ import annotations

from itertools import zip_longest
from typing import Callable, List, MutableSequence, Optional, Tuple, Union

CharLike = Union[str, int]

_NUL = "\0"


def _char(c: CharLike) -> str:
    """Normalise a one-character string or a character code to a character."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected a character or an int, got {type(c).__name__}")
    return chr(c % 256)


def _require_str(value: object, name: str) -> str:
    if not isinstance(value, str):
        raise TypeError(f"{name} must be a str, got {type(value).__name__}")
    return value


def strlen(s: str) -> int:
    """Return the number of characters in s."""
    return len(_require_str(s, "s"))


def strchr(s: str, c: CharLike) -> Optional[int]:
    """Return the index of the first occurrence of c in s, or None.

    Searching for the NUL character finds the end of the string.
    """
    _require_str(s, "s")
    ch = _char(c)
    if ch == _NUL:
        return len(s)
    index = s.find(ch)
    return None if index < 0 else index


def strrchr(s: str, c: CharLike) -> Optional[int]:
    """Return the index of the last occurrence of c in s, or None.

    Searching for the NUL character finds the end of the string.
    """
    _require_str(s, "s")
    ch = _char(c)
    if ch == _NUL:
        return len(s)
    index = s.rfind(ch)
    return None if index < 0 else index


def strnstr(big: str, little: str, length: int) -> Optional[int]:
    """Find little within the first length characters of big.

    Returns the index of the match, 0 when little is empty, or None.
    """
    _require_str(big, "big")
    _require_str(little, "little")
    if length < 0:
        raise ValueError(f"length must not be negative, got {length}")
    if not little:
        return 0
    index = big.find(little, 0, min(length, len(big)))
    return None if index < 0 else index


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most n characters.

    Returns the code difference at the first mismatch, or 0 when equal.
    A shorter string compares as if it ended with a NUL character.
    """
    _require_str(s1, "s1")
    _require_str(s2, "s2")
    if n < 0:
        raise ValueError(f"n must not be negative, got {n}")
    for a, b in zip_longest(s1[:n], s2[:n], fillvalue=_NUL):
        if a != b:
            return ord(a) - ord(b)
    return 0


def strdup(s: str) -> str:
    """Return a copy of s."""
    return str(_require_str(s, "s"))


def substr(s: str, start: int, length: int) -> str:
    """Return at most length characters of s starting at start.

    A start at or past the end gives an empty string.
    """
    _require_str(s, "s")
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start >= len(s):
        return ""
    return s[start:start + length]


def strjoin(s1: str, s2: str) -> str:
    """Return s1 followed by s2."""
    return _require_str(s1, "s1") + _require_str(s2, "s2")


def strtrim(s: str, charset: str) -> str:
    """Remove every character found in charset from both ends of s."""
    _require_str(s, "s")
    _require_str(charset, "charset")
    return s.strip(charset)


def split(s: str, sep: CharLike) -> List[str]:
    """Split s on the separator character, dropping empty pieces."""
    _require_str(s, "s")
    ch = _char(sep)
    return [piece for piece in s.split(ch) if piece]


def strmapi(s: str, f: Callable[[int, str], str]) -> str:
    """Build a new string from f(index, char) applied to every character of s."""
    _require_str(s, "s")
    return "".join(f(index, ch) for index, ch in enumerate(s))


def striteri(chars: MutableSequence[str], f: Callable[[int, str], Optional[str]]) -> None:
    """Call f(index, char) on every character, in place.

    When f returns a character it replaces the one at that index; a return
    of None leaves the character as it was.
    """
    for index, ch in enumerate(list(chars)):
        replacement = f(index, ch)
        if replacement is not None:
            chars[index] = replacement


def strlcpy(src: str, size: int) -> Tuple[str, int]:
    """Copy src into a buffer of size characters, including the terminator.

    Returns the copied text, truncated to size - 1 characters, and the full
    length of src, so a result length >= size means truncation happened.
    """
    _require_str(src, "src")
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")
    if size == 0:
        return "", len(src)
    return src[:size - 1], len(src)


def strlcat(dst: str, src: str, size: int) -> Tuple[str, int]:
    """Append src to dst within a buffer of size characters, terminator included.

    Returns the resulting text and the length it tried to create. When size
    is no larger than dst, dst is unchanged and size + len(src) is returned.
    """
    _require_str(dst, "dst")
    _require_str(src, "src")
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")
    if size <= len(dst):
        return dst, size + len(src)
    room = size - 1 - len(dst)
    return dst + src[:room], len(dst) + len(src)