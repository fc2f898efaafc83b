"""Properties codec: Java ``key=value`` text to and from ``dict[str, str]``.

Reads and writes the format produced by ``java.util.Properties``:
comment lines start with ``#`` or ``!``, a trailing backslash continues
a logical line, and characters outside printable ASCII are written as
``\\uXXXX`` escapes so the output is plain ASCII.
"""

import codecs
import os
import re
import time
from pathlib import Path
from string import hexdigits
from typing import Iterator, Mapping

DEFAULT_ENCODING = "latin-1"

_LINE_BREAK = re.compile(r"\r\n|\r|\n")
_BLANKS = " \t\f"
_SEPARATORS = "=:"
_COMMENT_MARKERS = "#!"

_ESCAPES = {"\\": "\\\\", "\t": "\\t", "\n": "\\n", "\r": "\\r", "\f": "\\f"}
_UNESCAPES = {"t": "\t", "n": "\n", "r": "\r", "f": "\f"}


# -- Reading --


def loads(text: str) -> dict[str, str]:
    """Parse properties text into a dict. Later duplicates win.

    Raises:
        ValueError: on a malformed ``\\uXXXX`` escape.
    """
    entries: dict[str, str] = {}
    for line in _logical_lines(text):
        key, value = _split(line)
        entries[_unescape(key)] = _unescape(value)
    return entries


def load(path: str | os.PathLike, encoding: str = DEFAULT_ENCODING) -> dict[str, str]:
    """Read and parse a properties file."""
    return loads(Path(path).read_text(encoding=encoding))


def _logical_lines(text: str) -> Iterator[str]:
    pending: str | None = None
    for raw in _LINE_BREAK.split(text):
        line = raw.lstrip(_BLANKS)
        if pending is None:
            if not line or line[0] in _COMMENT_MARKERS:
                continue
        else:
            line = pending + line
        if _continues(line):
            pending = line[:-1]
            continue
        pending = None
        yield line
    if pending is not None:
        yield pending


def _continues(line: str) -> bool:
    # An odd run of trailing backslashes means the last one escapes the newline.
    trailing = len(line) - len(line.rstrip("\\"))
    return trailing % 2 == 1


def _split(line: str) -> tuple[str, str]:
    """Split a logical line into raw (still escaped) key and value."""
    n = len(line)
    end = 0
    while end < n:
        ch = line[end]
        if ch == "\\":
            end += 2
            continue
        if ch in _SEPARATORS or ch in _BLANKS:
            break
        end += 1

    start = end
    while start < n and line[start] in _BLANKS:
        start += 1
    if start < n and line[start] in _SEPARATORS:
        start += 1
    while start < n and line[start] in _BLANKS:
        start += 1
    return line[:end], line[start:]


def _unescape(text: str) -> str:
    if "\\" not in text:
        return text
    out: list[str] = []
    i = 0
    n = len(text)
    while i < n:
        ch = text[i]
        if ch != "\\":
            out.append(ch)
            i += 1
            continue
        i += 1
        if i >= n:
            break
        ch = text[i]
        if ch == "u":
            digits = text[i + 1 : i + 5]
            if len(digits) != 4 or not all(c in hexdigits for c in digits):
                raise ValueError(f"Malformed \\uxxxx encoding in {text!r}")
            out.append(chr(int(digits, 16)))
            i += 5
            continue
        out.append(_UNESCAPES.get(ch, ch))
        i += 1
    return _join_surrogates("".join(out))


def _join_surrogates(text: str) -> str:
    # \u escapes are UTF-16 code units; pairs fold into one code point, lone halves stay.
    if not any("\ud800" <= c <= "\udfff" for c in text):
        return text
    return text.encode("utf-16", "surrogatepass").decode("utf-16", "surrogatepass")


# -- Writing --


def dumps(
    entries: Mapping[str, str],
    *,
    comments: str | None = None,
    timestamp: bool = True,
) -> str:
    """Serialize entries to properties text, one ``key=value`` per line.

    Args:
        entries: The pairs to write, in iteration order.
        comments: Optional header text, written as ``#`` comment lines.
        timestamp: Write the current date as a comment line, as
            ``Properties.store`` does.
    """
    lines: list[str] = []
    if comments is not None:
        for comment in _LINE_BREAK.split(comments):
            comment = _escape_unicode(comment)
            if comment.startswith(("#", "!")):
                lines.append(comment)
            else:
                lines.append("#" + comment)
    if timestamp:
        lines.append("#" + time.strftime("%a %b %d %H:%M:%S %Z %Y"))
    for key, value in entries.items():
        lines.append(f"{_escape(key, is_key=True)}={_escape(value, is_key=False)}")
    return "".join(line + "\n" for line in lines)


def dump(
    entries: Mapping[str, str],
    path: str | os.PathLike,
    encoding: str = DEFAULT_ENCODING,
    *,
    comments: str | None = None,
    timestamp: bool = True,
) -> None:
    """Serialize entries and replace the contents of ``path`` with them."""
    # Unknown encodings must fail before open() truncates the file.
    codecs.lookup(encoding)
    text = dumps(entries, comments=comments, timestamp=timestamp)
    Path(path).write_text(text, encoding=encoding)


def _escape(text: str, *, is_key: bool) -> str:
    out: list[str] = []
    for i, ch in enumerate(text):
        if ch == " ":
            out.append("\\ " if is_key or i == 0 else " ")
        elif ch in _ESCAPES:
            out.append(_ESCAPES[ch])
        elif ch in _SEPARATORS or ch in _COMMENT_MARKERS:
            out.append("\\" + ch)
        elif " " < ch <= "~":
            out.append(ch)
        else:
            out.append(_unicode_escape(ch))
    return "".join(out)


def _escape_unicode(text: str) -> str:
    return "".join(ch if " " <= ch <= "~" else _unicode_escape(ch) for ch in text)


def _unicode_escape(ch: str) -> str:
    code = ord(ch)
    if code <= 0xFFFF:
        return f"\\u{code:04X}"
    code -= 0x10000
    high = 0xD800 + (code >> 10)
    low = 0xDC00 + (code & 0x3FF)
    return f"\\u{high:04X}\\u{low:04X}"
