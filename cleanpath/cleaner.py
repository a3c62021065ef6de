from __future__ import annotations

from typing import Iterator, TypeVar

SEP = "/"
CURRENT = "."
PARENT = ".."

# Root marker stored as the first buffer entry of an absolute result.
ROOT = SEP

AnyPath = TypeVar("AnyPath", str, bytes)


def is_absolute(path: str) -> bool:
    return path.startswith(SEP)


def is_dir(path: str) -> bool:
    """True when the path ends with a separator (directory intent)."""
    return path.endswith(SEP)


def segments(path: str) -> Iterator[str]:
    """Yield each non-empty run between separators, left to right."""
    for part in path.split(SEP):
        if part:
            yield part


def clean_append(buf: list[str], path: str, lookup_parent: bool = False) -> bool:
    """
    Append the cleaned segments of ``path`` to ``buf`` and return the carry.

    - ``.`` is dropped
    - ``..`` pops the last real segment of ``buf``; at an absolute root it is
      absorbed, otherwise it is kept literally and the carry is set
    - a real segment clears the carry

    The returned value must be passed back in when the same buffer is fed
    another path, so a leading ``..`` of the second path can pop segments the
    first one contributed.
    """
    for seg in segments(path):
        if seg == CURRENT:
            continue

        if seg == PARENT:
            if not lookup_parent:
                if buf and buf[-1] not in (ROOT, PARENT):
                    buf.pop()
                    continue
                if buf and buf[0] == ROOT:
                    # /.. is /
                    continue
                lookup_parent = True
        else:
            lookup_parent = False

        buf.append(seg)

    return lookup_parent


def _render(buf: list[str]) -> str:
    if buf and buf[0] == ROOT:
        return ROOT + SEP.join(buf[1:])
    return SEP.join(buf)


def _join_str(base: str, extra: str) -> str:
    buf: list[str] = [ROOT] if is_absolute(base) else []
    lookup_parent = clean_append(buf, base)
    clean_append(buf, extra, lookup_parent)

    result = _render(buf) or CURRENT
    if is_dir(extra) and result != CURRENT and not result.endswith(SEP):
        result += SEP
    return result


def join_path(base: AnyPath, extra: AnyPath) -> AnyPath:
    """
    Join ``extra`` onto ``base`` and clean the result lexically.

    The filesystem is never consulted. The result is absolute iff ``base`` is;
    an absolute ``extra`` is appended like any other path. The result is
    never empty (``"."`` at minimum) and keeps a trailing separator when
    ``extra`` has one.

    >>> join_path("a/b", "../../../x")
    '../x'
    >>> join_path("/", "..")
    '/'
    """
    if isinstance(base, bytes) or isinstance(extra, bytes):
        if not (isinstance(base, bytes) and isinstance(extra, bytes)):
            raise TypeError("Can't mix str and bytes in path components")
        # latin-1 maps every byte to one code point, so this is byte-wise.
        return _join_str(base.decode("latin-1"), extra.decode("latin-1")).encode("latin-1")
    return _join_str(base, extra)


def clean(path: AnyPath) -> AnyPath:
    """Canonical form of a single path (trailing separator dropped)."""
    return join_path(path, path[:0])
