"""Utility for splitting a module path into its segments."""

from rustdoc_comments.errors import InvalidQueryError

PATH_SEPARATOR = "::"


def split_module_path(path: str) -> list[str]:
    """Split `a::b::c` into ["a", "b", "c"].

    Empty segments and segments with surrounding whitespace are rejected
    rather than normalized, since segments must match item names in full.
    """
    segments = path.split(PATH_SEPARATOR)
    if any(not s or s != s.strip() for s in segments):
        msg = f"Malformed module path '{path}'"
        raise InvalidQueryError(msg)
    return segments
