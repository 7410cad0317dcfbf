"""
Placeholder rewriting utilities.

Converts positional ``?`` markers into PostgreSQL's numbered placeholders
(``$1``, ``$2``, ...) so that the Nth generated placeholder always lines up
with the Nth bound argument.
"""

from typing import List, Tuple

MARKER = "?"


def format_placeholder(index: int) -> str:
    """
    Format a numbered PostgreSQL placeholder.

    Examples:
        >>> format_placeholder(3)
        '$3'
    """
    return f"${index}"


def rewrite_placeholders(condition: str, start: int = 0) -> Tuple[str, int]:
    """
    Replace every ``?`` marker with the next numbered placeholder.

    The Kth marker (left to right) becomes ``$<start + K>``. Everything else,
    including numbered placeholders already present in the input, is copied
    through untouched.

    Args:
        condition: SQL fragment that may contain ``?`` markers
        start: Value of the placeholder counter before the scan

    Returns:
        Tuple of (rewritten fragment, counter after the scan)

    Examples:
        >>> rewrite_placeholders("age > ? AND status = ?", 0)
        ('age > $1 AND status = $2', 2)
        >>> rewrite_placeholders("id = $1 OR id = ?", 1)
        ('id = $1 OR id = $2', 2)
        >>> rewrite_placeholders("deleted_at IS NULL", 4)
        ('deleted_at IS NULL', 4)
    """
    if MARKER not in condition:
        return condition, start

    counter = start
    pieces: List[str] = []
    for char in condition:
        if char == MARKER:
            counter += 1
            pieces.append(format_placeholder(counter))
        else:
            pieces.append(char)
    return "".join(pieces), counter


def allocate_placeholders(count: int, start: int = 0) -> Tuple[List[str], int]:
    """
    Allocate ``count`` fresh placeholders directly from the counter.

    Used where there is no ``?`` to scan, e.g. a VALUES list.

    Examples:
        >>> allocate_placeholders(3, 2)
        (['$3', '$4', '$5'], 5)
    """
    placeholders = [format_placeholder(start + i) for i in range(1, count + 1)]
    return placeholders, start + count
