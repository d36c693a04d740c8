"""
Camel-case word splitting used to derive friendly display names.
"""

from typing import List


def _is_boundary(name: str, i: int) -> bool:
    """Return True if a new word starts at name[i]."""
    prev, char = name[i - 1], name[i]
    if prev.islower() and char.isupper():
        return True
    if prev.isalpha() and char.isdigit() or prev.isdigit() and char.isalpha():
        return True
    # last capital of an acronym starts the next word: HTTP|Server
    following = name[i + 1] if i + 1 < len(name) else ""
    return prev.isupper() and char.isupper() and following.islower()


def split(name: str) -> List[str]:
    """
    Split a camel-case identifier into words.

    Words start at a lowercase to uppercase change, at a change between
    letters and digits, and before the last capital of an acronym that is
    followed by a lowercase letter::

        split("GetUserById")      -> ["Get", "User", "By", "Id"]
        split("HTTPServer")       -> ["HTTP", "Server"]
        split("GL11Version")      -> ["GL", "11", "Version"]
        split("snake_case_name")  -> ["snake_case_name"]

    Punctuation and whitespace are never boundaries and are kept unaltered.
    """
    if not name:
        return []

    words = []
    start = 0
    for i in range(1, len(name)):
        if _is_boundary(name, i):
            words.append(name[start:i])
            start = i
    words.append(name[start:])
    return words


def friendly_name(name: str) -> str:
    """Return the words of name joined by single spaces."""
    return " ".join(split(name))
