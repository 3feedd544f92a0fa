"""Text helpers for meta content."""
import re

from metamanager.constants import META_CONSTANTS

_WHITESPACE_RE = re.compile(r"\s+")
_WORD_SPLIT_RE = re.compile(r"(\s+)")


def normalize_whitespace(text: str) -> str:
    """Collapse whitespace runs to single spaces and trim the result."""
    return _WHITESPACE_RE.sub(" ", text).strip()


def truncate_words(text: str, count: int, suffix: str = META_CONSTANTS.ELLIPSIS) -> str:
    """Keep the first ``count`` words of ``text``.

    The suffix is only appended when words were actually dropped; the
    original whitespace between the kept words is preserved.
    """
    parts = _WORD_SPLIT_RE.split(text.strip())
    # parts alternates word, separator, word, ...
    if len(parts) / 2 > count:
        return "".join(parts[: count * 2 - 1]) + suffix
    return text


def truncate_description(text: str, length: int = META_CONSTANTS.DEFAULT_DESCRIPTION_LENGTH) -> str:
    """Normalize a description and shorten it to at most ``length`` characters.

    Args:
        text: Raw description, possibly multi-line
        length: Maximum number of characters before the ellipsis

    Returns:
        The normalized description. When it is too long, it is cut at the last
        space inside the first ``length`` characters and an ellipsis is
        appended; a description without such a space is shortened to
        ``length`` words instead.
    """
    description = normalize_whitespace(text)
    if len(description) <= length:
        return description

    position = description[:length].rfind(" ")
    if position != -1:
        return description[:position] + META_CONSTANTS.ELLIPSIS
    return truncate_words(description, length)
