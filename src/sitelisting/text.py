from sitelisting.consts import ELLIPSIS


def truncate_text(text: str, length: int) -> str:
    """Bound `text` to `length` characters, preferring to break at a word.

    One character is given up to the ellipsis, so the text is clipped to `length - 1`. The last
    space at or before the clip boundary marks the break; a space at position 0 does not count,
    in which case the text is cut at the boundary itself.

    Example:
        >>> truncate_text("The quick brown fox", 10)
        'The quick…'
    """
    if len(text) < length:
        return text

    clip_length = max(length - 1, 0)
    last_space = text.rfind(" ", 0, clip_length + 1)
    if last_space > 0:
        return text[:last_space] + ELLIPSIS
    return text[:clip_length] + ELLIPSIS
