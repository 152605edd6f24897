"""Fully justified text layout."""


def _spread(line, letters, width):
    """Lay out a non-final line, giving leftmost gaps the extra spaces."""
    if len(line) == 1:
        return line[0].ljust(width)
    gaps = len(line) - 1
    base, extra = divmod(width - letters, gaps)
    parts = []
    for position, word in enumerate(line[:-1]):
        parts.append(word)
        parts.append(" " * (base + (position < extra)))
    parts.append(line[-1])
    return "".join(parts)


def full_justify(words, max_width):
    """Pack ``words`` into lines exactly ``max_width`` wide.

    Every line but the last is fully justified; the last is left-justified.
    Raises ``ValueError`` for a word longer than ``max_width``.
    """
    lines = []
    current = []
    letters = 0
    for word in words:
        if len(word) > max_width:
            raise ValueError(f"word {word!r} is longer than {max_width}")
        if current and letters + len(current) + len(word) > max_width:
            lines.append(_spread(current, letters, max_width))
            current = []
            letters = 0
        current.append(word)
        letters += len(word)
    lines.append(" ".join(current).ljust(max_width))
    return lines