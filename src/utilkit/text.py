"""Text helpers."""


def extract_unique_words(text: str) -> list[str]:
    """Return the distinct lower-cased words of `text` in first-seen order.

    Words are separated by runs of whitespace; empty fragments are ignored.

    Example:
        >>> extract_unique_words("Hello hello  world")
        ['hello', 'world']
    """
    # dict keeps insertion order, so it doubles as an ordered set
    seen: dict[str, None] = {}
    for word in text.lower().split():
        if word := word.strip():
            seen.setdefault(word, None)
    return list(seen)
