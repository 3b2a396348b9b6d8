"""Keyword extraction from free-text messages."""


def extract_keywords(text: str) -> list[str]:
    """
    Split a comma-delimited message into search keywords.

    All whitespace is removed before splitting, so "a, b,c" and "a,b,c"
    give the same result. Segments are kept as split, empty ones included,
    unless every segment is empty: blank or all-comma input yields [].
    """
    compact = "".join(text.split())
    keywords = compact.split(",")
    if not any(keywords):
        return []
    return keywords
