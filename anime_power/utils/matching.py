"""
Text matching helpers.
"""


def contains_ignore_case(text: str, query: str) -> bool:
    """True if `query` occurs in `text`, ignoring case."""
    return query.lower() in text.lower()
