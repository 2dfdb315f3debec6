def generate_keywords(text: str) -> set[str]:
    """
    Build prefix-search tokens for a document store without full-text search.
    Every whitespace-separated word contributes all of its prefixes, lowercased.

    >>> sorted(generate_keywords("Milk 2L"))
    ['2', '2l', 'm', 'mi', 'mil', 'milk']
    """
    keywords = set()

    for word in (text or "").lower().split():
        for end in range(1, len(word) + 1):
            keywords.add(word[:end])

    return keywords


def keywords_for(*texts: str) -> list[str]:
    # union of several source fields, stored as a sorted list
    keywords = set()
    for text in texts:
        keywords |= generate_keywords(text)
    return sorted(keywords)
