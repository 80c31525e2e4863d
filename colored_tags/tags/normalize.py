DELIMITER = "/"


def split_tag(tag):
    return tag.split(DELIMITER)


def join_tag(segments):
    return DELIMITER.join(segments)


def tag_prefixes(tag):
    """Yield every ancestor prefix of a tag, ending with the tag itself.

    >>> list(tag_prefixes("a/b/c"))
    ['a', 'a/b', 'a/b/c']
    """
    segments = split_tag(tag)
    for depth in range(1, len(segments) + 1):
        yield join_tag(segments[:depth])


def parent_of(tag):
    """Parent prefix of a tag, "" for root tags."""
    head, _, _ = tag.rpartition(DELIMITER)
    return head


def depth_of(tag):
    return len(split_tag(tag))


def normalize_tag(raw):
    """
    Clean up a tag as reported by the host.

    Returns None for values that must never reach the registry: empty tags,
    hierarchy placeholders ending in the delimiter, and paths with empty
    segments.
    """
    if not isinstance(raw, str):
        return None
    tag = raw.replace("#", "").strip()
    if not tag or tag.endswith(DELIMITER):
        return None
    if any(not segment for segment in split_tag(tag)):
        return None
    return tag


def normalize_tags(raw_tags):
    """Normalize a batch of tags, dropping invalid ones. Returns a sorted list."""
    tags = set()
    for raw in raw_tags:
        tag = normalize_tag(raw)
        if tag is not None:
            tags.add(tag)
    return sorted(tags)
