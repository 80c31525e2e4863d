import logging

from .normalize import depth_of, normalize_tag, normalize_tags, parent_of, tag_prefixes

logger = logging.getLogger(__name__)

DEFAULT_SLOT = 1


def next_sibling_slot(tag, slots):
    """
    1 + the highest slot among the registered siblings of a tag.

    Siblings share the depth and parent prefix of `tag`. This scans the whole
    mapping, so registering n tags is O(n^2); fine for a few thousand tags.
    """
    depth = depth_of(tag)
    parent = parent_of(tag)
    highest = 0
    for known, slot in slots.items():
        if depth_of(known) == depth and parent_of(known) == parent:
            highest = max(highest, slot)
    return highest + 1


def ensure_known_tags(tag_paths, existing):
    """Register every tag and ancestor prefix that has no slot yet.

    Args:
        tag_paths: Iterable of raw tag paths discovered by the host
        existing: Current mapping of tag path -> slot (left untouched)

    Returns:
        tuple: (updated mapping, changed bool)
    """
    slots = dict(existing)
    discovered = normalize_tags(tag_paths)
    changed = False

    # Existing keys go through the same walk so that a hand edited registry
    # missing some prefixes still gets them filled in
    well_formed = {tag for tag in slots if normalize_tag(tag) == tag}
    for tag in sorted(well_formed | set(discovered)):
        for prefix in tag_prefixes(tag):
            if prefix in slots:
                continue
            slots[prefix] = next_sibling_slot(prefix, slots)
            changed = True
            logger.debug("Registered tag %s with slot %d", prefix, slots[prefix])

    return slots, changed


class TagRegistry:
    """Append-only mapping of tag paths to palette slots."""

    def __init__(self, known_tags=None):
        self._slots = {}
        for tag, slot in (known_tags or {}).items():
            try:
                slot = int(slot)
            except (TypeError, ValueError):
                logger.warning("Dropping tag %r with invalid slot %r", tag, slot)
                continue
            if slot < 1:
                logger.warning("Dropping tag %r with invalid slot %r", tag, slot)
                continue
            self._slots[tag] = slot

    def __contains__(self, tag):
        return tag in self._slots

    def __len__(self):
        return len(self._slots)

    def __iter__(self):
        return iter(self._slots)

    def slot(self, tag):
        """Slot of a tag, DEFAULT_SLOT when it has never been registered."""
        return self._slots.get(tag, DEFAULT_SLOT)

    def ensure(self, tag_paths):
        """Register new tags. Returns True when anything was added."""
        slots, changed = ensure_known_tags(tag_paths, self._slots)
        if changed:
            added = len(slots) - len(self._slots)
            self._slots = slots
            logger.info("Registered %d new tag paths (%d total)", added, len(slots))
        return changed

    def as_dict(self):
        return dict(self._slots)
