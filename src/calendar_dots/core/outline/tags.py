"""Tag presence checks."""

from collections.abc import Collection


def has_tag(tags: Collection[str] | None, tag: str) -> bool:
    """Return True if ``tag`` is literally one of ``tags``.

    No normalization: ``"#idea"`` and ``"idea"`` are different tags.
    """
    if tags is None or not tag:
        return False
    return tag in tags
