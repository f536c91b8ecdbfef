"""
Tag policy for AWS resources.

Resolves the provider-wide default tags and ignored-key policy against a
resource's own tags, and computes the minimal tag/untag calls for an update.
"""

from dataclasses import dataclass, field

from aws_adapters.configs.constants import AWS_TAG_PREFIX


def merge_tags(
    base_tags: dict[str, str],
    *additional_tags: dict[str, str] | None,
) -> dict[str, str]:
    """
    Merge multiple tag dictionaries, later ones winning.

    Args:
        base_tags: Base tag dictionary
        *additional_tags: Additional tag dictionaries to merge

    Returns:
        Merged tag dictionary
    """
    result = dict(base_tags)
    for tags in additional_tags:
        if tags:
            result.update(tags)
    return result


@dataclass(frozen=True)
class DefaultTagsConfig:
    """Provider-wide tags applied to every taggable resource."""
    tags: dict[str, str] = field(default_factory=dict)

    def merge_tags(self, tags: dict[str, str] | None) -> dict[str, str]:
        """Resource tags on top of the defaults."""
        return merge_tags(self.tags, tags)

    def remove_default_config(self, tags: dict[str, str]) -> dict[str, str]:
        """Drop tags that only exist because of the defaults (same key and value)."""
        return {
            key: value
            for key, value in tags.items()
            if self.tags.get(key) != value
        }


@dataclass(frozen=True)
class IgnoreTagsConfig:
    """Tag keys and key prefixes that the provider never manages."""
    keys: frozenset[str] = frozenset()
    key_prefixes: frozenset[str] = frozenset()

    def is_ignored(self, key: str) -> bool:
        return key in self.keys or any(key.startswith(p) for p in self.key_prefixes)

    def ignore_config(self, tags: dict[str, str]) -> dict[str, str]:
        return {key: value for key, value in tags.items() if not self.is_ignored(key)}


def ignore_aws(tags: dict[str, str]) -> dict[str, str]:
    """Drop AWS-reserved (aws:*) tags."""
    return {key: value for key, value in tags.items() if not key.startswith(AWS_TAG_PREFIX)}


def tags_from_key_value_list(items: list[dict] | None) -> dict[str, str]:
    """
    Convert EC2-style tag lists to a plain dict.

    Args:
        items: [{"Key": ..., "Value": ...}, ...] or None

    Returns:
        Dictionary of tags
    """
    return {item["Key"]: item.get("Value", "") for item in items or []}


def diff_tags(
    old_tags: dict[str, str] | None,
    new_tags: dict[str, str] | None,
) -> tuple[list[str], dict[str, str]]:
    """
    Compute the untag/tag calls that turn old_tags into new_tags.

    Args:
        old_tags: Previously applied tags
        new_tags: Desired tags

    Returns:
        (keys to remove, tags to add or overwrite)
    """
    old_tags = old_tags or {}
    new_tags = new_tags or {}

    removed = sorted(key for key in old_tags if key not in new_tags)
    updated = {
        key: value
        for key, value in new_tags.items()
        if old_tags.get(key) != value
    }
    return removed, updated
