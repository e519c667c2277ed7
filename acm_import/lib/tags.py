"""Tag string parsing for ACM imports."""

from mypy_boto3_acm.type_defs import TagTypeDef


def parse_tags(tag_string: str) -> dict[str, str]:
    """Parse ``key1=value1,key2=value2`` into a mapping.

    Pairs without ``=`` or with an empty key or value (after trimming) are
    dropped. Repeated keys keep the last value. Never raises.

    Args:
        tag_string: Comma separated ``key=value`` pairs

    Returns:
        Mapping of tag key to tag value
    """
    tags: dict[str, str] = {}
    for pair in tag_string.split(","):
        key, sep, value = pair.strip().partition("=")
        if not sep:
            continue
        key = key.strip()
        value = value.strip()
        if key and value:
            tags[key] = value
    return tags


def to_acm_tags(tags: dict[str, str]) -> list[TagTypeDef]:
    """Convert a tag mapping to the ACM ``Tags`` list shape."""
    return [{"Key": key, "Value": value} for key, value in tags.items()]
