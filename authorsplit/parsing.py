"""Value coercion for split options read from YAML, environment, or CLI input.

YAML hands over typed scalars while environment variables are always text,
so every helper here accepts `object` and coerces it the same way.
"""

from __future__ import annotations


_ENABLED_WORDS = frozenset({"1", "true", "yes", "on"})
_DISABLED_WORDS = frozenset({"0", "false", "no", "off"})


def normalize_optional_string(value: object) -> str | None:
    """Return `value` as trimmed text, or `None` when nothing is left.

    Args:
        value: Option value as read from its source (string, number, or `None`).

    Returns:
        Trimmed option text, or `None` for missing and blank values.
    """

    if value is None:
        return None
    text = str(value).strip()
    return text or None


def parse_permissive_boolean(value: object) -> bool | None:
    """Read an on/off switch; unrecognized words yield `None`."""

    if isinstance(value, bool):
        return value

    text = normalize_optional_string(value)
    if text is None:
        return None

    word = text.lower()
    if word in _ENABLED_WORDS:
        return True
    if word in _DISABLED_WORDS:
        return False
    return None


def parse_required_boolean(value: object, field_name: str) -> bool:
    """Read an on/off option that must be set to a recognized word.

    Raises:
        ValueError: If `value` is not a recognized on/off word.
    """

    parsed = parse_permissive_boolean(value)
    if parsed is None:
        raise ValueError(
            f"`{field_name}` must be an on/off switch "
            "(`true`/`false`, `yes`/`no`, `on`/`off`, `1`/`0`)."
        )
    return parsed


def parse_tag_list(value: object) -> list[str]:
    """Split a comma-separated tag string such as `lowercase,diacritics`."""

    text = normalize_optional_string(value)
    if text is None:
        return []
    return [tag.strip() for tag in text.split(",") if tag.strip()]
