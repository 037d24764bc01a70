"""
Mapping from raw backend records to Entry and Emotion models.

The mappers are pure functions: they copy scalar fields, parse the entry
timestamp and flatten each emotion's group color. They do not validate
beyond reading the fields they need, and a missing field fails the whole
mapping with a MappingError naming the field's path.
"""

from collections.abc import Mapping, Sequence
from datetime import datetime, timezone
from typing import Any

from pydantic import ValidationError

from .models import Emotion, Entry


class MappingError(ValueError):
    """A raw record could not be mapped because a field is missing or malformed."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        location = path or "<root>"
        super().__init__(f"{location}: {reason}")


# MARK: - Public API


def parse_timestamp(value: Any) -> datetime | None:
    """
    Parse a backend timestamp string.

    Args:
        value: An ISO-8601 string, e.g. "2024-01-01T00:00:00Z" or the
            "2024-01-01 00:00:00+00:00" form PostgreSQL emits

    Returns:
        An aware datetime (naive values are taken as UTC), or None when the
        value is not a parseable date
    """
    if not isinstance(value, str):
        return None

    try:
        parsed = datetime.fromisoformat(value.strip())
    except ValueError:
        return None

    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def emotion_from_raw(raw: Mapping[str, Any], path: str = "") -> Emotion:
    """
    Map a raw emotion record to an Emotion.

    Args:
        raw: A RawEmotion-shaped mapping
        path: Location of the record inside a larger document, used in errors

    Returns:
        The Emotion, with color flattened from emotion_groups

    Raises:
        MappingError: If id, name, emotion_groups or emotion_groups.color
            is missing
    """
    _require_mapping(raw, path)
    groups = _field(raw, "emotion_groups", path)
    groups_path = _join(path, "emotion_groups")
    _require_mapping(groups, groups_path)

    return _build(
        Emotion,
        path,
        id=_field(raw, "id", path),
        name=_field(raw, "name", path),
        color=_field(groups, "color", groups_path),
    )


def entry_from_raw(raw: Mapping[str, Any], path: str = "") -> Entry:
    """
    Map a raw entry record to an Entry.

    Args:
        raw: A RawEntry-shaped mapping
        path: Location of the record inside a larger document, used in errors

    Returns:
        The Entry, with created_at parsed and one Emotion per entry_emotions
        wrapper in the same order

    Raises:
        MappingError: If a required field is missing, entry_emotions is not a
            list, or a wrapper lacks its emotions record. A null comment counts
            as missing, so entries with a nullable backend comment are rejected
    """
    _require_mapping(raw, path)
    wrappers = _field(raw, "entry_emotions", path)
    wrappers_path = _join(path, "entry_emotions")
    if not _is_sequence(wrappers):
        raise MappingError(wrappers_path, "expected a list of emotion wrappers")

    emotions = []
    for index, wrapper in enumerate(wrappers):
        wrapper_path = f"{wrappers_path}[{index}]"
        _require_mapping(wrapper, wrapper_path)
        emotions.append(
            emotion_from_raw(
                _field(wrapper, "emotions", wrapper_path),
                _join(wrapper_path, "emotions"),
            )
        )

    return _build(
        Entry,
        path,
        id=_field(raw, "id", path),
        comment=_field(raw, "comment", path),
        created_at=parse_timestamp(raw.get("created_at")),
        emotions=emotions,
    )


def entries_from_raw(raws: Sequence[Mapping[str, Any]]) -> list[Entry]:
    """
    Map raw entry records in order; the first malformed record fails the batch.

    Raises:
        MappingError: If raws is not a list, or any record fails entry_from_raw
    """
    if not _is_sequence(raws):
        raise MappingError("", "expected a list of entries")
    return [entry_from_raw(raw, f"[{index}]") for index, raw in enumerate(raws)]


# MARK: - Private Helpers


def _join(path: str, key: str) -> str:
    return f"{path}.{key}" if path else key


def _is_sequence(value: Any) -> bool:
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes))


def _require_mapping(value: Any, path: str) -> None:
    if not isinstance(value, Mapping):
        raise MappingError(path, f"expected an object, got {type(value).__name__}")


def _field(raw: Mapping[str, Any], key: str, path: str) -> Any:
    """Read a required field; absent and null both count as missing."""
    value = raw.get(key)
    if value is None:
        raise MappingError(_join(path, key), "field is missing")
    return value


def _build(model: type[Any], path: str, **fields: Any) -> Any:
    try:
        return model(**fields)
    except ValidationError as e:
        # Only the first error is reported, like the field-access failures
        error = e.errors()[0]
        field_path = path
        for part in error["loc"]:
            if isinstance(part, int):
                field_path = f"{field_path}[{part}]"
            else:
                field_path = _join(field_path, str(part))
        raise MappingError(field_path, error["msg"]) from e
