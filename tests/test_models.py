"""
Tests for the derived Entry and Emotion models.
"""

from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from emotion_entries.models import Emotion, Entry


def test_emotion_model():
    emotion = Emotion(id=5, name="Joy", color="#FFD700")
    assert emotion.id == 5
    assert emotion.name == "Joy"
    assert emotion.color == "#FFD700"


def test_emotion_model_missing_color():
    with pytest.raises(ValidationError):
        Emotion(id=5, name="Joy")  # type: ignore


def test_emotion_is_immutable():
    emotion = Emotion(id=5, name="Joy", color="#FFD700")
    with pytest.raises(ValidationError):
        emotion.color = "#000000"  # type: ignore


def test_entry_accepts_field_name_and_alias():
    created = datetime(2024, 1, 1, tzinfo=timezone.utc)
    by_name = Entry(id=1, comment="ok", created_at=created)
    by_alias = Entry.model_validate({"id": 1, "comment": "ok", "createdAt": created})
    assert by_name == by_alias
    assert by_name.emotions == []


def test_entry_serializes_created_at_as_camel_case():
    entry = Entry(
        id=1,
        comment="ok",
        created_at=datetime(2024, 1, 1, tzinfo=timezone.utc),
        emotions=[Emotion(id=5, name="Joy", color="#FFD700")],
    )
    dumped = entry.model_dump(by_alias=True)
    assert "createdAt" in dumped
    assert "created_at" not in dumped
    assert dumped["emotions"] == [{"id": 5, "name": "Joy", "color": "#FFD700"}]


def test_entry_invalid_date_serializes_as_null():
    entry = Entry(id=1, comment="ok", created_at=None)
    assert entry.model_dump(mode="json", by_alias=True)["createdAt"] is None
