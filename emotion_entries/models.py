"""
Shared data models for the Emotion Entries package.

Raw records are described as TypedDicts: they document the shape the
backend returns and are never enforced beyond what the mappers read.
Derived models are frozen pydantic models used by every other layer
(mapping, CLI, API).
"""

from datetime import datetime
from typing import TypedDict

from pydantic import BaseModel, ConfigDict, Field


# MARK: - Raw Records


class RawEmotionGroup(TypedDict):
    color: str
    emoji: str


class RawEmotion(TypedDict):
    id: int
    name: str
    emotion_groups: RawEmotionGroup


class RawEntryEmotion(TypedDict):
    emotions: RawEmotion


class RawEntry(TypedDict):
    id: int
    comment: str
    created_at: str
    entry_emotions: list[RawEntryEmotion]


# MARK: - Derived Models


class Emotion(BaseModel):
    """An emotion attached to an entry, flattened from its emotion group."""

    model_config = ConfigDict(frozen=True)

    id: int = Field(..., description="Emotion identifier")
    name: str = Field(..., description="Display name of the emotion")
    color: str = Field(..., description="Color of the emotion's group")


class Entry(BaseModel):
    """A journal entry with its parsed timestamp and emotions."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: int = Field(..., description="Entry identifier")
    comment: str = Field(..., description="Free-text comment, unsanitized")
    created_at: datetime | None = Field(
        None,
        alias="createdAt",
        description="Creation time, or None when the raw value was not a date",
    )
    emotions: list[Emotion] = Field(
        default_factory=list, description="Emotions in backend order"
    )
