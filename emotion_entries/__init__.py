"""
Emotion Entries - maps raw backend entry records into domain models.

This package turns JSON-shaped entry records, with their nested emotion
wrappers, into immutable Entry and Emotion models, and exposes the mapping
over HTTP and on the command line.
"""

from .mapper import (
    MappingError,
    emotion_from_raw,
    entries_from_raw,
    entry_from_raw,
    parse_timestamp,
)
from .models import Emotion, Entry

__version__ = "0.1.0"

__all__ = [
    "Emotion",
    "Entry",
    "MappingError",
    "emotion_from_raw",
    "entries_from_raw",
    "entry_from_raw",
    "parse_timestamp",
]
