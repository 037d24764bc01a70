import pytest


@pytest.fixture
def raw_emotion():
    """A raw emotion record as the backend returns it."""
    return {
        "id": 5,
        "name": "Joy",
        "emotion_groups": {"color": "#FFD700", "emoji": "😊"},
    }


@pytest.fixture
def raw_entry(raw_emotion):
    """A raw entry record wrapping a single emotion."""
    return {
        "id": 1,
        "comment": "ok",
        "created_at": "2024-01-01T00:00:00Z",
        "entry_emotions": [{"emotions": raw_emotion}],
    }
