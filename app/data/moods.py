from typing import Dict, List, Optional

from app.models.mood import Mood, MoodType

DEFAULT_THEME = "default"

# Mood catalog
MOODS: List[Mood] = [
    Mood(
        id=MoodType.CALM,
        name="Calm",
        description="Find your inner peace and focus",
        icon="🧘",
        color="hsl(168, 76%, 50%)",
        playlist_id="PLrAl6rYgs4IvGFMaBqq2gF7gOQGGHdZhq",
        keywords=["peaceful", "meditation", "ambient", "nature"],
        shortcut="1",
    ),
    Mood(
        id=MoodType.STRESSED,
        name="Stressed",
        description="Relax and unwind with soothing sounds",
        icon="😌",
        color="hsl(250, 70%, 60%)",
        playlist_id="PLrAl6rYgs4IuO4Up_ubpX-fNOG6cDnA5y",
        keywords=["relaxing", "stress relief", "calming", "therapeutic"],
        shortcut="2",
    ),
    Mood(
        id=MoodType.EXCITED,
        name="Excited",
        description="Channel your energy with upbeat vibes",
        icon="⚡",
        color="hsl(340, 85%, 65%)",
        playlist_id="PLrAl6rYgs4IvHl4iO-Dy_XVh5U7KShX2i",
        keywords=["energetic", "upbeat", "motivational", "high energy"],
        shortcut="3",
    ),
    Mood(
        id=MoodType.TIRED,
        name="Tired",
        description="Boost your energy and stay focused",
        icon="☕",
        color="hsl(35, 85%, 65%)",
        playlist_id="PLrAl6rYgs4IswKugr-Pu8zCMDGaWB9FrQ",
        keywords=["focus music", "energizing", "coffee shop", "productivity"],
        shortcut="4",
    ),
]

_MOODS_BY_ID: Dict[MoodType, Mood] = {mood.id: mood for mood in MOODS}
_MOODS_BY_SHORTCUT: Dict[str, Mood] = {mood.shortcut: mood for mood in MOODS}


def get_mood(mood_type: MoodType | str) -> Mood:
    """Look up a catalog entry, raising ValueError for unknown moods"""
    try:
        return _MOODS_BY_ID[MoodType(mood_type)]
    except ValueError:
        raise ValueError(f"Unknown mood: {mood_type}") from None


def mood_for_shortcut(key: str) -> Optional[Mood]:
    """Keyboard digits 1-4 select moods"""
    return _MOODS_BY_SHORTCUT.get(key)


def is_known_mood(mood_type: str) -> bool:
    return mood_type in {mood.id.value for mood in MOODS}
