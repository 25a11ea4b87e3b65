# config.py
from dataclasses import dataclass
from typing import Tuple

ALL_CATEGORY = "All"

SAMPLE_TITLES = (
    "Relaxing Lo-fi Beats",
    "Top 10 JavaScript Tricks",
    "Epic Gameplay Highlights",
    "Breaking News Update",
    "Daily Workout Routine",
    "Stand-up Comedy Set",
    "How to Build a Portfolio",
    "Gadget Review: Latest Phone",
    "Cooking: 30-minute Meals",
    "Study With Me — Focus Session",
    "Travel Vlog: Hidden Gems",
    "Beginner Guitar Lesson",
)

SAMPLE_CHANNELS = (
    "TechFlow",
    "DailyBeat",
    "GameStream",
    "NewsNow",
    "FitLife",
    "LaughCast",
    "LearnHub",
    "GizmoLab",
    "KitchenLite",
    "StudyCorner",
    "Wanderer",
    "AcousticSoul",
)

# Placeholder image services
THUMB_URL_TEMPLATE = "https://picsum.photos/id/{id}/480/270"
AVATAR_URL_TEMPLATE = "https://i.pravatar.cc/40?img={id}"
THUMB_ID_RANGE = (10, 1000)
AVATAR_ID_RANGE = (1, 70)

VIEWS_RANGE = (500, 10_000_000)
DAYS_AGO_RANGE = (0, 1200)
DURATION_MINUTES_RANGE = (1, 20)
DURATION_SECONDS_RANGE = (0, 59)
TITLE_SUFFIX_RANGE = (1, 999)


@dataclass
class Config:
    """Holds all application configuration."""
    CATEGORIES: Tuple[str, ...] = (
        ALL_CATEGORY,
        "Music",
        "Gaming",
        "News",
        "Sports",
        "Education",
        "Comedy",
        "Technology",
        "Lifestyle",
    )
    VIDEO_COUNT: int = 36
    SEARCH_DEBOUNCE_SECONDS: float = 0.25
    PLAYING_PULSE_SECONDS: float = 0.6
    DATABASE_FILENAME: str = "ytcl_preferences.db"
    THEME_KEY: str = "ytcl_theme"
    DEFAULT_THEME: str = "light"

    @property
    def video_categories(self) -> Tuple[str, ...]:
        """Categories a video can belong to (everything except "All")."""
        return tuple(c for c in self.CATEGORIES if c != ALL_CATEGORY)
