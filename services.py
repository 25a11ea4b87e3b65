# services.py
import logging
import random
import sqlite3
from typing import List, Optional, Sequence

from config import (ALL_CATEGORY, AVATAR_ID_RANGE, AVATAR_URL_TEMPLATE,
                    DAYS_AGO_RANGE, DURATION_MINUTES_RANGE,
                    DURATION_SECONDS_RANGE, SAMPLE_CHANNELS, SAMPLE_TITLES,
                    THUMB_ID_RANGE, THUMB_URL_TEMPLATE, TITLE_SUFFIX_RANGE,
                    VIEWS_RANGE, Config)
from formatters import format_duration, format_views, slugify, time_ago
from models import THEMES, ThemeStyle, Video, VideoCardView

logger = logging.getLogger(__name__)


class PreferenceStore:
    """A service to manage the SQLite key/value table holding user preferences."""
    def __init__(self, db_name: str):
        self.db_name = db_name
        self.conn = sqlite3.connect(db_name)
        self.create_table()

    def create_table(self):
        """Creates the preferences table if it doesn't exist."""
        with self.conn:
            self.conn.execute("""
                CREATE TABLE IF NOT EXISTS preferences (
                    key TEXT PRIMARY KEY,
                    value TEXT NOT NULL
                )
            """)

    def get(self, key: str, default: Optional[str] = None) -> Optional[str]:
        """Returns the stored value for key, or default when absent or unreadable."""
        try:
            row = self.conn.execute(
                "SELECT value FROM preferences WHERE key = ?", (key,)
            ).fetchone()
        except sqlite3.Error:
            logger.warning("Could not read preference %r", key, exc_info=True)
            return default
        return row[0] if row else default

    def set(self, key: str, value: str) -> bool:
        """Stores value under key. Returns False if the write failed."""
        try:
            with self.conn:
                self.conn.execute(
                    "INSERT OR REPLACE INTO preferences (key, value) VALUES (?, ?)",
                    (key, value),
                )
        except sqlite3.Error:
            logger.warning("Could not persist preference %r", key, exc_info=True)
            return False
        return True

    def close(self):
        self.conn.close()


class ThemeManager:
    """Two-state (light/dark) theme, persisted through a PreferenceStore."""
    def __init__(self, store: PreferenceStore, key: str, default: str = "light"):
        self.store = store
        self.key = key
        self.default = default
        self.current: Optional[str] = None

    def load(self) -> str:
        """Reads the persisted theme, falling back to the default."""
        saved = self.store.get(self.key)
        if saved not in THEMES:
            if saved is not None:
                logger.info("Ignoring unknown persisted theme %r", saved)
            return self.default
        return saved

    def apply(self, theme: str) -> ThemeStyle:
        """Makes theme current, persists it and returns the toggle's icon/label."""
        if theme not in THEMES:
            raise ValueError(f"Unknown theme '{theme}'.")
        self.current = theme
        self.store.set(self.key, theme)
        return THEMES[theme]

    def toggle(self, current: Optional[str] = None) -> str:
        """Flips the given (or last applied) theme and applies the result."""
        current = current or self.current or self.default
        new_theme = "dark" if current == "light" else "light"
        self.apply(new_theme)
        return new_theme


class VideoGenerator:
    """A service producing synthetic video records for the demo grid."""
    def __init__(self, config: Config, rng: Optional[random.Random] = None):
        self.config = config
        self.rng = rng or random.Random()

    def _rand(self, bounds) -> int:
        low, high = bounds
        return self.rng.randint(low, high)

    def generate(self, count: int) -> List[Video]:
        """Builds count videos with random categories, titles and stats."""
        if count < 0:
            raise ValueError(f"Video count must be non-negative, got {count}.")
        categories = self.config.video_categories
        videos = []
        for i in range(count):
            title = f"{self.rng.choice(SAMPLE_TITLES)} {self._rand(TITLE_SUFFIX_RANGE)}"
            videos.append(Video(
                id=f"vid-{i}-{slugify(title)}",
                title=title,
                channel=self.rng.choice(SAMPLE_CHANNELS),
                category=self.rng.choice(categories),
                views=self._rand(VIEWS_RANGE),
                days_ago=self._rand(DAYS_AGO_RANGE),
                thumb_url=THUMB_URL_TEMPLATE.format(id=self._rand(THUMB_ID_RANGE)),
                avatar_url=AVATAR_URL_TEMPLATE.format(id=self._rand(AVATAR_ID_RANGE)),
                duration=format_duration(
                    self._rand(DURATION_MINUTES_RANGE),
                    self._rand(DURATION_SECONDS_RANGE),
                ),
            ))
        logger.debug("Generated %d videos", len(videos))
        return videos


# --- Filter pipeline ---

def filter_by_category(videos: Sequence[Video], category: str) -> List[Video]:
    if category == ALL_CATEGORY:
        return list(videos)
    return [v for v in videos if v.category == category]

def filter_by_query(videos: Sequence[Video], query: Optional[str]) -> List[Video]:
    """Keeps videos whose title, channel or category contains query (case-insensitive)."""
    if not query:
        return list(videos)
    q = query.lower().strip()
    return [
        v for v in videos
        if q in v.title.lower() or q in v.channel.lower() or q in v.category.lower()
    ]

def filter_videos(videos: Sequence[Video], category: str, query: Optional[str]) -> List[Video]:
    """The visible subset for a category and search query, in generation order."""
    return filter_by_query(filter_by_category(videos, category), query)

def build_card_view(video: Video) -> VideoCardView:
    """Parses a Video into the display fields a card shows."""
    return VideoCardView(
        video_id=video.id,
        title=video.title,
        channel=video.channel,
        duration=video.duration,
        views_text=format_views(video.views),
        age_text=time_ago(video.days_ago),
        thumb_url=video.thumb_url,
        avatar_url=video.avatar_url,
    )
