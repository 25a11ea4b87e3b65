# models.py
from dataclasses import dataclass, field
from typing import Dict, List

from config import ALL_CATEGORY

@dataclass(frozen=True)
class Video:
    """A single synthetic video record. Never modified after generation."""
    id: str
    title: str
    channel: str
    category: str
    views: int
    days_ago: int
    thumb_url: str
    avatar_url: str
    duration: str

@dataclass(frozen=True)
class VideoCardView:
    """Display-ready fields for one video card."""
    video_id: str
    title: str
    channel: str
    duration: str
    views_text: str
    age_text: str
    thumb_url: str
    avatar_url: str

    @property
    def stats_text(self) -> str:
        return f"{self.views_text} • {self.age_text}"

    @property
    def label(self) -> str:
        return f"{self.title} by {self.channel}"

@dataclass(frozen=True)
class ThemeStyle:
    """Icon and hint shown on the theme toggle for a given theme."""
    icon: str
    label: str

THEMES: Dict[str, ThemeStyle] = {
    "light": ThemeStyle(icon="🌙", label="Switch to dark theme"),
    "dark": ThemeStyle(icon="☀️", label="Switch to light theme"),
}

@dataclass
class AppState:
    """A single object to hold the entire application state."""
    selected_category: str = ALL_CATEGORY
    videos: List[Video] = field(default_factory=list)
