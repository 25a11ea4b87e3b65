# ui.py
from typing import Iterable, List, Sequence

from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Container, Horizontal, Vertical
from textual.events import Click
from textual.message import Message
from textual.widgets import Button, Input, Label, RichLog, Static

from models import ThemeStyle, VideoCardView

class ThemeToggle(Button):
    """The light/dark switch shown in the top bar."""
    def set_style(self, style: ThemeStyle) -> None:
        self.label = style.icon
        self.tooltip = style.label


class SearchControls(Static):
    """Widget for the search input and button."""
    class SearchRequested(Message):
        def __init__(self, query: str) -> None:
            self.query = query
            super().__init__()

    def compose(self) -> ComposeResult:
        yield Input(placeholder="Search", id="search-input")
        yield Button("Search", id="search-button", variant="primary")

    def on_button_pressed(self, event: Button.Pressed) -> None:
        event.stop()
        self.post_search_message()
        self.query_one(Input).focus()

    def on_input_submitted(self, event: Input.Submitted) -> None:
        self.post_search_message()

    def post_search_message(self) -> None:
        self.post_message(self.SearchRequested(self.query_one(Input).value))


class CategoryBar(Horizontal):
    """The row of category chips."""
    class CategorySelected(Message):
        def __init__(self, category: str) -> None:
            self.category = category
            super().__init__()

    @property
    def chips(self) -> List[Button]:
        return list(self.query(".chip").results(Button))

    async def rebuild(self, categories: Iterable[str], selected: str) -> None:
        """Replaces every chip, marking the one for selected as active."""
        await self.remove_children()
        chips = []
        for category in categories:
            chip = Button(category, name=category, classes="chip")
            chip.tooltip = f"Filter by {category}"
            chip.set_class(category == selected, "active")
            chips.append(chip)
        await self.mount_all(chips)

    def set_active(self, category: str) -> None:
        for chip in self.chips:
            chip.set_class(chip.name == category, "active")

    def on_button_pressed(self, event: Button.Pressed) -> None:
        event.stop()
        category = event.button.name
        self.set_active(category)
        self.post_message(self.CategorySelected(category))


class VideoCard(Vertical, can_focus=True):
    """One focusable video card. Enter, Space or a click plays a short pulse."""
    BINDINGS = [
        Binding("enter", "play", "Play"),
        Binding("space", "play", "Play", show=False),
    ]

    class Played(Message):
        def __init__(self, view: VideoCardView) -> None:
            self.view = view
            super().__init__()

    def __init__(self, view: VideoCardView, pulse_seconds: float = 0.6) -> None:
        super().__init__(classes="video-card")
        self.view = view
        self.pulse_seconds = pulse_seconds
        self.tooltip = view.label

    def compose(self) -> ComposeResult:
        yield Label(f"▶ {self.view.duration}", classes="duration", markup=False)
        yield Label(self.view.title, classes="title", markup=False)
        yield Label(self.view.channel, classes="channel", markup=False)
        yield Label(self.view.stats_text, classes="stats", markup=False)
        yield Label(f"🖼 {self.view.thumb_url}", classes="thumb", markup=False)
        yield Label(f"👤 {self.view.avatar_url}", classes="avatar", markup=False)

    @property
    def text(self) -> str:
        """Plain text of every line shown on the card."""
        return "\n".join(str(label.render()) for label in self.query(Label))

    def on_click(self, event: Click) -> None:
        self.focus()
        self.play()

    def action_play(self) -> None:
        self.play()

    def play(self) -> None:
        """Adds the transient 'playing' class; overlapping plays just re-add it."""
        self.add_class("playing")
        self.set_timer(self.pulse_seconds, lambda: self.remove_class("playing"))
        self.post_message(self.Played(self.view))


class EmptyState(Static):
    """Shown in place of the grid when no video matches."""
    MESSAGE = "No videos found matching your search."

    def __init__(self) -> None:
        super().__init__(self.MESSAGE, classes="muted")


class VideoGrid(Container):
    """Grid of video cards."""
    async def update_videos(self, views: Sequence[VideoCardView], pulse_seconds: float = 0.6) -> None:
        """Clears the grid and mounts all cards at once, or the empty state."""
        with self.app.batch_update():
            await self.remove_children()
            if not views:
                await self.mount(EmptyState())
                return
            await self.mount_all([VideoCard(v, pulse_seconds) for v in views])

    @property
    def cards(self) -> List[VideoCard]:
        return list(self.query(VideoCard))


class LogPane(RichLog):
    """A dedicated widget for logging application events."""
    def add_message(self, message: str) -> None:
        self.write(message)
