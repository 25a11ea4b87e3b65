# main.py
import argparse
import dataclasses
import logging
from typing import Optional

try:
    import pyperclip
except ImportError:
    pyperclip = None

from rich.markup import escape
from textual import on
from textual.app import App, ComposeResult
from textual.containers import Horizontal, VerticalScroll
from textual.logging import TextualHandler
from textual.reactive import reactive
from textual.timer import Timer
from textual.widgets import Button, Footer, Header, Input

from config import ALL_CATEGORY, Config
from models import THEMES, AppState, ThemeStyle
from services import (PreferenceStore, ThemeManager, VideoGenerator,
                      build_card_view, filter_videos)
from ui import (CategoryBar, LogPane, SearchControls, ThemeToggle, VideoCard,
                VideoGrid)

TEXTUAL_THEMES = {"light": "textual-light", "dark": "textual-dark"}

class VidBrowseApp(App):
    TITLE = "VidBrowse"
    # Nothing is focused at startup so app bindings such as "f" fire immediately.
    AUTO_FOCUS = None
    BINDINGS = [
        ("d", "toggle_theme", "Toggle theme"),
        ("f", "focus_first_card", "First video"),
        ("c", "copy_link", "Copy Link"),
        ("q", "quit", "Quit"),
    ]
    CSS = """
    #top-bar { height: auto; }
    SearchControls { layout: horizontal; height: auto; width: 1fr; }
    #search-input { width: 1fr; }
    #theme-toggle { min-width: 6; }
    CategoryBar { height: auto; }
    .chip { min-width: 8; margin-right: 1; }
    .chip.active { background: $accent; text-style: bold; }
    #grid-scroll { height: 1fr; }
    VideoGrid { layout: grid; grid-size: 3; grid-gutter: 1 2; grid-rows: 8; height: auto; }
    VideoCard { height: 8; border: round $panel; padding: 0 1; }
    VideoCard:focus { border: round $accent; }
    VideoCard.playing { background: $accent 40%; }
    VideoCard .duration { color: $text-muted; }
    VideoCard .title { text-style: bold; }
    VideoCard .channel, VideoCard .stats { color: $text-muted; }
    VideoCard .thumb, VideoCard .avatar { color: $text-disabled; }
    EmptyState { column-span: 3; padding: 1 2; }
    .muted { color: $text-muted; }
    #log { height: 6; }
    """

    app_state = reactive(AppState(), always_update=True, init=False)

    def __init__(self, generator: VideoGenerator, theme_manager: ThemeManager, config: Config):
        super().__init__()
        self.generator = generator
        self.theme_manager = theme_manager
        self.config = config
        self._search_timer: Optional[Timer] = None

    def compose(self) -> ComposeResult:
        yield Header()
        with Horizontal(id="top-bar"):
            yield SearchControls()
            yield ThemeToggle("", id="theme-toggle")
        yield CategoryBar(id="category-list")
        with VerticalScroll(id="grid-scroll"):
            yield VideoGrid(id="videos-grid")
        yield LogPane(id="log", wrap=True, highlight=True, markup=True)
        yield Footer()

    async def on_mount(self) -> None:
        self.apply_theme(self.theme_manager.load())
        videos = self.generator.generate(self.config.VIDEO_COUNT)
        self.app_state = AppState(selected_category=ALL_CATEGORY, videos=videos)
        await self.render_categories()
        self.query_one(LogPane).add_message(f"🎬 Generated {len(videos)} demo videos.")

    def watch_app_state(self, old_state: AppState, new_state: AppState) -> None:
        """Any state change re-renders the grid."""
        self.query_one(CategoryBar).set_active(new_state.selected_category)
        self.render_videos()

    # --- Theme ---
    @property
    def theme_name(self) -> str:
        return "dark" if self.theme == TEXTUAL_THEMES["dark"] else "light"

    def apply_theme(self, theme: str) -> None:
        self._show_theme(theme, self.theme_manager.apply(theme))

    def _show_theme(self, theme: str, style: ThemeStyle) -> None:
        self.theme = TEXTUAL_THEMES[theme]
        self.query_one(ThemeToggle).set_style(style)

    def action_toggle_theme(self) -> None:
        theme = self.theme_manager.toggle(self.theme_name)
        self._show_theme(theme, THEMES[theme])
        self.query_one(LogPane).add_message(f"🎨 Switched to the {self.theme_name} theme.")

    @on(Button.Pressed, "#theme-toggle")
    def on_theme_toggle_pressed(self) -> None:
        self.action_toggle_theme()

    # --- Rendering ---
    async def render_categories(self) -> None:
        await self.query_one(CategoryBar).rebuild(
            self.config.CATEGORIES, self.app_state.selected_category)

    def select_category(self, category: str) -> None:
        if category not in self.config.CATEGORIES:
            raise ValueError(f"Unknown category '{category}'.")
        self.app_state = AppState(selected_category=category, videos=self.app_state.videos)

    def current_query(self) -> str:
        return self.query_one("#search-input", Input).value

    def render_videos(self) -> None:
        self.run_worker(self.perform_render(), group="render_worker", exclusive=True)

    async def perform_render(self) -> None:
        query = self.current_query()
        visible = filter_videos(self.app_state.videos, self.app_state.selected_category, query)
        await self.query_one(VideoGrid).update_videos(
            [build_card_view(v) for v in visible], self.config.PLAYING_PULSE_SECONDS)
        if query.strip():
            log = self.query_one(LogPane)
            if visible:
                log.add_message(f"🔎 {len(visible)} videos match '{escape(query.strip())}'.")
            else:
                log.add_message(f"🤷 No videos found for '{escape(query.strip())}'.")

    # --- Actions ---
    def action_focus_first_card(self) -> None:
        cards = self.query(VideoCard)
        if cards:
            cards.first().focus()

    def action_copy_link(self) -> None:
        log = self.query_one(LogPane)
        if not pyperclip:
            log.add_message("[red]❌ 'pyperclip' not installed.[/red]")
            return
        if isinstance(self.focused, VideoCard):
            view = self.focused.view
            pyperclip.copy(view.thumb_url)
            log.add_message(f"📋 Copied thumbnail link for '[b]{escape(view.title)}[/b]'.")
        else:
            log.add_message("[yellow]⚠️ No video focused.[/yellow]")

    # --- Message Handlers ---
    def on_category_bar_category_selected(self, message: CategoryBar.CategorySelected) -> None:
        self.select_category(message.category)
        self.query_one(LogPane).add_message(f"🏷️ Category: {escape(message.category)}")

    def on_input_changed(self, event: Input.Changed) -> None:
        """Debounces search rendering until typing pauses."""
        if event.input.id != "search-input":
            return
        if self._search_timer is not None:
            self._search_timer.stop()
        self._search_timer = self.set_timer(
            self.config.SEARCH_DEBOUNCE_SECONDS, self.render_videos)

    def on_search_controls_search_requested(self, message: SearchControls.SearchRequested) -> None:
        if self._search_timer is not None:
            self._search_timer.stop()
            self._search_timer = None
        self.render_videos()

    def on_video_card_played(self, message: VideoCard.Played) -> None:
        self.query_one(LogPane).add_message(f"▶️ Playing '[b]{escape(message.view.title)}[/b]'")


def main(argv=None):
    parser = argparse.ArgumentParser(description="Browse a grid of synthetic demo videos in the terminal.")
    parser.add_argument("-n", "--count", type=int, default=Config.VIDEO_COUNT,
                        help=f"Number of demo videos to generate (default: {Config.VIDEO_COUNT}).")
    parser.add_argument("--database", default=Config.DATABASE_FILENAME,
                        help="SQLite file holding the saved theme preference.")
    parser.add_argument("--log-level", default="WARNING",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    parser.add_argument("--log-file", default=None,
                        help="Write diagnostics to this file instead of the Textual console.")
    args = parser.parse_args(argv)
    if args.count < 0:
        parser.error(f"--count must be non-negative, got {args.count}")

    logging.basicConfig(
        level=args.log_level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[logging.FileHandler(args.log_file) if args.log_file else TextualHandler()],
    )

    app_config = dataclasses.replace(Config(), VIDEO_COUNT=args.count, DATABASE_FILENAME=args.database)
    store = PreferenceStore(app_config.DATABASE_FILENAME)
    theme_manager = ThemeManager(store, app_config.THEME_KEY, app_config.DEFAULT_THEME)
    generator = VideoGenerator(app_config)

    app = VidBrowseApp(generator, theme_manager, app_config)
    try:
        app.run()
    finally:
        store.close()


if __name__ == "__main__":
    main()
