"""Shared fixtures."""

import random

import pytest

from config import Config
from services import PreferenceStore, ThemeManager, VideoGenerator


@pytest.fixture
def config() -> Config:
    return Config()


@pytest.fixture
def generator(config) -> VideoGenerator:
    return VideoGenerator(config, rng=random.Random(1234))


@pytest.fixture
def videos(generator):
    return generator.generate(36)


@pytest.fixture
def store(tmp_path):
    prefs = PreferenceStore(str(tmp_path / "prefs.db"))
    yield prefs
    prefs.close()


@pytest.fixture
def theme_manager(store, config) -> ThemeManager:
    return ThemeManager(store, config.THEME_KEY, config.DEFAULT_THEME)
