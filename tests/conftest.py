"""pytest configuration and fixtures for pyqt-themekit tests."""

import os
import random

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")


@pytest.fixture(scope="session")
def qapp():
    """Create QApplication instance for tests."""
    from PyQt6.QtWidgets import QApplication

    app = QApplication.instance() or QApplication([])
    yield app
    # Don't quit - may cause issues with other tests


@pytest.fixture(autouse=True)
def reset_engine_config():
    """Each test starts from the default engine configuration."""
    from pyqt_themekit.protocols import set_engine_config

    set_engine_config(None)
    yield
    set_engine_config(None)


@pytest.fixture
def seeded_rng():
    return random.Random(1234)


@pytest.fixture
def sample_theme():
    from pyqt_themekit.theming import CustomTheme

    return CustomTheme(name="Ocean", bg="#0b1d2a", text="#e6f1f8", accent="#0ea5e9", secondary="#16324a")


@pytest.fixture
def memory_backend():
    from pyqt_themekit.io import MemoryThemeBackend

    return MemoryThemeBackend()
