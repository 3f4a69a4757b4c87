"""Tests for the preview/apply controller and token sinks."""

import pytest

from pyqt_themekit.protocols import TokenApplier
from pyqt_themekit.theming import CustomTheme, PreviewController, PreviewState, get_preset

BASE_TOKENS = get_preset("light").to_tokens()


@pytest.fixture
def sink():
    from pyqt_themekit.theming.palette_manager import InMemoryTokenSink

    return InMemoryTokenSink(BASE_TOKENS)


def test_sinks_satisfy_protocol(sink):
    from pyqt_themekit.theming.palette_manager import QtStyleTokenApplier

    assert isinstance(sink, TokenApplier)
    assert isinstance(QtStyleTokenApplier(), TokenApplier)


def test_apply_overrides_all_tokens(sink, sample_theme):
    controller = PreviewController(sink)
    result = controller.apply(sample_theme)

    assert result.ok
    assert controller.state is PreviewState.PREVIEWING
    assert sink.resolved() == sample_theme.to_tokens()


def test_apply_is_idempotent(sink, sample_theme):
    controller = PreviewController(sink)
    controller.apply(sample_theme)
    once = sink.resolved()
    controller.apply(sample_theme)
    assert sink.resolved() == once


def test_later_apply_wins(sink, sample_theme):
    controller = PreviewController(sink)
    controller.apply(sample_theme)
    controller.apply(get_preset("neon"))
    assert sink.resolved() == get_preset("neon").to_tokens()
    assert controller.active_theme.name == "Neon"


def test_revert_restores_base(sink, sample_theme):
    before = sink.resolved()
    controller = PreviewController(sink)
    controller.apply(sample_theme)
    controller.apply(get_preset("candy"))

    result = controller.revert()

    assert result.value is True
    assert sink.resolved() == before
    assert controller.state is PreviewState.IDLE
    assert controller.active_theme is None


def test_teardown_reverts_once():
    class CountingSink:
        def __init__(self):
            self.clears = 0

        def apply(self, tokens):
            pass

        def clear(self):
            self.clears += 1

    counting = CountingSink()
    controller = PreviewController(counting)
    controller.apply(get_preset("dark"))
    controller.teardown()
    controller.teardown()
    assert counting.clears == 1


def test_teardown_when_idle_does_nothing(sink):
    controller = PreviewController(sink)
    controller.teardown()
    assert sink.overrides == {}


def test_context_manager_reverts_on_error(sink, sample_theme):
    with pytest.raises(RuntimeError):
        with PreviewController(sink) as controller:
            controller.apply(sample_theme)
            raise RuntimeError("tool closed")
    assert sink.resolved() == BASE_TOKENS


def test_sink_rejects_partial_palette(sink):
    from pyqt_themekit.theming import ValidationError

    with pytest.raises(ValidationError):
        sink.apply({"bg-color": "#000000"})


def test_revert_cancels_scheduled_apply(qapp, sink, sample_theme):
    controller = PreviewController(sink, debounce_ms=10_000)
    controller.schedule_apply(sample_theme)
    assert controller.has_pending_apply

    controller.revert()

    assert not controller.has_pending_apply
    assert sink.overrides == {}


def test_scheduled_applies_collapse_to_latest(qapp, sink, sample_theme):
    controller = PreviewController(sink, debounce_ms=10_000)
    controller.schedule_apply(sample_theme)
    controller.schedule_apply(get_preset("toxic"))
    assert sink.overrides == {}

    controller.flush_pending()

    assert sink.resolved() == get_preset("toxic").to_tokens()
    assert not controller.has_pending_apply


def test_qt_applier_applies_and_restores(qapp, sample_theme):
    from PyQt6.QtGui import QPalette
    from pyqt_themekit.theming.palette_manager import QtStyleTokenApplier

    original_window = qapp.palette().color(QPalette.ColorRole.Window).name()
    original_sheet = qapp.styleSheet()
    applier = QtStyleTokenApplier(qapp, apply_stylesheet=False)
    controller = PreviewController(applier)

    controller.apply(sample_theme)
    assert qapp.palette().color(QPalette.ColorRole.Window).name() == sample_theme.bg
    assert qapp.palette().color(QPalette.ColorRole.Highlight).name() == sample_theme.accent
    assert applier.current_tokens() == sample_theme.to_tokens()

    controller.revert()
    assert qapp.palette().color(QPalette.ColorRole.Window).name() == original_window
    assert qapp.styleSheet() == original_sheet
    assert applier.current_tokens() == {}


def test_bind_to_application(qapp, sink):
    from PyQt6.QtCore import QObject, pyqtSignal

    class FakeApplication(QObject):
        aboutToQuit = pyqtSignal()

    app = FakeApplication()
    controller = PreviewController(sink)
    controller.bind_to_application(app)
    controller.apply(get_preset("rave"))

    app.aboutToQuit.emit()

    assert not controller.is_active
    assert sink.resolved() == BASE_TOKENS


def test_qt_applier_stylesheet(qapp, sample_theme):
    from pyqt_themekit.theming.palette_manager import QtStyleTokenApplier

    original_sheet = qapp.styleSheet()
    with PreviewController(QtStyleTokenApplier(qapp)) as controller:
        controller.apply(sample_theme)
        assert sample_theme.bg in qapp.styleSheet()
    assert qapp.styleSheet() == original_sheet


def test_revert_shows_base_selected_during_preview(qapp, sample_theme):
    from PyQt6.QtGui import QColor, QPalette
    from pyqt_themekit.theming.palette_manager import QtStyleTokenApplier

    original = QPalette(qapp.palette())
    applier = QtStyleTokenApplier(qapp, apply_stylesheet=False)
    controller = PreviewController(applier)
    controller.apply(sample_theme)

    new_base = QPalette(original)
    new_base.setColor(QPalette.ColorRole.Window, QColor("#123456"))
    applier.set_base(new_base)
    # Preview still wins until reverted
    assert qapp.palette().color(QPalette.ColorRole.Window).name() == sample_theme.bg

    controller.revert()
    assert qapp.palette().color(QPalette.ColorRole.Window).name() == "#123456"

    applier.set_base(original)
    assert qapp.palette().color(QPalette.ColorRole.Window).name() == original.color(QPalette.ColorRole.Window).name()


def test_revert_reads_base_from_provider(qapp, sample_theme):
    from PyQt6.QtGui import QColor, QPalette
    from pyqt_themekit.theming.palette_manager import QtStyleTokenApplier

    original = QPalette(qapp.palette())
    host_base = {"palette": QPalette(original)}
    applier = QtStyleTokenApplier(
        qapp, apply_stylesheet=False, base_provider=lambda: (host_base["palette"], ""))
    controller = PreviewController(applier)
    controller.apply(sample_theme)

    switched = QPalette(original)
    switched.setColor(QPalette.ColorRole.Window, QColor("#654321"))
    host_base["palette"] = switched
    controller.revert()

    assert qapp.palette().color(QPalette.ColorRole.Window).name() == "#654321"
    qapp.setPalette(original)


def test_apply_without_application_fails(sample_theme):
    from pyqt_themekit.theming import ThemeEngineError
    from pyqt_themekit.theming.palette_manager import QtStyleTokenApplier

    class DetachedApplier(QtStyleTokenApplier):
        @property
        def app(self):
            return None

    controller = PreviewController(DetachedApplier())
    result = controller.apply(sample_theme)

    assert not result.ok
    assert isinstance(result.error, ThemeEngineError)
    assert controller.state is PreviewState.IDLE
