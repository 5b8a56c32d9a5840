import os

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

QtWidgets = pytest.importorskip("PySide6.QtWidgets")
QtTest = pytest.importorskip("PySide6.QtTest")

from PySide6.QtCore import Qt  # noqa: E402

from conftest import FakeRunner  # noqa: E402
from spwn.constants import HEIGHT_COLLAPSED, HEIGHT_WITH_OUTPUT, HEIGHT_WITH_RESULTS  # noqa: E402
from spwn.main_window import MainWindow  # noqa: E402
from spwn.models import ExecutionResult  # noqa: E402
from spwn.plugins import default_registry  # noqa: E402
from spwn.state import LauncherState  # noqa: E402


@pytest.fixture(scope="module")
def qapp():
    return QtWidgets.QApplication.instance() or QtWidgets.QApplication([])


@pytest.fixture
def window(qapp, sample_apps):
    launcher = LauncherState(sample_apps, default_registry(FakeRunner()))
    w = MainWindow(launcher)
    w.show()
    yield w
    w.hide()
    w.deleteLater()


def test_typing_filters_and_resizes(window):
    assert window.height() == HEIGHT_COLLAPSED

    window.input.setText("fire")

    assert window.results.count() == 1
    assert window.results.item(0).text() == "Firefox"
    assert not window.results.isHidden()
    assert window.height() == HEIGHT_WITH_RESULTS


def test_arrow_keys_move_selection(window):
    window.input.setText("i")

    QtTest.QTest.keyClick(window.input, Qt.Key_Down)

    assert window.launcher.snapshot().selected_index == 1
    QtTest.QTest.keyClick(window.input, Qt.Key_Up)
    QtTest.QTest.keyClick(window.input, Qt.Key_Up)
    assert window.launcher.snapshot().selected_index == 2


def test_result_shows_output_pane(window):
    window.input.setText("> uname")

    window.launcher.execution_completed(ExecutionResult.success("Linux\n"))

    assert window.output.toPlainText() == "Linux\n"
    assert not window.output.isHidden()
    assert window.height() == HEIGHT_WITH_OUTPUT


def test_escape_requests_close(window):
    QtTest.QTest.keyClick(window.input, Qt.Key_Escape)

    assert window.launcher.closed


def test_empty_successful_output_still_opens_pane(window):
    window.input.setText("> true")
    assert window.output.isHidden()

    window.launcher.execution_completed(ExecutionResult.success(""))

    assert not window.output.isHidden()
    assert window.output.toPlainText() == ""
    assert window.height() == HEIGHT_WITH_OUTPUT
