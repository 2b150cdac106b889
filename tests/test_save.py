import pytest

pytest.importorskip("PySide6")

from PySide6.QtCore import QSize
from PySide6.QtGui import QImage

import spherelogo.controller.save as save_module
from spherelogo.config import JPEG_FILTER, PNG_FILTER, SUCCESS_MESSAGE
from spherelogo.controller.save import SaveCoordinator

PNG_MAGIC = b"\x89PNG\r\n\x1a\n"
JPEG_MAGIC = b"\xff\xd8\xff"


class FakeMessageBox:
    calls = []

    @staticmethod
    def information(parent, title, text):
        FakeMessageBox.calls.append(("information", title, text))

    @staticmethod
    def critical(parent, title, text):
        FakeMessageBox.calls.append(("critical", title, text))


def _fake_dialog(fname, selected_filter):
    class FakeFileDialog:
        @staticmethod
        def getSaveFileName(*args, **kwargs):
            return fname, selected_filter
    return FakeFileDialog


@pytest.fixture
def dialogs(monkeypatch):
    FakeMessageBox.calls = []
    monkeypatch.setattr(save_module, "QMessageBox", FakeMessageBox)

    def answer(fname, selected_filter=PNG_FILTER):
        monkeypatch.setattr(save_module, "QFileDialog", _fake_dialog(fname, selected_filter))

    return answer


def test_save_png(qapp, tmp_path, dialogs):
    target = tmp_path / "logo.png"
    dialogs(str(target))

    written = SaveCoordinator().save(QSize(300, 200))

    assert written == str(target)
    assert target.read_bytes()[:8] == PNG_MAGIC
    saved = QImage(str(target))
    assert (saved.width(), saved.height()) == (300, 200)
    assert FakeMessageBox.calls == [("information", "Success", SUCCESS_MESSAGE)]


def test_save_jpeg_filter_without_suffix(qapp, tmp_path, dialogs):
    dialogs(str(tmp_path / "logo"), JPEG_FILTER)

    written = SaveCoordinator().save(QSize(100, 100))

    assert written == str(tmp_path / "logo.jpg")
    assert (tmp_path / "logo.jpg").read_bytes()[:3] == JPEG_MAGIC


def test_cancel_leaves_filesystem_unchanged(qapp, tmp_path, dialogs):
    (tmp_path / "existing.png").write_bytes(b"keep")
    before = sorted(p.name for p in tmp_path.iterdir())
    dialogs("", "")

    assert SaveCoordinator().save(QSize(100, 100)) is None

    assert sorted(p.name for p in tmp_path.iterdir()) == before
    assert (tmp_path / "existing.png").read_bytes() == b"keep"
    assert FakeMessageBox.calls == []


def test_write_failure_is_reported_not_raised(qapp, tmp_path, dialogs):
    target = tmp_path / "no" / "such" / "dir" / "logo.png"
    dialogs(str(target))

    assert SaveCoordinator().save(QSize(100, 100)) is None

    assert not target.exists()
    assert len(FakeMessageBox.calls) == 1
    kind, _, text = FakeMessageBox.calls[0]
    assert kind == "critical"
    assert str(target.parent) in text


def test_save_zero_size_still_writes(qapp, tmp_path, dialogs):
    target = tmp_path / "tiny.png"
    dialogs(str(target))

    assert SaveCoordinator().save(QSize(0, 0)) == str(target)
    assert target.read_bytes()[:8] == PNG_MAGIC
