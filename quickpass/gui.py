# quickpass/gui.py
# QuickPass GUI: live-regenerating password with length and class controls

import sys
import typing
import logging
from functools import partial

from PySide6.QtCore import Qt, QTimer
from PySide6.QtGui import QClipboard, QFont
from PySide6.QtWidgets import (
    QApplication, QWidget, QHBoxLayout, QVBoxLayout, QLabel,
    QLineEdit, QPushButton, QSpinBox, QSlider, QCheckBox, QGroupBox, QGridLayout
)

from quickpass.config import load_config
from quickpass.generator import CANONICAL_ORDER
from quickpass.log import setup_logging
from quickpass.options import MIN_LENGTH, MAX_LENGTH, ConfigError
from quickpass.session import CopyIndicator, PasswordSession

logger = logging.getLogger(__name__)

CFG = load_config()
DEFAULT_CLEAR_CLIP_SECONDS = int(CFG.get("clipboard_clear_seconds", 20))
DEFAULT_INDICATOR_SECONDS = float(CFG.get("copied_indicator_seconds", 2.0))
TOAST_MS = 3000


class _TimerHandle:
    """cancel() handle around a single-shot QTimer."""

    def __init__(self, parent, delay: float, callback):
        self.timer = QTimer(parent)
        self.timer.setSingleShot(True)
        self.timer.timeout.connect(callback)
        self.timer.start(int(delay * 1000))

    def cancel(self):
        self.timer.stop()


def qt_scheduler(parent):
    return lambda delay, callback: _TimerHandle(parent, delay, callback)

# ---------------- UI building helpers ----------------

def make_password_group():
    box = QGroupBox("Generate Password")
    layout = QHBoxLayout()
    box.setLayout(layout)

    txt_password = QLineEdit()
    txt_password.setReadOnly(True)
    font = QFont("Roboto Mono")
    font.setStyleHint(QFont.Monospace)
    font.setPointSize(18)
    txt_password.setFont(font)

    btn_copy = QPushButton("Copy")
    btn_regenerate = QPushButton("Regenerate")

    layout.addWidget(txt_password, 1)
    layout.addWidget(btn_copy)
    layout.addWidget(btn_regenerate)

    return {
        "widget": box,
        "txt_password": txt_password,
        "btn_copy": btn_copy,
        "btn_regenerate": btn_regenerate,
    }


def make_options_group(config):
    box = QGroupBox("Customize your password")
    layout = QGridLayout()
    box.setLayout(layout)

    lbl_len = QLabel("Password Length")
    spin_len = QSpinBox()
    spin_len.setRange(MIN_LENGTH, MAX_LENGTH)
    spin_len.setValue(config.length)
    slider_len = QSlider(Qt.Horizontal)
    slider_len.setRange(MIN_LENGTH, MAX_LENGTH)
    slider_len.setSingleStep(1)
    slider_len.setValue(config.length)

    layout.addWidget(lbl_len, 0, 0, 1, 2)
    layout.addWidget(spin_len, 1, 0)
    layout.addWidget(slider_len, 1, 1)

    checks = {}
    for row, cls in enumerate(CANONICAL_ORDER):
        chk = QCheckBox(cls.label)
        chk.setChecked(cls in config.classes)
        layout.addWidget(chk, row, 2)
        checks[cls] = chk

    lbl_error = QLabel("")
    lbl_error.setStyleSheet("color: #c0392b;")
    layout.addWidget(lbl_error, len(CANONICAL_ORDER), 0, 1, 3)

    return {
        "widget": box,
        "spin_len": spin_len,
        "slider_len": slider_len,
        "checks": checks,
        "lbl_error": lbl_error,
    }


class QuickPassGUI(QWidget):
    def __init__(self):
        super().__init__()
        self.setWindowTitle("QuickPass — Password Generator")
        self.setMinimumSize(720, 320)
        self.clip_timer: typing.Optional[QTimer] = None
        self.clip_clear_seconds = DEFAULT_CLEAR_CLIP_SECONDS
        self.copied_text = ""

        indicator = CopyIndicator(
            delay=DEFAULT_INDICATOR_SECONDS,
            schedule=qt_scheduler(self),
            on_change=self.on_copied_changed,
        )
        self.session = PasswordSession(indicator=indicator)

        # build UI
        main = QVBoxLayout()
        self.setLayout(main)

        pw = make_password_group()
        opts = make_options_group(self.session.config)
        self.lbl_toast = QLabel("")
        self.lbl_toast.setAlignment(Qt.AlignCenter)

        main.addWidget(pw["widget"])
        main.addWidget(opts["widget"])
        main.addWidget(self.lbl_toast)

        # store references
        self.pw = pw
        self.opts = opts

        # Wire up controls; every change goes through the session
        pw["btn_copy"].clicked.connect(self.on_copy)
        pw["btn_regenerate"].clicked.connect(self.on_regenerate)
        opts["spin_len"].valueChanged.connect(self.on_length_changed)
        opts["slider_len"].valueChanged.connect(self.on_length_changed)
        for cls, chk in opts["checks"].items():
            chk.toggled.connect(partial(self.on_class_toggled, cls))

        self.session.subscribe(self.on_session_changed)
        self.on_session_changed(self.session.config, self.session.password)

    # ----------------- Session -----------------
    def on_session_changed(self, config, password: str):
        self.pw["txt_password"].setText(password)
        for w in (self.opts["spin_len"], self.opts["slider_len"]):
            if w.value() != config.length:
                w.blockSignals(True)
                w.setValue(config.length)
                w.blockSignals(False)
        self.opts["lbl_error"].setText("")

    def on_length_changed(self, value: int):
        try:
            self.session.set_length(value)
        except ConfigError as e:
            self.opts["lbl_error"].setText(str(e))

    def on_class_toggled(self, cls, checked: bool):
        try:
            self.session.toggle(cls, checked)
        except ConfigError as e:
            # keep the previous selection and password
            chk = self.opts["checks"][cls]
            chk.blockSignals(True)
            chk.setChecked(cls in self.session.config.classes)
            chk.blockSignals(False)
            self.opts["lbl_error"].setText(str(e))

    def on_regenerate(self):
        self.session.regenerate()

    # ----------------- Clipboard -----------------
    def on_copy(self):
        if not self.session.password:
            return
        self.copied_text = self.session.copy(self.write_clipboard, notify=self.show_toast)
        # setup timer to clear clipboard using current config
        self.start_clipboard_clear_timer(self.clip_clear_seconds)

    def on_copied_changed(self, copied: bool):
        self.pw["btn_copy"].setText("Copied ✓" if copied else "Copy")

    def write_clipboard(self, text: str):
        clipboard: QClipboard = QApplication.clipboard()
        clipboard.setText(text, mode=QClipboard.Clipboard)
        if clipboard.supportsSelection():
            clipboard.setText(text, mode=QClipboard.Selection)

    def show_toast(self, message: str):
        self.lbl_toast.setText(message)
        QTimer.singleShot(TOAST_MS, lambda: self.lbl_toast.setText(""))

    def start_clipboard_clear_timer(self, seconds: int):
        if self.clip_timer and self.clip_timer.isActive():
            self.clip_timer.stop()
        self.clip_timer = QTimer(self)
        self.clip_timer.setSingleShot(True)
        self.clip_timer.timeout.connect(self.clear_clipboard)
        self.clip_timer.start(seconds * 1000)

    def clear_clipboard(self):
        clipboard: QClipboard = QApplication.clipboard()
        # only clear what we put there
        if clipboard.text() == self.copied_text:
            self.write_clipboard("")


def main():
    setup_logging(CFG.get("log_level", "WARNING"))
    app = QApplication(sys.argv)
    gui = QuickPassGUI()
    gui.show()
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
