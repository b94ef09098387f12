"""
quickpass.session

Presentation-side state: the current configuration snapshot and the
password derived from it. Every accepted change regenerates the password
synchronously and pushes (config, password) to subscribers.
"""

import logging
import threading
from random import Random
from typing import Any, Callable, Iterable, List, Optional

from .generator import CharacterClass, generate_from
from .options import DEFAULT_CONFIG, PasswordConfig, validate

logger = logging.getLogger(__name__)

COPIED_MESSAGE = "Password copied to clipboard!"
DEFAULT_INDICATOR_SECONDS = 2.0

Listener = Callable[[PasswordConfig, str], None]
# schedule(delay_seconds, callback) -> handle exposing cancel()
Scheduler = Callable[[float, Callable[[], None]], Any]


def thread_timer_scheduler(delay: float, callback: Callable[[], None]) -> threading.Timer:
    timer = threading.Timer(delay, callback)
    timer.daemon = True
    timer.start()
    return timer


class CopyIndicator:
    """
    Transient "copied" flag that reverts after `delay` seconds.
    Re-triggering cancels the pending reset and starts a new one.
    """

    def __init__(
        self,
        delay: float = DEFAULT_INDICATOR_SECONDS,
        schedule: Optional[Scheduler] = None,
        on_change: Optional[Callable[[bool], None]] = None,
    ) -> None:
        self.delay = delay
        self._schedule = schedule or thread_timer_scheduler
        self._on_change = on_change
        self._pending = None
        self.copied = False

    def trigger(self) -> None:
        self._cancel_pending()
        self._set(True)
        self._pending = self._schedule(self.delay, self._reset)

    def cancel(self) -> None:
        self._cancel_pending()
        self._set(False)

    def _reset(self) -> None:
        self._pending = None
        self._set(False)

    def _cancel_pending(self) -> None:
        if self._pending is not None:
            self._pending.cancel()
            self._pending = None

    def _set(self, value: bool) -> None:
        if self.copied == value:
            return
        self.copied = value
        if self._on_change:
            self._on_change(value)


class PasswordSession:
    def __init__(
        self,
        config: PasswordConfig = DEFAULT_CONFIG,
        rng: Optional[Random] = None,
        indicator: Optional[CopyIndicator] = None,
    ) -> None:
        self._rng = rng
        self._listeners: List[Listener] = []
        self.indicator = indicator or CopyIndicator()
        self.config = validate(config)
        self.password = generate_from(self.config, rng=self._rng)

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a listener; returns a function that unregisters it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def update(self, config: PasswordConfig) -> str:
        """
        Replace the configuration and regenerate. A rejected snapshot raises
        ConfigError and leaves the session untouched.
        """
        self.config = validate(config)
        logger.debug("configuration changed: length=%d classes=%s", self.config.length, self.config.ids())
        return self.regenerate()

    def set_length(self, length: int) -> str:
        return self.update(self.config.with_length(length))

    def set_classes(self, classes: Iterable[CharacterClass]) -> str:
        return self.update(self.config.with_classes(classes))

    def toggle(self, cls: CharacterClass, enabled: bool) -> str:
        return self.update(self.config.toggled(cls, enabled))

    def regenerate(self) -> str:
        self.password = generate_from(self.config, rng=self._rng)
        for listener in list(self._listeners):
            listener(self.config, self.password)
        return self.password

    def copy(self, clipboard: Callable[[str], None], notify: Optional[Callable[[str], None]] = None) -> str:
        """Write the current password to the clipboard, then notify and flip the indicator."""
        clipboard(self.password)
        if notify:
            notify(COPIED_MESSAGE)
        self.indicator.trigger()
        return self.password
