"""Merged, capped alert log with defense status."""

from __future__ import annotations

import logging
import threading
from collections import deque
from typing import Callable, Iterable

from aggregate_alerts.models import AlertEvent, DefenseStatus

logger = logging.getLogger(__name__)

ALERT_LOG_CAPACITY = 20

AlertObserver = Callable[[AlertEvent, "AlertAggregator"], None]
ClearListener = Callable[[], None]


class AlertAggregator:
    """Single alert log shared by every producer.

    All mutations run under one lock, so producers on different threads are
    applied one at a time. Observers are invoked in registration order after
    each published event, still under the lock. Clear listeners run when a
    "no active alerts" signal resets the status.
    """

    def __init__(
        self,
        capacity: int = ALERT_LOG_CAPACITY,
        observers: Iterable[AlertObserver] = (),
        clear_listeners: Iterable[ClearListener] = (),
    ) -> None:
        self.capacity = capacity
        self._log: deque[AlertEvent] = deque(maxlen=capacity)
        self._status = DefenseStatus.NOMINAL
        self._active_places: list[str] = []
        self._observers: list[AlertObserver] = list(observers)
        self._clear_listeners: list[ClearListener] = list(clear_listeners)
        self._lock = threading.RLock()

    @property
    def status(self) -> DefenseStatus:
        with self._lock:
            return self._status

    @property
    def active_places(self) -> list[str]:
        with self._lock:
            return list(self._active_places)

    def events(self) -> list[AlertEvent]:
        """The alert log, newest first."""
        with self._lock:
            return list(self._log)

    def add_observer(self, observer: AlertObserver) -> None:
        with self._lock:
            self._observers.append(observer)

    def add_clear_listener(self, listener: ClearListener) -> None:
        with self._lock:
            self._clear_listeners.append(listener)

    def publish(self, event: AlertEvent) -> None:
        """Prepend an event to the log and update the defense status."""
        with self._lock:
            self._log.appendleft(event)
            if event.places:
                self._status = DefenseStatus.ACTIVE
                self._active_places = list(event.places)
            else:
                self._status = DefenseStatus.NOMINAL
                self._active_places = []

            logger.info(
                "Alert (%s): %s [%s] -> %s",
                event.kind.value,
                event.title,
                ", ".join(event.places),
                self._status.value,
            )
            self._notify(event)

    def publish_all(self, events: Iterable[AlertEvent]) -> None:
        for event in events:
            self.publish(event)

    def clear(self) -> None:
        """Handle a "no active alerts" signal. The log history is kept."""
        with self._lock:
            if self._status is DefenseStatus.ACTIVE:
                logger.info("Alerts cleared, defense status NOMINAL")
            self._status = DefenseStatus.NOMINAL
            self._active_places = []
            for listener in self._clear_listeners:
                try:
                    listener()
                except Exception as e:
                    logger.error("Alert clear listener %r failed: %s", listener, e)

    def _notify(self, event: AlertEvent) -> None:
        for observer in self._observers:
            try:
                observer(event, self)
            except Exception as e:
                logger.error("Alert observer %r failed: %s", observer, e)
