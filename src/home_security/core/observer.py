"""Observer interface for alarm controller notifications."""

from abc import ABC, abstractmethod
import logging

from home_security.core.models import AlarmStatus

logger = logging.getLogger(__name__)


class StatusObserver(ABC):
    """
    Listener for alarm controller updates.

    Callbacks run synchronously on the caller's thread, after the new state
    has been stored. They should return quickly and must not call back into
    the controller's mutating operations.
    """

    @abstractmethod
    def on_alarm_status_changed(self, status: AlarmStatus) -> None:
        """
        Called with the alarm status that was actually recorded.

        Args:
            status: Stored alarm status
        """
        pass

    @abstractmethod
    def on_cat_detected(self, detected: bool) -> None:
        """
        Called with the raw result of every processed camera image.

        Args:
            detected: True if the classifier saw a cat
        """
        pass


class LoggingObserver(StatusObserver):
    """Observer that writes every notification to the log."""

    def __init__(self, name: str = "security") -> None:
        self.name = name

    def on_alarm_status_changed(self, status: AlarmStatus) -> None:
        logger.info(f"[{self.name}] Alarm status: {status.description}")

    def on_cat_detected(self, detected: bool) -> None:
        logger.info(f"[{self.name}] Cat detected: {detected}")
