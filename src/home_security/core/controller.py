"""
AlarmController - the alarm state machine.

Owns every decision about the alarm status. Storage, image classification
and presentation are delegated to collaborators.
"""

import logging
import threading
from typing import Any, Dict, List, Optional

from home_security.core.models import (
    ARMED_STATES,
    AlarmStatus,
    ArmingStatus,
    ControllerConfig,
    Sensor,
)
from home_security.core.observer import StatusObserver
from home_security.core.store import StateStore
from home_security.imaging.classifier import ClassificationError, ImageClassifier

logger = logging.getLogger(__name__)


class AlarmController:
    """
    Applies arming changes, sensor edges and cat detections to the alarm status.

    Transitions (AlarmStatus):
    - NO_ALARM → PENDING_ALARM: sensor activated while armed
    - PENDING_ALARM → ALARM: another sensor activation while armed
    - PENDING_ALARM → NO_ALARM: active sensor deactivated
    - any → NO_ALARM: disarmed
    - any → ALARM: cat seen while armed at home
    - any → NO_ALARM: no cat seen and every sensor inactive

    ALARM has no automatic exit; only disarming clears it.

    All public operations run under one re-entrant lock, so concurrent
    callers are applied one at a time in arrival order.
    """

    CURRENT_CONFIG_VERSION = 1

    def __init__(
        self,
        store: StateStore,
        classifier: ImageClassifier,
        config: Optional[ControllerConfig] = None,
    ) -> None:
        self._store = store
        self._classifier = classifier
        self._config = config or ControllerConfig()
        self._observers: List[StatusObserver] = []
        self._lock = threading.RLock()

    # Configuration

    @property
    def config(self) -> ControllerConfig:
        return self._config

    def default_config(self) -> Dict:
        """Return default configuration."""
        return {
            "version": self.CURRENT_CONFIG_VERSION,
            "confidence_threshold": 50.0,
        }

    def config_schema(self) -> Dict:
        """Return JSON schema for the controller configuration."""
        return {
            "type": "object",
            "properties": {
                "version": {"type": "integer", "default": 1},
                "confidence_threshold": {
                    "type": "number",
                    "minimum": 0,
                    "maximum": 100,
                    "default": 50.0,
                    "description": "Minimum classifier confidence (%) to count a cat",
                },
            },
        }

    def migrate_config(self, config: Dict) -> Dict:
        """Migrate configuration from older versions."""
        version = config.get("version", 1)
        if version != self.CURRENT_CONFIG_VERSION:
            logger.info(f"Migrating controller config v{version} → v{self.CURRENT_CONFIG_VERSION}")

        # No migrations yet (v1 is first version); versionless dicts are v1
        config["version"] = self.CURRENT_CONFIG_VERSION
        return config

    def configure(self, config: Dict) -> None:
        """
        Apply a new configuration dict.

        Args:
            config: Configuration dict (may be an older version)

        Raises:
            ValueError: If the configuration is invalid
        """
        migrated = self.migrate_config(dict(config))
        new_config = ControllerConfig.from_dict(migrated)
        with self._lock:
            self._config = new_config
        logger.info(f"Controller configured: threshold={new_config.confidence_threshold}")

    # Observers

    def add_observer(self, observer: StatusObserver) -> None:
        """Register an observer. Adding the same observer twice has no effect."""
        with self._lock:
            if any(o is observer for o in self._observers):
                return
            self._observers.append(observer)
        logger.debug(f"Added observer {observer!r}")

    def remove_observer(self, observer: StatusObserver) -> None:
        """Unregister an observer. Unknown observers are ignored."""
        with self._lock:
            self._observers = [o for o in self._observers if o is not observer]
        logger.debug(f"Removed observer {observer!r}")

    def _notify_alarm_status(self, status: AlarmStatus) -> None:
        for observer in list(self._observers):
            try:
                observer.on_alarm_status_changed(status)
            except Exception as e:
                logger.error(
                    f"Error in observer {observer!r} for alarm status {status.value}: {e}",
                    exc_info=True,
                )

    def _notify_cat_detected(self, detected: bool) -> None:
        for observer in list(self._observers):
            try:
                observer.on_cat_detected(detected)
            except Exception as e:
                logger.error(
                    f"Error in observer {observer!r} for cat detection: {e}",
                    exc_info=True,
                )

    # Accessors

    @property
    def alarm_status(self) -> AlarmStatus:
        return self._store.get_alarm_status()

    @property
    def arming_status(self) -> ArmingStatus:
        return self._store.get_arming_status()

    @property
    def is_armed(self) -> bool:
        return self._store.get_arming_status() in ARMED_STATES

    def get_sensors(self) -> List[Sensor]:
        """Get every known sensor."""
        return self._store.get_sensors()

    def add_sensor(self, sensor: Sensor) -> None:
        with self._lock:
            self._store.add_sensor(sensor)

    def remove_sensor(self, sensor: Sensor) -> None:
        with self._lock:
            self._store.remove_sensor(sensor)

    # State Transitions

    def set_arming_status(self, status: ArmingStatus) -> None:
        """
        Change the arming status.

        Disarming clears any alarm. Arming resets every sensor to inactive
        without escalating the alarm.

        Args:
            status: New arming status

        Raises:
            ValueError: If status is not an ArmingStatus
        """
        if not isinstance(status, ArmingStatus):
            raise ValueError(f"Invalid arming status: {status!r}")

        with self._lock:
            if status == ArmingStatus.DISARMED:
                self.set_alarm_status(AlarmStatus.NO_ALARM)
            elif status in ARMED_STATES:
                for sensor in self._store.get_sensors():
                    self.change_sensor_activation_status(sensor, False)

            self._store.set_arming_status(status)
            logger.info(f"Arming status: {status.value}")

    def set_alarm_status(self, status: AlarmStatus) -> None:
        """
        Change the alarm status and notify observers.

        A pending alarm cannot be entered while no sensor is active; such a
        request stores NO_ALARM instead. Observers receive the stored value.

        Args:
            status: Requested alarm status

        Raises:
            ValueError: If status is not an AlarmStatus
        """
        if not isinstance(status, AlarmStatus):
            raise ValueError(f"Invalid alarm status: {status!r}")

        with self._lock:
            if status == AlarmStatus.PENDING_ALARM and self._all_sensors_inactive():
                logger.debug("Pending alarm requested with no active sensor, storing no_alarm")
                status = AlarmStatus.NO_ALARM

            self._store.set_alarm_status(status)
            logger.info(f"Alarm status: {status.value}")
            self._notify_alarm_status(status)

    def change_sensor_activation_status(self, sensor: Sensor, active: bool) -> None:
        """
        Activate or deactivate a sensor and update the alarm status.

        Only edges (inactive → active, active → inactive) run alarm logic;
        repeating the current value just persists the sensor again.

        Args:
            sensor: Sensor to change
            active: New activation value

        Raises:
            ValueError: If active is not a bool
        """
        if not isinstance(active, bool):
            raise ValueError(f"Invalid activation value: {active!r}")

        with self._lock:
            current = self._store.get_sensor(sensor.name) or sensor
            was_active = current.active
            current.active = active
            sensor.active = active

            # Alarm rules read the sensor set from the store, so a store that
            # hands out copies still shows the old value here.
            if not was_active and active:
                logger.debug(f"Sensor {current.name} activated")
                self._handle_sensor_activated()
            elif was_active and not active:
                logger.debug(f"Sensor {current.name} deactivated")
                self._handle_sensor_deactivated()

            self._store.update_sensor(current)

    def process_image(self, image: Any) -> None:
        """
        Run cat detection on a camera frame and update the alarm status.

        Args:
            image: Camera frame, passed through to the classifier

        Raises:
            ClassificationError: If the classifier fails or returns a
                non-bool result; nothing changes
        """
        with self._lock:
            cat_present = self._classifier.contains_cat(
                image, self._config.confidence_threshold
            )
            if not isinstance(cat_present, bool):
                raise ClassificationError(f"Classifier returned non-bool result: {cat_present!r}")
            logger.debug(f"Classifier result: cat={cat_present}")
            self._cat_detected(cat_present)

    def _cat_detected(self, cat_present: bool) -> None:
        if cat_present and self._store.get_arming_status() == ArmingStatus.ARMED_HOME:
            self.set_alarm_status(AlarmStatus.ALARM)
        elif not cat_present and self._all_sensors_inactive():
            self.set_alarm_status(AlarmStatus.NO_ALARM)

        self._notify_cat_detected(cat_present)

    def _handle_sensor_activated(self) -> None:
        if self._store.get_arming_status() == ArmingStatus.DISARMED:
            return

        current = self._store.get_alarm_status()
        if current == AlarmStatus.NO_ALARM:
            self.set_alarm_status(AlarmStatus.PENDING_ALARM)
        elif current == AlarmStatus.PENDING_ALARM:
            self.set_alarm_status(AlarmStatus.ALARM)
        # ALARM stays ALARM

    def _handle_sensor_deactivated(self) -> None:
        if self._store.get_alarm_status() == AlarmStatus.PENDING_ALARM:
            self.set_alarm_status(AlarmStatus.NO_ALARM)

    def _all_sensors_inactive(self) -> bool:
        return all(not sensor.active for sensor in self._store.get_sensors())
