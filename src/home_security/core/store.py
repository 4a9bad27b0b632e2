"""
State store interface and the in-memory implementation.

The store holds the durable half of the system state: the arming status,
the alarm status and the sensor set. The host platform decides where it
actually lives; the controller only talks to the StateStore interface.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional
import logging

from home_security.core.models import AlarmStatus, ArmingStatus, Sensor

logger = logging.getLogger(__name__)


class StateStore(ABC):
    """
    Abstract interface for state persistence.

    Every write must be complete before the call returns; the controller
    assumes a value it just set is what the next getter reports.
    """

    @abstractmethod
    def get_arming_status(self) -> ArmingStatus:
        """Return the current arming status."""
        pass

    @abstractmethod
    def set_arming_status(self, status: ArmingStatus) -> None:
        """Persist a new arming status."""
        pass

    @abstractmethod
    def get_alarm_status(self) -> AlarmStatus:
        """Return the current alarm status."""
        pass

    @abstractmethod
    def set_alarm_status(self, status: AlarmStatus) -> None:
        """Persist a new alarm status."""
        pass

    @abstractmethod
    def get_sensors(self) -> List[Sensor]:
        """
        Get every known sensor.

        Returns:
            Sensors sorted by name
        """
        pass

    @abstractmethod
    def get_sensor(self, name: str) -> Optional[Sensor]:
        """
        Get a sensor by name.

        Args:
            name: Sensor name

        Returns:
            Sensor or None if not found
        """
        pass

    @abstractmethod
    def add_sensor(self, sensor: Sensor) -> None:
        """Add a sensor, replacing any sensor with the same name."""
        pass

    @abstractmethod
    def remove_sensor(self, sensor: Sensor) -> None:
        """Remove a sensor. Unknown sensors are ignored."""
        pass

    @abstractmethod
    def update_sensor(self, sensor: Sensor) -> None:
        """Persist a sensor's current fields, adding it if unknown."""
        pass


class InMemoryStateStore(StateStore):
    """
    Process-local StateStore backed by plain dicts.

    Supports dump_state()/restore_state() so a host can persist the
    contents in whatever medium it owns.
    """

    STATE_VERSION = 1

    def __init__(self) -> None:
        self._arming_status = ArmingStatus.DISARMED
        self._alarm_status = AlarmStatus.NO_ALARM
        self._sensors: Dict[str, Sensor] = {}  # name → Sensor

    def get_arming_status(self) -> ArmingStatus:
        return self._arming_status

    def set_arming_status(self, status: ArmingStatus) -> None:
        self._arming_status = status

    def get_alarm_status(self) -> AlarmStatus:
        return self._alarm_status

    def set_alarm_status(self, status: AlarmStatus) -> None:
        self._alarm_status = status

    def get_sensors(self) -> List[Sensor]:
        return sorted(self._sensors.values(), key=lambda s: s.name)

    def get_sensor(self, name: str) -> Optional[Sensor]:
        return self._sensors.get(name)

    def add_sensor(self, sensor: Sensor) -> None:
        self._sensors[sensor.name] = sensor
        logger.info(f"Added sensor: {sensor.name} ({sensor.sensor_type.value})")

    def remove_sensor(self, sensor: Sensor) -> None:
        if self._sensors.pop(sensor.name, None) is not None:
            logger.info(f"Removed sensor: {sensor.name}")

    def update_sensor(self, sensor: Sensor) -> None:
        self._sensors[sensor.name] = sensor

    # State Persistence

    def dump_state(self) -> Dict[str, Any]:
        """
        Dump current state for persistence.

        Returns:
            State dictionary
        """
        return {
            "version": self.STATE_VERSION,
            "arming_status": self._arming_status.value,
            "alarm_status": self._alarm_status.value,
            "sensors": [sensor.to_dict() for sensor in self.get_sensors()],
        }

    def restore_state(self, state: Dict[str, Any]) -> None:
        """
        Restore state from persistence.

        Nothing is changed unless the whole dump parses.

        Args:
            state: State dictionary from dump_state()

        Raises:
            ValueError: If a status or sensor entry is invalid
        """
        version = state.get("version", 1)
        if version != self.STATE_VERSION:
            logger.warning(f"Unknown state version {version}, ignoring")
            return

        try:
            arming_status = ArmingStatus(state.get("arming_status", "disarmed"))
            alarm_status = AlarmStatus(state.get("alarm_status", "no_alarm"))
            sensors: Dict[str, Sensor] = {}
            for sensor_data in state.get("sensors", []):
                sensor = Sensor.from_dict(sensor_data)
                sensors[sensor.name] = sensor
        except (KeyError, TypeError) as e:
            raise ValueError(f"Malformed state dump: {e!r}") from e

        # A disarmed system never holds an alarm
        if arming_status == ArmingStatus.DISARMED and alarm_status != AlarmStatus.NO_ALARM:
            logger.warning(
                f"Restored state is disarmed with {alarm_status.value}, using no_alarm"
            )
            alarm_status = AlarmStatus.NO_ALARM

        self._arming_status = arming_status
        self._alarm_status = alarm_status
        self._sensors = sensors

        logger.info(
            f"Restored state: {self._arming_status.value}, {self._alarm_status.value}, "
            f"{len(self._sensors)} sensors"
        )
