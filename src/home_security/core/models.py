"""Data models for the alarm controller.

Defines sensors, the two status enums and the controller configuration.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict


class SensorType(Enum):
    """Category of a physical sensor."""

    DOOR = "door"
    WINDOW = "window"
    MOTION = "motion"


class ArmingStatus(Enum):
    """Operator-selected arming mode.

    Sensor triggers are only honored while the system is armed.
    """

    DISARMED = "disarmed"
    ARMED_HOME = "armed_home"
    ARMED_AWAY = "armed_away"

    @property
    def description(self) -> str:
        """Human-readable label for displays."""
        return _ARMING_DESCRIPTIONS[self]


class AlarmStatus(Enum):
    """Current escalation level of the system."""

    NO_ALARM = "no_alarm"
    PENDING_ALARM = "pending_alarm"  # One trigger seen, waiting on a second
    ALARM = "alarm"  # Terminal, cleared only by disarming

    @property
    def description(self) -> str:
        """Human-readable label for displays."""
        return _ALARM_DESCRIPTIONS[self]


_ARMING_DESCRIPTIONS = {
    ArmingStatus.DISARMED: "Disarmed",
    ArmingStatus.ARMED_HOME: "Armed - At Home",
    ArmingStatus.ARMED_AWAY: "Armed - Away",
}

_ALARM_DESCRIPTIONS = {
    AlarmStatus.NO_ALARM: "No Alarm",
    AlarmStatus.PENDING_ALARM: "Pending Alarm",
    AlarmStatus.ALARM: "Alarm",
}

ARMED_STATES = frozenset({ArmingStatus.ARMED_HOME, ArmingStatus.ARMED_AWAY})


@dataclass(eq=False)
class Sensor:
    """
    A door, window or motion sensor known to the controller.

    Sensors are identified by name: two Sensor objects with the same name
    compare equal and hash alike, whatever their type or activation.

    Attributes:
        name: Unique sensor name (e.g., "Front Door")
        sensor_type: Sensor category
        active: Last activation value applied by the controller
    """

    name: str
    sensor_type: SensorType
    active: bool = False

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Sensor):
            return NotImplemented
        return self.name == other.name

    def __hash__(self) -> int:
        return hash(self.name)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize for state dumps."""
        return {
            "name": self.name,
            "sensor_type": self.sensor_type.value,
            "active": self.active,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Sensor":
        """Rebuild a sensor from to_dict() output."""
        return cls(
            name=data["name"],
            sensor_type=SensorType(data["sensor_type"]),
            active=bool(data.get("active", False)),
        )


@dataclass(frozen=True)
class ControllerConfig:
    """
    Runtime configuration for AlarmController.

    Attributes:
        version: Config schema version
        confidence_threshold: Minimum classifier confidence (percent) for a
            cat to count as detected
    """

    version: int = 1
    confidence_threshold: float = 50.0
    extra: Dict[str, Any] = field(default_factory=dict, compare=False)

    def __post_init__(self) -> None:
        """Validate threshold range."""
        if not 0.0 <= self.confidence_threshold <= 100.0:
            raise ValueError(
                f"confidence_threshold must be between 0 and 100, got {self.confidence_threshold}"
            )

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ControllerConfig":
        """Build a config from a (migrated) config dict.

        Unknown keys are kept in ``extra`` so a round trip does not lose them.
        """
        known = {"version", "confidence_threshold"}
        try:
            version = int(data.get("version", 1))
            threshold = float(data.get("confidence_threshold", 50.0))
        except TypeError as e:
            raise ValueError(f"Invalid controller config: {e}") from e
        return cls(
            version=version,
            confidence_threshold=threshold,
            extra={k: v for k, v in data.items() if k not in known},
        )

    def to_dict(self) -> Dict[str, Any]:
        """Serialize back to a config dict."""
        return {
            **self.extra,
            "version": self.version,
            "confidence_threshold": self.confidence_threshold,
        }
