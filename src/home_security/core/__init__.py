"""
Core components of the home-security controller.

This package contains:
- models: sensors, status enums and controller config
- store: StateStore interface and in-memory implementation
- observer: StatusObserver interface
- controller: AlarmController state machine
"""

from home_security.core.models import (
    ARMED_STATES,
    AlarmStatus,
    ArmingStatus,
    ControllerConfig,
    Sensor,
    SensorType,
)
from home_security.core.store import InMemoryStateStore, StateStore
from home_security.core.observer import LoggingObserver, StatusObserver
from home_security.core.controller import AlarmController

__all__ = [
    "ARMED_STATES",
    "AlarmController",
    "AlarmStatus",
    "ArmingStatus",
    "ControllerConfig",
    "InMemoryStateStore",
    "LoggingObserver",
    "Sensor",
    "SensorType",
    "StateStore",
    "StatusObserver",
]
