"""
home-security: the decision core of a home-security controller.

This library turns sensor activations, arming-mode changes and camera
cat detections into an authoritative alarm status:
- Alarm state machine (AlarmController)
- Pluggable state storage (StateStore)
- Pluggable cat detection (ImageClassifier)
- Synchronous observer notifications (StatusObserver)
"""

from home_security.core.models import AlarmStatus, ArmingStatus, Sensor, SensorType
from home_security.core.store import InMemoryStateStore, StateStore
from home_security.core.observer import StatusObserver
from home_security.core.controller import AlarmController
from home_security.imaging import ClassificationError, ImageClassifier

__version__ = "0.1.0a0"

__all__ = [
    "AlarmController",
    "AlarmStatus",
    "ArmingStatus",
    "ClassificationError",
    "ImageClassifier",
    "InMemoryStateStore",
    "Sensor",
    "SensorType",
    "StateStore",
    "StatusObserver",
]
