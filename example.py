#!/usr/bin/env python3
"""
Quick example demonstrating home-security basic usage.

Run with: PYTHONPATH=src python3 example.py
"""

import logging

from home_security.core import (
    AlarmController,
    ArmingStatus,
    InMemoryStateStore,
    LoggingObserver,
    Sensor,
    SensorType,
)
from home_security.imaging import FakeImageClassifier

logging.basicConfig(level=logging.INFO, format="   %(name)s: %(message)s")

print("=" * 60)
print("home-security Example")
print("=" * 60)

# 1. Controller and collaborators
print("\n1. Creating controller...")
store = InMemoryStateStore()
controller = AlarmController(store, FakeImageClassifier(seed=7))
controller.add_observer(LoggingObserver(name="panel"))
print("   ✓ AlarmController created with in-memory store and fake classifier")

# 2. Register sensors
print("\n2. Adding sensors...")
front_door = Sensor(name="Front Door", sensor_type=SensorType.DOOR)
living_room = Sensor(name="Living Room", sensor_type=SensorType.MOTION)
controller.add_sensor(front_door)
controller.add_sensor(living_room)
print(f"   ✓ Sensors: {[s.name for s in controller.get_sensors()]}")

# 3. Arm and trip sensors
print("\n3. Arming (away) and tripping sensors...")
controller.set_arming_status(ArmingStatus.ARMED_AWAY)
controller.change_sensor_activation_status(front_door, True)
print(f"   ✓ After front door: {controller.alarm_status.description}")
controller.change_sensor_activation_status(living_room, True)
print(f"   ✓ After living room motion: {controller.alarm_status.description}")

# 4. Disarm
print("\n4. Disarming...")
controller.set_arming_status(ArmingStatus.DISARMED)
print(f"   ✓ Alarm: {controller.alarm_status.description}")

# 5. Camera frames while armed at home
print("\n5. Processing camera frames (armed at home)...")
controller.set_arming_status(ArmingStatus.ARMED_HOME)
for frame in range(3):
    controller.process_image(f"frame-{frame}")
    print(f"   ✓ frame-{frame}: {controller.alarm_status.description}")

# 6. Dump state for the host to persist
print("\n6. Dumping state...")
print(f"   ✓ {store.dump_state()}")

print("\n" + "=" * 60)
print("Example complete!")
print("=" * 60)
