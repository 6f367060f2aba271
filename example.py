#!/usr/bin/env python3
"""
Quick example demonstrating smart-house basic usage.

Run with: PYTHONPATH=src python3 example.py
"""

import logging

from smart_house import House, Socket, Thermometer, AlreadyContainsDeviceError, NoSuchRoomError

logging.basicConfig(level=logging.INFO, format="%(name)s - %(levelname)s - %(message)s")

print("=" * 60)
print("smart-house Example")
print("=" * 60)

# 1. A single device
print("\n1. Creating a socket...")
socket = Socket("Hello")
print(socket)

# 2. Furnish the house
print("2. Furnishing the house...")
house = House("The Rising Sun")
house.add_device_to_room(socket, "bedroom")
house.add_device_to_room(Socket("My other socket"), "bedroom")
house.add_device_to_room(Thermometer("Window"), "kitchen")
print(f"   ✓ Rooms: {sorted(house.rooms())}")

# 3. Duplicate names are rejected
print("\n3. Adding a second 'Hello' to the bedroom...")
try:
    house.add_device_to_room(Socket("Hello"), "bedroom")
except AlreadyContainsDeviceError as e:
    print(f"   ✓ Rejected: {e}")
print(house)

# 4. Poll
print("4. Polling every device...")
house.poll_all()
print(house)

# 5. Queries
print("5. Querying...")
print(f"   ✓ Devices in bedroom: {house.devices('bedroom')}")
print(f"   ✓ Sockets indexed: {len(house.sockets)}")

# 6. Removal
print("\n6. Removing the bedroom...")
house.remove_room("bedroom")
try:
    house.devices("bedroom")
except NoSuchRoomError as e:
    print(f"   ✓ {e}")
print(f"   ✓ Rooms left: {sorted(house.rooms())}")

print("\n" + "=" * 60)
print("Example complete!")
print("=" * 60)
