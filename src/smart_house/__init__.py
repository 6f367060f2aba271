"""
smart-house: An in-memory registry of smart-home devices.

This library provides:
- Rooms holding uniquely named devices
- Device variants that refresh their readings when polled
- Per-type device indices kept in step with room membership
"""

from smart_house.core.config import SocketConfig, ThermometerConfig
from smart_house.core.device import Device, Socket, Thermometer
from smart_house.core.errors import AlreadyContainsDeviceError, HouseError, NoSuchRoomError
from smart_house.core.house import House
from smart_house.core.storage import DeviceStorage

__version__ = "0.1.0"

__all__ = [
    "Device",
    "Socket",
    "Thermometer",
    "DeviceStorage",
    "House",
    "SocketConfig",
    "ThermometerConfig",
    "HouseError",
    "NoSuchRoomError",
    "AlreadyContainsDeviceError",
]
