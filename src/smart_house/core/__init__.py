"""
Core components of the smart-house registry.

This package contains:
- device: Device base class and the Socket/Thermometer variants
- storage: per-type DeviceStorage index
- house: House registry (rooms and their devices)
- config: sampling range configuration
- errors: registry error types
"""

from smart_house.core.config import SocketConfig, ThermometerConfig
from smart_house.core.device import Device, Socket, Thermometer
from smart_house.core.errors import AlreadyContainsDeviceError, HouseError, NoSuchRoomError
from smart_house.core.house import House
from smart_house.core.storage import DeviceStorage

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
