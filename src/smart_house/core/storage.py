"""
Per-type device index.

A DeviceStorage is a flat list of every device of one type registered with
the House, independent of which room it sits in. It does not enforce unique
names; removal is by object identity.
"""

import logging
from typing import Iterator, List, Type

from smart_house.core.device import Device

logger = logging.getLogger(__name__)


class DeviceStorage:
    """Flat collection of devices of a single type."""

    def __init__(self, device_type: Type[Device]) -> None:
        """
        Initialize an empty storage.

        Args:
            device_type: The Device subclass this storage holds
        """
        self.device_type = device_type
        self._devices: List[Device] = []

    @property
    def devices(self) -> List[Device]:
        """Copy of the stored devices, in insertion order."""
        return list(self._devices)

    def add(self, device: Device) -> None:
        """
        Append a device.

        Args:
            device: Device to store (must be an instance of device_type)

        Raises:
            TypeError: If the device is of the wrong type
        """
        if not isinstance(device, self.device_type):
            raise TypeError(
                f"{type(device).__name__} cannot be stored in "
                f"{self.device_type.__name__} storage"
            )
        self._devices.append(device)
        logger.debug(f"Indexed {device.kind} '{device.name}' ({len(self._devices)} total)")

    def remove(self, device: Device) -> int:
        """
        Remove every entry that is this exact device instance.

        Other devices sharing the same name are kept.

        Args:
            device: The device instance to remove

        Returns:
            Number of entries removed
        """
        before = len(self._devices)
        self._devices = [d for d in self._devices if d is not device]
        removed = before - len(self._devices)
        if removed:
            logger.debug(f"Unindexed {device.kind} '{device.name}' ({removed} entries)")
        return removed

    def remove_one(self, device: Device) -> bool:
        """
        Remove a single entry that is this exact device instance.

        Used when one placement of a device goes away while the same
        instance may still be placed elsewhere.

        Args:
            device: The device instance to remove

        Returns:
            True if an entry was removed
        """
        for index, stored in enumerate(self._devices):
            if stored is device:
                del self._devices[index]
                logger.debug(f"Unindexed one entry of {device.kind} '{device.name}'")
                return True
        return False

    def __contains__(self, device: object) -> bool:
        return any(d is device for d in self._devices)

    def __iter__(self) -> Iterator[Device]:
        return iter(list(self._devices))

    def __len__(self) -> int:
        return len(self._devices)
