"""
House registry.

The House owns the room -> device mapping. It does not own device behavior:
devices refresh their own readings when polled.
"""

from typing import Dict, List, Optional, Set, Type
import logging

from smart_house.core.device import Device, Socket, Thermometer
from smart_house.core.errors import AlreadyContainsDeviceError, NoSuchRoomError
from smart_house.core.storage import DeviceStorage

logger = logging.getLogger(__name__)


class House:
    """
    Registry of devices organized by room.

    Responsibilities:
    - Store the room -> device-name -> device mapping
    - Keep one DeviceStorage per device type in step with room membership
    - Enforce unique device names within a room
    - Poll and describe every registered device

    A room exists only while it holds at least one device. Rooms are created
    by the first add and disappear when removed or emptied.
    """

    def __init__(self, name: str) -> None:
        """
        Initialize an empty house.

        Args:
            name: Display name of the house
        """
        self._name = name
        self.device_by_room: Dict[str, Dict[str, Device]] = {}
        self._storages: Dict[Type[Device], DeviceStorage] = {
            Socket: DeviceStorage(Socket),
            Thermometer: DeviceStorage(Thermometer),
        }

    @property
    def name(self) -> str:
        """Display name of the house."""
        return self._name

    @property
    def sockets(self) -> DeviceStorage:
        """Storage holding every registered Socket."""
        return self._storages[Socket]

    @property
    def thermometers(self) -> DeviceStorage:
        """Storage holding every registered Thermometer."""
        return self._storages[Thermometer]

    def storage_for(self, device_type: Type[Device]) -> DeviceStorage:
        """
        Get the storage for a device type, creating it on first use.

        Args:
            device_type: A Device subclass

        Returns:
            The DeviceStorage for that type
        """
        storage = self._storages.get(device_type)
        if storage is None:
            storage = DeviceStorage(device_type)
            self._storages[device_type] = storage
            logger.debug(f"Created storage for {device_type.__name__}")
        return storage

    def rooms(self) -> Set[str]:
        """
        Get the names of all rooms that hold devices.

        Returns:
            Set of room names
        """
        return set(self.device_by_room)

    def devices(self, room: str) -> List[str]:
        """
        Get the names of the devices in a room.

        Args:
            room: The room name

        Returns:
            Device names in insertion order

        Raises:
            NoSuchRoomError: If the room holds no devices
        """
        devices_in_room = self.device_by_room.get(room)
        if devices_in_room is None:
            raise NoSuchRoomError(room)
        return list(devices_in_room)

    def get_device(self, room: str, name: str) -> Optional[Device]:
        """
        Get a device by room and name.

        Args:
            room: The room name
            name: The device name

        Returns:
            The Device or None if not found
        """
        return self.device_by_room.get(room, {}).get(name)

    def all_devices(self) -> List[Device]:
        """
        Get every device placed in a room.

        Returns:
            List of devices, grouped by room
        """
        return [
            device
            for devices_in_room in self.device_by_room.values()
            for device in devices_in_room.values()
        ]

    def add_device_to_room(self, device: Device, room: str) -> None:
        """
        Place a device in a room, creating the room if needed.

        Args:
            device: The device to add
            room: The room name

        Raises:
            AlreadyContainsDeviceError: If the room already has a device with
                this name. The house is left unchanged.
        """
        # Validate before mutating
        existing = self.device_by_room.get(room, {})
        if device.name in existing:
            logger.warning(f"Room '{room}' already contains device '{device.name}'")
            raise AlreadyContainsDeviceError(device.name)

        if room not in self.device_by_room:
            self.device_by_room[room] = {}
            logger.info(f"Created room: {room}")

        self.device_by_room[room][device.name] = device
        self.storage_for(type(device)).add(device)
        logger.info(f"Added {device.kind} '{device.name}' to room '{room}'")

    def remove_room(self, room: str) -> None:
        """
        Remove a room and unindex its devices.

        Only the index entry for this room's placement is dropped; a device
        instance also placed in another room stays indexed for that room.

        If the room doesn't exist, this is a no-op.

        Args:
            room: The room name
        """
        devices_in_room = self.device_by_room.pop(room, None)
        if devices_in_room is None:
            return

        for device in devices_in_room.values():
            storage = self._storages.get(type(device))
            if storage is not None:
                storage.remove_one(device)
        logger.info(f"Removed room: {room} ({len(devices_in_room)} devices)")

    def remove_device_from_room(self, room: str, device: Device) -> None:
        """
        Remove a device from a room.

        The room entry is matched by name. The device is always dropped from
        its type's storage by identity, so another device with the same name
        elsewhere stays indexed. A room left empty is removed.

        If the room holds a different instance under the same name, that
        instance leaves the room but keeps its storage entry, while the passed
        instance is unindexed.

        If the room or device doesn't exist, this is a no-op.

        Args:
            room: The room name
            device: The device instance to remove
        """
        devices_in_room = self.device_by_room.get(room)
        if devices_in_room is not None and device.name in devices_in_room:
            del devices_in_room[device.name]
            logger.info(f"Removed {device.kind} '{device.name}' from room '{room}'")
            if not devices_in_room:
                del self.device_by_room[room]
                logger.info(f"Removed empty room: {room}")

        self._unindex(device)

    def poll_all(self) -> None:
        """Poll every device in every room."""
        count = 0
        for devices_in_room in self.device_by_room.values():
            for device in devices_in_room.values():
                device.poll()
                count += 1
        logger.debug(f"Polled {count} devices in house '{self._name}'")

    def describe(self) -> str:
        """
        Render the house, its rooms and their devices.

        Rooms and devices are listed in name order.

        Returns:
            Multi-line text
        """
        lines = [f"House «{self._name}»:\n"]
        for room in sorted(self.device_by_room):
            lines.append(f"{room}\n")
            devices_in_room = self.device_by_room[room]
            for name in sorted(devices_in_room):
                lines.append(devices_in_room[name].describe())
        return "".join(lines)

    # Aliases for socket-specific callers

    def add_socket_to_room(self, socket: Socket, room: str) -> None:
        """Add a socket to a room. See add_device_to_room."""
        self.add_device_to_room(socket, room)

    def remove_socket_from_room(self, room: str, socket: Socket) -> None:
        """Remove a socket from a room. See remove_device_from_room."""
        self.remove_device_from_room(room, socket)

    def poll(self) -> None:
        """Poll every device. See poll_all."""
        self.poll_all()

    def _unindex(self, device: Device) -> None:
        storage = self._storages.get(type(device))
        if storage is not None:
            storage.remove(device)

    def __str__(self) -> str:
        return self.describe()
