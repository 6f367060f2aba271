"""
Error types raised by the House registry.

Both errors are precondition failures. They subclass ValueError so callers
that already catch ValueError for "does not exist" / "already exists"
conditions keep working.
"""


class HouseError(ValueError):
    """Base class for registry errors."""


class NoSuchRoomError(HouseError):
    """
    Raised when a room is looked up that has no devices.

    Attributes:
        room: The room name that was requested
    """

    def __init__(self, room: str) -> None:
        super().__init__(f"The room {room} does not exist")
        self.room = room


class AlreadyContainsDeviceError(HouseError):
    """
    Raised when a room already holds a device with the same name.

    Attributes:
        device_name: Name of the rejected device
    """

    def __init__(self, device_name: str) -> None:
        super().__init__(f"The room already contains this device: {device_name}")
        self.device_name = device_name
