"""
Basic smoke tests for smart-house core components.
"""

import pytest

from smart_house import House, Socket, Thermometer, NoSuchRoomError, AlreadyContainsDeviceError


def test_socket_creation():
    """Test basic Socket creation."""
    socket = Socket("Hello")
    assert socket.name == "Hello"
    assert 0.0 <= socket.voltage < 380.0
    assert socket.kind == "socket"


def test_house_creation():
    """Test that a new house is empty."""
    house = House("The Rising Sun")
    assert house.name == "The Rising Sun"
    assert house.rooms() == set()
    assert len(house.sockets) == 0


def test_add_and_list_devices():
    """Test adding devices and listing them by room."""
    house = House("H")
    house.add_device_to_room(Socket("A"), "bedroom")
    house.add_device_to_room(Thermometer("T"), "kitchen")

    assert house.rooms() == {"bedroom", "kitchen"}
    assert house.devices("bedroom") == ["A"]
    assert house.devices("kitchen") == ["T"]
    assert len(house.sockets) == 1
    assert len(house.thermometers) == 1


def test_bedroom_scenario():
    """Test the full add / reject / list / remove-room scenario."""
    house = House("H")

    house.add_device_to_room(Socket("A"), "bedroom")
    house.add_device_to_room(Socket("B"), "bedroom")

    with pytest.raises(AlreadyContainsDeviceError) as exc_info:
        house.add_device_to_room(Socket("A"), "bedroom")
    assert exc_info.value.device_name == "A"

    assert set(house.devices("bedroom")) == {"A", "B"}
    assert house.rooms() == {"bedroom"}

    house.remove_room("bedroom")
    assert house.rooms() == set()

    with pytest.raises(NoSuchRoomError) as exc_info:
        house.devices("bedroom")
    assert exc_info.value.room == "bedroom"


def test_poll_all_keeps_readings_in_range():
    """Test that polling keeps readings inside their domain."""
    house = House("H")
    sockets = [Socket(f"s{i}") for i in range(10)]
    for socket in sockets:
        house.add_device_to_room(socket, "garage")

    before = [s.voltage for s in sockets]
    house.poll_all()
    after = [s.voltage for s in sockets]

    assert all(0.0 <= v < 380.0 for v in after)
    assert before != after


def test_describe_house():
    """Test the text rendering of a house."""
    house = House("The Rising Sun")
    house.add_device_to_room(Socket("Hello"), "bedroom")

    text = str(house)
    assert text.startswith("House «The Rising Sun»:\n")
    assert "bedroom\n" in text
    assert "SOCKET:\n    name: Hello\n" in text
