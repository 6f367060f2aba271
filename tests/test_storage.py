"""
Tests for the per-type DeviceStorage index.
"""

import pytest

from smart_house import DeviceStorage, Socket, Thermometer


@pytest.fixture
def storage():
    """Empty socket storage."""
    return DeviceStorage(Socket)


def test_add_allows_duplicate_names(storage):
    """Storage does not enforce unique names."""
    first = Socket("A")
    second = Socket("A")

    storage.add(first)
    storage.add(second)

    assert len(storage) == 2
    assert first in storage
    assert second in storage


def test_remove_is_by_identity(storage):
    """Removing one device leaves a same-named device in place."""
    first = Socket("A")
    second = Socket("A")
    storage.add(first)
    storage.add(second)

    removed = storage.remove(first)

    assert removed == 1
    assert first not in storage
    assert second in storage
    assert storage.devices == [second]


def test_remove_drops_every_reference(storage):
    """A device added twice is removed completely."""
    socket = Socket("A")
    storage.add(socket)
    storage.add(socket)

    assert storage.remove(socket) == 2
    assert len(storage) == 0


def test_remove_missing_is_noop(storage):
    """Removing an unknown device returns zero."""
    storage.add(Socket("A"))
    assert storage.remove(Socket("A")) == 0
    assert len(storage) == 1


def test_wrong_type_rejected(storage):
    """A storage only accepts its own device type."""
    with pytest.raises(TypeError):
        storage.add(Thermometer("T"))


def test_devices_is_a_copy(storage):
    """Mutating the returned list does not touch the storage."""
    storage.add(Socket("A"))
    storage.devices.clear()
    assert len(storage) == 1


def test_shared_state_visible(storage):
    """Polling through one holder is visible through the storage."""
    socket = Socket("A")
    storage.add(socket)
    holder = {"A": socket}

    holder["A"].poll()

    assert list(storage)[0].voltage == socket.voltage


def test_remove_one_drops_single_reference(storage):
    """remove_one drops one placement of a device added twice."""
    socket = Socket("A")
    storage.add(socket)
    storage.add(socket)

    assert storage.remove_one(socket) is True
    assert len(storage) == 1
    assert socket in storage

    assert storage.remove_one(socket) is True
    assert storage.remove_one(socket) is False
    assert len(storage) == 0
