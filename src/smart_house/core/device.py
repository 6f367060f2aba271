"""
Device base class and concrete device variants.

A Device has an immutable name and a single numeric reading that is
re-sampled every time it is polled. The same Device instance can be held by
several collections (a room in the House and the per-type DeviceStorage);
polling mutates it in place, so every holder sees the new reading.
"""

import logging
import random
from abc import ABC, abstractmethod
from typing import Dict, Optional, Tuple

from smart_house.core.config import SocketConfig, ThermometerConfig

logger = logging.getLogger(__name__)


class Device(ABC):
    """
    Base class for devices.

    Subclasses provide:
    - kind: short type label used in descriptions and snapshots
    - sample_range: the half-open [low, high) range the reading is drawn from
    - describe(): multi-line text snapshot
    """

    kind: str = "device"
    unit: str = ""

    def __init__(self, name: str, rng: Optional[random.Random] = None) -> None:
        """
        Initialize a device and take its first reading.

        Args:
            name: Identity of the device, unique within a room
            rng: Optional random source (defaults to a fresh random.Random)
        """
        self._name = name
        self._rng = rng if rng is not None else random.Random()
        self._reading = self._sample()

    @property
    def name(self) -> str:
        """Immutable identity of the device."""
        return self._name

    @property
    def reading(self) -> float:
        """Current numeric reading."""
        return self._reading

    @property
    @abstractmethod
    def sample_range(self) -> Tuple[float, float]:
        """The [low, high) range readings are drawn from."""
        pass

    @abstractmethod
    def describe(self) -> str:
        """
        Render the device's identity and current reading.

        Returns:
            Multi-line text ending with a newline
        """
        pass

    def poll(self) -> None:
        """Replace the reading with a freshly sampled value."""
        self._reading = self._sample()
        logger.debug(f"Polled {self.kind} '{self._name}': {self._reading:.2f}{self.unit}")

    def to_dict(self) -> Dict:
        """Serialize the current snapshot to dict."""
        return {"kind": self.kind, "name": self._name, "reading": self._reading}

    def _sample(self) -> float:
        low, high = self.sample_range
        value = low + self._rng.random() * (high - low)
        # Float rounding can land exactly on the upper bound
        if value >= high:
            value = low
        return value

    def __str__(self) -> str:
        return self.describe()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self._name!r}, reading={self._reading:.2f})"


class Socket(Device):
    """A powered socket reporting its voltage."""

    kind = "socket"
    unit = "V"

    def __init__(
        self,
        name: str,
        config: Optional[SocketConfig] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        """
        Initialize a socket.

        Args:
            name: Socket name
            config: Voltage range (defaults to [0.0, 380.0) volts)
            rng: Optional random source
        """
        self.config = config or SocketConfig()
        super().__init__(name, rng=rng)

    @property
    def sample_range(self) -> Tuple[float, float]:
        return self.config.sample_range

    @property
    def voltage(self) -> float:
        """Current voltage in volts."""
        return self._reading

    def describe(self) -> str:
        return f"SOCKET:\n    name: {self.name}\n    voltage: {self.voltage:.2f}\n"

    def to_dict(self) -> Dict:
        return {"kind": self.kind, "name": self.name, "voltage": self.voltage}


class Thermometer(Device):
    """A temperature sensor reporting degrees Celsius."""

    kind = "thermometer"
    unit = "°C"

    def __init__(
        self,
        name: str,
        config: Optional[ThermometerConfig] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.config = config or ThermometerConfig()
        super().__init__(name, rng=rng)

    @property
    def sample_range(self) -> Tuple[float, float]:
        return self.config.sample_range

    @property
    def temperature(self) -> float:
        """Current temperature in degrees Celsius."""
        return self._reading

    def describe(self) -> str:
        return (
            f"THERMOMETER:\n    name: {self.name}\n    temperature: {self.temperature:.2f}\n"
        )

    def to_dict(self) -> Dict:
        return {"kind": self.kind, "name": self.name, "temperature": self.temperature}
