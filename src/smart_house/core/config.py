"""
Sampling configuration for device variants.

Each variant draws its reading from a half-open range [low, high).
"""

from dataclasses import dataclass
from typing import Tuple


def _check_range(low: float, high: float, label: str) -> None:
    if low >= high:
        raise ValueError(f"Invalid {label} range: {low} must be below {high}")


@dataclass
class SocketConfig:
    """Voltage range for sockets, in volts."""

    version: int = 1
    min_voltage: float = 0.0
    max_voltage: float = 380.0

    def __post_init__(self) -> None:
        _check_range(self.min_voltage, self.max_voltage, "voltage")

    @property
    def sample_range(self) -> Tuple[float, float]:
        return (self.min_voltage, self.max_voltage)

    def to_dict(self) -> dict:
        """Serialize to dict."""
        return {
            "version": self.version,
            "min_voltage": self.min_voltage,
            "max_voltage": self.max_voltage,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "SocketConfig":
        """Deserialize from dict."""
        return cls(
            version=data.get("version", 1),
            min_voltage=data.get("min_voltage", 0.0),
            max_voltage=data.get("max_voltage", 380.0),
        )


@dataclass
class ThermometerConfig:
    """Temperature range for thermometers, in degrees Celsius."""

    version: int = 1
    min_temperature: float = -40.0
    max_temperature: float = 60.0

    def __post_init__(self) -> None:
        _check_range(self.min_temperature, self.max_temperature, "temperature")

    @property
    def sample_range(self) -> Tuple[float, float]:
        return (self.min_temperature, self.max_temperature)

    def to_dict(self) -> dict:
        """Serialize to dict."""
        return {
            "version": self.version,
            "min_temperature": self.min_temperature,
            "max_temperature": self.max_temperature,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "ThermometerConfig":
        """Deserialize from dict."""
        return cls(
            version=data.get("version", 1),
            min_temperature=data.get("min_temperature", -40.0),
            max_temperature=data.get("max_temperature", 60.0),
        )
