"""Schema definitions shared across fincore."""

from .enums import BootstrapMethod, ErrorKind, Frequency

__all__ = [
    "BootstrapMethod",
    "ErrorKind",
    "Frequency",
]
