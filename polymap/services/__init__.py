"""Services module."""
from polymap.services.map_driver import MapDriver

__all__ = [
    "MapDriver",
]
