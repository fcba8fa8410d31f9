"""Point and bounds value types for Leaflet map components."""

from leaflet_interop.geometry import Bounds, Point

__version__ = "0.1.0"
__all__ = ["Point", "Bounds"]
