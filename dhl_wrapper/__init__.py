"""
API wrapper for DHL's public REST APIs.

APIs supported in this version:
- Location Finder - Unified (LocationFinderApi)
- Shipment Tracking - Unified (ShipmentTrackingApi)
"""

from .api import *  # noqa: F401,F403
from .api import __all__ as _api_all
from .core import *  # noqa: F401,F403
from .core import __all__ as _core_all

__version__ = "0.1.0"

__all__ = list(_api_all) + list(_core_all)
