"""
Consumer side of the airspace query API: an HTTP client, the adapter that
turns records into globe primitives, and a viewport-driven refresher.
"""

from .service import AirspaceService
from .primitives import to_render_primitive
from .poller import ViewportPoller

__all__ = ['AirspaceService', 'to_render_primitive', 'ViewportPoller']
