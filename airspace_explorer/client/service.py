import logging
from typing import Any, Dict, List, Optional

import requests
from requests.utils import quote

from ..models.bounds import MapBounds
from ..models.shape import AirspaceShape
from ..models.validation import AirspaceNotFoundError

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "http://localhost:3001/api"


class AirspaceService:
    """Client for the airspace query API."""

    def __init__(self, base_url: str = DEFAULT_BASE_URL, timeout: float = 10.0,
                 session: Optional[requests.Session] = None):
        """
        Initialize the client.

        Args:
            base_url: API root, e.g. http://localhost:3001/api
            timeout: Request timeout in seconds
            session: Optional requests session to reuse connections
        """
        self.base_url = base_url.rstrip('/')
        self.timeout = timeout
        self.session = session or requests.Session()

    def get_airspace_response(self, bounds: Optional[MapBounds] = None) -> Dict[str, Any]:
        """
        Fetch the raw listing envelope.

        Args:
            bounds: Optional viewport; None requests the full dataset

        Returns:
            Response JSON with data, count, totalAvailable, bounds and timestamp
        """
        url = f"{self.base_url}/airspaces"
        params = bounds.to_dict() if bounds else None
        try:
            response = self.session.get(url, params=params, timeout=self.timeout)
            response.raise_for_status()
            return response.json()
        except requests.RequestException as e:
            logger.error(f"Error fetching airspaces: {e}")
            raise

    def get_airspaces(self, bounds: Optional[MapBounds] = None) -> List[AirspaceShape]:
        """Fetch the airspaces inside ``bounds`` as domain objects."""
        result = self.get_airspace_response(bounds)
        return [AirspaceShape.from_dict(item) for item in result.get('data', [])]

    def get_airspace_by_id(self, airspace_id: str) -> AirspaceShape:
        """
        Fetch a single airspace.

        Raises:
            AirspaceNotFoundError: If the server reports no such airspace
            requests.RequestException: On any other HTTP or transport failure
        """
        url = f"{self.base_url}/airspaces/{quote(airspace_id, safe='')}"
        try:
            response = self.session.get(url, timeout=self.timeout)
            if response.status_code == 404:
                raise AirspaceNotFoundError(airspace_id)
            response.raise_for_status()
            return AirspaceShape.from_dict(response.json()['data'])
        except requests.RequestException as e:
            logger.error(f"Error fetching airspace {airspace_id}: {e}")
            raise

    def check_health(self) -> bool:
        """Return True when the server answers its health check."""
        try:
            response = self.session.get(f"{self.base_url}/health", timeout=self.timeout)
            return response.ok
        except requests.RequestException as e:
            logger.error(f"Health check failed: {e}")
            return False
