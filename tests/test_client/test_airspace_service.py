"""
Tests for the HTTP client and the viewport refresher.

The requests session is replaced by a mock so no server is needed.
"""

import pytest
import requests
from unittest.mock import Mock

from airspace_explorer.client.service import AirspaceService
from airspace_explorer.client.poller import ViewportPoller
from airspace_explorer.models.bounds import MapBounds
from airspace_explorer.models.shape import AirspaceShape
from airspace_explorer.models.validation import AirspaceNotFoundError


def make_response(status_code=200, payload=None):
    response = Mock()
    response.status_code = status_code
    response.ok = status_code < 400
    response.json.return_value = payload
    if status_code >= 400:
        response.raise_for_status.side_effect = requests.HTTPError(f"{status_code} error")
    else:
        response.raise_for_status.return_value = None
    return response


def listing_payload(shapes, total=None):
    return {
        'success': True,
        'data': [shape.to_dict() for shape in shapes],
        'count': len(shapes),
        'totalAvailable': len(shapes) if total is None else total,
        'bounds': None,
        'timestamp': '2024-01-01T00:00:00.000Z',
    }


@pytest.fixture
def session():
    return Mock(spec=requests.Session)


class TestAirspaceService:

    def test_get_airspaces_without_bounds(self, session, sample_shapes):
        session.get.return_value = make_response(payload=listing_payload(sample_shapes))
        service = AirspaceService('http://example.test/api/', session=session)

        shapes = service.get_airspaces()

        assert shapes == sample_shapes
        session.get.assert_called_once_with(
            'http://example.test/api/airspaces', params=None, timeout=10.0
        )

    def test_get_airspaces_sends_bounds(self, session, sample_shapes):
        session.get.return_value = make_response(payload=listing_payload(sample_shapes[:1], total=6))
        service = AirspaceService('http://example.test/api', session=session)
        bounds = MapBounds(north=45, south=35, east=-70, west=-80)

        result = service.get_airspace_response(bounds)

        assert result['totalAvailable'] == 6
        _, kwargs = session.get.call_args
        assert kwargs['params'] == {'north': 45, 'south': 35, 'east': -70, 'west': -80}

    def test_listing_http_error_propagates(self, session):
        session.get.return_value = make_response(status_code=500)
        service = AirspaceService(session=session)
        with pytest.raises(requests.HTTPError):
            service.get_airspaces()

    def test_get_by_id(self, session, sample_shapes):
        payload = {'success': True, 'data': sample_shapes[2].to_dict(), 'timestamp': 'x'}
        session.get.return_value = make_response(payload=payload)
        service = AirspaceService('http://example.test/api', session=session)

        shape = service.get_airspace_by_id('airspace_3')

        assert isinstance(shape, AirspaceShape)
        assert shape == sample_shapes[2]
        assert session.get.call_args[0][0] == 'http://example.test/api/airspaces/airspace_3'

    def test_get_by_id_not_found(self, session):
        session.get.return_value = make_response(status_code=404)
        service = AirspaceService(session=session)
        with pytest.raises(AirspaceNotFoundError) as exc_info:
            service.get_airspace_by_id('airspace_999')
        assert exc_info.value.airspace_id == 'airspace_999'

    def test_get_by_id_quotes_the_id(self, session, sample_shapes):
        payload = {'success': True, 'data': sample_shapes[0].to_dict(), 'timestamp': 'x'}
        session.get.return_value = make_response(payload=payload)
        service = AirspaceService('http://example.test/api', session=session)

        service.get_airspace_by_id('a/b?c#d')

        assert session.get.call_args[0][0] == 'http://example.test/api/airspaces/a%2Fb%3Fc%23d'

    def test_health(self, session):
        session.get.return_value = make_response(payload={'status': 'healthy'})
        assert AirspaceService(session=session).check_health() is True

    def test_health_connection_error(self, session):
        session.get.side_effect = requests.ConnectionError("refused")
        assert AirspaceService(session=session).check_health() is False


class TestViewportPoller:

    @pytest.fixture
    def service(self, sample_shapes):
        service = Mock(spec=AirspaceService)
        service.get_airspace_response.return_value = listing_payload(sample_shapes[:2], total=6)
        return service

    def test_first_viewport_renders(self, service):
        rendered = []
        poller = ViewportPoller(service, rendered.append)
        bounds = MapBounds(north=60, south=30, east=10, west=-80)

        assert poller.on_viewport_changed(bounds) is True

        service.get_airspace_response.assert_called_once_with(bounds)
        assert len(rendered) == 1
        assert [p['name'] for p in rendered[0]] == ['airspace_1', 'airspace_2']
        assert poller.total_available == 6
        assert poller.last_bounds == bounds

    def test_unchanged_viewport_is_skipped(self, service):
        rendered = []
        poller = ViewportPoller(service, rendered.append)
        bounds = MapBounds(north=60, south=30, east=10, west=-80)

        poller.on_viewport_changed(bounds)
        assert poller.on_viewport_changed(MapBounds(north=60, south=30, east=10, west=-80)) is False

        assert service.get_airspace_response.call_count == 1
        assert len(rendered) == 1

    def test_moved_viewport_refreshes(self, service):
        rendered = []
        poller = ViewportPoller(service, rendered.append)

        poller.on_viewport_changed(MapBounds(north=60, south=30, east=10, west=-80))
        assert poller.on_viewport_changed(MapBounds(north=61, south=31, east=11, west=-79)) is True

        assert service.get_airspace_response.call_count == 2
        assert len(rendered) == 2

    def test_failed_request_keeps_previous_viewport(self, service):
        poller = ViewportPoller(service, lambda primitives: None)
        first = MapBounds(north=60, south=30, east=10, west=-80)
        poller.on_viewport_changed(first)

        service.get_airspace_response.side_effect = requests.ConnectionError("down")
        with pytest.raises(requests.ConnectionError):
            poller.on_viewport_changed(MapBounds(north=10, south=0, east=10, west=0))

        assert poller.last_bounds == first
