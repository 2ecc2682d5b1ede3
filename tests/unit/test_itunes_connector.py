import httpx
import pytest

from tests.helpers import catalog_item, mock_itunes_connector
from tunesearch.services.connectors.base import CatalogRequestFailed


def test_fetch_sends_fixed_query_parameters():
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json={"resultCount": 1, "results": [catalog_item()]})

    items = mock_itunes_connector(handler).fetch("rock & roll")

    assert items == [catalog_item()]
    request = seen[0]
    assert request.method == "GET"
    assert request.url.host == "catalog.test"
    assert request.url.params["term"] == "rock & roll"
    assert request.url.params["limit"] == "30"
    assert request.url.params["country"] == "sa"
    assert b"%26" in request.url.query


def test_non_success_status_raises_with_status():
    connector = mock_itunes_connector(lambda request: httpx.Response(503, text="down"))
    with pytest.raises(CatalogRequestFailed) as excinfo:
        connector.fetch("test")
    assert excinfo.value.status == 503


def test_non_json_body_raises():
    connector = mock_itunes_connector(lambda request: httpx.Response(200, text="<html>oops</html>"))
    with pytest.raises(CatalogRequestFailed) as excinfo:
        connector.fetch("test")
    assert excinfo.value.status == 200
    assert "not JSON" in excinfo.value.reason


@pytest.mark.parametrize("body", [{"resultCount": 0}, {"results": "nope"}, ["not", "an", "object"]])
def test_missing_or_malformed_results_raise(body):
    connector = mock_itunes_connector(lambda request: httpx.Response(200, json=body))
    with pytest.raises(CatalogRequestFailed):
        connector.fetch("test")


def test_timeout_is_a_catalog_failure():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ReadTimeout("timed out", request=request)

    with pytest.raises(CatalogRequestFailed) as excinfo:
        mock_itunes_connector(handler).fetch("test")
    assert excinfo.value.status is None
    assert "timeout" in excinfo.value.reason


def test_transport_error_is_a_catalog_failure():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(CatalogRequestFailed) as excinfo:
        mock_itunes_connector(handler).fetch("test")
    assert excinfo.value.status is None


def test_empty_results_are_returned_as_is():
    connector = mock_itunes_connector(lambda request: httpx.Response(200, json={"resultCount": 0, "results": []}))
    assert connector.fetch("nothing") == []
