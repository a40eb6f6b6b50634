import json

import pytest
import respx
from httpx import Response
from monday_client import Client, Configuration

API_URL = "https://api.monday.com/v2"


class MockedApi:
    """Wraps the mocked GraphQL route; query() returns the last query sent."""

    def __init__(self, route):
        self.route = route

    def query(self) -> str:
        return json.loads(self.route.calls.last.request.content)["query"]


@pytest.fixture
def client():
    with Client(Configuration(token="test-token")) as cl:
        yield cl


@pytest.fixture
def api():
    with respx.mock(assert_all_called=False) as mock:
        route = mock.post(API_URL).mock(
            return_value=Response(200, json={"data": {}}, headers={"X-Test": "1"})
        )
        yield MockedApi(route)
