import httpx
import pytest
from monday_client.errors import ResponseParseError
from monday_client.response import Response


def test_from_raw_parses_status_body_headers():
    resp = Response.from_raw(200, '{"data": "Success data"}', {"x-request-id": "abc"})
    assert resp.status == 200
    assert resp.body == {"data": "Success data"}
    assert resp.headers == {"x-request-id": "abc"}


def test_success_with_data():
    assert Response.from_raw(200, '{"data": {"boards": []}}').success is True


def test_errors_payload_is_not_success_despite_200():
    assert Response.from_raw(200, '{"errors": [{"message": "bad"}]}').success is False


def test_error_message_payload_is_not_success():
    assert Response.from_raw(200, '{"error_message": "Error message"}').success is False


def test_non_2xx_is_not_success():
    assert Response.from_raw(500, '{"data": "success"}').success is False


def test_invalid_json_raises_at_construction():
    with pytest.raises(ResponseParseError) as exc:
        Response.from_raw(200, "<html>Not JSON</html>")

    assert "Expected JSON" in str(exc.value)
    assert exc.value.code == 200


def test_response_is_immutable():
    resp = Response.from_raw(200, "{}")
    with pytest.raises(AttributeError):
        resp.status = 500  # type: ignore[misc]


def test_from_httpx():
    raw = httpx.Response(200, json={"data": {"me": {"id": "1"}}}, headers={"X-Test": "1"})
    resp = Response.from_httpx(raw)
    assert resp.dig("data", "me", "id") == "1"
    assert resp.headers["x-test"] == "1"


def test_dig_handles_lists_and_missing_keys():
    resp = Response(status=200, body={"data": {"boards": [{"id": "1"}]}})
    assert resp.dig("data", "boards", 0, "id") == "1"
    assert resp.dig("data", "boards", 5, "id") is None
    assert resp.dig("data", "missing", "id") is None


def test_error_code_sources():
    assert Response(status=200, body={"error_code": "ComplexityException"}).error_code == (
        "ComplexityException"
    )
    ext = {"errors": [{"extensions": {"error_code": "InvalidColumnIdException"}}]}
    assert Response(status=200, body=ext).error_code == "InvalidColumnIdException"
    assert Response(status=200, body={"data": {}}).error_code is None
