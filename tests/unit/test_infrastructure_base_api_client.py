"""Tests for packpin/infrastructure/base_api_client.py.

Verifies the BaseApiClient builds requests, parses response envelopes and
unwraps bodies correctly for all Packpin endpoint clients.

Reference:
    - packpin/infrastructure/base_api_client.py
"""

from unittest.mock import MagicMock

import httpx
import pytest

from packpin.core.constants import REQUEST_TIMEOUT_DEFAULT, RESPONSE_BODY_MAX_LENGTH
from packpin.core.enums import ErrorCode, HttpMethod
from packpin.core.result import Failure, Success
from packpin.domain.errors import ApiStatusError, ParseResponseError, UnhandledError
from packpin.infrastructure.base_api_client import BaseApiClient, resolve_timeout


def make_response(*, json_data=None, json_error: Exception | None = None, text: str = ""):
    response = MagicMock(spec=httpx.Response)
    response.status_code = 200
    response.text = text
    if json_error is not None:
        response.json.side_effect = json_error
    else:
        response.json.return_value = json_data
    return response


@pytest.fixture
def api() -> BaseApiClient:
    return BaseApiClient(api_key="pk_test", base_url="https://api.test.com/v2")


class TestBaseApiClientInit:
    """Tests for BaseApiClient initialization."""

    def test_strips_trailing_slash_from_base_url(self) -> None:
        client = BaseApiClient(api_key="k", base_url="https://api.test.com/v2/")
        assert client.base_url == "https://api.test.com/v2"

    def test_uses_default_timeout(self) -> None:
        client = BaseApiClient(api_key="k", base_url="https://api.test.com")
        assert client.timeout == REQUEST_TIMEOUT_DEFAULT

    def test_uses_custom_timeout(self) -> None:
        client = BaseApiClient(api_key="k", base_url="https://api.test.com", timeout=5)
        assert client.timeout == 5.0

    @pytest.mark.parametrize("api_key", ["", None])
    def test_rejects_missing_api_key(self, api_key) -> None:
        with pytest.raises(ValueError, match="API key is required"):
            BaseApiClient(api_key=api_key, base_url="https://api.test.com")


class TestResolveTimeout:
    @pytest.mark.parametrize("value", [None, 0, -5, "10", True, float("nan")])
    def test_invalid_values_fall_back_to_default(self, value) -> None:
        assert resolve_timeout(value) == REQUEST_TIMEOUT_DEFAULT

    @pytest.mark.parametrize(("value", "expected"), [(1, 1.0), (2.5, 2.5)])
    def test_positive_numbers_are_kept(self, value, expected) -> None:
        assert resolve_timeout(value) == expected


class TestBuildRequest:
    def test_prefixes_missing_slash(self, api: BaseApiClient) -> None:
        assert api._build_url("carriers") == "https://api.test.com/v2/carriers"

    def test_keeps_existing_slash(self, api: BaseApiClient) -> None:
        assert api._build_url("/trackings") == "https://api.test.com/v2/trackings"

    def test_headers_carry_api_key_and_json_type(self, api: BaseApiClient) -> None:
        headers = api._build_headers()

        assert headers["Packpin-Api-Key"] == "pk_test"
        assert headers["Content-Type"] == "application/json"
        assert headers["Accept"] == "application/json"


class TestExecuteRequestEncoding:
    """Requests that fail before reaching the transport."""

    async def test_unserializable_json_body(self, api: BaseApiClient) -> None:
        result = await api._execute_request(
            method=HttpMethod.POST,
            path="/trackings",
            json_data={"when": object()},
            operation="test_op",
        )

        assert isinstance(result, Failure)
        assert isinstance(result.error, UnhandledError)
        assert result.error.code == ErrorCode.UNHANDLED_ERROR

    async def test_invalid_base_url_port(self) -> None:
        api = BaseApiClient(api_key="pk_test", base_url="https://api.test.com:notaport/v2")

        result = await api._execute_request(
            method=HttpMethod.GET,
            path="/carriers",
            operation="test_op",
        )

        assert isinstance(result, Failure)
        assert isinstance(result.error, UnhandledError)
        assert result.error.message.startswith("Could not encode request")


class TestParseEnvelope:
    """Tests for _parse_envelope method."""

    def test_returns_envelope_for_valid_json(self, api: BaseApiClient) -> None:
        response = make_response(json_data={"statusCode": 200, "body": {"id": 1}})

        result = api._parse_envelope(response, "test_op")

        assert isinstance(result, Success)
        assert result.value == {"statusCode": 200, "body": {"id": 1}}

    def test_invalid_json(self, api: BaseApiClient) -> None:
        response = make_response(json_error=ValueError("Expecting value"), text="<html>")

        result = api._parse_envelope(response, "test_op")

        assert isinstance(result, Failure)
        assert isinstance(result.error, ParseResponseError)
        assert result.error.code == ErrorCode.PARSE_RESPONSE_ERROR
        assert result.error.message == "Could not parse response."
        assert result.error.response_body == "<html>"

    def test_truncates_response_body(self, api: BaseApiClient) -> None:
        response = make_response(json_error=ValueError("bad"), text="x" * 2000)

        result = api._parse_envelope(response, "test_op")

        assert isinstance(result, Failure)
        assert len(result.error.response_body) == RESPONSE_BODY_MAX_LENGTH

    @pytest.mark.parametrize(
        "payload",
        [
            [{"statusCode": 200}],
            "ok",
            None,
            {"body": {"id": 1}},
            {"statusCode": 0, "body": {}},
            {"statusCode": None},
        ],
    )
    def test_rejects_non_envelopes(self, api: BaseApiClient, payload) -> None:
        response = make_response(json_data=payload)

        result = api._parse_envelope(response, "test_op")

        assert isinstance(result, Failure)
        assert isinstance(result.error, ParseResponseError)


class TestUnwrap:
    """Tests for _unwrap method."""

    def test_returns_body_on_expected_status(self, api: BaseApiClient) -> None:
        result = api._unwrap(
            {"statusCode": 201, "body": {"code": "1Z"}},
            expected_status=201,
            operation="test_op",
        )

        assert isinstance(result, Success)
        assert result.value == {"code": "1Z"}

    def test_empty_list_body_is_a_body(self, api: BaseApiClient) -> None:
        result = api._unwrap(
            {"statusCode": 200, "body": []}, expected_status=200, operation="test_op"
        )

        assert isinstance(result, Success)
        assert result.value == []

    def test_empty_object_body_is_a_body(self, api: BaseApiClient) -> None:
        result = api._unwrap(
            {"statusCode": 200, "body": {}}, expected_status=200, operation="test_op"
        )

        assert isinstance(result, Success)
        assert result.value == {}

    def test_status_mismatch_keeps_status_and_body(self, api: BaseApiClient) -> None:
        result = api._unwrap(
            {"statusCode": 404, "body": {"message": "Not found"}},
            expected_status=200,
            operation="test_op",
        )

        assert isinstance(result, Failure)
        assert isinstance(result.error, ApiStatusError)
        assert result.error.status_code == 404
        assert result.error.body == {"message": "Not found"}
        assert result.error.code == ErrorCode.RESPONSE_ERROR

    @pytest.mark.parametrize(
        "envelope",
        [
            {"statusCode": 200},
            {"statusCode": 200, "body": None},
            {"statusCode": 200, "body": ""},
            {"statusCode": 200, "body": 0},
            {"statusCode": 200, "body": False},
        ],
    )
    def test_missing_body_is_an_error(self, api: BaseApiClient, envelope) -> None:
        result = api._unwrap(envelope, expected_status=200, operation="test_op")

        assert isinstance(result, Failure)
        assert isinstance(result.error, ApiStatusError)
        assert result.error.status_code == 200
        assert result.error.body is None

    def test_missing_body_allowed_when_requested(self, api: BaseApiClient) -> None:
        result = api._unwrap(
            {"statusCode": 204},
            expected_status=204,
            operation="test_op",
            allow_empty_body=True,
        )

        assert isinstance(result, Success)
        assert result.value is None
