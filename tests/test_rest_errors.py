import pytest

from lnm_sdk.rest_errors import (
    ErrorResponseError,
    HttpClientError,
    InvalidHeaderValueError,
    MissingRequestCredentialsError,
    RequestJsonSerializeError,
    ResponseJsonDeserializeError,
    RestApiError,
    SendFailedError,
    UnsupportedMethodError,
    UrlParseError,
)


def test_url_parse_message():
    err = UrlParseError("empty host")
    assert str(err) == "Url parse error: empty host"
    assert err.message == "empty host"


def test_missing_credentials_message():
    assert str(MissingRequestCredentialsError()) == (
        "Authentication required for request but no credentials provided"
    )


def test_unsupported_method_message():
    err = UnsupportedMethodError("PATCH")
    assert str(err) == "Tried to make a request with unsupported method: PATCH"
    assert err.method == "PATCH"


def test_error_response_keeps_status_and_text():
    err = ErrorResponseError(404, "missing")
    assert err.status == 404
    assert err.text == "missing"
    assert str(err) == "Received error response. Status: 404 Not Found, text: missing"


def test_error_response_unknown_status():
    err = ErrorResponseError(599, "odd")
    assert str(err).endswith("Status: 599, text: odd")


def test_json_deserialize_message_holds_raw_response():
    err = ResponseJsonDeserializeError("not json", "bad value")
    assert err.raw_response == "not json"
    assert "Raw response: 'not json'" in str(err)
    assert str(err).endswith("error: bad value")


def test_json_serialize_message():
    err = RequestJsonSerializeError("unsupported")
    assert str(err) == "Request JSON serialization failed. Error: unsupported"


def test_sources_are_kept():
    source = OSError("down")
    assert SendFailedError(source).source is source
    assert HttpClientError(source).source is source
    assert InvalidHeaderValueError("failed").source == "failed"


@pytest.mark.parametrize(
    "err, message",
    [
        (UrlParseError("x"), "Url parse error: x"),
        (
            MissingRequestCredentialsError(),
            "Authentication required for request but no credentials provided",
        ),
        (
            UnsupportedMethodError("PATCH"),
            "Tried to make a request with unsupported method: PATCH",
        ),
        (SendFailedError("x"), "Failed to send request error: x"),
        (
            ErrorResponseError(500, "x"),
            "Received error response. Status: 500 Internal Server Error, text: x",
        ),
        (
            ResponseJsonDeserializeError("x", "y"),
            "Response JSON deserialization failed. Raw response: 'x', error: y",
        ),
        (RequestJsonSerializeError("x"), "Request JSON serialization failed. Error: x"),
    ],
)
def test_all_are_rest_api_errors(err, message):
    with pytest.raises(RestApiError) as info:
        raise err
    assert info.value is err
    assert str(info.value) == message