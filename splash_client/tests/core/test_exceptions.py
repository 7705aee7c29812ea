import requests

from splash_client.core.exceptions import (
    ComponentError,
    DecodeError,
    ParameterError,
    RemoteError,
    SplashClientError,
    TransportError,
)


def test_base_error_string_includes_class_name():
    err = SplashClientError("something broke")
    assert err.message == "something broke"
    assert str(err) == "SplashClientError: something broke"


def test_component_errors_name_their_component():
    assert ParameterError("bad").component_name == "ParameterBuilder"
    assert TransportError("down").component_name == "Transport"
    assert DecodeError("garbled", status_code=200, body="<html>").component_name == "ResponseDecoder"
    assert "Error in component 'Transport': down" in str(TransportError("down"))
    assert isinstance(TransportError("down"), ComponentError)


def test_transport_error_keeps_original_exception():
    original = requests.ConnectionError("Connection refused")
    err = TransportError("GET request failed", original_exception=original)
    assert err.original_exception is original
    assert "Connection refused" in str(err)


def test_remote_error_reads_kind_and_description_from_payload():
    payload = {"error": 400, "type": "BadOption", "description": "Incorrect HTTP API arguments", "info": {"argument": "url"}}
    err = RemoteError(400, '{"error": 400}', payload)

    assert err.status_code == 400
    assert err.kind == "BadOption"
    assert err.description == "Incorrect HTTP API arguments"
    assert "HTTP 400: BadOption - Incorrect HTTP API arguments" in str(err)


def test_remote_error_falls_back_to_error_key():
    err = RemoteError(504, "{}", {"error": 504, "description": "Timeout exceeded rendering page"})
    assert err.kind == "504"


def test_remote_error_without_json_payload():
    err = RemoteError(502, "Bad Gateway")
    assert err.payload is None
    assert err.kind is None
    assert err.description is None
    assert "HTTP 502: Bad Gateway" in str(err)


def test_remote_error_with_non_dict_payload():
    err = RemoteError(500, "[1, 2]", [1, 2])
    assert err.kind is None
    assert err.description is None
