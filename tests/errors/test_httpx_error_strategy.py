"""
🧪 test_httpx_error_strategy.py: unit-тести для HttpxErrorStrategy / convert_error

Перевіряє:
- Статус поза 2xx → ProtocolError з фіксованим повідомленням
- Відсутність відповіді → TransportError з описом першопричини
- Невідомі винятки не конвертуються
"""

import httpx
import pytest

from catalog_admin.errors import (
    ErrorKind,
    HttpxErrorStrategy,
    ProtocolError,
    TransportError,
    ValidationError,
    convert_error,
)

STRATEGIES = [HttpxErrorStrategy()]


def _status_error(status):
    request = httpx.Request("GET", "http://store.test/products")
    response = httpx.Response(status, request=request)
    return httpx.HTTPStatusError("bad status", request=request, response=response)


@pytest.mark.parametrize("status", [400, 404, 500])
def test_status_error_becomes_protocol_error(status):
    converted = convert_error(_status_error(status), STRATEGIES)

    assert isinstance(converted, ProtocolError)
    assert converted.kind is ErrorKind.PROTOCOL
    assert converted.status_code == status
    assert converted.message == f"HTTP error! status: {status}"
    assert converted.url == "http://store.test/products"


def test_request_error_becomes_transport_error():
    request = httpx.Request("GET", "http://store.test/products")
    converted = convert_error(httpx.ConnectError("Connection refused", request=request), STRATEGIES)

    assert isinstance(converted, TransportError)
    assert converted.message == "Connection refused"
    assert converted.to_log_extra()["url"] == "http://store.test/products"


def test_request_error_without_description_uses_type_name():
    converted = convert_error(httpx.ReadTimeout(""), STRATEGIES)

    assert isinstance(converted, TransportError)
    assert converted.message == "ReadTimeout"
    assert converted.url == "N/A"


def test_catalog_errors_pass_through_and_unknown_errors_are_ignored():
    original = ValidationError("price", "Price must be greater than 0")

    assert convert_error(original, STRATEGIES) is original
    assert convert_error(RuntimeError("boom"), STRATEGIES) is None
