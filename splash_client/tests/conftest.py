import pytest
import requests


def _make_response(status_code=200, body="", content_type="text/html; charset=utf-8",
                   url="http://localhost:8050/render.html"):
    """Builds a `requests.Response` as if it had been received from Splash."""
    response = requests.Response()
    response.status_code = status_code
    response._content = body.encode("utf-8") if isinstance(body, str) else body
    response.headers["Content-Type"] = content_type
    response.encoding = "utf-8"
    response.url = url
    return response


@pytest.fixture
def make_response():
    """Factory fixture for canned Splash responses."""
    return _make_response
