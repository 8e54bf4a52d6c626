"""Shared fixtures: a stub Kroki server behind httpx.MockTransport."""
import base64
import zlib

import httpx
import pytest

from kroki_mcp.services.kroki_service import KrokiService

KROKI_TEST_URL = "http://kroki.test"


def decode_token(token: str) -> str:
    """Reverse of encode_content, the way Kroki decodes GET URLs."""
    raw = base64.b64decode(token.replace("-", "+").replace("_", "/"))
    return zlib.decompress(raw).decode("utf-8")


def svg_document(text: str = "ok", width: str = "100px", height: str = "50px") -> bytes:
    return (
        f'<svg xmlns="http://www.w3.org/2000/svg" width="{width}" height="{height}">'
        f"<text>{text}</text></svg>"
    ).encode("utf-8")


class StubKroki:
    """Records requests and answers with a configurable response."""

    def __init__(self, status_code=200, content=b"", headers=None, error=None):
        self.requests = []
        self.status_code = status_code
        self.content = content
        self.headers = headers or {}
        self.error = error

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        return httpx.Response(self.status_code, content=self.content, headers=self.headers)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self)


class EchoKroki(StubKroki):
    """Decodes the diagram source from the URL and echoes it inside an SVG."""

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        _, diagram_type, output_format, token = request.url.path.split("/", 3)
        source = decode_token(token)
        self.decoded = source
        return httpx.Response(
            200,
            content=svg_document(f"{diagram_type}:{output_format}:{len(source)}"),
            headers={"Content-Type": "image/svg+xml"},
        )


@pytest.fixture
def stub_kroki():
    return StubKroki(content=svg_document(), headers={"Content-Type": "image/svg+xml"})


@pytest.fixture
def make_service():
    def _make(stub, **kwargs):
        return KrokiService(base_url=KROKI_TEST_URL, transport=stub.transport, **kwargs)
    return _make
