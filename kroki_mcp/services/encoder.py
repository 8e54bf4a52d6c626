"""Diagram source encoding for Kroki GET URLs"""
import base64
import zlib

from kroki_mcp.core.exceptions import EncodingException


def encode_content(content: str) -> str:
    """
    Deflate diagram source and encode it as a URL-safe token.

    The token is zlib data at the default compression level, base64 encoded
    with the standard alphabet and then made URL safe by replacing ``+`` with
    ``-`` and ``/`` with ``_``. Padding is kept. This is the decoding
    convention Kroki expects for ``/{type}/{format}/{token}`` URLs.

    Raises:
        EncodingException: if the content cannot be encoded or compressed
    """
    try:
        compressed = zlib.compress(content.encode("utf-8"))
    except (UnicodeEncodeError, zlib.error) as e:
        raise EncodingException(f"failed to encode content: {e}") from e

    encoded = base64.b64encode(compressed).decode("ascii")
    return encoded.replace("+", "-").replace("/", "_")
