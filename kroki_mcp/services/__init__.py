"""Business logic services"""
from kroki_mcp.services.kroki_service import KrokiService
from kroki_mcp.services.storage import StorageService
from kroki_mcp.services.response_classifier import ResponseClassifier, RegexResponseClassifier
from kroki_mcp.services.encoder import encode_content
from kroki_mcp.services.svg_scaler import scale_svg

__all__ = [
    "KrokiService",
    "StorageService",
    "ResponseClassifier",
    "RegexResponseClassifier",
    "encode_content",
    "scale_svg",
]
