"""Kroki diagram service facade"""
from pathlib import Path
from typing import Optional

import httpx

from kroki_mcp.core.config import get_settings
from kroki_mcp.core.exceptions import (
    InvalidDiagramTypeException,
    InvalidOutputFormatException,
    TransportException,
)
from kroki_mcp.core.logging_config import get_logger
from kroki_mcp.schemas.diagram import (
    DEFAULT_OUTPUT_FORMAT,
    VALID_DIAGRAM_TYPES,
    VALID_OUTPUT_FORMATS,
    DiagramRequest,
    DownloadDiagramInput,
    RenderedBytes,
    RenderedUrl,
    RenderResult,
)
from kroki_mcp.services.encoder import encode_content
from kroki_mcp.services.response_classifier import RegexResponseClassifier, ResponseClassifier
from kroki_mcp.services.storage import StorageService
from kroki_mcp.services.svg_scaler import scale_svg

logger = get_logger(__name__)


class KrokiService:
    """Renders diagrams and builds diagram URLs through a Kroki server.

    Every operation validates its arguments before touching the network and
    performs at most one GET request, without retries.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        transport: Optional[httpx.BaseTransport] = None,
        classifier: Optional[ResponseClassifier] = None,
        storage: Optional[StorageService] = None,
    ):
        self.base_url = (base_url or get_settings().KROKI_BASE_URL).rstrip("/")
        self.transport = transport
        self.classifier = classifier or RegexResponseClassifier()
        self.storage = storage or StorageService()

    def validate_diagram_type(self, diagram_type: str) -> None:
        if diagram_type not in VALID_DIAGRAM_TYPES:
            raise InvalidDiagramTypeException(
                f"invalid diagram type. Must be one of: {', '.join(VALID_DIAGRAM_TYPES)}"
            )

    def validate_output_format(self, output_format: str) -> None:
        if output_format not in VALID_OUTPUT_FORMATS:
            raise InvalidOutputFormatException(
                f"invalid output format. Must be one of: {', '.join(VALID_OUTPUT_FORMATS)}"
            )

    def build_url(self, diagram_type: str, output_format: str, encoded_content: str) -> str:
        return f"{self.base_url}/{diagram_type}/{output_format}/{encoded_content}"

    def _fetch(self, url: str) -> httpx.Response:
        logger.debug(f"Fetching diagram from Kroki: {url}")
        try:
            with httpx.Client(transport=self.transport, follow_redirects=True, timeout=None) as client:
                return client.get(url)
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            logger.warning(f"Kroki request failed: {e}")
            raise TransportException(f"failed to fetch diagram from Kroki: {e}") from e

    def get_diagram_data(
        self,
        diagram_type: str,
        content: str,
        output_format: str,
        scale: float = 1.0,
    ) -> bytes:
        """
        Render a diagram and return the payload bytes.

        Args:
            diagram_type: One of VALID_DIAGRAM_TYPES
            content: Diagram source
            output_format: One of VALID_OUTPUT_FORMATS
            scale: Factor applied to SVG width/height when greater than 1.0

        Returns:
            Response body, scaled when the output is SVG and scale > 1.0

        Raises:
            KrokiException: validation, transport or classified service error
        """
        self.validate_diagram_type(diagram_type)
        self.validate_output_format(output_format)

        url = self.build_url(diagram_type, output_format, encode_content(content))
        response = self._fetch(url)
        data = response.content

        error = self.classifier.classify(
            response.status_code,
            response.headers.get("Content-Type"),
            data,
            output_format,
        )
        if error is not None:
            logger.warning(f"Kroki returned {error.kind.value} (HTTP {response.status_code}): {error.message}")
            raise error.to_exception()

        if output_format == "svg" and scale > 1.0 and data:
            try:
                svg_text = data.decode("utf-8")
            except UnicodeDecodeError:
                logger.warning("SVG is not valid UTF-8; returning it unscaled.")
            else:
                data = scale_svg(svg_text, scale).encode("utf-8")
                logger.info(f"Applied scale {scale:.2f} to SVG.")

        return data

    def generate_diagram_url(self, diagram_type: str, content: str, output_format: str) -> str:
        """
        Build a Kroki URL for the diagram after checking that it renders.

        base64 output wraps SVG, so base64 requests are checked by rendering
        SVG. The returned URL itself is not fetched again.
        """
        self.validate_diagram_type(diagram_type)
        self.validate_output_format(output_format)

        check_format = "svg" if output_format == "base64" else output_format
        self.get_diagram_data(diagram_type, content, check_format, 1.0)

        return self.build_url(diagram_type, output_format, encode_content(content))

    def render(self, request: DiagramRequest, as_url: bool = False) -> RenderResult:
        """Render a request either to payload bytes or to a validated URL"""
        if as_url:
            return RenderedUrl(
                url=self.generate_diagram_url(request.type, request.content, request.outputFormat)
            )
        return RenderedBytes(
            payload=self.get_diagram_data(
                request.type, request.content, request.outputFormat, request.scale
            )
        )

    def download_diagram(self, request: DownloadDiagramInput) -> Path:
        """Render a diagram and save it to request.outputPath"""
        output_format = request.outputFormat or resolve_output_format(request.outputPath)
        scale = request.scale or 1.0

        data = self.get_diagram_data(request.type, request.content, output_format, scale)
        return self.storage.save_diagram(request.outputPath, data)


def resolve_output_format(output_path: str) -> str:
    """Output format from the file extension, svg when there is none"""
    suffix = Path(output_path).suffix
    if len(suffix) > 1:
        return suffix[1:]
    return DEFAULT_OUTPUT_FORMAT
