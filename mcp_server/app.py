"""FastMCP server exposing Kroki diagram tools (stdio transport by default)."""
from __future__ import annotations

from pathlib import Path
from typing import Annotated, Optional

from dotenv import load_dotenv
from fastmcp import FastMCP
from fastmcp.exceptions import ToolError
from pydantic import Field

# Load project root .env so KROKI_SERVER_URL etc. are available when MCP runs as separate process
_env_path = Path(__file__).resolve().parent.parent / ".env"
if _env_path.exists():
    load_dotenv(_env_path)

from kroki_mcp.core.config import settings  # noqa: E402
from kroki_mcp.core.exceptions import KrokiException  # noqa: E402
from kroki_mcp.core.logging_config import setup_logging  # noqa: E402
from kroki_mcp.schemas.diagram import (  # noqa: E402
    DEFAULT_OUTPUT_FORMAT,
    URL_SUCCESS_MESSAGE,
    VALID_DIAGRAM_TYPES,
    VALID_OUTPUT_FORMATS,
    DownloadDiagramInput,
    DownloadDiagramOutput,
    GenerateDiagramURLOutput,
)
from kroki_mcp.services.kroki_service import KrokiService  # noqa: E402

logger = setup_logging("kroki_mcp.mcp_server")

_SUPPORTED = (
    f"Supported diagram types: {', '.join(VALID_DIAGRAM_TYPES)}. "
    f"Supported output formats: {', '.join(VALID_OUTPUT_FORMATS)}."
)

GENERATE_DIAGRAM_URL_DESCRIPTION = (
    "Generate a URL for a diagram using Kroki.io. This tool takes Mermaid diagram code or "
    "other supported diagram formats and returns a URL to the rendered diagram. The URL can "
    "be used to display the diagram in web browsers or embedded in documents. " + _SUPPORTED
)

DOWNLOAD_DIAGRAM_DESCRIPTION = (
    "Download a diagram image to a local file. This tool converts diagram code (such as "
    "Mermaid) into an image file and saves it to the specified location. Useful for "
    "generating diagrams for presentations, documentation, or other offline use. Includes "
    "an option to scale SVG output. " + _SUPPORTED
)


mcp = FastMCP(settings.PROJECT_NAME)


def generate_diagram_url(
    type: Annotated[str, Field(description="Diagram type (e.g. mermaid, plantuml, graphviz, c4plantuml). See Kroki.io documentation for all supported formats.")],
    content: Annotated[str, Field(description="The diagram content in the specified format.")],
    outputFormat: Annotated[str, Field(description="Output format: svg (default), png, pdf, jpeg or base64.")] = DEFAULT_OUTPUT_FORMAT,
) -> GenerateDiagramURLOutput:
    """Validate a diagram with Kroki and return its URL."""
    service = KrokiService()
    try:
        url = service.generate_diagram_url(type, content, outputFormat or DEFAULT_OUTPUT_FORMAT)
    except KrokiException as e:
        raise ToolError(f"Failed to generate diagram URL: {e}")

    logger.info(f"Generated diagram URL: {url}")
    return GenerateDiagramURLOutput(message=URL_SUCCESS_MESSAGE, url=url)


def download_diagram(
    type: Annotated[str, Field(description="Diagram type (e.g. mermaid, plantuml, graphviz). Supports the same diagram types as Kroki.io.")],
    content: Annotated[str, Field(description="The diagram content in the specified format.")],
    outputPath: Annotated[str, Field(description="Complete file path where the diagram should be saved.")],
    outputFormat: Annotated[Optional[str], Field(description="Output format (svg, png, pdf, jpeg). If unspecified, derived from the file extension.")] = None,
    scale: Annotated[float, Field(ge=0, description="Scaling factor for SVG output (default 1.0).")] = 1.0,
) -> DownloadDiagramOutput:
    """Render a diagram with Kroki and save it to outputPath."""
    request = DownloadDiagramInput(
        type=type,
        content=content,
        outputPath=outputPath,
        outputFormat=outputFormat or None,
        scale=scale,
    )
    service = KrokiService()
    try:
        service.download_diagram(request)
    except KrokiException as e:
        raise ToolError(f"Failed to download diagram to {outputPath}: {e}")

    return DownloadDiagramOutput(message=f"Diagram saved to {outputPath}")


mcp.tool(name="generate_diagram_url", description=GENERATE_DIAGRAM_URL_DESCRIPTION)(generate_diagram_url)
mcp.tool(name="download_diagram", description=DOWNLOAD_DIAGRAM_DESCRIPTION)(download_diagram)


def main() -> None:
    """Run the MCP server with the configured transport."""
    logger.info(f"Starting {settings.PROJECT_NAME} (Kroki: {settings.KROKI_BASE_URL}, transport: {settings.MCP_TRANSPORT})")
    if settings.MCP_TRANSPORT == "stdio":
        mcp.run()
    else:
        mcp.run(transport=settings.MCP_TRANSPORT, host=settings.MCP_HOST, port=settings.MCP_PORT)


if __name__ == "__main__":
    main()
