"""Pydantic schemas for request/response validation"""
from kroki_mcp.schemas.diagram import (
    VALID_DIAGRAM_TYPES,
    VALID_OUTPUT_FORMATS,
    DiagramRequest,
    RenderedBytes,
    RenderedUrl,
    RenderResult,
    ClassifiedError,
    GenerateDiagramURLInput,
    GenerateDiagramURLOutput,
    DownloadDiagramInput,
    DownloadDiagramOutput,
)

__all__ = [
    # Allow-lists
    "VALID_DIAGRAM_TYPES",
    "VALID_OUTPUT_FORMATS",
    # Requests and results
    "DiagramRequest",
    "RenderedBytes",
    "RenderedUrl",
    "RenderResult",
    "ClassifiedError",
    # Tool I/O
    "GenerateDiagramURLInput",
    "GenerateDiagramURLOutput",
    "DownloadDiagramInput",
    "DownloadDiagramOutput",
]
