"""Diagram request/response schemas and the Kroki allow-lists"""
from pydantic import BaseModel, Field
from typing import Literal, Optional, Union
from kroki_mcp.core.exceptions import ErrorKind, EXCEPTIONS_BY_KIND, KrokiException


VALID_DIAGRAM_TYPES = (
    "mermaid", "plantuml", "graphviz", "c4plantuml",
    "excalidraw", "erd", "svgbob", "nomnoml", "wavedrom",
    "blockdiag", "seqdiag", "actdiag", "nwdiag", "packetdiag",
    "rackdiag", "umlet", "ditaa", "vega", "vegalite",
    "bpmn", "bytefield", "d2", "dbml", "pikchr",
    "structurizr", "symbolator", "tikz", "wireviz",
)

VALID_OUTPUT_FORMATS = ("svg", "png", "pdf", "jpeg", "base64")

# Formats whose payload is SVG text and may carry inline error markup
SVG_TEXT_FORMATS = frozenset({"svg", "base64"})

DEFAULT_OUTPUT_FORMAT = "svg"

URL_SUCCESS_MESSAGE = "Diagram URL generated and validated successfully. No errors found."

MEDIA_TYPES = {
    "svg": "image/svg+xml",
    "png": "image/png",
    "pdf": "application/pdf",
    "jpeg": "image/jpeg",
    "base64": "text/plain",
}


class DiagramRequest(BaseModel):
    """A single diagram render request"""
    type: str = Field(..., description="Diagram type, e.g. mermaid, plantuml, graphviz")
    content: str = Field(..., description="The diagram source in the given language")
    outputFormat: str = Field(DEFAULT_OUTPUT_FORMAT, description="svg, png, pdf, jpeg or base64")
    scale: float = Field(1.0, gt=0, description="Scaling factor for SVG output")


class RenderedBytes(BaseModel):
    """Rendered diagram payload"""
    kind: Literal["bytes"] = "bytes"
    payload: bytes


class RenderedUrl(BaseModel):
    """Validated Kroki URL for a diagram"""
    kind: Literal["url"] = "url"
    url: str


RenderResult = Union[RenderedBytes, RenderedUrl]


class ClassifiedError(BaseModel):
    """Failure extracted from a Kroki response"""
    kind: ErrorKind
    message: str
    details: Optional[str] = None
    description: str = Field(..., description="Full human-readable failure text")

    def to_exception(self) -> KrokiException:
        exc_class = EXCEPTIONS_BY_KIND[self.kind]
        return exc_class(self.message, details=self.details, detail=self.description)


class GenerateDiagramURLInput(BaseModel):
    """Input of the generate_diagram_url tool"""
    type: str
    content: str
    outputFormat: str = DEFAULT_OUTPUT_FORMAT


class GenerateDiagramURLOutput(BaseModel):
    """Output of the generate_diagram_url tool"""
    message: str
    url: str


class DownloadDiagramInput(BaseModel):
    """Input of the download_diagram tool"""
    type: str
    content: str
    outputPath: str
    outputFormat: Optional[str] = None
    scale: float = Field(1.0, ge=0)


class DownloadDiagramOutput(BaseModel):
    """Output of the download_diagram tool"""
    message: str
