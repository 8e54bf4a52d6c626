"""Diagram endpoints"""
from fastapi import APIRouter, Depends
from fastapi.responses import Response
from kroki_mcp.api.deps import get_kroki_service
from kroki_mcp.core.logging_config import get_logger
from kroki_mcp.schemas.diagram import (
    MEDIA_TYPES,
    URL_SUCCESS_MESSAGE,
    DiagramRequest,
    GenerateDiagramURLInput,
    GenerateDiagramURLOutput,
)
from kroki_mcp.services.kroki_service import KrokiService

logger = get_logger(__name__)
router = APIRouter(prefix="/diagrams", tags=["diagrams"])


@router.post("/url", response_model=GenerateDiagramURLOutput)
def generate_diagram_url(
    request: GenerateDiagramURLInput,
    service: KrokiService = Depends(get_kroki_service)
):
    """Generate a validated Kroki URL for a diagram"""
    logger.info(f"Generating {request.outputFormat} URL for {request.type} diagram")
    url = service.generate_diagram_url(request.type, request.content, request.outputFormat)
    return GenerateDiagramURLOutput(message=URL_SUCCESS_MESSAGE, url=url)


@router.post("/render")
def render_diagram(
    request: DiagramRequest,
    service: KrokiService = Depends(get_kroki_service)
):
    """Render a diagram and return the raw payload"""
    logger.info(f"Rendering {request.type} diagram as {request.outputFormat}")
    result = service.render(request)
    return Response(
        content=result.payload,
        media_type=MEDIA_TYPES.get(request.outputFormat, "application/octet-stream")
    )
