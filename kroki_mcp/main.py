"""FastAPI application entry point"""
from fastapi import FastAPI
from fastapi.responses import JSONResponse
from kroki_mcp.core.config import settings
from kroki_mcp.core.exceptions import KrokiException
from kroki_mcp.core.logging_config import setup_logging
from kroki_mcp.api.v1 import diagrams
import uvicorn

# Set up logging
logger = setup_logging("kroki_mcp.main")

# Create FastAPI app
app = FastAPI(
    title=settings.PROJECT_NAME,
    description="Diagram rendering through Kroki",
    version=settings.VERSION,
    docs_url="/docs",
    redoc_url="/redoc"
)

# Include routers
app.include_router(diagrams.router, prefix=settings.API_V1_PREFIX)


# Global exception handler
@app.exception_handler(KrokiException)
async def kroki_exception_handler(request, exc: KrokiException):
    """Handle Kroki exceptions"""
    logger.warning(f"Kroki exception: {exc.detail} - Path: {request.url.path}")
    return JSONResponse(
        status_code=exc.status_code,
        content={
            "detail": exc.detail,
            "kind": exc.kind.value if exc.kind else None,
        }
    )


# Root endpoint
@app.get("/")
async def root():
    """Root endpoint"""
    return {
        "message": settings.PROJECT_NAME,
        "version": settings.VERSION,
        "kroki_server_url": settings.KROKI_BASE_URL,
        "docs": "/docs"
    }


# Health check
@app.get("/health")
async def health_check():
    """Health check endpoint"""
    return {"status": "healthy"}


if __name__ == "__main__":
    uvicorn.run(
        "kroki_mcp.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.DEBUG
    )
