"""API dependencies"""
from kroki_mcp.services.kroki_service import KrokiService


def get_kroki_service() -> KrokiService:
    """Kroki service for a single request; reads KROKI_SERVER_URL each time"""
    return KrokiService()
