"""Tests for the MCP tool layer"""
import asyncio

import pytest
from fastmcp import Client
from fastmcp.exceptions import ToolError

from mcp_server import app as mcp_app
from kroki_mcp.schemas.diagram import URL_SUCCESS_MESSAGE
from kroki_mcp.services.encoder import encode_content
from kroki_mcp.services.kroki_service import KrokiService
from conftest import KROKI_TEST_URL, StubKroki, svg_document


MERMAID = "graph TD; A-->B"


@pytest.fixture
def use_stub(monkeypatch):
    def _use(stub):
        monkeypatch.setattr(
            mcp_app,
            "KrokiService",
            lambda: KrokiService(base_url=KROKI_TEST_URL, transport=stub.transport),
        )
        return stub
    return _use


class TestGenerateDiagramURLTool:

    def test_success(self, use_stub, stub_kroki):
        use_stub(stub_kroki)
        output = mcp_app.generate_diagram_url("mermaid", MERMAID)
        assert output.message == URL_SUCCESS_MESSAGE
        assert output.url == f"{KROKI_TEST_URL}/mermaid/svg/{encode_content(MERMAID)}"

    def test_empty_format_defaults_to_svg(self, use_stub, stub_kroki):
        use_stub(stub_kroki)
        output = mcp_app.generate_diagram_url("mermaid", MERMAID, "")
        assert "/mermaid/svg/" in output.url

    def test_failure_is_tool_error(self, use_stub, stub_kroki):
        use_stub(stub_kroki)
        with pytest.raises(ToolError, match="^Failed to generate diagram URL: invalid diagram type"):
            mcp_app.generate_diagram_url("visio", MERMAID)
        assert stub_kroki.requests == []


class TestDownloadDiagramTool:

    def test_success(self, use_stub, stub_kroki, tmp_path):
        use_stub(stub_kroki)
        output = tmp_path / "out" / "diagram.svg"
        result = mcp_app.download_diagram("mermaid", MERMAID, str(output), scale=2.0)
        assert result.message == f"Diagram saved to {output}"
        assert b'width="200.00px" height="100.00px"' in output.read_bytes()

    def test_failure_is_tool_error(self, use_stub, tmp_path):
        use_stub(StubKroki(content=b'<svg><text class="error">Syntax error</text></svg>'))
        output = tmp_path / "diagram.svg"
        with pytest.raises(ToolError) as exc_info:
            mcp_app.download_diagram("mermaid", MERMAID, str(output))
        message = str(exc_info.value)
        assert message.startswith(f"Failed to download diagram to {output}: Diagram generation error (in SVG)")
        assert "Syntax error" in message
        assert not output.exists()


class TestServerRegistration:

    def test_tools_are_listed(self):
        async def list_tools():
            async with Client(mcp_app.mcp) as client:
                return await client.list_tools()

        tools = {tool.name: tool for tool in asyncio.run(list_tools())}
        assert set(tools) == {"generate_diagram_url", "download_diagram"}
        assert "wireviz" in tools["download_diagram"].description
        assert set(tools["download_diagram"].inputSchema["required"]) == {"type", "content", "outputPath"}

    def test_call_tool_in_memory(self, use_stub):
        use_stub(StubKroki(content=svg_document(), headers={"Content-Type": "image/svg+xml"}))

        async def call():
            async with Client(mcp_app.mcp) as client:
                return await client.call_tool(
                    "generate_diagram_url", {"type": "mermaid", "content": MERMAID, "outputFormat": "base64"}
                )

        result = asyncio.run(call())
        assert result.structured_content["url"].startswith(f"{KROKI_TEST_URL}/mermaid/base64/")
