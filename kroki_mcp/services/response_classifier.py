"""Classification of Kroki responses into payloads or human-readable errors"""
import re
from typing import Optional

from kroki_mcp.core.exceptions import ErrorKind
from kroki_mcp.core.logging_config import get_logger
from kroki_mcp.schemas.diagram import ClassifiedError, SVG_TEXT_FORMATS

logger = get_logger(__name__)

# Bodies shorter than this are quoted back to the caller on HTTP 400
MAX_QUOTED_BODY_LENGTH = 500

DECODE_ERROR_MESSAGE = (
    "Decode error: Kroki could not decode the source. "
    "Please check the format and content."
)
UNKNOWN_HTML_ERROR_MESSAGE = "Unknown error (HTML response)"
BAD_REQUEST_MESSAGE = (
    "There appears to be an error in the diagram description (Kroki HTTP 400)."
)
CHECK_CONTENT_HINT = "Please check the diagram content."

TITLE_RE = re.compile(r"<title[^>]*>(.*?)</title>", re.IGNORECASE | re.DOTALL)
BODY_RE = re.compile(r"<body[^>]*>(.*?)</body>", re.IGNORECASE | re.DOTALL)
PRE_RE = re.compile(r"<pre[^>]*>(.*?)</pre>", re.IGNORECASE | re.DOTALL)
SVG_ERROR_TEXT_RE = re.compile(
    r'<text[^>]*class="error"[^>]*>(.*?)</text>|<text[^>]*fill="red"[^>]*>(.*?)</text>',
    re.DOTALL,
)


class ResponseClassifier:
    """Decides whether a Kroki response is a payload or an error."""

    def classify(
        self,
        status_code: int,
        content_type: Optional[str],
        body: bytes,
        output_format: str,
    ) -> Optional[ClassifiedError]:
        """Return None when the body is a valid payload, else the error."""
        raise NotImplementedError("Classifier must implement classify()")


class RegexResponseClassifier(ResponseClassifier):
    """Classifier that scrapes HTML error pages and SVG error text with regexes."""

    def classify(
        self,
        status_code: int,
        content_type: Optional[str],
        body: bytes,
        output_format: str,
    ) -> Optional[ClassifiedError]:
        text = body.decode("utf-8", errors="replace")

        if status_code != 200:
            if self._is_html(content_type, text):
                return self._classify_html_page(text)
            if status_code == 400:
                return self._classify_bad_request(text)
            return ClassifiedError(
                kind=ErrorKind.UNKNOWN_SERVER_ERROR,
                message=f"Kroki API request failed (status: {status_code})",
                description=f"Kroki API request failed (status: {status_code})",
            )

        if output_format in SVG_TEXT_FORMATS and text:
            return self._classify_svg_error(text)

        return None

    @staticmethod
    def _is_html(content_type: Optional[str], text: str) -> bool:
        if "text/html" in (content_type or "").lower():
            return True
        head = text[:16].lower()
        return head.startswith("<html") or head.startswith("<!doctype html")

    def _classify_html_page(self, text: str) -> ClassifiedError:
        message = UNKNOWN_HTML_ERROR_MESSAGE
        title_match = TITLE_RE.search(text)
        if title_match:
            message = title_match.group(1).strip()

        body_match = BODY_RE.search(text)
        if body_match and "unable to decode" in body_match.group(1).lower():
            details = None
            pre_match = PRE_RE.search(body_match.group(1))
            if pre_match:
                details = pre_match.group(1).strip()
            description = f"Kroki error: {DECODE_ERROR_MESSAGE}"
            if details is not None:
                description += f"\nDetails:\n---\n{details}\n---"
            logger.debug(f"Kroki could not decode the diagram source: {details}")
            return ClassifiedError(
                kind=ErrorKind.SERVER_DECODE_ERROR,
                message=DECODE_ERROR_MESSAGE,
                details=details,
                description=description,
            )

        return ClassifiedError(
            kind=ErrorKind.UNKNOWN_SERVER_ERROR,
            message=message,
            description=f"Kroki error: {message}",
        )

    def _classify_bad_request(self, text: str) -> ClassifiedError:
        if len(text) < MAX_QUOTED_BODY_LENGTH:
            details = text.strip()
            return ClassifiedError(
                kind=ErrorKind.BAD_REQUEST,
                message=BAD_REQUEST_MESSAGE,
                details=details,
                description=(
                    f"{BAD_REQUEST_MESSAGE}\nDetails from Kroki:\n---\n{details}\n---\n"
                    f"{CHECK_CONTENT_HINT}"
                ),
            )
        return ClassifiedError(
            kind=ErrorKind.BAD_REQUEST,
            message=BAD_REQUEST_MESSAGE,
            description=f"{BAD_REQUEST_MESSAGE} {CHECK_CONTENT_HINT}",
        )

    def _classify_svg_error(self, text: str) -> Optional[ClassifiedError]:
        match = SVG_ERROR_TEXT_RE.search(text)
        if not match:
            return None

        raw = match.group(1) if match.group(1) is not None else match.group(2)
        message = (
            raw.replace("&lt;", "<")
            .replace("&gt;", ">")
            .replace("&amp;", "&")
            .replace("<br/>", "\n")
            .strip()
        )
        return ClassifiedError(
            kind=ErrorKind.DIAGRAM_SYNTAX_ERROR,
            message=message,
            description=(
                f"Diagram generation error (in SVG):\n{message}\n\n{CHECK_CONTENT_HINT}"
            ),
        )
