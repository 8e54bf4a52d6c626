"""Custom exception classes"""
from enum import Enum
from typing import Optional
from fastapi import HTTPException, status


class ErrorKind(str, Enum):
    """Classified failure kinds reported to callers"""
    INVALID_TYPE = "InvalidType"
    INVALID_FORMAT = "InvalidFormat"
    ENCODING_FAILURE = "EncodingFailure"
    TRANSPORT_FAILURE = "TransportFailure"
    SERVER_DECODE_ERROR = "ServerDecodeError"
    BAD_REQUEST = "BadRequest"
    DIAGRAM_SYNTAX_ERROR = "DiagramSyntaxError"
    UNKNOWN_SERVER_ERROR = "UnknownServerError"


class KrokiException(HTTPException):
    """Base exception for the Kroki MCP server

    ``message`` is the short extracted message, ``details`` any diagnostic
    text that came with it and ``detail`` the full human-readable text shown
    to callers.
    """
    kind: Optional[ErrorKind] = None
    default_status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(
        self,
        message: str,
        details: Optional[str] = None,
        detail: Optional[str] = None,
        status_code: Optional[int] = None,
    ):
        self.message = message
        self.details = details
        super().__init__(
            status_code=status_code or self.default_status_code,
            detail=detail or message
        )

    def __str__(self) -> str:
        return self.detail


class InvalidDiagramTypeException(KrokiException):
    """Raised when the diagram type is not supported by Kroki"""
    kind = ErrorKind.INVALID_TYPE
    default_status_code = status.HTTP_400_BAD_REQUEST


class InvalidOutputFormatException(KrokiException):
    """Raised when the output format is not supported"""
    kind = ErrorKind.INVALID_FORMAT
    default_status_code = status.HTTP_400_BAD_REQUEST


class EncodingException(KrokiException):
    """Raised when diagram content cannot be compressed and encoded"""
    kind = ErrorKind.ENCODING_FAILURE


class TransportException(KrokiException):
    """Raised when the Kroki service cannot be reached"""
    kind = ErrorKind.TRANSPORT_FAILURE
    default_status_code = status.HTTP_502_BAD_GATEWAY


class ServerDecodeException(KrokiException):
    """Raised when Kroki could not decode the encoded diagram source"""
    kind = ErrorKind.SERVER_DECODE_ERROR
    default_status_code = status.HTTP_422_UNPROCESSABLE_CONTENT


class BadRequestException(KrokiException):
    """Raised when Kroki rejects the diagram description (HTTP 400)"""
    kind = ErrorKind.BAD_REQUEST
    default_status_code = status.HTTP_422_UNPROCESSABLE_CONTENT


class DiagramSyntaxException(KrokiException):
    """Raised when a rendered SVG carries inline error text"""
    kind = ErrorKind.DIAGRAM_SYNTAX_ERROR
    default_status_code = status.HTTP_422_UNPROCESSABLE_CONTENT


class UnknownServerException(KrokiException):
    """Raised for any other Kroki failure response"""
    kind = ErrorKind.UNKNOWN_SERVER_ERROR
    default_status_code = status.HTTP_502_BAD_GATEWAY


class OutputWriteException(KrokiException):
    """Raised when a rendered diagram cannot be written to disk"""
    pass


EXCEPTIONS_BY_KIND = {
    cls.kind: cls
    for cls in (
        InvalidDiagramTypeException,
        InvalidOutputFormatException,
        EncodingException,
        TransportException,
        ServerDecodeException,
        BadRequestException,
        DiagramSyntaxException,
        UnknownServerException,
    )
}
