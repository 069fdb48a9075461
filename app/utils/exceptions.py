"""커스텀 HTTP 예외 클래스 모듈.

Custom HTTP exception classes module.
Services raise these directly; FastAPI renders them as
``{"detail": "<message>"}`` with the matching status code, so routers
need no translation code.

Usage:
    from app.utils.exceptions import NotFoundError, InvalidReferenceError
    raise NotFoundError("Asset not found")
    raise InvalidReferenceError("Invalid category id")
"""

from fastapi import HTTPException, status


class NotFoundError(HTTPException):
    """404 Not Found 예외 — 요청한 리소스를 찾을 수 없을 때 사용.

    404 Not Found exception.
    Raised when an update or delete targets an id that does not exist,
    and by routers when a lookup returns nothing.

    Args:
        detail: 오류 메시지 (Error message, default: "Resource not found")
    """

    def __init__(self, detail: str = "Resource not found") -> None:
        super().__init__(status_code=status.HTTP_404_NOT_FOUND, detail=detail)


class DuplicateError(HTTPException):
    """409 Conflict 예외 — 중복 리소스 생성 시도 시 사용.

    409 Conflict exception.
    Raised when an asset-employee pair that already exists is created again.

    Args:
        detail: 오류 메시지 (Error message, default: "Resource already exists")
    """

    def __init__(self, detail: str = "Resource already exists") -> None:
        super().__init__(status_code=status.HTTP_409_CONFLICT, detail=detail)


class BadRequestError(HTTPException):
    """400 Bad Request 예외 — 잘못된 요청 데이터 시 사용.

    400 Bad Request exception.
    Raised when the request data is invalid beyond what Pydantic validation catches.

    Args:
        detail: 오류 메시지 (Error message, default: "Bad request")
    """

    def __init__(self, detail: str = "Bad request") -> None:
        super().__init__(status_code=status.HTTP_400_BAD_REQUEST, detail=detail)


class InvalidReferenceError(BadRequestError):
    """참조 무결성 위반 — 존재하지 않는 FK를 가리킬 때 사용.

    Raised when a create/update payload references a category, department,
    asset or employee that does not exist. Always raised before any write,
    so the caller can correct the payload and retry.

    Args:
        detail: 오류 메시지 (Error message, e.g. "Invalid asset id")
    """

    def __init__(self, detail: str = "Invalid reference") -> None:
        super().__init__(detail=detail)
