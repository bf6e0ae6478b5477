from typing import Any

from fastapi import HTTPException
from storefront.constants.error_codes import ErrorCode


class AppException(HTTPException):
    """An expected failure the client can act on; rendered as the error envelope."""

    def __init__(
        self,
        status_code: int,
        message: str,
        error_code: ErrorCode,
        details: Any = None,
    ):
        super().__init__(status_code=status_code, detail=message)
        self.error_code = ErrorCode(error_code)
        self.details = details

    @property
    def message(self) -> str:
        return self.detail

    def log_extra(self) -> dict:
        return {"status_code": self.status_code, "error_code": self.error_code.value}
