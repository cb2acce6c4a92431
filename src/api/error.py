"""API error primitives

Use case errors (libs.result.Error) are raised as ClientError and rendered
as {"error": {"code", "message", "reason"}}.
"""

from fastapi import Request, status
from fastapi.responses import JSONResponse
from libs.result import Error


class ClientError(Exception):
    def __init__(self, error: Error, status_code: int = status.HTTP_400_BAD_REQUEST):
        super().__init__(error.message)
        self.error = error
        self.status_code = status_code

    def to_response(self) -> JSONResponse:
        return JSONResponse(
            status_code=self.status_code,
            content={
                "error": {
                    "code": self.error.code,
                    "message": self.error.message,
                    "reason": self.error.reason,
                }
            },
        )


async def client_error_handler(_: Request, exc: ClientError) -> JSONResponse:
    return exc.to_response()
