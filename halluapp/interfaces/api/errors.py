"""Exception handlers shared by every route."""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse, RedirectResponse

logger = logging.getLogger(__name__)

LOGIN_PATH = "/login"


class LoginRequired(Exception):
    """Raised when a protected route is hit without a valid session."""

    def __init__(self, status_code: int, detail: str) -> None:
        self.status_code = status_code
        self.detail = detail
        super().__init__(detail)


def wants_json(request: Request) -> bool:
    """Return ``True`` when the client asked for a JSON answer rather than a page."""

    accept = request.headers.get("accept", "").lower()
    if "/json" in accept or "+json" in accept:
        return True
    return request.headers.get("x-requested-with", "").lower() == "xmlhttprequest"


async def login_required_handler(request: Request, exc: LoginRequired):
    if wants_json(request):
        return JSONResponse(status_code=exc.status_code, content={"detail": exc.detail})
    return RedirectResponse(url=LOGIN_PATH, status_code=status.HTTP_303_SEE_OTHER)


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(
        "Unhandled error on %s %s", request.method, request.url.path, exc_info=exc
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Internal server error"},
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(LoginRequired, login_required_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
