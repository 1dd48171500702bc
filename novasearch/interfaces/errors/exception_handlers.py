import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException

from novasearch.application.errors.exceptions import AppException
from novasearch.interfaces.schemas import Response

logger = logging.getLogger(__name__)


def register_exception_handlers(app: FastAPI) -> None:
    """Map application, HTTP and unhandled exceptions onto the Response envelope"""

    @app.exception_handler(AppException)
    async def app_exception_handler(
        request: Request, exc: AppException
    ) -> JSONResponse:
        if exc.status_code >= 500:
            logger.error(f"App exception on {request.url.path}: {exc.msg}")
        else:
            logger.info(f"Rejected request on {request.url.path}: {exc.msg}")

        return JSONResponse(
            status_code=exc.status_code,
            content=Response(code=exc.code, msg=exc.msg, data=exc.data or {}).model_dump(),
        )

    @app.exception_handler(HTTPException)
    async def http_exception_handler(
        request: Request, exc: HTTPException
    ) -> JSONResponse:
        logger.error(f"HTTP exception: {exc.detail}")

        return JSONResponse(
            status_code=exc.status_code,
            content=Response(code=exc.status_code, msg=str(exc.detail), data={}).model_dump(),
        )

    @app.exception_handler(Exception)
    async def exception_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.error(f"Unhandled exception: {exc}", exc_info=True)

        return JSONResponse(
            status_code=500,
            content=Response(code=500, msg="Internal Server Error", data={}).model_dump(),
        )
