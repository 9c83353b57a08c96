import logging

from fastapi import Request
from fastapi.responses import JSONResponse
from core.exceptions import AppException

logger = logging.getLogger(__name__)


async def app_exception_handler(request: Request, exc: AppException):
    if exc.status_code >= 500:
        logger.error("%s %s -> %s", request.method, request.url.path, exc.code)
    else:
        logger.info("%s %s -> %s", request.method, request.url.path, exc.code)
    return JSONResponse(status_code=exc.status_code, content=exc.content)
