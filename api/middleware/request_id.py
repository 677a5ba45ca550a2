"""
请求ID追踪中间件
"""
import time
import uuid

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response
from loguru import logger


class RequestIDMiddleware(BaseHTTPMiddleware):
    """
    为每个请求分配追踪ID并记录耗时

    客户端可以通过 X-Request-ID 头传入自己的ID；
    响应中回写 X-Request-ID 与 X-Process-Time
    """

    async def dispatch(self, request: Request, call_next) -> Response:
        request_id = request.headers.get("X-Request-ID", str(uuid.uuid4()))
        request.state.request_id = request_id

        start_time = time.perf_counter()
        with logger.contextualize(request_id=request_id):
            try:
                response: Response = await call_next(request)
            except Exception as e:
                duration = time.perf_counter() - start_time
                logger.error(
                    f"{request.method} {request.url.path} failed: {e!r} ({duration:.3f}s)"
                )
                raise

            duration = time.perf_counter() - start_time
            logger.info(
                f"{request.method} {request.url.path} -> {response.status_code} "
                f"({duration:.3f}s)"
            )

        response.headers["X-Request-ID"] = request_id
        response.headers["X-Process-Time"] = f"{duration:.3f}"
        return response
