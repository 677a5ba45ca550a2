"""
API错误处理装饰器
"""

import functools
from typing import Callable, Type, Dict
from fastapi import HTTPException, status
from loguru import logger

from core.exceptions import BadRequestError, JoblyException, NotFoundError


# 异常映射表：业务异常 -> HTTP状态码
EXCEPTION_MAP: Dict[Type[Exception], int] = {
    NotFoundError: status.HTTP_404_NOT_FOUND,
    BadRequestError: status.HTTP_400_BAD_REQUEST,
}


def status_code_for(e: Exception) -> int:
    """按异常类的 MRO 查找状态码，子类沿用父类的映射"""
    for cls in type(e).__mro__:
        if cls in EXCEPTION_MAP:
            return EXCEPTION_MAP[cls]
    return status.HTTP_500_INTERNAL_SERVER_ERROR


def handle_api_errors(func: Callable):
    """
    统一的API错误处理装饰器

    自动捕获并转换异常为HTTP响应

    使用示例:
        @router.get("/{job_id}")
        @handle_api_errors
        async def get_job(...):
            return await repo.get(...)
    """

    @functools.wraps(func)
    async def wrapper(*args, **kwargs):
        try:
            return await func(*args, **kwargs)

        # 已知的业务异常
        except tuple(EXCEPTION_MAP.keys()) as e:
            status_code = status_code_for(e)
            logger.warning(f"[{func.__name__}] {type(e).__name__}: {e}")
            detail = e.message
            if isinstance(e, BadRequestError) and e.errors:
                detail = {"message": e.message, "errors": e.errors}
            raise HTTPException(status_code=status_code, detail=detail)

        # 其他自定义异常
        except JoblyException as e:
            logger.error(f"[{func.__name__}] {type(e).__name__}: {e}")
            raise HTTPException(status_code=e.status_code, detail=str(e))

        # 未预期的异常（数据库约束、连接失败等）
        except Exception as e:
            # 使用 repr() 避免异常信息中的 {} 导致格式化错误
            logger.opt(exception=True).error(
                f"[{func.__name__}] Unexpected error: {repr(e)}"
            )
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail="Internal server error",
            )

    return wrapper
