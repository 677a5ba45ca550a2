"""
FastAPI 主入口
"""

from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from loguru import logger

from core.config import get_settings
from core.database import AsyncDatabaseManager
from core.utils.logger import setup_logger
from .routers import jobs_router
from .middleware import RequestIDMiddleware


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """
    应用生命周期管理器（启动与关闭事件）
    """
    settings = get_settings()

    setup_logger(settings.LOG_LEVEL, settings.LOG_FILE)
    logger.info("启动 Jobly API 服务")

    settings.ensure_directories()

    # 数据库管理器挂在 app.state 上，由依赖项注入到仓储
    db = AsyncDatabaseManager.from_settings(settings)
    db.init()
    app.state.db = db

    logger.info(f"API 服务已启动，监听 {settings.API_HOST}:{settings.API_PORT}")

    yield

    logger.info("正在关闭 Jobly API 服务")
    await db.close()
    logger.info("API 服务已停止")


def create_app() -> FastAPI:
    """创建 FastAPI 应用"""
    app = FastAPI(
        title="Jobly",
        description="职位数据访问层 - REST API",
        version="1.0.0",
        lifespan=lifespan,
    )

    app.add_middleware(RequestIDMiddleware)
    app.include_router(jobs_router)

    @app.get("/", status_code=status.HTTP_200_OK)
    async def root():
        """根接口 - 返回 API 信息"""
        return {
            "service": "Jobly API",
            "version": "1.0.0",
            "status": "running",
        }

    @app.get("/health", status_code=status.HTTP_200_OK)
    async def health_check():
        """健康检查接口"""
        return {
            "status": "healthy",
            "service": "jobly-api",
        }

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        """全局异常处理"""
        logger.opt(exception=exc).error(f"未处理的异常: {exc!r}")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"detail": "服务器内部错误"},
        )

    return app


app = create_app()


def main() -> None:
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "api.main:app",
        host=settings.API_HOST,
        port=settings.API_PORT,
        workers=settings.API_WORKERS,
        log_level=settings.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    main()
