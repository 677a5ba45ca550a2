"""
使用 Pydantic Settings 进行配置管理
从 app.properties 文件和环境变量加载配置
"""

from functools import lru_cache
from typing import Optional
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from loguru import logger


class Settings(BaseSettings):
    """应用配置，包含参数校验"""

    # 数据库配置
    POSTGRES_HOST: str = Field(default="localhost", description="PostgreSQL 主机")
    POSTGRES_PORT: int = Field(default=5432, description="PostgreSQL 端口")
    POSTGRES_DB: str = Field(default="jobly", description="PostgreSQL 数据库名称")
    POSTGRES_USER: str = Field(default="jobly", description="PostgreSQL 用户名")
    POSTGRES_PASSWORD: str = Field(default="", description="PostgreSQL 密码")
    DATABASE_URL: Optional[str] = Field(
        default=None,
        description="完整的数据库 URL，设置后覆盖 POSTGRES_* 配置",
    )

    # 连接池配置
    DB_POOL_SIZE: int = Field(default=20, description="连接池大小")
    DB_MAX_OVERFLOW: int = Field(default=10, description="连接池溢出上限")
    DB_POOL_RECYCLE: int = Field(default=3600, description="连接回收时间（秒）")
    DB_ECHO: bool = Field(default=False, description="是否输出 SQL 语句")

    # API 服务器配置
    API_HOST: str = Field(default="0.0.0.0", description="API 服务器主机")
    API_PORT: int = Field(default=8000, description="API 服务器端口")
    API_WORKERS: int = Field(default=4, description="API 服务器进程数")

    # 日志配置
    LOG_LEVEL: str = Field(default="INFO", description="日志级别")
    LOG_FILE: Optional[str] = Field(default=None, description="日志文件路径")

    model_config = SettingsConfigDict(
        env_file="app.properties",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    @field_validator("DB_POOL_SIZE")
    @classmethod
    def validate_pool_size(cls, v: int) -> int:
        if v < 1:
            raise ValueError("DB_POOL_SIZE 至少为 1")
        return v

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        v_upper = v.upper()
        if v_upper not in valid_levels:
            raise ValueError(f"LOG_LEVEL 必须为 {valid_levels} 中的一项")
        return v_upper

    def get_database_url(self) -> str:
        """
        获取数据库连接 URL

        优先使用 DATABASE_URL，否则用 asyncpg 驱动拼接 PostgreSQL URL

        返回:
            数据库连接 URL 字符串
        """
        if self.DATABASE_URL:
            return self.DATABASE_URL
        return (
            f"postgresql+asyncpg://{self.POSTGRES_USER}:{self.POSTGRES_PASSWORD}"
            f"@{self.POSTGRES_HOST}:{self.POSTGRES_PORT}/{self.POSTGRES_DB}"
        )

    def ensure_directories(self) -> None:
        """确保日志目录存在"""
        if self.LOG_FILE:
            Path(self.LOG_FILE).parent.mkdir(parents=True, exist_ok=True)


# ========== 配置获取函数 ==========


@lru_cache()
def get_settings() -> Settings:
    """
    获取配置实例（单例）

    返回:
        配置实例
    """
    settings = Settings()
    logger.info("Settings loaded")
    return settings


def reload_settings() -> Settings:
    """
    重新加载配置

    清除 lru_cache 缓存并重新加载配置

    返回:
        新的配置实例
    """
    get_settings.cache_clear()
    logger.info("Settings reloaded")
    return get_settings()
