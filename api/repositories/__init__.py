"""
数据库仓储层 (Repository Layer)

职责：
- 封装所有数据库操作
- 管理数据库会话生命周期
- 将"没有匹配行"转换为 NotFoundError
"""

from .job_repository import JobRepository

__all__ = ["JobRepository"]
