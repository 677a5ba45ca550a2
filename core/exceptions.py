"""
Jobly 数据访问层的自定义异常
"""
from typing import List, Optional


class JoblyException(Exception):
    """Jobly 基础异常类"""

    status_code: int = 500


# ========== 数据库异常 ==========

class DatabaseException(JoblyException):
    """数据库相关异常基类"""
    pass


class DatabaseNotInitializedException(DatabaseException):
    """数据库未初始化异常"""
    def __init__(self, manager_name: str = "DatabaseManager"):
        super().__init__(
            f"{manager_name} not initialized. Call init() first."
        )


# ========== 请求数据异常 ==========

class BadRequestError(JoblyException):
    """
    调用方提供的过滤条件或更新数据不合法

    总是在任何语句发往数据库之前抛出
    """

    status_code = 400

    def __init__(self, message: str = "Bad Request", errors: Optional[List[str]] = None):
        self.message = message
        self.errors = errors or []
        detail = message
        if self.errors:
            detail = f"{message}: {'; '.join(self.errors)}"
        super().__init__(detail)


class NotFoundError(JoblyException):
    """查询、更新或删除的目标记录不存在"""

    status_code = 404

    def __init__(self, message: str = "Not Found"):
        self.message = message
        super().__init__(message)
