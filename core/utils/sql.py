"""
作业查询条件与部分更新的 SQLAlchemy 表达式构造工具

调用方的数据只作为绑定参数进入语句，列名一律从表定义中解析。
params 按语句中占位符出现的顺序排列。
"""
from dataclasses import dataclass, field
from typing import Any, List, Mapping, Optional, Tuple

from sqlalchemy import Column, Table, and_
from sqlalchemy.sql.elements import ColumnElement

from core.exceptions import BadRequestError
from core.models import Job


jobs_table: Table = Job.__table__


@dataclass(frozen=True)
class WhereClause:
    """
    WHERE 条件：各条件按 AND 连接

    Attributes:
        conditions: 条件表达式列表，为空表示不过滤
    """

    conditions: List[ColumnElement] = field(default_factory=list)

    def __bool__(self) -> bool:
        return bool(self.conditions)

    @property
    def expression(self) -> Optional[ColumnElement]:
        """合并后的条件表达式，没有条件时为 None"""
        if not self.conditions:
            return None
        return and_(*self.conditions)

    @property
    def params(self) -> List[Any]:
        """按占位符顺序排列的绑定参数"""
        if not self.conditions:
            return []
        return list(self.expression.compile().params.values())


@dataclass(frozen=True)
class SetClause:
    """
    UPDATE 的 SET 赋值：(列, 新值) 按调用方顺序排列

    配合 Update.ordered_values() 使用，保证 SET 子句顺序与 assignments 一致
    """

    assignments: List[Tuple[Column, Any]] = field(default_factory=list)

    @property
    def columns(self) -> List[str]:
        return [column.name for column, _ in self.assignments]

    @property
    def params(self) -> List[Any]:
        """按 SET 顺序排列的新值，记录 ID 由调用方的 WHERE 追加在最后"""
        return [value for _, value in self.assignments]


def sql_for_job_filter(
    title: Optional[str] = None,
    min_salary: Optional[int] = None,
    has_equity: Optional[bool] = None,
) -> WhereClause:
    """
    将作业搜索条件转换为 WHERE 条件

    条件按 title、min_salary、has_equity 的顺序生成，每个条件贡献一个参数。
    没有任何条件时返回空的 WhereClause。

    Args:
        title: 标题子串，大小写不敏感，% 和 _ 按字面匹配
        min_salary: 最低薪资，不能为负数
        has_equity: 仅当为 True 时要求 equity > 0；False 与 None 一样不过滤

    Returns:
        WhereClause

    Raises:
        BadRequestError: min_salary 为负数
    """
    if min_salary is not None and min_salary < 0:
        raise BadRequestError("invalid filter constraint")

    conditions: List[ColumnElement] = []

    if title is not None:
        conditions.append(jobs_table.c.title.icontains(title, autoescape=True))

    if min_salary is not None:
        conditions.append(jobs_table.c.salary >= min_salary)

    if has_equity is True:
        conditions.append(jobs_table.c.equity > 0)

    return WhereClause(conditions)


def sql_for_partial_update(
    data: Mapping[str, Any],
    table: Table,
    column_names: Optional[Mapping[str, str]] = None,
) -> SetClause:
    """
    将部分更新数据转换为 SET 赋值

    例如 {"companyHandle": "acme", "salary": 10} 配合 {"companyHandle": "company_handle"}
    得到 [(jobs.c.company_handle, "acme"), (jobs.c.salary, 10)]。
    赋值顺序与 data 的插入顺序一致。

    Args:
        data: 字段名 -> 新值
        table: 被更新的表
        column_names: 字段名 -> 列名的映射，未列出的字段按原名使用

    Returns:
        SetClause

    Raises:
        BadRequestError: data 为空，或字段不对应表中的非主键列
    """
    if not data:
        raise BadRequestError("no data")

    column_names = column_names or {}
    assignments: List[Tuple[Column, Any]] = []

    for key, value in data.items():
        column = table.c.get(column_names.get(key, key))
        if column is None or column.primary_key:
            raise BadRequestError(f"invalid field: {key}")
        assignments.append((column, value))

    return SetClause(assignments)
