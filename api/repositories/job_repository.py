"""
职位数据仓储 (Job Repository)

封装所有职位相关的数据库操作，管理会话生命周期
每个方法内部创建短生命周期会话，用完即释放
"""

import time
from contextlib import asynccontextmanager
from typing import Any, Dict, List, Mapping, Optional, Type, TypeVar, Union

from pydantic import BaseModel, ValidationError
from sqlalchemy import delete, insert, select, update
from loguru import logger

from core import models
from core.database import AsyncDatabaseManager
from core.exceptions import BadRequestError, NotFoundError
from core.utils.sql import sql_for_job_filter, sql_for_partial_update
from ..schemas import CompanyRead, Job, JobCreate, JobDetail, JobFilter, JobUpdate


S = TypeVar("S", bound=BaseModel)

jobs = models.Job.__table__
companies = models.Company.__table__

# 对外字段名 -> 数据库列名，未列出的字段同名
JOB_COLUMNS = {"companyHandle": "company_handle"}


def validate_payload(schema: Type[S], data: Union[S, Mapping[str, Any], None]) -> S:
    """
    用 pydantic 模型校验调用方数据

    Raises:
        BadRequestError: 校验失败，errors 中包含每一条错误
    """
    if isinstance(data, schema):
        return data
    try:
        return schema.model_validate(dict(data or {}))
    except ValidationError as e:
        errors = [
            f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}"
            for err in e.errors()
        ]
        raise BadRequestError("invalid data", errors=errors) from e


def public_field_names(schema: Type[BaseModel]) -> Dict[str, str]:
    """属性名与别名 -> 对外字段名"""
    names = {}
    for name, info in schema.model_fields.items():
        public = info.alias or name
        names[name] = public
        names[public] = public
    return names


class JobRepository:
    """
    职位数据仓储

    数据库管理器通过构造函数注入；所有方法都是独立的数据库事务
    """

    def __init__(self, db: AsyncDatabaseManager):
        self.db = db

    @asynccontextmanager
    async def _session(self):
        """统一的会话管理上下文，记录耗时与失败"""
        start_time = time.perf_counter()
        async with self.db.get_session() as session:
            try:
                yield session
                duration = time.perf_counter() - start_time
                logger.debug(f"[{type(self).__name__}] DB操作耗时: {duration:.3f}s")
            except NotFoundError:
                raise
            except Exception as e:
                logger.error(f"[{type(self).__name__}] DB操作失败: {e!r}")
                raise

    async def create(self, data: Union[JobCreate, Mapping[str, Any]]) -> Job:
        """
        创建职位

        不预先检查重复；外键等约束冲突由数据库报错并原样抛出

        Args:
            data: {title, salary?, equity?, companyHandle}

        Returns:
            新建的职位（包含数据库分配的 id）

        Raises:
            BadRequestError: 数据校验失败
        """
        job_in = validate_payload(JobCreate, data)

        async with self._session() as session:
            result = await session.execute(
                insert(jobs).values(**job_in.model_dump()).returning(*jobs.c)
            )
            job = Job.model_validate(dict(result.mappings().one()))

        logger.debug(f"职位已创建: id={job.id}")
        return job

    async def find_all(
        self, filters: Union[JobFilter, Mapping[str, Any], None] = None
    ) -> List[Job]:
        """
        查询职位列表，按标题升序

        Args:
            filters: 可选的 {title, minSalary, hasEquity}

        Returns:
            职位列表快照

        Raises:
            BadRequestError: 过滤条件不合法（在发出查询之前）
        """
        job_filter = validate_payload(JobFilter, filters)
        where = sql_for_job_filter(
            title=job_filter.title,
            min_salary=job_filter.min_salary,
            has_equity=job_filter.has_equity,
        )

        query = select(jobs)
        if where:
            query = query.where(where.expression)
        query = query.order_by(jobs.c.title)

        async with self._session() as session:
            result = await session.execute(query)
            return [Job.model_validate(dict(row)) for row in result.mappings().all()]

    async def get(self, job_id: int) -> JobDetail:
        """
        根据ID获取职位详情，并嵌入所属公司信息

        职位与公司分两次查询，两次读取之间公司被修改视为可接受的读偏斜

        Raises:
            NotFoundError: 职位不存在
        """
        async with self._session() as session:
            result = await session.execute(select(jobs).where(jobs.c.id == job_id))
            job_row = result.mappings().first()
            if job_row is None:
                raise NotFoundError(f"No job: {job_id}")

            result = await session.execute(
                select(companies).where(companies.c.handle == job_row["company_handle"])
            )
            company_row = result.mappings().first()

        job = dict(job_row)
        job.pop("company_handle")
        company: Optional[CompanyRead] = None
        if company_row is not None:
            company = CompanyRead.model_validate(dict(company_row))
        return JobDetail(**job, company=company)

    async def update(self, job_id: int, data: Mapping[str, Any]) -> Job:
        """
        部分更新职位，只修改传入的字段

        字段可以是 {title, salary, equity, companyHandle}（也接受 company_handle），
        SET 子句按 data 的键顺序生成

        Returns:
            更新后的职位（不嵌入公司信息）

        Raises:
            BadRequestError: 数据为空或校验失败
            NotFoundError: 职位不存在
        """
        if not isinstance(data, Mapping):
            raise TypeError("update data must be a mapping")

        job_update = validate_payload(JobUpdate, data)
        values = job_update.model_dump(exclude_unset=True, by_alias=True)
        public_names = public_field_names(JobUpdate)
        ordered = {public_names[key]: values[public_names[key]] for key in data}

        set_clause = sql_for_partial_update(ordered, jobs, JOB_COLUMNS)

        async with self._session() as session:
            result = await session.execute(
                update(jobs)
                .where(jobs.c.id == job_id)
                .ordered_values(*set_clause.assignments)
                .returning(*jobs.c)
            )
            row = result.mappings().first()
            if row is None:
                raise NotFoundError(f"No job: {job_id}")
            job = Job.model_validate(dict(row))

        logger.debug(f"职位已更新: id={job_id}, fields={set_clause.columns}")
        return job

    async def remove(self, job_id: int) -> None:
        """
        删除职位（永久删除）

        Raises:
            NotFoundError: 职位不存在
        """
        async with self._session() as session:
            result = await session.execute(
                delete(jobs).where(jobs.c.id == job_id).returning(jobs.c.id)
            )
            if result.first() is None:
                raise NotFoundError(f"No job: {job_id}")

        logger.debug(f"职位已删除: id={job_id}")
