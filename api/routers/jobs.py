"""
职位管理 API 端点

请求数据以原始字典交给仓储，由仓储统一校验（失败返回 400）
"""

from typing import Any, Dict

from fastapi import APIRouter, Body, Depends, Request, status
from loguru import logger

from ..decorators.error_handler import handle_api_errors
from ..dependencies import get_job_repository
from ..repositories import JobRepository
from ..schemas import (
    JobDeletedResponse,
    JobDetailResponse,
    JobListResponse,
    JobResponse,
)


router = APIRouter(prefix="/jobs", tags=["jobs"])


@router.post("", response_model=JobResponse, status_code=status.HTTP_201_CREATED)
@handle_api_errors
async def create_job(
    payload: Dict[str, Any] = Body(...),
    repo: JobRepository = Depends(get_job_repository),
) -> JobResponse:
    """
    创建职位

    请求体: { title, salary?, equity?, companyHandle }

    Returns:
        { job: { id, title, salary, equity, companyHandle } }
    """
    job = await repo.create(payload)
    logger.info(f"Job {job.id} created")
    return JobResponse(job=job)


@router.get("", response_model=JobListResponse)
@handle_api_errors
async def list_jobs(
    request: Request, repo: JobRepository = Depends(get_job_repository)
) -> JobListResponse:
    """
    查询职位列表，按标题升序

    可选查询参数:
    - title: 标题子串（大小写不敏感）
    - minSalary: 最低薪资
    - hasEquity: 为 true 时只返回 equity > 0 的职位
    """
    jobs = await repo.find_all(dict(request.query_params))
    return JobListResponse(jobs=jobs)


@router.get("/{job_id}", response_model=JobDetailResponse)
@handle_api_errors
async def get_job(
    job_id: int, repo: JobRepository = Depends(get_job_repository)
) -> JobDetailResponse:
    """
    获取职位详情

    Returns:
        { job: { id, title, salary, equity, company } }
        其中 company 为 { handle, name, description, numEmployees, logoUrl }

    Raises:
        404: 职位未找到
    """
    job = await repo.get(job_id)
    return JobDetailResponse(job=job)


@router.patch("/{job_id}", response_model=JobResponse)
@handle_api_errors
async def update_job(
    job_id: int,
    payload: Dict[str, Any] = Body(...),
    repo: JobRepository = Depends(get_job_repository),
) -> JobResponse:
    """
    部分更新职位

    请求体可包含 { title, salary, equity, companyHandle } 中的任意字段

    Raises:
        400: 数据为空或不合法
        404: 职位未找到
    """
    job = await repo.update(job_id, payload)
    logger.info(f"Job {job_id} updated")
    return JobResponse(job=job)


@router.delete("/{job_id}", response_model=JobDeletedResponse)
@handle_api_errors
async def delete_job(
    job_id: int, repo: JobRepository = Depends(get_job_repository)
) -> JobDeletedResponse:
    """
    删除职位

    Raises:
        404: 职位未找到
    """
    await repo.remove(job_id)
    logger.info(f"Job {job_id} deleted")
    return JobDeletedResponse(deleted=job_id)
