"""
Pydantic schemas for request/response validation
"""
from .job import (
    CompanyRead,
    Job,
    JobCreate,
    JobDeletedResponse,
    JobDetail,
    JobDetailResponse,
    JobFilter,
    JobListResponse,
    JobResponse,
    JobUpdate,
)

__all__ = [
    "CompanyRead",
    "Job",
    "JobCreate",
    "JobDeletedResponse",
    "JobDetail",
    "JobDetailResponse",
    "JobFilter",
    "JobListResponse",
    "JobResponse",
    "JobUpdate",
]
