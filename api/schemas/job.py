"""
职位相关数据模型

对外字段使用 camelCase 别名（companyHandle、numEmployees 等），
Python 属性与数据库列使用 snake_case
"""

from decimal import Decimal
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class CompanyRead(BaseModel):
    """嵌入在职位详情中的公司信息"""

    model_config = ConfigDict(populate_by_name=True)

    handle: str = Field(..., description="公司标识")
    name: Optional[str] = Field(None, description="公司名称")
    description: Optional[str] = Field(None, description="公司简介")
    num_employees: Optional[int] = Field(
        None, alias="numEmployees", description="员工数量"
    )
    logo_url: Optional[str] = Field(None, alias="logoUrl", description="Logo 地址")


class JobCreate(BaseModel):
    """创建职位的数据，id 由数据库生成，不允许传入"""

    model_config = ConfigDict(populate_by_name=True, extra="forbid")

    title: str = Field(..., min_length=1, description="职位名称")
    salary: Optional[int] = Field(None, ge=0, description="薪资")
    equity: Optional[Decimal] = Field(None, ge=0, le=1, description="股权比例")
    company_handle: str = Field(
        ..., alias="companyHandle", min_length=1, description="所属公司标识"
    )


class JobUpdate(BaseModel):
    """
    部分更新数据

    字段名与别名都可使用；id 与未知字段一律拒绝
    """

    model_config = ConfigDict(populate_by_name=True, extra="forbid")

    title: Optional[str] = Field(None, min_length=1)
    salary: Optional[int] = Field(None, ge=0)
    equity: Optional[Decimal] = Field(None, ge=0, le=1)
    company_handle: Optional[str] = Field(None, alias="companyHandle", min_length=1)

    @field_validator("title", "company_handle")
    @classmethod
    def validate_not_null(cls, v: Optional[str]) -> str:
        """显式传入时不能为 null"""
        if v is None:
            raise ValueError("不能为 null")
        return v


class JobFilter(BaseModel):
    """职位搜索条件，所有字段可选"""

    model_config = ConfigDict(populate_by_name=True, extra="forbid")

    title: Optional[str] = Field(None, description="标题子串（大小写不敏感）")
    min_salary: Optional[int] = Field(None, alias="minSalary", description="最低薪资")
    has_equity: Optional[bool] = Field(
        None, alias="hasEquity", description="为 true 时只返回 equity > 0 的职位"
    )


class Job(BaseModel):
    """职位"""

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "id": 1,
                "title": "Backend Engineer",
                "salary": 120000,
                "equity": "0.01",
                "companyHandle": "acme",
            }
        },
    )

    id: int = Field(..., description="职位ID")
    title: str = Field(..., description="职位名称")
    salary: Optional[int] = Field(None, description="薪资")
    equity: Optional[Decimal] = Field(None, description="股权比例")
    company_handle: str = Field(..., alias="companyHandle", description="所属公司标识")


class JobDetail(BaseModel):
    """职位详情，公司标识替换为完整的公司信息"""

    model_config = ConfigDict(populate_by_name=True)

    id: int = Field(..., description="职位ID")
    title: str = Field(..., description="职位名称")
    salary: Optional[int] = Field(None, description="薪资")
    equity: Optional[Decimal] = Field(None, description="股权比例")
    company: Optional[CompanyRead] = Field(None, description="所属公司")


class JobResponse(BaseModel):
    """单个职位响应"""

    job: Job


class JobDetailResponse(BaseModel):
    """职位详情响应"""

    job: JobDetail


class JobListResponse(BaseModel):
    """职位列表响应"""

    jobs: List[Job]


class JobDeletedResponse(BaseModel):
    """删除确认"""

    deleted: int
