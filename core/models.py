"""
SQLModel 数据库模型
仅描述表结构，数据访问统一通过参数化语句完成
"""
from decimal import Decimal
from typing import Optional

from sqlmodel import Field, SQLModel, Column
from sqlalchemy import ForeignKey, Integer, Numeric, Text


class Company(SQLModel, table=True):
    """公司表 - 本系统只读"""

    __tablename__ = "companies"

    handle: str = Field(sa_column=Column(Text, primary_key=True), description="公司标识")
    name: str = Field(sa_column=Column(Text, nullable=False), description="公司名称")
    description: Optional[str] = Field(
        default=None, sa_column=Column(Text), description="公司简介"
    )
    num_employees: Optional[int] = Field(
        default=None, sa_column=Column(Integer), description="员工数量"
    )
    logo_url: Optional[str] = Field(
        default=None, sa_column=Column(Text), description="Logo 地址"
    )


class Job(SQLModel, table=True):
    """职位表"""

    __tablename__ = "jobs"

    id: Optional[int] = Field(
        default=None,
        sa_column=Column(Integer, primary_key=True, autoincrement=True),
        description="职位ID",
    )
    title: str = Field(sa_column=Column(Text, nullable=False), description="职位名称")
    salary: Optional[int] = Field(
        default=None, sa_column=Column(Integer), description="薪资"
    )
    equity: Optional[Decimal] = Field(
        default=None, sa_column=Column(Numeric), description="股权比例 [0, 1]"
    )
    company_handle: str = Field(
        sa_column=Column(
            Text,
            ForeignKey("companies.handle", ondelete="CASCADE"),
            nullable=False,
            index=True,
        ),
        description="所属公司标识",
    )
