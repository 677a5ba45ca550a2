"""
Jobly 安装配置
"""
from setuptools import setup, find_packages

setup(
    name="jobly",
    version="1.0.0",
    description="职位数据访问层：参数化过滤查询与部分更新",
    author="Jobly Team",
    author_email="",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.10",
    install_requires=[
        "fastapi>=0.110",
        "uvicorn[standard]>=0.27",
        "sqlalchemy[asyncio]>=2.0",
        "sqlmodel>=0.0.16",
        "asyncpg>=0.29",
        "pydantic>=2.5",
        "pydantic-settings>=2.1",
        "loguru>=0.7",
    ],
    extras_require={
        "test": [
            "pytest>=7.4",
            "pytest-asyncio>=0.23",
            "aiosqlite>=0.19",
            "httpx>=0.26",
        ],
    },
    entry_points={
        "console_scripts": [
            "jobly-api=api.main:main",
        ],
    },
)
