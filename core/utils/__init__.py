"""
Utility modules for Jobly
"""
from .logger import setup_logger
from .sql import SetClause, WhereClause, sql_for_job_filter, sql_for_partial_update

__all__ = [
    "setup_logger",
    "SetClause",
    "WhereClause",
    "sql_for_job_filter",
    "sql_for_partial_update",
]
