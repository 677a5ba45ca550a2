"""
Jobly 核心：配置、数据库、异常与工具
"""
