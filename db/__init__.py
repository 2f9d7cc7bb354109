from .client import DatabaseError, QueryExecutor, connect_databricks, connect_mysql, default_connect

__all__ = [
    "DatabaseError",
    "QueryExecutor",
    "connect_databricks",
    "connect_mysql",
    "default_connect",
]
