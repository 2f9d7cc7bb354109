# db/client.py
"""
Statement execution over a DB-API connection.

`QueryExecutor.execute` runs exactly the statement it is given, once, and
returns the rows as ordered column -> value dicts. Any driver failure is
re-raised as `DatabaseError` carrying the driver's message.
"""
import logging
from typing import Any, Callable, Optional

import config
from models import ResultSet

LOG = logging.getLogger(__name__)


class DatabaseError(Exception):
    """Statement could not be executed (bad SQL, permissions, connectivity, timeout)."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


def connect_databricks(timeout=config.QUERY_TIMEOUT):
    from databricks.sql import connect

    kwargs = {}
    if timeout:
        kwargs["_socket_timeout"] = timeout
    return connect(
        server_hostname=config.DATABRICKS_HOST,
        http_path=config.DATABRICKS_HTTP_PATH,
        access_token=config.DATABRICKS_TOKEN,
        **kwargs,
    )


def connect_mysql(timeout=config.QUERY_TIMEOUT):
    try:
        import mysql.connector
    except ImportError as e:
        raise DatabaseError(
            "mysql-connector-python is required for DB_BACKEND=mysql: "
            "pip install 'mysql-connector-python'"
        ) from e

    kwargs = {}
    if timeout:
        kwargs["connection_timeout"] = timeout
    return mysql.connector.connect(
        host=config.MYSQL_HOST,
        port=config.MYSQL_PORT,
        user=config.MYSQL_USER,
        password=config.MYSQL_PASSWORD,
        database=config.MYSQL_DATABASE or None,
        **kwargs,
    )


BACKENDS = {
    "databricks": connect_databricks,
    "mysql": connect_mysql,
}


def default_connect(backend: Optional[str] = None) -> Callable[..., Any]:
    backend = (backend or config.DB_BACKEND).lower()
    if backend not in BACKENDS:
        raise ValueError(f"unsupported DB_BACKEND: {backend}")
    return BACKENDS[backend]


class QueryExecutor:
    def __init__(self, connect: Optional[Callable[..., Any]] = None, timeout: int = config.QUERY_TIMEOUT):
        self._connect = connect or default_connect()
        self.timeout = timeout

    def execute(self, statement: str) -> ResultSet:
        LOG.debug("executing: %s", statement)
        try:
            conn = self._connect(timeout=self.timeout)
        except DatabaseError:
            raise
        except Exception as e:
            raise DatabaseError(str(e)) from e

        cur = None
        try:
            cur = conn.cursor()
            cur.execute(statement)
            if not cur.description:
                return []
            cols = [c[0] for c in cur.description]
            return [dict(zip(cols, row)) for row in cur.fetchall()]
        except Exception as e:
            raise DatabaseError(str(e)) from e
        finally:
            if cur is not None:
                try:
                    cur.close()
                except Exception:
                    LOG.debug("cursor close failed", exc_info=True)
            try:
                conn.close()
            except Exception:
                LOG.debug("connection close failed", exc_info=True)
