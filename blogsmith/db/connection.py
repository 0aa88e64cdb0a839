"""Database connection management."""

from contextlib import contextmanager
from typing import Any, Dict, Generator

import psycopg
from psycopg.conninfo import make_conninfo
from psycopg.rows import dict_row
from psycopg_pool import ConnectionPool

_pools: Dict[str, ConnectionPool] = {}


def build_conninfo(config: Dict[str, Any]) -> str:
    """
    Build a libpq connection string from a resolved ``postgres`` section.

    The password is expected to be resolved already (see
    ``Config.get_db_config``); an empty password is left out so libpq can
    fall back to ``.pgpass`` or ``PGPASSWORD``.
    """
    params = {
        "host": config.get("host") or "localhost",
        "port": config.get("port") or 5432,
        "dbname": config.get("database") or "blogsmith",
        "user": config.get("user") or "blogsmith",
    }
    if config.get("password"):
        params["password"] = config["password"]
    return make_conninfo(**params)


def get_connection_pool(config: Dict[str, Any]) -> ConnectionPool:
    """Get or create the pool for this database."""
    conninfo = build_conninfo(config)
    pool = _pools.get(conninfo)
    if pool is None:
        pool = ConnectionPool(
            conninfo,
            min_size=1,
            max_size=10,
            kwargs={"row_factory": dict_row},
            open=True,
        )
        _pools[conninfo] = pool
    return pool


def close_connection_pool() -> None:
    """Close every pool opened by this process."""
    while _pools:
        _, pool = _pools.popitem()
        pool.close()


@contextmanager
def get_connection(config: Dict[str, Any]) -> Generator[psycopg.Connection, None, None]:
    """Get a database connection from the pool."""
    with get_connection_pool(config).connection() as conn:
        yield conn
