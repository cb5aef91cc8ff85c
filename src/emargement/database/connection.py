from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from threading import Lock
from typing import Optional

from mysql.connector import errors, pooling

from ..core.constants import DEFAULT_POOL_SIZE, DEFAULT_POOL_TIMEOUT_SECONDS, POOL_RETRY_INTERVAL_SECONDS

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DBConfig:
    host: str
    port: int
    user: str
    password: str
    database: str
    pool_size: int = DEFAULT_POOL_SIZE
    pool_timeout: float = DEFAULT_POOL_TIMEOUT_SECONDS

    @classmethod
    def from_dict(cls, db_config: dict) -> "DBConfig":
        return cls(
            host=str(db_config.get("host", "localhost")),
            port=int(db_config.get("port", 3306)),
            user=str(db_config.get("user", "root")),
            password=str(db_config.get("password", "")),
            database=str(db_config.get("database", "emargement")),
            pool_size=int(db_config.get("pool_size", DEFAULT_POOL_SIZE)),
            pool_timeout=float(db_config.get("pool_timeout", DEFAULT_POOL_TIMEOUT_SECONDS)),
        )

    def describe(self) -> str:
        return f"{self.user}@{self.host}:{self.port}/{self.database}"


class DatabaseConnection:
    """Connection factory backed by a MySQL connection pool.

    Each repository call borrows one pooled connection and closing it hands it
    back. When every connection is out, ``connect()`` waits up to
    ``pool_timeout`` seconds for one to come back. The pool is created lazily
    on first use so building the app does not need a reachable server.
    """

    def __init__(self, config: DBConfig, *, pool_name: str = "emargement"):
        self._config = config
        self._pool_name = pool_name
        self._pool: Optional[pooling.MySQLConnectionPool] = None
        self._pool_lock = Lock()

    @property
    def config(self) -> DBConfig:
        return self._config

    def _get_pool(self) -> pooling.MySQLConnectionPool:
        if self._pool is not None:
            return self._pool

        with self._pool_lock:
            if self._pool is None:
                logger.info("Opening MySQL pool %s (size=%d)", self._config.describe(), self._config.pool_size)
                self._pool = pooling.MySQLConnectionPool(
                    pool_name=self._pool_name,
                    pool_size=self._config.pool_size,
                    pool_reset_session=True,
                    host=self._config.host,
                    port=int(self._config.port),
                    user=self._config.user,
                    password=self._config.password,
                    database=self._config.database,
                )
        return self._pool

    def connect(self):
        pool = self._get_pool()
        deadline = time.monotonic() + self._config.pool_timeout
        while True:
            try:
                return pool.get_connection()
            except errors.PoolError:
                if time.monotonic() >= deadline:
                    logger.warning("No free MySQL connection after %.1fs", self._config.pool_timeout)
                    raise
                time.sleep(POOL_RETRY_INTERVAL_SECONDS)
