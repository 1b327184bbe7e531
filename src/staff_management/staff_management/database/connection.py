from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import mysql.connector


@dataclass
class DBConfig:
    host: str
    port: int
    user: str
    password: str
    database: str
    pool_size: int = 0


class DatabaseConnection:
    """Connection factory shared by every repository.

    Note: Each repository operation opens a short-lived connection. With
    ``pool_size > 0`` the connections come from a mysql-connector pool and
    ``close()`` hands them back instead of disconnecting.
    """

    _instance: Optional["DatabaseConnection"] = None

    def __init__(self, config: DBConfig):
        self._config = config

    @property
    def config(self) -> DBConfig:
        return self._config

    @classmethod
    def get_instance(cls, config: DBConfig) -> "DatabaseConnection":
        if cls._instance is None:
            cls._instance = DatabaseConnection(config)
        return cls._instance

    def connect(self):
        kwargs = dict(
            host=self._config.host,
            port=int(self._config.port),
            user=self._config.user,
            password=self._config.password,
            database=self._config.database,
        )
        if self._config.pool_size > 0:
            kwargs.update(pool_name="staff_management", pool_size=int(self._config.pool_size))
        return mysql.connector.connect(**kwargs)
