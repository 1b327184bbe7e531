from __future__ import annotations

import dataclasses
from contextlib import contextmanager
from typing import Any, Dict, Generic, List, Optional, Sequence, TypeVar

import mysql.connector
from mysql.connector import errorcode

from ..core.exceptions import DuplicateKeyError, MissingReferenceError
from .connection import DatabaseConnection

T = TypeVar("T")


@contextmanager
def db_cursor(conn_factory: DatabaseConnection, *, dictionary: bool = True):
    conn = conn_factory.connect()
    try:
        cur = conn.cursor(dictionary=dictionary)
        try:
            yield conn, cur
            conn.commit()
        finally:
            cur.close()
    except mysql.connector.IntegrityError as e:
        conn.rollback()
        if e.errno == errorcode.ER_DUP_ENTRY:
            raise DuplicateKeyError(e.msg) from e
        if e.errno in (errorcode.ER_NO_REFERENCED_ROW, errorcode.ER_NO_REFERENCED_ROW_2):
            raise MissingReferenceError(e.msg) from e
        raise
    except Exception:
        conn.rollback()
        raise
    finally:
        conn.close()


def fetchone(cur) -> Optional[Dict[str, Any]]:
    row = cur.fetchone()
    return row if row else None


def fetchall(cur) -> List[Dict[str, Any]]:
    rows = cur.fetchall()
    return list(rows or [])


class MySQLEntityRepository(Generic[T]):
    """Table-driven CRUD over one entity table.

    Subclasses declare the table, its key column and the mutable columns (in
    the order ``_to_params`` returns them) and map rows back into models.
    Every table carries a ``row_version`` column for optimistic concurrency.
    """

    table: str = ""
    key_column: str = ""
    columns: Sequence[str] = ()

    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def _to_model(self, row: Dict[str, Any]) -> T:
        raise NotImplementedError

    def _to_params(self, entity: T) -> tuple:
        raise NotImplementedError

    def _select_sql(self) -> str:
        cols = ", ".join([self.key_column, *self.columns, "row_version"])
        return f"SELECT {cols} FROM {self.table}"

    def _query(self, where: str = "", params: tuple = ()) -> List[T]:
        sql = self._select_sql()
        if where:
            sql += f" WHERE {where}"
        sql += f" ORDER BY {self.table}.{self.key_column}"
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(sql, params)
            return [self._to_model(r) for r in fetchall(cur)]

    def list_all(self) -> Sequence[T]:
        return self._query()

    def get_by_id(self, entity_id: int) -> Optional[T]:
        rows = self._query(f"{self.table}.{self.key_column}=%s", (int(entity_id),))
        return rows[0] if rows else None

    def create(self, entity: T) -> T:
        cols = ", ".join([*self.columns, "row_version"])
        marks = ", ".join(["%s"] * len(self.columns) + ["1"])
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"INSERT INTO {self.table}({cols}) VALUES({marks})",
                self._to_params(entity),
            )
            new_id = int(cur.lastrowid)
        return dataclasses.replace(entity, **{self.key_column: new_id, "version": 1})

    def update(self, entity: T, *, expected_version: int) -> bool:
        assignments = ", ".join(f"{c}=%s" for c in self.columns)
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                UPDATE {self.table}
                SET {assignments}, row_version=row_version+1
                WHERE {self.key_column}=%s AND row_version=%s
                """,
                (*self._to_params(entity), int(getattr(entity, self.key_column)), int(expected_version)),
            )
            return cur.rowcount > 0

    def delete_by_id(self, entity_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"DELETE FROM {self.table} WHERE {self.key_column}=%s", (int(entity_id),))
            return cur.rowcount > 0
