from __future__ import annotations

from pathlib import Path

from src.staff_management.staff_management.database.bootstrap import split_sql_statements, strip_create_db_and_use

REPO_ROOT = Path(__file__).resolve().parents[2]


def test_splits_on_semicolons_outside_quotes():
    sql = "INSERT INTO t VALUES ('a;b'); INSERT INTO t VALUES (\"c;d\");SELECT 1"

    assert list(split_sql_statements(sql)) == [
        "INSERT INTO t VALUES ('a;b')",
        'INSERT INTO t VALUES ("c;d")',
        "SELECT 1",
    ]


def test_escaped_quotes_do_not_end_the_string():
    sql = r"INSERT INTO t VALUES ('it\'s; fine'); SELECT 2;"

    assert list(split_sql_statements(sql)) == [r"INSERT INTO t VALUES ('it\'s; fine')", "SELECT 2"]


def test_line_comments_are_dropped_but_dashes_in_strings_kept():
    sql = "-- header; with semicolon\nINSERT INTO t VALUES ('555-0101'); -- trailing\n"

    assert list(split_sql_statements(sql)) == ["INSERT INTO t VALUES ('555-0101')"]


def test_create_database_and_use_are_removed():
    sql = "CREATE DATABASE IF NOT EXISTS x;\nUSE x;\nCREATE TABLE a (id INT);"

    assert list(split_sql_statements(strip_create_db_and_use(sql))) == ["CREATE TABLE a (id INT)"]


def test_schema_file_defines_every_table():
    sql = strip_create_db_and_use((REPO_ROOT / "database" / "schema.sql").read_text(encoding="utf-8"))
    statements = list(split_sql_statements(sql))

    created = [s.split("(")[0].split()[-1] for s in statements if s.upper().startswith("CREATE TABLE")]
    assert created == ["users", "books", "members", "employees", "shifts", "employee_shifts", "borrowed_books"]
    assert all("row_version" in s for s in statements if "CREATE TABLE" in s and "users" not in s.split("(")[0])
