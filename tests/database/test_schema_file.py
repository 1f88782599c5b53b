import re
from pathlib import Path

from mytube.database.bootstrap import _strip_create_db_and_use, iter_sql_statements

SCHEMA = Path(__file__).resolve().parents[2] / "database" / "schema.sql"


def _accounts_table() -> str:
    statements = iter_sql_statements(_strip_create_db_and_use(SCHEMA.read_text(encoding="utf-8")))
    return next(s for s in statements if re.search(r"CREATE TABLE\s+(IF NOT EXISTS\s+)?`?accounts`?", s, re.I))


def test_username_column_compares_case_sensitively():
    column = next(line for line in _accounts_table().splitlines() if line.strip().startswith("username"))

    assert "COLLATE utf8mb4_bin" in column


def test_username_is_unique():
    assert re.search(r"UNIQUE[^,]*username", _accounts_table(), re.I)
