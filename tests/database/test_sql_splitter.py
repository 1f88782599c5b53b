from mytube.database.bootstrap import _strip_create_db_and_use, iter_sql_statements
from mytube.database.connection import DBConfig


def test_splits_on_semicolons():
    sql = "CREATE TABLE a (x INT);\nCREATE TABLE b (y INT);"

    assert list(iter_sql_statements(sql)) == ["CREATE TABLE a (x INT)", "CREATE TABLE b (y INT)"]


def test_keeps_semicolons_inside_quotes():
    sql = "INSERT INTO t VALUES ('a;b');INSERT INTO t VALUES (\"c;d\")"

    assert list(iter_sql_statements(sql)) == ["INSERT INTO t VALUES ('a;b')", 'INSERT INTO t VALUES ("c;d")']


def test_drops_line_comments():
    sql = "-- header; with semicolon\nCREATE TABLE a (x INT); -- trailing\nCREATE TABLE b (y INT);"

    assert list(iter_sql_statements(sql)) == ["CREATE TABLE a (x INT)", "CREATE TABLE b (y INT)"]


def test_strips_create_database_and_use():
    sql = "CREATE DATABASE IF NOT EXISTS mytube;\nUSE mytube;\nCREATE TABLE a (x INT);"

    assert list(iter_sql_statements(_strip_create_db_and_use(sql))) == ["CREATE TABLE a (x INT)"]


def test_db_config_from_mapping_and_describe():
    config = DBConfig.from_mapping({"host": "db", "port": "3307", "user": "u", "password": "p", "database": "d"})

    assert config.port == 3307
    assert config.describe() == "u@db:3307/d"


def test_drops_hash_comments():
    sql = "# setup; first\nCREATE TABLE a (x INT); # trailing; note\nCREATE TABLE b (y INT);"

    assert list(iter_sql_statements(sql)) == ["CREATE TABLE a (x INT)", "CREATE TABLE b (y INT)"]


def test_drops_block_comments():
    sql = "/* header; spans\n lines; */\nCREATE TABLE a (x /* inline; */ INT);\nCREATE TABLE b (y INT);"

    assert list(iter_sql_statements(sql)) == ["CREATE TABLE a (x   INT)", "CREATE TABLE b (y INT)"]


def test_comment_markers_inside_quotes_are_kept():
    sql = "INSERT INTO t VALUES ('#1; -- not /* a */ comment');CREATE TABLE a (x INT)"

    assert list(iter_sql_statements(sql)) == [
        "INSERT INTO t VALUES ('#1; -- not /* a */ comment')",
        "CREATE TABLE a (x INT)",
    ]


def test_unterminated_block_comment_ends_input():
    sql = "CREATE TABLE a (x INT); /* never closed; DROP TABLE a;"

    assert list(iter_sql_statements(sql)) == ["CREATE TABLE a (x INT)"]
