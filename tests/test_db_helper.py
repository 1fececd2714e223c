import pytest
from sqlalchemy.exc import SQLAlchemyError

from gamestore.app.common.db import ExecResult, StatementKind, bind_positional, query_db
from gamestore.app.extensions import db


def test_bind_positional_numbers_placeholders():
    clause, params = bind_positional("select * from users where username = ? and email = ?", ["a", "b"])
    assert ":p0" in str(clause) and ":p1" in str(clause)
    assert params == {"p0": "a", "p1": "b"}


def test_bind_positional_rejects_count_mismatch():
    with pytest.raises(ValueError):
        bind_positional("select * from users where username = ?", [])
    with pytest.raises(ValueError):
        bind_positional("select * from users", ["extra"])


def test_execute_then_query(app):
    with app.app_context():
        result = query_db(
            db.session,
            "insert into users (name, username, password, email) values (?, ?, ?, ?)",
            ["Dana", "dana99", "not-a-real-hash", "dana@example.com"],
            kind=StatementKind.EXECUTE,
        )
        assert result == ExecResult(success=True, rowcount=1)

        rows = query_db(db.session, "select username, email from users where username = ?", ["dana99"])
        assert len(rows) == 1
        assert rows[0]["email"] == "dana@example.com"


def test_query_kind_does_not_depend_on_sql_text(app):
    # Leading whitespace and a CTE would have fooled prefix sniffing
    with app.app_context():
        rows = query_db(db.session, "  with t as (select ? as v) select v from t", [7], kind=StatementKind.QUERY)
        assert rows[0]["v"] == 7


def test_query_with_no_rows_returns_empty_list(app):
    with app.app_context():
        assert query_db(db.session, "select user_id from users where username = ?", ["ghost"]) == []


def test_database_errors_propagate(app):
    with app.app_context():
        with pytest.raises(SQLAlchemyError):
            query_db(db.session, "select * from no_such_table where id = ?", [1])
