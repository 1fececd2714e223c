"""Parameterized SQL access used by every route handler.

Statements are written with positional ``?`` placeholders and a list of
parameters. The caller states whether the statement returns rows
(``StatementKind.QUERY``) or only changes data (``StatementKind.EXECUTE``).
Database errors are not handled here; they reach the app-level error
handler and become a 500 page.
"""

from __future__ import annotations

import enum
import itertools
import re
from dataclasses import dataclass
from typing import Any, List, Sequence, Union

from sqlalchemy import text
from sqlalchemy.engine import RowMapping
from sqlalchemy.orm import Session

# Placeholders inside quoted SQL literals are not supported; pass values as params.
_PLACEHOLDER = re.compile(r"\?")


class StatementKind(enum.Enum):
    QUERY = "query"
    EXECUTE = "execute"


@dataclass(frozen=True)
class ExecResult:
    success: bool
    rowcount: int


def bind_positional(statement: str, params: Sequence[Any]):
    """Rewrite ``?`` placeholders as named binds ``:p0, :p1, ...``."""
    counter = itertools.count()

    def _name(_match: re.Match) -> str:
        return f":p{next(counter)}"

    sql = _PLACEHOLDER.sub(_name, statement)
    used = next(counter)
    if used != len(params):
        raise ValueError(f"statement has {used} placeholders but {len(params)} params were given")

    return text(sql), {f"p{i}": value for i, value in enumerate(params)}


def query_db(
    conn: Session,
    statement: str,
    params: Sequence[Any] = (),
    kind: StatementKind = StatementKind.QUERY,
) -> Union[List[RowMapping], ExecResult]:
    clause, bound = bind_positional(statement, params)
    result = conn.execute(clause, bound)

    if kind is StatementKind.QUERY:
        return list(result.mappings().all())

    rowcount = result.rowcount
    conn.commit()
    return ExecResult(success=True, rowcount=rowcount)
