"""Per-request handle passed explicitly into route handlers.

Handlers never read the Flask session or the database session directly;
``with_scope`` builds a ``Scope`` for the current request and hands it in
as the first argument.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import wraps
from typing import Any, Callable, Optional, TypeVar

from flask import session
from flask.sessions import SessionMixin
from sqlalchemy.orm import Session

from gamestore.app.extensions import db

F = TypeVar("F", bound=Callable[..., Any])


@dataclass
class Scope:
    session: SessionMixin
    conn: Session

    @property
    def is_user(self) -> bool:
        return bool(self.session.get("is_user"))

    @property
    def user(self) -> str:
        return self.session.get("user") or ""

    @property
    def cnum(self) -> Optional[int]:
        return self.session.get("cnum")

    def sign_in(self, username: str, user_id: int) -> None:
        self.session["is_user"] = True
        self.session["user"] = username
        self.session["cnum"] = user_id

    def sign_out(self) -> None:
        self.session.clear()


def current_scope() -> Scope:
    return Scope(session=session, conn=db.session)


def with_scope(fn: F) -> F:
    @wraps(fn)
    def wrapper(*args, **kwargs):
        return fn(current_scope(), *args, **kwargs)

    return wrapper  # type: ignore
