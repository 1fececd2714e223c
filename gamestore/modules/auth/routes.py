from __future__ import annotations

from flask import Blueprint, current_app, redirect, render_template, url_for
from sqlalchemy.exc import IntegrityError
from werkzeug.security import generate_password_hash, check_password_hash

from gamestore.app.common.context import Scope, with_scope
from gamestore.app.common.db import StatementKind, query_db
from gamestore.app.common.forms import login_form, register_form

bp = Blueprint("auth", __name__)

INVALID_LOGIN = "Invalid User Name or Password - Try again"
USERNAME_TAKEN = "Username already exists - Try again"


@bp.route("/login", methods=["GET", "POST"])
@with_scope
def login(scope: Scope):
    form = login_form()
    msg = ""

    if form.is_valid():
        uname = form.data["uname"]
        rows = query_db(
            scope.conn,
            "select password, user_id from users where username = ?",
            [uname],
        )
        # Exactly one account may match
        if len(rows) == 1 and check_password_hash(rows[0]["password"], form.data["password"]):
            scope.sign_in(uname, rows[0]["user_id"])
            current_app.logger.info("login ok user=%s", uname)
            return redirect(url_for("home"))

        current_app.logger.info("login failed user=%s matches=%d", uname, len(rows))
        msg = INVALID_LOGIN

    return render_template("pages/form.html", pageTitle="Login", form=form, results=msg)


@bp.route("/register", methods=["GET", "POST"])
@with_scope
def register(scope: Scope):
    form = register_form()

    if form.is_valid():
        uname = form.data["uname"]
        existing = query_db(scope.conn, "select user_id from users where username = ?", [uname])
        if existing:
            return render_template("pages/form.html", pageTitle="Register", form=form, results=USERNAME_TAKEN)

        try:
            query_db(
                scope.conn,
                "insert into users (name, username, password, email) values (?, ?, ?, ?)",
                [form.data["cname"], uname, generate_password_hash(form.data["password"]), form.data["email"]],
                kind=StatementKind.EXECUTE,
            )
        except IntegrityError:
            # lost a race with a concurrent registration of the same name
            scope.conn.rollback()
            return render_template("pages/form.html", pageTitle="Register", form=form, results=USERNAME_TAKEN)

        created = query_db(scope.conn, "select user_id from users where username = ?", [uname])

        # New accounts start signed in
        scope.sign_in(uname, created[0]["user_id"])
        current_app.logger.info("registered user=%s id=%s", uname, created[0]["user_id"])
        return redirect(url_for("home"))

    return render_template("pages/form.html", pageTitle="Register", form=form, results="")


@bp.get("/logout")
@with_scope
def logout(scope: Scope):
    scope.sign_out()
    return redirect(url_for("home"))
