from __future__ import annotations

from flask import Blueprint, render_template

from gamestore.app.common.context import Scope, with_scope
from gamestore.app.common.db import query_db
from gamestore.app.common.forms import search_form

bp = Blueprint("catalog", __name__)

ITEM_QUERY = """
    select v.name as vname, p.name as pname, v.release_date, v.reviews,
           v.description, v.genre, v.url
    from video_game v
    inner join publishers p on v.pub_id = p.pub_id
    where v.game_id = ?
"""

NAME_QUERY = """
    select game_id, name, release_date, url
    from video_game
    where lower(name) like lower(?)
    order by name
"""

GENRE_QUERY = """
    select game_id, name, release_date, reviews, genre, url
    from video_game
    where lower(genre) like lower(?)
    order by name
"""

DLC_QUERY = """
    select d.dlc_name as dname, v.game_id, v.name as vname, p.name as pname,
           d.release_date as drelease_date
    from downloadable_content d
    inner join video_game v on d.game_id = v.game_id
    inner join publishers p on p.pub_id = v.pub_id
    where lower(v.name) like lower(?)
    order by v.name, d.dlc_name
"""


def contains(term: str) -> str:
    """LIKE pattern for a substring match."""
    return f"%{term}%"


@bp.get("/item/<int:game_id>")
@with_scope
def item(scope: Scope, game_id: int):
    results = query_db(scope.conn, ITEM_QUERY, [game_id])
    if not results:
        return render_template("404.html"), 404

    return render_template("pages/item.html", pageTitle=results[0]["vname"], results=results)


@bp.route("/search", methods=["GET", "POST"])
@with_scope
def search(scope: Scope):
    form = search_form("Search")
    results = []
    if form.is_valid():
        results = query_db(scope.conn, NAME_QUERY, [contains(form.data["search"])])

    return render_template("pages/search.html", pageTitle="Search", form=form, results=results)


@bp.route("/searchDlc", methods=["GET", "POST"])
@with_scope
def search_dlc(scope: Scope):
    form = search_form("Search DLC")
    results = []
    msg = ""
    if form.is_valid():
        results = query_db(scope.conn, DLC_QUERY, [contains(form.data["search"])])
        if not results:
            msg = "No results"

    return render_template("pages/search_dlc.html", pageTitle="Search DLC", form=form, results=results, msg=msg)


@bp.route("/genreSearch", methods=["GET", "POST"])
@with_scope
def genre_search(scope: Scope):
    form = search_form("Genre Search")
    results = []
    if form.is_valid():
        results = query_db(scope.conn, GENRE_QUERY, [contains(form.data["search"])])

    return render_template("pages/genre_search.html", pageTitle="Genre Search", form=form, results=results)
