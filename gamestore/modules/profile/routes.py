from __future__ import annotations

from flask import Blueprint, render_template

from gamestore.app.common.context import Scope, with_scope
from gamestore.app.common.db import query_db

bp = Blueprint("profile", __name__)

# Friendship is stored once per pair, so both columns are searched.
FRIENDS_QUERY = """
    select u.name, u.username, u.email from friend f
    inner join users u on u.user_id = f.user_id1
    where f.user_id2 = ?
    union
    select u.name, u.username, u.email from friend f
    inner join users u on u.user_id = f.user_id2
    where f.user_id1 = ?
"""

OWNED_QUERY = """
    select v.game_id, v.name, v.release_date, v.reviews, v.url from owned o
    inner join video_game v on o.game_id = v.game_id
    where o.user_id = ?
    order by v.name
"""


def friends_of(scope: Scope, user_id: int):
    return query_db(scope.conn, FRIENDS_QUERY, [user_id, user_id])


def owned_by(scope: Scope, user_id: int):
    return query_db(scope.conn, OWNED_QUERY, [user_id])


@bp.route("/profile", methods=["GET", "POST"])
@with_scope
def profile(scope: Scope):
    friends = []
    collection = []
    if scope.is_user:
        friends = friends_of(scope, scope.cnum)
        collection = owned_by(scope, scope.cnum)

    return render_template(
        "pages/profile.html",
        pageTitle="Profile",
        user=scope.user,
        friends=friends,
        collection=collection,
    )
