from __future__ import annotations

from datetime import date

from flask import Blueprint
from werkzeug.security import generate_password_hash

from gamestore.app.extensions import db
from gamestore.app.models import User, Publisher, VideoGame, DownloadableContent, Friend, Owned

cli_bp = Blueprint("cli", __name__, cli_group=None)


@cli_bp.cli.command("init-db")
def init_db() -> None:
    """Create tables."""
    db.create_all()
    print("DB initialized (tables created).")


@cli_bp.cli.command("seed")
def seed_data() -> None:
    """Seed minimal dev data.

    Safe to run multiple times; it will no-op if data exists.
    """
    db.create_all()

    if VideoGame.query.count() == 0:
        nintendo = Publisher(name="Nintendo")
        cdpr = Publisher(name="CD Projekt")
        db.session.add_all([nintendo, cdpr])
        db.session.flush()

        odyssey = VideoGame(
            name="Super Mario Odyssey", pub_id=nintendo.pub_id, release_date=date(2017, 10, 27),
            reviews="97", genre="Platformer", description="Cappy and Mario travel the kingdoms.",
            url="https://www.nintendo.com/games/detail/super-mario-odyssey-switch/",
        )
        kart = VideoGame(
            name="Mario Kart 8 Deluxe", pub_id=nintendo.pub_id, release_date=date(2017, 4, 28),
            reviews="92", genre="Racing", description="Kart racing with items.",
            url="https://www.nintendo.com/games/detail/mario-kart-8-deluxe-switch/",
        )
        witcher = VideoGame(
            name="The Witcher 3: Wild Hunt", pub_id=cdpr.pub_id, release_date=date(2015, 5, 19),
            reviews="93", genre="Action RPG", description="Geralt hunts for Ciri.",
            url="https://www.thewitcher.com/",
        )
        db.session.add_all([odyssey, kart, witcher])
        db.session.flush()

        db.session.add_all([
            DownloadableContent(dlc_name="Booster Course Pass", game_id=kart.game_id, release_date=date(2022, 3, 18)),
            DownloadableContent(dlc_name="Hearts of Stone", game_id=witcher.game_id, release_date=date(2015, 10, 13)),
            DownloadableContent(dlc_name="Blood and Wine", game_id=witcher.game_id, release_date=date(2016, 5, 31)),
        ])

    if not User.query.filter_by(username="player1").first():
        p1 = User(username="player1", password=generate_password_hash("password1"), name="Player One", email="player1@example.com")
        p2 = User(username="player2", password=generate_password_hash("password2"), name="Player Two", email="player2@example.com")
        db.session.add_all([p1, p2])
        db.session.flush()

        db.session.add(Friend(user_id1=p1.user_id, user_id2=p2.user_id))
        for game in VideoGame.query.order_by(VideoGame.game_id.asc()).limit(2).all():
            db.session.add(Owned(user_id=p1.user_id, game_id=game.game_id))

    db.session.commit()
    print("Seed complete. Login: player1 / password1")
