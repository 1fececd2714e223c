import os
import sys
from datetime import date

import pytest

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from werkzeug.security import generate_password_hash

from gamestore.app.config import Config
from gamestore.app.extensions import db
from gamestore.app.factory import create_app
from gamestore.app.models import User, Publisher, VideoGame, DownloadableContent, Friend, Owned


class TestingConfig(Config):
    # Use SQLite in tests for simplicity.
    TESTING = True
    SQLALCHEMY_DATABASE_URI = "sqlite:///:memory:"
    SECRET_KEY = "test-secret"
    LOG_FILE = None


@pytest.fixture()
def app():
    app = create_app(TestingConfig)

    with app.app_context():
        db.create_all()

    yield app

    with app.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture()
def client(app):
    with app.test_client() as client:
        yield client


@pytest.fixture()
def catalog(app):
    """Publishers, games and DLC; returns game ids by short name."""
    with app.app_context():
        nintendo = Publisher(name="Nintendo")
        cdpr = Publisher(name="CD Projekt")
        db.session.add_all([nintendo, cdpr])
        db.session.flush()

        games = {
            "odyssey": VideoGame(name="Super Mario Odyssey", pub_id=nintendo.pub_id, release_date=date(2017, 10, 27),
                                 reviews="97", genre="Platformer", description="Cappy and Mario.", url="https://example.com/odyssey"),
            "kart": VideoGame(name="Mario Kart 8 Deluxe", pub_id=nintendo.pub_id, release_date=date(2017, 4, 28),
                              reviews="92", genre="Racing", url="https://example.com/kart"),
            "witcher": VideoGame(name="The Witcher 3: Wild Hunt", pub_id=cdpr.pub_id, release_date=date(2015, 5, 19),
                                 reviews="93", genre="Action RPG", url="https://example.com/witcher"),
        }
        db.session.add_all(games.values())
        db.session.flush()

        db.session.add_all([
            DownloadableContent(dlc_name="Booster Course Pass", game_id=games["kart"].game_id, release_date=date(2022, 3, 18)),
            DownloadableContent(dlc_name="Hearts of Stone", game_id=games["witcher"].game_id, release_date=date(2015, 10, 13)),
        ])
        db.session.commit()

        return {key: g.game_id for key, g in games.items()}


def make_user(username, password="secret1", name=None, email=None):
    user = User(
        username=username,
        password=generate_password_hash(password),
        name=name or username.title(),
        email=email or f"{username}@example.com",
    )
    db.session.add(user)
    db.session.commit()
    return user.user_id


@pytest.fixture()
def users(app):
    """Three accounts; returns ids by username."""
    with app.app_context():
        return {name: make_user(name) for name in ("alice1", "bobby2", "carol3")}


def login(client, username, password="secret1"):
    return client.post("/login", data={"uname": username, "password": password})
