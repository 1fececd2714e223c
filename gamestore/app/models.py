from __future__ import annotations

from sqlalchemy import Index

from gamestore.app.extensions import db


class User(db.Model):
    __tablename__ = "users"

    user_id = db.Column(db.Integer, primary_key=True)
    username = db.Column(db.String(100), nullable=False, unique=True, index=True)
    password = db.Column(db.String(255), nullable=False)  # werkzeug hash, never plaintext
    name = db.Column(db.String(200), nullable=False)
    email = db.Column(db.String(255), nullable=True)


class Publisher(db.Model):
    __tablename__ = "publishers"

    pub_id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(200), nullable=False)

    games = db.relationship("VideoGame", backref="publisher", lazy=True)


class VideoGame(db.Model):
    __tablename__ = "video_game"

    game_id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(255), nullable=False, index=True)
    pub_id = db.Column(db.Integer, db.ForeignKey("publishers.pub_id"), nullable=False, index=True)
    release_date = db.Column(db.Date, nullable=True)
    reviews = db.Column(db.String(100), nullable=True)
    description = db.Column(db.Text, nullable=True)
    genre = db.Column(db.String(100), nullable=True)
    url = db.Column(db.String(1024), nullable=True)

    dlcs = db.relationship("DownloadableContent", backref="game", lazy=True, cascade="all, delete-orphan")


class DownloadableContent(db.Model):
    __tablename__ = "downloadable_content"

    dlc_id = db.Column(db.Integer, primary_key=True)
    dlc_name = db.Column(db.String(255), nullable=False)
    game_id = db.Column(db.Integer, db.ForeignKey("video_game.game_id"), nullable=False, index=True)
    release_date = db.Column(db.Date, nullable=True)


class Friend(db.Model):
    """Undirected: a pair is stored once, in either column order."""

    __tablename__ = "friend"

    user_id1 = db.Column(db.Integer, db.ForeignKey("users.user_id"), primary_key=True)
    user_id2 = db.Column(db.Integer, db.ForeignKey("users.user_id"), primary_key=True)

    __table_args__ = (
        Index("ix_friend_user_id2", "user_id2"),
    )


class Owned(db.Model):
    __tablename__ = "owned"

    user_id = db.Column(db.Integer, db.ForeignKey("users.user_id"), primary_key=True)
    game_id = db.Column(db.Integer, db.ForeignKey("video_game.game_id"), primary_key=True)
