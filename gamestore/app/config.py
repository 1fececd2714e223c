import os

from dotenv import find_dotenv, load_dotenv

# Must run before the class body below reads the environment
load_dotenv(find_dotenv(usecwd=True))


class Config:
    SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret")
    SQLALCHEMY_DATABASE_URI = os.getenv("DATABASE_URL", "sqlite:///gamestore.db")
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
    # Optional; keeps a development log next to the console output
    LOG_FILE = os.getenv("LOG_FILE") or None

    APP_HOST = os.getenv("APP_HOST", "0.0.0.0")
    APP_PORT = int(os.getenv("APP_PORT", "8080"))
    DEBUG = os.getenv("DEBUG", "0") == "1"

    # Form constraints
    MIN_USERNAME_LENGTH = 5
    MIN_PASSWORD_LENGTH = 5
