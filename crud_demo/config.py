import os

class Config:
    SQLALCHEMY_DATABASE_URI = os.getenv("DATABASE_URL", "sqlite:///app.sqlite")
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
    # Prefix of the demo session token handed out by /auth/login
    TOKEN_PREFIX = os.getenv("TOKEN_PREFIX", "dummy-token-")
