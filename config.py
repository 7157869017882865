import os
from dotenv import load_dotenv
load_dotenv()

class Config:
    SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret")
    SQLALCHEMY_DATABASE_URI = os.getenv("DATABASE_URL", "sqlite:///evaluation.db")
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    AUTO_CREATE_TABLES = os.getenv("AUTO_CREATE_TABLES", "0") == "1"
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
    # identity is verified upstream by the platform gateway and forwarded as headers
    IDENTITY_USER_HEADER = os.getenv("IDENTITY_USER_HEADER", "X-User-Id")
    IDENTITY_ROLE_HEADER = os.getenv("IDENTITY_ROLE_HEADER", "X-User-Role")
    AUTHOR_ROLES = tuple(r.strip() for r in os.getenv("AUTHOR_ROLES", "admin,recruiter").split(",") if r.strip())


class TestConfig(Config):
    TESTING = True
    SQLALCHEMY_DATABASE_URI = "sqlite://"
    AUTO_CREATE_TABLES = True
    LOG_LEVEL = "DEBUG"
