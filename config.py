# config.py
"""EAN/EIC Checker - Flask Application configuration."""

# Python imports
from os import environ, path

# Third-party imports
from dotenv import load_dotenv

# Local imports

# Load environment variables from .env file
basedir = path.abspath(path.dirname(__file__))
load_dotenv(path.join(basedir, ".env"))


def _env_flag(name, default):
    value = environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


class Config:
    """Base config."""

    SECRET_KEY = environ.get("SECRET_KEY")

    # Default persistence location for local dev.
    EAN_EIC_CHECKER_FOLDER = environ.get("EAN_EIC_CHECKER_FOLDER") or path.join(basedir, "checker_data")
    EAN_EIC_CHECKER_DB_FILE_NAME = environ.get("EAN_EIC_CHECKER_DB_FILE_NAME") or "ean_eic_checker.sqlite"
    EAN_EIC_CHECKER_LOG_FILE = (
        environ.get("EAN_EIC_CHECKER_LOG_FILE")
        or path.join(EAN_EIC_CHECKER_FOLDER, "ean_eic_checker.log")
    )

    APP_SERVER_OS = environ.get("APP_SERVER_OS") or "Linux"

    # Check history
    RECORD_CHECKS = _env_flag("RECORD_CHECKS", True)
    CHECK_HISTORY_LIMIT = int(environ.get("CHECK_HISTORY_LIMIT") or 50)


class ProdConfig(Config):
    """Production System Configuration"""

    FLASK_ENV = "production"
    DEBUG = False
    TESTING = False
    LOG_LINES_TO_SHOW = "164"


class DevConfig(Config):
    """Development System Configuration"""

    FLASK_ENV = "development"
    DEBUG = True
    TESTING = True
    LOG_LINES_TO_SHOW = "164"
