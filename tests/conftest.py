import os
import sys
import tempfile
from pathlib import Path

import pytest


# Ensure the project root (repo folder) is importable when running pytest under uv.
PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

# The application is defined as a global in ean_eic_checker/__init__.py and reads
# configuration from environment variables at import time, so the environment has
# to be in place before any test module imports the package.
_DATA_DIR = Path(tempfile.mkdtemp(prefix="ean_eic_checker_data_"))

os.environ["APP_MODE"] = "config.DevConfig"
os.environ["SECRET_KEY"] = "test-secret-key"
os.environ["APP_SERVER_OS"] = "Linux"

# Force temp persistence so tests never touch the developer's real data.
os.environ["EAN_EIC_CHECKER_FOLDER"] = str(_DATA_DIR)
os.environ["EAN_EIC_CHECKER_DB_FILE_NAME"] = "test.sqlite"
os.environ["EAN_EIC_CHECKER_LOG_FILE"] = str(_DATA_DIR / "test.log")
os.environ["RECORD_CHECKS"] = "true"


@pytest.fixture(scope="session")
def app():
    import ean_eic_checker  # noqa: E402

    return ean_eic_checker.app


@pytest.fixture()
def client(app):
    return app.test_client()


@pytest.fixture()
def db(app):
    import ean_eic_checker  # noqa: E402

    with app.app_context():
        from ean_eic_checker.models import CodeCheck

        ean_eic_checker.db.session.query(CodeCheck).delete()
        ean_eic_checker.db.session.commit()
        yield ean_eic_checker.db
        ean_eic_checker.db.session.remove()
