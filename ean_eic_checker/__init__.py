# /__init__.py

# Python Imports
import os
import logging
import subprocess
import toml

# Third party imports
from flask import Flask, Response, jsonify, request
from flask_sqlalchemy import SQLAlchemy
from pathlib import Path
from dotenv import load_dotenv

# Local imports

# Define the WSGI application object
app = Flask(__name__)

##################################
### Load Flask Run Mode
### Configuration based
### on environment
### (Production, Development)
##################################
load_dotenv("./.env", verbose=True)
app.config.from_object(os.environ.get("APP_MODE", "config.ProdConfig"))


##################################
### Logging Setup
##################################
os.makedirs(app.config["EAN_EIC_CHECKER_FOLDER"], exist_ok=True)
logging.basicConfig(
    filename=app.config["EAN_EIC_CHECKER_LOG_FILE"],
    level=logging.INFO,
    format="%(asctime)s %(levelname)s : %(message)s",
)


def client_ip():
    """Source IP address of the current request, honouring X-Forwarded-For."""
    return (
        request.headers.get("X-Forwarded-For", request.remote_addr or "")
        .split(",")[0]
        .strip()
    )


def log_message(message):
    """Helper function to prefix Log message with the source IP address"""
    return f"[IP: {client_ip()}] {message}"


@app.route("/get-log")
def get_log():
    """Get the last x lines of the application log file."""
    app.logger.debug(log_message("Processing /get-log route..."))
    log_file_path = app.config["EAN_EIC_CHECKER_LOG_FILE"]
    lines_to_show = app.config["LOG_LINES_TO_SHOW"]
    if not os.path.exists(log_file_path):
        return jsonify({"error": "Log file not found"}), 404

    # use subprocess to call the system's tail command
    try:
        if app.config["APP_SERVER_OS"] == "Windows":
            result = subprocess.run(
                ["powershell", "Get-Content", log_file_path, "-Tail", lines_to_show],
                stdout=subprocess.PIPE,
            )
        else:
            result = subprocess.run(
                ["tail", "-n", lines_to_show, log_file_path], stdout=subprocess.PIPE
            )
        log_content = result.stdout.decode("utf-8")
    except Exception as e:
        app.logger.error(log_message(f"Error reading log file: {e}"))
        return jsonify({"error": "Error reading log file"}), 500

    return Response(log_content, mimetype="text/plain")


##################################
### Database Setup
##################################
app.config["SQLALCHEMY_DATABASE_URI"] = "sqlite:///" + os.path.join(
    app.config["EAN_EIC_CHECKER_FOLDER"], app.config["EAN_EIC_CHECKER_DB_FILE_NAME"]
)
app.config["SQLALCHEMY_TRACK_MODIFICATIONS"] = False

app.logger.info(f"EAN/EIC Checker Database URI: {app.config['SQLALCHEMY_DATABASE_URI']}")

db = SQLAlchemy(app)

# Initialize schema (idempotent) so local persistence works out of the box.
with app.app_context():
    import ean_eic_checker.models  # noqa: F401

    db.create_all()


##################################
### Routing Blueprint Setup
##################################
from ean_eic_checker.error_pages.handlers import error_pages
from ean_eic_checker.checker.views import checker


app.register_blueprint(error_pages)
app.register_blueprint(checker)


##################################
### Version / Health
##################################
def get_version():
    """Get the version of the application."""
    pyproject_path = Path(__file__).resolve().parents[1] / "pyproject.toml"
    with open(pyproject_path, "r") as f:
        pyproject_data = toml.load(f)
    return pyproject_data["project"]["version"]


@app.route("/health")
def health():
    """Liveness check reporting the application version."""
    return jsonify({"status": "ok", "version": get_version()})
