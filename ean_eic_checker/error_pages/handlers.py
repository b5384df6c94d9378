# /ean_eic_checker/error_pages/handlers.py

# Third-party imports
from flask import Blueprint, jsonify, request


# Local imports
from ean_eic_checker import app, log_message

# blueprint router configuration
error_pages = Blueprint("error_pages", __name__)


@error_pages.app_errorhandler(400)
def error_400(error):
    """Error 400 handler"""
    app.logger.warning(log_message(f"400 Error: {error.description}, URL: {request.path}"))
    return jsonify({"error": error.description}), 400


@error_pages.app_errorhandler(404)
def error_404(error):
    """Error 404 handler"""
    incoming_url = request.path
    app.logger.error(log_message(f"404 Error: {error}, URL: {incoming_url}"))
    return jsonify({"error": "Not found", "path": incoming_url}), 404


@error_pages.app_errorhandler(405)
def error_405(error):
    """Error 405 handler"""
    app.logger.warning(log_message(f"405 Error: {request.method} {request.path}"))
    return jsonify({"error": "Method not allowed"}), 405


@error_pages.app_errorhandler(500)
def error_500(error):
    """Error 500 handler"""
    app.logger.error(log_message(error))
    return jsonify({"error": "Internal server error"}), 500
