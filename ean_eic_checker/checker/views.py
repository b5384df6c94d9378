from __future__ import annotations

from flask import Blueprint, abort, current_app, jsonify, request

from ean_eic_checker import db, client_ip, log_message
from ean_eic_checker.checker.codes import CheckResultCode, EanEicCode, classify
from ean_eic_checker.models import CheckChannel, CodeCheck

# blueprint router configuration
checker = Blueprint("checker", __name__, url_prefix="/api")


def _code_from_request() -> tuple[EanEicCode, CheckChannel]:
    if request.is_json:
        payload = request.get_json(silent=True)
        code = payload.get("code") if isinstance(payload, dict) else None
        # Anything other than a string is treated as no code at all.
        if not isinstance(code, str):
            code = None
        return EanEicCode(code), CheckChannel.json
    return EanEicCode(request.form.get("code")), CheckChannel.form


def _record_check(code: EanEicCode, result: CheckResultCode, channel: CheckChannel) -> None:
    if not current_app.config.get("RECORD_CHECKS", True):
        return
    try:
        check = CodeCheck(
            code_raw=code.code,
            result=result,
            family=result.family,
            channel=channel,
            client_ip=client_ip(),
        )
        db.session.add(check)
        db.session.commit()
    except Exception:
        # The answer does not depend on persistence; still reply.
        db.session.rollback()
        current_app.logger.exception("Failed to persist code check")


def _check_response(code: EanEicCode, channel: CheckChannel):
    result = classify(code)
    current_app.logger.info(log_message(f"Checked {code.code!r} ({channel.value}): {result.value}"))
    _record_check(code, result, channel)
    return (
        jsonify(
            {
                "code": code.code,
                "resultCode": result.value,
                "ok": result.is_ok,
                "family": result.family,
                "message": result.message,
            }
        ),
        200,
    )


@checker.route("/check", methods=["POST"])
def check_code():
    """Classify the code posted as JSON ``{"code": ...}`` or as the form field ``code``."""
    code, channel = _code_from_request()
    return _check_response(code, channel)


@checker.route("/check/<path:code>", methods=["GET"])
def check_code_in_path(code: str):
    return _check_response(EanEicCode(code), CheckChannel.path)


@checker.route("/checks", methods=["GET"])
def list_checks():
    """Most recent checks, newest first. Optional ``result`` filter by result code."""
    query = CodeCheck.query

    result_arg = request.args.get("result")
    if result_arg:
        try:
            result = CheckResultCode(result_arg)
        except ValueError:
            abort(400, description=f"Unknown result code: {result_arg}")
        query = query.filter(CodeCheck.result == result)

    limit = current_app.config["CHECK_HISTORY_LIMIT"]
    checks = query.order_by(CodeCheck.created_at.desc()).limit(limit).all()
    return jsonify({"checks": [check.to_dict() for check in checks], "count": len(checks)}), 200
