from flask import jsonify


def success_response(payload=None, message=None, status=200):
    resp = {"success": True}
    if message:
        resp["message"] = message
    if payload is not None:
        resp.update(payload if isinstance(payload, dict) else {"data": payload})
    return jsonify(resp), status


def error_response(code, message, details=None, status=400):
    err = {
        "error": {
            "code": code,
            "message": message,
            "details": details or {}
        }
    }
    return jsonify(err), status


def service_error_response(exc):
    """Render a ServiceError with the status code it carries."""
    return error_response(exc.code, exc.message, details=exc.details, status=exc.status)
