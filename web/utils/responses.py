"""JSON response helpers for the reconstruction API."""
from flask import jsonify


def success_response(data=None, message=None):
    """Return a successful API response."""
    response = {"status": "ok"}
    if data is not None:
        response["data"] = data
    if message is not None:
        response["message"] = message
    return jsonify(response), 200


def error_response(message, status_code=400, errors=None):
    """Return an error API response, optionally with per-record messages."""
    response = {"status": "error", "message": message}
    if errors:
        response["errors"] = list(errors)
    return jsonify(response), status_code


def validation_response(errors):
    """Return a validation report: valid when there are no messages."""
    errors = list(errors or [])
    return jsonify({"valid": not errors, "errors": errors}), 200
