"""Simple API key authentication."""
from functools import wraps
import hmac

from flask import current_app, request

from web.utils.responses import error_response

API_KEY_HEADER = 'X-API-Key'


def is_authenticated():
    """Check if the current request carries a valid API key."""
    api_key = current_app.config.get('API_KEY')
    if not api_key:
        return True  # No key configured, allow access

    supplied = request.headers.get(API_KEY_HEADER, '')
    return hmac.compare_digest(supplied.encode('utf-8'), api_key.encode('utf-8'))


def api_key_required(f):
    """Decorator to require a valid API key for a route."""
    @wraps(f)
    def decorated_function(*args, **kwargs):
        if not is_authenticated():
            return error_response('Invalid or missing API key', 401)
        return f(*args, **kwargs)
    return decorated_function
