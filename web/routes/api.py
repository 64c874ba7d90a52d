"""API routes - JSON endpoints for path reconstruction."""
from flask import Blueprint, request

from web.auth import api_key_required
from web.services.reconstruction_service import ReconstructionService, RequestValidationError
from web.utils.responses import success_response, error_response, validation_response

api_bp = Blueprint('api', __name__)


@api_bp.route('/health')
def health():
    """Liveness check."""
    return success_response()


@api_bp.route('/reconstruct', methods=['POST'])
@api_key_required
def reconstruct():
    """Rebuild points and path segments from PP/KB source records."""
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        return error_response('No data provided')

    try:
        path = ReconstructionService.reconstruct(data)
    except RequestValidationError as e:
        return error_response(str(e))

    if path is None:
        return error_response(
            'Source records do not produce any geometry',
            422,
            errors=ReconstructionService.validate(data)
        )

    return success_response(data=path)


@api_bp.route('/arcs/solve', methods=['POST'])
@api_key_required
def solve_arc():
    """Solve a single arc from endpoints, radius and direction."""
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        return error_response('No data provided')

    try:
        arc = ReconstructionService.solve_single_arc(data)
    except RequestValidationError as e:
        return error_response(str(e))

    if arc is None:
        return error_response('No arc with this radius joins the given points', 422)

    return success_response(data=arc)


@api_bp.route('/validate', methods=['POST'])
@api_key_required
def validate():
    """Validate source records before reconstruction."""
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        return error_response('No data provided')

    try:
        errors = ReconstructionService.validate(data)
    except RequestValidationError as e:
        return error_response(str(e))

    return validation_response(errors)
