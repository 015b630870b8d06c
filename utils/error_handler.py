"""
Error Handler for CodeLikeBasics
Centralized error handling and logging
"""

from flask import jsonify
import logging
import traceback

logger = logging.getLogger(__name__)


class CodeLikeError(Exception):
    """Base exception class for the CodeLikeBasics backend"""
    def __init__(self, message, status_code=500, error_code=None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.error_code = error_code


class ValidationError(CodeLikeError):
    """Raised when input validation fails"""
    def __init__(self, message, field=None):
        super().__init__(message, status_code=400, error_code='VALIDATION_ERROR')
        self.field = field


class NotFoundError(CodeLikeError):
    """Raised when requested resource is not found"""
    def __init__(self, message):
        super().__init__(message, status_code=404, error_code='NOT_FOUND')


class ExternalServiceError(CodeLikeError):
    """Raised when an upstream service (Firebase, code runner) fails"""
    def __init__(self, message):
        super().__init__(message, status_code=503, error_code='SERVICE_ERROR')


def handle_error(error):
    """
    Central error handler that converts exceptions to JSON responses
    """
    if isinstance(error, CodeLikeError):
        logger.warning(f"CodeLike error: {error.message}")
        return jsonify({
            'error': error.message,
            'error_code': error.error_code,
            'status': 'error'
        }), error.status_code

    elif isinstance(error, ValueError):
        logger.warning(f"Validation error: {str(error)}")
        return jsonify({
            'error': str(error),
            'error_code': 'VALIDATION_ERROR',
            'status': 'error'
        }), 400

    elif isinstance(error, KeyError):
        logger.warning(f"Missing key error: {str(error)}")
        return jsonify({
            'error': f'Missing required field: {str(error)}',
            'error_code': 'MISSING_FIELD',
            'status': 'error'
        }), 400

    # Firebase Admin errors (token verification backend, credentials)
    elif 'firebase_admin' in str(type(error)):
        logger.error(f"Firebase error: {str(error)}")
        return jsonify({
            'error': 'Service temporarily unavailable',
            'error_code': 'SERVICE_ERROR',
            'status': 'error'
        }), 503

    logger.error(f"Unhandled error: {str(error)}")
    logger.error(traceback.format_exc())

    return jsonify({
        'error': 'An unexpected error occurred',
        'error_code': 'INTERNAL_ERROR',
        'status': 'error'
    }), 500


def validate_request_data(data, required_fields, field_types=None):
    """
    Validate request data against required fields and expected types
    """
    if not data:
        raise ValidationError("Request body cannot be empty")

    if not isinstance(data, dict):
        raise ValidationError("Request body must be a JSON object")

    missing_fields = [
        field for field in required_fields
        if field not in data or data[field] is None
    ]
    if missing_fields:
        raise ValidationError(f"Missing required fields: {', '.join(missing_fields)}")

    if field_types:
        for field, expected_type in field_types.items():
            if field in data and data[field] is not None:
                if not isinstance(data[field], expected_type):
                    type_names = (
                        ' or '.join(t.__name__ for t in expected_type)
                        if isinstance(expected_type, tuple) else expected_type.__name__
                    )
                    raise ValidationError(f"Field '{field}' must be of type {type_names}", field=field)

    return True
