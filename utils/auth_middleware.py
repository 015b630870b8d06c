"""
Authentication Middleware for CodeLikeBasics
Handles Firebase token validation, request authentication and rate limiting
"""

from functools import wraps
from flask import request, jsonify
from firebase_admin import auth, exceptions
import logging

from utils.error_handler import ExternalServiceError, handle_error

logger = logging.getLogger(__name__)


def _extract_bearer_token():
    auth_header = request.headers.get('Authorization')
    if not auth_header:
        return None
    return auth_header.replace('Bearer ', '').strip()


def require_auth(f):
    """
    Decorator to require authentication for API endpoints
    """
    @wraps(f)
    def decorated_function(*args, **kwargs):
        if request.headers.get('Authorization') is None:
            return jsonify({'error': 'Authorization header required'}), 401

        token = _extract_bearer_token()
        if not token:
            return jsonify({'error': 'Valid token required'}), 401

        try:
            decoded_token = auth.verify_id_token(token)
        except auth.ExpiredIdTokenError:
            logger.warning("Expired token provided")
            return jsonify({'error': 'Token expired'}), 401
        except auth.RevokedIdTokenError:
            logger.warning("Revoked token provided")
            return jsonify({'error': 'Token revoked'}), 401
        except auth.InvalidIdTokenError:
            logger.warning("Invalid token provided")
            return jsonify({'error': 'Invalid token'}), 401
        except (exceptions.FirebaseError, ValueError) as e:
            # Token is a non-empty string here, so these are backend failures
            # (certificate fetch, missing default app or project id)
            logger.error(f"Token verification failed: {str(e)}")
            return handle_error(ExternalServiceError('Authentication service unavailable'))

        # Add user info to request context
        request.current_user = decoded_token

        return f(*args, **kwargs)

    return decorated_function


def get_current_user():
    """
    User information for the authenticated request, or None
    """
    decoded_token = getattr(request, 'current_user', None)
    if not decoded_token:
        return None

    return {
        'uid': decoded_token['uid'],
        'email': decoded_token.get('email', ''),
        'name': decoded_token.get('name', '')
    }


def get_client_identifier():
    """
    First address of X-Forwarded-For, then X-Real-IP, then the socket peer
    """
    forwarded = request.headers.get('X-Forwarded-For')
    if forwarded:
        return forwarded.split(',')[0].strip()

    real_ip = request.headers.get('X-Real-IP')
    if real_ip:
        return real_ip

    return request.remote_addr or 'local-client'


def rate_limit(limiter, scope):
    """
    Rate limiting decorator backed by a RateLimiter.
    Clients are keyed by scope and address, so each endpoint has its own quota.
    """
    def decorator(f):
        @wraps(f)
        def decorated_function(*args, **kwargs):
            result = limiter.check(f"{scope}:{get_client_identifier()}")

            if not result.allowed:
                logger.warning(f"Rate limit exceeded - Scope: {scope}")
                response = jsonify({
                    'error': 'Too many requests. Please wait a moment before trying again.',
                    'error_code': 'RATE_LIMITED',
                    'status': 'error'
                })
                response.headers['X-RateLimit-Remaining'] = '0'
                response.headers['X-RateLimit-Reset'] = str(int(result.reset_time))
                return response, 429

            return f(*args, **kwargs)

        return decorated_function
    return decorator
