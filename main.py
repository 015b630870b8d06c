"""
CodeLikeBasics Backend - Sandbox Exercise Grading API
Firebase Cloud Functions entry point

Main entry point for the Flask API wrapped as a Firebase Function
"""

import os
import logging

from flask import Flask, request, jsonify
from flask_cors import CORS
from firebase_functions import https_fn, options
from firebase_admin import initialize_app, get_app, credentials

from services.code_execution_service import CodeExecutionService
from services.sandbox_service import SandboxService
from utils.auth_middleware import require_auth, get_current_user, rate_limit
from utils.config import Config
from utils.error_handler import handle_error, validate_request_data
from utils.rate_limiter import RateLimiter

logger = logging.getLogger(__name__)


def init_firebase():
    """
    Initialize the Firebase Admin SDK once per process
    """
    try:
        return get_app()
    except ValueError:
        # For local development, use service account key
        cred_path = os.path.join(os.path.dirname(__file__), 'serviceAccountKey.json')
        if os.path.exists(cred_path):
            return initialize_app(credentials.Certificate(cred_path))
        # Use default credentials in production
        return initialize_app()


def create_app(config=None, sandbox_service=None, code_execution_service=None):
    config = config or Config()

    logging.basicConfig(level=config.log_level)

    if not config.testing:
        init_firebase()

    app = Flask(__name__)
    app.config['TESTING'] = config.testing
    app.config['DEBUG'] = config.debug

    CORS(app, origins=config.allowed_origins)

    sandbox_service = sandbox_service or SandboxService(
        similarity_threshold=config.similarity_threshold,
        pass_threshold=config.pass_threshold
    )
    code_execution_service = code_execution_service or CodeExecutionService(
        api_url=config.piston_api_url,
        timeout=config.code_execution_timeout
    )
    execution_limiter = RateLimiter(
        max_requests=config.code_execution_rate_limit,
        window_seconds=config.rate_limit_window
    )

    # Health check endpoint
    @app.route('/health', methods=['GET'])
    def health_check():
        """Health check endpoint"""
        return jsonify({
            'status': 'healthy',
            'service': 'codelike-backend',
            'version': config.api_version
        })

    # ============= SANDBOX ENDPOINTS =============

    @app.route('/sandbox/<language_id>/exercises', methods=['GET'])
    def get_exercises(language_id):
        """Get the exercise set for a language"""
        try:
            exercise_set = sandbox_service.get_exercise_set(language_id, request.args.get('name'))
            return jsonify(exercise_set)
        except Exception as e:
            return handle_error(e)

    @app.route('/sandbox/<language_id>/exercises/<exercise_id>', methods=['GET'])
    def get_exercise(language_id, exercise_id):
        """Get one exercise"""
        try:
            exercise = sandbox_service.get_exercise(language_id, exercise_id, request.args.get('name'))
            return jsonify(exercise)
        except Exception as e:
            return handle_error(e)

    @app.route('/sandbox/<language_id>/exercises/<exercise_id>/check', methods=['POST'])
    def check_exercise(language_id, exercise_id):
        """Check one submission against the exercise solution"""
        try:
            data = request.get_json(silent=True)
            validate_request_data(data, ['code'], {'code': str})

            result = sandbox_service.check_exercise(language_id, exercise_id, data['code'])
            return jsonify(result)
        except Exception as e:
            return handle_error(e)

    @app.route('/sandbox/<language_id>/execute', methods=['POST'])
    @rate_limit(execution_limiter, 'code-exec')
    def execute_code(language_id):
        """Run sandbox code (preview for markup languages)"""
        try:
            data = request.get_json(silent=True)
            validate_request_data(data, ['code'], {'code': str, 'stdin': str})

            result = code_execution_service.execute(language_id, data['code'], data.get('stdin', ''))
            return jsonify(result)
        except Exception as e:
            return handle_error(e)

    @app.route('/sandbox/<language_id>/submit', methods=['POST'])
    @require_auth
    def submit_exercises(language_id):
        """Final submission of a whole exercise set"""
        try:
            current_user = get_current_user()
            data = request.get_json(silent=True)
            validate_request_data(data, ['submissions'], {'submissions': (list, dict), 'language_name': str})

            result = sandbox_service.submit_exercise_set(
                language_id,
                data['submissions'],
                language_name=data.get('language_name')
            )
            result['user_id'] = current_user['uid']

            return jsonify(result)
        except Exception as e:
            return handle_error(e)

    @app.route('/sandbox/similarity', methods=['POST'])
    def compare_code():
        """Raw similarity score between two code snippets"""
        try:
            data = request.get_json(silent=True)
            validate_request_data(data, ['a', 'b'], {'a': str, 'b': str})

            return jsonify(sandbox_service.compare(data['a'], data['b']))
        except Exception as e:
            return handle_error(e)

    @app.route('/sandbox/next-difficulty', methods=['GET'])
    def next_difficulty():
        """Next difficulty to practice given the completed ones"""
        try:
            completed_param = request.args.get('completed', '')
            completed = [d.strip().lower() for d in completed_param.split(',') if d.strip()]

            next_diff = sandbox_service.get_next_difficulty(completed)
            return jsonify({
                'next_difficulty': next_diff,
                'all_completed': next_diff is None
            })
        except Exception as e:
            return handle_error(e)

    # Error handlers
    @app.errorhandler(404)
    def not_found(error):
        return jsonify({'error': 'Endpoint not found'}), 404

    @app.errorhandler(405)
    def method_not_allowed(error):
        return jsonify({'error': 'Method not allowed'}), 405

    @app.errorhandler(500)
    def internal_error(error):
        logger.error(f"Internal server error: {str(error)}")
        return jsonify({'error': 'Internal server error'}), 500

    return app


app = create_app()


# Firebase Cloud Function wrapper
@https_fn.on_request(
    cors=options.CorsOptions(
        cors_origins=["*"],
        cors_methods=["GET", "POST", "OPTIONS"]
    )
)
def api(req):
    """Main Cloud Function entry point"""
    with app.request_context(req.environ):
        return app.full_dispatch_request()


# For local development
if __name__ == '__main__':
    app.run(debug=True, host='0.0.0.0', port=Config().port)
