import json

import pytest
import requests

from firebase_admin import auth as firebase_auth

from services.exercise_catalog import get_exercise_set

pytestmark = pytest.mark.integration

AUTH_HEADERS = {'Authorization': 'Bearer fake-token'}


class TestAPIEndpoints:

    def test_health_check(self, client):
        """Test health check endpoint"""
        response = client.get('/health')
        assert response.status_code == 200
        data = json.loads(response.data)
        assert data['status'] == 'healthy'

    def test_get_exercises(self, client):
        response = client.get('/sandbox/python/exercises')

        assert response.status_code == 200
        data = response.get_json()
        assert data['language_name'] == 'Python'
        assert data['total_exercises'] == 8
        assert all('solution' not in exercise for exercise in data['exercises'])

    def test_get_exercises_with_display_name(self, client):
        response = client.get('/sandbox/kotlin/exercises?name=Kotlin')

        data = response.get_json()
        assert data['exercises'][0]['title'] == 'Variables in Kotlin'

    def test_get_exercise(self, client):
        response = client.get('/sandbox/python/exercises/2')

        assert response.status_code == 200
        assert response.get_json()['title'] == 'Define a Function'

    def test_get_exercise_not_found(self, client):
        response = client.get('/sandbox/python/exercises/99')

        assert response.status_code == 404
        assert response.get_json()['error_code'] == 'NOT_FOUND'

    def test_check_exercise(self, client):
        response = client.post(
            '/sandbox/python/exercises/5/check',
            json={'code': 'fruits = ["apple", "banana", "orange"]\nfruits.append("grape")'}
        )

        assert response.status_code == 200
        data = response.get_json()
        assert data['passed'] is True
        assert data['similarity'] == 1.0

    def test_check_exercise_missing_code(self, client):
        response = client.post('/sandbox/python/exercises/5/check', json={})

        assert response.status_code == 400
        assert response.get_json()['error_code'] == 'VALIDATION_ERROR'

    def test_check_exercise_rejects_non_string_code(self, client):
        response = client.post('/sandbox/python/exercises/5/check', json={'code': 123})

        assert response.status_code == 400

    def test_submit_requires_auth(self, client):
        response = client.post('/sandbox/python/submit', json={'submissions': []})

        assert response.status_code == 401

    def test_submit_exercise_set(self, client, mock_verify_token):
        solutions = [e.solution for e in get_exercise_set('python').exercises]
        submissions = solutions[:6] + ['print(1)', 'print(2)']

        response = client.post('/sandbox/python/submit', json={'submissions': submissions}, headers=AUTH_HEADERS)

        assert response.status_code == 200
        data = response.get_json()
        assert data['user_id'] == 'test-user-id'
        assert data['correct_count'] == 6
        assert data['passed'] is True
        assert data['earned_xp'] == 560
        mock_verify_token.assert_called_once_with('fake-token')

    def test_submit_exercise_set_below_threshold(self, client, mock_verify_token):
        solutions = [e.solution for e in get_exercise_set('python').exercises]
        submissions = {str(i): code for i, code in enumerate(solutions[:5])}

        response = client.post('/sandbox/python/submit', json={'submissions': submissions}, headers=AUTH_HEADERS)

        data = response.get_json()
        assert data['correct_count'] == 5
        assert data['passed'] is False

    def test_submit_invalid_submissions(self, client, mock_verify_token):
        response = client.post('/sandbox/python/submit', json={'submissions': 'oops'}, headers=AUTH_HEADERS)

        assert response.status_code == 400

    def test_submit_invalid_token(self, client, mocker):
        mocker.patch(
            'firebase_admin.auth.verify_id_token',
            side_effect=firebase_auth.InvalidIdTokenError('bad token')
        )

        response = client.post('/sandbox/python/submit', json={'submissions': []}, headers=AUTH_HEADERS)

        assert response.status_code == 401
        assert response.get_json()['error'] == 'Invalid token'

    def test_submit_certificate_fetch_failure(self, client, mocker):
        mocker.patch(
            'firebase_admin.auth.verify_id_token',
            side_effect=firebase_auth.CertificateFetchError('cannot fetch certificates', cause=None)
        )

        response = client.post('/sandbox/python/submit', json={'submissions': []}, headers=AUTH_HEADERS)

        assert response.status_code == 503
        assert response.get_json()['error_code'] == 'SERVICE_ERROR'

    def test_submit_without_firebase_app(self, client, mocker):
        mocker.patch(
            'firebase_admin.auth.verify_id_token',
            side_effect=ValueError('The default Firebase app does not exist.')
        )

        response = client.post('/sandbox/python/submit', json={'submissions': []}, headers=AUTH_HEADERS)

        assert response.status_code == 503
        assert response.get_json()['error'] == 'Authentication service unavailable'

    def test_similarity(self, client):
        response = client.post('/sandbox/similarity', json={'a': 'abc', 'b': 'abd'})

        assert response.status_code == 200
        assert response.get_json()['similarity_percentage'] == 67

    def test_similarity_requires_both_texts(self, client):
        response = client.post('/sandbox/similarity', json={'a': 'abc'})

        assert response.status_code == 400

    def test_next_difficulty(self, client):
        response = client.get('/sandbox/next-difficulty?completed=easy,medium')

        assert response.get_json() == {'next_difficulty': 'hard', 'all_completed': False}

    def test_next_difficulty_all_completed(self, client):
        response = client.get('/sandbox/next-difficulty?completed=easy,medium,hard')

        assert response.get_json() == {'next_difficulty': None, 'all_completed': True}

    def test_next_difficulty_unknown(self, client):
        response = client.get('/sandbox/next-difficulty?completed=expert')

        assert response.status_code == 400

    def test_unknown_endpoint(self, client):
        response = client.get('/nope')

        assert response.status_code == 404
        assert response.get_json()['error'] == 'Endpoint not found'

    def test_method_not_allowed(self, client):
        response = client.get('/sandbox/python/exercises/1/check')

        assert response.status_code == 405


class TestExecuteEndpoint:

    def test_execute_python(self, client, mocker):
        response_mock = mocker.Mock(ok=True, status_code=200)
        response_mock.json.return_value = {'run': {'stdout': '42\n', 'stderr': '', 'code': 0}}
        mock_post = mocker.patch('services.code_execution_service.requests.post', return_value=response_mock)

        response = client.post('/sandbox/python/execute', json={'code': 'print(42)'})

        assert response.status_code == 200
        data = response.get_json()
        assert data['success'] is True
        assert data['output'] == '42\n'
        mock_post.assert_called_once()

    def test_execute_html_preview(self, client, mocker):
        mock_post = mocker.patch('services.code_execution_service.requests.post')

        response = client.post('/sandbox/html/execute', json={'code': '<p>Hi</p>'})

        assert response.status_code == 200
        assert response.get_json()['is_preview'] is True
        mock_post.assert_not_called()

    def test_execute_missing_code(self, client):
        response = client.post('/sandbox/python/execute', json={})

        assert response.status_code == 400

    def test_execute_rejects_non_string_stdin(self, client):
        response = client.post('/sandbox/python/execute', json={'code': 'print(1)', 'stdin': 5})

        assert response.status_code == 400

    def test_execute_upstream_timeout(self, client, mocker):
        mocker.patch('services.code_execution_service.requests.post', side_effect=requests.Timeout())

        response = client.post('/sandbox/python/execute', json={'code': 'while True: pass'})

        assert response.status_code == 503
        assert response.get_json()['error_code'] == 'SERVICE_ERROR'

    def test_execute_is_rate_limited(self):
        from main import create_app
        from utils.config import Config

        app = create_app(Config(environment='testing', code_execution_rate_limit=2))
        with app.test_client() as client:
            statuses = [
                client.post('/sandbox/html/execute', json={'code': '<p>Hi</p>'}).status_code
                for _ in range(3)
            ]
            limited = client.post('/sandbox/html/execute', json={'code': '<p>Hi</p>'})

        assert statuses == [200, 200, 429]
        assert limited.get_json()['error_code'] == 'RATE_LIMITED'
        assert limited.headers['X-RateLimit-Remaining'] == '0'
        assert 'X-RateLimit-Reset' in limited.headers

    def test_rate_limit_is_per_client(self):
        from main import create_app
        from utils.config import Config

        app = create_app(Config(environment='testing', code_execution_rate_limit=1))
        with app.test_client() as client:
            first = client.post(
                '/sandbox/html/execute', json={'code': 'a'}, headers={'X-Forwarded-For': '10.0.0.1'}
            )
            second = client.post(
                '/sandbox/html/execute', json={'code': 'a'}, headers={'X-Forwarded-For': '10.0.0.2, 10.0.0.9'}
            )

        assert first.status_code == 200
        assert second.status_code == 200
