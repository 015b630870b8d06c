import os
import sys

import pytest

# Add project root to Python path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

# Keep Firebase from initializing when main is imported
os.environ['ENVIRONMENT'] = 'testing'

from services.exercise_catalog import Exercise
from services.sandbox_service import SandboxService


@pytest.fixture
def sandbox_service():
    """Sandbox service with the default thresholds"""
    return SandboxService()


@pytest.fixture
def hello_exercise():
    return Exercise(
        id='1',
        title='Hello',
        description='Print a greeting.',
        instructions="Print 'Hello, World!'",
        starter_code='# Write your code here',
        solution="print('Hello, World!')",
        hint='Use print()'
    )


@pytest.fixture
def eight_exercises():
    """Eight exercises with short, mutually distinct solutions"""
    solutions = [
        "print('alpha')",
        "x = [1, 2, 3]",
        "def add(a, b): return a + b",
        "for i in range(5): print(i)",
        "name = input()",
        "import math",
        "while True: break",
        "class Point: pass",
    ]
    return [
        Exercise(
            id=str(i + 1),
            title=f'Exercise {i + 1}',
            description='',
            instructions='',
            starter_code='',
            solution=solution,
            hint=f'Hint {i + 1}'
        )
        for i, solution in enumerate(solutions)
    ]


@pytest.fixture
def client():
    """Test client for Flask app"""
    from main import create_app
    from utils.config import Config

    app = create_app(Config(environment='testing'))
    with app.test_client() as client:
        yield client


@pytest.fixture
def mock_verify_token(mocker):
    """Patch Firebase ID token verification"""
    return mocker.patch('firebase_admin.auth.verify_id_token', return_value={
        'uid': 'test-user-id',
        'email': 'test@example.com'
    })
