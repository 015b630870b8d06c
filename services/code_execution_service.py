"""
Code Execution Service for CodeLikeBasics
Runs sandbox code through a Piston API instance ("Run code" in the sandbox)
"""

import logging
import time

import requests

from utils.error_handler import ExternalServiceError, ValidationError

logger = logging.getLogger(__name__)

DEFAULT_PISTON_API_URL = 'https://emkc.org/api/v2/piston/execute'
DEFAULT_EXECUTION_TIMEOUT = 30

# Platform language id -> Piston runtime
PISTON_RUNTIMES = {
    'javascript': ('javascript', '18.15.0'),
    'javascript-games': ('javascript', '18.15.0'),
    'typescript': ('typescript', '5.0.3'),
    'python': ('python', '3.10.0'),
    'python-ml': ('python', '3.10.0'),
    'python-backend': ('python', '3.10.0'),
    'java': ('java', '15.0.2'),
    'go': ('go', '1.16.2'),
    'rust': ('rust', '1.68.2'),
    'c': ('c', '10.2.0'),
    'cpp': ('cpp', '10.2.0'),
    'csharp': ('csharp', '6.12.0'),
    'ruby': ('ruby', '3.0.1'),
    'php': ('php', '8.2.3'),
    'kotlin': ('kotlin', '1.8.20'),
    'swift': ('swift', '5.3.3'),
    'r': ('r', '4.1.1'),
    # Piston has no SQL servers; queries run on sqlite
    'sql': ('sqlite3', '3.36.0'),
    'postgresql': ('sqlite3', '3.36.0'),
    'mongodb': ('javascript', '18.15.0'),
    'bash': ('bash', '5.2.0'),
}

PREVIEW_ONLY_LANGUAGES = ('html', 'css', 'markdown', 'json', 'yaml')
PREVIEW_CODE_LIMIT = 500

SOURCE_FILE_NAMES = {
    'javascript': 'main.js',
    'typescript': 'main.ts',
    'python': 'main.py',
    'java': 'Main.java',
    'go': 'main.go',
    'rust': 'main.rs',
    'c': 'main.c',
    'cpp': 'main.cpp',
    'csharp': 'Main.cs',
    'ruby': 'main.rb',
    'php': 'main.php',
    'kotlin': 'Main.kt',
    'swift': 'main.swift',
    'r': 'main.r',
    'bash': 'main.sh',
    'sqlite3': 'main.sql',
}

# Limits enforced by Piston itself, in milliseconds
COMPILE_TIMEOUT_MS = 10000
RUN_TIMEOUT_MS = 5000


def get_source_file_name(runtime_language):
    return SOURCE_FILE_NAMES.get(runtime_language, 'main.txt')


class CodeExecutionService:
    def __init__(self, api_url=DEFAULT_PISTON_API_URL, timeout=DEFAULT_EXECUTION_TIMEOUT):
        self.api_url = api_url
        self.timeout = timeout

    def execute(self, language_id, code, stdin=''):
        """
        Run code for a platform language.

        Markup and data languages get a preview of the code instead of a run,
        and languages without a Piston runtime get a simulated answer.
        Failures of the Piston service raise ExternalServiceError.
        """
        language_id = (language_id or '').strip().lower()
        if not language_id or not code:
            raise ValidationError("Language and code are required", field='code')

        if language_id in PREVIEW_ONLY_LANGUAGES:
            return self._preview(language_id, code)

        runtime = PISTON_RUNTIMES.get(language_id)
        if runtime is None:
            return {
                'success': True,
                'output': (
                    f'[Simulated Output]\n\nLanguage "{language_id}" is not yet supported for real execution.\n'
                    'Showing simulated output for demonstration purposes.'
                ),
                'stderr': '',
                'exit_code': 0,
                'execution_time_ms': 0,
                'is_simulated': True
            }

        runtime_language, runtime_version = runtime
        payload = {
            'language': runtime_language,
            'version': runtime_version,
            'files': [{'name': get_source_file_name(runtime_language), 'content': code}],
            'stdin': stdin or '',
            'compile_timeout': COMPILE_TIMEOUT_MS,
            'run_timeout': RUN_TIMEOUT_MS,
            'compile_memory_limit': -1,
            'run_memory_limit': -1
        }

        started = time.monotonic()
        try:
            response = requests.post(self.api_url, json=payload, timeout=self.timeout)
        except requests.Timeout:
            logger.warning(f"Code execution timed out - Language: {language_id}")
            raise ExternalServiceError("Code execution timed out. Please simplify your code and try again.")
        except requests.RequestException as e:
            logger.error(f"Code execution request failed: {str(e)}")
            raise ExternalServiceError("Code execution failed. Please try again.")

        execution_time_ms = int((time.monotonic() - started) * 1000)

        if not response.ok:
            logger.error(f"Piston API error: {response.status_code}")
            raise ExternalServiceError("Code execution service temporarily unavailable. Please try again.")

        try:
            result = response.json()
        except ValueError:
            logger.error("Piston API returned a non-JSON body")
            raise ExternalServiceError("Code execution service temporarily unavailable. Please try again.")

        compile_result = result.get('compile')
        if compile_result and compile_result.get('code') != 0:
            return {
                'success': False,
                'output': '',
                'stderr': compile_result.get('stderr') or compile_result.get('output') or 'Compilation failed',
                'exit_code': compile_result.get('code'),
                'execution_time_ms': execution_time_ms,
                'stage': 'compile'
            }

        run_result = result.get('run') or {}
        output = run_result.get('stdout') or run_result.get('output') or ''
        exit_code = run_result.get('code')
        if exit_code is None:
            exit_code = 0

        if not output and exit_code == 0:
            output = 'Program executed successfully (no output)'

        return {
            'success': exit_code == 0,
            'output': output,
            'stderr': run_result.get('stderr') or '',
            'exit_code': exit_code,
            'execution_time_ms': execution_time_ms,
            'language': runtime_language,
            'version': runtime_version
        }

    def _preview(self, language_id, code):
        shown = code[:PREVIEW_CODE_LIMIT]
        if len(code) > PREVIEW_CODE_LIMIT:
            shown += '...'

        return {
            'success': True,
            'output': (
                f'[Preview Mode]\n\nThis language ({language_id}) shows a preview rather than execution.\n\n'
                f'Your code:\n{shown}'
            ),
            'stderr': '',
            'exit_code': 0,
            'execution_time_ms': 0,
            'is_preview': True
        }
