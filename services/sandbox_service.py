"""
Sandbox Service for CodeLikeBasics
Grades sandbox exercise submissions and final exercise-set submissions
"""

import logging

from services.exercise_catalog import get_exercise_set, get_exercise
from utils.error_handler import ValidationError
from utils.similarity import check_submission, normalize, round_half_up, similarity, DEFAULT_SIMILARITY_THRESHOLD

logger = logging.getLogger(__name__)

DEFAULT_PASS_THRESHOLD = 0.75

DIFFICULTIES = ('easy', 'medium', 'hard')

XP_PER_CORRECT_EXERCISE = 10
SANDBOX_COMPLETION_BONUS_XP = 500


def calculate_percentage(correct, total):
    if total == 0:
        return 0
    return round_half_up((correct / total) * 100)


def calculate_stars(percentage):
    if percentage >= 90:
        return 3
    if percentage >= 75:
        return 2
    return 1


def get_performance_message(percentage):
    if percentage >= 95:
        return 'Perfect! Outstanding performance!'
    if percentage >= 90:
        return 'Excellent! Great work!'
    if percentage >= 80:
        return 'Very good! Well done!'
    if percentage >= 75:
        return 'Good job! You passed!'
    if percentage >= 60:
        return 'Not bad, but you can do better!'
    return "Keep practicing! You'll get there!"


class SandboxService:
    def __init__(self, similarity_threshold=DEFAULT_SIMILARITY_THRESHOLD, pass_threshold=DEFAULT_PASS_THRESHOLD):
        self.similarity_threshold = similarity_threshold
        self.pass_threshold = pass_threshold

    def get_exercise_set(self, language_id, language_name=None):
        """
        Get the exercise set for a language (without solutions)
        """
        exercise_set = get_exercise_set(language_id, language_name)
        return exercise_set.to_public_dict()

    def get_exercise(self, language_id, exercise_id, language_name=None):
        return get_exercise(language_id, exercise_id, language_name).to_public_dict()

    def check_exercise(self, language_id, exercise_id, code):
        """
        Check a single submission against its exercise's solution
        """
        exercise = get_exercise(language_id, exercise_id)
        result = check_submission(code, exercise.solution, self.similarity_threshold)

        response = {
            'exercise_id': exercise.id,
            'title': exercise.title,
            **result
        }
        if not result['passed']:
            response['hint'] = exercise.hint

        return response

    def grade_exercise_set(self, exercises, submissions):
        """
        Grade every exercise of a set and decide whether the set is passed.

        `submissions` maps exercise index to code, or is a list in exercise
        order. A missing submission is graded as empty code.
        """
        if isinstance(submissions, (list, tuple)):
            submissions = dict(enumerate(submissions))

        results = []
        correct_exercises = []

        for index, exercise in enumerate(exercises):
            code = submissions.get(index) or ''
            result = check_submission(code, exercise.solution, self.similarity_threshold)

            if result['passed']:
                correct_exercises.append(index)

            results.append({
                'index': index,
                'exercise_id': exercise.id,
                'title': exercise.title,
                **result
            })

        correct_count = len(correct_exercises)
        total_count = len(results)
        score = correct_count / total_count if total_count > 0 else 0.0
        passed = total_count > 0 and score >= self.pass_threshold

        # Display only; stars and message read the unrounded score
        percentage = calculate_percentage(correct_count, total_count)

        base_xp = correct_count * XP_PER_CORRECT_EXERCISE
        bonus_xp = SANDBOX_COMPLETION_BONUS_XP if passed else 0

        return {
            'correct_count': correct_count,
            'total_count': total_count,
            'score': score,
            'percentage': percentage,
            'passed': passed,
            'correct_exercises': correct_exercises,
            'results': results,
            'stars': calculate_stars(score * 100),
            'message': get_performance_message(score * 100),
            'base_xp': base_xp,
            'bonus_xp': bonus_xp,
            'earned_xp': base_xp + bonus_xp
        }

    def submit_exercise_set(self, language_id, submissions, language_name=None):
        """
        Final submission of a sandbox exercise set
        """
        exercise_set = get_exercise_set(language_id, language_name)
        submissions = self._coerce_submissions(submissions, len(exercise_set))

        result = self.grade_exercise_set(exercise_set.exercises, submissions)

        logger.info(
            f"Sandbox set graded - Language: {exercise_set.language_id}, "
            f"Correct: {result['correct_count']}/{result['total_count']}, Passed: {result['passed']}"
        )

        return {
            'language_id': exercise_set.language_id,
            'language_name': exercise_set.language_name,
            **result
        }

    def compare(self, a, b):
        """
        Raw similarity of two code snippets after normalization
        """
        score = similarity(normalize(a), normalize(b))
        return {
            'similarity': score,
            'similarity_percentage': round_half_up(score * 100)
        }

    def get_next_difficulty(self, completed):
        unknown = [d for d in completed if d not in DIFFICULTIES]
        if unknown:
            raise ValidationError(f"Unknown difficulty: {', '.join(unknown)}", field='completed')

        for difficulty in DIFFICULTIES:
            if difficulty not in completed:
                return difficulty
        return None

    def _coerce_submissions(self, submissions, total):
        """
        Accept a list of code strings, or a mapping of exercise index to code
        (JSON object keys arrive as strings)
        """
        if isinstance(submissions, (list, tuple)):
            submissions = dict(enumerate(submissions))
        elif not isinstance(submissions, dict):
            raise ValidationError("Submissions must be a list or an object", field='submissions')

        coerced = {}
        for key, code in submissions.items():
            try:
                index = int(key)
            except (TypeError, ValueError):
                raise ValidationError(f"Invalid exercise index: {key}", field='submissions')

            if index < 0 or index >= total:
                raise ValidationError(f"Exercise index out of range: {index}", field='submissions')
            if code is not None and not isinstance(code, str):
                raise ValidationError(f"Submission {index} must be a string", field='submissions')

            coerced[index] = code

        return coerced
