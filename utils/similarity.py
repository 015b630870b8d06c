"""
Code Similarity Scoring for CodeLikeBasics
Normalized Levenshtein similarity between a learner's code and a reference solution
"""

import math
import re

DEFAULT_SIMILARITY_THRESHOLD = 0.7

_WHITESPACE_RE = re.compile(r'\s+')


def normalize(text: str) -> str:
    """
    Trim the text and collapse every run of whitespace into a single space
    """
    return _WHITESPACE_RE.sub(' ', text.strip())


def round_half_up(value: float) -> int:
    """
    Round to the nearest integer with halves going up (62.5 -> 63)
    """
    return math.floor(value + 0.5)


def edit_distance(a: str, b: str) -> int:
    """
    Levenshtein distance between two strings using the full DP table
    """
    rows = len(a) + 1
    cols = len(b) + 1

    matrix = [[0] * cols for _ in range(rows)]
    for i in range(rows):
        matrix[i][0] = i
    for j in range(cols):
        matrix[0][j] = j

    for i in range(1, rows):
        for j in range(1, cols):
            if a[i - 1] == b[j - 1]:
                matrix[i][j] = matrix[i - 1][j - 1]
            else:
                matrix[i][j] = min(
                    matrix[i - 1][j - 1] + 1,  # substitution
                    matrix[i][j - 1] + 1,      # insertion
                    matrix[i - 1][j] + 1       # deletion
                )

    return matrix[rows - 1][cols - 1]


def similarity(a: str, b: str) -> float:
    """
    Similarity ratio in [0, 1], normalized by the longer string's length.
    Two empty strings are identical (1.0).
    """
    if len(a) > len(b):
        longer, shorter = a, b
    else:
        longer, shorter = b, a

    if len(longer) == 0:
        return 1.0

    return (len(longer) - edit_distance(longer, shorter)) / len(longer)


def check_submission(user_code: str, solution_code: str, threshold: float = DEFAULT_SIMILARITY_THRESHOLD) -> dict:
    """
    Grade one submission against its reference solution.

    Both texts are normalized first. The submission passes when the similarity
    is strictly above the threshold, or when the whole normalized solution
    appears inside the normalized submission (extra surrounding code is
    allowed).
    """
    code_normalized = normalize(user_code)
    solution_normalized = normalize(solution_code)

    score = similarity(code_normalized, solution_normalized)

    matched_by = None
    if score > threshold:
        matched_by = 'similarity'
    elif solution_normalized in code_normalized:
        matched_by = 'containment'

    return {
        'similarity': score,
        'similarity_percentage': round_half_up(score * 100),
        'passed': matched_by is not None,
        'matched_by': matched_by
    }


def passes(user_code: str, solution_code: str, threshold: float = DEFAULT_SIMILARITY_THRESHOLD) -> bool:
    """
    True when the submission is accepted for the given solution
    """
    return check_submission(user_code, solution_code, threshold)['passed']
