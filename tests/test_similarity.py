import itertools

import pytest

from utils.similarity import normalize, edit_distance, similarity, passes, check_submission, round_half_up

pytestmark = pytest.mark.unit

SAMPLES = ['', 'a', 'abc', 'abd', 'kitten', 'sitting', "print('hi')", 'def f(): pass']


class TestNormalize:

    def test_trims_and_collapses_whitespace(self):
        assert normalize('  a \n\t  b  ') == 'a b'

    def test_preserves_case(self):
        assert normalize(' Hello  WORLD ') == 'Hello WORLD'

    def test_whitespace_only_becomes_empty(self):
        assert normalize(' \n\t ') == ''

    def test_byte_order_mark_is_kept(self):
        assert normalize('\ufeff print(1) ') == '\ufeff print(1)'


class TestEditDistance:

    @pytest.mark.parametrize('a, b, expected', [
        ('kitten', 'sitting', 3),
        ('flaw', 'lawn', 2),
        ('', 'abc', 3),
        ('abc', '', 3),
        ('abc', 'abc', 0),
        ('', '', 0),
    ])
    def test_known_distances(self, a, b, expected):
        assert edit_distance(a, b) == expected

    def test_zero_only_for_equal_strings(self):
        for a, b in itertools.product(SAMPLES, repeat=2):
            distance = edit_distance(a, b)
            assert distance >= 0
            assert (distance == 0) == (a == b)

    def test_symmetric(self):
        for a, b in itertools.product(SAMPLES, repeat=2):
            assert edit_distance(a, b) == edit_distance(b, a)

    def test_triangle_inequality(self):
        for a, b, c in itertools.product(SAMPLES, repeat=3):
            assert edit_distance(a, c) <= edit_distance(a, b) + edit_distance(b, c)


class TestSimilarity:

    def test_identity(self):
        for a in SAMPLES:
            assert similarity(a, a) == 1.0

    def test_symmetry(self):
        for a, b in itertools.product(SAMPLES, repeat=2):
            assert similarity(a, b) == similarity(b, a)

    def test_empty_strings(self):
        assert similarity('', '') == 1.0
        assert similarity('', 'abc') == 0.0

    def test_normalized_by_longer_length(self):
        assert similarity('abc', 'abd') == pytest.approx(2 / 3)
        assert similarity('kitten', 'sitting') == pytest.approx(4 / 7)

    def test_range(self):
        for a, b in itertools.product(SAMPLES, repeat=2):
            assert 0.0 <= similarity(a, b) <= 1.0

    def test_lengths_count_code_points(self):
        assert edit_distance('\U0001F600a', 'a') == 1
        assert similarity('\U0001F600a', 'a') == 0.5


class TestRoundHalfUp:

    @pytest.mark.parametrize('value, expected', [
        (62.5, 63),
        (12.5, 13),
        (74.75, 75),
        (74.4, 74),
        (0.0, 0),
        (100.0, 100),
    ])
    def test_round_half_up(self, value, expected):
        assert round_half_up(value) == expected


class TestPasses:

    def test_exact_match(self):
        assert passes("print('Hello, World!')", "print('Hello, World!')") is True

    def test_padded_solution_passes_by_containment(self):
        code = "x = 1\ny = 2\nprint('Hello, World!')"
        solution = "print('Hello, World!')"

        result = check_submission(code, solution)

        assert passes(code, solution) is True
        assert result['similarity'] < 0.7
        assert result['matched_by'] == 'containment'

    def test_different_code_fails(self):
        assert passes("print('Goodbye!')", "print('Hello, World!')") is False

    def test_whitespace_differences_ignored(self):
        assert passes('def f():\n    return 1', 'def f(): return 1') is True

    def test_case_is_significant(self):
        assert passes("PRINT('HELLO')", "print('hello')") is False

    def test_threshold_is_strict(self):
        # 3 substitutions over 10 characters: similarity exactly 0.7
        assert similarity('abcdefghij', 'abcdefgxyz') == pytest.approx(0.7)
        assert passes('abcdefgxyz', 'abcdefghij') is False
        assert passes('abcdefgxyz', 'abcdefghij', threshold=0.69) is True

    def test_check_submission_reports_similarity(self):
        result = check_submission("print('Hello, World!')", "print('Hello, World!')")

        assert result == {
            'similarity': 1.0,
            'similarity_percentage': 100,
            'passed': True,
            'matched_by': 'similarity'
        }

    def test_check_submission_failure(self):
        result = check_submission("print('Goodbye!')", "print('Hello, World!')")

        assert result['passed'] is False
        assert result['matched_by'] is None
