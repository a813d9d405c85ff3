"""
Known-vector tests against java.util.Random reference output.

Fixtures: tests/fixtures/known_vectors.json
Each list in a case is drawn from a freshly seeded generator.
"""
import pytest

from javarand.logic.rng import JavaRandom


CASES = ["seed_0", "seed_42", "seed_123", "seed_minus_1", "seed_i64_max"]


@pytest.mark.parametrize("case_name", CASES)
class TestKnownVectors:
    """Reproduce reference output bit for bit."""

    def test_internal_seed(self, known_vectors, case_name):
        case = known_vectors["cases"][case_name]
        assert JavaRandom(case["seed"]).seed == case["internal_seed"]

    def test_ints(self, known_vectors, case_name):
        case = known_vectors["cases"][case_name]
        rng = JavaRandom(case["seed"])
        assert [rng.next_int() for _ in case["ints"]] == case["ints"]

    @pytest.mark.parametrize("bound", [10, 1000, 1024])
    def test_bounded_ints(self, known_vectors, case_name, bound):
        case = known_vectors["cases"][case_name]
        expected = case[f"bounded_{bound}"]
        rng = JavaRandom(case["seed"])
        assert [rng.next_int(bound) for _ in expected] == expected

    def test_longs(self, known_vectors, case_name):
        case = known_vectors["cases"][case_name]
        rng = JavaRandom(case["seed"])
        assert [rng.next_long() for _ in case["longs"]] == case["longs"]

    def test_floats(self, known_vectors, case_name):
        case = known_vectors["cases"][case_name]
        rng = JavaRandom(case["seed"])
        assert [rng.next_float() for _ in case["floats"]] == case["floats"]

    def test_doubles(self, known_vectors, case_name):
        case = known_vectors["cases"][case_name]
        rng = JavaRandom(case["seed"])
        assert [rng.next_double() for _ in case["doubles"]] == case["doubles"]

    def test_booleans(self, known_vectors, case_name):
        case = known_vectors["cases"][case_name]
        rng = JavaRandom(case["seed"])
        assert [rng.next_boolean() for _ in case["booleans"]] == case["booleans"]

    def test_bytes(self, known_vectors, case_name):
        case = known_vectors["cases"][case_name]
        buffer = bytearray(len(case["bytes_7"]))
        JavaRandom(case["seed"]).next_bytes(buffer)
        assert list(buffer) == case["bytes_7"]


class TestLiteralSequences:
    """Values pinned inline so a broken fixture file cannot hide a regression."""

    def test_seed_zero_first_ints(self):
        rng = JavaRandom(0)
        assert [rng.next_int() for _ in range(5)] == [
            -1155484576,
            -723955400,
            1033096058,
            -1690734402,
            -1557280266,
        ]

    def test_seed_zero_first_double(self):
        assert JavaRandom(0).next_double() == 0.730967787376657

    def test_seed_zero_first_long(self):
        assert JavaRandom(0).next_long() == -4962768465676381896

    def test_seed_42_dice(self):
        rng = JavaRandom(42)
        assert [rng.next_int(10) for _ in range(5)] == [0, 3, 8, 4, 0]

    def test_seed_123_demo_sequence(self):
        """The ten values the classic seed 123 demo prints."""
        rng = JavaRandom(123)
        assert [rng.next_int() for _ in range(10)] == [
            -1188957731,
            1018954901,
            -39088943,
            1295249578,
            1087885590,
            -1829099982,
            -1680189627,
            1111887674,
            -833784125,
            -1621910390,
        ]

    def test_large_bounds(self):
        """Largest legal bound and a large power of two."""
        rng = JavaRandom(5)
        assert [rng.next_int(2**31 - 1) for _ in range(3)] == [
            1568779487,
            379250092,
            189533474,
        ]
        rng = JavaRandom(5)
        assert [rng.next_int(1 << 30) for _ in range(3)] == [
            784389743,
            189625046,
            94766737,
        ]

    def test_randint_dice(self):
        rng = JavaRandom(0)
        assert [rng.randint(1, 6) for _ in range(6)] == [1, 5, 2, 6, 6, 6]

    def test_seeds_equal_mod_2_64_match(self):
        """Raw seeds are reinterpreted as signed 64-bit values."""
        a = JavaRandom(-1)
        b = JavaRandom(2**64 - 1)
        assert a.seed == b.seed
        assert a.next_long() == b.next_long()
