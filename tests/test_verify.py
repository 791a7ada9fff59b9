"""Tests for the correctness checks."""

from sortbench.datagen import ElementKind
from sortbench.registry import AcceptedDomain, Algorithm, default_algorithms
from sortbench.scenarios import Scenario, default_scenarios
from sortbench.verify import (
    CORRECTNESS_TEST_SIZES,
    check,
    reference_sort,
    verify_algorithm,
    verify_all,
)

SHUFFLED = Scenario(
    name="shuffled",
    generator=lambda n: list(range(n, 0, -1)),
    element_kind=ElementKind.INTEGER,
)


class TestCheck:
    """Tests for check."""

    def test_correct_algorithm_passes(self):
        """Test a correct sort passes both checks."""
        result = check(Algorithm("Native", sorted), SHUFFLED, 10)

        assert result.passed
        assert result.error is None

    def test_wrong_order_detected(self):
        """Test an identity 'sort' fails the order check."""
        result = check(Algorithm("Identity", list), SHUFFLED, 10)

        assert not result.sorted_ok
        assert result.unmutated_ok
        assert not result.passed

    def test_mutation_detected(self):
        """Test an in-place sort fails the mutation check."""

        def in_place(values):
            values.sort()
            return values

        result = check(Algorithm("InPlace", in_place), SHUFFLED, 10)

        assert result.sorted_ok
        assert not result.unmutated_ok
        assert not result.passed

    def test_exception_reported(self):
        """Test a raising sort fails with the error text kept."""

        def broken(values):
            msg = "nope"
            raise ValueError(msg)

        result = check(Algorithm("Broken", broken), SHUFFLED, 3)

        assert not result.passed
        assert result.error == "ValueError: nope"

    def test_reference_does_not_mutate(self):
        """Test the reference sort leaves its input alone."""
        values = [3, 1, 2]

        assert reference_sort(values) == [1, 2, 3]
        assert values == [3, 1, 2]


class TestVerifyAll:
    """Tests for verify_algorithm and verify_all."""

    def test_one_result_per_scenario_and_size(self):
        """Test result count for an unrestricted algorithm."""
        scenarios = default_scenarios()

        results = verify_algorithm(Algorithm("Native", sorted), scenarios)

        assert len(results) == len(scenarios) * len(CORRECTNESS_TEST_SIZES)

    def test_integer_only_skips_float_scenarios(self):
        """Test restricted algorithms are only checked on integer data."""
        algo = Algorithm("Native", sorted, AcceptedDomain.NON_NEGATIVE_INTEGERS)
        float_names = {
            s.name for s in default_scenarios() if s.element_kind is ElementKind.FLOAT
        }

        results = verify_algorithm(algo, default_scenarios())

        assert results
        assert not {r.scenario_name for r in results} & float_names

    def test_every_registered_algorithm_passes(self):
        """Test the whole catalog is correct."""
        results = verify_all(default_algorithms(), default_scenarios())

        failures = [r for r in results if not r.passed]
        assert failures == []
