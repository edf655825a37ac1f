"""Unit tests for the specification pattern."""

from __future__ import annotations

from fleetlist.kernel.ddd import (
    AlwaysSatisfied,
    AndSpecification,
    BaseSpecification,
    LambdaSpecification,
)


class IsEven(BaseSpecification[int]):
    def is_satisfied_by(self, candidate: int) -> bool:
        return candidate % 2 == 0


class TestCombinators:
    def test_and(self) -> None:
        spec = IsEven() & LambdaSpecification(lambda n: n > 2)
        assert isinstance(spec, AndSpecification)
        assert spec.filter([1, 2, 3, 4, 6]) == [4, 6]

    def test_or(self) -> None:
        spec = IsEven() | LambdaSpecification(lambda n: n == 3)
        assert spec.filter([1, 2, 3, 5]) == [2, 3]

    def test_not(self) -> None:
        assert (~IsEven()).filter([1, 2, 3]) == [1, 3]


class TestAlwaysSatisfied:
    def test_accepts_everything(self) -> None:
        assert AlwaysSatisfied().filter([3, 1, 2]) == [3, 1, 2]

    def test_is_neutral_for_and(self) -> None:
        even = IsEven()
        assert (AlwaysSatisfied() & even) is even
        assert (even & AlwaysSatisfied()) is even

    def test_filter_returns_new_list(self) -> None:
        items = [1, 2]
        out = AlwaysSatisfied().filter(items)
        assert out == items
        assert out is not items


class TestLambdaSpecification:
    def test_name_defaults_to_function_name(self) -> None:
        def positive(n: int) -> bool:
            return n > 0

        assert LambdaSpecification(positive).name == "positive"

    def test_result_is_bool(self) -> None:
        assert LambdaSpecification(lambda n: n).is_satisfied_by(5) is True
