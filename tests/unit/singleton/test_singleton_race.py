"""Tests for the lazy-initialization race."""

import time

import pytest

from patternbook.core.exceptions import RaceTimeoutError, ValidationError
from patternbook.singleton import (
    DoubleCheckedChocolateBoiler,
    EagerChocolateBoiler,
    SimpleChocolateBoiler,
    SynchronizedChocolateBoiler,
    run_race,
)


class TestRace:
    def test_naive_lazy_accessor_hands_out_several_instances(self):
        SimpleChocolateBoiler.creation_delay = 0.2
        result = run_race(SimpleChocolateBoiler.get_instance, workers=4)

        assert len(result.instances) == 4
        assert result.distinct_instances > 1
        assert not result.is_singleton

    @pytest.mark.parametrize("variant", [SynchronizedChocolateBoiler, DoubleCheckedChocolateBoiler])
    def test_locked_accessors_hand_out_one_instance(self, variant):
        variant.creation_delay = 0.05
        result = run_race(variant.get_instance, workers=4)

        assert len(result.instances) == 4
        assert result.is_singleton
        assert result.instances[0] is variant.get_instance()

    def test_eager_accessor_hands_out_one_instance(self):
        result = run_race(EagerChocolateBoiler.get_instance, workers=3)
        assert result.is_singleton

    def test_result_describes_itself(self):
        result = run_race(EagerChocolateBoiler.get_instance)
        assert str(result) == "EagerChocolateBoiler.get_instance: 2 threads saw one instance"

    def test_needs_two_workers(self):
        with pytest.raises(ValidationError):
            run_race(EagerChocolateBoiler.get_instance, workers=1)

    def test_accessor_errors_are_raised(self):
        def broken():
            raise RuntimeError("boiler on fire")

        with pytest.raises(RuntimeError, match="boiler on fire"):
            run_race(broken)

    def test_stalled_threads_are_reported(self):
        def slow():
            time.sleep(0.5)
            return object()

        with pytest.raises(RaceTimeoutError) as exc_info:
            run_race(slow, workers=2, timeout=0.05)

        assert exc_info.value.stalled == ["race-0", "race-1"]
        assert exc_info.value.accessor.endswith("slow")
