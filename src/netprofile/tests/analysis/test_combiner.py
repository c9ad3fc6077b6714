"""Tests for combining RTT and response-time summaries."""

from __future__ import annotations

import math

import numpy as np
import pytest

from netprofile.analysis.combiner import combine_rtt_and_server_response_time
from netprofile.core.errors import InconsistentOriginSetError, InvalidInputError
from netprofile.core.types import TimingSummary

A = "https://a.example:443"
B = "https://b.example:443"
C = "http://c.example:80"


def _rtt(value: float) -> TimingSummary:
    return TimingSummary(min=value, max=value * 2, avg=value * 1.5, median=value * 1.2, count=3)


def _response(median: float) -> TimingSummary:
    return TimingSummary(min=median / 2, max=median * 3, avg=median, median=median, count=5)


class TestCombineRttAndServerResponseTime:
    """Baseline, per-origin deltas and response time pass-through."""

    def test_end_to_end_example(self) -> None:
        timing = combine_rtt_and_server_response_time(
            {A: _rtt(20), B: _rtt(50)},
            {A: _response(100), B: _response(30)},
        )

        assert timing.rtt == 20
        assert dict(timing.additional_rtt_by_origin) == {A: 0, B: 30}
        assert dict(timing.server_response_time_by_origin) == {A: 100, B: 30}

    def test_baseline_is_minimum_of_rtt_minimums(self) -> None:
        rtt = {A: _rtt(42.5), B: _rtt(17.25), C: _rtt(99.0)}
        response = {origin: _response(10) for origin in rtt}

        timing = combine_rtt_and_server_response_time(rtt, response)

        assert timing.rtt == 17.25

    def test_uses_min_not_median_of_rtt_summary(self) -> None:
        rtt = {A: TimingSummary(min=10, median=80), B: TimingSummary(min=30, median=35)}
        response = {A: _response(1), B: _response(1)}

        timing = combine_rtt_and_server_response_time(rtt, response)

        assert timing.rtt == 10
        assert timing.additional_rtt_by_origin[B] == 20

    def test_deltas_are_non_negative(self) -> None:
        rtt = {A: _rtt(5), B: _rtt(0), C: _rtt(250)}
        response = {origin: _response(12) for origin in rtt}

        timing = combine_rtt_and_server_response_time(rtt, response)

        assert all(delta >= 0 for delta in timing.additional_rtt_by_origin.values())
        assert timing.additional_rtt_by_origin[B] == 0

    def test_identical_rtt_gives_zero_deltas(self) -> None:
        rtt = {A: _rtt(33), B: _rtt(33), C: _rtt(33)}
        response = {A: _response(1), B: _response(2), C: _response(3)}

        timing = combine_rtt_and_server_response_time(rtt, response)

        assert timing.rtt == 33
        assert set(timing.additional_rtt_by_origin.values()) == {0}

    def test_single_origin(self) -> None:
        timing = combine_rtt_and_server_response_time({A: _rtt(12)}, {A: _response(7)})

        assert timing.rtt == 12
        assert dict(timing.additional_rtt_by_origin) == {A: 0}
        assert dict(timing.server_response_time_by_origin) == {A: 7}

    def test_key_sets_preserved(self) -> None:
        rtt = {A: _rtt(1), B: _rtt(2), C: _rtt(3)}
        response = {C: _response(3), A: _response(1), B: _response(2)}

        timing = combine_rtt_and_server_response_time(rtt, response)

        assert set(timing.additional_rtt_by_origin) == set(rtt)
        assert set(timing.server_response_time_by_origin) == set(rtt)

    def test_response_time_is_median_pass_through(self) -> None:
        response = {A: TimingSummary(min=1, max=900, avg=300, median=123.456), B: _response(8)}

        timing = combine_rtt_and_server_response_time({A: _rtt(10), B: _rtt(11)}, response)

        assert timing.server_response_time_by_origin[A] == 123.456
        assert timing.server_response_time_by_origin[B] == 8

    def test_iteration_order_does_not_matter(self) -> None:
        forward = combine_rtt_and_server_response_time(
            {A: _rtt(20), B: _rtt(50), C: _rtt(35)},
            {A: _response(1), B: _response(2), C: _response(3)},
        )
        backward = combine_rtt_and_server_response_time(
            {C: _rtt(35), B: _rtt(50), A: _rtt(20)},
            {C: _response(3), B: _response(2), A: _response(1)},
        )

        assert forward.rtt == backward.rtt
        assert dict(forward.additional_rtt_by_origin) == dict(backward.additional_rtt_by_origin)
        assert dict(forward.server_response_time_by_origin) == dict(
            backward.server_response_time_by_origin
        )

    def test_accepts_mapping_summaries(self) -> None:
        timing = combine_rtt_and_server_response_time(
            {A: {"min": 20}, B: {"min": 50}},
            {A: {"median": 100}, B: {"median": 30}},
        )

        assert timing.rtt == 20
        assert dict(timing.additional_rtt_by_origin) == {A: 0, B: 30}


class TestCombineErrors:
    """Contract violations surface as explicit errors."""

    def test_empty_rtt_raises_invalid_input(self) -> None:
        with pytest.raises(InvalidInputError, match="No origins"):
            combine_rtt_and_server_response_time({}, {})

    def test_missing_response_origin_raises(self) -> None:
        with pytest.raises(InconsistentOriginSetError) as excinfo:
            combine_rtt_and_server_response_time(
                {A: _rtt(1), B: _rtt(2)},
                {A: _response(1)},
            )

        assert excinfo.value.missing == (B,)
        assert excinfo.value.unexpected == ()
        assert excinfo.value.origin == B
        assert excinfo.value.stage == "combine"

    def test_unexpected_response_origin_raises(self) -> None:
        with pytest.raises(InconsistentOriginSetError) as excinfo:
            combine_rtt_and_server_response_time(
                {A: _rtt(1)},
                {A: _response(1), C: _response(2)},
            )

        assert excinfo.value.unexpected == (C,)

    def test_rtt_summary_without_min_raises(self) -> None:
        with pytest.raises(InvalidInputError) as excinfo:
            combine_rtt_and_server_response_time({A: TimingSummary()}, {A: _response(1)})

        assert excinfo.value.origin == A

    def test_response_summary_without_median_raises(self) -> None:
        with pytest.raises(InvalidInputError, match="median"):
            combine_rtt_and_server_response_time({A: _rtt(1)}, {A: {"min": 3}})


class TestCombineRejectsUnusableValues:
    """Only finite, non-negative numbers reach the baseline computation."""

    @pytest.mark.parametrize("order", ["nan_first", "nan_last"])
    def test_nan_rtt_rejected_in_any_order(self, order: str) -> None:
        entries = [(A, TimingSummary(min=math.nan)), (B, _rtt(10))]
        if order == "nan_last":
            entries.reverse()

        with pytest.raises(InvalidInputError) as excinfo:
            combine_rtt_and_server_response_time(
                dict(entries), {A: _response(1), B: _response(1)}
            )

        assert excinfo.value.origin == A
        assert excinfo.value.stage == "combine"

    @pytest.mark.parametrize("value", [math.inf, -5.0])
    def test_infinite_or_negative_rtt_rejected(self, value: float) -> None:
        with pytest.raises(InvalidInputError, match="finite and non-negative"):
            combine_rtt_and_server_response_time(
                {A: {"min": value}, B: {"min": 10}},
                {A: {"median": 1}, B: {"median": 1}},
            )

    def test_nan_median_rejected(self) -> None:
        with pytest.raises(InvalidInputError) as excinfo:
            combine_rtt_and_server_response_time({A: _rtt(1)}, {A: {"median": math.nan}})

        assert excinfo.value.origin == A

    @pytest.mark.parametrize("value", [True, "20", b"20"])
    def test_non_numeric_values_rejected(self, value: object) -> None:
        with pytest.raises(InvalidInputError, match="must be a number"):
            combine_rtt_and_server_response_time({A: {"min": value}}, {A: {"median": 1}})

    def test_numpy_scalars_accepted(self) -> None:
        timing = combine_rtt_and_server_response_time(
            {A: {"min": np.float64(20)}, B: {"min": np.int64(50)}},
            {A: {"median": np.float32(100)}, B: {"median": 30}},
        )

        assert timing.rtt == 20.0
        assert dict(timing.additional_rtt_by_origin) == {A: 0.0, B: 30.0}
