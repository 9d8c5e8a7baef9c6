# Copyright (c) Meta Platforms, Inc. and affiliates.
# All rights reserved.
#
# This source code is licensed under the BSD-style license found in the
# LICENSE file in the root directory of this source tree.

"""Tests for time range shapes and the When holder."""

import pytest
from pydantic import ValidationError

from nylas_events.core.when import (
    Date,
    Datespan,
    Time,
    Timespan,
    When,
    time_range,
)


class TestTimeRange:
    """Test the time_range() factory."""

    def test_equal_instants_collapse_to_time(self):
        assert time_range(1408875644, 1408875644) == Time(time=1408875644)

    def test_different_instants_give_timespan(self):
        shape = time_range(1409594400, 1409598000)
        assert shape == Timespan(start_time=1409594400, end_time=1409598000)

    def test_equal_dates_collapse_to_date(self):
        assert time_range("1912-06-23", "1912-06-23") == Date(date="1912-06-23")

    def test_different_dates_give_datespan(self):
        shape = time_range("1815-12-10", "1852-11-27")
        assert shape == Datespan(start_date="1815-12-10", end_date="1852-11-27")

    def test_mixed_kinds_rejected(self):
        with pytest.raises(TypeError):
            time_range(1409594400, "1912-06-23")

    def test_bool_is_not_an_instant(self):
        with pytest.raises(TypeError):
            time_range(True, True)

    def test_float_rejected(self):
        with pytest.raises(TypeError):
            time_range(1.5, 1.5)


class TestShapes:
    """Test the four shape models."""

    def test_timespan_rejects_equal_endpoints(self):
        with pytest.raises(ValidationError):
            Timespan(start_time=10, end_time=10)

    def test_datespan_rejects_equal_endpoints(self):
        with pytest.raises(ValidationError):
            Datespan(start_date="2024-01-01", end_date="2024-01-01")

    def test_date_requires_iso_format(self):
        with pytest.raises(ValidationError):
            Date(date="23/06/1912")

    def test_object_tags(self):
        assert Time(time=1).object == "time"
        assert Timespan(start_time=1, end_time=2).object == "timespan"
        assert Date(date="2024-01-01").object == "date"
        assert Datespan(start_date="2024-01-01", end_date="2024-01-02").object == "datespan"

    def test_wire_excludes_object_tag(self):
        assert Timespan(start_time=1, end_time=2).to_wire() == {
            "start_time": 1,
            "end_time": 2,
        }

    def test_shapes_are_frozen(self):
        shape = Time(time=1)
        with pytest.raises(ValidationError):
            shape.time = 2


class TestWhenConstruction:
    """Test building When from options."""

    def test_empty(self):
        when = When()
        assert not when.is_set
        assert when.object is None
        assert when.start is None
        assert when.to_wire() == {}

    def test_time_option(self):
        assert When(time=1408875644).to_wire() == {"time": 1408875644}

    def test_timespan_options(self):
        when = When(start_time=1409594400, end_time=1409598000)
        assert when.object == "timespan"
        assert when.start == 1409594400
        assert when.end == 1409598000

    def test_timespan_options_with_equal_endpoints_collapse(self):
        when = When(start_time=1409594400, end_time=1409594400)
        assert when.to_wire() == {"time": 1409594400}

    def test_lone_endpoint_stands_for_both(self):
        assert When(start_time=5).to_wire() == {"time": 5}
        assert When(end_date="2024-01-01").to_wire() == {"date": "2024-01-01"}

    def test_datespan_options(self):
        when = When(start_date="1815-12-10", end_date="1852-11-27")
        assert when.to_wire() == {"start_date": "1815-12-10", "end_date": "1852-11-27"}

    def test_multiple_shapes_rejected(self):
        with pytest.raises(ValueError):
            When(time=1, date="2024-01-01")

    def test_shape_and_options_rejected(self):
        with pytest.raises(ValueError):
            When(Time(time=1), time=1)

    def test_from_shape(self):
        when = When(Date(date="1912-06-23"))
        assert when.date == "1912-06-23"


class TestWhenSetters:
    """Test set_start()/set_end() inference."""

    def test_first_write_gives_single_shape(self):
        when = When()
        when.set_start(1408875644)
        assert when.to_wire() == {"time": 1408875644}

    def test_equal_endpoints_give_time(self):
        when = When()
        when.set_start(1408875644)
        when.set_end(1408875644)
        assert when.to_wire() == {"time": 1408875644}

    def test_different_instants_give_timespan(self):
        when = When()
        when.set_start(1409594400)
        when.set_end(1409598000)
        assert when.to_wire() == {"start_time": 1409594400, "end_time": 1409598000}

    def test_equal_dates_give_date(self):
        when = When()
        when.set_start("1912-06-23")
        when.set_end("1912-06-23")
        assert when.to_wire() == {"date": "1912-06-23"}

    def test_different_dates_give_datespan(self):
        when = When()
        when.set_start("1815-12-10")
        when.set_end("1852-11-27")
        assert when.to_wire() == {"start_date": "1815-12-10", "end_date": "1852-11-27"}

    def test_span_collapses_when_endpoints_meet(self):
        when = When(start_time=1409594400, end_time=1409598000)
        when.set_end(1409594400)
        assert when.object == "time"

    def test_set_end_on_end_only_keeps_start(self):
        when = When(start_time=1409594400, end_time=1409598000)
        when.set_end(1409600000)
        assert when.start == 1409594400
        assert when.end == 1409600000

    def test_switching_kind_discards_other_endpoint(self):
        when = When(start_time=1409594400, end_time=1409598000)
        when.set_start("2024-01-01")
        assert when.to_wire() == {"date": "2024-01-01"}
        when.set_end("2024-01-03")
        assert when.to_wire() == {"start_date": "2024-01-01", "end_date": "2024-01-03"}

    def test_invalid_type_rejected(self):
        when = When()
        with pytest.raises(TypeError):
            when.set_start(None)

    def test_time_and_date_setters_replace_shape(self):
        when = When(start_time=1, end_time=2)
        when.date = "1912-06-23"
        assert when.to_wire() == {"date": "1912-06-23"}
        when.time = 7
        assert when.to_wire() == {"time": 7}

    def test_clear(self):
        when = When(time=1)
        when.clear()
        assert not when.is_set

    def test_object_assignment_does_not_change_shape(self):
        when = When(start_time=1409594400, end_time=1409598000)
        when.object = "date"
        assert when.object == "timespan"
        assert when.to_wire() == {"start_time": 1409594400, "end_time": 1409598000}


class TestWhenWire:
    """Test reading When from the wire."""

    @pytest.mark.parametrize(
        "wire",
        [
            {"time": 1408875644},
            {"start_time": 1409594400, "end_time": 1409598000},
            {"date": "1912-06-23"},
            {"start_date": "1815-12-10", "end_date": "1852-11-27"},
        ],
    )
    def test_round_trip(self, wire):
        assert When.from_wire(wire).to_wire() == wire

    def test_object_and_unknown_keys_ignored(self):
        when = When.from_wire({"time": 1409594400, "object": "time", "timezone": "UTC"})
        assert when.time == 1409594400
        assert when.object == "time"

    def test_empty_and_none(self):
        assert not When.from_wire({}).is_set
        assert not When.from_wire(None).is_set

    def test_first_key_set_wins(self):
        when = When.from_wire({"time": 1, "date": "2024-01-01"})
        assert when.object == "time"

    def test_equality(self):
        assert When(time=1) == When.from_wire({"time": 1})
        assert When(time=1) != When(time=2)
