# Copyright (c) Meta Platforms, Inc. and affiliates.
# All rights reserved.
#
# This source code is licensed under the BSD-style license found in the
# LICENSE file in the root directory of this source tree.

"""
Time ranges for events.

An event's temporal extent takes exactly one of four shapes:

- ``Time``: a single instant (Unix timestamp, integer seconds)
- ``Timespan``: a pair of different instants
- ``Date``: a single all-day date (ISO ``YYYY-MM-DD``)
- ``Datespan``: a pair of different dates

Each shape carries a read-only ``object`` tag. Building a range through
``time_range()`` or ``When`` collapses a pair with equal endpoints into the
single shape, so a ``Timespan`` never starts and ends on the same instant.

Example:
    >>> when = When()
    >>> when.set_start(1409594400)
    >>> when.set_end(1409598000)
    >>> when.to_wire()
    {'start_time': 1409594400, 'end_time': 1409598000}
"""

from typing import Annotated, Any, Dict, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, StrictInt, model_validator

ISO_DATE_PATTERN = r"^\d{4}-\d{2}-\d{2}$"

# Either kind of endpoint accepted by the start/end setters
Endpoint = Union[int, str]


class _Shape(BaseModel):
    """Base class for the four time range shapes."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    def to_wire(self) -> Dict[str, Any]:
        """Return the shape's wire keys, without the ``object`` tag."""
        return self.model_dump(exclude={"object"})


class Time(_Shape):
    """A single instant."""

    object: Literal["time"] = Field(default="time", description="Shape tag")
    time: StrictInt = Field(description="Unix timestamp in seconds")

    @property
    def start(self) -> int:
        return self.time

    @property
    def end(self) -> int:
        return self.time


class Timespan(_Shape):
    """A pair of different instants."""

    object: Literal["timespan"] = Field(default="timespan", description="Shape tag")
    start_time: StrictInt = Field(description="Start as a Unix timestamp in seconds")
    end_time: StrictInt = Field(description="End as a Unix timestamp in seconds")

    @model_validator(mode="after")
    def check_distinct_endpoints(self) -> "Timespan":
        if self.start_time == self.end_time:
            raise ValueError(
                f"start_time and end_time are both {self.start_time}; use Time instead"
            )
        return self

    @property
    def start(self) -> int:
        return self.start_time

    @property
    def end(self) -> int:
        return self.end_time


class Date(_Shape):
    """A single all-day date."""

    object: Literal["date"] = Field(default="date", description="Shape tag")
    date: str = Field(pattern=ISO_DATE_PATTERN, description="ISO-8601 calendar date")

    @property
    def start(self) -> str:
        return self.date

    @property
    def end(self) -> str:
        return self.date


class Datespan(_Shape):
    """A pair of different all-day dates."""

    object: Literal["datespan"] = Field(default="datespan", description="Shape tag")
    start_date: str = Field(pattern=ISO_DATE_PATTERN, description="First day")
    end_date: str = Field(pattern=ISO_DATE_PATTERN, description="Last day")

    @model_validator(mode="after")
    def check_distinct_endpoints(self) -> "Datespan":
        if self.start_date == self.end_date:
            raise ValueError(
                f"start_date and end_date are both {self.start_date}; use Date instead"
            )
        return self

    @property
    def start(self) -> str:
        return self.start_date

    @property
    def end(self) -> str:
        return self.end_date


# Discriminated union over the four shapes
TimeRange = Annotated[
    Union[Time, Timespan, Date, Datespan],
    Field(discriminator="object"),
]


def _is_instant(value: Any) -> bool:
    # bool is an int subclass but never a timestamp
    return isinstance(value, int) and not isinstance(value, bool)


def _check_endpoint(value: Any) -> None:
    if not _is_instant(value) and not isinstance(value, str):
        raise TypeError(
            f"Time range endpoints must be Unix timestamps (int) or ISO dates (str), "
            f"got {type(value).__name__}"
        )


def time_range(start: Endpoint, end: Endpoint) -> TimeRange:
    """
    Build the time range shape matching a pair of endpoints.

    Two timestamps give a ``Timespan`` (or ``Time`` when equal); two ISO dates
    give a ``Datespan`` (or ``Date`` when equal).

    Raises:
        TypeError: If the endpoints are not both timestamps or both dates
    """
    _check_endpoint(start)
    _check_endpoint(end)

    if _is_instant(start) and _is_instant(end):
        if start == end:
            return Time(time=start)
        return Timespan(start_time=start, end_time=end)

    if isinstance(start, str) and isinstance(end, str):
        if start == end:
            return Date(date=start)
        return Datespan(start_date=start, end_date=end)

    raise TypeError(
        f"Cannot mix a timestamp and a date in one time range: {start!r}, {end!r}"
    )


def _pair(start: Optional[Endpoint], end: Optional[Endpoint]) -> TimeRange:
    # A lone endpoint stands for both ends
    if start is None:
        start = end
    if end is None:
        end = start
    return time_range(start, end)


class When:
    """
    Mutable holder for an event's time range.

    Holds zero or one shape. Can be built from a shape or from the same
    keyword options the wire format uses::

        When(time=1408875644)
        When(start_time=1409594400, end_time=1409598000)
        When(date="1912-06-23")
        When(start_date="1815-12-10", end_date="1852-11-27")
    """

    def __init__(
        self,
        shape: Optional[TimeRange] = None,
        *,
        time: Optional[int] = None,
        start_time: Optional[int] = None,
        end_time: Optional[int] = None,
        date: Optional[str] = None,
        start_date: Optional[str] = None,
        end_date: Optional[str] = None,
    ):
        options = {
            "time": time is not None,
            "timespan": start_time is not None or end_time is not None,
            "date": date is not None,
            "datespan": start_date is not None or end_date is not None,
        }
        given = [name for name, present in options.items() if present]

        if shape is not None and given:
            raise ValueError("Pass either a shape or keyword options to When, not both")
        if len(given) > 1:
            raise ValueError(f"When accepts a single shape, got options for {given}")

        if time is not None:
            shape = time_range(time, time)
        elif options["timespan"]:
            shape = _pair(start_time, end_time)
        elif date is not None:
            shape = time_range(date, date)
        elif options["datespan"]:
            shape = _pair(start_date, end_date)

        self._shape: Optional[TimeRange] = shape

    @classmethod
    def from_wire(cls, data: Optional[Dict[str, Any]]) -> "When":
        """
        Rebuild a When from its wire object.

        The first key set found wins, in the order time, timespan, date,
        datespan. Any other keys (including ``object``) are ignored.
        """
        data = data or {}

        if data.get("time") is not None:
            return cls(time=data["time"])
        if data.get("start_time") is not None or data.get("end_time") is not None:
            return cls(start_time=data.get("start_time"), end_time=data.get("end_time"))
        if data.get("date") is not None:
            return cls(date=data["date"])
        if data.get("start_date") is not None or data.get("end_date") is not None:
            return cls(start_date=data.get("start_date"), end_date=data.get("end_date"))
        return cls()

    def to_wire(self) -> Dict[str, Any]:
        """Return the active shape's keys, or ``{}`` when nothing is set."""
        if self._shape is None:
            return {}
        return self._shape.to_wire()

    @property
    def shape(self) -> Optional[TimeRange]:
        return self._shape

    @property
    def is_set(self) -> bool:
        return self._shape is not None

    @property
    def object(self) -> Optional[str]:
        """Tag of the active shape (``time``, ``timespan``, ``date``, ``datespan``)."""
        return self._shape.object if self._shape is not None else None

    @object.setter
    def object(self, value: str) -> None:
        # The tag always follows the endpoints; assignments are ignored
        pass

    @property
    def start(self) -> Optional[Endpoint]:
        return self._shape.start if self._shape is not None else None

    @property
    def end(self) -> Optional[Endpoint]:
        return self._shape.end if self._shape is not None else None

    def set_start(self, value: Endpoint) -> None:
        """
        Move the start of the range.

        The end is kept when it is of the same kind (timestamp or date) as
        ``value``; otherwise it is dropped and the range collapses to ``value``.
        """
        _check_endpoint(value)
        end = self.end
        if end is None or _is_instant(end) != _is_instant(value):
            end = value
        self._shape = time_range(value, end)

    def set_end(self, value: Endpoint) -> None:
        """Move the end of the range. Mirrors ``set_start()``."""
        _check_endpoint(value)
        start = self.start
        if start is None or _is_instant(start) != _is_instant(value):
            start = value
        self._shape = time_range(start, value)

    def clear(self) -> None:
        self._shape = None

    # Per-key accessors matching the wire names

    @property
    def time(self) -> Optional[int]:
        return self._shape.time if isinstance(self._shape, Time) else None

    @time.setter
    def time(self, value: int) -> None:
        self._shape = time_range(value, value)

    @property
    def start_time(self) -> Optional[int]:
        return self._shape.start_time if isinstance(self._shape, Timespan) else None

    @property
    def end_time(self) -> Optional[int]:
        return self._shape.end_time if isinstance(self._shape, Timespan) else None

    @property
    def date(self) -> Optional[str]:
        return self._shape.date if isinstance(self._shape, Date) else None

    @date.setter
    def date(self, value: str) -> None:
        self._shape = time_range(value, value)

    @property
    def start_date(self) -> Optional[str]:
        return self._shape.start_date if isinstance(self._shape, Datespan) else None

    @property
    def end_date(self) -> Optional[str]:
        return self._shape.end_date if isinstance(self._shape, Datespan) else None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, When):
            return NotImplemented
        return self._shape == other._shape

    def __repr__(self) -> str:
        return f"When({self._shape!r})"
