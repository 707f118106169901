"""
WeibullDesign: immutable container for failure and suspension times.

Holds exact failure times and right-censored (suspension) times as two
float arrays. Validates inputs at construction time; all downstream code
trusts clean data. An empty design is representable (a parse may yield
nothing) but is rejected by the fitter.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable

import numpy as np
from numpy.typing import NDArray

from pyweibull.core.validation import (
    check_1d,
    check_array,
    check_consistent_length,
    check_finite,
    check_non_negative,
)


@dataclass(frozen=True)
class Observation:
    """A single unit: failed at ``time``, or survived to ``time`` if censored."""

    time: float
    censored: bool = False


@dataclass(frozen=True)
class WeibullDesign:
    """Immutable life-data container.

    Parameters
    ----------
    failures : NDArray
        Exact failure times, shape (n_f,). Non-negative, finite.
    suspensions : NDArray
        Right-censored times, shape (n_s,). Non-negative, finite.
    """

    failures: NDArray
    suspensions: NDArray

    @classmethod
    def for_fit(cls, failures, suspensions=None) -> WeibullDesign:
        """Create and validate life data from two sequences of times.

        Raises
        ------
        ValidationError
            If either sequence is not 1D numeric, non-negative and finite.
        """
        f = _clean_times(failures, "failures")
        s = _clean_times(() if suspensions is None else suspensions, "suspensions")
        return cls(failures=f, suspensions=s)

    @classmethod
    def from_arrays(cls, time, censored) -> WeibullDesign:
        """Create life data from parallel time and censoring-flag arrays."""
        time = check_array(time, "time").ravel()
        censored = np.asarray(censored, dtype=bool).ravel()
        check_consistent_length(time, censored, names=("time", "censored"))
        return cls.for_fit(time[~censored], time[censored])

    @classmethod
    def from_observations(cls, observations: Iterable[Observation]) -> WeibullDesign:
        """Create life data from Observation records."""
        obs = list(observations)
        return cls.from_arrays(
            [o.time for o in obs],
            [o.censored for o in obs],
        )

    @classmethod
    def from_records(cls, text: str) -> WeibullDesign:
        """Parse ``time,code`` text records. Malformed lines are dropped.

        Use ``parse_records`` directly to see how many lines were dropped.
        """
        from pyweibull.weibull._records import parse_records
        return parse_records(text).design

    @property
    def n_failures(self) -> int:
        return len(self.failures)

    @property
    def n_suspensions(self) -> int:
        return len(self.suspensions)

    @property
    def n_observations(self) -> int:
        """Total number of observations (failures + suspensions)."""
        return self.n_failures + self.n_suspensions

    @property
    def time(self) -> NDArray:
        """Pooled times, failures first."""
        return np.concatenate([self.failures, self.suspensions])

    @property
    def censored(self) -> NDArray:
        """Censoring flags aligned with ``time``."""
        return np.concatenate([
            np.zeros(self.n_failures, dtype=bool),
            np.ones(self.n_suspensions, dtype=bool),
        ])

    @property
    def observations(self) -> tuple[Observation, ...]:
        return tuple(
            Observation(float(t), bool(c))
            for t, c in zip(self.time, self.censored)
        )

    @property
    def metadata(self) -> dict[str, Any]:
        return {
            'n': self.n_observations,
            'n_failures': self.n_failures,
            'n_suspensions': self.n_suspensions,
        }

    def __repr__(self) -> str:
        return (
            f"WeibullDesign(n_failures={self.n_failures}, "
            f"n_suspensions={self.n_suspensions})"
        )


def _clean_times(values, name: str) -> NDArray:
    arr = check_array(values, name)
    if arr.ndim == 0:
        arr = arr.reshape(1)
    check_1d(arr, name)
    check_finite(arr, name)
    check_non_negative(arr, name)
    return arr.copy()
