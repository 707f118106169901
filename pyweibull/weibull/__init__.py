"""
Weibull life-data analysis.

Public API:
    fit(failures, suspensions) -> WeibullSolution
    parse_records(text) -> ParsedRecords
    neg_log_likelihood(beta, eta, failures, suspensions) -> float
    survival / density / hazard / cdf / percentile_life / mean_life
"""

from pyweibull.weibull.functions import (
    cdf,
    density,
    hazard,
    mean_life,
    percentile_life,
    survival,
)
from pyweibull.weibull._common import FitParams, WeibullParams
from pyweibull.weibull._likelihood import is_feasible, neg_log_likelihood
from pyweibull.weibull._records import ParsedRecords, format_records, parse_records
from pyweibull.weibull.design import Observation, WeibullDesign
from pyweibull.weibull.solution import WeibullSolution
from pyweibull.weibull.solvers import fit

__all__ = [
    "fit",
    "WeibullSolution",
    "WeibullDesign",
    "Observation",
    "WeibullParams",
    "FitParams",
    "parse_records",
    "format_records",
    "ParsedRecords",
    "neg_log_likelihood",
    "is_feasible",
    "survival",
    "cdf",
    "density",
    "hazard",
    "percentile_life",
    "mean_life",
]
