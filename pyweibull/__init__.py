"""
PyWeibull: censored Weibull life-data analysis for maintenance planning.

Fits a two-parameter Weibull model to failure and suspension times,
attaches bootstrap confidence intervals, and finds the cost-optimal
age-replacement interval.

Submodules:
    weibull: Reliability functions, record parsing, censored MLE
    montecarlo: Percentile bootstrap confidence intervals
    maintenance: PM / CM / total cost rates and grid search
"""

__version__ = "0.1.0"

from pyweibull import weibull
from pyweibull import montecarlo
from pyweibull import maintenance
from pyweibull.weibull import fit, parse_records
from pyweibull.montecarlo import bootstrap_ci
from pyweibull.maintenance import cost_grid

__all__ = [
    "__version__",
    "weibull",
    "montecarlo",
    "maintenance",
    "fit",
    "parse_records",
    "bootstrap_ci",
    "cost_grid",
]
