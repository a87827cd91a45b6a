"""Graph analysis package for transaction graphs and degree statistics."""

from .graph import TransactionGraph
from .network_metrics import DegreeAnalyzer
from .power_law import (
    DEFAULT_ALPHA,
    STRONG_FIT_THRESHOLD,
    PowerLawError,
    EmptyDistributionError,
    ZeroDegreeError,
    InvalidDistributionError,
    PowerLawEvaluator,
    evaluate_power_law
)

__all__ = [
    'TransactionGraph',
    'DegreeAnalyzer',
    'DEFAULT_ALPHA',
    'STRONG_FIT_THRESHOLD',
    'PowerLawError',
    'EmptyDistributionError',
    'ZeroDegreeError',
    'InvalidDistributionError',
    'PowerLawEvaluator',
    'evaluate_power_law'
]
