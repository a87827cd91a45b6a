"""
Power-law goodness-of-fit evaluation
Compares an observed degree distribution to a fixed-exponent power law
restricted to the observed degrees
"""

import logging
from typing import Dict, Mapping, Optional, Tuple

import numpy as np
import pandas as pd

logger = logging.getLogger(__name__)

DEFAULT_ALPHA = 2.5
STRONG_FIT_THRESHOLD = 0.8


class PowerLawError(ValueError):
    """Degree distribution cannot be scored."""


class EmptyDistributionError(PowerLawError):
    """Distribution has no degrees or no nodes."""


class ZeroDegreeError(PowerLawError):
    """Distribution contains a degree with undefined power-law weight."""


class InvalidDistributionError(PowerLawError):
    """Distribution contains a negative count."""


def _aligned_probabilities(distribution: Mapping[int, int],
                           alpha: float) -> Tuple[np.ndarray, np.ndarray,
                                                  np.ndarray, np.ndarray]:
    """Return sorted degrees, counts, observed and theoretical probabilities."""
    if not distribution:
        raise EmptyDistributionError("Degree distribution is empty")

    degrees = np.array(sorted(distribution), dtype=float)
    counts = np.array([distribution[d] for d in sorted(distribution)], dtype=float)

    if np.any(degrees <= 0):
        bad = [int(d) for d in degrees if d <= 0]
        raise ZeroDegreeError(f"Power-law weight undefined for degrees {bad}")
    if np.any(counts < 0):
        raise InvalidDistributionError("Node counts must be non-negative")

    total = counts.sum()
    if total == 0:
        raise EmptyDistributionError("Degree distribution counts sum to zero")

    observed = counts / total

    weights = degrees ** -alpha
    theoretical = weights / weights.sum()

    return degrees, counts, observed, theoretical


def evaluate_power_law(distribution: Mapping[int, int],
                       alpha: float = DEFAULT_ALPHA) -> float:
    """
    Score how closely a degree distribution follows ``d ** -alpha``.

    Parameters
    ----------
    distribution : mapping
        Degree -> number of nodes; must be non-empty
    alpha : float
        Power-law exponent

    Returns
    -------
    score : float
        1 / (1 + sum of squared probability differences), in (0, 1]
    """
    _, _, observed, theoretical = _aligned_probabilities(distribution, alpha)
    mse = float(np.sum((observed - theoretical) ** 2))
    return 1.0 / (1.0 + mse)


class PowerLawEvaluator:
    """Evaluate and interpret power-law fit of degree distributions."""

    def __init__(self, config: Optional[dict] = None):
        """
        Initialize evaluator.

        Parameters
        ----------
        config : dict, optional
            Configuration dictionary; ``power_law.alpha`` and
            ``power_law.strong_fit_threshold`` override the defaults
        """
        settings = (config or {}).get('power_law', {})
        self.alpha = float(settings.get('alpha', DEFAULT_ALPHA))
        self.strong_fit_threshold = float(
            settings.get('strong_fit_threshold', STRONG_FIT_THRESHOLD)
        )

    def evaluate(self, distribution: Mapping[int, int]) -> float:
        score = evaluate_power_law(distribution, alpha=self.alpha)
        logger.info(f"Power-law fit score {score:.4f} (alpha={self.alpha})")
        return score

    def compare(self, distribution: Mapping[int, int]) -> pd.DataFrame:
        """
        Tabulate observed vs. theoretical probability per degree.

        Returns
        -------
        comparison : pd.DataFrame
            Columns: degree, count, observed, theoretical, squared_error
        """
        degrees, counts, observed, theoretical = _aligned_probabilities(
            distribution, self.alpha
        )
        return pd.DataFrame({
            'degree': degrees.astype(int),
            'count': counts.astype(int),
            'observed': observed,
            'theoretical': theoretical,
            'squared_error': (observed - theoretical) ** 2
        })

    def interpret(self, score: float) -> str:
        """Classify a score as a 'strong' or 'weak' fit."""
        return 'strong' if score > self.strong_fit_threshold else 'weak'

    def summarize(self, distribution: Dict[int, int]) -> Dict[str, object]:
        score = self.evaluate(distribution)
        return {
            'score': score,
            'alpha': self.alpha,
            'threshold': self.strong_fit_threshold,
            'verdict': self.interpret(score)
        }
