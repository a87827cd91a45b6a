"""
Visualization module for transaction network analysis
Degree histograms and observed vs. power-law comparisons
"""

import matplotlib.pyplot as plt
import seaborn as sns
import pandas as pd
import logging
from typing import Dict, Optional

logger = logging.getLogger(__name__)


class DegreeDistributionVisualizer:
    """Visualize degree distributions of transaction networks."""

    def __init__(self, config: dict):
        """Initialize visualizer with configuration."""
        self.config = config

        figure = config['visualization']['figure']
        plt.style.use(figure['style'])
        self.dpi = figure['dpi']
        self.format = figure['format']

    def plot_degree_distribution(self, distribution: Dict[int, int],
                                 title: str = "Degree Distribution",
                                 save_path: Optional[str] = None) -> plt.Figure:
        """
        Plot node counts per degree as a bar chart.

        Parameters
        ----------
        distribution : dict
            Mapping degree -> number of nodes
        title : str
            Plot title
        save_path : str, optional
            Path to save figure

        Returns
        -------
        fig : matplotlib.Figure
        """
        fig, ax = plt.subplots(figsize=(10, 6), dpi=self.dpi)

        df = pd.DataFrame(sorted(distribution.items()), columns=['degree', 'count'])
        sns.barplot(data=df, x='degree', y='count', color='steelblue',
                    edgecolor='black', ax=ax)

        ax.set_xlabel('Degree (number of counterparties)', fontsize=12)
        ax.set_ylabel('Number of accounts', fontsize=12)
        ax.set_title(title, fontsize=14, fontweight='bold', pad=15)

        plt.tight_layout()

        if save_path:
            plt.savefig(save_path, dpi=self.dpi, format=self.format, bbox_inches='tight')
            logger.info(f"Saved degree distribution to {save_path}")

        return fig

    def plot_power_law_comparison(self, comparison: pd.DataFrame,
                                  alpha: float,
                                  score: Optional[float] = None,
                                  save_path: Optional[str] = None) -> plt.Figure:
        """
        Plot observed and theoretical degree probabilities on log-log axes.

        Parameters
        ----------
        comparison : pd.DataFrame
            Output of PowerLawEvaluator.compare
        alpha : float
            Exponent used for the theoretical curve
        score : float, optional
            Fit score shown in the title
        save_path : str, optional
            Path to save figure

        Returns
        -------
        fig : matplotlib.Figure
        """
        fig, ax = plt.subplots(figsize=(10, 6), dpi=self.dpi)

        ax.loglog(comparison['degree'], comparison['observed'], 'o',
                  color='steelblue', markersize=7, label='Observed')
        ax.loglog(comparison['degree'], comparison['theoretical'], '--',
                  color='red', linewidth=2, label=f'Power law (alpha={alpha:.2f})')

        title = 'Degree Distribution vs. Power Law'
        if score is not None:
            title += f' (fit={score:.2f})'

        ax.set_xlabel('Degree', fontsize=12)
        ax.set_ylabel('P(degree)', fontsize=12)
        ax.set_title(title, fontsize=14, fontweight='bold', pad=15)
        ax.legend()
        ax.grid(True, which='both', ls='--', linewidth=0.5)

        plt.tight_layout()

        if save_path:
            plt.savefig(save_path, dpi=self.dpi, format=self.format, bbox_inches='tight')
            logger.info(f"Saved power-law comparison to {save_path}")

        return fig
