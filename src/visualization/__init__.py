"""Visualization package for degree distribution plots."""

from .degree_plots import DegreeDistributionVisualizer

__all__ = ['DegreeDistributionVisualizer']
