"""
Main analysis pipeline for transaction network analysis
Degree distribution and power-law fit of account counterparty graphs
"""

import sys
import time
from pathlib import Path
import logging

import matplotlib.pyplot as plt

# Add src to path
sys.path.insert(0, str(Path(__file__).parent / 'src'))

from utils import (
    load_config, setup_logging, create_output_directory,
    save_results, validate_config, format_time
)
from data_loader import EdgeListLoader
from graph_analysis import DegreeAnalyzer, PowerLawEvaluator
from visualization import DegreeDistributionVisualizer

STRONG_FIT_NARRATIVE = (
    "This indicates a strong fit to a power-law distribution. The network likely "
    "has a few highly connected nodes and many nodes with fewer connections, "
    "forming a hierarchical structure."
)
WEAK_FIT_NARRATIVE = (
    "This indicates a weak fit to a power-law distribution. The network may not "
    "exhibit a centralized structure typically seen in social or transactional "
    "networks, indicating a more evenly distributed connectivity."
)


def format_report(results: dict) -> list:
    """
    Render analysis results as console report lines.

    Parameters
    ----------
    results : dict
        Output of TransactionNetworkPipeline.run

    Returns
    -------
    lines : list of str
    """
    distribution = results['degree_distribution']
    lines = [
        "Degree Distribution: The graph has the following degree distribution, "
        "where the key represents the degree and the value represents the number "
        f"of nodes with that degree: {distribution}"
    ]

    for degree, count in distribution.items():
        lines.append(
            f"{count} nodes have a degree of {degree}. This means {count} accounts "
            f"participated in {degree} transactions."
        )

    power_law = results.get('power_law')
    if power_law is None:
        lines.append("Power-Law Fit: not available, the graph has no edges.")
    elif power_law['verdict'] == 'strong':
        lines.append(f"Power-Law Fit: {power_law['score']:.2f}. {STRONG_FIT_NARRATIVE}")
    else:
        lines.append(f"Power-Law Fit: {power_law['score']:.2f}. {WEAK_FIT_NARRATIVE}")

    return lines


class TransactionNetworkPipeline:
    """Complete analysis pipeline for transaction networks."""

    def __init__(self, config_path='config/config.yaml', config=None):
        """Initialize pipeline from a configuration file or dictionary."""
        self.config = config if config is not None else load_config(config_path)
        validate_config(self.config)

        self.logger = setup_logging(self.config)
        self.logger.info("=" * 80)
        self.logger.info("Transaction Network Analysis Pipeline Initialized")
        self.logger.info("=" * 80)

        self.output_dir = create_output_directory(
            self.config['dataset'].get('output_dir', 'outputs')
        )
        self.logger.info(f"Output directory: {self.output_dir}")

        self.loader = EdgeListLoader(self.config)
        self.degree_analyzer = DegreeAnalyzer(self.config)
        self.evaluator = PowerLawEvaluator(self.config)

        self.visualizer = None
        if self.config.get('visualization', {}).get('enabled', False):
            self.visualizer = DegreeDistributionVisualizer(self.config)

    def run(self, file_path=None) -> dict:
        """
        Load the edge list and compute all statistics.

        Parameters
        ----------
        file_path : str, optional
            Edge list path; defaults to ``dataset.input_file``

        Returns
        -------
        results : dict
            All analysis results
        """
        start_time = time.time()

        self.logger.info("Step 1/4: Loading edge list...")
        loaded = self.loader.load(file_path)
        G = loaded['graph']
        results = {
            'data_info': {
                'source': loaded['source'],
                'n_records': loaded['n_records'],
                'n_edges_added': loaded['n_edges_added'],
                'n_skipped': loaded['n_skipped']
            }
        }

        self.logger.info("Step 2/4: Computing degree distribution...")
        distribution = self.degree_analyzer.degree_distribution(G)
        results['degree_distribution'] = distribution
        results['global_metrics'] = self.degree_analyzer.extract_global_metrics(G)

        n_hubs = self.config.get('analysis', {}).get('top_hubs', 5)
        hubs = self.degree_analyzer.top_hubs(G, n_hubs)
        results['two_hop'] = {
            node: {'degree': degree, 'distance_two': G.neighbors_at_distance_two(node)}
            for node, degree in hubs
        }

        self.logger.info("Step 3/4: Evaluating power-law fit...")
        comparison = None
        if distribution:
            results['power_law'] = self.evaluator.summarize(distribution)
            comparison = self.evaluator.compare(distribution)
        else:
            self.logger.warning("Graph is empty, skipping power-law evaluation")
            results['power_law'] = None

        self.logger.info("Step 4/4: Saving results...")
        features_dir = self.output_dir / 'features'
        save_results(self.degree_analyzer.distribution_table(distribution),
                     'degree_distribution.csv', features_dir, format='csv')
        if comparison is not None:
            save_results(comparison, 'power_law_comparison.csv',
                         features_dir, format='csv')

        if self.visualizer is not None and comparison is not None:
            self._plot(distribution, comparison, results['power_law']['score'])

        elapsed_time = time.time() - start_time
        results['analysis_time'] = elapsed_time
        self.logger.info(f"Analysis completed in {format_time(elapsed_time)}")

        save_results(results, 'results.json', features_dir)
        return results

    def _plot(self, distribution, comparison, score):
        viz_dir = self.output_dir / 'figures'
        fmt = self.visualizer.format

        fig = self.visualizer.plot_degree_distribution(
            distribution,
            save_path=viz_dir / f'degree_distribution.{fmt}'
        )
        plt.close(fig)

        fig = self.visualizer.plot_power_law_comparison(
            comparison,
            alpha=self.evaluator.alpha,
            score=score,
            save_path=viz_dir / f'power_law_fit.{fmt}'
        )
        plt.close(fig)

    def generate_report(self, results: dict) -> Path:
        """Print the console report and write it to the reports directory."""
        lines = format_report(results)
        for line in lines:
            print(line)

        report_path = self.output_dir / 'reports' / 'analysis_summary.txt'
        report_path.parent.mkdir(parents=True, exist_ok=True)

        with open(report_path, 'w') as f:
            f.write("=" * 80 + "\n")
            f.write("TRANSACTION NETWORK ANALYSIS - SUMMARY REPORT\n")
            f.write("=" * 80 + "\n\n")

            info = results['data_info']
            f.write(f"Source: {info['source']}\n")
            f.write(f"Records read: {info['n_records']} "
                    f"(skipped: {info['n_skipped']})\n\n")

            f.write("Network Metrics Summary:\n")
            f.write("-" * 40 + "\n")
            for key, value in results['global_metrics'].items():
                f.write(f"{key:<24}{value}\n")
            f.write("\n")

            if results['two_hop']:
                f.write("Hub Accounts (degree / nodes at distance two):\n")
                f.write("-" * 40 + "\n")
                for node, stats in results['two_hop'].items():
                    f.write(f"{node:<24}{stats['degree']} / {stats['distance_two']}\n")
                f.write("\n")

            for line in lines:
                f.write(line + "\n")

        self.logger.info(f"Generated report: {report_path}")
        return report_path


def main():
    """Main execution function."""
    pipeline = TransactionNetworkPipeline()

    try:
        results = pipeline.run()
    except OSError as e:
        logging.getLogger(__name__).error(f"Analysis aborted: {str(e)}")
        sys.exit(1)

    pipeline.generate_report(results)


if __name__ == '__main__':
    main()
