"""
Data loading module for transaction edge lists
Parses delimited counterparty records into a transaction graph
"""

import logging
from pathlib import Path
from typing import Dict, Iterable, Optional, Tuple, Union

from graph_analysis import TransactionGraph

logger = logging.getLogger(__name__)

Line = Union[str, bytes]


class EdgeListLoader:
    """Load transaction pairs from a delimited text file."""

    def __init__(self, config: dict):
        """
        Initialize edge list loader.

        Parameters
        ----------
        config : dict
            Configuration dictionary
        """
        self.config = config
        dataset = config['dataset']
        self.input_file = dataset.get('input_file')
        self.delimiter = dataset.get('delimiter', ',')
        self.encoding = dataset.get('encoding', 'utf-8')

    def load(self, file_path: Optional[str] = None) -> Dict[str, object]:
        """
        Build a graph from an edge list file.

        Parameters
        ----------
        file_path : str, optional
            Path to the edge list; defaults to ``dataset.input_file``

        Returns
        -------
        result : dict
            Graph plus record, edge and skipped-record counts
        """
        path = Path(file_path or self.input_file)

        try:
            with open(path, 'rb') as f:
                result = self.parse_lines(f)
        except OSError as e:
            logger.error(f"Failed to open edge list {path}: {str(e)}")
            raise

        result['source'] = str(path)
        return result

    def parse_lines(self, lines: Iterable[Line]) -> Dict[str, object]:
        """
        Build a graph from an iterable of text or byte lines.

        Short records and lines that cannot be decoded are skipped.
        """
        G = TransactionGraph()
        n_records = 0
        n_edges_added = 0
        n_skipped = 0

        for line in lines:
            n_records += 1
            edge = self.parse_record(line)
            if edge is None:
                n_skipped += 1
                continue
            G.add_edge(*edge)
            n_edges_added += 1

        logger.info(f"Read {n_records} records: {G.number_of_nodes()} nodes, "
                    f"{G.number_of_edges()} unique edges")
        if n_skipped:
            logger.warning(f"Skipped {n_skipped} malformed or unreadable records")

        return {
            'graph': G,
            'n_records': n_records,
            'n_edges_added': n_edges_added,
            'n_skipped': n_skipped,
            'source': None
        }

    def parse_record(self, line: Line) -> Optional[Tuple[str, str]]:
        """
        Extract an edge from a single record.

        Returns
        -------
        edge : tuple of str or None
            Trimmed first two fields, or None if the record is unusable
        """
        if isinstance(line, bytes):
            try:
                line = line.decode(self.encoding)
            except UnicodeDecodeError:
                logger.debug(f"Skipping undecodable record: {line[:40]!r}")
                return None

        parts = line.split(self.delimiter)
        if len(parts) < 2:
            return None

        return parts[0].strip(), parts[1].strip()
