"""
Utility functions for transaction network analysis
"""

import yaml
import logging
import json
from pathlib import Path
from datetime import datetime
import numpy as np


def load_config(config_path='config/config.yaml'):
    """Load configuration from YAML file."""
    with open(config_path, 'r') as f:
        config = yaml.safe_load(f)
    return config


def setup_logging(config):
    """Setup logging configuration."""
    log_level = getattr(logging, config['logging']['level'])

    # Create logs directory
    if config['logging']['log_to_file']:
        log_dir = Path(config['logging']['log_file']).parent
        log_dir.mkdir(parents=True, exist_ok=True)

    handlers = [logging.StreamHandler()]
    if config['logging']['log_to_file']:
        handlers.append(logging.FileHandler(config['logging']['log_file']))

    logging.basicConfig(
        level=log_level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=handlers
    )

    return logging.getLogger(__name__)


def create_output_directory(base_dir='outputs', run_name=None):
    """Create timestamped output directory."""
    if run_name is None:
        timestamp = datetime.now().strftime('%Y%m%d_%H%M%S')
        run_name = f"run_{timestamp}"

    output_dir = Path(base_dir) / run_name

    for subdir in ['features', 'figures', 'reports']:
        (output_dir / subdir).mkdir(parents=True, exist_ok=True)

    return output_dir


def save_results(data, filename, output_dir, format='json'):
    """Save analysis results to file."""
    output_path = Path(output_dir) / filename

    if format == 'json':
        with open(output_path, 'w') as f:
            json.dump(data, f, indent=2, cls=NumpyEncoder)
    elif format == 'csv':
        data.to_csv(output_path, index=False)
    else:
        raise ValueError(f"Unsupported format: {format}")

    return output_path


class NumpyEncoder(json.JSONEncoder):
    """Custom JSON encoder for numpy types."""
    def default(self, obj):
        if isinstance(obj, np.integer):
            return int(obj)
        elif isinstance(obj, np.floating):
            return float(obj)
        elif isinstance(obj, np.ndarray):
            return obj.tolist()
        elif isinstance(obj, np.bool_):
            return bool(obj)
        elif isinstance(obj, (set, frozenset)):
            return sorted(obj)
        return super().default(obj)


def validate_config(config):
    """Validate configuration parameters."""
    required_keys = ['dataset', 'power_law', 'logging']

    for key in required_keys:
        if key not in config:
            raise ValueError(f"Missing required config key: {key}")

    if not config['dataset'].get('input_file'):
        raise ValueError("dataset.input_file must be set")

    delimiter = config['dataset'].get('delimiter', ',')
    if not isinstance(delimiter, str) or not delimiter:
        raise ValueError("Delimiter must be a non-empty string")

    power_law = config['power_law']
    if power_law.get('alpha', 2.5) <= 0:
        raise ValueError("Power-law exponent must be positive")

    threshold = power_law.get('strong_fit_threshold', 0.8)
    if not 0 < threshold <= 1:
        raise ValueError("Strong fit threshold must be in (0, 1]")

    if config.get('analysis', {}).get('top_hubs', 0) < 0:
        raise ValueError("Number of hubs must be non-negative")

    return True


def format_time(seconds):
    """Format seconds into readable time string."""
    hours, remainder = divmod(int(seconds), 3600)
    minutes, seconds = divmod(remainder, 60)

    if hours > 0:
        return f"{hours}h {minutes}m {seconds}s"
    elif minutes > 0:
        return f"{minutes}m {seconds}s"
    else:
        return f"{seconds}s"
