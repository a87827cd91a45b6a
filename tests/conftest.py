import matplotlib

matplotlib.use("Agg")

import pytest


@pytest.fixture
def config(tmp_path):
    return {
        "dataset": {
            "input_file": str(tmp_path / "dataset.csv"),
            "delimiter": ",",
            "encoding": "utf-8",
            "output_dir": str(tmp_path / "outputs"),
        },
        "power_law": {"alpha": 2.5, "strong_fit_threshold": 0.8},
        "analysis": {"top_hubs": 3},
        "visualization": {
            "enabled": False,
            "figure": {"style": "default", "dpi": 50, "format": "png"},
        },
        "logging": {"level": "WARNING", "log_to_file": False, "log_file": "unused.log"},
    }
