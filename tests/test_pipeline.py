import json

import pytest

from main_pipeline import TransactionNetworkPipeline, format_report

EDGES = """sender,receiver,amount
A,B,10
A,C,5
A,D,7
B,C,3
E,F,1
malformed
A,B,2
"""


@pytest.fixture
def dataset(config, tmp_path):
    path = tmp_path / "dataset.csv"
    path.write_text(EDGES, encoding="utf-8")
    return path


def test_run_computes_statistics(config, dataset):
    pipeline = TransactionNetworkPipeline(config=config)
    results = pipeline.run()

    assert results["data_info"]["n_records"] == 8
    assert results["data_info"]["n_skipped"] == 1
    # A:{B,C,D} B:{A,C} C:{A,B} D:{A} E:{F} F:{E} sender:{receiver} receiver:{sender}
    assert results["degree_distribution"] == {1: 5, 2: 2, 3: 1}
    assert results["global_metrics"]["n_nodes"] == 8
    assert results["global_metrics"]["n_components"] == 3

    power_law = results["power_law"]
    assert 0 < power_law["score"] <= 1
    assert power_law["verdict"] in ("strong", "weak")

    assert list(results["two_hop"]) == ["A", "B", "C"]
    assert results["two_hop"]["A"] == {"degree": 3, "distance_two": 2}


def test_run_writes_result_files(config, dataset):
    pipeline = TransactionNetworkPipeline(config=config)
    pipeline.run()

    features = pipeline.output_dir / "features"
    assert (features / "degree_distribution.csv").exists()
    assert (features / "power_law_comparison.csv").exists()
    saved = json.loads((features / "results.json").read_text())
    assert saved["degree_distribution"] == {"1": 5, "2": 2, "3": 1}
    assert not list((pipeline.output_dir / "figures").iterdir())


def test_run_with_visualization(config, dataset):
    config["visualization"]["enabled"] = True
    pipeline = TransactionNetworkPipeline(config=config)
    pipeline.run()

    figures = pipeline.output_dir / "figures"
    assert (figures / "degree_distribution.png").exists()
    assert (figures / "power_law_fit.png").exists()


def test_run_on_empty_input(config, tmp_path):
    (tmp_path / "dataset.csv").write_text("only-one-field\n\n")
    pipeline = TransactionNetworkPipeline(config=config)
    results = pipeline.run()

    assert results["degree_distribution"] == {}
    assert results["power_law"] is None
    assert results["data_info"]["n_skipped"] == 2


def test_run_missing_input_raises(config):
    pipeline = TransactionNetworkPipeline(config=config)
    with pytest.raises(FileNotFoundError):
        pipeline.run()


def test_generate_report(config, dataset, capsys):
    pipeline = TransactionNetworkPipeline(config=config)
    results = pipeline.run()
    report_path = pipeline.generate_report(results)

    out = capsys.readouterr().out
    assert "Degree Distribution:" in out
    assert "5 nodes have a degree of 1. This means 5 accounts participated in 1 transactions." in out
    assert f"Power-Law Fit: {results['power_law']['score']:.2f}." in out

    text = report_path.read_text()
    assert "TRANSACTION NETWORK ANALYSIS - SUMMARY REPORT" in text
    assert "skipped: 1" in text


def _results(distribution, power_law):
    return {"degree_distribution": distribution, "power_law": power_law}


def test_format_report_strong_fit():
    lines = format_report(_results({1: 2, 2: 1}, {"score": 0.937, "verdict": "strong"}))
    assert lines[0].endswith("{1: 2, 2: 1}")
    assert lines[1] == ("2 nodes have a degree of 1. This means 2 accounts "
                        "participated in 1 transactions.")
    assert lines[-1].startswith("Power-Law Fit: 0.94. This indicates a strong fit")


def test_format_report_weak_fit():
    lines = format_report(_results({1: 1, 2: 1}, {"score": 0.5, "verdict": "weak"}))
    assert lines[-1].startswith("Power-Law Fit: 0.50. This indicates a weak fit")


def test_format_report_without_fit():
    lines = format_report(_results({}, None))
    assert len(lines) == 2
    assert "not available" in lines[-1]
