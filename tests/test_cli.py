"""Tests for sortbench CLI commands."""

import csv
import json

from typer.testing import CliRunner

from sortbench.cli.main import app
from sortbench.cli.show import summarize
from sortbench.config import BenchmarkSettings, load_config
from sortbench.models.results import TrialRecord
from sortbench.results import ResultAggregator

runner = CliRunner()


def _write_results(path, rows):
    aggregator = ResultAggregator(path)
    for algo, scenario, size, time_ms in rows:
        aggregator.add(
            TrialRecord(
                algorithm_name=algo,
                scenario_name=scenario,
                array_size=size,
                execution_time_ms=time_ms,
            )
        )
    _ = aggregator.save()
    return path


class TestInitCommand:
    """Tests for sortbench init command."""

    def test_init_creates_config(self, temp_dir, monkeypatch):
        """Test that init writes a loadable default config."""
        monkeypatch.chdir(temp_dir)

        result = runner.invoke(app, ["init"])

        assert result.exit_code == 0
        config_path = temp_dir / ".sortbench" / "config.yaml"
        assert config_path.exists()
        assert load_config(config_path) == BenchmarkSettings()

    def test_init_already_initialized(self, sortbench_project):
        """Test init when already initialized."""
        result = runner.invoke(app, ["init"])

        assert result.exit_code == 0
        assert "Already initialized" in result.stdout

    def test_init_path_argument(self, temp_dir):
        """Test init into an explicit directory."""
        target = temp_dir / "project"

        result = runner.invoke(app, ["init", str(target)])

        assert result.exit_code == 0
        assert (target / ".sortbench" / "config.yaml").exists()


class TestListCommand:
    """Tests for sortbench list command."""

    def test_lists_catalog(self):
        """Test both catalogs are printed."""
        result = runner.invoke(app, ["list"])

        assert result.exit_code == 0
        assert "Algorithms" in result.stdout
        assert "Scenarios" in result.stdout
        assert "Counting Sort" in result.stdout
        assert "random-integers" in result.stdout


class TestRunCommand:
    """Tests for sortbench run command."""

    def test_run_selected_pair(self, sortbench_project):
        """Test running one algorithm on one scenario."""
        result = runner.invoke(
            app, ["run", "-a", "Insertion Sort", "-s", "sorted-ascending", "-q"]
        )

        assert result.exit_code == 0
        assert "Recorded 2 trial(s)" in result.stdout
        data = json.loads((sortbench_project / "reports" / "results.json").read_text())
        assert [row["arraySize"] for row in data] == [3, 10]
        assert {row["algorithmName"] for row in data} == {"Insertion Sort"}

    def test_run_output_option(self, sortbench_project):
        """Test --output overrides the configured results file."""
        output = sortbench_project / "out" / "custom.json"

        result = runner.invoke(
            app,
            ["run", "-a", "merge sort", "-s", "random-floats", "-o", str(output), "-q"],
        )

        assert result.exit_code == 0
        assert len(json.loads(output.read_text())) == 2

    def test_run_explicit_config(self, temp_dir, monkeypatch):
        """Test --config points at a file outside any project."""
        monkeypatch.chdir(temp_dir)
        config = temp_dir / "bench.yaml"
        config.write_text(
            "static_sizes: [4]\n"
            "dynamic_sizes:\n"
            "  enabled: false\n"
            "max_execution_time_ms: 1000\n"
        )

        result = runner.invoke(
            app,
            ["run", "-c", str(config), "-a", "Heap Sort", "-s", "sorted-descending", "-q"],
        )

        assert result.exit_code == 0
        data = json.loads((temp_dir / "reports" / "performance-results.json").read_text())
        assert [row["arraySize"] for row in data] == [4]

    def test_run_unknown_algorithm(self, sortbench_project):
        """Test an unknown algorithm name is reported."""
        result = runner.invoke(app, ["run", "-a", "Nope Sort"])

        assert result.exit_code == 1
        assert "Unknown algorithm" in result.stdout

    def test_run_bad_config(self, sortbench_project):
        """Test a mistyped config value is reported."""
        (sortbench_project / ".sortbench" / "config.yaml").write_text(
            "static_sizes: lots\n"
        )

        result = runner.invoke(app, ["run"])

        assert result.exit_code == 1
        assert "Error" in result.stdout


class TestVerifyCommand:
    """Tests for sortbench verify command."""

    def test_verify_passes(self):
        """Test verification of a correct algorithm."""
        result = runner.invoke(
            app, ["verify", "-a", "Quick Sort", "-s", "random-duplicates"]
        )

        assert result.exit_code == 0
        assert "All 1 pair(s) passed" in result.stdout

    def test_verify_unknown_scenario(self):
        """Test an unknown scenario is reported."""
        result = runner.invoke(app, ["verify", "-s", "upside-down"])

        assert result.exit_code == 1
        assert "Unknown scenario" in result.stdout


class TestShowCommand:
    """Tests for sortbench show command."""

    def test_show_default_results(self, sortbench_project):
        """Test show reads the configured results file."""
        _ = _write_results(
            sortbench_project / "reports" / "results.json",
            [("Merge Sort", "random-integers", 3, 0.1), ("Merge Sort", "random-integers", 10, 0.2)],
        )

        result = runner.invoke(app, ["show"])

        assert result.exit_code == 0
        assert "2 trial(s) from" in result.stdout

    def test_show_complete_pair(self, sortbench_project):
        """Test a pair that reached the scheduled maximum is complete."""
        _ = _write_results(
            sortbench_project / "reports" / "results.json",
            [("A", "s", 3, 0.1), ("A", "s", 10, 0.2)],
        )

        result = runner.invoke(app, ["show"])

        assert result.exit_code == 0
        assert "complete" in result.stdout
        assert "abandoned" not in result.stdout

    def test_show_only_pair_stopped_early(self, sortbench_project):
        """Test the only pair in a file is abandoned below the scheduled maximum."""
        _ = _write_results(
            sortbench_project / "reports" / "results.json",
            [("A", "s", 3, 0.1)],
        )

        result = runner.invoke(app, ["show"])

        assert result.exit_code == 0
        assert "abandoned" in result.stdout

    def test_show_max_size_option(self, temp_dir):
        """Test --max-size overrides the configured schedule."""
        results = _write_results(
            temp_dir / "r.json", [("A", "s", 10, 0.1), ("A", "s", 20, 0.3)]
        )

        stopped = runner.invoke(app, ["show", str(results), "--max-size", "100000"])
        reached = runner.invoke(app, ["show", str(results), "--max-size", "20"])

        assert stopped.exit_code == 0
        assert "abandoned" in stopped.stdout
        assert "complete" in reached.stdout

    def test_show_bad_config(self, sortbench_project):
        """Test a mistyped config value is reported."""
        (sortbench_project / ".sortbench" / "config.yaml").write_text(
            "results_filename: [a]\n"
        )

        result = runner.invoke(app, ["show"])

        assert result.exit_code == 1
        assert "Error" in result.stdout

    def test_show_missing_file(self, temp_dir):
        """Test a missing results file is an error."""
        result = runner.invoke(app, ["show", str(temp_dir / "missing.json")])

        assert result.exit_code == 1
        assert "not found" in result.stdout

    def test_summarize_marks_largest(self):
        """Test summaries keep file order and the time at the largest size."""
        records = [
            TrialRecord(algorithm_name="A", scenario_name="s", array_size=5, execution_time_ms=1.0),
            TrialRecord(algorithm_name="B", scenario_name="s", array_size=5, execution_time_ms=2.0),
            TrialRecord(algorithm_name="A", scenario_name="s", array_size=50, execution_time_ms=9.0),
        ]

        summaries = summarize(records)

        assert [s.algorithm_name for s in summaries] == ["A", "B"]
        assert summaries[0].trials == 2
        assert summaries[0].largest_size == 50
        assert summaries[0].time_at_largest_ms == 9.0
        assert summaries[1].largest_size == 5


class TestExportCommand:
    """Tests for sortbench export command."""

    def test_export_csv(self, temp_dir):
        """Test records are written as CSV rows."""
        results = _write_results(
            temp_dir / "results.json",
            [("Shell Sort", "sorted-floats", 8, 0.25), ("Shell Sort", "sorted-floats", 16, 0.5)],
        )
        output = temp_dir / "out.csv"

        result = runner.invoke(app, ["export", str(results), str(output)])

        assert result.exit_code == 0
        assert "Exported 2 record(s)" in result.stdout
        with output.open() as f:
            rows = list(csv.DictReader(f))
        assert rows[0] == {
            "algorithm_name": "Shell Sort",
            "scenario_name": "sorted-floats",
            "array_size": "8",
            "execution_time_ms": "0.25",
        }
        assert len(rows) == 2

    def test_export_requires_csv(self, temp_dir):
        """Test a non-CSV output is rejected."""
        results = _write_results(temp_dir / "results.json", [])

        result = runner.invoke(app, ["export", str(results), str(temp_dir / "out.txt")])

        assert result.exit_code == 1
        assert "must be .csv" in result.stdout

    def test_export_missing_results(self, temp_dir):
        """Test a missing results file is an error."""
        result = runner.invoke(
            app, ["export", str(temp_dir / "none.json"), str(temp_dir / "out.csv")]
        )

        assert result.exit_code == 1
