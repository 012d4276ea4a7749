"""Tests for the achparse command line interface."""

from achparse.cli.main import cli


class TestValidateCommand:
    def test_valid_file(self, cli_runner, fixtures_dir):
        result = cli_runner.invoke(cli, ["validate", str(fixtures_dir / "sample.ach")])

        assert result.exit_code == 0
        assert "OK: 1 batch(es), 3 entries, 1 addenda" in result.output

    def test_incomplete_batch(self, cli_runner, fixtures_dir):
        result = cli_runner.invoke(cli, ["validate", str(fixtures_dir / "incomplete_batch.ach")])

        assert result.exit_code == 1
        assert "Error (line 4): Incomplete batch" in result.output

    def test_missing_file(self, cli_runner):
        result = cli_runner.invoke(cli, ["validate", "/nonexistent/file.ach"])

        # Click returns exit code 2 for invalid paths
        assert result.exit_code == 2
        assert "does not exist" in result.output.lower()

    def test_short_line(self, cli_runner, tmp_path):
        ach_path = tmp_path / "short.ach"
        ach_path.write_text("101 123\n")

        result = cli_runner.invoke(cli, ["validate", str(ach_path)])

        assert result.exit_code == 1
        assert "expected 94, got 7" in result.output

    def test_non_ascii_content(self, cli_runner, tmp_path):
        ach_path = tmp_path / "latin.ach"
        ach_path.write_bytes("café".encode("latin-1"))

        result = cli_runner.invoke(cli, ["validate", str(ach_path)])

        assert result.exit_code == 1
        assert "Error:" in result.output


class TestViewCommand:
    def test_compact(self, cli_runner, fixtures_dir):
        result = cli_runner.invoke(cli, ["view", str(fixtures_dir / "sample.ach")])

        assert result.exit_code == 0
        assert "YOUR COMPANY -> YOUR BANK" in result.output
        assert "Batch 0000001: YOUR COMPANY (PPD PAYROLL)" in result.output
        assert "ALICE WANDERDUST" in result.output
        assert "$150.00" in result.output
        assert "HERE IS SOME ADDITIONAL" not in result.output

    def test_verbose_shows_addenda(self, cli_runner, fixtures_dir):
        result = cli_runner.invoke(cli, ["view", str(fixtures_dir / "sample.ach"), "--verbose"])

        assert result.exit_code == 0
        assert "Addenda 0000: HERE IS SOME ADDITIONAL INFORMATION" in result.output
        assert "Routing: 123456780" in result.output
        assert "Amount: $10.00" in result.output

    def test_batch_filter(self, cli_runner, fixtures_dir):
        result = cli_runner.invoke(
            cli, ["view", str(fixtures_dir / "multi_batch.ach"), "--batch", "2"]
        )

        assert result.exit_code == 0
        assert "Batch 0000002" in result.output
        assert "Batch 0000001" not in result.output
        assert "BILLY HOLIDAY" in result.output

    def test_batch_not_found(self, cli_runner, fixtures_dir):
        result = cli_runner.invoke(cli, ["view", str(fixtures_dir / "sample.ach"), "--batch", "7"])

        assert result.exit_code == 1
        assert "Batch 7 not found" in result.output


class TestSummaryCommand:
    def test_summary(self, cli_runner, fixtures_dir):
        result = cli_runner.invoke(cli, ["summary", str(fixtures_dir / "multi_batch.ach")])

        assert result.exit_code == 0
        assert "Batches: 2" in result.output
        assert "Total debits: $300.00" in result.output
        assert "Total credits: $22.13" in result.output
        assert "entry totals: debits $0.00, credits $22.13" in result.output

    def test_effective_after(self, cli_runner, fixtures_dir):
        result = cli_runner.invoke(
            cli,
            ["summary", str(fixtures_dir / "multi_batch.ach"), "--effective-after", "2014-10-01"],
        )

        assert result.exit_code == 0
        assert "0000002" in result.output
        assert "0000001 " not in result.output

    def test_no_matching_batches(self, cli_runner, fixtures_dir):
        result = cli_runner.invoke(
            cli, ["summary", str(fixtures_dir / "sample.ach"), "--min-amount", "$1,000"]
        )

        assert result.exit_code == 0
        assert "No batches found." in result.output

    def test_invalid_min_amount(self, cli_runner, fixtures_dir):
        result = cli_runner.invoke(
            cli, ["summary", str(fixtures_dir / "sample.ach"), "--min-amount", "lots"]
        )

        assert result.exit_code == 1
        assert "Invalid minimum amount" in result.output

    def test_period_with_dates_rejected(self, cli_runner, fixtures_dir):
        result = cli_runner.invoke(
            cli,
            [
                "summary",
                str(fixtures_dir / "sample.ach"),
                "--period",
                "this-month",
                "--effective-after",
                "2014-01-01",
            ],
        )

        assert result.exit_code == 1
        assert "cannot be combined" in result.output


def test_log_level_from_environment(cli_runner, fixtures_dir):
    result = cli_runner.invoke(
        cli,
        ["validate", str(fixtures_dir / "sample.ach")],
        env={"ACHPARSE_LOG_LEVEL": "debug"},
    )

    assert result.exit_code == 0


def test_invalid_log_level(cli_runner, fixtures_dir):
    result = cli_runner.invoke(
        cli, ["--log-level", "LOUD", "validate", str(fixtures_dir / "sample.ach")]
    )

    assert result.exit_code == 2


def test_log_level_does_not_touch_context_object(cli_runner, fixtures_dir):
    obj = {}
    result = cli_runner.invoke(
        cli, ["--log-level", "info", "validate", str(fixtures_dir / "sample.ach")], obj=obj
    )

    assert result.exit_code == 0
    assert obj == {}
