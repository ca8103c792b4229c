"""
Tests for the command-line interface and demo scenarios.
"""

import subprocess

import pytest

import cli
from ticketing.demo import SCENARIOS, run_all_demos
from ticketing.models import TicketType


class TestBuildRequests:
    """Tests for turning CLI counts into ticket requests."""

    def test_skips_zero_counts(self):
        requests = cli.build_requests(adult=2, child=0, infant=1)

        assert [(r.ticket_type, r.quantity) for r in requests] == [
            (TicketType.ADULT, 2),
            (TicketType.INFANT, 1),
        ]

    def test_no_counts_gives_no_requests(self):
        assert cli.build_requests(0, 0, 0) == []


class TestPurchaseCommand:
    """Tests for `cli.py purchase`."""

    def test_successful_purchase(self, capsys):
        exit_code = cli.main(["purchase", "42", "--adult", "2", "--child", "1", "--infant", "1"])

        assert exit_code == 0
        output = capsys.readouterr().out
        assert "charged £65" in output
        assert "reserved 3 seats" in output

    def test_rejected_purchase(self, capsys):
        exit_code = cli.main(["purchase", "42", "--child", "2"])

        assert exit_code == 1
        assert "without an Adult ticket" in capsys.readouterr().out

    def test_no_tickets(self, capsys):
        exit_code = cli.main(["purchase", "42"])

        assert exit_code == 1
        assert "cannot be empty" in capsys.readouterr().out

    def test_invalid_account(self, capsys):
        exit_code = cli.main(["purchase", "0", "--adult", "1"])

        assert exit_code == 1
        assert "Account ID must be a positive number" in capsys.readouterr().out

    def test_negative_quantity(self, capsys):
        exit_code = cli.main(["purchase", "42", "--adult", "-1"])

        assert exit_code == 1
        assert "Invalid ticket request" in capsys.readouterr().out


class TestDemoCommand:
    """Tests for the demo scenarios."""

    def test_all_scenarios_outcomes(self, capsys):
        """Test which demo purchases are accepted."""
        results = run_all_demos()

        assert results == {
            "valid": True,
            "mixed": True,
            "no-adult": False,
            "too-many-infants": False,
            "too-many": False,
        }

    @pytest.mark.parametrize("scenario", sorted(SCENARIOS))
    def test_demo_command_runs(self, scenario, capsys):
        assert cli.main(["demo", scenario]) == 0
        assert "DEMO:" in capsys.readouterr().out

    def test_mixed_demo_output(self, capsys):
        SCENARIOS["mixed"]()

        output = capsys.readouterr().out
        assert "Charged:        £55" in output
        assert "Seats reserved: 3" in output

    def test_no_command_prints_help(self, capsys):
        assert cli.main([]) == 0
        assert "Ticket Service CLI" in capsys.readouterr().out

    def test_unknown_scenario_rejected_by_parser(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            cli.main(["demo", "vip"])

        assert exc_info.value.code == 2


class TestTestCommand:
    """Tests for `cli.py test`."""

    @pytest.mark.parametrize("returncode", [0, 1, 5])
    def test_returns_pytest_exit_code(self, monkeypatch, returncode):
        """Test that pytest's exit code becomes the CLI's exit code."""
        calls = []

        def fake_run(cmd):
            calls.append(cmd)
            return subprocess.CompletedProcess(cmd, returncode)

        monkeypatch.setattr(cli.subprocess, "run", fake_run)

        assert cli.main(["test", "-q"]) == returncode
        assert calls[0][-3:] == ["-m", "pytest", "-q"]
