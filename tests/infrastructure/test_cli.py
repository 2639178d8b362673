"""End-to-end tests for the click CLI."""

import pytest
from click.testing import CliRunner

from checkout.infrastructure.bootstrap import invoice_strategy, payment_strategy, sample_customer
from checkout.infrastructure.cli.main import cli


@pytest.fixture
def runner():
    return CliRunner()


class TestCartShow:

    def test_lists_sample_cart(self, runner):
        result = runner.invoke(cli, ["cart", "show"])
        assert result.exit_code == 0, result.output
        lines = result.output.splitlines()
        assert lines[0] == "Shopping Cart:"
        assert lines[1:8] == ["Shampoo - 9.99"] * 2 + ["Soap - 4.99"] * 4 + [
            "Toothpaste - 2.99"
        ]
        assert "Total: $42.93  (7 items)" in result.output


class TestCheckoutRun:

    def test_default_scenario(self, runner):
        result = runner.invoke(cli, ["run"])
        assert result.exit_code == 0, result.output
        assert "Shopping Cart:" in result.output
        assert "Generating PDF invoice for order #" in result.output
        assert (
            "Paying $42.93 using credit card "
            "(name: John Doe, number: **** **** **** 1111, expiry: 01/2025)..."
        ) in result.output
        assert "4111 1111 1111 1111" not in result.output

    def test_text_invoice_with_paypal(self, runner):
        result = runner.invoke(cli, ["run", "--invoice", "text", "--payment", "paypal"])
        assert result.exit_code == 0, result.output
        assert "Generating text invoice" in result.output
        assert "Paying $42.93 using Paypal (email: john@example.com)..." in result.output
        assert "hunter2" not in result.output

    def test_cash_on_delivery(self, runner):
        result = runner.invoke(cli, ["run", "--payment", "cash-on-delivery"])
        assert result.exit_code == 0, result.output
        assert "in cash on delivery to customer John Doe..." in result.output

    def test_unknown_payment_rejected(self, runner):
        result = runner.invoke(cli, ["run", "--payment", "bitcoin"])
        assert result.exit_code != 0

    def test_bad_log_level_is_usage_error(self, runner):
        result = runner.invoke(cli, ["--log-level", "loud", "run"])
        assert result.exit_code == 2

    def test_info_logging_keeps_secrets_out(self, runner):
        result = runner.invoke(cli, ["--log-level", "info", "run"])
        assert result.exit_code == 0, result.output
        assert "4111 1111 1111 1111" not in result.output


class TestBootstrap:

    def test_unknown_invoice_format(self):
        with pytest.raises(ValueError, match="Unknown invoice format"):
            invoice_strategy("docx")

    def test_unknown_payment_method(self):
        with pytest.raises(ValueError):
            payment_strategy("bitcoin", sample_customer())
