"""
Error handling tests for the proposal generator.

Tests cover the error classification and how the process boundary reports
configuration and delivery failures.
"""

from unittest.mock import patch

from proposal_app.config.validation import ValidationError
from proposal_app.errors import ConfigurationError, DeliveryError, ProposalError
from proposal_app.main import main


class TestErrorClassification:
    """Test error classification system."""

    def test_proposal_error_base(self):
        """Test that the base error carries context and is not recoverable."""
        error = ProposalError("base error")
        assert error.context == {}
        assert error.recoverable is False
        assert str(error) == "base error"

    def test_configuration_error(self):
        """Test configuration error attributes."""
        errors = [ValidationError(field="logging.level", message="bad", value="LOUD")]
        error = ConfigurationError(
            "invalid", errors=errors, source="proposal.yaml", context={"section": "logging"}
        )

        assert isinstance(error, ProposalError)
        assert error.errors == errors
        assert error.source == "proposal.yaml"
        assert error.context == {"section": "logging"}

    def test_delivery_error(self):
        """Test delivery error attributes."""
        error = DeliveryError("closed", delivery_method="stdout", destination="stdout")

        assert isinstance(error, ProposalError)
        assert error.delivery_method == "stdout"
        assert error.destination == "stdout"


class TestMainFailures:
    """Test how main() reports failures."""

    def test_invalid_config_exits_with_error(self, tmp_path, capsys):
        """Test that an invalid config file yields exit code 1 and no document."""
        (tmp_path / "proposal.yaml").write_text("logging:\n  level: LOUD\n", encoding="utf-8")

        exit_code = main(config_dir=tmp_path)

        captured = capsys.readouterr()
        assert exit_code == 1
        assert captured.out == ""
        assert "Configuration rejected" in captured.err

    def test_delivery_failure_exits_with_error(self, tmp_path, capsys):
        """Test that a failed stdout write yields exit code 1."""
        with patch(
            "proposal_app.main.StdoutDocumentDelivery.deliver",
            side_effect=DeliveryError("Stdout error: broken pipe", delivery_method="stdout"),
        ):
            exit_code = main(config_dir=tmp_path)

        captured = capsys.readouterr()
        assert exit_code == 1
        assert "Proposal delivery failed" in captured.err
