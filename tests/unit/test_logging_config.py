"""Tests for ledger logging helpers."""

from unittest.mock import Mock

from trip_ledger.logging.config import (
    configure_logging,
    get_ledger_logger,
    get_logger,
    log_budget_status,
    log_settlement,
)


class TestLoggingHelpers:
    """Test structured logging helpers with a mock logger."""

    def setup_method(self):
        self.logger = Mock()
        self.bound = Mock()
        self.logger.bind.return_value = self.bound
        self.bound.bind.return_value = self.bound

    def test_log_settlement(self):
        log_settlement(self.logger, "b", "a", 40.0)

        self.logger.bind.assert_called_once_with(
            from_member_id="b", to_member_id="a", amount=40.0
        )
        self.bound.debug.assert_called_once_with("Settlement proposed")

    def test_log_settlement_with_context(self):
        log_settlement(self.logger, "b", "a", 40.0, context={"trip_id": "t1"})
        self.bound.bind.assert_called_once_with(context={"trip_id": "t1"})

    def test_log_budget_over(self):
        log_budget_status(self.logger, 500.0, 550.0, True, 50.0)

        assert self.logger.bind.call_args.kwargs["budget_result"] == "OVER"
        self.bound.warning.assert_called_once_with("Budget exceeded", overage=50.0)

    def test_log_budget_within(self):
        log_budget_status(self.logger, 500.0, 100.0, False, 0.0)

        assert self.logger.bind.call_args.kwargs["budget_result"] == "WITHIN"
        self.bound.info.assert_called_once_with("Budget reconciled")


class TestLoggerFactories:
    """Test logger construction."""

    def test_configure_and_get_logger(self):
        configure_logging(level="DEBUG", format_json=True)
        logger = get_logger(__name__)
        logger.info("configured", check=True)

    def test_ledger_logger_is_bound(self):
        logger = get_ledger_logger(__name__)
        assert logger is not None
        logger.debug("bound logger works")
