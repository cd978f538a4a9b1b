"""
Error handling tests for the trip ledger.

Tests cover the error hierarchy, the typed failures returned by the facade,
and the precision checks that keep the ledger closed.
"""

import pytest

from trip_ledger.data.models import Expense, Member
from trip_ledger.engine import LedgerFacade
from trip_ledger.errors import (
    ConfigurationError,
    CurrencyMismatchError,
    DegenerateInputWarning,
    DuplicateMemberError,
    InputValidationError,
    InvalidAmountError,
    LedgerComputationError,
    MalformedRecordError,
    PrecisionDriftError,
    UnknownPayerError,
)
from trip_ledger.ledger.settlement import SettlementPlanner
from trip_ledger.models.ledger import Balance, Settlement


class TestErrorClassification:
    """Test error classification system."""

    def test_input_validation_error_hierarchy(self):
        base_error = InputValidationError("base error")
        assert base_error.recoverable is True
        assert base_error.context == {}

        payer_error = UnknownPayerError("who?", expense_id="e1", payer_id="zed")
        assert isinstance(payer_error, InputValidationError)
        assert payer_error.payer_id == "zed"

        amount_error = InvalidAmountError("bad", record_id="e2", amount=-1.0)
        assert isinstance(amount_error, InputValidationError)
        assert amount_error.amount == -1.0

        for error in (
            DuplicateMemberError("dup", member_id="a"),
            CurrencyMismatchError("mixed", currencies=["EUR", "USD"]),
            MalformedRecordError("broken", record_type="expense"),
            PrecisionDriftError("drift", drift=0.02, threshold=0.01),
        ):
            assert isinstance(error, InputValidationError)
            assert error.recoverable is True

    def test_context_passthrough(self):
        error = UnknownPayerError("who?", context={"trip_id": "t1"})
        assert error.context == {"trip_id": "t1"}

    def test_system_failure_errors(self):
        computation_error = LedgerComputationError("failed", stage="settlement")
        assert computation_error.recoverable is False
        assert computation_error.stage == "settlement"

        config_error = ConfigurationError("bad config", errors=["x"])
        assert config_error.recoverable is False
        assert config_error.errors == ["x"]

    def test_system_failures_are_not_input_errors(self):
        assert not issubclass(LedgerComputationError, InputValidationError)
        assert not issubclass(ConfigurationError, InputValidationError)

    def test_degenerate_input_is_a_warning(self):
        assert issubclass(DegenerateInputWarning, UserWarning)
        assert not issubclass(DegenerateInputWarning, InputValidationError)


class TestFacadeErrorHandling:
    """Test that the facade reports validation problems as typed failures."""

    def setup_method(self):
        self.facade = LedgerFacade()
        self.members = [Member("a", "Ann"), Member("b", "Ben")]

    @pytest.mark.parametrize("members,expenses,error_type", [
        (
            [Member("a", "Ann")],
            [Expense(id="1", title="x", amount=5.0, paid_by="b")],
            "UnknownPayerError",
        ),
        (
            [Member("a", "Ann"), Member("a", "Ann")],
            [],
            "DuplicateMemberError",
        ),
        (
            [Member("a", "Ann"), Member("b", "Ben")],
            [
                Expense(id="1", title="x", amount=5.0, paid_by="a", currency="USD"),
                Expense(id="2", title="y", amount=5.0, paid_by="b", currency="CAD"),
            ],
            "CurrencyMismatchError",
        ),
        (
            [Member("a", "Ann")],
            [Expense(id="1", title="x", amount=-5.0, paid_by="a")],
            "InvalidAmountError",
        ),
    ])
    def test_validation_failures(self, members, expenses, error_type):
        result = self.facade.compute(members, expenses)

        assert result.success is False
        assert result.error_type == error_type
        assert result.error_msg

    def test_invalid_expense_rejected_before_budget(self):
        """Budget status is never computed from a rejected snapshot"""
        result = self.facade.compute(
            self.members,
            [Expense(id="1", title="x", amount=float("nan"), paid_by="a")],
            target_budget=100.0,
        )
        assert result.success is False
        assert result.report is None

    def test_failure_recovery_on_next_call(self):
        bad = [Expense(id="1", title="x", amount=5.0, paid_by="zed")]
        good = [Expense(id="1", title="x", amount=5.0, paid_by="a")]

        assert self.facade.compute(self.members, bad).success is False
        assert self.facade.compute(self.members, good).success is True


class TestPrecisionChecks:
    """Test that drift never produces an open settlement plan."""

    def test_planner_rejects_open_ledger(self):
        balances = [
            Balance(member_id="a", name="A", paid=0.0, share=0.0, balance=10.0),
            Balance(member_id="b", name="B", paid=0.0, share=0.0, balance=-9.98),
        ]
        with pytest.raises(PrecisionDriftError) as exc_info:
            SettlementPlanner().plan(balances)

        assert exc_info.value.threshold == 0.01
        assert exc_info.value.drift == pytest.approx(0.02)

    def test_verify_rejects_incomplete_plan(self):
        balances = [
            Balance(member_id="a", name="A", paid=0.0, share=0.0, balance=10.0),
            Balance(member_id="b", name="B", paid=0.0, share=0.0, balance=-10.0),
        ]
        short = [Settlement("b", "B", "a", "A", 9.0)]

        with pytest.raises(PrecisionDriftError) as exc_info:
            SettlementPlanner().verify(balances, short)

        assert exc_info.value.context["member_id"] in {"a", "b"}

    def test_sub_threshold_drift_tolerated(self):
        balances = [
            Balance(member_id="a", name="A", paid=0.0, share=0.0, balance=10.0),
            Balance(member_id="b", name="B", paid=0.0, share=0.0, balance=-9.995),
        ]
        settlements = SettlementPlanner().plan(balances)
        assert len(settlements) == 1
        assert settlements[0].amount in (9.99, 10.0)
