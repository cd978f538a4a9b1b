"""Non-fatal notes about degenerate snapshots."""


class DegenerateInputWarning(UserWarning):
    """
    Snapshot is valid but trivial: no members, no expenses, or a ledger
    that is already settled. Computation proceeds with empty/zero results.
    """
