"""
Summary: Exceptions raised for caller contract violations.
Why: Fail loudly instead of slicing with negative widths or budgets.
"""


class InvalidArgumentError(ValueError):
    """Raised when a render call receives arguments outside its contract."""
