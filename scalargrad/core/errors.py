# scalargrad/core/errors.py
"""
Exceptions raised by the scalargrad engine.

Each class also derives from the builtin exception a caller would naturally
catch, so `except ZeroDivisionError` keeps working around `div`.
"""


class ScalarGradError(Exception):
    """Base class for all scalargrad errors."""


class InvalidOperandError(ScalarGradError, TypeError):
    """A node (or other non-scalar) was supplied where a plain scalar was required."""


class DivisionByZeroError(ScalarGradError, ZeroDivisionError):
    """The denominator of a division evaluated to exactly 0.0."""


class MissingBackwardRuleError(ScalarGradError, RuntimeError):
    """
    A non-leaf node has no registered backward rule.

    This is an internal invariant violation: graphs built through the
    arithmetic surface always carry a rule for every op kind.
    """

    def __init__(self, op_kind, label=""):
        self.op_kind = op_kind
        self.label = label
        super().__init__(
            f"No backward rule registered for op kind {op_kind!r} "
            f"(node label={label!r})"
        )
