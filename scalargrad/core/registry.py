# scalargrad/core/registry.py
"""
Backward-rule registry.

A rule is a callable `rule(out)` that reads `out.grad` together with the
forward values of `out.operands` and adds the chain-rule contributions into
the operands' `grad`. Rules are keyed by the node's `op_kind`; the engine
looks them up when it reaches a non-leaf node during the reverse sweep.
"""
from typing import Callable, Dict, List, Optional

BackwardRule = Callable[["Node"], None]

_RULES: Dict[str, BackwardRule] = {}


def register_backward(op_kind: str):
    """
    Decorator registering `fn` as the backward rule for `op_kind`:

        @register_backward("add")
        def _add_backward(out):
            ...

    Registering a kind again replaces the previous rule.
    """
    def decorator(fn: BackwardRule) -> BackwardRule:
        _RULES[op_kind] = fn
        return fn
    return decorator


def get_backward_rule(op_kind: str) -> Optional[BackwardRule]:
    return _RULES.get(op_kind)


def registered_op_kinds() -> List[str]:
    return sorted(_RULES)
