"""Ordered rejection rules used by the sheet extractors.

Each extractor declares its heuristics as a list of named rules. Rules are
evaluated in list order and evaluation stops at the first rule that rejects,
so the order of a list is part of its behaviour.
"""

from dataclasses import dataclass
from typing import Any, Callable, Optional, Sequence


@dataclass(frozen=True)
class Rule:
    name: str
    rejects: Callable[..., bool]

    def __call__(self, *args: Any) -> bool:
        return self.rejects(*args)


def first_rejection(rules: Sequence[Rule], *args: Any) -> Optional[str]:
    """Return the name of the first rule rejecting ``args``, or None if all pass."""
    for rule in rules:
        if rule(*args):
            return rule.name
    return None
