"""
business_rule_validator.py — all-must-pass validation chain for orders.

Every business rule is a guard: it checks one condition and, only when the
condition holds, asks the rest of the chain. The terminal handler accepts
everything, so the composed validator returns True iff every guard passes.

Chain (in evaluation order):
    amount > 100 -> item count <= 10 -> priority in {HIGH, LOW} -> always valid
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Iterable, Sequence

from behavioral.chain_of_responsibility.functional_chain import HandlerTransform, build_chain

logger = logging.getLogger(__name__)


# ---------- Data Models ----------
@dataclass(frozen=True, slots=True)
class Order:
    """
    Immutable order checked by the validation chain.

    :param amount: Total order amount.
    :param item_count: Number of items in the order.
    :param priority: Priority label, e.g. "HIGH".
    """
    amount: float
    item_count: int
    priority: str


Validator = Callable[[Order], bool]
RuleHandler = HandlerTransform[Validator]


# ---------- Rules ----------
def rule(condition: Callable[[Order], bool], name: str = "") -> RuleHandler:
    """
    Turns a predicate into a guard unit of the validation chain.

    The returned validator evaluates `condition` first and calls the next
    validator only when it holds; a failing guard never reaches later rules.

    :param condition: Predicate on the order.
    :param name: Label used in debug logs (defaults to the predicate's name).
    :return: Transform taking the next validator and returning the guarded one.
    """
    label = name or getattr(condition, "__name__", repr(condition))

    def combine_with(nxt: Validator) -> Validator:
        def validate(order: Order) -> bool:
            if not condition(order):
                logger.debug("Rule '%s' rejected %r", label, order)
                return False
            return nxt(order)
        return validate

    return combine_with


def amount_above(minimum: float) -> RuleHandler:
    return rule(lambda o: o.amount > minimum, f"amount > {minimum}")


def item_count_at_most(maximum: int) -> RuleHandler:
    return rule(lambda o: o.item_count <= maximum, f"item count <= {maximum}")


def priority_in(allowed: Iterable[str]) -> RuleHandler:
    """Exact match against an enumerated set of labels (no pattern matching)."""
    labels = frozenset(allowed)
    return rule(lambda o: o.priority in labels, f"priority in {sorted(labels)}")


def always_valid(order: Order) -> bool:
    """Terminal validator: reached only when every rule passed."""
    return True


DEFAULT_RULES: tuple[RuleHandler, ...] = (
    amount_above(100.0),
    item_count_at_most(10),
    priority_in({"HIGH", "LOW"}),
)


# ---------- Builder ----------
def build_order_validator(rules: Sequence[RuleHandler] = DEFAULT_RULES) -> Validator:
    """
    Builds the validation chain; rules are evaluated in the given order.

    :param rules: Guard units, first one evaluated first.
    :return: Validator returning True iff every rule passes.
    """
    return build_chain(rules, always_valid)


def main() -> None:
    order = Order(amount=150.0, item_count=5, priority="HIGH")
    is_valid = build_order_validator()(order)
    print(f"Order is valid: {str(is_valid).lower()}")


__all__ = [
    "Order",
    "Validator",
    "RuleHandler",
    "rule",
    "amount_above",
    "item_count_at_most",
    "priority_in",
    "always_valid",
    "DEFAULT_RULES",
    "build_order_validator",
    "main",
]


if __name__ == "__main__":
    main()
