import pytest
from behavioral.chain_of_responsibility.business_rule_validator import (
    Order, rule, always_valid, build_order_validator, amount_above, priority_in, main
)


class CountingRule:
    def __init__(self, passes, log, name):
        self.passes = passes
        self.log = log
        self.name = name

    def __call__(self, order):
        self.log.append(self.name)
        return self.passes


@pytest.mark.unit
def test_valid_order_passes_all_rules():
    assert build_order_validator()(Order(150.0, 5, "HIGH")) is True


@pytest.mark.unit
def test_low_amount_fails():
    assert build_order_validator()(Order(50.0, 5, "HIGH")) is False


@pytest.mark.unit
def test_unknown_priority_fails():
    assert build_order_validator()(Order(150.0, 5, "MEDIUM")) is False


@pytest.mark.unit
def test_too_many_items_fails():
    assert build_order_validator()(Order(150.0, 11, "LOW")) is False


@pytest.mark.unit
def test_boundaries_are_exclusive_for_amount_inclusive_for_items():
    validate = build_order_validator()
    assert validate(Order(100.0, 5, "LOW")) is False
    assert validate(Order(100.01, 10, "LOW")) is True


@pytest.mark.unit
def test_priority_is_exact_match_not_pattern():
    validate = build_order_validator([priority_in({"HIGH", "LOW"})])
    assert validate(Order(0, 0, "HIGH|LOW")) is False
    assert validate(Order(0, 0, "high")) is False
    assert validate(Order(0, 0, "HIGHEST")) is False


@pytest.mark.unit
def test_empty_rule_set_is_the_terminal():
    assert build_order_validator([]) is always_valid
    assert build_order_validator([])(Order(0, 0, "")) is True


@pytest.mark.unit
def test_failing_rule_short_circuits_later_rules():
    log = []
    rules = [rule(CountingRule(True, log, "first")),
             rule(CountingRule(False, log, "second")),
             rule(CountingRule(True, log, "third"))]
    assert build_order_validator(rules)(Order(150.0, 5, "HIGH")) is False
    assert log == ["first", "second"]


@pytest.mark.unit
def test_all_rules_evaluated_in_order_when_passing():
    log = []
    rules = [rule(CountingRule(True, log, n)) for n in ("a", "b", "c")]
    assert build_order_validator(rules)(Order(150.0, 5, "HIGH")) is True
    assert log == ["a", "b", "c"]


@pytest.mark.unit
def test_reversed_order_changes_which_rule_decides():
    log = []
    amount = rule(CountingRule(False, log, "amount"))
    priority = rule(CountingRule(False, log, "priority"))
    order = Order(50.0, 5, "MEDIUM")

    build_order_validator([amount, priority])(order)
    assert log == ["amount"]
    log.clear()
    build_order_validator([priority, amount])(order)
    assert log == ["priority"]


@pytest.mark.unit
def test_rejection_is_logged_at_debug(caplog):
    caplog.set_level("DEBUG", logger="behavioral.chain_of_responsibility.business_rule_validator")
    build_order_validator([amount_above(100.0)])(Order(50.0, 1, "LOW"))
    assert "amount > 100.0" in caplog.text


@pytest.mark.unit
def test_main_prints_single_lowercase_line(capsys):
    main()
    assert capsys.readouterr().out == "Order is valid: true\n"
