from datetime import datetime

import pytest

from txn_summary.errors import InvalidElementError, NotAnArrayError, ValidationError
from txn_summary.models import Transaction, TransactionType
from txn_summary.parser import Err, Ok, is_transaction, parse


def _record(**overrides):
    record = {
        "id": 1,
        "amount": 10,
        "date": "2024-01-15",
        "category": "food",
        "type": "expense",
    }
    record.update(overrides)
    return record


@pytest.mark.parametrize("value", [42, {}, "[]", None, 1.5, {"id": 1}])
def test_parse_non_array_is_not_an_array(value):
    result = parse(value)
    assert isinstance(result, Err)
    assert not result.is_ok
    assert isinstance(result.error, NotAnArrayError)


def test_parse_empty_list():
    result = parse([])
    assert result == Ok(())
    assert result.is_ok


def test_parse_normalizes_date_and_passes_fields_through():
    result = parse([_record(id=7, amount=12.5, category="travel", type="income")])
    assert isinstance(result, Ok)
    assert result.value == (
        Transaction(
            id=7,
            amount=12.5,
            date=datetime(2024, 1, 15),
            category="travel",
            type=TransactionType.INCOME,
        ),
    )


def test_parse_preserves_order():
    result = parse([_record(id=3), _record(id=1), _record(id=2)])
    assert [t.id for t in result.unwrap()] == [3, 1, 2]


def test_parse_accepts_tuple_and_ignores_extra_keys():
    result = parse((_record(note="lunch"),))
    assert result.is_ok
    assert len(result.value) == 1


def test_parse_rejects_missing_category():
    record = _record()
    del record["category"]
    result = parse([_record(id=1), record])
    assert isinstance(result, Err)
    assert isinstance(result.error, InvalidElementError)
    assert result.error.index == 1
    assert "category" in result.error.reason


def test_parse_rejects_unknown_type():
    result = parse([_record(type="refund")])
    assert isinstance(result.error, InvalidElementError)
    assert "type" in result.error.message


def test_parse_rejects_invalid_date():
    result = parse([_record(date="not-a-date")])
    assert isinstance(result, Err)
    assert isinstance(result.error, InvalidElementError)


def test_parse_accepts_plain_date():
    result = parse([_record(date="2024-01-15")])
    assert result.is_ok
    assert result.value[0].date == datetime(2024, 1, 15)


@pytest.mark.parametrize(
    "record",
    [
        None,
        5,
        "text",
        [1, 2],
        _record(id="1"),
        _record(amount="10"),
        _record(amount=-3),
        _record(category=None),
        _record(type=None),
        _record(amount=10**400),
        _record(id=-10**400),
    ],
)
def test_parse_rejects_bad_elements(record):
    result = parse([_record(), record])
    assert isinstance(result, Err)
    assert result.error.details["index"] == 1


def test_parse_is_all_or_nothing():
    result = parse([_record(id=1), _record(id=2, amount="oops"), _record(id=3)])
    assert isinstance(result, Err)


def test_parse_allows_duplicate_ids():
    result = parse([_record(id=1), _record(id=1)])
    assert result.is_ok
    assert len(result.value) == 2


def test_parse_does_not_mutate_input():
    records = [_record()]
    parse(records)
    assert records == [_record()]


def test_err_unwrap_raises_carried_error():
    result = parse(42)
    with pytest.raises(ValidationError, match="expected a list of transactions, got int"):
        result.unwrap()


def test_errors_are_value_errors():
    assert issubclass(NotAnArrayError, ValueError)
    assert issubclass(InvalidElementError, ValidationError)
    assert NotAnArrayError({}).details == {"got": "dict"}


@pytest.mark.parametrize(
    "value,expected",
    [
        (_record(), True),
        (_record(type="income", date="2024-02-29T23:59:59"), True),
        (_record(date="2023-02-29"), False),
        (None, False),
        ([], False),
        ({}, False),
    ],
)
def test_is_transaction(value, expected):
    assert is_transaction(value) is expected


def test_parse_reports_out_of_range_number():
    result = parse([_record(amount=10**400)])
    assert isinstance(result, Err)
    assert result.error.reason == "amount out of range"


def test_parse_accepts_large_exact_int():
    result = parse([_record(amount=10**30)])
    assert result.unwrap()[0].amount == 10**30
