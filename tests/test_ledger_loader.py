from datetime import date
from decimal import Decimal

import pytest

from ledger_tracker.core.errors import FileAccessError, ParseError, ValidationError
from ledger_tracker.core.models import TransactionKind
from ledger_tracker.core.store import TransactionStore
from ledger_tracker.loaders import LedgerFileLoader, get_loader


def write_ledger(path, lines):
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return path


def test_loads_well_formed_file_in_order(tmp_path):
    path = write_ledger(tmp_path / "ledger.txt", [
        "2025-01-10,INCOME,Salary,50000",
        "2025-01-15,EXPENSE,Rent,15000",
        "2025-01-20,EXPENSE,Food,3000.50",
    ])
    store = TransactionStore()

    result = LedgerFileLoader(store).load(path)

    assert result.count == 3
    assert result.errors == []
    assert [t.category for t in store] == ["Salary", "Rent", "Food"]
    first = store.all()[0]
    assert first.date == date(2025, 1, 10)
    assert first.kind is TransactionKind.INCOME
    assert first.amount == Decimal("50000")
    assert store.all()[2].amount == Decimal("3000.50")


def test_kind_is_case_insensitive(tmp_path):
    path = write_ledger(tmp_path / "ledger.txt", [
        "2025-02-01,income,Freelance,1200",
        "2025-02-02,Expense,Coffee,4",
    ])
    store = TransactionStore()

    LedgerFileLoader(store).load(path)

    assert [t.kind for t in store] == [TransactionKind.INCOME, TransactionKind.EXPENSE]


def test_lines_with_wrong_field_count_are_skipped_silently(tmp_path):
    path = write_ledger(tmp_path / "ledger.txt", [
        "2025-01-10,INCOME,Salary,50000",
        "",
        "2025-01-11,EXPENSE,Rent",
        "2025-01-12,EXPENSE,Dining, out,45",
        "not a ledger line",
        "2025-01-13,EXPENSE,Food,20",
    ])
    store = TransactionStore()

    result = LedgerFileLoader(store).load(path)

    assert result.count == 2
    assert result.errors == []
    assert [t.category for t in store] == ["Salary", "Food"]


def test_bad_field_aborts_rest_of_file_by_default(tmp_path):
    path = write_ledger(tmp_path / "ledger.txt", [
        "2025-01-10,INCOME,Salary,50000",
        "2025/01/15,EXPENSE,Rent,15000",
        "2025-01-20,EXPENSE,Food,3000",
    ])
    store = TransactionStore()

    result = LedgerFileLoader(store).load(path)

    assert result.count == 1
    assert len(result.errors) == 1
    err = result.errors[0]
    assert isinstance(err, ParseError)
    assert err.line_number == 2
    assert err.path == str(path)
    # the line parsed before the failure stays loaded
    assert [t.category for t in store] == ["Salary"]


def test_skip_policy_drops_only_bad_lines(tmp_path):
    path = write_ledger(tmp_path / "ledger.txt", [
        "2025-01-10,INCOME,Salary,50000",
        "2025-01-15,TRANSFER,Savings,100",
        "2025-01-16,EXPENSE,Food,abc",
        "2025-01-20,EXPENSE,Food,3000",
    ])
    store = TransactionStore()

    result = LedgerFileLoader(store, on_parse_error="skip").load(path)

    assert result.count == 2
    assert [e.line_number for e in result.errors] == [2, 3]
    assert all(isinstance(e, ParseError) for e in result.errors)
    assert [t.category for t in store] == ["Salary", "Food"]


@pytest.mark.parametrize("line", [
    "2025-13-01,INCOME,Salary,1",
    "2025-02-30,INCOME,Salary,1",
    "2025-1-5,INCOME,Salary,1",
    "2025-01-05,REFUND,Salary,1",
    "2025-01-05,INCOME,Salary,",
    "2025-01-05,INCOME,Salary,NaN",
    "2025-01-05,INCOME,Salary,$12",
])
def test_invalid_fields_are_parse_errors(tmp_path, line):
    path = write_ledger(tmp_path / "ledger.txt", [line])
    store = TransactionStore()

    result = LedgerFileLoader(store).load(path)

    assert result.count == 0
    assert len(store) == 0
    assert isinstance(result.errors[0], ParseError)


def test_negative_amounts_are_accepted(tmp_path):
    path = write_ledger(tmp_path / "ledger.txt", ["2025-01-05,EXPENSE,Refund,-25.00"])
    store = TransactionStore()

    LedgerFileLoader(store).load(path)

    assert store.all()[0].amount == Decimal("-25.00")


def test_crlf_and_whitespace_are_tolerated(tmp_path):
    path = tmp_path / "ledger.txt"
    path.write_bytes(b"2025-01-05, expense , Groceries ,12.40\r\n2025-01-06,INCOME,Tips,3\r\n")
    store = TransactionStore()

    result = LedgerFileLoader(store).load(path)

    assert result.count == 2
    t = store.all()[0]
    assert t.category == "Groceries"
    assert t.kind is TransactionKind.EXPENSE
    assert t.amount == Decimal("12.40")


def test_missing_file_is_file_access_error(tmp_path):
    store = TransactionStore()

    result = LedgerFileLoader(store).load(tmp_path / "nope.txt")

    assert result.count == 0
    assert len(result.errors) == 1
    assert isinstance(result.errors[0], FileAccessError)
    assert len(store) == 0


def test_directory_is_file_access_error(tmp_path):
    result = LedgerFileLoader(TransactionStore()).load(tmp_path)
    assert isinstance(result.errors[0], FileAccessError)


def test_loads_append_across_files(tmp_path):
    a = write_ledger(tmp_path / "a.txt", ["2025-01-01,INCOME,A,1"])
    b = write_ledger(tmp_path / "b.txt", ["2025-01-02,INCOME,B,2", "2025-01-02,INCOME,B,2"])
    store = TransactionStore()
    loader = LedgerFileLoader(store)

    loader.load(a)
    loader.load(b)

    assert [t.category for t in store] == ["A", "B", "B"]


def test_unknown_policy_rejected():
    with pytest.raises(ValidationError):
        LedgerFileLoader(TransactionStore(), on_parse_error="retry")


def test_get_loader_reads_config():
    loader = get_loader(TransactionStore(), {"on_parse_error": "skip", "encoding": "latin-1"})
    assert loader.on_parse_error == "skip"
    assert loader.encoding == "latin-1"


def test_unknown_encoding_is_file_access_error(tmp_path):
    path = write_ledger(tmp_path / "ledger.txt", ["2025-01-01,INCOME,A,1"])
    store = TransactionStore()

    result = LedgerFileLoader(store, encoding="bogus").load(path)

    assert result.count == 0
    assert isinstance(result.errors[0], FileAccessError)
    assert len(store) == 0
