from __future__ import annotations

import pytest
from sqlmodel import select

from tagledger.domain import TransactionRecord
from tagledger.errors import StorageError
from tagledger.models import Transaction, TransactionTag


def test_add_assigns_sequential_ids_per_user(add_transaction, other_user):
    first = add_transaction("01-01-2025", "-100", "#food")
    second = add_transaction("02-01-2025", "+50")
    foreign = add_transaction("03-01-2025", "-1", owner=other_user)

    assert (first.transaction_id, second.transaction_id) == (1, 2)
    assert foreign.transaction_id == 1


def test_add_returns_full_record(add_transaction):
    record = add_transaction("15-01-2025", "+500", "#salary #bonus")

    assert record == TransactionRecord(
        transaction_id=1, date="15-01-2025", amount="+500", tags="#salary #bonus"
    )


def test_ids_are_never_reused_after_deleting_an_earlier_one(add_transaction, transaction_repo, user):
    add_transaction("01-01-2025", "-1")
    add_transaction("02-01-2025", "-2")
    assert transaction_repo.delete(user_id=user.user_id, transaction_id=1)

    assert add_transaction("03-01-2025", "-3").transaction_id == 3


def test_dates_are_stored_in_sortable_form(add_transaction, session_factory):
    add_transaction("07-01-2025", "-46.00")

    with session_factory() as session:
        row = session.exec(select(Transaction)).one()
    assert row.date == "2025-01-07"


def test_list_round_trips_and_orders_chronologically(add_transaction, transaction_repo, user):
    add_transaction("10-01-2025", "-10", "#b #a")
    add_transaction("02-02-2025", "-20")
    add_transaction("31-12-2024", "+30", "#carry")
    add_transaction("10-01-2025", "-40", "#z")

    rows = transaction_repo.list_for_user(user_id=user.user_id)

    assert [(r.date, r.transaction_id) for r in rows] == [
        ("31-12-2024", 3),
        ("10-01-2025", 1),
        ("10-01-2025", 4),
        ("02-02-2025", 2),
    ]
    assert rows[1].tags == "#b #a"
    assert rows[3].tags == ""


def test_list_is_scoped_to_owner(add_transaction, transaction_repo, user, other_user):
    add_transaction("01-01-2025", "-1", owner=other_user)

    assert transaction_repo.list_for_user(user_id=user.user_id) == []


def test_update_replaces_fields_and_tags(add_transaction, transaction_repo, user):
    add_transaction("01-01-2025", "-100", "#food #water")

    assert transaction_repo.update(
        user_id=user.user_id, transaction_id=1, date="05-02-2025", amount="+7.5", tags="#water #gift"
    )

    record = transaction_repo.get(user_id=user.user_id, transaction_id=1)
    assert record == TransactionRecord(1, "05-02-2025", "+7.5", "#water #gift")


def test_update_to_no_tags_clears_them(add_transaction, transaction_repo, session_factory, user):
    add_transaction("01-01-2025", "-100", "#food")

    transaction_repo.update(
        user_id=user.user_id, transaction_id=1, date="01-01-2025", amount="-100", tags=""
    )

    with session_factory() as session:
        assert session.exec(select(TransactionTag)).all() == []


def test_update_of_foreign_transaction_is_rejected(add_transaction, transaction_repo, user, other_user):
    add_transaction("01-01-2025", "-100", "#food", owner=other_user)

    assert not transaction_repo.update(
        user_id=user.user_id, transaction_id=1, date="02-01-2025", amount="-1", tags=""
    )
    untouched = transaction_repo.get(user_id=other_user.user_id, transaction_id=1)
    assert untouched.amount == "-100"


def test_delete_reports_whether_a_row_was_removed(add_transaction, transaction_repo, user, other_user):
    add_transaction("01-01-2025", "-100", owner=other_user)

    assert transaction_repo.delete(user_id=user.user_id, transaction_id=1) is False
    assert transaction_repo.delete(user_id=user.user_id, transaction_id=99) is False
    assert transaction_repo.delete(user_id=other_user.user_id, transaction_id=1) is True


def test_delete_cascades_to_tags(add_transaction, transaction_repo, session_factory, user):
    add_transaction("01-01-2025", "-100", "#food #water")

    transaction_repo.delete(user_id=user.user_id, transaction_id=1)

    with session_factory() as session:
        assert session.exec(select(TransactionTag)).all() == []


def test_deleting_user_cascades_to_transactions_and_tags(
    add_transaction, user_repo, session_factory, user
):
    add_transaction("01-01-2025", "-100", "#food")

    assert user_repo.delete(user.user_id) is True
    assert user_repo.delete(user.user_id) is False

    with session_factory() as session:
        assert session.exec(select(Transaction)).all() == []
        assert session.exec(select(TransactionTag)).all() == []


def test_add_for_unknown_user_raises_storage_error(transaction_repo):
    with pytest.raises(StorageError):
        transaction_repo.add(user_id=999, date="01-01-2025", amount="-1", tags="")
