"""Unit tests for the query engine."""

import pytest

from txn_analytics.data.store import DataStore
from txn_analytics.analytics import queries


# ---- reference dataset ---------------------------------------------------


def test_total_amount(store):
    assert queries.total_amount(store) == pytest.approx(4371.37, abs=0.01)


def test_total_amount_sent_by_existing_sender(store):
    assert queries.total_amount_sent_by(store, "Tom Shelby") == pytest.approx(828.26, abs=0.001)


def test_total_amount_sent_by_unknown_sender(store):
    assert queries.total_amount_sent_by(store, "John Doe") == 0.0


def test_total_amount_sent_by_is_case_sensitive(store):
    assert queries.total_amount_sent_by(store, "tom shelby") == 0.0


def test_max_amount(store):
    assert queries.max_amount(store) == 985.0


def test_unique_client_count(store):
    assert queries.unique_client_count(store) == 14


def test_has_open_compliance_issue(store):
    assert queries.has_open_compliance_issue(store, "Tom Shelby") is True
    assert queries.has_open_compliance_issue(store, "Aunt Polly") is False
    assert queries.has_open_compliance_issue(store, "Nobody") is False


def test_open_issue_found_through_beneficiary_role(store):
    # Michael Gray only ever receives
    assert queries.has_open_compliance_issue(store, "Michael Gray") is True


def test_transactions_by_beneficiary(store):
    groups = queries.transactions_by_beneficiary(store)
    assert len(groups) == 10
    assert len(groups["Alfie Solomons"]) == 1
    assert len(groups["Arthur Shelby"]) == 2
    assert [t.issue_id for t in groups["Michael Gray"]] == [54, 78, 99]
    assert list(groups)[:3] == ["Alfie Solomons", "Arthur Shelby", "Aberama Gold"]


def test_grouped_records_are_store_records(store):
    groups = queries.transactions_by_beneficiary(store)
    assert groups["Ben Younger"][0] is store.transactions[4]


def test_unsolved_issue_ids(store):
    assert queries.unsolved_issue_ids(store) == {1, 3, 15, 54, 99}


def test_solved_issue_messages(store):
    assert queries.solved_issue_messages(store) == [
        "Never gonna give you up",
        "Never gonna let you down",
        "Never gonna run around and desert you",
    ]


def test_top3_by_amount(store):
    top = queries.top3_by_amount(store)
    assert [t.amount for t in top] == [985.0, 666.0, 666.0]
    # ties keep record order: issues 54 then 78, not 99
    assert [t.issue_id for t in top] == [15, 54, 78]


def test_top_n_by_amount(store):
    top = queries.top_n_by_amount(store, 5)
    assert [t.amount for t in top] == [985.0, 666.0, 666.0, 666.0, 430.2]
    assert queries.top_n_by_amount(store, 0) == []


def test_top_sender(store):
    assert queries.top_sender(store) == "Grace Burgess"


def test_sender_totals(store):
    totals = queries.sender_totals(store)
    assert list(totals) == ["Tom Shelby", "Aunt Polly", "Arthur Shelby", "Grace Burgess", "Billy Kimber"]
    assert totals["Grace Burgess"] == pytest.approx(1998.0)
    assert totals["Aunt Polly"] == pytest.approx(101.02)


# ---- empty store ---------------------------------------------------------


def test_empty_store_defaults(empty_store):
    assert queries.total_amount(empty_store) == 0.0
    assert queries.total_amount_sent_by(empty_store, "Tom Shelby") == 0.0
    assert queries.max_amount(empty_store) == 0.0
    assert queries.unique_client_count(empty_store) == 0
    assert queries.has_open_compliance_issue(empty_store, "Tom Shelby") is False
    assert queries.transactions_by_beneficiary(empty_store) == {}
    assert queries.unsolved_issue_ids(empty_store) == set()
    assert queries.solved_issue_messages(empty_store) == []
    assert queries.top3_by_amount(empty_store) == []
    assert queries.top_sender(empty_store) is None
    assert queries.sender_totals(empty_store) == {}


# ---- hand-built stores ---------------------------------------------------


def test_top3_with_fewer_than_three_records(make_txn):
    s = DataStore([make_txn(amount=1.0), make_txn(amount=5.0)])
    assert [t.amount for t in queries.top3_by_amount(s)] == [5.0, 1.0]


def test_top3_stable_among_equal_amounts(make_txn):
    txns = [make_txn(amount=7.0, id=i) for i in range(5)]
    s = DataStore(txns)
    assert [t.id for t in queries.top3_by_amount(s)] == [0, 1, 2]


def test_top_sender_tie_goes_to_first_encountered(make_txn):
    s = DataStore([
        make_txn(sender="Zed", amount=50.0),
        make_txn(sender="Amy", amount=30.0),
        make_txn(sender="Amy", amount=20.0),
    ])
    assert queries.top_sender(s) == "Zed"

    s = DataStore([
        make_txn(sender="Amy", amount=30.0),
        make_txn(sender="Zed", amount=50.0),
        make_txn(sender="Amy", amount=20.0),
    ])
    assert queries.top_sender(s) == "Amy"


def test_self_transfer_counts_one_client(make_txn):
    s = DataStore([make_txn(sender="Solo", beneficiary="Solo")])
    assert queries.unique_client_count(s) == 1


def test_issue_solved_ignored_without_issue_id(make_txn):
    s = DataStore([
        make_txn(sender="A", issue_solved=False, issue_message="stray"),
        make_txn(sender="B", issue_solved=True, issue_message="stray too"),
    ])
    assert queries.has_open_compliance_issue(s, "A") is False
    assert queries.unsolved_issue_ids(s) == set()
    assert queries.solved_issue_messages(s) == []


def test_issue_id_zero_counts(make_txn):
    s = DataStore([make_txn(sender="A", issue_id=0, issue_solved=False)])
    assert queries.unsolved_issue_ids(s) == {0}
    assert queries.has_open_compliance_issue(s, "A") is True


def test_unsolved_ids_are_unique(make_txn):
    s = DataStore([
        make_txn(issue_id=4, issue_solved=False),
        make_txn(issue_id=4, issue_solved=False),
    ])
    assert queries.unsolved_issue_ids(s) == {4}


def test_solved_messages_keep_duplicates_and_missing(make_txn):
    s = DataStore([
        make_txn(issue_id=1, issue_solved=True, issue_message="done"),
        make_txn(issue_id=2, issue_solved=True, issue_message="done"),
        make_txn(issue_id=3, issue_solved=True),
    ])
    assert queries.solved_issue_messages(s) == ["done", "done", None]
