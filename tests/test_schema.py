import pytest

from share_recovery.errors import InvalidRecord
from share_recovery.schema import KeysRecord, ShareRecord, parse_document


def test_parse_document_splits_records() -> None:
    doc = parse_document(
        {
            "keys": {"n": 2, "k": 2, "comment": "ignored"},
            "1": {"base": "10", "value": "3"},
            " 2 ": {"base": 16, "value": "5", "note": "extra"},
        }
    )
    assert doc.keys == KeysRecord(n=2, k=2)
    assert list(doc.shares) == ["1", "2"]
    assert doc.shares["2"] == ShareRecord(base=16, value="5")


def test_integer_keys_from_yaml_are_share_ids() -> None:
    doc = parse_document({"keys": {"n": 1, "k": 1}, 7: {"base": "2", "value": "1"}})
    assert list(doc.shares) == ["7"]


@pytest.mark.parametrize(
    "data",
    [
        [],
        "keys",
        {},
        {"keys": []},
        {"keys": {"n": 1}},
        {"keys": {"n": 1, "k": 0}},
        {"keys": {"n": -1, "k": 1}},
        {"keys": {"n": 1, "k": "3"}},
        {"keys": {"n": 1, "k": 3.0}},
        {"keys": {"n": 1, "k": True}},
        {"keys": {"n": "4", "k": 1}},
        {"keys": {"n": 1, "k": 1}, "abc": {"base": "10", "value": "1"}},
        {"keys": {"n": 1, "k": 1}, "1": "10:1"},
        {"keys": {"n": 1, "k": 1}, "1": {"value": "1"}},
        {"keys": {"n": 1, "k": 1}, "1": {"base": "10", "value": 1}},
        {"keys": {"n": 1, "k": 1}, "1": {"base": 10.5, "value": "1"}},
        {"keys": {"n": 1, "k": 1}, "1": {"base": True, "value": "1"}},
    ],
)
def test_invalid_documents_rejected(data) -> None:
    with pytest.raises(InvalidRecord):
        parse_document(data)


def test_invalid_record_names_the_share() -> None:
    with pytest.raises(InvalidRecord) as info:
        parse_document({"keys": {"n": 1, "k": 1}, "5": {"base": "10"}})
    assert info.value.share_id == "5"
    assert "value" in str(info.value)
