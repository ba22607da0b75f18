import random

import pytest

from share_recovery import Share
from share_recovery.decoder import (
    decode,
    decode_base,
    decode_document,
    decode_share_id,
    decode_value,
    encode_value,
    format_secret,
)
from share_recovery.errors import DuplicateAbscissa, InvalidBase, InvalidDigit, InvalidRecord


class TestDecodeBase:
    @pytest.mark.parametrize("token,expected", [("2", 2), ("10", 10), (" 16 ", 16), (36, 36), ("036", 36)])
    def test_accepts_valid_bases(self, token, expected) -> None:
        assert decode_base(token) == expected

    @pytest.mark.parametrize("token", ["1", "37", 0, 40, "ten", "", "-2", "1.5", True, 2.0, None])
    def test_rejects_invalid_bases(self, token) -> None:
        with pytest.raises(InvalidBase):
            decode_base(token)


class TestDecodeValue:
    def test_decodes_mixed_case(self) -> None:
        assert decode_value("FF", 16) == 255
        assert decode_value("fF", 16) == 255
        assert decode_value("zz", 36) == 36 * 36 - 1

    def test_trims_whitespace(self) -> None:
        assert decode_value("  111\n", 2) == 7

    @pytest.mark.parametrize(
        "token,base",
        [
            ("12a", 10),
            ("2", 2),
            ("", 10),
            ("   ", 10),
            ("-5", 10),
            ("+5", 10),
            ("1_000", 10),
            ("1 0", 10),
            ("0x1f", 16),
            ("\u212a", 36),
            ("1\u212a", 36),
            ("\uff11", 10),
        ],
    )
    def test_rejects_invalid_digits(self, token, base) -> None:
        with pytest.raises(InvalidDigit):
            decode_value(token, base)

    def test_error_names_the_character(self) -> None:
        with pytest.raises(InvalidDigit) as info:
            decode_value("1019", 9)
        assert "'9'" in str(info.value)
        assert "position 3" in str(info.value)

    def test_values_beyond_interpreter_digit_limits(self) -> None:
        assert decode_value("9" * 5000, 10) == 10**5000 - 1
        assert decode_value("1" + "0" * 6000, 7) == 7**6000


class TestEncodeValue:
    def test_round_trip_reproduces_digit_string(self) -> None:
        rng = random.Random(7)
        for base in range(2, 37):
            value = rng.getrandbits(300)
            text = encode_value(value, base)
            assert decode_value(text, base) == value
            assert encode_value(decode_value(text.upper(), base), base) == text

    def test_round_trip_across_chunk_boundary(self) -> None:
        digits = "1" + "0" * 1500 + "7" + "0" * 999
        assert encode_value(decode_value(digits, 10), 10) == digits

    def test_small_and_negative_values(self) -> None:
        assert encode_value(0, 2) == "0"
        assert encode_value(35, 36) == "z"
        assert encode_value(-255, 16) == "-ff"

    def test_format_secret_handles_huge_values(self) -> None:
        assert format_secret(10**5000) == "1" + "0" * 5000
        assert format_secret(-42) == "-42"


class TestDecodeShare:
    def test_decode_share(self) -> None:
        assert decode("6", "4", "213") == Share(x=6, y=39)
        assert decode(2, 2, "111") == Share(x=2, y=7)

    def test_share_ids_are_decimal(self) -> None:
        assert decode_share_id(" 010 ") == 10
        assert decode_share_id("-3") == -3
        for token in ("0x10", "a", "", "-", " - 5", "+ 5", "\uff15", True):
            with pytest.raises(InvalidDigit):
                decode_share_id(token)

    def test_errors_carry_share_id(self) -> None:
        with pytest.raises(InvalidBase) as info:
            decode("4", "99", "1")
        assert info.value.share_id == "4"
        assert info.value.kind == "InvalidBase"


class TestDecodeDocument:
    def test_builds_problem(self) -> None:
        problem = decode_document(
            {
                "keys": {"n": 4, "k": 3},
                "1": {"base": "10", "value": "4"},
                "2": {"base": "2", "value": "111"},
                "3": {"base": "10", "value": "12"},
                "6": {"base": "4", "value": "213"},
            }
        )
        assert problem.threshold == 3
        assert problem.total == 4
        assert sorted(problem.shares, key=lambda s: s.x) == [Share(1, 4), Share(2, 7), Share(3, 12), Share(6, 39)]

    def test_abort_policy_propagates_first_bad_share(self) -> None:
        doc = {"keys": {"n": 2, "k": 1}, "1": {"base": "10", "value": "4"}, "2": {"base": "2", "value": "12"}}
        with pytest.raises(InvalidDigit) as info:
            decode_document(doc)
        assert info.value.share_id == "2"

    def test_skip_policy_drops_bad_shares(self) -> None:
        doc = {
            "keys": {"n": 3, "k": 1},
            "1": {"base": "10", "value": "4"},
            "2": {"base": "2", "value": "12"},
            "3": {"base": "40", "value": "1"},
        }
        problem = decode_document(doc, on_invalid_share="skip")
        assert problem.shares == (Share(1, 4),)

    def test_skip_policy_does_not_hide_schema_errors(self) -> None:
        with pytest.raises(InvalidRecord):
            decode_document({"keys": {"n": 1, "k": 1}, "1": {"base": "10"}}, on_invalid_share="skip")

    def test_equal_abscissa_written_differently_decodes_to_duplicates(self) -> None:
        problem = decode_document(
            {"keys": {"n": 2, "k": 2}, "1": {"base": 10, "value": "3"}, "01": {"base": 10, "value": "4"}}
        )
        assert [s.x for s in problem.shares] == [1, 1]

    def test_repeated_share_id_is_duplicate(self) -> None:
        with pytest.raises(DuplicateAbscissa):
            decode_document({"keys": {"n": 2, "k": 2}, 1: {"base": 10, "value": "3"}, "1": {"base": 10, "value": "4"}})

    def test_unknown_policy(self) -> None:
        with pytest.raises(ValueError):
            decode_document({"keys": {"n": 0, "k": 1}}, on_invalid_share="ignore")
