"""Unit tests for domain value objects.

Tests cover:
- AccountQuery mode derivation and wire payload
- StreamMessage decoding (account, final, error, malformed account)
- SearchOutcome finality
"""

from dataclasses import FrozenInstanceError

import pytest

from src.domain.enums import QueryMode
from src.domain.value_objects import (
    AccountQuery,
    MultipleAccounts,
    NoAccounts,
    SearchFailure,
    SingleAccount,
    StreamMessage,
)


@pytest.mark.unit
class TestAccountQuery:
    """Test AccountQuery."""

    def test_exact_mode(self, exact_query):
        assert exact_query.mode is QueryMode.EXACT

    def test_pattern_mode(self, pattern_query):
        assert pattern_query.mode is QueryMode.PATTERN

    def test_payload_uses_name_key(self, pattern_query):
        assert pattern_query.to_payload() == {
            "account_number": "09034*7364",
            "bank_code": "000014",
            "name": "Jane",
        }

    def test_holder_name_defaults_to_empty(self, exact_query):
        assert exact_query.to_payload()["name"] == ""

    def test_query_is_immutable(self, exact_query):
        with pytest.raises(FrozenInstanceError):
            exact_query.bank_code = "000013"


@pytest.mark.unit
class TestStreamMessage:
    """Test StreamMessage.from_payload()."""

    def test_account_frame(self, make_payload, record_one):
        message = StreamMessage.from_payload({"account": make_payload(), "final": False})

        assert message.account == record_one
        assert message.final is False
        assert message.error is None
        assert message.malformed_account is False

    def test_bare_final_frame(self):
        message = StreamMessage.from_payload({"final": True})

        assert message.account is None
        assert message.final is True
        assert message.malformed_account is False

    def test_account_with_final(self, make_payload):
        message = StreamMessage.from_payload({"account": make_payload(), "final": True})

        assert message.account is not None
        assert message.final is True

    def test_error_frame(self):
        message = StreamMessage.from_payload({"error": "Invalid bank code", "final": True})

        assert message.error == "Invalid bank code"

    @pytest.mark.parametrize("error", ["", None, 500, {"detail": "x"}])
    def test_empty_or_non_string_error_ignored(self, error):
        assert StreamMessage.from_payload({"error": error}).error is None

    def test_malformed_account_flagged(self, make_payload):
        message = StreamMessage.from_payload({"account": make_payload(bank_code="")})

        assert message.account is None
        assert message.malformed_account is True

    @pytest.mark.parametrize("final", ["true", 1, None])
    def test_final_must_be_boolean_true(self, final):
        assert StreamMessage.from_payload({"final": final}).final is False


@pytest.mark.unit
class TestSearchOutcomes:
    """Test outcome variants."""

    def test_single_account_is_final(self, record_one):
        assert SingleAccount(record=record_one).final is True

    def test_multiple_accounts_default_final(self, record_one):
        assert MultipleAccounts(records=(record_one,)).final is True

    def test_multiple_accounts_interim(self, record_one):
        assert MultipleAccounts(records=(record_one,), final=False).final is False

    def test_no_accounts_is_final(self):
        assert NoAccounts().final is True

    def test_failure_error_optional(self):
        failure = SearchFailure(reason="connection error occurred")

        assert failure.error is None
        assert failure.final is True
