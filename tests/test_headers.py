"""
Unit tests for fixed-width header extraction (blocks 1 and 2).
"""

import pytest

from swift_gateway.mt799 import (
    ApplicationHeaderFields,
    BasicHeaderFields,
    Block,
    FormatError,
    FormatErrorReason,
    extract_application_header,
    extract_basic_header,
)


class TestBasicHeader:

    def test_extracts_fields_at_fixed_offsets(self):
        fields = extract_basic_header("{1:F01PRCBBGSFAXXX1234567890}")

        assert fields == BasicHeaderFields(
            message_type_code="F",
            service_level="01",
            sender_bic="PRCBBGSFAXXX",
            session_number="1234",
            sequence_number="567890",
        )

    @pytest.mark.parametrize("length", [0, 1, 15, 24])
    def test_short_content_fails(self, length: int):
        span = "{1:" + "F01PRCBBGSFAXXX1234567890"[:length] + "}"

        with pytest.raises(FormatError) as exc_info:
            extract_basic_header(span)

        assert exc_info.value.reason == FormatErrorReason.INSUFFICIENT_LENGTH
        assert exc_info.value.block == Block.BASIC_HEADER
        assert "Basic Header Block" in str(exc_info.value)

    @pytest.mark.parametrize("span", ["", "{1:", "{1"])
    def test_span_too_short_to_strip(self, span: str):
        with pytest.raises(FormatError) as exc_info:
            extract_basic_header(span)
        assert exc_info.value.reason == FormatErrorReason.INSUFFICIENT_LENGTH

    def test_longer_content_is_accepted(self):
        fields = extract_basic_header("{1:F01PRCBBGSFAXXX1234567890EXTRA}")

        assert fields.sequence_number == "567890"

    def test_content_is_returned_verbatim(self):
        fields = extract_basic_header("{1:" + "Ж" * 25 + "}")

        assert fields.sender_bic == "Ж" * 12
        assert fields.sequence_number == "Ж" * 6


class TestApplicationHeader:

    def test_extracts_fields_at_fixed_offsets(self):
        fields = extract_application_header("{2:O799PRCBBGSFAXXXGRSWACAXXXX2222333333N}")

        assert fields == ApplicationHeaderFields(
            direction="O",
            message_type="799",
            receiver_bic="PRCBBGSFAXXX",
            sender_bic="GRSWACAXXXX",
            session_number="2222",
            sequence_number="333333",
            priority="N",
        )

    def test_37_characters_fail(self):
        with pytest.raises(FormatError) as exc_info:
            extract_application_header("{2:O799PRCBBGSFAXXXGRSWACAXXXX2222333333}")

        assert exc_info.value.reason == FormatErrorReason.INSUFFICIENT_LENGTH
        assert exc_info.value.block == Block.APPLICATION_HEADER

    def test_longer_content_uses_first_38_characters(self):
        fields = extract_application_header("{2:O7991111111111ABGRSWACAXXX11111111111111111111N}")

        assert fields.receiver_bic == "1111111111AB"
        assert fields.sender_bic == "GRSWACAXXX1"
        assert fields.session_number == "1111"
        assert fields.sequence_number == "111111"
        assert fields.priority == "1"

    def test_direction_is_not_validated(self):
        fields = extract_application_header("{2:X799PRCBBGSFAXXXGRSWACAXXXX2222333333N}")

        assert fields.direction == "X"
