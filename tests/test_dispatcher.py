"""Tests for sentence dispatch."""

from concurrent.futures import ThreadPoolExecutor
from unittest.mock import MagicMock, patch

import pytest

from nmeaparse import (
    DECODERS,
    SENTENCE_TYPES,
    ErrorCode,
    ErrorSlot,
    GGAMessage,
    GSAMessage,
    GSVMessage,
    MessageType,
    VTGMessage,
    classify,
    parse,
)
from nmeaparse.dispatcher import check_decoders

GGA = "$GPGGA,123519.00,4807.038,N,01131.000,E,1,08,0.9,545.4,M,47.0,M,,*61"
GSA = "$GPGSA,A,3,04,05,,09,12,,,24,,,,,2.5,1.3,2.1*39"
GSV = "$GPGSV,2,1,08,01,40,083,46,02,17,308,41,12,07,344,39,14,22,228,45*75"
VTG = "$GPVTG,054.7,T,034.4,M,005.5,N,010.2,K,A*25"
GN_GGA = "$GNGGA,123519.00,4807.038,N,01131.000,E,1,08,0.9,545.4,M,47.0,M,,*7F"
GN_GSA = "$GNGSA,A,3,04,05,,09,12,,,24,,,,,2.5,1.3,2.1*27"
GN_GSV = "$GNGSV,2,1,08,01,40,083,46,02,17,308,41,12,07,344,39,14,22,228,45*6B"
GN_VTG = "$GNVTG,054.7,T,034.4,M,005.5,N,010.2,K,A*3B"

WELL_FORMED = [
    (GGA, GGAMessage),
    (GSA, GSAMessage),
    (GSV, GSVMessage),
    (VTG, VTGMessage),
    (GN_GGA, GGAMessage),
    (GN_GSA, GSAMessage),
    (GN_GSV, GSVMessage),
    (GN_VTG, VTGMessage),
]


class TestParse:
    """Tests for parse function."""

    @pytest.mark.parametrize(("sentence", "record_class"), WELL_FORMED)
    def test_well_formed_sentence_is_tagged_with_its_classification(
        self, sentence, record_class
    ):
        error = ErrorSlot()
        record = parse(sentence, error)

        assert isinstance(record, record_class)
        assert record.type is classify(sentence)
        assert record.type is not MessageType.UNKNOWN
        assert error.code is None

    def test_gga_payload_is_decoded(self):
        record = parse(GGA)

        assert record.num_satellites == 8
        assert record.latitude_degrees == pytest.approx(48.1173, rel=1e-4)

    def test_gsv_payload_is_decoded(self):
        record = parse(GSV)

        assert record.satellites_in_view == 8
        assert [s.prn for s in record.satellites] == [1, 2, 12, 14]

    def test_unknown_type(self):
        error = ErrorSlot()

        assert parse("$GPXYZ,1,2,3*00", error) is None
        assert error.code is ErrorCode.TYPE_NOT_UNDERSTOOD

    def test_unknown_type_without_error_slot(self):
        assert parse("$GPXYZ,1,2,3*00") is None

    def test_unknown_type_never_reaches_a_decoder(self):
        error = ErrorSlot()
        decoder = MagicMock()
        with patch("nmeaparse.dispatcher.DECODERS", {MessageType.UNKNOWN: decoder}):
            assert parse("$GPXYZ,1,2,3*00", error) is None

        decoder.assert_not_called()
        assert error.code is ErrorCode.TYPE_NOT_UNDERSTOOD

    def test_decoder_table_is_read_only(self):
        with pytest.raises(TypeError):
            DECODERS[MessageType.UNKNOWN] = MagicMock()

    def test_vtf_prefix_is_not_understood(self):
        error = ErrorSlot()

        assert parse("$GPVTF,054.7,T,034.4,M,005.5,N,010.2,K,A*25", error) is None
        assert error.code is ErrorCode.TYPE_NOT_UNDERSTOOD

    def test_short_sentence_is_not_understood(self):
        error = ErrorSlot()

        assert parse("$GP", error) is None
        assert error.code is ErrorCode.TYPE_NOT_UNDERSTOOD

    def test_bad_checksum_reports_decoder_code(self):
        error = ErrorSlot()

        assert parse(GGA[:-2] + "00", error) is None
        assert error.code is ErrorCode.INVALID_CHECKSUM

    def test_truncated_sentence_reports_decoder_code(self):
        error = ErrorSlot()

        assert parse("$GPGGA,123519.00,4807.038,N*09", error) is None
        assert error.code is ErrorCode.MALFORMED_SENTENCE

    def test_overlong_identifier_reports_decoder_code(self):
        error = ErrorSlot()
        sentence = "$GPGGAX,123519.00,4807.038,N,01131.000,E,1,08,0.9,545.4,M,47.0,M,,*39"

        assert classify(sentence) is MessageType.GGA
        assert parse(sentence, error) is None
        assert error.code is ErrorCode.WRONG_SENTENCE_TYPE

    def test_invalid_field_reports_decoder_code(self):
        error = ErrorSlot()

        assert parse("$GPGSV,2,3,08,01,40,083,46*4C", error) is None
        assert error.code is ErrorCode.INVALID_FIELD

    def test_non_ascii_sentence_is_rejected(self):
        error = ErrorSlot()
        sentence = GGA.replace("123519.00", "12351é.00")

        assert parse(sentence, error) is None
        assert error.code is ErrorCode.INVALID_CHECKSUM

    def test_reused_slot_is_cleared_on_success(self):
        error = ErrorSlot(code=ErrorCode.TYPE_NOT_UNDERSTOOD)

        assert parse(VTG, error) is not None
        assert error.code is None

    def test_input_is_unchanged(self):
        sentence = GGA + "\r\n"
        before = str(sentence)

        parse(sentence)

        assert sentence == before

    def test_empty_sentence_is_a_contract_violation(self):
        with pytest.raises(ValueError):
            parse("")

    def test_none_is_a_contract_violation(self):
        with pytest.raises(TypeError):
            parse(None)


class TestDecoderContract:
    """Tests for how parse treats its decoders."""

    def test_tag_comes_from_classification(self):
        """A decoder cannot relabel its record."""
        mislabeled = MagicMock(return_value=GGAMessage(
            type=MessageType.VTG,
            utc_time=None,
            latitude_degrees=None,
            longitude_degrees=None,
            fix_quality=0,
            num_satellites=None,
            horizontal_dilution_of_precision=None,
            altitude_meters=None,
            geoid_height_meters=None,
            valid=False,
        ))
        with patch("nmeaparse.dispatcher.DECODERS", {MessageType.GGA: mislabeled}):
            record = parse(GGA)

        assert record.type is MessageType.GGA

    def test_decoder_receives_private_mutable_copy(self):
        received = []

        def decoder(buffer, error=None):
            received.append((bytes(buffer), buffer))
            buffer[:] = b"scribbled"
            error.code = ErrorCode.INVALID_FIELD
            return None

        error = ErrorSlot()
        with patch("nmeaparse.dispatcher.DECODERS", {MessageType.VTG: decoder}):
            assert parse(VTG, error) is None

        contents, buffer = received[0]
        assert contents == VTG.encode("ascii")
        assert isinstance(buffer, bytearray)
        assert buffer == bytearray()  # released once parse returns
        assert error.code is ErrorCode.INVALID_FIELD

    def test_scratch_is_released_when_decoder_raises(self):
        received = []

        def decoder(buffer, error=None):
            received.append(buffer)
            raise RuntimeError("decoder bug")

        with patch("nmeaparse.dispatcher.DECODERS", {MessageType.VTG: decoder}):
            with pytest.raises(RuntimeError):
                parse(VTG)

        assert received[0] == bytearray()

    def test_silent_decoder_failure_still_sets_a_code(self):
        error = ErrorSlot()
        silent = MagicMock(return_value=None)
        with patch("nmeaparse.dispatcher.DECODERS", {MessageType.GSA: silent}):
            assert parse(GSA, error) is None

        assert error.code is ErrorCode.MALFORMED_SENTENCE

    def test_decoder_gets_the_callers_slot(self):
        error = ErrorSlot()
        decoder = MagicMock(return_value=None)
        with patch("nmeaparse.dispatcher.DECODERS", {MessageType.GSV: decoder}):
            parse(GSV, error)

        decoder.assert_called_once()
        assert decoder.call_args.args[1] is error

    def test_every_record_type_has_a_decoder(self):
        assert set(DECODERS) == set(MessageType) - {MessageType.UNKNOWN}


class TestConcurrentParse:
    """parse shares no mutable state between calls."""

    def test_parallel_results_match_serial_results(self):
        sentences = [sentence for sentence, _ in WELL_FORMED] * 50
        sentences.append("$GPXYZ,1,2,3*00")

        with ThreadPoolExecutor(max_workers=8) as executor:
            results = list(executor.map(parse, sentences))

        for sentence, record in zip(sentences, results):
            if classify(sentence) is MessageType.UNKNOWN:
                assert record is None
            else:
                assert record.type is classify(sentence)
                assert record == parse(sentence)


class TestCheckDecoders:
    """Tests for check_decoders function."""

    def test_shipped_tables_pass(self):
        check_decoders(DECODERS, SENTENCE_TYPES)

    def test_rejects_decoder_for_unknown(self):
        decoders = dict(DECODERS)
        decoders[MessageType.UNKNOWN] = MagicMock()

        with pytest.raises(ValueError, match="UNKNOWN"):
            check_decoders(decoders, SENTENCE_TYPES)

    def test_rejects_registered_type_without_decoder(self):
        decoders = {MessageType.GGA: MagicMock()}
        entries = [("$GPGGA", MessageType.GGA), ("$GPGSA", MessageType.GSA)]

        with pytest.raises(ValueError, match="GSA"):
            check_decoders(decoders, entries)
