"""Tests for the parameter codec and RFC 5987 helpers."""

import pytest

from httpdigest import (
    InvalidExtendedValueError,
    MalformedParameterError,
    decode_extended_value,
    encode_extended_value,
    parse_params,
    split_params,
)


def test_split_params_respects_quoted_commas():
    tokens = split_params('realm="a, b", nonce="abc", qop=auth')
    assert tokens == ['realm="a, b"', 'nonce="abc"', "qop=auth"]


def test_split_params_resolves_backslash_escapes():
    tokens = split_params(r'opaque="say \"hi\""')
    assert tokens == ['opaque="say "hi""']


def test_split_params_skips_empty_tokens():
    assert split_params('realm="r",, nonce="n",') == ['realm="r"', 'nonce="n"']


def test_parse_params_trims_and_unquotes():
    params = parse_params([' realm = "testrealm@host.com" ', "qop=auth"])
    assert params == {"realm": "testrealm@host.com", "qop": "auth"}


def test_parse_params_keys_are_case_insensitive():
    params = parse_params(['UserName="Mufasa"', 'REALM="r"'])
    assert params["username"] == "Mufasa"
    assert params["realm"] == "r"


def test_parse_params_last_duplicate_wins():
    params = parse_params(['nonce="first"', 'Nonce="second"'])
    assert params["nonce"] == "second"


def test_parse_params_percent_decodes_utf8():
    params = parse_params(['username="J%C3%A4s%C3%B8n%20Doe"'])
    assert params["username"] == "Jäsøn Doe"


def test_parse_params_keeps_plus_and_slash():
    params = parse_params(['nonce="5TsQWLVdgBdmrQ0XsxbDODV+57QdFR34I9HAbC/RVvkK"'])
    assert params["nonce"] == "5TsQWLVdgBdmrQ0XsxbDODV+57QdFR34I9HAbC/RVvkK"


def test_parse_params_only_strips_one_pair_of_quotes():
    params = parse_params(['opaque=""quoted""'])
    assert params["opaque"] == '"quoted"'


def test_parse_params_leaves_extended_values_encoded():
    params = parse_params(["username*=UTF-8''J%C3%A4s%C3%B8n%20Doe"])
    assert params["username*"] == "UTF-8''J%C3%A4s%C3%B8n%20Doe"


def test_parse_params_rejects_token_without_equals():
    with pytest.raises(MalformedParameterError):
        parse_params(['realm="r"', "stale"])


def test_parse_params_rejects_empty_key():
    with pytest.raises(MalformedParameterError):
        parse_params(['="value"'])


def test_parse_params_rejects_invalid_utf8_escapes():
    with pytest.raises(MalformedParameterError):
        parse_params(['username="%FF%FE"'])


def test_decode_extended_value_utf8():
    charset, language, value = decode_extended_value("UTF-8''J%C3%A4s%C3%B8n%20Doe")
    assert charset == "UTF-8"
    assert language == ""
    assert value == b"J\xc3\xa4s\xc3\xb8n Doe"


def test_decode_extended_value_latin1_with_language():
    charset, language, value = decode_extended_value("iso-8859-1'en'%A3%20rates")
    assert charset == "ISO-8859-1"
    assert language == "en"
    assert value == b"\xa3 rates"


@pytest.mark.parametrize(
    "text",
    [
        "J%C3%A4s%C3%B8n",  # no charset/language delimiters
        "UTF-8'J%C3%A4s%C3%B8n",  # only one delimiter
        "KOI8-R''%C3%A4",  # unsupported charset
        "UTF-8''J son",  # space is not an attr-char
        "UTF-8''J%G1",  # broken escape
        "UTF-8''%FF",  # not valid UTF-8
    ],
)
def test_decode_extended_value_rejects_invalid(text):
    with pytest.raises(InvalidExtendedValueError):
        decode_extended_value(text)


def test_encode_extended_value():
    encoded = encode_extended_value("UTF-8", "", b"J\xc3\xa4s\xc3\xb8n Doe")
    assert encoded == "UTF-8''J%C3%A4s%C3%B8n%20Doe"
