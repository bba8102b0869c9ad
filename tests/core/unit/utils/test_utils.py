"""Tests for the shared helpers in toolbelt.core.utils."""

import base64

import pytest

from toolbelt.core.utils import (
    EmailEncodingType,
    capitalize,
    encode_email_content,
    get_state_abbreviation,
    parse_query_params,
    sanitize_filename,
    to_12_hour,
)


class TestParseQueryParams:
    def test_numeric_strings_become_numbers(self):
        parsed = parse_query_params({'zipCode': '78741', 'lat': '42.201', 'lon': '-85.5806'})

        assert parsed == {'zipCode': 78741, 'lat': 42.201, 'lon': -85.5806}
        assert isinstance(parsed['zipCode'], int)

    def test_integral_floats_become_ints(self):
        assert parse_query_params({'value': '10.0'}) == {'value': 10}

    def test_other_values_are_unchanged(self):
        query = {'city': 'Portage', 'blank': '', 'flag': True, 'nan': 'NaN'}

        assert parse_query_params(query) == query


class TestText:
    @pytest.mark.parametrize(
        ('url', 'expected'),
        [
            ('https://example.com', 'example-com'),
            ('http://Example.com/Path/To?q=1', 'example-com-path-to-q-1'),
            ('https://a--b..c/', 'a-b-c'),
        ],
    )
    def test_sanitize_filename(self, url, expected):
        assert sanitize_filename(url) == expected

    def test_capitalize(self):
        assert capitalize('hELLO wORLD') == 'Hello world'
        assert capitalize('') == ''

    @pytest.mark.parametrize(
        ('value', 'with_seconds', 'expected'),
        [
            ('06:42', False, '6:42 AM'),
            ('18:05', False, '6:05 PM'),
            ('00:15:30', True, '12:15:30 AM'),
            ('05:12 (CDT)', False, '5:12 AM'),
        ],
    )
    def test_to_12_hour(self, value, with_seconds, expected):
        assert to_12_hour(value, with_seconds=with_seconds) == expected


class TestStateAbbreviation:
    @pytest.mark.parametrize('name', ['Michigan', 'michigan', 'MICHIGAN'])
    def test_full_names_ignore_case(self, name):
        assert get_state_abbreviation(name) == 'MI'

    def test_codes_pass_through(self):
        assert get_state_abbreviation('tx') == 'TX'

    def test_territories(self):
        assert get_state_abbreviation('Puerto Rico') == 'PR'

    def test_unknown_is_uppercased(self):
        assert get_state_abbreviation('Ontario') == 'ONTARIO'


class TestEncodeEmailContent:
    def test_subject_uses_rfc2047(self):
        result = encode_email_content('Hello', EmailEncodingType.SUBJECT)

        assert result.is_encoded
        assert result.encoded_content == '=?utf-8?B?SGVsbG8=?='

    def test_empty_subject_defaults(self):
        result = encode_email_content('', 'Subject')

        encoded = result.encoded_content.removeprefix('=?utf-8?B?').removesuffix('?=')
        assert base64.b64decode(encoded).decode() == 'No Subject'

    def test_mime_message_is_urlsafe(self):
        content = 'Subject: ??>>\r\n\r\nbody'
        result = encode_email_content(content, EmailEncodingType.MIME_MESSAGE)

        assert '+' not in result.encoded_content
        assert '/' not in result.encoded_content
        assert base64.urlsafe_b64decode(result.encoded_content).decode() == content

    def test_attachment_already_base64_is_kept(self):
        encoded = base64.b64encode(b'binary data').decode()

        result = encode_email_content(encoded, EmailEncodingType.ATTACHMENT)

        assert result.encoded_content == encoded
        assert 'already' in result.message

    def test_attachment_plain_text_is_encoded(self):
        result = encode_email_content('plain text!', EmailEncodingType.ATTACHMENT)

        assert base64.b64decode(result.encoded_content) == b'plain text!'

    def test_invalid_type(self):
        result = encode_email_content('x', 'Postcard')

        assert not result.is_encoded
        assert 'Invalid encoding type' in result.message
