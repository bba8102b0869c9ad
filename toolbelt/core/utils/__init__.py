from toolbelt.core.utils.email import EmailEncodingType, EncodedEmailContent, encode_email_content
from toolbelt.core.utils.query import parse_query_params
from toolbelt.core.utils.states import US_STATES, get_state_abbreviation
from toolbelt.core.utils.text import capitalize, sanitize_filename, to_12_hour

__all__ = [
    'US_STATES',
    'EmailEncodingType',
    'EncodedEmailContent',
    'capitalize',
    'encode_email_content',
    'get_state_abbreviation',
    'parse_query_params',
    'sanitize_filename',
    'to_12_hour',
]
