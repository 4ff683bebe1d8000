"""
marc21: Strict decoding of MARC 21 record leaders.

Decodes the record length field at the start of an ISO 2709 record:

>>> from marc21 import Leader
>>> Leader.from_bytes(b"00827nam a2200253 a 4500").record_length()
827

Decoding failures raise a ``ParseLeaderError`` subclass, which is a
``ValueError``.
"""

import logging

from .errors import (
    ErrorKind,
    GenericParseError,
    Incomplete,
    InvalidRecordLength,
    Needed,
    ParseLeaderError,
)
from .leader import (
    MAX_RECORD_LENGTH,
    RECORD_LENGTH_WIDTH,
    Leader,
    parse_leader,
    parse_record_len,
)
from .log import configure_logging
from .settings import Marc21Settings

__version__ = "0.1.0"
__author__ = "marc21 Contributors"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "ErrorKind",
    "GenericParseError",
    "Incomplete",
    "InvalidRecordLength",
    "Leader",
    "MAX_RECORD_LENGTH",
    "Marc21Settings",
    "Needed",
    "ParseLeaderError",
    "RECORD_LENGTH_WIDTH",
    "configure_logging",
    "parse_leader",
    "parse_record_len",
]
