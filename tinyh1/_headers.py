################################################################
# Facts:
#
# Header names are case-insensitive ascii tokens. We normalize them to
# lowercase, so that b"Content-Type" and b"content-type" compare equal, but
# we hang onto whatever the peer actually sent as raw_field.
#
# Header values: "Historically, HTTP has allowed field content with text in
# the ISO-8859-1 charset [ISO-8859-1], supporting other charsets only through
# use of [RFC2047] encoding.  In practice, most HTTP header field values use
# only a subset of the US-ASCII charset [USASCII]. Newly defined header fields
# SHOULD limit their field values to US-ASCII octets."
# We take the SHOULD as a MUST: visible ascii plus SP / HTAB only.
#
# Values get leading/trailing whitespace stripped.
#
# "No whitespace is allowed between the header field-name and colon. In the
# past, differences in the handling of such whitespace have led to security
# vulnerabilities in request routing and response handling. A server MUST
# reject any received request message that contains whitespace between a
# header field-name and colon with a response code of 400 (Bad Request)."
# -- https://tools.ietf.org/html/rfc7230#section-3.2.4
#
# libhttp_parser doesn't care though, if you give it
#   b"Transfer-Encoding : chunked\r\n"
# you get back {b"Transfer-Encoding ": b"chunked"}, and a front-end that
# does care will frame the body differently from a back-end that doesn't.
# That's request smuggling. So the name part of a line is a bare token: no
# whitespace before the colon, none at the start of the line, none inside.
#
# There's deliberately no way to turn a Header back into a line of text.
# Writing headers out is the job of whoever assembles the response.
################################################################

import logging
import re

from ._abnf import field_name, field_value
from ._util import InvalidHeader, bytesify, validate

__all__ = ["Header"]

logger = logging.getLogger(__name__)

field_name_re = re.compile(field_name.encode("ascii"))
field_value_re = re.compile(field_value.encode("ascii"))

# https://tools.ietf.org/html/rfc7230#section-3.2.3
#  OWS            = *( SP / HTAB )
#                 ; optional whitespace
# Only ever stripped off the ends of values, so a set of bytes for .strip()
_OWS_CHARS = b" \t"


def _coerce(data, what):
    try:
        return bytesify(data)
    except UnicodeEncodeError:
        raise InvalidHeader("non-ascii characters in header {}".format(what))


def _validate(regex, data, msg):
    try:
        validate(regex, data, msg)
    except InvalidHeader:
        logger.debug("rejecting header: %s: %r", msg, data)
        raise


class Header:
    """A single validated HTTP header field.

    Fields:

    .. attribute:: field

       The header name, lowercased, e.g. ``b"content-type"``. Always a byte
       string.

    .. attribute:: raw_field

       The header name exactly as it was given, e.g. ``b"Content-Type"``.
       Not used for comparisons.

    .. attribute:: value

       The header value with surrounding whitespace stripped, e.g.
       ``b"text/html"``. Always a byte string.

    :term:`Bytes-like objects <bytes-like object>` and native strings
    containing only ascii characters will be automatically converted to byte
    strings. Anything that isn't a valid field name or field value raises
    :exc:`InvalidHeader`, and no object is created.

    Headers are immutable. They compare equal when their (lowercased) names
    and values are equal, and unpack like a ``(field, value)`` tuple::

        name, value = Header.parse("Content-Type: text/html")

    """

    __slots__ = ("_field", "_raw_field", "_value")

    def __init__(self, name, value):
        raw_field = _coerce(name, "name")
        value = _coerce(value, "value").strip(_OWS_CHARS)
        _validate(field_name_re, raw_field, "illegal header name")
        _validate(field_value_re, value, "illegal header value")
        object.__setattr__(self, "_raw_field", raw_field)
        object.__setattr__(self, "_field", raw_field.lower())
        object.__setattr__(self, "_value", value)

    @classmethod
    def from_bytes(cls, name, value):
        "Builds a Header from separate name and value byte strings"
        return cls(name, value)

    @classmethod
    def parse(cls, line):
        """Builds a Header from a single ``Name: value`` line.

        The line is split at the first colon; any later colons belong to the
        value. The line must not include its trailing CRLF.

        """
        line = _coerce(line, "line")
        name, colon, value = line.partition(b":")
        if not colon:
            logger.debug("rejecting header: no colon: %r", line)
            raise InvalidHeader("missing colon in header line")
        return cls(name, value)

    @property
    def field(self):
        return self._field

    @property
    def raw_field(self):
        return self._raw_field

    @property
    def value(self):
        return self._value

    def __setattr__(self, name, value):
        raise AttributeError("Header objects are immutable")

    def __delattr__(self, name):
        raise AttributeError("Header objects are immutable")

    # __setattr__ refuses the default slot-by-slot restore, so copy, deepcopy
    # and pickle rebuild us through __init__, which re-validates.
    def __reduce__(self):
        return (self.__class__, (self._raw_field, self._value))

    def __iter__(self):
        return iter((self._field, self._value))

    def __repr__(self):
        return "{}(field={!r}, value={!r})".format(
            self.__class__.__name__, self._field, self._value)

    def __eq__(self, other):
        if not isinstance(other, Header):
            return NotImplemented
        return (self._field, self._value) == (other._field, other._value)

    def __hash__(self):
        return hash((Header, self._field, self._value))
