__all__ = ["ProtocolError", "InvalidHeader", "validate", "bytesify"]

class ProtocolError(Exception):
    """Exception indicating that some input violates the HTTP/1.1 grammar.

    This is an abstract base class; catch it to handle every kind of
    malformed input at once, but raise one of its concrete subclasses, such
    as :exc:`InvalidHeader`.

    In addition to the normal :exc:`Exception` features, it has one attribute:

    .. attribute:: error_status_hint

       This gives a suggestion as to what status code a server might use if
       this error occurred while handling a request. The default is 400 Bad
       Request, a generic catch-all for protocol violations.

    """
    def __init__(self, msg, error_status_hint=400):
        if type(self) is ProtocolError:
            raise TypeError("tried to directly instantiate ProtocolError")
        Exception.__init__(self, msg)
        self.error_status_hint = error_status_hint


# Raised for anything wrong with a single header field: a bad name, a bad
# value, a missing colon, or whitespace where the name is. Whether that kills
# the whole message or just drops the field is the caller's decision.
class InvalidHeader(ProtocolError):
    pass


def validate(regex, data, msg="malformed data", error_class=InvalidHeader):
    match = regex.fullmatch(data)
    if not match:
        raise error_class(msg)
    return match.groupdict()

# Used for header names, header values, and header lines. Accepts
# ascii-strings, or bytes/bytearray/memoryview/..., and always returns bytes.
def bytesify(s):
    if isinstance(s, str):
        s = s.encode("ascii")
    if isinstance(s, int):
        raise TypeError("expected bytes-like object, not int")
    return bytes(s)
