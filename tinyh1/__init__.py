# Strict, pure-Python building blocks for an HTTP/1.1 implementation: parsing
# a single header line into a validated (name, value) pair, and an ordered
# representation of the HTTP protocol version. There's no networking code
# here, and no header collections or message framing either; those belong to
# whatever request/response parser sits on top.

from ._util import ProtocolError, InvalidHeader
from ._headers import *
from ._httpversion import *
from ._version import __version__

from . import _headers, _httpversion

__all__ = ["ProtocolError", "InvalidHeader"]
__all__ += _headers.__all__
__all__ += _httpversion.__all__
