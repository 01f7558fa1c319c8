import collections

__all__ = ["HttpVersion", "HTTP_0_9", "HTTP_1_0", "HTTP_1_1"]


def _is_pair(obj):
    return isinstance(obj, tuple) and len(obj) == 2


class HttpVersion(collections.namedtuple("HttpVersion", ["major", "minor"])):
    """An HTTP protocol version, like ``HttpVersion(1, 1)``.

    Versions are immutable and totally ordered, major number first, then
    minor number::

        HttpVersion(1, 1) > HttpVersion(1, 0) > HttpVersion(0, 9)

    As a convenience, they can also be compared directly against plain
    ``(major, minor)`` pairs, which are converted with :meth:`from_pair`
    before comparing::

        if conn.their_http_version >= (1, 1):
            ...

    ``str()`` renders the version as ``"1.1"``. There's no way to parse one
    out of a request line here; that happens upstream, and by the time we get
    a version the numbers are already integers.

    """

    __slots__ = ()

    @classmethod
    def from_pair(cls, pair):
        "Converts a (major, minor) tuple into an HttpVersion"
        if isinstance(pair, cls):
            return pair
        if not _is_pair(pair):
            raise TypeError(
                "expected a (major, minor) tuple, not {!r}".format(pair))
        major, minor = pair
        return cls(major, minor)

    def to_pair(self):
        return (self.major, self.minor)

    def compare_to_pair(self, pair):
        """Returns -1, 0 or 1 as this version is older than, the same as, or
        newer than the given (major, minor) tuple."""
        ours = self.to_pair()
        theirs = self.from_pair(pair).to_pair()
        return (ours > theirs) - (ours < theirs)

    # Two-element tuples get normalized through from_pair before comparing.
    # For ordering, anything else is a TypeError right here: returning
    # NotImplemented would let tuple's reflected comparison order us against
    # e.g. (2,).
    def _ordering_operand(self, other, op):
        if not _is_pair(other):
            raise TypeError(
                "'{}' not supported between instances of {!r} and {!r}"
                .format(op, type(self).__name__, type(other).__name__))
        return other

    def __eq__(self, other):
        if not _is_pair(other):
            return NotImplemented
        return self.to_pair() == self.from_pair(other).to_pair()

    def __ne__(self, other):
        if not _is_pair(other):
            return NotImplemented
        return self.to_pair() != self.from_pair(other).to_pair()

    def __lt__(self, other):
        return self.compare_to_pair(self._ordering_operand(other, "<")) < 0

    def __le__(self, other):
        return self.compare_to_pair(self._ordering_operand(other, "<=")) <= 0

    def __gt__(self, other):
        return self.compare_to_pair(self._ordering_operand(other, ">")) > 0

    def __ge__(self, other):
        return self.compare_to_pair(self._ordering_operand(other, ">=")) >= 0

    __hash__ = tuple.__hash__

    def __str__(self):
        return "{0.major}.{0.minor}".format(self)


HTTP_0_9 = HttpVersion(0, 9)
HTTP_1_0 = HttpVersion(1, 0)
HTTP_1_1 = HttpVersion(1, 1)
