"""Reference containers the harness is validated against.

``dict`` covers the fully featured case. The classes here cover maps that
reject None and maps that reject mutation altogether.
"""

from collections.abc import Mapping, MutableMapping

from .errors import NullRejected, UnsupportedOperation


def _pairs(other):
    if other is None:
        raise NullRejected("update() argument must not be None")
    if isinstance(other, Mapping):
        return list(other.items())
    if hasattr(other, "keys"):
        return [(k, other[k]) for k in other.keys()]
    return list(other)


class NullHostileMap(MutableMapping):
    """Insertion-ordered map that refuses None keys and values.

    ``update`` validates the whole batch before storing anything. Querying
    for a None key raises ``NullRejected`` as well.
    """

    def __init__(self, entries=()):
        self._data = {}
        self.update(entries)

    def _check(self, key, value):
        if key is None:
            raise NullRejected("None keys are not allowed")
        if value is None:
            raise NullRejected(f"None value for key {key!r} is not allowed")

    def __getitem__(self, key):
        if key is None:
            raise NullRejected("None keys are not allowed")
        return self._data[key]

    def __setitem__(self, key, value):
        self._check(key, value)
        self._data[key] = value

    def __delitem__(self, key):
        del self._data[key]

    def __contains__(self, key):
        if key is None:
            raise NullRejected("None keys are not allowed")
        return key in self._data

    def __iter__(self):
        return iter(self._data)

    def __len__(self):
        return len(self._data)

    def update(self, other=(), **kwargs):
        pairs = _pairs(other) + list(kwargs.items())
        for key, value in pairs:
            self._check(key, value)
        for key, value in pairs:
            self._data[key] = value

    def __repr__(self):
        return f"NullHostileMap({self._data!r})"


class UnmodifiableMap(Mapping):
    """Read-only map whose ``update`` always raises ``UnsupportedOperation``.

    Args:
        entries: Initial contents
        lenient: When true, an update that would not change the contents
            is accepted silently instead of raising
    """

    def __init__(self, entries=(), lenient: bool = False):
        self._data = dict(entries)
        self.lenient = lenient

    def __getitem__(self, key):
        return self._data[key]

    def __iter__(self):
        return iter(self._data)

    def __len__(self):
        return len(self._data)

    def update(self, other=(), **kwargs):
        if self.lenient and other is not None:
            pairs = _pairs(other) + list(kwargs.items())
            if all(k in self._data and self._data[k] == v for k, v in pairs):
                return
        raise UnsupportedOperation(f"{type(self).__name__} does not support update()")

    def __repr__(self):
        return f"UnmodifiableMap({self._data!r})"
