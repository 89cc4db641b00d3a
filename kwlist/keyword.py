#
# kwlist - Copyright (C) kwlist contributors.
#
# This library is free software; you can redistribute it and/or
# modify it under the terms of the GNU Lesser General Public
# License as published by the Free Software Foundation; either
# version 2.1 of the License, or (at your option) any later version.
#
# This library is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the GNU
# Lesser General Public License for more details.
#
# You should have received a copy of the GNU Lesser General Public
# License along with this library; if not, write to the Free Software
# Foundation, Inc., 51 Franklin Street, Fifth Floor, Boston, MA  02110-1301
#

"""The ``kwlist.keyword`` module contains :class:`kwlist`, an ordered list of
``(key, value)`` pairs where keys may repeat. It's a lightweight stand-in for a
dict when insertion order and duplicate keys matter more than lookup speed,
e.g. for option lists.

>>> from kwlist import kwlist
>>> kw = kwlist([('a', 1), ('b', 2), ('a', 3)])
>>> kw.get('a')
1
>>> kw.get_values('a')
[1, 3]
>>> kw.put('a', 4)
kwlist([('a', 4), ('b', 2)])
>>> kw.delete_first('a')
kwlist([('b', 2), ('a', 3)])

A kwlist is immutable. Every operation that "changes" it returns a new
instance of the same class and leaves the receiver alone.

Lookups always resolve to the first matching entry. :meth:`kwlist.put`,
:meth:`kwlist.delete`, :meth:`kwlist.update` and friends make sure all
duplicate entries for the key are gone afterwards, while
:meth:`kwlist.get_values`, :meth:`kwlist.delete_first` and
:meth:`kwlist.pop_first` are there for code that cares about duplicates.
"""

from collections import Counter

from kwlist import const
from kwlist._base import Ok
from kwlist._base import NOT_FOUND
from kwlist._base import NOTSET
from kwlist.error import KeyNotFoundError
from kwlist.error import InvalidKeyError
from kwlist.error import InvalidEntryError


def _keyset(keys):
    keys = tuple(keys)
    try:
        return frozenset(keys)
    except TypeError:  # unhashable keys in a custom kwlist
        return keys


def _unpack_pair(retval):
    if not isinstance(retval, tuple) or len(retval) != 2:
        raise InvalidEntryError(retval,
                   "get_and_update callback must return a (get, update) pair, "
                   "not %s")
    return retval


def is_keyword(obj, key_types=None):
    """Returns True when ``obj`` is a list or tuple whose every element is a
    ``(key, value)`` tuple with a key that is an instance of ``key_types``.
    ``key_types`` defaults to the key types of ``obj`` when it's a
    :class:`kwlist`, and to ``const.DEFAULT_KEY_TYPES`` otherwise.

    >>> is_keyword([('a', 1), ('b', 2)])
    True
    >>> is_keyword([('a', 1), 'b'])
    False
    >>> is_keyword([])
    True
    """

    if not isinstance(obj, (list, tuple)):
        return False

    if key_types is None:
        if isinstance(obj, kwlist):
            key_types = obj.get_key_types()
        else:
            key_types = const.DEFAULT_KEY_TYPES

    for entry in obj:
        if not isinstance(entry, tuple) or len(entry) != 2:
            return False
        if not isinstance(entry[0], key_types):
            return False

    return True


class kwlist(tuple):
    """An immutable list of ``(key, value)`` tuples where keys may repeat.

    ``kwlist(iterable)`` keeps every pair it's given, duplicates included. Use
    :meth:`kwlist.new` to get one key per entry.

    Integer and slice subscripts index entries by position, any other
    subscript is a key lookup that raises :class:`KeyNotFoundError` on a miss.
    ``key in kw`` tests for the key, not for the entry.
    """

    __slots__ = ()

    KEY_TYPES = None
    """The key types instances of this class accept. None means
    ``const.DEFAULT_KEY_TYPES``."""

    def __new__(cls, iterable=()):
        if type(iterable) is cls:
            return iterable

        if isinstance(iterable, dict):
            iterable = iterable.items()

        return super(kwlist, cls).__new__(cls,
                                      [cls._check_entry(e) for e in iterable])

    @classmethod
    def _from_valid(cls, entries):
        """Skips validation, for entries that come from another instance."""

        return tuple.__new__(cls, entries)

    @classmethod
    def _coerce(cls, other):
        # instances of other subclasses may hold keys this class rejects
        if type(other) is cls:
            return other
        return cls(other)

    @classmethod
    def get_key_types(cls):
        if cls.KEY_TYPES is None:
            return const.DEFAULT_KEY_TYPES
        return cls.KEY_TYPES

    @classmethod
    def _check_key(cls, key):
        key_types = cls.get_key_types()
        if not isinstance(key, key_types):
            raise InvalidKeyError(key, key_types)
        return key

    @classmethod
    def _check_entry(cls, entry):
        if not isinstance(entry, tuple) or len(entry) != 2:
            raise InvalidEntryError(entry)

        cls._check_key(entry[0])

        if type(entry) is not tuple:
            entry = tuple(entry)

        return entry

    @classmethod
    def new(cls, source=None, transform=None):
        """Creates a kwlist with at most one entry per key. When a key repeats
        in ``source``, the last pair wins. The surviving entries come out
        newest first, just as if they were inserted one by one with
        :meth:`put`.

        When given, ``transform`` is called with every element of ``source``
        and must return the ``(key, value)`` pair to insert.

        >>> kwlist.new([('b', 1), ('a', 2)])
        kwlist([('a', 2), ('b', 1)])
        >>> kwlist.new(['a', 'b'], lambda x: (x, x.upper()))
        kwlist([('b', 'B'), ('a', 'A')])
        """

        if source is None:
            return cls._from_valid(())

        if isinstance(source, dict):
            source = source.items()

        if transform is None:
            entries = [cls._check_entry(e) for e in source]
        else:
            entries = [cls._check_entry(transform(e)) for e in source]

        seen = set()
        retval = []
        for k, v in reversed(entries):
            if k in seen:
                continue

            seen.add(k)
            retval.append((k, v))

        return cls._from_valid(retval)

    def _index(self, key):
        for i, (k, _) in enumerate(self):
            if k == key:
                return i
        return -1

    def __getitem__(self, key):
        if isinstance(key, int):
            return tuple.__getitem__(self, key)

        if isinstance(key, slice):
            return self._from_valid(tuple.__getitem__(self, key))

        return self.fetch_strict(key)

    def __contains__(self, key):
        for k, _ in self:
            if k == key:
                return True
        return False

    def __add__(self, other):
        if not isinstance(other, (list, tuple)):
            return NotImplemented

        return self._from_valid(tuple(self) + tuple(self._coerce(other)))

    def __radd__(self, other):
        if not isinstance(other, (list, tuple)):
            return NotImplemented

        return self._from_valid(tuple(self._coerce(other)) + tuple(self))

    def __repr__(self):
        return "%s(%r)" % (self.__class__.__name__, list(self))

    def size(self):
        return len(self)

    def to_list(self):
        return list(self)

    def items(self):
        return list(self)

    def keys(self):
        """Returns all keys, duplicates included, in order."""

        return [k for k, _ in self]

    def values(self):
        """Returns all values, in order."""

        return [v for _, v in self]

    #
    # Lookup
    #

    def get(self, key, default=None):
        """Returns the value of the first entry for ``key``, or ``default``
        when there is none."""

        self._check_key(key)

        for k, v in self:
            if k == key:
                return v

        return default

    def get_lazy(self, key, supplier):
        """Like :meth:`get`, but calls ``supplier()`` to produce the default
        only when ``key`` is missing. Useful when the default is expensive to
        build."""

        self._check_key(key)

        for k, v in self:
            if k == key:
                return v

        return supplier()

    def fetch(self, key):
        """Returns ``Ok(value)`` for the first entry for ``key``, or
        :data:`NOT_FOUND` when there is none.

        >>> kwlist([('a', 1)]).fetch('a')
        Ok(1)
        >>> kwlist([('a', 1)]).fetch('b')
        NOT_FOUND
        """

        self._check_key(key)

        for k, v in self:
            if k == key:
                return Ok(v)

        return NOT_FOUND

    def fetch_strict(self, key):
        """Returns the value of the first entry for ``key``. Raises
        :class:`KeyNotFoundError` when there is none."""

        self._check_key(key)

        for k, v in self:
            if k == key:
                return v

        raise KeyNotFoundError(key, self)

    def get_values(self, key):
        """Returns the values of all entries for ``key``, in order."""

        self._check_key(key)

        return [v for k, v in self if k == key]

    def has_key(self, key):
        self._check_key(key)

        return key in self

    def get_and_update(self, key, fun):
        """Gets the value for ``key`` and updates it, all in one pass.

        ``fun`` receives the current value (None when ``key`` is missing) and
        must return a ``(get, update)`` pair. The first entry for ``key`` gets
        the ``update`` value in place; other duplicates are left alone. When
        ``key`` is missing, ``(key, update)`` is appended.

        Returns ``(get, new_kwlist)``.

        >>> kwlist([('a', 1)]).get_and_update('a', lambda v: (v, v + 1))
        (1, kwlist([('a', 2)]))
        """

        self._check_key(key)

        entries = list(self)
        i = self._index(key)
        if i < 0:
            get, update = _unpack_pair(fun(None))
            entries.append((key, update))

        else:
            get, update = _unpack_pair(fun(entries[i][1]))
            entries[i] = (key, update)

        return get, self._from_valid(entries)

    #
    # Single-key mutation
    #

    def put(self, key, value):
        """Removes all entries for ``key`` and puts ``(key, value)`` in front.

        >>> kwlist([('a', 1), ('b', 2), ('a', 4)]).put('a', 3)
        kwlist([('a', 3), ('b', 2)])
        """

        self._check_key(key)

        retval = [(key, value)]
        retval.extend([e for e in self if e[0] != key])

        return self._from_valid(retval)

    def put_new(self, key, value):
        """Puts ``(key, value)`` in front unless ``key`` is already there."""

        self._check_key(key)

        if key in self:
            return self

        return self._from_valid(((key, value),) + tuple(self))

    def put_new_lazy(self, key, supplier):
        """Like :meth:`put_new`, but the value is produced by calling
        ``supplier()``, which only happens when ``key`` is missing."""

        self._check_key(key)

        if key in self:
            return self

        return self._from_valid(((key, supplier()),) + tuple(self))

    def delete(self, key, value=NOTSET):
        """Removes all entries for ``key``. When ``value`` is given, only the
        entries for ``key`` whose value equals ``value`` are removed.

        >>> kwlist([('a', 1), ('b', 2), ('a', 3)]).delete('a')
        kwlist([('b', 2)])
        >>> kwlist([('a', 1), ('b', 2), ('a', 3)]).delete('a', 3)
        kwlist([('a', 1), ('b', 2)])
        """

        self._check_key(key)

        if value is NOTSET:
            return self._from_valid([e for e in self if e[0] != key])

        return self._from_valid(
                      [e for e in self if e[0] != key or e[1] != value])

    def delete_first(self, key):
        """Removes the first entry for ``key`` only."""

        self._check_key(key)

        i = self._index(key)
        if i < 0:
            return self

        retval = list(self)
        del retval[i]

        return self._from_valid(retval)

    def _update_at(self, i, key, value):
        retval = list(self[:i])
        retval.append((key, value))
        retval.extend([e for e in self[i + 1:] if e[0] != key])
        return self._from_valid(retval)

    def update_strict(self, key, fun):
        """Replaces the value of the first entry for ``key`` with
        ``fun(old_value)`` and removes all other entries for ``key``. Raises
        :class:`KeyNotFoundError` when ``key`` is missing."""

        self._check_key(key)

        i = self._index(key)
        if i < 0:
            raise KeyNotFoundError(key, self)

        return self._update_at(i, key, fun(self[i][1]))

    def update(self, key, initial, fun):
        """Like :meth:`update_strict`, but appends ``(key, initial)`` instead
        of raising when ``key`` is missing. ``fun`` is not called in that
        case.

        >>> kwlist([('a', 1)]).update('b', 11, lambda v: v * 2)
        kwlist([('a', 1), ('b', 11)])
        """

        self._check_key(key)

        i = self._index(key)
        if i < 0:
            return self._from_valid(tuple(self) + ((key, initial),))

        return self._update_at(i, key, fun(self[i][1]))

    #
    # Bulk selection
    #

    def take(self, keys):
        """Returns the entries whose key is in ``keys``, in order, duplicates
        included."""

        keys = _keyset(keys)

        return self._from_valid([e for e in self if e[0] in keys])

    def drop(self, keys):
        """Returns the entries whose key is not in ``keys``, in order,
        duplicates included."""

        keys = _keyset(keys)

        return self._from_valid([e for e in self if not (e[0] in keys)])

    def split(self, keys):
        """Returns ``(take(keys), drop(keys))``, computed in a single pass.

        >>> kwlist([('a', 1), ('b', 2), ('c', 3), ('a', 5)]).split(['a', 'c'])
        (kwlist([('a', 1), ('c', 3), ('a', 5)]), kwlist([('b', 2)]))
        """

        keys = _keyset(keys)

        take = []
        drop = []
        for e in self:
            if e[0] in keys:
                take.append(e)
            else:
                drop.append(e)

        return self._from_valid(take), self._from_valid(drop)

    #
    # Extraction
    #

    def pop(self, key, default=None):
        """Returns the value of the first entry for ``key`` (or ``default``)
        along with a kwlist that has no entries for ``key``."""

        retval = self.fetch(key)
        if retval is NOT_FOUND:
            return default, self

        return retval.value, self.delete(key)

    def pop_lazy(self, key, supplier):
        """Like :meth:`pop`, but the default is produced by calling
        ``supplier()``, which only happens when ``key`` is missing."""

        retval = self.fetch(key)
        if retval is NOT_FOUND:
            return supplier(), self

        return retval.value, self.delete(key)

    def pop_first(self, key, default=None):
        """Returns the value of the first entry for ``key`` (or ``default``)
        along with a kwlist that lacks that entry only."""

        return self.get(key, default), self.delete_first(key)

    #
    # Merge & equality
    #

    def merge(self, other, fun=None):
        """Merges ``other`` into this kwlist.

        Without ``fun``, the result has all entries of ``other`` followed by
        the entries of this kwlist whose key is not in ``other``.

        With ``fun``, every entry of ``other`` is folded into this kwlist as
        if by :meth:`update`: an absent key is appended, a present one gets
        ``fun(key, left_value, right_value)`` with its duplicates removed.

        >>> kwlist([('a', 1), ('b', 2)]).merge([('a', 3), ('d', 4)])
        kwlist([('a', 3), ('d', 4), ('b', 2)])
        >>> kwlist([('a', 1), ('b', 2)]).merge([('a', 3), ('d', 4)],
        ...                                    lambda k, v1, v2: v1 + v2)
        kwlist([('a', 4), ('b', 2), ('d', 4)])
        """

        other = self._coerce(other)

        if fun is None:
            other_keys = _keyset(other.keys())
            retval = list(other)
            retval.extend([e for e in self if not (e[0] in other_keys)])
            return self._from_valid(retval)

        retval = self
        for k, v2 in other:
            i = retval._index(k)
            if i < 0:
                retval = retval._from_valid(tuple(retval) + ((k, v2),))
            else:
                v1 = retval[i][1]
                retval = retval._update_at(i, k, fun(k, v1, v2))

        return retval

    def equal(self, other):
        """Returns True when both sides hold the same entries, the same number
        of times, in any order.

        >>> kwlist([('a', 1), ('b', 2)]).equal([('b', 2), ('a', 1)])
        True
        >>> kwlist([('a', 1), ('a', 1)]).equal([('a', 1)])
        False
        """

        other = self._coerce(other)
        if len(self) != len(other):
            return False

        try:
            return Counter(self) == Counter(other)

        except TypeError:  # unhashable values
            remaining = list(other)
            for e in self:
                for i, o in enumerate(remaining):
                    if o == e:
                        del remaining[i]
                        break
                else:
                    return False

            return True


_TKWLIST_CACHE = {}


def Tkwlist(*key_types):
    """Returns a :class:`kwlist` subclass whose keys must be instances of the
    given types instead of ``const.DEFAULT_KEY_TYPES``. The same key types
    always give back the same class, which keeps instances picklable.

    >>> IntKw = Tkwlist(int)
    >>> IntKw([(1, 'a')]).get(1)
    'a'
    """

    if len(key_types) == 0:
        raise TypeError("At least one key type is required")

    for t in key_types:
        if not isinstance(t, type):
            raise TypeError("%s is not a type" % repr(t))

    key_types = tuple(key_types)

    retval = _TKWLIST_CACHE.get(key_types, None)
    if retval is None:
        retval = _TKWLIST_CACHE[key_types] = type('kwlist', (kwlist,), {
            '__slots__': (),
            'KEY_TYPES': key_types,
            '__reduce__': _tkwlist_reduce,
        })

    return retval


def _tkwlist_reduce(self):
    return _tkwlist_restore, (self.KEY_TYPES, tuple(self))


def _tkwlist_restore(key_types, entries):
    return Tkwlist(*key_types)(entries)
