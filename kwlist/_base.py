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

"""Result markers shared by the container operations."""

from collections import namedtuple


class Ok(namedtuple('Ok', 'value')):
    """The hit outcome of :meth:`kwlist.keyword.kwlist.fetch`. The found value
    is in the ``value`` attribute."""

    __slots__ = ()

    def __repr__(self):
        return "Ok(%r)" % (self.value,)


class NotFound(object):
    """The miss outcome of :meth:`kwlist.keyword.kwlist.fetch`. There is only
    one instance of this class, :data:`NOT_FOUND`, and it is falsy."""

    __instance = None

    def __new__(cls):
        if cls.__instance is None:
            cls.__instance = super(NotFound, cls).__new__(cls)
        return cls.__instance

    def __bool__(self):
        return False

    def __repr__(self):
        return 'NOT_FOUND'

    def __reduce__(self):
        return (NotFound, ())


NOT_FOUND = NotFound()


class _NotSet(object):
    def __repr__(self):
        return '<not set>'


NOTSET = _NotSet()
"""Marks an optional argument that was not passed, for when None is a valid
value."""
