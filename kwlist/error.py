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


"""The ``kwlist.error`` module contains the exceptions that the container
operations raise.

Only :meth:`kwlist.keyword.kwlist.fetch_strict` and
:meth:`kwlist.keyword.kwlist.update_strict` treat a missing key as an error.
:class:`InvalidKeyError` and :class:`InvalidEntryError` signal a caller
passing data that is not a keyword list.
"""

from warnings import warn
from collections import defaultdict

from kwlist import const
from kwlist.util.logtools import log_repr


class FaultMeta(type):
    def __init__(self, cls_name, cls_bases, cls_dict):
        super(FaultMeta, self).__init__(cls_name, cls_bases, cls_dict)

        code = cls_dict.get('CODE', None)

        if code is not None:
            target = Fault.REGISTERED[code]
            target.add(self)
            if const.WARN_ON_DUPLICATE_FAULTCODE and len(target) > 1:
                warn("Duplicate faultcode {} detected for classes {}"
                                                          .format(code, target))


class Fault(Exception, metaclass=FaultMeta):
    """Use this class as a base for all kwlist exceptions.

    :param faultcode: It's a dot-delimited string whose first fragment is
        either 'Client' or 'Server'. 'Client' indicates that the caller passed
        something wrong, 'Server' indicates a bug in kwlist itself.
    :param faultstring: It's the human-readable explanation of the exception.
    :param detail: Additional information dict.
    """

    REGISTERED = defaultdict(set)
    """Class-level variable that holds a multimap of all fault codes and the
    associated classes."""

    CODE = None

    def __init__(self, faultcode='Server', faultstring="", detail=None):
        super(Fault, self).__init__(faultstring)

        self.faultcode = faultcode
        self.faultstring = faultstring or self.__class__.__name__
        self.detail = detail

    def __str__(self):
        return repr(self)

    def __repr__(self):
        if self.detail is None:
            return "%s(%s: %r)" % (self.__class__.__name__,
                                               self.faultcode, self.faultstring)

        return "%s(%s: %r detail: %r)" % (self.__class__.__name__,
                                  self.faultcode, self.faultstring, self.detail)

    def to_dict(self):
        retval = {
            "faultcode": self.faultcode,
            "faultstring": self.faultstring,
        }

        if self.detail is not None:
            retval["detail"] = self.detail

        return retval


class KeyNotFoundError(Fault, KeyError):
    """Raised when a key that must be present is missing. Carries the missing
    ``key`` and the whole keyword list as ``term``."""

    CODE = 'Client.KeyNotFound'

    def __init__(self, key, term, faultstring="key %r not found in: %s"):
        self.key = key
        self.term = term

        super(KeyNotFoundError, self).__init__(self.CODE,
                       faultstring % (key, log_repr(term)), detail={'key': key})


class InvalidKeyError(Fault, TypeError):
    """Raised when a key is not an instance of the accepted key types."""

    CODE = 'Client.InvalidKey'

    def __init__(self, key, key_types,
                    faultstring="Key %r is not an instance of any of %s."):
        self.key = key
        self.key_types = key_types

        names = ', '.join([t.__name__ for t in key_types])
        super(InvalidKeyError, self).__init__(self.CODE,
                                                   faultstring % (key, names))


class InvalidEntryError(Fault, ValueError):
    """Raised when something that is supposed to be a ``(key, value)`` pair is
    not one."""

    CODE = 'Client.InvalidEntry'

    def __init__(self, entry, faultstring="%s is not a (key, value) tuple."):
        self.entry = entry

        try:
            msg = faultstring % (log_repr(entry),)
        except TypeError:
            msg = faultstring

        super(InvalidEntryError, self).__init__(self.CODE, msg)
