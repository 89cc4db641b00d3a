#!/usr/bin/env python
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

import unittest
import warnings

import pytest

from kwlist import kwlist
from kwlist import const
from kwlist.error import Fault
from kwlist.error import KeyNotFoundError
from kwlist.error import InvalidKeyError
from kwlist.error import InvalidEntryError


class TestFault(unittest.TestCase):
    def test_registered(self):
        assert KeyNotFoundError in Fault.REGISTERED['Client.KeyNotFound']
        assert InvalidKeyError in Fault.REGISTERED['Client.InvalidKey']
        assert InvalidEntryError in Fault.REGISTERED['Client.InvalidEntry']

    def test_duplicate_code_warns(self):
        with warnings.catch_warnings(record=True) as w:
            warnings.simplefilter('always')

            class SomeError(Fault):
                CODE = 'Client.TestDuplicateCode'

            class SomeOtherError(Fault):
                CODE = 'Client.TestDuplicateCode'

        assert len(w) == 1
        assert 'Client.TestDuplicateCode' in str(w[0].message)

    def test_duplicate_code_no_warn(self):
        const.WARN_ON_DUPLICATE_FAULTCODE = False
        try:
            with warnings.catch_warnings(record=True) as w:
                warnings.simplefilter('always')

                class SomeError(Fault):
                    CODE = 'Client.TestSilentDuplicateCode'

                class SomeOtherError(Fault):
                    CODE = 'Client.TestSilentDuplicateCode'

            assert len(w) == 0

        finally:
            const.WARN_ON_DUPLICATE_FAULTCODE = True

    def test_repr(self):
        f = Fault('Server', 'oops')
        assert repr(f) == "Fault(Server: 'oops')"
        assert str(f) == repr(f)

        f = Fault('Client.Something', 'oops', detail={'a': 1})
        assert repr(f) == "Fault(Client.Something: 'oops' detail: {'a': 1})"

    def test_default_faultstring(self):
        assert Fault().faultstring == 'Fault'

    def test_to_dict(self):
        assert Fault('Server', 'oops').to_dict() == {
            'faultcode': 'Server',
            'faultstring': 'oops',
        }

        assert Fault('Server', 'oops', {'a': 1}).to_dict()['detail'] == {'a': 1}


class TestKeyNotFound(unittest.TestCase):
    def test_attributes(self):
        kw = kwlist([('a', 1)])
        e = KeyNotFoundError('b', kw)

        assert e.key == 'b'
        assert e.term is kw
        assert e.faultcode == 'Client.KeyNotFound'
        assert e.faultstring == "key 'b' not found in: kwlist([('a', 1)])"
        assert e.detail == {'key': 'b'}

    def test_is_key_error(self):
        with pytest.raises(KeyError):
            kwlist().fetch_strict('a')

        try:
            kwlist().update_strict('a', lambda v: v)
        except LookupError as e:
            assert e.key == 'a'
        else:
            raise Exception("must fail")

    def test_large_term_is_truncated(self):
        kw = kwlist([('k%d' % i, i) for i in range(1000)])
        e = KeyNotFoundError('b', kw)

        assert len(e.faultstring) < 500
        assert '(...)' in e.faultstring


class TestInvalidInput(unittest.TestCase):
    def test_invalid_key(self):
        e = InvalidKeyError(1, (str,))
        assert e.key == 1
        assert e.key_types == (str,)
        assert e.faultstring == "Key 1 is not an instance of any of str."
        assert isinstance(e, TypeError)

    def test_invalid_entry(self):
        e = InvalidEntryError('a')
        assert e.entry == 'a'
        assert e.faultstring == "'a' is not a (key, value) tuple."
        assert isinstance(e, ValueError)

    def test_invalid_entry_message_without_placeholder(self):
        e = InvalidEntryError('a', "Bad entry.")
        assert e.faultstring == "Bad entry."


if __name__ == '__main__':
    unittest.main()
