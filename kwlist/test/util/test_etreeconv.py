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

from lxml import etree

from kwlist import kwlist, Tkwlist, InvalidKeyError
from kwlist.util.etreeconv import root_kwlist_to_etree
from kwlist.util.etreeconv import kwlist_to_etree
from kwlist.util.etreeconv import etree_to_kwlist
from kwlist.util.etreeconv import kwlist_to_xml_string
from kwlist.util.etreeconv import kwlist_from_xml_string


class TestKwlistToEtree(unittest.TestCase):
    def test_duplicates_and_order(self):
        kw = kwlist([('a', '1'), ('b', None), ('a', '2')])
        elt = root_kwlist_to_etree(kw)

        assert elt.tag == 'kwlist'
        assert [e.tag for e in elt] == ['a', 'b', 'a']
        assert [e.text for e in elt] == ['1', None, '2']

    def test_tag(self):
        elt = root_kwlist_to_etree(kwlist(), 'options')
        assert elt.tag == 'options'
        assert len(elt) == 0

    def test_values(self):
        kw = kwlist([
            ('i', 5),
            ('b', b'bytes'),
            ('f', True),
            ('nested', kwlist([('x', 'y'), ('x', 'z')])),
            ('d', {'k': 'v'}),
            ('l', [('p', 'q')]),
        ])

        s = kwlist_to_xml_string(kw)
        assert s == '<kwlist><i>5</i><b>bytes</b><f>True</f>' \
                    '<nested><x>y</x><x>z</x></nested><d><k>v</k></d>' \
                    '<l><p>q</p></l></kwlist>'

    def test_into_parent(self):
        parent = etree.Element('root')
        retval = kwlist_to_etree([('a', 'b')], parent)

        assert retval is parent
        assert etree.tostring(parent) == b'<root><a>b</a></root>'


class TestEtreeToKwlist(unittest.TestCase):
    def test_parse(self):
        kw = kwlist_from_xml_string(
                '<r><a>1</a><b/><a>2</a><c><d>3</d><d>4</d></c></r>')

        assert kw == kwlist([
            ('a', '1'),
            ('b', None),
            ('a', '2'),
            ('c', kwlist([('d', '3'), ('d', '4')])),
        ])

    def test_namespaces_comments(self):
        kw = kwlist_from_xml_string(
             b'<r xmlns="urn:x"><!-- skip --><a>1</a><?pi skip?><b>2</b></r>')

        assert kw.to_list() == [('a', '1'), ('b', '2')]

    def test_blank_text(self):
        kw = kwlist_from_xml_string("""
            <r>
                <a>
                    <b>1</b>
                </a>
            </r>
        """)

        assert kw == kwlist([('a', kwlist([('b', '1')]))])

    def test_round_trip(self):
        kw = kwlist([('a', '1'), ('b', kwlist([('c', '2'), ('c', None)])),
                                                                  ('a', '3')])
        assert kwlist_from_xml_string(kwlist_to_xml_string(kw)) == kw

    def test_empty_values_read_back_as_none(self):
        kw = kwlist([('a', ''), ('b', kwlist()), ('c', None)])
        s = kwlist_to_xml_string(kw)

        assert kwlist_from_xml_string(s).to_list() == \
                                         [('a', None), ('b', None), ('c', None)]

    def test_custom_class(self):
        Kw = Tkwlist(str, int)
        kw = etree_to_kwlist(etree.fromstring('<r><a>1</a></r>'), Kw)

        assert type(kw) is Kw

    def test_cls_validates(self):
        IntKw = Tkwlist(int)

        try:
            etree_to_kwlist(etree.fromstring('<r><a>1</a></r>'), IntKw)
        except InvalidKeyError:
            pass
        else:
            raise Exception("must fail")


if __name__ == '__main__':
    unittest.main()
