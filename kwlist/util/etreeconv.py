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

"""This module contains the utility methods that convert an ElementTree
hierarchy to keyword lists and vice versa.

The children of an xml element are an ordered list of tags that may repeat,
so a kwlist maps to them without losing duplicates or order:

>>> from kwlist import kwlist
>>> from kwlist.util.etreeconv import kwlist_to_xml_string
>>> kwlist_to_xml_string(kwlist([('a', '1'), ('b', None), ('a', '2')]))
'<kwlist><a>1</a><b/><a>2</a></kwlist>'
"""

import logging
logger = logging.getLogger(__name__)

from lxml import etree

from kwlist import const
from kwlist.keyword import kwlist
from kwlist.keyword import is_keyword


def _is_nested(value):
    return isinstance(value, dict) or (isinstance(value, (list, tuple))
                                                 and is_keyword(value))


def root_kwlist_to_etree(kw, tag=None):
    """Converts a keyword list to an xml hierarchy under a root element named
    ``tag``, ``const.XML_ROOT_TAG`` by default. See :func:`kwlist_to_etree`
    for how values are converted."""

    if tag is None:
        tag = const.XML_ROOT_TAG

    retval = etree.Element(tag)
    kwlist_to_etree(kw, retval)

    return retval


def kwlist_to_etree(kw, parent):
    """Appends one child to ``parent`` per entry of ``kw``, in order. The
    values can be:

        * None, which produces an empty element. An empty string and an empty
          keyword list produce one too, so they are read back as None
        * str or bytes, which become the element text
        * a dict, kwlist or any other keyword list, which are converted
          recursively
        * anything else, whose ``str()`` becomes the element text
    """

    if isinstance(kw, dict):
        kw = kw.items()

    for k, v in kw:
        if v is None:
            etree.SubElement(parent, k)

        elif isinstance(v, str):
            etree.SubElement(parent, k).text = v

        elif isinstance(v, bytes):
            etree.SubElement(parent, k).text = v.decode('utf8')

        elif _is_nested(v):
            child = etree.SubElement(parent, k)
            kwlist_to_etree(v, child)

        else:
            etree.SubElement(parent, k).text = str(v)

    return parent


def etree_to_kwlist(element, cls=kwlist):
    """Takes an xml element and returns its children as an instance of
    ``cls``. Children with child elements of their own become nested keyword
    lists, the others become their text, or None when they have none. Tag
    namespaces, xml attributes, comments and processing instructions are
    ignored."""

    retval = []
    for elt in element:
        if not isinstance(elt.tag, str):
            continue

        tag = etree.QName(elt).localname

        if any(isinstance(c.tag, str) for c in elt):
            retval.append((tag, etree_to_kwlist(elt, cls)))

        else:
            retval.append((tag, elt.text))

    return cls(retval)


def kwlist_to_xml_string(kw, tag=None, pretty_print=False):
    """Serializes ``kw`` to an xml document string. See
    :func:`root_kwlist_to_etree`."""

    elt = root_kwlist_to_etree(kw, tag)

    return etree.tostring(elt, encoding='unicode', pretty_print=pretty_print)


def kwlist_from_xml_string(s, cls=kwlist):
    """Parses an xml document and returns the children of its root element as
    an instance of ``cls``. See :func:`etree_to_kwlist`."""

    parser = etree.XMLParser(resolve_entities=False, no_network=True,
                                                        remove_blank_text=True)

    if isinstance(s, str):
        s = s.encode('utf8')

    root = etree.fromstring(s, parser)
    retval = etree_to_kwlist(root, cls)

    logger.debug("Parsed %d entries from <%s>", len(retval),
                                                   etree.QName(root).localname)

    return retval
