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

"""The ``kwlist.const`` package contains the tunables used in various parts of
kwlist. They are read at call time, so assigning to them after import takes
effect immediately."""


DEFAULT_KEY_TYPES = (str,)
"""Key types a :class:`kwlist.keyword.kwlist` accepts unless its class says
otherwise. See :func:`kwlist.keyword.Tkwlist`."""

MAX_STRING_FIELD_LENGTH = 64
"""Maximum length of a string field for :func:`kwlist.util.log_repr`"""

MAX_ARRAY_ELEMENT_NUM = 10
"""Maximum number of sequence elements for :func:`kwlist.util.log_repr`"""

WARN_ON_DUPLICATE_FAULTCODE = True
"""Warn about duplicate faultcodes in all Fault subclasses globally. Only works
when CODE class attribute is set for every Fault subclass."""

XML_ROOT_TAG = 'kwlist'
"""Tag name of the root element produced by
:func:`kwlist.util.etreeconv.root_kwlist_to_etree`."""
