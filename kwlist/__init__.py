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

__version__ = '0.1.0'

from kwlist._base import Ok
from kwlist._base import NotFound
from kwlist._base import NOT_FOUND

from kwlist.error import Fault
from kwlist.error import KeyNotFoundError
from kwlist.error import InvalidKeyError
from kwlist.error import InvalidEntryError

from kwlist.keyword import kwlist
from kwlist.keyword import Tkwlist
from kwlist.keyword import is_keyword


def _vercheck():
    import sys
    if not hasattr(sys, "version_info") or sys.version_info < (3, 6):
        raise RuntimeError("kwlist requires Python 3.6 or later. Trust us.")
_vercheck()
