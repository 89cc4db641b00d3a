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

"""Logging utilites."""

import logging
logger = logging.getLogger(__name__)

from kwlist import const


def log_repr(obj, tags=None):
    """Use this function if you want to put a possibly large value into logs
    or exception messages. It will:

        * Limit size of strings to ``const.MAX_STRING_FIELD_LENGTH``
        * Limit size of lists, tuples and dicts to
          ``const.MAX_ARRAY_ELEMENT_NUM`` elements
        * Not recurse into a container it is already inside of
    """

    if tags is None:
        tags = set()

    if obj is None:
        return 'None'

    if isinstance(obj, str):
        if len(obj) > const.MAX_STRING_FIELD_LENGTH:
            return '%r(...)' % obj[:const.MAX_STRING_FIELD_LENGTH]
        return repr(obj)

    if not isinstance(obj, (list, tuple, dict)):
        return repr(obj)

    if id(obj) in tags:
        return "%s(...)" % obj.__class__.__name__

    tags.add(id(obj))

    retval = []
    if isinstance(obj, dict):
        for i, (k, v) in enumerate(obj.items()):
            if i >= const.MAX_ARRAY_ELEMENT_NUM:
                retval.append("(...)")
                break

            retval.append('%s: %s' % (log_repr(k, tags), log_repr(v, tags)))

    else:
        for i, v in enumerate(obj):
            if i >= const.MAX_ARRAY_ELEMENT_NUM:
                retval.append("(...)")
                break

            retval.append(log_repr(v, tags))

    tags.discard(id(obj))

    cls = obj.__class__
    if cls is dict:
        return "{%s}" % ', '.join(retval)

    if cls is list:
        return "[%s]" % ', '.join(retval)

    if cls is tuple:
        if len(retval) == 1:
            return "(%s,)" % retval[0]
        return "(%s)" % ', '.join(retval)

    # subclasses, kwlist included
    return "%s([%s])" % (cls.__name__, ', '.join(retval))


def log_faults(fault):
    """Logs server faults with their traceback and client faults at debug
    level. Meant to be called from an ``except`` block.
    """

    if fault.faultcode.startswith('Server'):
        logger.exception(fault)

    else:
        logger.debug("%r", fault)
