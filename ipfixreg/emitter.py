#
# python-ipfix (c) 2013 Brian Trammell.
#
# Many thanks to the mPlane consortium (http://www.ict-mplane.eu) for
# its material support of this effort.
# 
# This program is free software: you can redistribute it and/or modify it under
# the terms of the GNU Lesser General Public License as published by the Free
# Software Foundation, either version 3 of the License, or (at your option) any
# later version.
#
# This program is distributed in the hope that it will be useful, but WITHOUT
# ANY WARRANTY; without even the implied warranty of MERCHANTABILITY or FITNESS
# FOR A PARTICULAR PURPOSE.  See the GNU Lesser General Public License for more
# details.
#
# You should have received a copy of the GNU General Public License along with
# this program.  If not, see <http://www.gnu.org/licenses/>.
#


"""
Emits a Python module registering the IANA Information Elements into
:data:`ipfixreg.ie.builtin`, together with their :rfc:`5103` reverse
counterparts.

Records missing a name, element number or type are left out:

>>> from ipfixreg.registry import RegistryRecord
>>> registration_entries([RegistryRecord(" flowStartSeconds ", " 150 ", "dateTimeSeconds"),
...                       RegistryRecord("brokenElement", "151", "  ")])
[(150, 'flowStartSeconds', 'dateTimeSeconds')]

The emitted module has a header naming the generation time and the
registry it was generated from, one registration statement per element,
and a fixed block deriving the reverse elements when it is imported.

"""
import logging
import re
from datetime import datetime

from . import registry
from . import reverse

log = logging.getLogger(__name__)

_elementid_re = re.compile("^[0-9]+$")

_header = """\
# Autogenerated %(date)s
#
# IANA Assigned (RFC 5102), see %(url)s
#
# DO NOT EDIT. Regenerate with ipfix-gen-registry.

from ipfixreg.ie import builtin, InformationElement
from ipfixreg.types import FieldTypes
from ipfixreg.reverse import add_reverse_entries

"""

_statement = "builtin[(0, %u)] = InformationElement(%s, 0, %u, FieldTypes[%s])\n"

_reverse_block = """
# This implements RFC 5103 Bidirectional Flow Export Using IP Flow
# Information Export (IPFIX) supporting Reverse Information Elements,
# registered under Private Enterprise Number %u.
add_reverse_entries(builtin)
""" % reverse.REVERSE_PEN

def registration_entry(record):
    """
    Convert a registry record to a (num, name, typename) triple
    of trimmed values.

    :returns: the triple, or None if the record is incomplete

    """
    name = record.name.strip()
    num = record.element_id.strip()
    typename = record.data_type.strip()

    if not name or not num or not typename:
        return None
    if not _elementid_re.match(num):
        return None

    return (int(num), name, typename)

def registration_entries(records):
    """
    Return a (num, name, typename) triple for every complete record,
    in record order.

    """
    entries = []
    for record in records:
        entry = registration_entry(record)
        if entry:
            entries.append(entry)
    return entries

def timestamp(now=None):
    """Format a datetime, by default the current local time, for the header"""
    if now is None:
        now = datetime.now().astimezone()
    # Unix date(1) style, day of the month padded with a space
    return "%s %2u %s" % (now.strftime("%a %b"), now.day,
                          now.strftime("%H:%M:%S %Z %Y"))

def _render(entries, now):
    out = [_header % { "date": timestamp(now),
                       "url": registry.IANA_IPFIX_URL }]
    for (num, name, typename) in entries:
        out.append(_statement % (num, repr(name), num, repr(typename)))
    out.append(_reverse_block)

    return "".join(out)

def render_source(records, now=None):
    """
    Render the registry module for a sequence of registry records.

    :param records: iterable of :class:`ipfixreg.registry.RegistryRecord`
    :param now: datetime to stamp the header with; defaults to the
                current local time
    :returns: the module source as a string

    """
    return _render(registration_entries(records), now)

def write_source(filename, records, now=None):
    """
    Write the registry module for a sequence of registry records to a file,
    replacing its contents.

    :returns: the number of elements registered
    :raises: OSError

    """
    records = list(records)
    entries = registration_entries(records)

    log.info("generating %s", filename)
    with open(filename, "w", encoding="utf-8") as f:
        f.write(_render(entries, now))

    log.info("registered %u elements, skipped %u incomplete records",
             len(entries), len(records) - len(entries))
    return len(entries)
