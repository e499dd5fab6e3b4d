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
Reverse Information Elements for bidirectional flow export, as in
:rfc:`5103`.

Each IANA registered IE that describes a directional attribute of a flow
has a reverse counterpart, registered under the reverse private enterprise
number with the same element number:

>>> from ipfixreg.ie import InformationElement
>>> from ipfixreg.types import FieldTypes
>>> e = InformationElement("flowStartSeconds", 0, 150, FieldTypes["dateTimeSeconds"])
>>> str(reverse_ie(e))
'reverseFlowStartSeconds(29305/150)<dateTimeSeconds>'

IEs identifying the message or flow itself, process configuration and
statistics, and padding have no reverse counterpart:

>>> reversibility(210)
'padding'
>>> reversibility(150)
'reversible'

"""
from .ie import InformationElement

# Reverse Information Element Private Enterprise Number
REVERSE_PEN = 29305

REVERSIBLE = "reversible"
INTERNAL = "internal"
PROCESS_CONFIGURATION = "process-configuration"
PROCESS_STATISTICS = "process-statistics"
PADDING = "padding"

NON_REVERSIBLE = {}

# flowId, templateId, observationDomainId, commonPropertiesId
for _num in (148, 145, 149, 137):
    NON_REVERSIBLE[_num] = INTERNAL

# RFC 5102 section 5.2
for _num in (130, 131, 217, 211, 212, 213, 214, 215, 216, 173):
    NON_REVERSIBLE[_num] = PROCESS_CONFIGURATION

# RFC 5102 section 5.3
for _num in (41, 40, 42, 163, 164, 165, 166, 167, 168):
    NON_REVERSIBLE[_num] = PROCESS_STATISTICS

# paddingOctets
NON_REVERSIBLE[210] = PADDING

del _num

def reversibility(num):
    """
    Classify an IANA element number for reverse IE derivation.

    :param num: element number of an IE with enterprise number 0
    :returns: one of INTERNAL, PROCESS_CONFIGURATION, PROCESS_STATISTICS,
              PADDING, or REVERSIBLE

    """
    return NON_REVERSIBLE.get(num, REVERSIBLE)

def is_reversible(pen, num):
    """True if the IE (pen, num) gets a reverse counterpart"""
    return pen == 0 and reversibility(num) == REVERSIBLE

def reverse_name(name):
    """
    Derive the name of a reverse IE from the name of its forward IE.

    >>> reverse_name("octetDeltaCount")
    'reverseOctetDeltaCount'

    """
    return "reverse" + name[0].upper() + name[1:]

def reverse_ie(ie):
    """Return the reverse counterpart of an IANA registered IE"""
    return InformationElement(reverse_name(ie.name), REVERSE_PEN, ie.num, ie.type)

def reverse_entries(table):
    """
    Derive the reverse IEs for an information model table.

    :param table: dict mapping (pen, num) to InformationElement;
                  not modified
    :returns: a new dict mapping (REVERSE_PEN, num) to the reverse IE
              for every reversible IANA IE in table

    """
    out = {}
    for (pen, num), ie in table.items():
        if is_reversible(pen, num):
            out[(REVERSE_PEN, num)] = reverse_ie(ie)
    return out

def add_reverse_entries(table):
    """
    Add the reverse IEs for every reversible IANA IE in table to table.

    :returns: the number of reverse IEs added

    """
    rev = reverse_entries(table)
    table.update(rev)
    return len(rev)
