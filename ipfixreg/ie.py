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
The information model populated by generated registry modules.

Generated modules register each IANA Information Element into
:data:`builtin`, keyed by (private enterprise number, element number);
IANA registered IEs have enterprise number 0:

>>> import ipfixreg.ie
>>> from ipfixreg.types import FieldTypes
>>> ipfixreg.ie.clear_infomodel()
>>> ipfixreg.ie.builtin[(0, 1)] = ipfixreg.ie.InformationElement("octetDeltaCount", 0, 1, FieldTypes["unsigned64"])
>>> str(ipfixreg.ie.for_key(0, 1))
'octetDeltaCount(0/1)<unsigned64>'
>>> ipfixreg.ie.for_name("octetDeltaCount").num
1
>>> ipfixreg.ie.clear_infomodel()

"""
from functools import total_ordering

# Information element registry, (pen, num) -> InformationElement
builtin = {}

@total_ordering
class InformationElement:
    """
    An IPFIX Information Element (IE). This is essentially a four-tuple of
    name, element number (num), a private enterprise number (pen; 0 if it
    is an IANA registered IE), and a type from :data:`ipfixreg.types.FieldTypes`.

    The string representation of an InformationElement is its IESpec,
    without the size.

    """

    def __init__(self, name, pen, num, ietype):
        if name:
            self.name = name
        else:
            self.name = "_ipfix_%u_%u" % (pen, num)

        self.pen = pen
        self.num = num
        self.type = ietype

    def __eq__(self, other):
        return ((self.pen, self.num) == (other.pen, other.num))

    def __lt__(self, other):
        return ((self.pen, self.num) < (other.pen, other.num))

    def __repr__(self):
        return "InformationElement(%s, %s, %s, %s)" % (repr(self.name),
               repr(self.pen), repr(self.num), repr(self.type))

    def __str__(self):
        return "%s(%u/%u)%s" % (self.name, self.pen, self.num, str(self.type))

    def __hash__(self):
        return (self.num << 16) ^ self.pen

def for_key(pen, num):
    """
    Get a registered IE by private enterprise number and element number.

    :raises: KeyError

    """
    return builtin[(pen, num)]

def for_name(name):
    """
    Get a registered IE by name.

    :raises: KeyError

    """
    for ie in builtin.values():
        if ie.name == name:
            return ie
    raise KeyError(name)

def clear_infomodel():
    """Reset the registry of known Information Elements."""
    builtin.clear()

def dump_infomodel():
    return sorted(builtin.values())
