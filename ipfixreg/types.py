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
Table of IPFIX abstract data types (ADT), as referenced by the dataType
column of the IANA Information Element registry.

Generated registry modules look types up by name in :data:`FieldTypes`:

>>> import ipfixreg.types
>>> ipfixreg.types.FieldTypes["unsigned32"]
ipfixreg.types.for_name('unsigned32')
>>> ipfixreg.types.FieldTypes["unsigned32"].length
4

Variable-length types have length 65535:

>>> ipfixreg.types.FieldTypes["string"].length
65535

A name the table does not know resolves to octetArray, so that a registry
introducing a new type still produces an importable module:

>>> str(ipfixreg.types.FieldTypes["unsigned256"])
'<octetArray>'

Use :func:`for_name` where an unknown name should be an error instead.

"""
from functools import total_ordering

VARLEN = 65535

class IpfixTypeError(ValueError):
    """Raised when looking up a type that does not exist"""
    pass

@total_ordering
class IpfixType:
    """
    An IPFIX abstract data type: its registry name, its type number
    as assigned in the IANA IPFIX Information Element Data Types
    registry, and its natural encoded length.

    """
    def __init__(self, name, num, length):
        self.name = name
        self.num = num
        self.length = length

    def __eq__(self, other):
        return (self.num, self.length) == (other.num, other.length)

    def __lt__(self, other):
        return (self.num, self.length) < (other.num, other.length)

    def __hash__(self):
        return hash((self.num, self.length))

    def __str__(self):
        return "<%s>" % self.name

    def __repr__(self):
        return "ipfixreg.types.for_name(%s)" % repr(self.name)

class _TypeTable(dict):
    """Type name table that defaults unknown names to octetArray"""
    def __missing__(self, name):
        return self["octetArray"]

# builtin type registry
_Types = [
    IpfixType("octetArray", 0, VARLEN),
    IpfixType("unsigned8",  1, 1),
    IpfixType("unsigned16", 2, 2),
    IpfixType("unsigned32", 3, 4),
    IpfixType("unsigned64", 4, 8),
    IpfixType("signed8",    5, 1),
    IpfixType("signed16",   6, 2),
    IpfixType("signed32",   7, 4),
    IpfixType("signed64",   8, 8),
    IpfixType("float32",    9, 4),
    IpfixType("float64",    10, 8),
    IpfixType("boolean",    11, 1),
    IpfixType("macAddress", 12, 6),
    IpfixType("string",     13, VARLEN),
    IpfixType("dateTimeSeconds", 14, 4),
    IpfixType("dateTimeMilliseconds", 15, 8),
    IpfixType("dateTimeMicroseconds", 16, 8),
    IpfixType("dateTimeNanoseconds", 17, 8),
    IpfixType("ipv4Address", 18, 4),
    IpfixType("ipv6Address", 19, 16),
    IpfixType("basicList", 20, VARLEN),
    IpfixType("subTemplateList", 21, VARLEN),
    IpfixType("subTemplateMultiList", 22, VARLEN)
]

_TypeForName = { ietype.name: ietype for ietype in _Types }
_TypeForNum = { ietype.num: ietype for ietype in _Types }

FieldTypes = _TypeTable(_TypeForName)

def for_name(name):
    """
    Return an IPFIX type for a given type name
    
    :param name: the name of the type to look up
    :returns: IpfixType -- type instance for that name
    :raises: IpfixTypeError
    
    """
    try: 
        return _TypeForName[name]
    except KeyError:
        raise IpfixTypeError("no such type "+name)

def for_num(num):
    """
    Return an IPFIX type for a given type number

    :param num: the IANA type number to look up
    :returns: IpfixType -- type instance for that number
    :raises: IpfixTypeError

    """
    try:
        return _TypeForNum[num]
    except KeyError:
        raise IpfixTypeError("no such type number "+str(num))
