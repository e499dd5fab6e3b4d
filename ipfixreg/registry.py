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
Interface to the IANA IPFIX Information Element registry.

The registry is an XML document whose root ``registry`` element contains
a set of sub-registries, each a ``registry`` element with an ``id``
attribute. The Information Elements are the ``record`` children of the
sub-registry with id ``ipfix-information-elements``:

>>> import io
>>> doc = b'''<registry id="ipfix">
...   <registry id="ipfix-information-elements">
...     <record><name>octetDeltaCount</name><dataType>unsigned64</dataType>
...             <elementId>1</elementId></record>
...   </registry>
... </registry>'''
>>> parse_registry(io.BytesIO(doc))
[RegistryRecord('octetDeltaCount', '1', 'unsigned64')]

Use :func:`fetch_registry` to get the current registry from IANA.

"""
import http.client
import logging
import urllib.request as urlreq
import xml.etree.ElementTree as etree

IANA_IPFIX_URL = "http://www.iana.org/assignments/ipfix/ipfix.xml"
IE_REGISTRY_ID = "ipfix-information-elements"

log = logging.getLogger(__name__)

class RegistryError(Exception):
    """Base class for failures to get the IE registry"""
    pass

class RegistryFetchError(RegistryError):
    """Raised when the registry document cannot be retrieved"""
    pass

class RegistryFormatError(RegistryError):
    """Raised when the registry document is not a well-formed registry"""
    pass

class RegistryNotFoundError(RegistryError):
    """Raised when the registry document has no IE sub-registry"""
    pass

class RegistryRecord:
    """
    One record of the IE sub-registry. Fields hold the text of the
    record's name, elementId and dataType children as found, without
    trimming; a missing child yields an empty string.

    """
    def __init__(self, name, element_id, data_type):
        self.name = name
        self.element_id = element_id
        self.data_type = data_type

    def __eq__(self, other):
        return ((self.name, self.element_id, self.data_type) ==
                (other.name, other.element_id, other.data_type))

    def __repr__(self):
        return "RegistryRecord(%s, %s, %s)" % (repr(self.name),
               repr(self.element_id), repr(self.data_type))

def _localname(tag):
    return tag.rpartition("}")[2]

def _children(elem, name):
    return (child for child in elem if _localname(child.tag) == name)

def _childtext(elem, name):
    # character data directly inside the child, skipping nested markup
    for child in _children(elem, name):
        return (child.text or "") + "".join(sub.tail or "" for sub in child)
    return ""

def parse_registry(stream, registry_id=IE_REGISTRY_ID):
    """
    Parse a registry document and return the records of a sub-registry.

    :param stream: binary file-like object containing the registry XML
    :param registry_id: id attribute of the sub-registry to select
    :returns: list of :class:`RegistryRecord` in document order
    :raises: RegistryFormatError, RegistryNotFoundError

    """
    try:
        root = etree.parse(stream).getroot()
    except etree.ParseError as e:
        raise RegistryFormatError("error decoding XML: " + str(e)) from e

    if _localname(root.tag) != "registry":
        raise RegistryFormatError("expected registry root element, got " +
                                  _localname(root.tag))

    for regelem in _children(root, "registry"):
        if regelem.get("id") == registry_id:
            return [RegistryRecord(_childtext(recelem, "name"),
                                   _childtext(recelem, "elementId"),
                                   _childtext(recelem, "dataType"))
                    for recelem in _children(regelem, "record")]

    raise RegistryNotFoundError("no registry with id " + registry_id)

def fetch_registry(uri=IANA_IPFIX_URL, registry_id=IE_REGISTRY_ID):
    """
    Retrieve the registry document at a URI and return the records of the
    IE sub-registry. There is no retry; any failure is raised.

    :param uri: URI of the registry document; defaults to the IANA registry
    :param registry_id: id attribute of the sub-registry to select
    :returns: list of :class:`RegistryRecord` in document order
    :raises: RegistryFetchError, RegistryFormatError, RegistryNotFoundError

    """
    log.info("downloading %s", uri)
    try:
        res = urlreq.urlopen(uri)
    except (OSError, ValueError) as e:
        raise RegistryFetchError("error getting %s: %s" % (uri, e)) from e

    with res:
        try:
            return parse_registry(res, registry_id)
        except (OSError, http.client.HTTPException) as e:
            raise RegistryFetchError("error reading %s: %s" % (uri, e)) from e
