# coding: utf8
#
# python-ipfix (c) 2013-2014 Brian Trammell.
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

from . import ie, registry
from xml.sax.saxutils import escape

IANA_NS = "http://www.iana.org/assignments"

# a few real records from the IANA registry, plus two incomplete ones
_test_records = [("octetDeltaCount", "1", "unsigned64"),
                 ("packetDeltaCount", "2", "unsigned64"),
                 ("sourceIPv4Address", "8", "ipv4Address"),
                 ("exporterIPv4Address", "130", "ipv4Address"),
                 ("templateId", "145", "unsigned16"),
                 (" flowStartSeconds ", " 150 ", "dateTimeSeconds"),
                 ("exportedMessageTotalCount", "41", "unsigned64"),
                 ("paddingOctets", "210", "octetArray"),
                 ("", "211", "unsigned8"),
                 ("collectorTransportPort", "216", ""),
                 ("natEvent", "230", "unsigned8")]

def mktest_record(name, num, typename):
    return registry.RegistryRecord(name, num, typename)

def mktest_records():
    return [mktest_record(*rec) for rec in _test_records]

def _record_xml(rec):
    return ("<record><name>%s</name><dataType>%s</dataType>"
            "<elementId>%s</elementId><status>current</status></record>" %
            (escape(rec.name), escape(rec.data_type), escape(rec.element_id)))

def mktest_registry_xml(records=None, registry_id=registry.IE_REGISTRY_ID,
                        namespace=IANA_NS):
    """
    Make a registry document containing an IE data types sub-registry
    and a sub-registry with the given id holding the given records.

    """
    if records is None:
        records = mktest_records()

    if namespace:
        xmlns = ' xmlns="%s"' % namespace
    else:
        xmlns = ''

    return ('<?xml version="1.0" encoding="UTF-8"?>\n'
            '<registry%s id="ipfix">\n'
            '<title>IP Flow Information Export (IPFIX) Entities</title>\n'
            '<registry id="ipfix-information-element-data-types">\n'
            '<record><value>0</value><description>octetArray</description></record>\n'
            '</registry>\n'
            '<registry id="%s">\n%s\n</registry>\n'
            '</registry>\n' % (xmlns, registry_id,
                               "\n".join(_record_xml(rec) for rec in records))
            ).encode()

def load_generated(source):
    """
    Execute a generated registry module against an empty information model,
    and return a copy of the resulting model.

    """
    ie.clear_infomodel()
    try:
        exec(compile(source, "<generated>", "exec"), {})
        return dict(ie.builtin)
    finally:
        ie.clear_infomodel()
