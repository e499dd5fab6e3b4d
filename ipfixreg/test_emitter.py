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


from . import emitter, testutils, reverse
from .registry import RegistryRecord
from .types import FieldTypes
from datetime import datetime, timezone

_test_time = datetime(2026, 10, 19, 13, 27, 0, tzinfo=timezone.utc)

def _statements(source):
    return [line for line in source.splitlines() if line.startswith("builtin[(0, ")]

def test_registration_entries():
    entries = emitter.registration_entries(testutils.mktest_records())
    assert(entries == [(1, "octetDeltaCount", "unsigned64"),
                       (2, "packetDeltaCount", "unsigned64"),
                       (8, "sourceIPv4Address", "ipv4Address"),
                       (130, "exporterIPv4Address", "ipv4Address"),
                       (145, "templateId", "unsigned16"),
                       (150, "flowStartSeconds", "dateTimeSeconds"),
                       (41, "exportedMessageTotalCount", "unsigned64"),
                       (210, "paddingOctets", "octetArray"),
                       (230, "natEvent", "unsigned8")])

def test_registration_entry_incomplete():
    assert(emitter.registration_entry(RegistryRecord("", "1", "unsigned64")) is None)
    assert(emitter.registration_entry(RegistryRecord("a", " ", "unsigned64")) is None)
    assert(emitter.registration_entry(RegistryRecord("a", "1", "\n\t")) is None)
    assert(emitter.registration_entry(RegistryRecord("a", "1-5", "unsigned64")) is None)
    assert(emitter.registration_entry(RegistryRecord("a", "007", "unsigned64")) == (7, "a", "unsigned64"))

def test_render_source():
    source = emitter.render_source(testutils.mktest_records(), now=_test_time)
    lines = source.splitlines()

    assert(lines[0] == "# Autogenerated Mon Oct 19 13:27:00 UTC 2026")
    assert("http://www.iana.org/assignments/ipfix/ipfix.xml" in lines[2])
    assert("Private Enterprise Number 29305." in source)

    stmts = _statements(source)
    assert(len(stmts) == 9)
    assert(stmts[5] == "builtin[(0, 150)] = InformationElement("
                       "'flowStartSeconds', 0, 150, FieldTypes['dateTimeSeconds'])")
    assert(not any("(0, 211)" in s or "(0, 216)" in s for s in stmts))

    # the reverse block follows the registrations
    assert(lines[-1] == "add_reverse_entries(builtin)")

def test_render_source_empty():
    source = emitter.render_source([], now=_test_time)
    assert(_statements(source) == [])
    assert(testutils.load_generated(source) == {})

def test_render_source_deterministic():
    recs = testutils.mktest_records()
    a = emitter.render_source(recs, now=_test_time)
    b = emitter.render_source(recs, now=_test_time)
    assert(a == b)

    c = emitter.render_source(recs)
    assert(a.splitlines()[1:] == c.splitlines()[1:])

def test_generated_module():
    model = testutils.load_generated(
        emitter.render_source(testutils.mktest_records(), now=_test_time))

    base = { k: v for k, v in model.items() if k[0] == 0 }
    rev = { k: v for k, v in model.items() if k[0] == reverse.REVERSE_PEN }
    assert(len(base) + len(rev) == len(model))

    assert(sorted(base) == [(0, 1), (0, 2), (0, 8), (0, 41), (0, 130),
                            (0, 145), (0, 150), (0, 210), (0, 230)])
    assert(sorted(rev) == [(29305, 1), (29305, 2), (29305, 8),
                           (29305, 150), (29305, 230)])

    e = model[(0, 150)]
    assert((e.name, e.pen, e.num, e.type) ==
           ("flowStartSeconds", 0, 150, FieldTypes["dateTimeSeconds"]))
    e = model[(29305, 150)]
    assert((e.name, e.pen, e.num, e.type) ==
           ("reverseFlowStartSeconds", 29305, 150, FieldTypes["dateTimeSeconds"]))

    assert(model[(29305, 8)].name == "reverseSourceIPv4Address")
    assert(model[(0, 210)].name == "paddingOctets")
    assert((29305, 210) not in model)

def test_generated_module_every_exclusion():
    recs = [RegistryRecord("ie%u" % num, str(num), "unsigned32")
            for num in sorted(reverse.NON_REVERSIBLE)]
    model = testutils.load_generated(emitter.render_source(recs, now=_test_time))

    assert(len(model) == len(reverse.NON_REVERSIBLE))
    for num in reverse.NON_REVERSIBLE:
        assert((0, num) in model)
        assert((reverse.REVERSE_PEN, num) not in model)

def test_write_source(tmp_path):
    path = tmp_path / "ipfix_registry.py"
    path.write_text("stale contents that should disappear\n" * 100)

    count = emitter.write_source(str(path), testutils.mktest_records(), now=_test_time)
    assert(count == 9)
    assert(path.read_text() ==
           emitter.render_source(testutils.mktest_records(), now=_test_time))

def test_write_source_error(tmp_path):
    try:
        emitter.write_source(str(tmp_path / "no" / "such" / "dir.py"), [])
        assert(False)
    except OSError as e:
        pass

def test_timestamp():
    assert(emitter.timestamp(datetime(2026, 10, 5, 1, 2, 3, tzinfo=timezone.utc)) ==
           "Mon Oct  5 01:02:03 UTC 2026")
    assert(emitter.timestamp(_test_time) == "Mon Oct 19 13:27:00 UTC 2026")

def test_generated_module_uses_reverse_entries(monkeypatch):
    source = emitter.render_source([RegistryRecord("octetDeltaCount", "1", "unsigned64")],
                                   now=_test_time)
    assert(sorted(testutils.load_generated(source)) == [(0, 1), (29305, 1)])

    monkeypatch.setattr(reverse, "reverse_entries", lambda table: {})
    assert(sorted(testutils.load_generated(source)) == [(0, 1)])

def test_write_source_utf8(tmp_path):
    path = tmp_path / "ipfix_registry.py"
    emitter.write_source(str(path), [RegistryRecord("grüeziCount", "1", "unsigned64")],
                         now=_test_time)
    assert("InformationElement('grüeziCount', 0, 1," in path.read_bytes().decode("utf-8"))
