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
Generate the IANA Information Element registry module.

Fetches the current IANA IPFIX registry and writes a Python module
registering its Information Elements and their reverse counterparts
to the file given by ``--output``::

    ipfix-gen-registry --output ipfix_registry.py

"""
import argparse
import logging
import sys

from . import emitter
from . import registry

log = logging.getLogger(__name__)

def parse_args(args=None):
    ap = argparse.ArgumentParser(description="Generate the IANA IPFIX "
                                 "Information Element registry module")
    ap.add_argument('--output', metavar='file', nargs='?', const="", default="",
                    help='module file to write')
    opts = ap.parse_args(args)

    if not opts.output:
        sys.stderr.write("Missing output file\n")
        ap.print_usage(sys.stderr)
        sys.exit(1)

    return opts

def main(args=None):
    opts = parse_args(args)

    logging.basicConfig(level=logging.INFO,
                        format="%(asctime)s %(message)s")

    try:
        records = registry.fetch_registry(registry.IANA_IPFIX_URL)
    except registry.RegistryError as e:
        log.critical("%s", e)
        sys.exit(1)

    try:
        emitter.write_source(opts.output, records)
    except OSError as e:
        log.critical("error writing %s: %s", opts.output, e)
        sys.exit(1)

if __name__ == "__main__":
    main()
