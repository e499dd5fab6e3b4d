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
Generator for the IANA IPFIX Information Element registry.

.. moduleauthor:: Brian Trammell <brian@trammell.ch>

This package fetches the IANA IPFIX Information Element Registry and
emits a Python module which, when imported, registers every IANA
Information Element into :data:`ipfixreg.ie.builtin`, keyed by private
enterprise number and element number, with its type taken from
:data:`ipfixreg.types.FieldTypes`. Importing the module also registers the
reverse counterparts of the IEs as in :rfc:`5103`; see
:mod:`ipfixreg.reverse` for the IEs that have none.

To fetch the registry, see :mod:`ipfixreg.registry`; to write the module,
see :mod:`ipfixreg.emitter`. :mod:`ipfixreg.generate` ties the two together
as the ``ipfix-gen-registry`` command.

This module is made available under the terms of the
`GNU Lesser General Public License <http://www.gnu.org/licenses/lgpl.html>`_, 
or, at your option, any later version.

"""

from . import types
from . import ie
from . import reverse
from . import registry
from . import emitter
