# This source code is part of the fastxio package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

"""
A streaming reader and writer for the FASTA and FASTQ formats.

The central class is :class:`FastxStream`:
In input mode it parses one :class:`FastxRecord` at a time from a
fixed-size buffer that is refilled lazily from a byte source, so
records may span any number of buffer refills.
In output mode it serializes records, optionally wrapping the sequence
and quality lines.

The byte source or sink is abstracted by the :class:`Transport`
interface, so that plain files, decompressing file objects, sockets or
custom ``(handle, function)`` pairs can be used interchangeably.
"""

__version__ = "0.1.0"
__name__ = "fastxio"
__author__ = "The fastxio contributors"

from .file import *
from .error import *
from .copyable import *
from .record import *
from .transport import *
from .buffer import *
from .stream import *
