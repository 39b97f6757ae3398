# This source code is part of the fastxio package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

import io
from os.path import join
from tempfile import TemporaryFile
import numpy as np
import pytest
import fastxio
from .util import data_dir


class ReadOnlyFile:
    """
    A file-like object, that only implements ``read()``.
    """

    def __init__(self, data):
        self._data = io.BytesIO(data)

    def read(self, size):
        return self._data.read(size)


class SlowSink:
    """
    A file-like object, that accepts at most `limit` bytes per call and
    accepts nothing after `capacity` bytes.
    """

    def __init__(self, limit, capacity=None):
        self.limit = limit
        self.capacity = capacity
        self.content = bytearray()

    def write(self, data):
        n = min(self.limit, len(data))
        if self.capacity is not None:
            n = min(n, self.capacity - len(self.content))
        self.content += bytes(data[:n])
        return n


class NonBlockingFile(io.RawIOBase):
    """
    A non-blocking file-like object, that never has data available.
    """

    def readable(self):
        return True

    def readinto(self, buffer):
        return None


def test_abstract():
    with pytest.raises(TypeError):
        fastxio.Transport()


def test_file_read():
    transport = fastxio.FileTransport(io.BytesIO(b"ACGTAC"))
    buffer = np.zeros(4, dtype=np.uint8)
    assert transport.read(buffer, 4) == 4
    assert buffer.tobytes() == b"ACGT"
    assert transport.read(buffer, 4) == 2
    assert buffer[:2].tobytes() == b"AC"
    assert transport.read(buffer, 4) == 0


def test_file_read_without_readinto():
    transport = fastxio.FileTransport(ReadOnlyFile(b"ACGTAC"))
    buffer = np.zeros(4, dtype=np.uint8)
    assert transport.read(buffer, 3) == 3
    assert buffer[:3].tobytes() == b"ACG"
    assert transport.read(buffer, 4) == 3
    assert buffer[:3].tobytes() == b"TAC"
    assert transport.read(buffer, 4) == 0


def test_non_blocking_file():
    """
    A file without available data is not taken as end of input.
    """
    transport = fastxio.FileTransport(NonBlockingFile())
    buffer = np.zeros(4, dtype=np.uint8)
    assert transport.read(buffer, 4) < 0

    stream = fastxio.FastxStream(NonBlockingFile())
    assert not stream.read(fastxio.FastxRecord())
    assert stream.io_error
    assert not stream.at_end


def test_file_write():
    sink = SlowSink(limit=3)
    transport = fastxio.FileTransport(sink)
    assert transport.write(b"ACGTACGT", 7) == 7
    assert sink.content == b"ACGTACG"


def test_file_write_failure():
    sink = SlowSink(limit=3, capacity=5)
    transport = fastxio.FileTransport(sink)
    assert transport.write(b"ACGTACGT", 8) == 0


def test_text_file():
    with pytest.raises(TypeError):
        fastxio.FileTransport(io.StringIO())
    with TemporaryFile("w+") as file:
        with pytest.raises(TypeError):
            fastxio.as_transport(file, "r")


def test_function():
    calls = []

    def func(handle, buffer, max_len):
        calls.append((handle, max_len))
        return 0

    transport = fastxio.as_transport("handle", "r", func)
    assert isinstance(transport, fastxio.FunctionTransport)
    assert transport.handle == "handle"
    assert transport.read(np.zeros(3, dtype=np.uint8), 3) == 0
    assert transport.write(b"AC", 2) == 0
    assert calls == [("handle", 3), ("handle", 2)]


def test_not_callable():
    with pytest.raises(TypeError):
        fastxio.FunctionTransport(None, "not a function")


def test_pass_through():
    transport = fastxio.FileTransport(io.BytesIO())
    assert fastxio.as_transport(transport, "w") is transport


def test_invalid_mode():
    with pytest.raises(ValueError):
        fastxio.as_transport(io.BytesIO(), "a")


def test_path():
    path = join(data_dir(), "nuc.fasta")
    transport = fastxio.as_transport(path, "r")
    assert isinstance(transport, fastxio.FileTransport)
    buffer = np.zeros(4, dtype=np.uint8)
    assert transport.read(buffer, 4) == 4
    assert buffer.tobytes() == b">seq"
    transport.close()
    assert transport.file.closed


def test_unowned_file_stays_open():
    file = io.BytesIO()
    transport = fastxio.as_transport(file, "w")
    transport.close()
    assert not file.closed
