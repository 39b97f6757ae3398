# This source code is part of the fastxio package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

"""
The byte primitives a stream reads from and writes to.

A stream never touches the underlying byte source directly, it only
calls :meth:`Transport.read()` when its buffer is exhausted and
:meth:`Transport.write()` for each piece of serialized text.
Hence, any source (a plain file, a decompressing file object, a socket
file, a pair of handle and function) can be used without changes to
the parser.
"""

__name__ = "fastxio"
__author__ = "The fastxio contributors"
__all__ = ["Transport", "FunctionTransport", "FileTransport", "as_transport"]

import abc
import numpy as np
from .file import is_open_compatible, is_text


class Transport(metaclass=abc.ABCMeta):
    """
    Base class for byte sources and sinks.

    The return values follow the convention of the C ``read()`` and
    ``write()`` functions: A positive value is the number of
    transferred bytes, ``0`` indicates the end of the input
    (or a failed write) and a negative value indicates an error.
    """

    @abc.abstractmethod
    def read(self, buffer, max_len):
        """
        Place up to `max_len` bytes into the start of `buffer`.

        Parameters
        ----------
        buffer : ndarray, dtype=np.uint8
            The buffer to be filled.
        max_len : int
            The maximum number of bytes to be read.

        Returns
        -------
        n : int
            The number of bytes placed into `buffer`.
            ``0`` at the end of input, negative on error.
        """
        pass

    @abc.abstractmethod
    def write(self, data, length):
        """
        Write the first `length` bytes of `data`.

        Parameters
        ----------
        data : bytes
            The bytes to be written.
        length : int
            The number of bytes to be written.

        Returns
        -------
        n : int
            The number of written bytes.
            ``0`` or negative on failure.
        """
        pass

    def flush(self):
        pass

    def close(self):
        pass


class FunctionTransport(Transport):
    """
    A transport that forwards to a function taking a handle, a buffer
    and the number of bytes to transfer.

    The same function is used for reading and writing, as a stream is
    either opened for one or the other.

    Parameters
    ----------
    handle : object
        The handle passed as first argument to `func`.
    func : callable
        ``func(handle, buffer, max_len) -> int``.

    Examples
    --------

    >>> import io
    >>> def read_func(handle, buffer, max_len):
    ...     data = handle.read(max_len)
    ...     buffer[:len(data)] = list(data)
    ...     return len(data)
    >>> transport = FunctionTransport(io.BytesIO(b">seq\\nAC\\n"), read_func)
    >>> buffer = np.zeros(4, dtype=np.uint8)
    >>> transport.read(buffer, len(buffer))
    4
    >>> buffer.tobytes()
    b'>seq'
    """

    def __init__(self, handle, func):
        if not callable(func):
            raise TypeError(f"'{type(func).__name__}' object is not callable")
        self._handle = handle
        self._func = func

    @property
    def handle(self):
        return self._handle

    def read(self, buffer, max_len):
        return self._func(self._handle, buffer, max_len)

    def write(self, data, length):
        return self._func(self._handle, data, length)


class FileTransport(Transport):
    """
    A transport for binary file-like objects.

    Parameters
    ----------
    file : file-like object
        A file opened in binary mode.
        For reading it must provide ``readinto()`` or ``read()``,
        for writing ``write()``.
        Only blocking files are supported:
        A non-blocking file without available data puts the stream
        into error state.
    owned : bool, optional
        If true, the file is closed by :meth:`close()`.
    """

    def __init__(self, file, owned=False):
        if is_text(file):
            raise TypeError("A file opened in 'binary' mode is required")
        self._file = file
        self._owned = owned

    @property
    def file(self):
        return self._file

    def read(self, buffer, max_len):
        if hasattr(self._file, "readinto"):
            n = self._file.readinto(memoryview(buffer)[:max_len])
            # Non-blocking files return 'None' if no data is available,
            # which must not be taken as end of input
            return -1 if n is None else n
        data = self._file.read(max_len)
        if data is None:
            return -1
        buffer[: len(data)] = np.frombuffer(data, dtype=np.uint8)
        return len(data)

    def write(self, data, length):
        view = memoryview(data)[:length]
        written = 0
        while written < length:
            n = self._file.write(view[written:])
            if not n:
                # The sink stopped accepting data
                return 0
            written += n
        return written

    def flush(self):
        if hasattr(self._file, "flush"):
            self._file.flush()

    def close(self):
        if self._owned:
            self._file.close()


def as_transport(file, mode, func=None):
    """
    Get a :class:`Transport` for the given file argument.

    Parameters
    ----------
    file : Transport or file-like object or str or PathLike or object
        A :class:`Transport` is returned as is.
        A path is opened in binary mode and closed together with the
        transport.
        A binary file-like object is wrapped into a
        :class:`FileTransport`.
        If `func` is given, `file` can be an arbitrary handle.
    mode : {'r', 'w'}
        Whether the file is read or written.
    func : callable, optional
        ``func(handle, buffer, max_len) -> int``.
        If given, a :class:`FunctionTransport` is created.

    Returns
    -------
    transport : Transport
        The transport.
    """
    if mode not in ("r", "w"):
        raise ValueError(f"Invalid mode '{mode}'")
    if func is not None:
        return FunctionTransport(file, func)
    if isinstance(file, Transport):
        return file
    if is_open_compatible(file):
        return FileTransport(open(file, mode + "b"), owned=True)
    return FileTransport(file)
