# This source code is part of the fastxio package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

"""
The buffer/cursor engine, that presents a byte source as sequence of
single bytes and delimiter-bounded fields.
"""

__name__ = "fastxio"
__author__ = "The fastxio contributors"
__all__ = ["Delimiter", "ByteStream", "DEFAULT_BUFFER_SIZE"]

import enum
import numpy as np
from .file import wrap_string


DEFAULT_BUFFER_SIZE = 16384

_NEWLINE = ord("\n")
_CARRIAGE_RETURN = ord("\r")

# Lookup tables for 'isspace()' in the C locale
_IS_SPACE = np.zeros(256, dtype=bool)
_IS_SPACE[[ord(c) for c in " \t\n\v\f\r"]] = True
_IS_TAB = _IS_SPACE.copy()
_IS_TAB[ord(" ")] = False


class Delimiter(enum.IntEnum):
    """
    The byte classes that can terminate a scan in
    :meth:`ByteStream.scan_until()`.

    - ``SPACE`` - Any whitespace byte
      (space, ``\\t``, ``\\n``, ``\\v``, ``\\f``, ``\\r``).
    - ``TAB`` - Any whitespace byte except the space character.
    - ``LINE`` - ``\\n``.
      A ``\\r`` directly before it is removed from the scanned text,
      so that both Unix and Windows line endings are handled.
    """

    SPACE = 0
    TAB = 1
    LINE = 2


class ByteStream:
    """
    A buffered view on a :class:`Transport`.

    The stream owns a fixed-size byte buffer and a cursor pair
    ``(begin, end)`` enclosing the unread valid bytes.
    The buffer is refilled from the transport only when it is
    exhausted.

    A failing transport puts the stream into a sticky error state:
    All subsequent operations fail until :meth:`rewind()` is called.
    An :class:`OSError` raised by the transport is treated the same
    way as a negative return value.

    Parameters
    ----------
    transport : Transport
        The byte source or sink.
    buffer_size : int, optional
        The capacity of the read buffer in bytes.
    encoding : str, optional
        The encoding used by :meth:`emit()` to convert text into bytes.
        Surrogate escapes are converted back into the original bytes.

    Examples
    --------

    >>> import io
    >>> from fastxio import FileTransport
    >>> stream = ByteStream(
    ...     FileTransport(io.BytesIO(b"seq1 first\\r\\nACGT")), buffer_size=4
    ... )
    >>> field = bytearray()
    >>> stream.scan_until(Delimiter.SPACE, field)
    (True, 32)
    >>> field
    bytearray(b'seq1')
    >>> stream.scan_until(Delimiter.LINE, field)
    (True, 10)
    >>> field
    bytearray(b'first')
    >>> chr(stream.next_byte())
    'A'
    """

    def __init__(self, transport, buffer_size=DEFAULT_BUFFER_SIZE,
                 encoding="utf-8"):
        if buffer_size < 1:
            raise ValueError(
                f"Buffer size must be positive, not {buffer_size}"
            )
        self._transport = transport
        self._encoding = encoding
        self._buffer = np.zeros(buffer_size, dtype=np.uint8)
        ByteStream.rewind(self)

    @property
    def transport(self):
        return self._transport

    @property
    def buffer_size(self):
        return len(self._buffer)

    @property
    def encoding(self):
        return self._encoding

    @property
    def io_error(self):
        """
        bool : Whether the transport reported an error.
        """
        return self._end == -1

    @property
    def at_end(self):
        """
        bool : Whether the transport reported the end of input and
        all buffered bytes are consumed.
        """
        return self._is_eof and self._begin >= self._end

    def rewind(self):
        """
        Discard the buffered bytes and reset all status flags,
        including a sticky error.

        The position of the underlying transport is not changed.
        """
        self._begin = 0
        self._end = 0
        self._is_eof = False
        self._exception = None

    def next_byte(self):
        """
        Get the next byte from the stream.

        Returns
        -------
        byte : int or None
            The next byte.
            ``None`` at the end of input or on error.
        """
        if self._begin < self._end:
            byte = int(self._buffer[self._begin])
            self._begin += 1
            return byte
        if self.io_error or self.at_end:
            return None
        self._begin = 0
        self._end = self._fetch()
        if self._end <= 0:
            # An error also ends the input
            self._is_eof = True
            return None
        byte = int(self._buffer[0])
        self._begin = 1
        return byte

    def scan_until(self, delimiter, out, append=False):
        """
        Read bytes into `out` until a byte matching the `delimiter` is
        found or the input ends.

        The scan continues over as many buffer refills as necessary.
        The delimiter itself is consumed, but not put into `out`.

        Parameters
        ----------
        delimiter : Delimiter or int or bytes
            A delimiter class or a single literal byte.
        out : bytearray
            The scanned bytes are written into this array.
        append : bool, optional
            If true, the bytes are appended to `out` instead of
            replacing its content.

        Returns
        -------
        success : bool
            False, if the input ended before any byte was read or if
            the transport reported an error.
            Reaching the end of input after some bytes were read is a
            success.
        terminator : int or None
            The byte that terminated the scan.
            ``None``, if the scan was terminated by the end of input or
            was not successful.
        """
        matcher = _get_matcher(delimiter)
        if not append:
            out.clear()
        got_any = False
        terminator = None
        while self.next_byte() is not None:
            # Put back the peeked byte and scan the whole valid window
            self._begin -= 1
            got_any = True
            window = self._buffer[self._begin : self._end]
            hits = np.flatnonzero(matcher(window))
            if len(hits) == 0:
                out += window.tobytes()
                self._begin = self._end
                continue
            stop = self._begin + int(hits[0])
            out += self._buffer[self._begin : stop].tobytes()
            terminator = int(self._buffer[stop])
            self._begin = stop + 1
            break

        if self.io_error or (self.at_end and not got_any):
            return False, None
        if (delimiter is Delimiter.LINE and len(out) > 0
                and out[-1] == _CARRIAGE_RETURN):
            del out[-1]
        return True, terminator

    def emit(self, text, width=None):
        """
        Write text to the transport.

        Parameters
        ----------
        text : str or bytes
            The text to be written.
        width : int, optional
            If given, a line break is written after every `width`
            characters, but not after the last piece.

        Returns
        -------
        success : bool
            False, if the stream is in error state.
        """
        if self.io_error:
            return False
        for i, piece in enumerate(wrap_string(text, width)):
            if i != 0 and not self._put(b"\n"):
                break
            if isinstance(piece, str):
                piece = piece.encode(self._encoding, errors="surrogateescape")
            if not self._put(piece):
                break
        return not self.io_error

    def _fetch(self):
        try:
            n = self._transport.read(self._buffer, len(self._buffer))
        except OSError as e:
            self._exception = e
            return -1
        return -1 if n < 0 else n

    def _put(self, data):
        try:
            n = self._transport.write(data, len(data))
        except OSError as e:
            self._exception = e
            n = -1
        if n <= 0:
            self._end = -1
            return False
        return True


def _get_matcher(delimiter):
    """
    Get a function that maps a window of the buffer to a boolean mask
    of delimiter positions.
    """
    if isinstance(delimiter, Delimiter):
        if delimiter is Delimiter.LINE:
            return lambda window: window == _NEWLINE
        elif delimiter is Delimiter.SPACE:
            return lambda window: _IS_SPACE[window]
        else:
            return lambda window: _IS_TAB[window]
    if isinstance(delimiter, bytes):
        if len(delimiter) != 1:
            raise ValueError(
                f"A delimiter must be a single byte, "
                f"but {len(delimiter)} bytes were given"
            )
        delimiter = delimiter[0]
    if not 0 <= delimiter < 256:
        raise ValueError(f"{delimiter} is not a valid byte value")
    return lambda window: window == delimiter
