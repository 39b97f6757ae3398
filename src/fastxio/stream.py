# This source code is part of the fastxio package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

__name__ = "fastxio"
__author__ = "The fastxio contributors"
__all__ = [
    "FastxStream", "StreamMode", "requires_mode", "DEFAULT_WRAP_LENGTH"
]

import warnings
from enum import Enum
from functools import wraps
from .buffer import ByteStream, Delimiter, DEFAULT_BUFFER_SIZE
from .error import (
    StreamIOError,
    StreamModeError,
    TruncatedQualityError,
    TruncatedQualityWarning,
)
from .record import FastxRecord
from .transport import as_transport


DEFAULT_WRAP_LENGTH = 60

_NEWLINE = ord("\n")
_PLUS = ord("+")
_HEADER_BYTES = (ord(">"), ord("@"))
_SEPARATOR_BYTES = _HEADER_BYTES + (_PLUS,)


class StreamMode(Enum):
    """
    Whether a :class:`FastxStream` reads or writes records.
    """
    IN = "r"
    OUT = "w"


def requires_mode(mode):
    """
    A decorator for methods of :class:`FastxStream` that raises a
    :class:`StreamModeError`, if the stream is not opened in the given
    `mode`.

    Parameters
    ----------
    mode : StreamMode
        The required stream mode.
    """
    def decorator(func):
        @wraps(func)
        def wrapper(*args, **kwargs):
            # First parameter of method is always 'self'
            instance = args[0]
            if instance.mode != mode:
                raise StreamModeError(
                    f"The stream is opened in {instance.mode} mode, "
                    f"but {mode} mode is required"
                )
            return func(*args, **kwargs)
        return wrapper
    return decorator


class FastxStream(ByteStream):
    """
    A stream of FASTA or FASTQ records.

    In input mode, records are parsed one at a time with :meth:`read()`
    from a fixed-size buffer that is refilled on demand.
    Hence, the memory consumption is independent of the file size and
    records may span an arbitrary number of buffer refills.
    FASTA and FASTQ records may be mixed in the same input.
    Sequence and quality strings may span multiple lines,
    both ``\\n`` and ``\\r\\n`` line endings are accepted.

    In output mode, records are serialized with :meth:`write()`.

    Malformed input and I/O errors do not raise an exception.
    Instead, the stream evaluates to ``False`` after such a read,
    while the affected record still contains the partially parsed
    data.
    Iterating over the stream is the exception-raising alternative.

    Parameters
    ----------
    file : file-like object or str or PathLike or Transport or object
        The binary file to read from or to write to.
        Alternatively a file path can be supplied, which is closed
        when the stream is closed.
        If `func` is given, an arbitrary handle passed to `func`.
    mode : StreamMode or {'r', 'w'}, optional
        Whether records are read or written.
    func : callable, optional
        A primitive ``func(handle, buffer, max_len) -> int`` that
        reads bytes into `buffer` (or writes bytes from it) and
        returns the number of transferred bytes, ``0`` at the end of
        input and a negative value on error.
    buffer_size : int, optional
        The capacity of the read buffer in bytes.
    wrap_length : int, optional
        The number of characters after which a line break is inserted
        into written sequence and quality strings.
        ``0`` or ``None`` puts each string into a single line.
    encoding : str, optional
        The encoding of the text fields.
        Bytes that cannot be decoded are represented as surrogate
        escapes, so that they are written back unchanged.

    Examples
    --------

    >>> import io
    >>> source = io.BytesIO(b">seq1 desc\\nACGT\\nACGT\\n>seq2\\nTTTT\\n")
    >>> stream = FastxStream(source, buffer_size=4)
    >>> record = FastxRecord()
    >>> while stream.read(record):
    ...     print(repr(record))
    FastxRecord(name='seq1', comment='desc', sequence='ACGTACGT', quality='')
    FastxRecord(name='seq2', comment='', sequence='TTTT', quality='')

    >>> sink = io.BytesIO()
    >>> stream = FastxStream(sink, "w", wrap_length=4)
    >>> stream.write(FastxRecord("r1", "", "ACGTAC", "IIIIII"))
    True
    >>> print(sink.getvalue().decode(), end="")
    @r1
    ACGT
    AC
    +
    IIII
    II
    """

    def __init__(self, file, mode=StreamMode.IN, func=None,
                 buffer_size=DEFAULT_BUFFER_SIZE,
                 wrap_length=DEFAULT_WRAP_LENGTH, encoding="utf-8"):
        mode = StreamMode(mode)
        transport = as_transport(file, mode.value, func)
        super().__init__(transport, buffer_size, encoding)
        self._mode = mode
        self.wrap_length = wrap_length
        self.rewind()

    @property
    def mode(self):
        return self._mode

    @property
    def wrap_length(self):
        return self._wrap_length

    @wrap_length.setter
    def wrap_length(self, length):
        if length is not None and length < 0:
            raise ValueError(
                f"Wrap length must not be negative, not {length}"
            )
        self._wrap_length = length

    @property
    def truncated_quality(self):
        """
        bool : Whether the last FASTQ record had no quality string or
        a quality string with a length different from the sequence.
        """
        return self._is_truncated_quality

    @property
    def ready(self):
        """
        bool : Whether the first byte of the next header was already
        consumed by the previous read.
        """
        return self._is_ready

    @property
    def last_ok(self):
        """
        bool : Whether the last read completed a record.
        """
        return self._last_ok

    @property
    def failed(self):
        """
        bool : Whether the stream is unusable for further reading.
        """
        return (
            self.io_error
            or self._is_truncated_quality
            or (self.at_end and not self._last_ok)
        )

    def __bool__(self):
        return not self.failed

    def rewind(self):
        super().rewind()
        self._is_truncated_quality = False
        self._is_ready = False
        self._last_ok = False

    @requires_mode(StreamMode.IN)
    def read(self, record):
        """
        Read the next record.

        Parameters
        ----------
        record : FastxRecord
            The content of this record is replaced by the parsed
            record.
            It is left unchanged, if no further record header is
            found.

        Returns
        -------
        usable : bool
            Whether the stream is still usable after this read,
            i.e. the value of ``bool(stream)``.
            False, if the input ended before a new record was found,
            if an I/O error occured or if the quality string of the
            record is truncated.

        Warns
        -----
        TruncatedQualityWarning
            If the quality string of the record is missing or its length
            differs from the sequence length.
        """
        fields = [bytearray() for _ in range(4)]
        if self._parse_record(*fields):
            (
                record.name, record.comment, record.sequence, record.quality
            ) = [
                field.decode(self._encoding, errors="surrogateescape")
                for field in fields
            ]
        return not self.failed

    def _parse_record(self, name, comment, sequence, quality):
        """
        Parse the next record into the given arrays.

        Returns false, if the record header could not be found.
        """
        self._last_ok = False
        if not self._is_ready:
            # Jump to the next header line
            byte = self.next_byte()
            while byte is not None and byte not in _HEADER_BYTES:
                byte = self.next_byte()
            if self.failed:
                return False
            self._is_ready = True
        # The header byte is consumed from here on

        success, terminator = self.scan_until(Delimiter.SPACE, name)
        if not success:
            return True
        if terminator != _NEWLINE:
            self.scan_until(Delimiter.LINE, comment)

        byte = self.next_byte()
        while byte is not None and byte not in _SEPARATOR_BYTES:
            # Empty lines are skipped
            if byte != _NEWLINE:
                sequence.append(byte)
                self.scan_until(Delimiter.LINE, sequence, append=True)
            byte = self.next_byte()
        self._last_ok = True
        self._is_ready = byte in _HEADER_BYTES
        if byte != _PLUS:
            # FASTA record
            return True

        # Skip the rest of the '+' line
        byte = self.next_byte()
        while byte is not None and byte != _NEWLINE:
            byte = self.next_byte()
        record_name = name.decode(self._encoding, errors="replace")
        if self.at_end:
            warnings.warn(
                f"Record '{record_name}' has no quality string",
                TruncatedQualityWarning
            )
            self._is_truncated_quality = True
            return True
        while len(quality) < len(sequence):
            success, _ = self.scan_until(Delimiter.LINE, quality, append=True)
            if not success:
                break
        if self.io_error:
            self._last_ok = False
            return True
        if len(quality) != len(sequence):
            warnings.warn(
                f"Record '{record_name}' has {len(sequence)} "
                f"sequence characters, but {len(quality)} quality characters",
                TruncatedQualityWarning
            )
            self._is_truncated_quality = True
        return True

    @requires_mode(StreamMode.OUT)
    def write(self, record):
        """
        Write a record.

        A record with a quality string is written in FASTQ format,
        otherwise in FASTA format.
        The sequence and quality strings are wrapped after
        :attr:`wrap_length` characters.

        Parameters
        ----------
        record : FastxRecord
            The record to be written.

        Returns
        -------
        success : bool
            False, if the transport failed.
            As the error is sticky, all further writes fail as well.
        """
        self.emit("@" if record.is_fastq else ">")
        self.emit(record.name)
        if record.comment:
            self.emit(" ")
            self.emit(record.comment)
        self.emit("\n")
        self.emit(record.sequence, self._wrap_length)
        if record.is_fastq:
            self.emit("\n+\n")
            self.emit(record.quality, self._wrap_length)
        self.emit("\n")
        return not self.io_error

    @requires_mode(StreamMode.IN)
    def __iter__(self):
        """
        Iterate over the remaining records.

        Each record is a new :class:`FastxRecord` object.

        Yields
        ------
        record : FastxRecord
            The next record.

        Raises
        ------
        TruncatedQualityError
            If the quality string of a record is truncated.
            The partial record is available as attribute of the
            exception.
        StreamIOError
            If the transport reported an error.
        """
        record = FastxRecord()
        while self.read(record):
            yield record.copy()
        if self.io_error:
            raise StreamIOError(
                "Reading from the transport failed"
            ) from self._exception
        if self._is_truncated_quality:
            raise TruncatedQualityError(
                f"The quality string of record '{record.name}' is truncated",
                record.copy()
            )

    def flush(self):
        self._transport.flush()

    def close(self):
        """
        Flush the transport in output mode and close it.
        A file that was opened from a path is closed as well.
        """
        if self._mode == StreamMode.OUT:
            self.flush()
        self._transport.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.close()
