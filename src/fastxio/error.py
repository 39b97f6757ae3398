# This source code is part of the fastxio package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

"""
This module contains the errors raised by *fastxio*.

Note that the record-level reading and writing methods do not raise
on malformed input or I/O failures, but set status flags on the stream
instead.
"""

__name__ = "fastxio"
__author__ = "The fastxio contributors"
__all__ = [
    "InvalidFileError",
    "TruncatedQualityError",
    "TruncatedQualityWarning",
    "StreamIOError",
    "StreamModeError",
]


class InvalidFileError(Exception):
    """
    Indicates that the input is not a well-formed FASTA or FASTQ file.
    """

    pass


class TruncatedQualityError(InvalidFileError):
    """
    Indicates that the quality string of a FASTQ record is missing or
    its length differs from the length of the sequence.

    Parameters
    ----------
    message : str
        The error message.
    record : FastxRecord, optional
        The partially parsed record.

    Attributes
    ----------
    record : FastxRecord or None
        The partially parsed record.
    """

    def __init__(self, message, record=None):
        super().__init__(message)
        self.record = record


class TruncatedQualityWarning(UserWarning):
    """
    Indicates that the quality string of a FASTQ record is missing or
    its length differs from the length of the sequence.
    """

    pass


class StreamIOError(OSError):
    """
    Indicates that the underlying byte source or sink failed.
    This error is sticky: The stream cannot be used anymore.
    """

    pass


class StreamModeError(Exception):
    """
    Indicates that a stream was used for reading while opened for
    writing or vice versa.
    """

    pass
