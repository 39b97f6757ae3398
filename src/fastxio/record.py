# This source code is part of the fastxio package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

__name__ = "fastxio"
__author__ = "The fastxio contributors"
__all__ = ["FastxRecord"]

from .copyable import Copyable


class FastxRecord(Copyable):
    """
    A single FASTA or FASTQ entry.

    A record is a plain container: It neither checks the sequence
    alphabet nor decodes the quality scores.
    The same object may be passed to :meth:`FastxStream.read()`
    repeatedly, each read overwrites its content.

    Parameters
    ----------
    name : str, optional
        The identifier, i.e. the header up to the first whitespace.
    comment : str, optional
        The rest of the header line after the first whitespace.
    sequence : str, optional
        The sequence, concatenated from all sequence lines.
    quality : str, optional
        The quality string, concatenated from all quality lines.
        Empty for FASTA records.

    Attributes
    ----------
    name, comment, sequence, quality : str
        The record fields.

    Examples
    --------

    >>> record = FastxRecord("r1", "sample A", "ACGT", "IIII")
    >>> print(record)
    @r1 sample A
    ACGT
    +
    IIII
    >>> record.is_fastq
    True
    >>> len(record)
    4
    >>> record.clear()
    >>> record
    FastxRecord(name='', comment='', sequence='', quality='')
    """

    def __init__(self, name="", comment="", sequence="", quality=""):
        self.name = name
        self.comment = comment
        self.sequence = sequence
        self.quality = quality

    def clear(self):
        """
        Reset all fields to empty strings.
        """
        self.name = ""
        self.comment = ""
        self.sequence = ""
        self.quality = ""

    @property
    def is_fastq(self):
        """
        bool : Whether the record carries a quality string.
        """
        return len(self.quality) != 0

    def __copy_create__(self):
        return FastxRecord(
            self.name, self.comment, self.sequence, self.quality
        )

    def __len__(self):
        return len(self.sequence)

    def __eq__(self, item):
        if not isinstance(item, FastxRecord):
            return False
        return (
            self.name == item.name
            and self.comment == item.comment
            and self.sequence == item.sequence
            and self.quality == item.quality
        )

    def __repr__(self):
        return (
            f"FastxRecord(name={self.name!r}, comment={self.comment!r}, "
            f"sequence={self.sequence!r}, quality={self.quality!r})"
        )

    def __str__(self):
        header = ("@" if self.is_fastq else ">") + self.name
        if self.comment:
            header += " " + self.comment
        lines = [header, self.sequence]
        if self.is_fastq:
            lines += ["+", self.quality]
        return "\n".join(lines)
