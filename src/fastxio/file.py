# This source code is part of the fastxio package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

"""
Helpers for dealing with the different kinds of file arguments
(paths, text and binary file-like objects) accepted by the streams.
"""

__name__ = "fastxio"
__author__ = "The fastxio contributors"
__all__ = ["wrap_string", "is_text", "is_open_compatible"]

import io
from os import PathLike


def wrap_string(text, width):
    """
    Split the given `text` into pieces of at most `width` characters.

    In contrast to :func:`textwrap.wrap()`, the text is simply cut
    after each `width` characters, ignoring words and whitespace.

    Parameters
    ----------
    text : str or bytes
        The text to be wrapped.
    width : int or None
        The maximum number of characters per piece.
        If ``None`` or ``0``, the whole text is returned as single
        piece.

    Returns
    -------
    lines : list of (str or bytes)
        The wrapped pieces.
        Empty, if `text` is empty.

    Examples
    --------

    >>> wrap_string("ACGTACGTAC", 4)
    ['ACGT', 'ACGT', 'AC']
    >>> wrap_string("ACGT", None)
    ['ACGT']
    >>> wrap_string("", 4)
    []
    """
    if len(text) == 0:
        return []
    if not width:
        return [text]
    if width < 0:
        raise ValueError(f"Width must be positive, not {width}")
    lines = []
    for i in range(0, len(text), width):
        lines.append(text[i : i + width])
    return lines


def is_text(file):
    if isinstance(file, io.TextIOBase):
        return True
    # for file wrappers, e.g. 'TemporaryFile'
    return hasattr(file, "file") and isinstance(file.file, io.TextIOBase)


def is_open_compatible(file):
    return isinstance(file, (str, bytes, PathLike))
