# This source code is part of the fastxio package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

import pytest
from fastxio import FastxRecord  # noqa: F401


@pytest.mark.parametrize(
    "repr_object",
    [
        FastxRecord(),
        FastxRecord("seq1", "desc", "ACGT"),
        FastxRecord("r1", "it's \"quoted\"", "ACGT", "II#I"),
    ],
)
def test_repr(repr_object):
    assert eval(repr(repr_object)) == repr_object
