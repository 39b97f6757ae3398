# This source code is part of the fastxio package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

__name__ = "fastxio"
__author__ = "The fastxio contributors"
__all__ = ["Copyable"]

import abc


class Copyable(metaclass=abc.ABCMeta):
    """
    Base class for objects that can be duplicated with :meth:`copy()`.

    Records are usually reused by the caller between two reads, so a
    record that should outlive the next read must be copied.
    :meth:`copy()` obtains a fresh instance from
    :meth:`__copy_create__()` and transfers all remaining state in
    :meth:`__copy_fill__()`, from the uppermost base class down to the
    class of the copied instance.
    """

    def copy(self):
        """
        Copy the object.

        Returns
        -------
        copy
            A copy of this object.
        """
        clone = self.__copy_create__()
        self.__copy_fill__(clone)
        return clone

    def __copy_create__(self):
        """
        Instantiate a new object of this class.

        Override this method, if the constructor takes parameters.
        Do not call the `super()` method here.

        Returns
        -------
        copy
            A freshly instantiated copy of *self*.
        """
        return type(self)()

    def __copy_fill__(self, clone):
        """
        Copy the state that is not set by the constructor.

        Always call the `super()` method as first statement.

        Parameters
        ----------
        clone
            The freshly instantiated copy of *self*.
        """
        pass
