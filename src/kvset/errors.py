""" Exceptions raised by :mod:`kvset`. Everything the package raises on its
    own behalf derives from :class:`Error`; failures reported by the store
    handle are wrapped in a :class:`StoreError`.
"""


class Error(Exception):
    """Base class for all kvset errors."""


class InvalidArgument(Error, ValueError):
    """A caller supplied an argument that cannot be acted upon, such as an
    empty operand list for a multi-set operation."""


class StoreError(Error):
    """ The store handle failed while executing a command. The original
        exception is available as :attr:`error` and as the ``__cause__``;
        it is not interpreted in any way.
    """

    def __init__(self, command, error):

        self.command = command
        self.error = error
        Error.__init__(self, "%s failed: %s: %s" % (command, type(error).__name__, error))


class DecodeError(Error, ValueError):
    """ A wire value fetched from the store could not be converted back into
        an application value.
    """

    def __init__(self, wire, reason):

        self.wire = wire
        Error.__init__(self, "cannot decode %r: %s" % (wire, reason))


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
