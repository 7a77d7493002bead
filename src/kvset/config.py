""" Serialization options for :class:`kvset.RemoteSet`. An :class:`Options`
    instance is immutable once constructed; a :class:`RemoteSet` holds on to
    the one it was given for its entire lifetime.

    Process-wide defaults are drawn from the environment when :func:`defaults`
    is called:

    ``KVSET_MARSHAL``
        The marshaling strategy to use when the caller does not specify one.
        Empty or unset means plain passthrough.
"""

import os

from .errors import InvalidArgument


strategies = (None, 'json', 'msgpack')


class Options:
    """ Immutable collection of serialization options. The only option
        currently recognized is *marshal*, which selects how application
        values are encoded before being sent to the store:

        ``None``
            Values are passed through unmodified; suitable for plain strings.
        ``'json'``
            Values are encoded as JSON.
        ``'msgpack'``
            Values are encoded as MessagePack.

        A *marshal* of True is accepted as a synonym for ``'json'``.
    """

    __slots__ = ('_marshal',)

    def __init__(self, marshal=None):

        if marshal is True:
            marshal = 'json'
        elif marshal is False or marshal == '':
            marshal = None

        if marshal is not None:
            marshal = str(marshal).lower()

        if marshal not in strategies:
            raise InvalidArgument('unknown marshal strategy: ' + repr(marshal))

        object.__setattr__(self, '_marshal', marshal)


    @property
    def marshal(self):
        return self._marshal


    def __setattr__(self, name, value):
        raise AttributeError('Options instances are immutable')


    def __delattr__(self, name):
        raise AttributeError('Options instances are immutable')


    def __eq__(self, other):
        if not isinstance(other, Options):
            return NotImplemented
        return self._marshal == other._marshal


    def __hash__(self):
        return hash(self._marshal)


    def __repr__(self):
        return 'Options(marshal=%r)' % (self._marshal,)


# end of class Options



def defaults():
    """ Return the :class:`Options` to use when the caller did not provide
        any, as dictated by the environment.
    """

    marshal = os.environ.get('KVSET_MARSHAL', '').strip()
    return Options(marshal)



def options(value=None):
    """ Normalize *value* into an :class:`Options` instance. *value* may be
        None (use :func:`defaults`), a dictionary of keyword arguments for
        :class:`Options`, or an :class:`Options` instance, which is returned
        as-is.
    """

    if value is None:
        return defaults()

    if isinstance(value, Options):
        return value

    if isinstance(value, dict):
        try:
            return Options(**value)
        except TypeError as e:
            raise InvalidArgument('unrecognized option: ' + str(e))

    raise InvalidArgument('options must be a dict or Options, not ' + type(value).__name__)


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
