""" Conversion of application values to and from the wire representation
    stored in the remote set.

    The store deduplicates set elements by exact equality of their wire
    values, not of the application values they came from. Two values that
    compare equal in Python but encode differently are stored as distinct
    elements; for example, ``1`` and ``1.0`` under JSON, or two dictionaries
    with the same contents inserted in a different order. Callers that need
    such values to collapse must normalize them before adding them.
"""

import msgspec

from . import config
from . import json
from .errors import DecodeError


class Serializer:
    """ Encode and decode values according to the marshal strategy named in
        the supplied :class:`kvset.config.Options`. With no marshaling
        configured, values pass through untouched in both directions.
    """

    def __init__(self, options=None):

        self.options = config.options(options)
        marshal = self.options.marshal

        if marshal is None:
            self._encode = _passthrough
            self._decode = _passthrough
        elif marshal == 'json':
            self._encode = json.dumps
            self._decode = json.loads
        elif marshal == 'msgpack':
            self._encode = _msgpack_encoder.encode
            self._decode = _msgpack_decoder.decode


    def encode(self, value):
        """ Return the wire representation of *value*. The same value always
            yields the same wire representation.
        """

        return self._encode(value)


    def decode(self, wire):
        """ Return the application value for *wire*, which must have been
            produced by :func:`encode` with the same options. Anything else
            may raise :class:`kvset.errors.DecodeError`.
        """

        try:
            return self._decode(wire)
        except (msgspec.DecodeError, UnicodeDecodeError, TypeError) as e:
            raise DecodeError(wire, e) from e


    def decode_all(self, wires):
        """ Decode every element of *wires*, returning a list. The first
            failure aborts the whole operation; no partial result is
            returned.
        """

        return [self.decode(wire) for wire in wires]


# end of class Serializer



def _passthrough(value):
    return value


_msgpack_encoder = msgspec.msgpack.Encoder()
_msgpack_decoder = msgspec.msgpack.Decoder()


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
