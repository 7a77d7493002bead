""" Implementation of :class:`RemoteSet`, a handle on a set whose elements
    live in a remote key/value store. Nothing about the contents of the set
    is held locally; every query goes back to the store.
"""

import logging

from . import config
from .errors import InvalidArgument, StoreError
from .serialize import Serializer


logger = logging.getLogger(__name__)


class RemoteSet:
    """ A RemoteSet addresses the set stored under *key* in *store*. The
        *store* is not owned by the RemoteSet and may be shared freely
        between instances; it must provide the primitives documented in
        :class:`kvset.store.Store`. The *options* select how values are
        serialized, see :class:`kvset.config.Options`.

        Every method issues exactly one command to the store. Compound
        sequences, such as checking membership and then adding, are not
        atomic.

        The read-combine methods (:func:`intersection`, :func:`union`,
        :func:`difference`) return decoded members. The store-combine
        methods (:func:`interstore`, :func:`unionstore`, :func:`diffstore`)
        leave the result in the store under a new name and only return
        its size; nothing is fetched or decoded.
    """

    def __init__(self, key, store, options=None):

        if store is None:
            raise InvalidArgument('a store handle must be specified')

        self._key = key
        self._store = store
        self._options = config.options(options)
        self._serializer = Serializer(self._options)


    @property
    def key(self):
        return self._key


    @property
    def store(self):
        return self._store


    @property
    def options(self):
        return self._options


    def _call(self, command, *args):
        """ Issue *command* against the store with the supplied arguments.
            Any failure is wrapped in a :class:`kvset.errors.StoreError`.
        """

        logger.debug('%s %r', command, args)
        method = getattr(self._store, command)

        try:
            return method(*args)
        except StoreError:
            raise
        except Exception as e:
            logger.debug('%s %r failed: %r', command, args, e)
            raise StoreError(command, e) from e


    def _from_store(self, wires):
        """ Decode a collection of wire values returned by the store into a
            list, one entry per stored element. The result is not
            a Python set: distinct wire values can decode to values that
            compare equal, such as 1, 1.0 and True, and the store counts each
            of them separately.
        """

        return self._serializer.decode_all(wires)


    def add(self, value):
        """ Add *value* to the set if it is not already present. Returns True
            if the value was newly added.
        """

        added = self._call('sadd', self._key, self._serializer.encode(value))
        return int(added) > 0


    def append(self, value):
        """ Works like :func:`add`, but returns this RemoteSet so that calls
            can be chained: ``s.append('a').append('b')``.
        """

        self.add(value)
        return self


    def merge(self, *values):
        """ Add every one of *values* with a single store command. Returns the
            number of values that were newly added.
        """

        if len(values) == 0:
            return 0

        wires = [self._serializer.encode(value) for value in values]
        return int(self._call('sadd', self._key, *wires))


    def members(self):
        """ Return all members of the set as a list. The order is arbitrary. """

        return self._from_store(self._call('smembers', self._key))

    get = members


    def member(self, value):
        """ Returns True if *value* is in the set. An absent key is an empty
            set, not an error.
        """

        return bool(self._call('sismember', self._key, self._serializer.encode(value)))

    include = member


    def delete(self, value):
        """ Remove *value* from the set. Removing a value that is not present
            is not an error; the return value is True only if something was
            actually removed.
        """

        removed = self._call('srem', self._key, self._serializer.encode(value))
        return int(removed) > 0


    def clear(self):
        """ Remove the entire set from the store. This affects every handle
            addressing the same key.
        """

        self._call('delete', self._key)


    def length(self):
        """ The number of members in the set. """

        return int(self._call('scard', self._key))

    size = length


    def empty(self):
        return self.length() == 0


    # Read-combine operations. Each accepts one or more other sets, given
    # either as RemoteSet instances or as bare key names.

    def intersection(self, *sets):
        """ Return the members present in this set and in every one of *sets*:

                in_all = set1.intersection(set2, 'set3')

            Also available as ``set1 & set2``.
        """

        keys = [self._key] + keys_from_operands(sets)
        return self._from_store(self._call('sinter', keys))

    inter = intersection
    intersect = intersection


    def union(self, *sets):
        """ Return the members present in this set or in any of *sets*. Also
            available as ``set1 | set2`` and ``set1 + set2``.
        """

        keys = [self._key] + keys_from_operands(sets)
        return self._from_store(self._call('sunion', keys))


    def difference(self, *sets):
        """ Return the members of this set that are not present in any of
            *sets*. The operands are not chained pairwise; the store subtracts
            all of them from this set at once. Also available as
            ``set1 - set2``.
        """

        keys = [self._key] + keys_from_operands(sets)
        return self._from_store(self._call('sdiff', keys))

    diff = difference


    # Store-combine operations. The result is written to the store under
    # *name*, replacing anything already there, and only its size comes back.

    def interstore(self, name, *sets):
        """ Calculate the intersection with *sets* and store it as *name*.
            Returns the number of members in the stored result.
        """

        keys = [self._key] + keys_from_operands(sets)
        return int(self._call('sinterstore', _key_of(name), keys))


    def unionstore(self, name, *sets):
        """ Calculate the union with *sets* and store it as *name*. Returns the
            number of members in the stored result.
        """

        keys = [self._key] + keys_from_operands(sets)
        return int(self._call('sunionstore', _key_of(name), keys))


    def diffstore(self, name, *sets):
        """ Calculate the difference against *sets* and store it as *name*.
            Returns the number of members in the stored result.
        """

        keys = [self._key] + keys_from_operands(sets)
        return int(self._call('sdiffstore', _key_of(name), keys))


    def __len__(self):
        return self.length()


    def __bool__(self):
        return not self.empty()


    def __contains__(self, value):
        return self.member(value)


    def __iter__(self):
        return iter(self.members())


    def __and__(self, other):
        return self.intersection(other)


    def __rand__(self, other):
        return self.intersection(other)


    def __or__(self, other):
        return self.union(other)


    def __ror__(self, other):
        return self.union(other)

    __add__ = __or__
    __radd__ = __ror__


    def __sub__(self, other):
        return self.difference(other)


    def __rsub__(self, other):
        """ Difference with a bare key name on the left: ``'other' - s``. """

        return RemoteSet(other, self._store, self._options).difference(self)


    def __eq__(self, other):
        """ Compare the full contents of this set against *other*, which may
            be another RemoteSet or any local collection. This fetches every
            member from the store.
        """

        if isinstance(other, RemoteSet):
            other = other.members()
        elif not isinstance(other, (set, frozenset, list, tuple)):
            return NotImplemented

        return _same_members(self.members(), other)


    def __ne__(self, other):
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    __hash__ = None


    def __str__(self):
        return ', '.join(str(value) for value in self.members())


    def __repr__(self):
        return 'kvset.RemoteSet(%r)' % (self._key,)


# end of class RemoteSet



def keys_from_operands(sets):
    """ Translate the operands of a multi-set operation into key names. Each
        operand may be a :class:`RemoteSet`, in which case its key is used,
        or anything else, which is taken verbatim as a key name. Whether the
        named keys exist is left to the store.
    """

    if len(sets) == 0:
        raise InvalidArgument('must pass in one or more set names')

    return [_key_of(operand) for operand in sets]



def _key_of(operand):

    if isinstance(operand, RemoteSet):
        return operand.key
    return operand



def _same_members(mine, other):
    """ Compare two collections as sets. Unhashable members, which can come
        back from a marshaled store, fall back to a pairwise comparison.
    """

    try:
        return set(mine) == set(other)
    except TypeError:
        pass

    mine = list(mine)
    other = list(other)

    for value in mine:
        if value not in other:
            return False

    for value in other:
        if value not in mine:
            return False

    return True


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
