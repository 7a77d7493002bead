""" Python handle on sets stored in a remote key/value store. A
    :class:`RemoteSet` translates set algebra (membership, union,
    intersection, difference, cardinality) into store commands, serializing
    values on the way in and out.
"""

# Utility components.

from . import json
from . import errors
from . import config

# Primary public-facing interfaces.

from .errors import Error, InvalidArgument, StoreError, DecodeError
from .config import Options
from .serialize import Serializer
from .store import Store
from .set import RemoteSet

# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
