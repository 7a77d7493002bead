import pytest

import kvset
from memorystore import MemoryStore


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):

    # The default marshal strategy comes from the environment; make sure a
    # developer's shell does not leak into the tests.

    monkeypatch.delenv('KVSET_MARSHAL', raising=False)


@pytest.fixture
def store():
    return MemoryStore()


@pytest.fixture
def sets(store):
    """ Two populated sets, A = {x, y} and B = {y, z}, sharing one store. """

    a = kvset.RemoteSet('a', store)
    b = kvset.RemoteSet('b', store)

    a.merge('x', 'y')
    b.merge('y', 'z')

    del store.commands[:]

    return a, b

# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
