import logging
import kvset
import pytest


class Unreachable(Exception):
    pass


def test_store_error(store):

    s = kvset.RemoteSet('letters', store)
    original = Unreachable('connection refused')
    store.fail = original

    with pytest.raises(kvset.StoreError) as excinfo:
        s.add('a')

    error = excinfo.value
    assert error.error is original
    assert error.__cause__ is original
    assert error.command == 'sadd'
    assert 'connection refused' in str(error)


def test_every_operation_wraps(sets, store):

    a, b = sets
    store.fail = TimeoutError('timed out')

    operations = (
        lambda: a.add('q'),
        lambda: a.merge('q', 'r'),
        lambda: a.member('q'),
        lambda: a.delete('q'),
        lambda: a.clear(),
        lambda: a.members(),
        lambda: a.length(),
        lambda: a.empty(),
        lambda: a.intersection(b),
        lambda: a.union(b),
        lambda: a.difference(b),
        lambda: a.interstore('tmp', b),
        lambda: a.unionstore('tmp', b),
        lambda: a.diffstore('tmp', b),
        lambda: 'q' in a,
        lambda: len(a),
        lambda: a == {'x'},
    )

    for operation in operations:
        with pytest.raises(kvset.StoreError):
            operation()

    # One attempt per operation; no retries.

    assert len(store.commands) == len(operations)


def test_store_error_passes_through(store):

    s = kvset.RemoteSet('letters', store)
    original = kvset.StoreError('sadd', Unreachable('down'))
    store.fail = original

    with pytest.raises(kvset.StoreError) as excinfo:
        s.add('a')

    assert excinfo.value is original


def test_hierarchy():

    assert issubclass(kvset.InvalidArgument, kvset.Error)
    assert issubclass(kvset.StoreError, kvset.Error)
    assert issubclass(kvset.DecodeError, kvset.Error)
    assert issubclass(kvset.InvalidArgument, ValueError)


def test_commands_logged(store, caplog):

    s = kvset.RemoteSet('letters', store)

    with caplog.at_level(logging.DEBUG, logger='kvset'):
        s.add('a')
        s.union('other')

    messages = [record.getMessage() for record in caplog.records]
    assert any(message.startswith('sadd') for message in messages)
    assert any(message.startswith('sunion') for message in messages)


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
