''' Wrapper module providing the equivalent of :func:`json.loads` and
    :func:`json.dumps`, backed by msgspec. As with the encoders msgspec
    provides, :func:`dumps` always returns bytes.
'''

import msgspec


encoder = msgspec.json.Encoder()
decoder = msgspec.json.Decoder()

dumps = encoder.encode
loads = decoder.decode


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
