from tornado.routing import URLSpec

from .base import Application
from . import api


def make_app(ids, multi_ids, debug=False, shutdown_time=30):
    return Application(
        [
            URLSpec('/encode', api.Encode, name='encode'),
            URLSpec('/decode', api.Decode, name='decode'),
            URLSpec('/encode-hex', api.EncodeHex, name='encode_hex'),
            URLSpec('/decode-hex', api.DecodeHex, name='decode_hex'),
            URLSpec('/keys/([^/]+)/encode', api.KeyEncode, name='key_encode'),
            URLSpec('/keys/([^/]+)/decode', api.KeyDecode, name='key_decode'),
            URLSpec('/health', api.Health, name='health'),
            URLSpec('/metrics', api.Metrics, name='metrics'),
        ],
        ids=ids,
        multi_ids=multi_ids,
        debug=debug,
        shutdown_time=shutdown_time,
    )
