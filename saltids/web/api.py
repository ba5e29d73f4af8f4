import prometheus_client

from ..errors import DecodeError, DecodeErrorKind
from ..utils import PromMeasureRequest
from .base import BaseHandler


PROM_REQUESTS = PromMeasureRequest(
    count=prometheus_client.Counter(
        'saltids_requests_total',
        "API requests",
        ['name'],
    ),
    time=prometheus_client.Histogram(
        'saltids_request_seconds',
        "API request time",
        ['name'],
    ),
)

PROM_DECODE_FAILURES = prometheus_client.Counter(
    'saltids_decode_failures_total',
    "Ids that failed to decode",
    ['kind'],
)
for kind in DecodeErrorKind:
    PROM_DECODE_FAILURES.labels(kind.value).inc(0)


def _is_number(value):
    return (isinstance(value, int) and not isinstance(value, bool) and
            value >= 0)


class BaseApiHandler(BaseHandler):
    def check_xsrf_cookie(self):
        pass

    def get_numbers(self):
        body = self.get_json()
        numbers = body.get('numbers')
        if (
            not isinstance(numbers, list)
            or not all(_is_number(n) for n in numbers)
        ):
            return None
        return numbers

    def get_string(self, name):
        body = self.get_json()
        value = body.get(name)
        if not isinstance(value, str):
            return None
        return value

    def send_decode_error(self, error):
        PROM_DECODE_FAILURES.labels(error.kind.value).inc()
        return self.send_error_json(400, str(error), error.kind.value)


class Encode(BaseApiHandler):
    @PROM_REQUESTS.sync('encode')
    def post(self):
        numbers = self.get_numbers()
        if numbers is None:
            return self.send_error_json(
                400,
                "Expected JSON object with 'numbers' list of non-negative "
                "integers",
            )
        return self.send_json({'hashid': self.application.ids.encode(numbers)})


class Decode(BaseApiHandler):
    @PROM_REQUESTS.sync('decode')
    def post(self):
        hashid = self.get_string('hashid')
        if hashid is None:
            return self.send_error_json(
                400,
                "Expected JSON object with 'hashid' key",
            )
        try:
            numbers = self.application.ids.decode(hashid)
        except DecodeError as e:
            return self.send_decode_error(e)
        return self.send_json({'numbers': list(numbers)})


class EncodeHex(BaseApiHandler):
    @PROM_REQUESTS.sync('encode_hex')
    def post(self):
        hexstr = self.get_string('hex')
        if hexstr is None:
            return self.send_error_json(
                400,
                "Expected JSON object with 'hex' key",
            )
        hashid = self.application.ids.encode_hex(hexstr)
        if hashid is None:
            return self.send_error_json(400, "Invalid hexadecimal string")
        return self.send_json({'hashid': hashid})


class DecodeHex(BaseApiHandler):
    @PROM_REQUESTS.sync('decode_hex')
    def post(self):
        hashid = self.get_string('hashid')
        if hashid is None:
            return self.send_error_json(
                400,
                "Expected JSON object with 'hashid' key",
            )
        hexstr = self.application.ids.decode_hex(hashid)
        if hexstr is None:
            return self.send_error_json(400, "Invalid id")
        return self.send_json({'hex': hexstr})


class KeyEncode(BaseApiHandler):
    @PROM_REQUESTS.sync('key_encode')
    def post(self, key):
        numbers = self.get_numbers()
        if numbers is None:
            return self.send_error_json(
                400,
                "Expected JSON object with 'numbers' list of non-negative "
                "integers",
            )
        return self.send_json({
            'hashid': self.application.multi_ids.encode(key, numbers),
        })


class KeyDecode(BaseApiHandler):
    @PROM_REQUESTS.sync('key_decode')
    def post(self, key):
        hashid = self.get_string('hashid')
        if hashid is None:
            return self.send_error_json(
                400,
                "Expected JSON object with 'hashid' key",
            )
        try:
            numbers = self.application.multi_ids.decode(key, hashid)
        except DecodeError as e:
            return self.send_decode_error(e)
        return self.send_json({'numbers': list(numbers)})


class Health(BaseHandler):
    @PROM_REQUESTS.sync('health')
    def get(self):
        self.set_header('Content-Type', 'text/plain')

        # We're not ready if we've been asked to shut down
        if self.application.is_exiting:
            self.set_status(503, "Shutting down")
            return self.finish('Shutting down')

        return self.finish('Ok')


class Metrics(BaseHandler):
    def get(self):
        self.set_header('Content-Type', prometheus_client.CONTENT_TYPE_LATEST)
        return self.finish(prometheus_client.generate_latest())
