import json
from tornado.testing import AsyncHTTPTestCase

from saltids import MultiSaltIDs, SaltIDs
from saltids.web import make_app


SALT = 'this is my salt'


class TestApi(AsyncHTTPTestCase):
    def get_app(self):
        return make_app(SaltIDs(SALT), MultiSaltIDs(SALT))

    def post_json(self, url, obj):
        return self.fetch(
            url,
            method='POST',
            body=json.dumps(obj),
            headers={'Content-Type': 'application/json'},
        )

    def test_encode(self):
        response = self.post_json('/encode', {'numbers': [683, 94108, 123, 5]})
        self.assertEqual(response.code, 200)
        self.assertEqual(json.loads(response.body),
                         {'hashid': 'aBMswoO2UB3Sj'})

    def test_encode_invalid(self):
        for body in [{}, {'numbers': 12}, {'numbers': [1, -2]},
                     {'numbers': ['1']}, {'numbers': [True]}]:
            response = self.post_json('/encode', body)
            self.assertEqual(response.code, 400)
            self.assertIn('error', json.loads(response.body))

    def test_decode(self):
        response = self.post_json('/decode', {'hashid': 'aBMswoO2UB3Sj'})
        self.assertEqual(response.code, 200)
        self.assertEqual(json.loads(response.body),
                         {'numbers': [683, 94108, 123, 5]})

    def test_decode_invalid(self):
        response = self.post_json('/decode', {'hashid': 'NV!'})
        self.assertEqual(response.code, 400)
        body = json.loads(response.body)
        self.assertEqual(body['kind'], 'non_alphabet_chars')

        response = self.post_json('/decode', {'hashid': 42})
        self.assertEqual(response.code, 400)

    def test_hex(self):
        response = self.post_json('/encode-hex', {'hex': 'deadbeef'})
        self.assertEqual(response.code, 200)
        hashid = json.loads(response.body)['hashid']

        response = self.post_json('/decode-hex', {'hashid': hashid})
        self.assertEqual(response.code, 200)
        self.assertEqual(json.loads(response.body), {'hex': 'deadbeef'})

        response = self.post_json('/encode-hex', {'hex': 'nothex'})
        self.assertEqual(response.code, 400)
        response = self.post_json('/decode-hex', {'hashid': 'NV'})
        self.assertEqual(response.code, 400)

    def test_keys(self):
        response = self.post_json('/keys/run/encode', {'numbers': [42]})
        self.assertEqual(response.code, 200)
        hashid = json.loads(response.body)['hashid']
        self.assertEqual(hashid, SaltIDs('run' + SALT).encode(42))

        response = self.post_json('/keys/run/decode', {'hashid': hashid})
        self.assertEqual(response.code, 200)
        self.assertEqual(json.loads(response.body), {'numbers': [42]})

    def test_bad_json(self):
        response = self.fetch(
            '/encode',
            method='POST',
            body='{"numbers": [',
            headers={'Content-Type': 'application/json'},
        )
        self.assertEqual(response.code, 400)
        self.assertEqual(json.loads(response.body), {'error': 'Invalid JSON'})

        response = self.fetch('/encode', method='POST', body='numbers=1')
        self.assertEqual(response.code, 400)

        response = self.post_json('/encode', [1, 2])
        self.assertEqual(response.code, 400)

    def test_health(self):
        response = self.fetch('/health')
        self.assertEqual(response.code, 200)
        self.assertEqual(response.body, b'Ok')

        self._app.is_exiting = True
        response = self.fetch('/health')
        self.assertEqual(response.code, 503)

    def test_metrics(self):
        self.post_json('/decode', {'hashid': 'NV!'})
        response = self.fetch('/metrics')
        self.assertEqual(response.code, 200)
        self.assertIn(b'saltids_requests_total', response.body)
        self.assertIn(b'saltids_decode_failures_total', response.body)

    def test_not_found(self):
        response = self.fetch('/nope')
        self.assertEqual(response.code, 404)
