import json

from django.core.cache import cache
from django.test import SimpleTestCase, Client, override_settings

from core.exceptions import flatten_errors

class ThrottleTest(SimpleTestCase):
    def setUp(self):
        cache.clear()
        self.client = Client()

    def tearDown(self):
        cache.clear()

    @override_settings(IDENTITY_THROTTLE_MINUTE="2/min")
    def test_throttled_envelope(self):
        body = json.dumps({"id_type": "sa_id", "value": "8001015009087"})
        for _ in range(2):
            resp = self.client.post("/api/v1/identity/validate", data=body, content_type="application/json")
            self.assertEqual(resp.status_code, 200)
        resp = self.client.post("/api/v1/identity/validate", data=body, content_type="application/json")
        self.assertEqual(resp.status_code, 429)
        err = resp.json()["error"]
        self.assertEqual(err["code"], "THROTTLED")
        self.assertIn("retry_after", err["details"])
        self.assertIn("Retry-After", resp)

    @override_settings(IDENTITY_THROTTLE_MINUTE=None, IDENTITY_THROTTLE_DAY=None)
    def test_no_rate_means_no_throttle(self):
        for _ in range(5):
            self.assertEqual(self.client.get("/api/v1/identity/policy").status_code, 200)

class ErrorEnvelopeTest(SimpleTestCase):
    def test_not_found_is_plain_django(self):
        self.assertEqual(Client().get("/api/v1/nope").status_code, 404)

    def test_flatten_errors(self):
        self.assertEqual(flatten_errors({"a": ["x", "y"], "b": {"c": ["z"]}, "d": []}), {"a": "x", "b.c": "z"})
        self.assertEqual(flatten_errors(["boom"]), {"non_field_errors": "boom"})

class HealthAndSchemaTest(SimpleTestCase):
    def test_health(self):
        resp = Client().get("/health/")
        self.assertEqual(resp.status_code, 200)
        data = resp.json()
        self.assertEqual(data["status"], "ok")
        self.assertEqual(data["name"], "AgentCheck")
        self.assertEqual(data["env"], "prod")
        self.assertEqual(set(data), {"status", "name", "version", "env"})

    @override_settings(DEBUG=True)
    def test_health_env_follows_debug(self):
        self.assertEqual(Client().get("/health/").json()["env"], "dev")

    def test_schema(self):
        cache.clear()
        resp = Client().get("/api/v1/schema/")
        self.assertEqual(resp.status_code, 200)
        self.assertIn(b"/api/v1/identity/validate", resp.content)
