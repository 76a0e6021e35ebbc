import json

from django.core.cache import cache
from django.test import SimpleTestCase, Client

from .test_capture_form import capture_payload

class AgentsApiTest(SimpleTestCase):
    def setUp(self):
        cache.clear()
        self.client = Client()

    def _post(self, path, body):
        return self.client.post(path, data=json.dumps(body), content_type="application/json")

    def test_capture_ok(self):
        resp = self._post("/api/v1/agents/validate", capture_payload())
        self.assertEqual(resp.status_code, 200, resp.content)
        data = resp.json()
        self.assertTrue(data["valid"])
        self.assertEqual(data["agent"]["id_number"], "8001015009087")
        self.assertEqual(data["agent"]["preferred_areas"], ["1", "11"])

    def test_capture_field_errors(self):
        resp = self._post("/api/v1/agents/validate", capture_payload(sa_id_no="8001015009088", bank_name="FNB"))
        self.assertEqual(resp.status_code, 400)
        err = resp.json()["error"]
        self.assertEqual(err["code"], "VALIDATION_FAILED")
        self.assertEqual(err["details"]["sa_id_no"], "Invalid ID number checksum")
        self.assertIn("account_holder", err["details"])

    def test_capture_non_object_body(self):
        resp = self._post("/api/v1/agents/validate", ["x"])
        self.assertEqual(resp.status_code, 400)
        self.assertIn("non_field_errors", resp.json()["error"]["details"])

    def test_capture_form_encoded(self):
        payload = capture_payload(criminal_record_checked="1", criminal_record_date="2024-01-10")
        resp = self.client.post("/api/v1/agents/validate", data=payload)
        self.assertEqual(resp.status_code, 200, resp.content)
        agent = resp.json()["agent"]
        self.assertTrue(agent["criminal_record_checked"])
        self.assertEqual(agent["criminal_record_date"], "2024-01-10")

    def test_search_defaults(self):
        resp = self._post("/api/v1/agents/search/validate", {})
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json()["criteria"], {
            "search_query": "", "search_field": "all", "status": "all", "province": "",
            "date_from": None, "date_to": None,
        })

    def test_search_dates(self):
        resp = self._post("/api/v1/agents/search/validate",
                          {"search_query": "mokoena", "date_from": "2024-01-01", "date_to": "2024-02-01"})
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json()["criteria"]["date_to"], "2024-02-01")

    def test_search_date_range(self):
        resp = self._post("/api/v1/agents/search/validate", {"date_from": "2024-02-01", "date_to": "2024-01-01"})
        self.assertEqual(resp.status_code, 400)
        self.assertEqual(resp.json()["error"]["details"], {"date_to": "End date must be after start date."})

    def test_search_invalid_choices(self):
        resp = self._post("/api/v1/agents/search/validate",
                          {"search_field": "salary", "status": "gone", "search_query": "x" * 101})
        self.assertEqual(resp.status_code, 400)
        self.assertEqual(set(resp.json()["error"]["details"]), {"search_field", "status", "search_query"})
