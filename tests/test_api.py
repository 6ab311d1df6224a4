import unittest
from fastapi.testclient import TestClient
from junction.domain import config
from junction.main import app

class TestSignalApi(unittest.TestCase):
    def test_lifecycle(self):
        with TestClient(app) as client:
            res = client.get("/api/signal")
            self.assertEqual(res.status_code, 200)
            data = res.json()
            self.assertEqual(data["phase"], "P1")
            self.assertEqual(data["colours"], {"axisA": "Stop", "axisB": "Go"})
            self.assertFalse(data["running"])
            self.assertEqual(data["standardDwell"], config.DEFAULT_STANDARD_DWELL_MS)

            res = client.post("/api/signal/start")
            self.assertEqual(res.status_code, 200)
            self.assertTrue(res.json()["running"])

            res = client.post("/api/signal/start")
            self.assertEqual(res.status_code, 409)

            res = client.post("/api/signal/stop")
            self.assertEqual(res.status_code, 200)
            self.assertFalse(res.json()["running"])

    def test_root(self):
        with TestClient(app) as client:
            self.assertEqual(client.get("/").status_code, 200)

if __name__ == '__main__':
    unittest.main()
