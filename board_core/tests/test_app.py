from __future__ import annotations

import contextlib
import io
import json
import unittest
from pathlib import Path
from unittest import mock
import sys

import httpx

sys.path.insert(0, str(Path(__file__).resolve().parents[2]))

from board_core import app  # noqa: E402
from board_core.client import make_client  # noqa: E402

PAYLOADS = {
    "/status": {"status": "ok"},
    "/schema/getters": {"temp": "float"},
    "/schema/executors": {},
    "/getters": {"temp": {"valid": True, "stampMs": 12, "data": {"type": "float", "value": 21.5}}},
    "/executors": [{"id": 2, "name": "pump", "valid": False, "mode": "manual", "stampMs": 0, "data": None}],
}


def _fake_client(fail_path: str | None = None):
    def handler(request: httpx.Request) -> httpx.Response:
        if request.url.path == fail_path:
            return httpx.Response(500)
        return httpx.Response(200, json=PAYLOADS[request.url.path])

    def factory(base_url: str, timeout: float = 5.0):
        return make_client(base_url, timeout, transport=httpx.MockTransport(handler))

    return factory


class AppTests(unittest.TestCase):
    def _run(self, argv: list[str], fail_path: str | None = None) -> tuple[int, str]:
        out = io.StringIO()
        with mock.patch.object(app, "make_client", _fake_client(fail_path)), mock.patch.object(app, "setup_logging"):
            with contextlib.redirect_stdout(out):
                code = app.main(argv)
        return code, out.getvalue()

    def test_json_output(self):
        code, output = self._run(["--json", "--url", "http://board.test"])
        self.assertEqual(code, 0)
        payload = json.loads(output)
        self.assertTrue(payload["connected"])
        self.assertEqual(payload["getters"]["items"][0]["value"], "float:21.5")
        self.assertEqual(payload["executors"]["items"][0]["mode"], "MANUAL")
        self.assertEqual(payload["base_url"], "http://board.test")

    def test_json_output_with_filter(self):
        code, output = self._run(["--json", "--url", "http://board.test", "--filter", "pump"])
        payload = json.loads(output)
        self.assertEqual(code, 0)
        self.assertEqual(payload["getters"]["items"], [])
        self.assertEqual(payload["getters"]["meta"]["count"], 1)

    def test_failed_cycle_exit_code(self):
        code, output = self._run(["--json", "--url", "http://board.test"], fail_path="/executors")
        payload = json.loads(output)
        self.assertEqual(code, 1)
        self.assertFalse(payload["connected"])
        self.assertEqual(payload["getters"]["status"], "error")

    def test_bad_refresh_rejected_by_parser(self):
        with contextlib.redirect_stderr(io.StringIO()):
            with self.assertRaises(SystemExit):
                app.main(["--refresh", "1234"])


if __name__ == "__main__":
    unittest.main()
