from __future__ import annotations

import unittest
from pathlib import Path
import sys

import httpx

sys.path.insert(0, str(Path(__file__).resolve().parents[2]))

from board_core.client import (  # noqa: E402
    ENDPOINTS,
    DecodeError,
    FetchError,
    HttpStatusError,
    TransportError,
    fetch_json,
    fetch_snapshot,
    make_client,
)

PAYLOADS = {
    "/status": {"status": "ok"},
    "/schema/getters": {"temp": "float"},
    "/schema/executors": {"pump": "bool"},
    "/getters": {"temp": {"valid": True, "stampMs": 12, "data": {"type": "float", "value": 21.5}}},
    "/executors": [{"id": 1, "name": "pump", "valid": True, "mode": "AUTO"}],
}


def backend(overrides: dict | None = None, seen: list | None = None) -> httpx.MockTransport:
    overrides = overrides or {}

    def handler(request: httpx.Request) -> httpx.Response:
        if seen is not None:
            seen.append(request)
        path = request.url.path
        if path in overrides:
            override = overrides[path]
            if isinstance(override, Exception):
                raise override
            return override
        return httpx.Response(200, json=PAYLOADS[path])

    return httpx.MockTransport(handler)


class FetchJsonTests(unittest.IsolatedAsyncioTestCase):
    async def test_success_and_no_store_headers(self):
        seen: list[httpx.Request] = []
        async with make_client("http://board.test", transport=backend(seen=seen)) as client:
            payload = await fetch_json(client, "/status")
        self.assertEqual(payload, {"status": "ok"})
        self.assertEqual(seen[0].headers["cache-control"], "no-store")
        self.assertEqual(seen[0].method, "GET")

    async def test_status_error(self):
        transport = backend({"/getters": httpx.Response(503, text="busy")})
        async with make_client("http://board.test", transport=transport) as client:
            with self.assertRaises(HttpStatusError) as ctx:
                await fetch_json(client, "/getters")
        self.assertEqual(ctx.exception.status_code, 503)
        self.assertEqual(ctx.exception.path, "/getters")
        self.assertEqual(str(ctx.exception), "/getters -> 503")

    async def test_transport_error(self):
        transport = backend({"/status": httpx.ConnectError("connection refused")})
        async with make_client("http://board.test", transport=transport) as client:
            with self.assertRaises(TransportError) as ctx:
                await fetch_json(client, "/status")
        self.assertIsInstance(ctx.exception.transport_error, httpx.ConnectError)
        self.assertIn("connection refused", str(ctx.exception))

    async def test_decode_error(self):
        transport = backend({"/executors": httpx.Response(200, content=b"{not json")})
        async with make_client("http://board.test", transport=transport) as client:
            with self.assertRaises(DecodeError):
                await fetch_json(client, "/executors")

    async def test_corrupt_compressed_body_is_decode_error(self):
        corrupt = httpx.Response(200, headers={"Content-Encoding": "gzip"}, stream=httpx.ByteStream(b"not gzip at all"))
        async with make_client("http://board.test", transport=backend({"/getters": corrupt})) as client:
            with self.assertRaises(DecodeError) as ctx:
                await fetch_json(client, "/getters")
        self.assertIsInstance(ctx.exception.transport_error, httpx.DecodingError)
        self.assertEqual(ctx.exception.path, "/getters")

    async def test_other_request_errors_are_fetch_errors(self):
        transport = backend({"/status": httpx.TooManyRedirects("redirect loop")})
        async with make_client("http://board.test", transport=transport) as client:
            with self.assertRaises(TransportError) as ctx:
                await fetch_json(client, "/status")
        self.assertIn("redirect loop", str(ctx.exception))

    async def test_unknown_path_rejected(self):
        async with make_client("http://board.test", transport=backend()) as client:
            with self.assertRaises(ValueError):
                await fetch_json(client, "/getters/temp")


class FetchSnapshotTests(unittest.IsolatedAsyncioTestCase):
    async def test_reads_all_five(self):
        seen: list[httpx.Request] = []
        async with make_client("http://board.test", transport=backend(seen=seen)) as client:
            snapshot = await fetch_snapshot(client)
        self.assertEqual(sorted(r.url.path for r in seen), sorted(ENDPOINTS))
        self.assertEqual(snapshot.status, {"status": "ok"})
        self.assertEqual(snapshot.executors, PAYLOADS["/executors"])

    async def test_any_failure_fails_the_set(self):
        for path in ENDPOINTS:
            transport = backend({path: httpx.Response(500)})
            async with make_client("http://board.test", transport=transport) as client:
                with self.assertRaises(FetchError) as ctx:
                    await fetch_snapshot(client)
            self.assertEqual(ctx.exception.path, path)


if __name__ == "__main__":
    unittest.main()
