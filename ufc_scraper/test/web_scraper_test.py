import sys
import os
import asyncio
import unittest

# Add project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..', '..'))
if project_root not in sys.path:
    sys.path.insert(0, project_root)

import httpx

from ufc_scraper.config import Config
from ufc_scraper.web_scraper import NetworkError, WebScraper

URL = "https://www.ufc.com/events"


class TestWebScraper(unittest.IsolatedAsyncioTestCase):

    def setUp(self):
        self.config = Config()
        self.config.retry_attempts = 3
        self.config.retry_wait_min = 0
        self.config.retry_wait_max = 0
        self.requests = []

    def scraper_for(self, handler):
        client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
        self.addAsyncCleanup(client.aclose)
        return WebScraper(self.config, client=client)

    async def test_returns_page_text_with_user_agent(self):
        def handler(request):
            self.requests.append(request)
            return httpx.Response(200, text="<html>events</html>")

        async with self.scraper_for(handler) as scraper:
            text = await scraper.fetch(URL)

        self.assertEqual("<html>events</html>", text)
        self.assertEqual(self.config.user_agent, self.requests[0].headers["User-Agent"])

    async def test_client_error_is_not_retried(self):
        def handler(request):
            self.requests.append(request)
            return httpx.Response(404)

        async with self.scraper_for(handler) as scraper:
            with self.assertRaises(NetworkError) as ctx:
                await scraper.fetch(URL)

        self.assertEqual(404, ctx.exception.status_code)
        self.assertEqual(URL, ctx.exception.url)
        self.assertEqual(1, len(self.requests))

    async def test_server_error_is_retried(self):
        def handler(request):
            self.requests.append(request)
            if len(self.requests) < 3:
                return httpx.Response(503)
            return httpx.Response(200, text="ok")

        async with self.scraper_for(handler) as scraper:
            self.assertEqual("ok", await scraper.fetch(URL))
        self.assertEqual(3, len(self.requests))

    async def test_transport_failure_raises_network_error(self):
        def handler(request):
            self.requests.append(request)
            raise httpx.ConnectError("connection refused", request=request)

        async with self.scraper_for(handler) as scraper:
            with self.assertRaises(NetworkError) as ctx:
                await scraper.fetch(URL)

        self.assertIsNone(ctx.exception.status_code)
        self.assertEqual(3, len(self.requests))

    async def test_timeout_raises_network_error(self):
        async def handler(request):
            await asyncio.sleep(1)
            return httpx.Response(200, text="too late")

        async with self.scraper_for(handler) as scraper:
            with self.assertRaises(NetworkError) as ctx:
                await scraper.fetch(URL, timeout=0.05)

        self.assertIn("timed out", str(ctx.exception))

    async def test_fetch_outside_context_manager(self):
        scraper = WebScraper(self.config)
        with self.assertRaises(RuntimeError):
            await scraper.fetch(URL)


if __name__ == '__main__':
    unittest.main(argv=['first-arg-is-ignored'], exit=False)
