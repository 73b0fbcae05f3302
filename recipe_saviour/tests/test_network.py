import asyncio
import unittest
import httpx
from recipe_saviour.domain.errors import PageFetchError
from recipe_saviour.utilities.network import fetch_page, normalize_url


def fetch_with(handler, url="https://example.com/recipe"):
    async def run():
        async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
            return await fetch_page(url, client)
    return asyncio.run(run())


class TestNormalizeUrl(unittest.TestCase):

    def test_scheme_is_added(self):
        self.assertEqual(normalize_url("  example.com/recipe "), "https://example.com/recipe")
        self.assertEqual(normalize_url("http://example.com"), "http://example.com")

    def test_invalid_urls(self):
        for raw in ("", "hello", "not a url", "https://"):
            with self.assertRaises(PageFetchError, msg=raw):
                normalize_url(raw)


class TestFetchPage(unittest.TestCase):

    def test_returns_html(self):
        html = fetch_with(lambda request: httpx.Response(200, text="<h1>Soup</h1>"))
        self.assertEqual(html, "<h1>Soup</h1>")

    def test_sends_user_agent(self):
        seen = {}

        def handler(request):
            seen['ua'] = request.headers.get('user-agent')
            return httpx.Response(200, text="ok")

        fetch_with(handler)
        self.assertTrue(seen['ua'])

    def test_http_error_status(self):
        with self.assertRaises(PageFetchError) as ctx:
            fetch_with(lambda request: httpx.Response(404))
        self.assertIn("404", ctx.exception.message)

    def test_connection_error(self):
        def handler(request):
            raise httpx.ConnectError("refused", request=request)

        with self.assertRaises(PageFetchError) as ctx:
            fetch_with(handler)
        self.assertEqual(ctx.exception.url, "https://example.com/recipe")

    def test_timeout(self):
        def handler(request):
            raise httpx.ReadTimeout("slow", request=request)

        with self.assertRaises(PageFetchError) as ctx:
            fetch_with(handler)
        self.assertIn("too long", ctx.exception.message)


if __name__ == '__main__':
    unittest.main()
