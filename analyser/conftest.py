import threading
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer

import pytest

SAMPLE_HTML = """
    <html>
        <body>
            <div id="example">
                <p>Hello, world!</p>
            </div>
        </body>
    </html>
"""


@pytest.fixture
def sample_html():
    return SAMPLE_HTML


class _Handler(BaseHTTPRequestHandler):
    # path -> (status, body bytes, content type)
    routes = {}
    seen_headers = []

    def do_GET(self):
        self.seen_headers.append(dict(self.headers))
        status, body, content_type = self.routes.get(
            self.path, (404, b"not found", "text/plain")
        )
        self.send_response(status)
        self.send_header("Content-Type", content_type)
        self.send_header("Content-Length", str(len(body)))
        self.end_headers()
        self.wfile.write(body)

    def log_message(self, format, *args):
        pass


@pytest.fixture
def http_server(monkeypatch):
    """Serve canned responses on localhost; yields (base_url, routes, seen_headers)."""
    for var in ("no_proxy", "NO_PROXY"):
        monkeypatch.setenv(var, "127.0.0.1,localhost")

    handler = type("Handler", (_Handler,), {"routes": {}, "seen_headers": []})
    server = ThreadingHTTPServer(("127.0.0.1", 0), handler)
    thread = threading.Thread(target=server.serve_forever, daemon=True)
    thread.start()
    try:
        yield f"http://127.0.0.1:{server.server_port}", handler.routes, handler.seen_headers
    finally:
        server.shutdown()
        server.server_close()
