"""Static Site — files from ./public with API routes behind them.

Demonstrates:
- StaticFilesHandler serving ./public (``/`` maps to index.html)
- Routes answering anything the handler passes through
- A custom 400 page for refused paths (``/../x``, bad percent-escapes)

Run:
    python app.py
"""

import html
from pathlib import Path

from wren import App, AppConfig, StaticFilesHandler

PUBLIC_DIR = Path(__file__).parent / "public"

app = App(AppConfig(debug=True))
app.add_middleware(StaticFilesHandler(PUBLIC_DIR))


@app.route("/api/status")
def status():
    return ("ok", 200)


@app.error(400)
def refused(request, exc):
    return f"<h1>Refused</h1><p>{html.escape(exc.detail)}</p>"


@app.error(404)
def missing():
    return "<h1>404</h1><p>Nothing here.</p>"


if __name__ == "__main__":
    app.run()
