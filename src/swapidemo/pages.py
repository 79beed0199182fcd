"""HTML for the home page served at ``/`` and ``/index.html``."""

from __future__ import annotations

from html import escape

from swapidemo.models import Stats

PAGE_HEAD = """
  <head>
    <title>Star Wars API Demo</title>
    <style>
      body   { font-family: Arial, sans-serif; max-width: 800px; margin: 0 auto; padding: 20px; }
      h1     { color: #FFE81F; background-color: #000; padding: 10px; }
      button { background-color: #FFE81F; border: none; padding: 10px 20px; cursor: pointer; }
      .footer{ margin-top: 50px; font-size: 12px; color: #666; }
      pre    { background: #f4f4f4; padding: 10px; border-radius: 5px; }
    </style>
  </head>
"""

PAGE_SCRIPT = """
    <script>
      function fetchData() {
        document.getElementById('results').innerHTML = '<p>Loading data...</p>';
        fetch('/api')
          .then(res => res.text())
          .then(() => {
            alert('API request made! Check server console.');
            document.getElementById('results').innerHTML = '<p>Data fetched! Check server console.</p>';
          })
          .catch(err => {
            document.getElementById('results').innerHTML = '<p>Error: ' + err.message + '</p>';
          });
      }
    </script>
"""


def render_home_page(stats: Stats) -> str:
    """Render the home page with a footer summarising *stats*."""
    debug_mode = "ON" if stats.debug else "OFF"
    footer = (
        f"API calls: {stats.api_calls} | Cache entries: {stats.cache_size} | "
        f"Errors: {stats.errors}"
    )
    return f"""<!DOCTYPE html>
<html>
{PAGE_HEAD}
  <body>
    <h1>Star Wars API Demo</h1>
    <p>This page demonstrates fetching data from the Star Wars API.</p>
    <p>Check your console for the API results.</p>
    <button onclick="fetchData()">Fetch Star Wars Data</button>
    <div id="results"></div>
{PAGE_SCRIPT}
    <div class="footer">
      <p>{escape(footer)}</p>
      <pre>Debug mode: {debug_mode} | Timeout: {stats.timeout}ms</pre>
    </div>
  </body>
</html>
"""
