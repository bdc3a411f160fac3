"""
Web App Lambda Function (served through a Lambda Function URL).

Routes:
    GET /          -> HTML page with a button that calls /api/info
    GET /api/info  -> JSON describing the request
    anything else  -> 404 JSON

Function URLs deliver HTTP API v2 payloads: the path is in rawPath and the
method in requestContext.http.method.

Source: lambda_deployer/providers/aws/lambda_functions/web-app/lambda_function.py
Editable: Yes - This is the runtime Lambda code
"""
import json
from datetime import datetime, timezone

HTML_PAGE = """<!doctype html>
<html lang="en">
<head>
  <meta charset="utf-8"/>
  <meta name="viewport" content="width=device-width, initial-scale=1"/>
  <title>Lambda Function URL</title>
  <style>
    body { font-family: system-ui, sans-serif; background: #f9fafb; color: #111827; margin: 0; }
    main { max-width: 40rem; margin: 0 auto; padding: 1rem; text-align: center; }
    button { padding: 0.5rem 1rem; border-radius: 0.75rem; border: 1px solid #d1d5db; cursor: pointer; }
    pre { text-align: left; margin-top: 1rem; padding: 1rem; background: #f3f4f6; border-radius: 0.5rem; overflow-x: auto; }
  </style>
</head>
<body>
  <main>
    <h1>Hello from AWS Lambda!</h1>
    <p>This page is served by a Lambda Function URL.<br/>Click the button to call the API.</p>
    <button id="btn">Call API</button>
    <pre id="out"></pre>
  </main>
  <script>
    const out = document.getElementById('out');
    document.getElementById('btn').addEventListener('click', async () => {
      out.textContent = 'Loading...';
      try {
        const res = await fetch('/api/info', { headers: { 'Accept': 'application/json' } });
        if (!res.ok) throw new Error('HTTP ' + res.status);
        out.textContent = JSON.stringify(await res.json(), null, 2);
      } catch (e) {
        out.textContent = 'Error: ' + (e && e.message ? e.message : e);
      }
    });
  </script>
</body>
</html>"""

JSON_CONTENT_TYPE = "application/json; charset=utf-8"
HTML_CONTENT_TYPE = "text/html; charset=utf-8"


def _response(status_code, body, content_type):
    return {
        "statusCode": status_code,
        "headers": {
            "content-type": content_type,
            "cache-control": "no-store",
            "access-control-allow-origin": "*",
        },
        "body": body,
    }


def _now_iso():
    # Millisecond precision with a Z suffix, e.g. 2024-05-01T12:00:00.000Z
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def lambda_handler(event, context):
    event = event or {}
    request_context = event.get("requestContext") or {}
    http = request_context.get("http") or {}

    raw_path = event.get("rawPath") or "/"
    method = http.get("method") or "GET"

    if method == "GET" and raw_path in ("/", ""):
        return _response(200, HTML_PAGE, HTML_CONTENT_TYPE)

    if method == "GET" and raw_path == "/api/info":
        info = {
            "message": "Hello from /api/info",
            "now": _now_iso(),
            "requestId": request_context.get("requestId"),
            "ip": http.get("sourceIp"),
            "userAgent": http.get("userAgent"),
        }
        return _response(200, json.dumps(info), JSON_CONTENT_TYPE)

    return _response(404, json.dumps({"error": "Not Found", "path": raw_path}), JSON_CONTENT_TYPE)
