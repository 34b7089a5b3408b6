"""Local stand-in for the evaluation service. Accepts POST /evaluation-service/logs,
appends accepted events to a JSONL file."""

import json
import os
from datetime import datetime, timezone
from http.server import HTTPServer, BaseHTTPRequestHandler
from pathlib import Path

LOG_FILE = Path(os.environ.get("LOG_FILE", "/data/evaluation_logs.jsonl"))
LOG_PORT = int(os.environ.get("LOG_PORT", "8082"))
ACCESS_TOKEN = os.environ.get("ACCESS_TOKEN", "")

LOGS_PATH = "/evaluation-service/logs"
REQUIRED_FIELDS = ("stack", "level", "package", "message", "timestamp")


class EvaluationHandler(BaseHTTPRequestHandler):
    def do_POST(self):
        if self.path != LOGS_PATH:
            self.send_error(404)
            return
        if ACCESS_TOKEN and self.headers.get("Authorization") != f"Bearer {ACCESS_TOKEN}":
            self.send_error(401, "Invalid or missing bearer token")
            return
        content_type = self.headers.get("Content-Type", "")
        if "json" not in content_type:
            self.send_error(400, "Content-Type must be application/json")
            return
        try:
            length = int(self.headers.get("Content-Length", 0))
        except ValueError:
            self.send_error(400, "Invalid Content-Length")
            return
        body = self.rfile.read(length)
        try:
            entry = json.loads(body)
        except json.JSONDecodeError:
            self.send_error(400, "Invalid JSON")
            return
        if not isinstance(entry, dict):
            self.send_error(400, "Expected a JSON object")
            return
        missing = [f for f in REQUIRED_FIELDS if not isinstance(entry.get(f), str)]
        if missing:
            self.send_error(400, f"Missing fields: {', '.join(missing)}")
            return
        entry["received_at"] = datetime.now(timezone.utc).isoformat()
        with open(LOG_FILE, "a") as f:
            f.write(json.dumps(entry) + "\n")
            f.flush()
            os.fsync(f.fileno())
        self.send_response(200)
        self.send_header("Content-Type", "application/json")
        self.end_headers()
        self.wfile.write(b'{"ok":true}')

    def do_GET(self):
        if self.path == "/health":
            self.send_response(200)
            self.send_header("Content-Type", "application/json")
            self.end_headers()
            self.wfile.write(b'{"status":"ok"}')
        else:
            self.send_error(404)

    def log_message(self, format, *args):
        pass  # Suppress default logging


if __name__ == "__main__":
    LOG_FILE.parent.mkdir(parents=True, exist_ok=True)
    server = HTTPServer(("0.0.0.0", LOG_PORT), EvaluationHandler)
    print(f"Evaluation service stub listening on :{LOG_PORT}, writing to {LOG_FILE}")
    server.serve_forever()
