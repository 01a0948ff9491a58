"""HTTP server implementation"""
import os
import json
from http.server import BaseHTTPRequestHandler, HTTPServer
from urllib.parse import urlparse, parse_qs

from ..utils.helpers import safe_print
from ..core import meta_keys
from ..core.exceptions import CueError, TrackNotFoundError
from ..core.file_finder import describe_tracks
from ..core.file_type import CueFileType
from ..core.sheet import CueSheet
from ..core.update import update


class CueEditHandler(BaseHTTPRequestHandler):
    """HTTP request handler for CUE sheet reading and editing"""

    # Class variables set by create_server()
    encoding = None
    default_length = -1
    file_type = CueFileType()

    def log_message(self, format, *args):
        """Override to provide more detailed logging"""
        safe_print(f"[HTTP] {self.address_string()} - {format % args}")

    def _json(self, data, code=200):
        """Send JSON response"""
        body = json.dumps(data).encode()
        self.send_response(code)
        self.send_header("Content-Type", "application/json")
        self.send_header("Content-Length", str(len(body)))
        self.end_headers()
        self.wfile.write(body)

    def _read_json(self):
        length = int(self.headers.get("Content-Length", 0))
        return json.loads(self.rfile.read(length))

    def _load_sheet(self, path, total_length):
        return CueSheet.from_file(
            path, total_length, encoding=self.encoding,
            log_func=lambda msg: safe_print(f"[HTTP] {msg}")
        )

    def _sheet_json(self, path, sheet):
        return {
            "path": path,
            "media": sheet.media,
            "metadata": sheet.metadata,
            "tracks": describe_tracks(sheet, path),
        }

    def do_POST(self):
        """Handle POST requests"""
        route = urlparse(self.path).path
        if route not in ("/update", "/insert"):
            return self._json({"error": "unknown endpoint"}, 404)

        try:
            data = self._read_json()
            path = data["path"]
        except Exception as e:
            safe_print(f"❌ Invalid request: {e}")
            return self._json({"error": "invalid json"}, 400)
        if not isinstance(path, str):
            return self._json({"error": "invalid path"}, 400)

        if route == "/update":
            return self._handle_update(path, data)
        return self._handle_insert(path, data)

    def _handle_update(self, path, data):
        values = data.get("values") or {}
        if not isinstance(values, dict):
            return self._json({"error": "invalid values"}, 400)
        values = dict(values)
        requested = [key for key in values if key != meta_keys.TRACK]
        try:
            updated = update(
                path, values, file_type=self.file_type, encoding=self.encoding,
                log_func=lambda msg: safe_print(f"[HTTP] {msg}")
            )
        except TrackNotFoundError as e:
            return self._json({"error": str(e)}, 404)
        except (CueError, OSError) as e:
            safe_print(f"❌ Update failed for {path}: {e}")
            return self._json({"error": str(e)}, 500)

        applied = [key for key in requested if key not in values]
        skipped = [key for key in requested if key in values]
        return self._json({"updated": updated, "applied": applied, "skipped": skipped})

    def _handle_insert(self, path, data):
        if not os.path.isfile(path):
            return self._json({"error": "file not found"}, 404)
        if not self.file_type.accept(path):
            return self._json({"error": "not a CUE file"}, 400)
        try:
            time = int(data["time"])
            total_length = int(data.get("length", self.default_length))
        except (KeyError, TypeError, ValueError):
            return self._json({"error": "invalid time"}, 400)

        try:
            sheet = self._load_sheet(path, total_length)
            if not sheet.media:
                return self._json({"error": "CUE sheet has no FILE line"}, 400)
            track = sheet.insert_track(time)
            if track is None:
                return self._json({"inserted": False})
            sheet.save(path, sheet.media)
        except (CueError, OSError) as e:
            safe_print(f"❌ Insert failed for {path}: {e}")
            return self._json({"error": str(e)}, 500)

        safe_print(f"✂️ Inserted track {track.id} at {time} ms in {path}")
        return self._json({
            "inserted": True,
            "track": {"id": track.id, "start": track.start, "end": track.end},
        })

    def do_GET(self):
        """Handle GET requests"""
        url = urlparse(self.path)
        if url.path == "/tracks":
            query = parse_qs(url.query)
            path = query.get("path", [None])[0]
            if not path or not os.path.isfile(path):
                return self._json({"error": "file not found"}, 404)
            try:
                total_length = int(query.get("length", [self.default_length])[0])
            except ValueError:
                return self._json({"error": "invalid length"}, 400)
            try:
                sheet = self._load_sheet(path, total_length)
            except (CueError, OSError) as e:
                return self._json({"error": str(e)}, 500)
            return self._json(self._sheet_json(path, sheet))

        self._json({"message": "endpoints: GET /tracks?path=<cue>, POST /update, POST /insert"}, 200)


def create_server(host, port, encoding=None, default_length=-1):
    """
    Create the HTTP server without starting it.

    Args:
        host: Host address to bind to
        port: Port number to listen on
        encoding: Forced CUE file encoding, or None to detect it
        default_length: Total length in ms used when a request gives none

    Returns:
        HTTPServer instance
    """
    CueEditHandler.encoding = encoding
    CueEditHandler.default_length = default_length
    return HTTPServer((host, port), CueEditHandler)


def start_server(host, port, encoding=None, default_length=-1):
    """
    Start the HTTP server and serve until interrupted.

    Requests are handled one at a time, so edits to a file never overlap.
    """
    server = create_server(host, port, encoding, default_length)

    safe_print(f"🚀 Server listening on {host}:{port}")
    safe_print("📡 API Endpoints:")
    safe_print("   GET  /tracks?path=<cue> - List the tracks of a CUE sheet")
    safe_print("   POST /update            - Change metadata of one track")
    safe_print("   POST /insert            - Insert a track at a start time")
    safe_print("=" * 60)
    safe_print("🟢 Server is ready to accept requests")

    try:
        server.serve_forever()
    except KeyboardInterrupt:
        safe_print("\n🛑 Keyboard interrupt received...")
    finally:
        safe_print("🔄 Shutting down server...")
        server.server_close()

    return server
