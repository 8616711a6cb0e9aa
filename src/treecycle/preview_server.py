"""Browser window: HTTP page + WebSocket frame stream with keyboard input."""

from __future__ import annotations

import asyncio
import base64
import http.server
import io
import json
import logging
import threading
import webbrowser
from typing import TYPE_CHECKING, Any

import websockets
from jinja2 import Environment, PackageLoader

from treecycle.canvas.pillow_canvas import PillowCanvas
from treecycle.engine.loop import AnimationLoop
from treecycle.models import palette
from treecycle.models.enums import Action

if TYPE_CHECKING:
    from websockets.asyncio.server import ServerConnection

    from treecycle.config import AppConfig

logger = logging.getLogger(__name__)


def render_page(config: AppConfig, ws_port: int) -> str:
    """Render the preview HTML page from its Jinja2 template."""
    env = Environment(
        loader=PackageLoader("treecycle", "templates"),
        autoescape=True,
    )
    template = env.get_template("preview.html.jinja2")
    return template.render(
        title=config.canvas.title,
        width=config.canvas.width,
        height=config.canvas.height,
        ws_port=ws_port,
    )


class _HTMLHandler(http.server.BaseHTTPRequestHandler):
    """Serves the preview HTML page."""

    page: str = ""

    def do_GET(self) -> None:
        if self.path == "/" or self.path.startswith("/?"):
            self.send_response(200)
            self.send_header("Content-Type", "text/html; charset=utf-8")
            self.end_headers()
            self.wfile.write(self.page.encode())
        else:
            self.send_error(404)

    def log_message(self, format: str, *args: Any) -> None:  # noqa: A002
        pass  # suppress console noise


class PreviewServer:
    """Plays the animation in a browser tab.

    Frames are streamed as PNG data URLs over a WebSocket at the configured
    frame rate; the page sends key presses back.  Escape stops the server.
    """

    def __init__(self, config: AppConfig, http_port: int = 8765, ws_port: int = 8766) -> None:
        self.config = config
        self.http_port = http_port
        self.ws_port = ws_port
        self.canvas = PillowCanvas(config.canvas.width, config.canvas.height, palette.SKY_BLUE)
        self.loop = AnimationLoop(config, self.canvas)
        self._clients: set[ServerConnection] = set()
        self._stop = asyncio.Event()
        # Guards the engine and canvas, which the frame thread mutates.
        self._lock = threading.Lock()
        self._http_server: http.server.HTTPServer | None = None

    @property
    def stopped(self) -> bool:
        return self._stop.is_set()

    async def broadcast(self, message: dict[str, Any]) -> None:
        """Send a JSON message to all connected WebSocket clients."""
        data = json.dumps(message)
        websockets.broadcast(self._clients, data)

    def frame_message(self) -> dict[str, Any]:
        """The current front buffer plus phase info, ready to broadcast."""
        with self._lock:
            image = self.canvas.snapshot()
            engine = self.loop.engine
            frame, phase = engine.frame, engine.phase
        buffer = io.BytesIO()
        image.save(buffer, "PNG")
        b64 = base64.b64encode(buffer.getvalue()).decode("ascii")
        return {
            "type": "frame",
            "frame": frame,
            "phase": phase.value,
            "title": phase.title,
            "image": f"data:image/png;base64,{b64}",
        }

    def handle_message(self, raw: str | bytes) -> Action:
        """Apply a client message; only ``{"type": "key", "key": ...}`` is understood."""
        try:
            msg = json.loads(raw)
        except json.JSONDecodeError:
            logger.warning("Ignoring malformed client message: %r", raw)
            return Action.NONE
        if not isinstance(msg, dict) or msg.get("type") != "key":
            return Action.NONE

        with self._lock:
            action = self.loop.handle_key(str(msg.get("key", "")))
        if action is Action.QUIT:
            self._stop.set()
        return action

    async def _ws_handler(self, websocket: ServerConnection) -> None:
        """Handle a single WebSocket connection."""
        self._clients.add(websocket)
        logger.info("Client connected (%d total)", len(self._clients))
        try:
            first = await asyncio.to_thread(self.frame_message)
            await websocket.send(json.dumps(first))
            async for message in websocket:
                self.handle_message(message)
        finally:
            self._clients.discard(websocket)

    def _next_frame(self, encode: bool) -> dict[str, Any] | None:
        """Step one frame; runs in a worker thread so the event loop stays free."""
        with self._lock:
            self.loop.step()
        return self.frame_message() if encode else None

    async def _frame_loop(self) -> None:
        """Step the animation and broadcast each frame until stopped.

        Frames are paced against a deadline, so render time counts toward
        the frame budget.  A slow frame pushes the deadline instead of
        queueing catch-up frames.
        """
        loop = asyncio.get_running_loop()
        delay = self.config.timing.frame_delay
        deadline = loop.time()
        while not self._stop.is_set():
            message = await asyncio.to_thread(self._next_frame, bool(self._clients))
            if message is not None and self._clients:
                await self.broadcast(message)
            deadline = max(deadline + delay, loop.time())
            await asyncio.sleep(deadline - loop.time())

    def _start_http_server(self) -> None:
        """Start the HTTP server in a daemon thread."""
        handler_class = type(
            "_BoundHTMLHandler",
            (_HTMLHandler,),
            {"page": render_page(self.config, self.ws_port)},
        )
        self._http_server = http.server.HTTPServer(("", self.http_port), handler_class)
        self.http_port = self._http_server.server_address[1]
        thread = threading.Thread(target=self._http_server.serve_forever, daemon=True)
        thread.start()

    async def run(self, open_browser: bool = True) -> None:
        """Start servers and play until a client presses Escape."""
        frames = stop = None
        try:
            async with websockets.serve(self._ws_handler, "localhost", self.ws_port) as server:
                self.ws_port = server.sockets[0].getsockname()[1]
                self._start_http_server()
                logger.info("Preview at http://localhost:%d (ws %d)", self.http_port, self.ws_port)
                if open_browser:
                    webbrowser.open(f"http://localhost:{self.http_port}")

                frames = asyncio.create_task(self._frame_loop())
                stop = asyncio.create_task(self._stop.wait())
                await asyncio.wait({frames, stop}, return_when=asyncio.FIRST_COMPLETED)
                if frames.done():
                    # Re-raise if the frame loop died rather than finished on stop.
                    frames.result()
                frames.cancel()
                await self.broadcast({"type": "bye"})
        finally:
            for task in (frames, stop):
                if task and not task.done():
                    task.cancel()
            if self._http_server:
                self._http_server.shutdown()
