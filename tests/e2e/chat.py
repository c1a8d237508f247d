#!/usr/bin/env python3
"""Manual chat client for a running relay server.

Sends one or more prompts over the WebSocket and prints every reply, e.g.::

    python tests/e2e/chat.py --text "What is the RV400 range?" --text "How do I book a test ride?"
    python tests/e2e/chat.py --voice --interrupt-after 0.2 --text "Tell me about battery swapping"
"""

from __future__ import annotations

import os
import json
import time
import asyncio
import logging
import argparse
from typing import Any

import websockets

DEFAULT_SERVER = "127.0.0.1:3000"

# Disable websockets library keepalive; we use explicit {"type":"ping"} frames.
WS_PING_INTERVAL_S: float | None = None


def derive_default_server() -> str:
    return os.getenv("REVOLT_SERVER", DEFAULT_SERVER)


def ws_url(server: str, secure: bool) -> str:
    server = (server or "").strip().rstrip("/")
    if server.startswith(("ws://", "wss://")):
        return f"{server}/"
    scheme = "wss" if secure else "ws"
    return f"{scheme}://{server}/"


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Chat with the Revolt voice relay over WebSocket")
    p.add_argument("--server", default=derive_default_server(), help="host:port or ws://host:port")
    p.add_argument("--secure", action="store_true", help="Use wss://")
    p.add_argument("--text", action="append", default=[], help="Prompt to send (repeatable)")
    p.add_argument("--voice", action="store_true", help="Send prompts as audio_data transcripts")
    p.add_argument("--interrupt-after", type=float, default=None, help="Send interrupt N seconds after the prompts")
    p.add_argument("--timeout", type=float, default=60.0, help="Seconds to wait for each reply")
    p.add_argument("--debug", action="store_true")
    return p.parse_args()


def _prompt_message(text: str, voice: bool) -> dict[str, Any]:
    if voice:
        return {"type": "audio_data", "audio": {"text": text}}
    return {"type": "text_input", "text": text}


async def _recv(ws, timeout_s: float) -> dict[str, Any]:
    raw = await asyncio.wait_for(ws.recv(), timeout=timeout_s)
    return json.loads(raw)


async def run(args: argparse.Namespace) -> int:
    prompts: list[str] = args.text or ["What is the RV400 range?"]
    url = ws_url(args.server, args.secure)

    async with websockets.connect(url, ping_interval=WS_PING_INTERVAL_S) as ws:
        ready = await _recv(ws, args.timeout)
        print(f"session {ready.get('sessionId')} modelReady={ready.get('modelReady')}")

        t0 = time.perf_counter()
        await ws.send(json.dumps({"type": "ping"}))
        pong = await _recv(ws, args.timeout)
        print(f"{pong.get('type')} in {(time.perf_counter() - t0) * 1000:.1f} ms")

        for text in prompts:
            await ws.send(json.dumps(_prompt_message(text, args.voice)))

        expected = len(prompts) if args.voice else 1
        if args.interrupt_after is not None:
            await asyncio.sleep(args.interrupt_after)
            await ws.send(json.dumps({"type": "interrupt"}))
            expected = 1

        errors = 0
        received = 0
        while received < expected:
            try:
                msg = await _recv(ws, args.timeout)
            except TimeoutError:
                print("timed out waiting for reply")
                return 2
            received += 1
            kind = msg.get("type")
            if kind == "ai_response":
                print(f"Rev: {msg.get('text')}")
            elif kind == "interrupted":
                print("interrupted")
            elif kind == "error":
                errors += 1
                print(f"error: {msg.get('message')} ({msg.get('code')})")
            else:
                print(f"{kind}: {msg}")

    return 0 if not errors else 1


def main() -> None:
    args = parse_args()
    logging.basicConfig(level=logging.DEBUG if args.debug else logging.WARNING, format="%(levelname)s: %(message)s")
    raise SystemExit(asyncio.run(run(args)))


if __name__ == "__main__":
    main()
