"""FastAPI relay service for decoding NMEA sentences.

Start with::

    uvicorn server.main:app --host 0.0.0.0 --port 8000

Producers POST raw sentences to ``/sentences``; each one is decoded and the
per-sentence results are returned in order. Successfully decoded records are
also broadcast to every client connected to ``ws://<host>:8000/ws`` as JSON
text, one message per sentence. ``/coordinates`` parses a single coordinate
in DMS, GPS or decimal notation.
"""

import asyncio
import logging
from typing import Any

from fastapi import FastAPI, HTTPException, WebSocket, WebSocketDisconnect
from pydantic import BaseModel

from gpsnmea import CoordinateFormatError, NMEAError, parse_coordinate, parse_sentence
from gpsnmea.nmea import supported_sentence_types
from server.broadcaster import add_subscriber, broadcast_message, remove_subscriber
from server.formatters import (
    error_to_dict,
    format_coordinate,
    format_sentence_message,
    sentence_to_dict,
)

logger = logging.getLogger(__name__)

_QUEUE_MAX_SIZE = 10
_TIMEOUT_SECONDS = 5.0

app = FastAPI(title="gpsnmea relay")


class SentenceBatch(BaseModel):
    """Request body for ``POST /sentences``."""

    sentences: list[str]


def _decode_line(line: str) -> dict[str, Any]:
    """Decode one line, broadcasting it on success.

    Surrounding whitespace (line endings from a serial capture) is stripped
    before decoding.
    """
    raw = line.strip()
    try:
        sentence = parse_sentence(raw)
    except NMEAError as e:
        logger.warning("Failed to decode %r: %s", raw, e)
        return error_to_dict(raw, e)
    broadcast_message(format_sentence_message(sentence))
    return sentence_to_dict(sentence)


@app.post("/sentences")
async def decode_sentences(batch: SentenceBatch) -> dict[str, list[dict[str, Any]]]:
    """Decode a batch of raw sentences.

    Invalid sentences do not fail the request; each yields an error object
    in place of a record.
    """
    return {"results": [_decode_line(line) for line in batch.sentences]}


@app.get("/sentence-types")
async def list_sentence_types() -> dict[str, list[str]]:
    """List the sentence types that decode into typed records."""
    return {"sentence_types": list(supported_sentence_types())}


@app.get("/coordinates")
async def decode_coordinate(value: str) -> dict[str, Any]:
    """Parse one coordinate; an unknown notation is reported as HTTP 422."""
    try:
        coordinate = parse_coordinate(value)
    except CoordinateFormatError as e:
        raise HTTPException(status_code=422, detail=str(e)) from e
    return format_coordinate(coordinate)


async def _send_messages_until_disconnect(
    queue: asyncio.Queue[str],
    websocket: WebSocket,
) -> None:
    try:
        while True:
            message = await asyncio.wait_for(queue.get(), timeout=_TIMEOUT_SECONDS)
            await websocket.send_text(message)
    except TimeoutError:
        await websocket.close(code=1001)
    except WebSocketDisconnect:
        pass


@app.websocket("/ws")
async def websocket_endpoint(websocket: WebSocket) -> None:
    """Stream decoded sentences to a connected WebSocket client.

    Each client gets its own bounded queue (max ``_QUEUE_MAX_SIZE`` messages).
    The oldest message is dropped when the queue is full so a slow client
    does not hold back producers. The connection closes with code 1001, and
    the client should reconnect, if no message arrives within
    ``_TIMEOUT_SECONDS``.

    Args:
        websocket: The incoming WebSocket connection.
    """
    queue: asyncio.Queue[str] = asyncio.Queue(maxsize=_QUEUE_MAX_SIZE)
    add_subscriber(queue)
    try:
        await websocket.accept()
        await _send_messages_until_disconnect(queue, websocket)
    finally:
        remove_subscriber(queue)
