from __future__ import annotations

import mimetypes
from pathlib import Path
from typing import Any, List, Optional, Tuple

from wit_client.core.client import WitClient
from wit_client.core.codec import decode, encode
from wit_client.core.errors import WitInvalidRequestError
from wit_client.core.paths import build_path, escape_segment, with_query
from wit_client.models import Message, MessageContext, MessageRequest

RESOURCE = "messages"


def _context_param(context: Any) -> Optional[str]:
    if isinstance(context, MessageContext):
        return encode(context).decode("utf-8")
    return context or None


def _optional_params(request: MessageRequest) -> List[Tuple[str, Optional[Any]]]:
    return [
        ("context", _context_param(request.context)),
        ("msg_id", request.msg_id or None),
        ("n", request.n or None),
    ]


def get_message(client: WitClient, request: MessageRequest) -> Message:
    """Analyze a text message: GET /message?q=...[&context=][&msg_id=][&n=]."""
    path = with_query("/message", [("q", request.query or ""), *_optional_params(request)])
    raw = client.get(path, resource=RESOURCE)
    return decode(Message, raw)


def get_message_by_id(client: WitClient, msg_id: str) -> Message:
    """
    Fetch a previously computed analysis.

    Notes:
    - A message can take a moment to become visible here after it was sent;
      this call does not wait or retry.
    """
    if not msg_id:
        raise WitInvalidRequestError("msg_id must be provided.")
    raw = client.get(build_path("messages", escape_segment(msg_id)), resource=RESOURCE)
    return decode(Message, raw)


def _audio_content_type(request: MessageRequest) -> Optional[str]:
    """Explicit type, else a guess from the file name. None sends no header."""
    if request.content_type:
        return request.content_type
    if request.file is not None:
        return mimetypes.guess_type(str(request.file))[0]
    return None


def send_audio(client: WitClient, request: MessageRequest) -> Message:
    """
    Analyze speech: POST raw audio bytes to /speech.

    Exactly one of request.file / request.file_contents must be set. The
    request is validated before anything touches the network.
    """
    has_file = request.file is not None and str(request.file) != ""
    has_contents = request.file_contents is not None
    if not has_file and not has_contents:
        raise WitInvalidRequestError("Must provide a file or file_contents.")
    if has_file and has_contents:
        raise WitInvalidRequestError("Provide only one of file or file_contents.")

    content_type = _audio_content_type(request)
    path = with_query("/speech", _optional_params(request))

    if has_contents:
        raw = client.post(
            path, request.file_contents, content_type=content_type, resource=RESOURCE
        )
        return decode(Message, raw)

    audio_path = Path(request.file)
    if not audio_path.is_file():
        raise WitInvalidRequestError(f"File not found: {request.file}")

    with audio_path.open("rb") as fh:
        raw = client.post(
            path, fh.read(), content_type=content_type, resource=RESOURCE
        )
    return decode(Message, raw)


__all__ = ["get_message", "get_message_by_id", "send_audio"]
