from __future__ import annotations

from typing import List

from wit_client.core.client import WitClient
from wit_client.core.codec import decode_list
from wit_client.models import Intent


def list_intents(client: WitClient) -> List[Intent]:
    """List the intents configured for the app. Read-only."""
    raw = client.get("/intents", resource="intents")
    return decode_list(Intent, raw)


__all__ = ["list_intents"]
