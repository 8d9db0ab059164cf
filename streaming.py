#!/usr/bin/env python3
"""
streaming.py - Forward generated text to the HTTP response as it arrives
"""

from config import log_message
from exceptions import UpstreamError


async def relay_deltas(deltas, encoding="utf-8"):
    """
    Encode and yield every non-empty delta in arrival order.

    An upstream failure is logged and re-raised as UpstreamError, which aborts
    the chunked response; nothing is yielded after it.
    """
    forwarded = 0
    try:
        async for delta in deltas:
            if not delta:
                continue
            forwarded += 1
            yield delta.encode(encoding)
    except Exception as e:
        log_message(f"Generation stream failed after {forwarded} chunks: {e}", "ERROR")
        if isinstance(e, UpstreamError):
            raise
        raise UpstreamError("Generation", e) from e

    log_message(f"Stream complete: {forwarded} chunks forwarded")
