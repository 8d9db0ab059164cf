#!/usr/bin/env python3
"""
generator.py - Streaming chat completions from the OpenAI API
"""

from openai import AsyncOpenAI, OpenAIError
from config import CONFIG, log_message
from exceptions import UpstreamError


class AnswerGenerator:
    def __init__(self, client=None, model=None):
        self.client = client or AsyncOpenAI(api_key=CONFIG["openai_api_key"])
        self.model = model or CONFIG["chat_model"]

    async def open_stream(self, messages):
        """
        Start a streaming completion and return its deltas.

        Failures while opening the stream raise here, before anything has been
        sent to the caller. Failures afterwards surface from the iterator.
        """
        try:
            stream = await self.client.chat.completions.create(
                model=self.model,
                messages=[{"role": m.role, "content": m.content or ""} for m in messages],
                stream=True
            )
        except OpenAIError as e:
            raise UpstreamError("Generation", e) from e

        log_message(f"Generation started with {len(messages)} messages")
        return self._deltas(stream)

    async def _deltas(self, stream):
        # None for chunks without content (role headers, finish events)
        try:
            async for chunk in stream:
                if not chunk.choices:
                    yield None
                    continue
                yield chunk.choices[0].delta.content
        finally:
            await stream.close()

    async def close(self):
        await self.client.close()
