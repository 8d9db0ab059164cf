#!/usr/bin/env python3
"""
synthesizer.py - Answer professor questions from retrieved reviews and a streamed OpenAI completion
"""

from config import log_message
from embedder import QueryEmbedder
from exceptions import InputError
from generator import AnswerGenerator
from prompt_builder import build_messages
from query_parser import QueryParser
from retriever import ReviewRetriever
from streaming import relay_deltas


class ProfessorSynthesizer:
    def __init__(self, embedder=None, retriever=None, generator=None, parser=None):
        self.embedder = embedder or QueryEmbedder()
        self.retriever = retriever or ReviewRetriever()
        self.generator = generator or AnswerGenerator()
        self.parser = parser or QueryParser()

    async def process_query(self, history):
        """
        Main pipeline: parse -> embed -> search -> prompt -> stream.

        Every step waits for the previous one. Returns an async iterator of
        encoded answer chunks once the completion stream has been opened, so
        any failure up to that point raises before a response is started.
        """
        try:
            if not history or not history[-1].content:
                raise InputError()

            user_query = history[-1].content

            criteria = self.parser.parse_query(user_query)
            log_message(f"Parsed criteria: {criteria.as_filter()}")

            vector = await self.embedder.embed(user_query)
            matches = await self.retriever.search(vector, criteria)
            if not matches:
                log_message("No matching professors, using fallback context", "WARN")

            messages = build_messages(history, matches)
            deltas = await self.generator.open_stream(messages)
        except Exception:
            await self.close()
            raise

        return self._stream(deltas)

    async def _stream(self, deltas):
        relay = relay_deltas(deltas)
        try:
            async for chunk in relay:
                yield chunk
        finally:
            # completion, upstream failure, or the client going away
            await relay.aclose()
            await deltas.aclose()
            await self.close()

    async def close(self):
        """Release the per-request API clients"""
        await self.embedder.close()
        await self.generator.close()
