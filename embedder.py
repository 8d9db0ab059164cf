#!/usr/bin/env python3
"""
embedder.py - Turn a user query into an embedding vector with the OpenAI API
"""

from openai import AsyncOpenAI, OpenAIError
from config import CONFIG
from exceptions import UpstreamError


class QueryEmbedder:
    def __init__(self, client=None, model=None):
        self.client = client or AsyncOpenAI(api_key=CONFIG["openai_api_key"])
        self.model = model or CONFIG["embedding_model"]

    async def embed(self, text):
        try:
            response = await self.client.embeddings.create(
                model=self.model,
                input=text,
                encoding_format="float"
            )
        except OpenAIError as e:
            raise UpstreamError("Embedding", e) from e

        return list(response.data[0].embedding)

    async def close(self):
        await self.client.close()
