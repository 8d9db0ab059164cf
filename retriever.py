#!/usr/bin/env python3
"""
retriever.py - Similarity search over the professor review vector store
"""

import chromadb
from fastapi.concurrency import run_in_threadpool
from config import CONFIG, log_message
from exceptions import UpstreamError
from models import MatchResult


def build_where(criteria):
    """Exact-match metadata filter; None when there is nothing to filter on"""
    if criteria is None or criteria.is_empty():
        return None

    fields = criteria.as_filter()
    if len(fields) == 1:
        return fields

    # ChromaDB wants one operator per clause when filtering on several keys
    return {"$and": [{key: value} for key, value in fields.items()]}


class ReviewRetriever:
    def __init__(self, collection=None, top_k=None):
        self._collection = collection
        self.top_k = top_k or CONFIG["top_k"]

    def get_collection(self):
        if self._collection is None:
            client = chromadb.PersistentClient(path=CONFIG["vector_db_dir"])
            self._collection = client.get_collection(CONFIG["collection_name"])
        return self._collection

    def _query(self, vector, where):
        query_options = {
            "query_embeddings": [vector],
            "n_results": self.top_k,
            "include": ["metadatas"],
        }
        if where:
            query_options["where"] = where

        return self.get_collection().query(**query_options)

    async def search(self, vector, criteria=None):
        """Top matches for a query vector, in the order the store ranked them"""
        where = build_where(criteria)

        try:
            res = await run_in_threadpool(self._query, vector, where)
        except Exception as e:
            raise UpstreamError("Vector search", e) from e

        ids = (res.get("ids") or [[]])[0]
        metadatas = (res.get("metadatas") or [[]])[0] or [{}] * len(ids)

        matches = []
        for match_id, metadata in zip(ids, metadatas):
            metadata = metadata or {}
            matches.append(MatchResult(
                id=str(match_id),
                subject=str(metadata.get("subject", "")),
                stars=metadata.get("stars"),
                review=str(metadata.get("review", ""))
            ))

        log_message(f"Vector search returned {len(matches)} matches (filter: {where})")
        return matches
