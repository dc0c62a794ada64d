#!/usr/bin/env python3
"""Script to check that the configured index is reachable and report its stats."""

import asyncio
import json

from pinecone_client import PineconeClient, get_settings
from pinecone_client.core.logging import setup_logging


async def check_index():
    """Describe the configured index and print its vector counts."""
    settings = get_settings()
    setup_logging()

    if not settings.pinecone_index_name:
        print("Error: PINECONE_INDEX_NAME not configured")
        return

    async with PineconeClient(settings) as client:
        description = await client.indexes.describe_index(settings.pinecone_index_name)
        print(f"Index: {description.database.name}")
        print(f"State: {description.status.state} (ready={description.status.ready})")

        async with client.index() as index:
            stats = await index.describe_index_stats()

    print(f"Stats: {json.dumps(stats.model_dump(by_alias=True), indent=2)}")
    print(f"✓ {stats.total_vector_count} vectors across {len(stats.namespaces)} namespaces")


if __name__ == "__main__":
    asyncio.run(check_index())
