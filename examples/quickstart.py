"""Example script walking through the index and vector operations.

Reads PINECONE_API_KEY, PINECONE_ENVIRONMENT and PINECONE_PROJECT_NAME from the
environment (or .env) and creates a throwaway index named "quickstart".
"""

import asyncio

from pinecone_client import (
    CreateIndexParams,
    DeleteVectorsParams,
    FetchVectorsParams,
    Metric,
    PineconeClient,
    QueryParams,
    UpdateVectorParams,
    UpsertVectorsParams,
    Vector,
    VectorService,
)

INDEX_NAME = "quickstart"
NAMESPACE = "films"


async def example_vectors(index: VectorService):
    """Example: Upsert, query, fetch, update and delete vectors."""
    print("\n=== Upsert ===")
    result = await index.upsert_vectors(
        UpsertVectorsParams(
            namespace=NAMESPACE,
            vectors=[
                Vector(id="heat", values=[0.1, 0.9, 0.3], metadata={"genre": "crime"}),
                Vector(id="up", values=[0.8, 0.1, 0.2], metadata={"genre": "animation"}),
            ],
        )
    )
    print(f"Upserted {result.upserted_count} vectors")

    print("\n=== Query ===")
    matches = await index.query(
        QueryParams(namespace=NAMESPACE, top_k=1, vector=[0.1, 0.8, 0.3], include_metadata=True)
    )
    for match in matches.matches:
        print(f"  {match.id}: score={match.score:.3f} metadata={match.metadata}")

    print("\n=== Fetch ===")
    fetched = await index.fetch_vectors(FetchVectorsParams(ids=["heat", "up"], namespace=NAMESPACE))
    print(f"Fetched ids: {sorted(fetched.vectors)}")

    print("\n=== Update ===")
    await index.update_vector(
        UpdateVectorParams(id="up", namespace=NAMESPACE, set_metadata={"year": 2009})
    )

    print("\n=== Stats ===")
    stats = await index.describe_index_stats()
    print(f"Total vectors: {stats.total_vector_count}")

    print("\n=== Delete ===")
    await index.delete_vectors(DeleteVectorsParams(delete_all=True, namespace=NAMESPACE))


async def main():
    async with PineconeClient() as client:
        print(f"Existing indexes: {await client.indexes.list_indexes()}")

        # Index creation is asynchronous on the server; poll until it is ready.
        await client.indexes.create_index(
            CreateIndexParams(name=INDEX_NAME, dimension=3, metric=Metric.COSINE)
        )
        while not (await client.indexes.describe_index(INDEX_NAME)).status.ready:
            await asyncio.sleep(5)

        try:
            async with client.index(INDEX_NAME) as index:
                await example_vectors(index)
        finally:
            await client.indexes.delete_index(INDEX_NAME)


if __name__ == "__main__":
    print("=" * 60)
    print("Pinecone Quickstart")
    print("=" * 60)

    asyncio.run(main())

    print("\n" + "=" * 60)
    print("All examples completed successfully!")
    print("=" * 60)
