"""Document store protocol.

Defines the interface for the persistent collection that holds content
documents. Filters, projections, pipelines and update documents use the
MongoDB query language.

Implementations can include:
- MongoDB via pymongo's async client (default)
- In-memory substitutes for unit tests
"""

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class DocumentStore(Protocol):
    """Protocol for document storage backends.

    Example:
        ```python
        from content_cms.protocols import DocumentStore

        store: DocumentStore = MongoDocumentStore.create()
        ```
    """

    async def find_one(
        self,
        filter: dict[str, Any],
        projection: dict[str, Any] | None = None,
    ) -> dict[str, Any] | None:
        """Find a single document.

        Args:
            filter: Query filter
            projection: Optional field projection

        Returns:
            The matching document, or None if nothing matches
        """
        ...

    async def aggregate(self, pipeline: list[dict[str, Any]]) -> list[dict[str, Any]]:
        """Run an aggregation pipeline and collect the results.

        Args:
            pipeline: Aggregation stages

        Returns:
            Documents produced by the pipeline, in pipeline order
        """
        ...

    async def insert_one(self, document: dict[str, Any]) -> str:
        """Insert a document.

        Args:
            document: The document to insert

        Returns:
            The identifier of the inserted document

        Raises:
            DuplicateDocumentError: If a unique index rejects the document
        """
        ...

    async def update_one(
        self,
        filter: dict[str, Any],
        update: dict[str, Any],
        upsert: bool = False,
    ) -> int:
        """Apply an update document to the first match.

        Args:
            filter: Query filter
            update: Update operators (``$set``, ``$push``, ...)
            upsert: Insert a new document when nothing matches

        Returns:
            Number of matched documents
        """
        ...

    async def delete_one(self, filter: dict[str, Any]) -> int:
        """Delete the first matching document.

        Args:
            filter: Query filter

        Returns:
            Number of deleted documents
        """
        ...

    async def health_check(self) -> bool:
        """Check if the store is reachable.

        Returns:
            True if healthy, False otherwise
        """
        ...
