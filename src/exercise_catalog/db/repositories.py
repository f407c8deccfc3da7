"""Data access layer for the exercises table."""

from typing import Protocol, runtime_checkable

from supabase import AsyncClient

from ..models.exercises import ExerciseRow, StoredExercise

# PostgREST on Supabase returns at most 1000 rows per request by default
PAGE_SIZE = 1000


class StoreError(Exception):
    """Raised when a query against the remote store fails."""

    def __init__(self, operation: str, cause: Exception):
        self.operation = operation
        self.cause = cause
        super().__init__(f"{operation} failed: {cause}")


@runtime_checkable
class ExerciseStore(Protocol):
    """Operations the catalog jobs need from the exercises table."""

    async def ping(self) -> None:
        """Check that the table is reachable."""
        ...

    async def list_identifiers(self) -> set[str]:
        """Return every stored exercise_id."""
        ...

    async def insert_batch(self, rows: list[ExerciseRow]) -> int:
        """Insert rows in a single call and return how many were inserted."""
        ...

    async def find_inactive_by_name_substring(self, text: str) -> list[StoredExercise]:
        """Find inactive exercises whose name contains text, ignoring case."""
        ...

    async def activate_by_id(self, id: int | str) -> None:
        """Set is_active on a single exercise."""
        ...

    async def count_active(self) -> int:
        """Count active exercises."""
        ...


class ExerciseRepository:
    """Repository for the exercises table in Supabase.

    Every method except list_identifiers awaits one PostgREST request.
    Failures are raised as StoreError so callers can decide whether they
    are fatal.
    """

    def __init__(
        self,
        client: AsyncClient,
        table: str = "exercises",
        page_size: int = PAGE_SIZE,
    ):
        self.client = client
        self.table = table
        self.page_size = page_size

    def _query(self):
        return self.client.table(self.table)

    async def ping(self) -> None:
        """Run a count query to verify connectivity and credentials."""
        try:
            await self._query().select("id", count="exact").limit(1).execute()
        except Exception as e:
            raise StoreError("connectivity check", e) from e

    async def list_identifiers(self) -> set[str]:
        """Return every stored exercise_id.

        Pages through the table with range requests ordered by exercise_id,
        so the server's per-request row cap does not truncate the result.
        """
        identifiers = set()
        start = 0
        while True:
            end = start + self.page_size - 1
            try:
                response = await (
                    self._query()
                    .select("exercise_id")
                    .order("exercise_id")
                    .range(start, end)
                    .execute()
                )
            except Exception as e:
                raise StoreError("listing exercise IDs", e) from e

            rows = response.data or []
            identifiers.update(row["exercise_id"] for row in rows)
            if len(rows) < self.page_size:
                return identifiers
            start += self.page_size

    async def insert_batch(self, rows: list[ExerciseRow]) -> int:
        """Insert rows in a single request."""
        if not rows:
            return 0
        try:
            await self._query().insert([row.to_dict() for row in rows]).execute()
        except Exception as e:
            raise StoreError(f"inserting {len(rows)} exercises", e) from e
        return len(rows)

    async def find_inactive_by_name_substring(self, text: str) -> list[StoredExercise]:
        """Find inactive exercises whose name contains text, ignoring case.

        Results come back in the store's default order.
        """
        try:
            response = await (
                self._query()
                .select("id, name, exercise_id")
                .ilike("name", f"%{text}%")
                .eq("is_active", False)
                .execute()
            )
        except Exception as e:
            raise StoreError(f"searching for {text!r}", e) from e
        return [StoredExercise.from_dict(row) for row in response.data or []]

    async def activate_by_id(self, id: int | str) -> None:
        """Mark a single exercise as active."""
        try:
            await self._query().update({"is_active": True}).eq("id", id).execute()
        except Exception as e:
            raise StoreError(f"activating exercise {id}", e) from e

    async def count_active(self) -> int:
        """Count exercises with is_active set."""
        try:
            response = await (
                self._query()
                .select("id", count="exact", head=True)
                .eq("is_active", True)
                .execute()
            )
        except Exception as e:
            raise StoreError("counting active exercises", e) from e
        return response.count or 0
