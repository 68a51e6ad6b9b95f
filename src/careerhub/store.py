"""Supabase-backed duplicate detection, audit logging and batch deletion."""

import logging

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Generic, TypeVar
from uuid import UUID

from postgrest.exceptions import APIError
from pydantic import ValidationError
from supabase import AsyncClient, acreate_client

from careerhub.classifier import similarity
from careerhub.config import Settings, settings
from careerhub.models import (
    BatchDeleteItem,
    BatchDeleteResult,
    DuplicateCandidate,
    SafetyLogEntry,
)


logger = logging.getLogger(__name__)

DUPLICATE_SIMILARITY_THRESHOLD = 0.8
MIN_DESCRIPTION_LENGTH = 50

# Postgres "relation does not exist" and PostgREST "table not in schema cache"
MISSING_TABLE_CODES = frozenset({"42P01", "PGRST205"})

CANDIDATE_COLUMNS = "id, title, name, description"

T = TypeVar("T")


@dataclass
class StoreOutcome(Generic[T]):
    """Result of a best-effort store call before it is reduced to a default."""

    ok: bool
    value: T | None = None
    error: Exception | None = None

    @classmethod
    def success(cls, value: T | None = None) -> "StoreOutcome[T]":
        return cls(ok=True, value=value)

    @classmethod
    def failure(cls, error: Exception) -> "StoreOutcome[T]":
        return cls(ok=False, error=error)

    def unwrap_or(self, default: T) -> T:
        """Return the value on success, otherwise the default."""
        if self.ok and self.value is not None:
            return self.value
        return default


def error_message(error: Exception) -> str:
    """Human readable message for a store or transport error."""
    if isinstance(error, APIError) and error.message:
        return error.message
    return str(error)


async def create_store_client(config: Settings = settings) -> AsyncClient:
    """
    Create the async Supabase client from settings.

    Raises:
        ValueError: If the Supabase URL or key is not configured
    """
    if not config.store_configured:
        raise ValueError("SUPABASE_URL and SUPABASE_ANON_KEY must be configured")
    return await acreate_client(config.supabase_url, config.supabase_anon_key)


class SafetyStore:
    """Moderation operations that read from or write to the Supabase store."""

    def __init__(
        self,
        client: AsyncClient,
        logs_table: str = settings.safety_logs_table,
        admin_id: str = settings.safety_admin_id,
        similarity_threshold: float = DUPLICATE_SIMILARITY_THRESHOLD,
        min_description_length: int = MIN_DESCRIPTION_LENGTH,
    ) -> None:
        """
        Initialize the store.

        Args:
            client: Async Supabase client
            logs_table: Table receiving safety log entries
            admin_id: Actor recorded on every log entry
            similarity_threshold: Description similarity above which records are duplicates
            min_description_length: Descriptions must be longer than this to be compared
        """
        self.client = client
        self.logs_table = logs_table
        self.admin_id = admin_id
        self.similarity_threshold = similarity_threshold
        self.min_description_length = min_description_length

    def is_duplicate(self, item: Mapping[str, Any], existing: DuplicateCandidate) -> bool:
        """Exact title/name match or highly similar long descriptions."""
        item_title = item.get("title") or item.get("name") or ""
        existing_title = existing.title or existing.name or ""

        if item_title and existing_title:
            if str(item_title).strip().lower() == existing_title.strip().lower():
                return True

        item_description = str(item.get("description") or "")
        existing_description = existing.description or ""

        if (
            len(item_description) > self.min_description_length
            and len(existing_description) > self.min_description_length
        ):
            score = similarity(item_description.lower(), existing_description.lower())
            return score > self.similarity_threshold

        return False

    async def lookup_duplicates(
        self,
        item: Mapping[str, Any],
        table_name: str,
        exclude_id: int | str | None = None,
    ) -> StoreOutcome[list[DuplicateCandidate]]:
        """
        Query existing records and keep the ones that duplicate the item.

        Args:
            item: The new content item
            table_name: Table to search
            exclude_id: Record id to leave out, e.g. the item being edited

        Returns:
            StoreOutcome carrying the duplicates, or the error that stopped the lookup
        """
        try:
            query = self.client.table(table_name).select(CANDIDATE_COLUMNS)
            if exclude_id is not None:
                query = query.neq("id", exclude_id)
            response = await query.execute()

            candidates = [DuplicateCandidate.model_validate(row) for row in response.data or []]
            return StoreOutcome.success(
                [candidate for candidate in candidates if self.is_duplicate(item, candidate)]
            )
        except Exception as e:
            logger.error(f"Error checking duplicates in {table_name}: {error_message(e)}")
            return StoreOutcome.failure(e)

    async def find_duplicates(
        self,
        item: Mapping[str, Any],
        table_name: str,
        exclude_id: int | str | None = None,
    ) -> list[DuplicateCandidate]:
        """Duplicates of the item; an empty list when the lookup fails."""
        outcome = await self.lookup_duplicates(item, table_name, exclude_id)
        return outcome.unwrap_or([])

    async def write_log_entry(
        self,
        action: str,
        item_id: Any,
        table_name: str,
        details: str | None = "",
    ) -> StoreOutcome[None]:
        try:
            entry = SafetyLogEntry(
                action=action,
                item_id=item_id,
                table_name=table_name,
                details=details or "",
                timestamp=datetime.now(timezone.utc).isoformat(),
                admin_id=self.admin_id,
            )
            await self.client.table(self.logs_table).insert(entry.model_dump(mode="json")).execute()
            return StoreOutcome.success()
        except Exception as e:
            return StoreOutcome.failure(e)

    async def log_action(
        self,
        action: str,
        item_id: Any,
        table_name: str,
        details: str | None = "",
    ) -> None:
        """
        Append an entry to the safety log.

        Never raises. A missing log table is ignored, any other failure,
        including an entry that cannot be built, is logged and dropped.
        """
        outcome = await self.write_log_entry(action, item_id, table_name, details)
        if outcome.ok:
            return

        error = outcome.error
        if isinstance(error, APIError) and error.code in MISSING_TABLE_CODES:
            logger.debug(f"Safety log table '{self.logs_table}' does not exist, skipping entry")
            return
        logger.error(f"Error logging safety action {action} for {table_name}/{item_id}: {error_message(error)}")

    async def batch_delete(self, items: Sequence[BatchDeleteItem | Mapping[str, Any]]) -> list[BatchDeleteResult]:
        """
        Delete records one at a time, in input order.

        A malformed reference or a failed delete is recorded and the batch
        moves on to the next item. Each successful delete is followed by a
        DELETE entry in the safety log.

        Args:
            items: References with `id` and `table_name`

        Returns:
            One result per input item, in the same order
        """
        results: list[BatchDeleteResult] = []

        for raw in items:
            try:
                item = BatchDeleteItem.model_validate(raw)
            except ValidationError as e:
                logger.error(f"Skipping malformed batch delete item {raw!r}: {e}")
                original = dict(raw) if isinstance(raw, Mapping) else {}
                results.append(BatchDeleteResult(success=False, item=original, error=str(e)))
                continue

            try:
                record_id = str(item.id) if isinstance(item.id, UUID) else item.id
                await self.client.table(item.table_name).delete().eq("id", record_id).execute()
            except Exception as e:
                logger.error(f"Error deleting {item.table_name}/{item.id}: {error_message(e)}")
                results.append(BatchDeleteResult(success=False, item=item, error=error_message(e)))
                continue

            results.append(BatchDeleteResult(success=True, item=item))
            await self.log_action("DELETE", item.id, item.table_name, "Batch deletion")

        return results
