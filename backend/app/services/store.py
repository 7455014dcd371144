"""
In-memory record store, optionally mirrored to a single JSON file.

One ``Collection`` per resource. Writes to a collection are serialized by its
lock; reads take no lock. When a db file is configured every write rewrites
the whole file before returning, and a failed write restores the in-memory
collection so memory and file never disagree.
"""

from __future__ import annotations

import asyncio
import json
import logging
import os
from contextlib import nullcontext
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional

from app.core.errors import ConflictError, NotFound, ValidationError
from app.services.serializer import RESOURCES, decode

logger = logging.getLogger(__name__)

Record = Dict[str, Any]
Validator = Optional[Callable[[Record], None]]


class Collection:
    """Ordered id -> record mapping for one resource."""

    def __init__(self, name: str) -> None:
        self.name = name
        self.records: Dict[str, Record] = {}
        self.lock = asyncio.Lock()
        self._last_id = 0

    def next_id(self) -> str:
        # Never rewinds, so deleted ids are not handed out again
        self._last_id += 1
        while str(self._last_id) in self.records:
            self._last_id += 1
        return str(self._last_id)

    def observe_id(self, record_id: str) -> None:
        if record_id.isdigit():
            self._last_id = max(self._last_id, int(record_id))

    def insert(self, data: Record, record_id: Optional[str] = None) -> Record:
        if record_id is None:
            record_id = self.next_id()
        elif record_id in self.records:
            raise ConflictError(f"{self.name} record with id '{record_id}' already exists")
        else:
            self.observe_id(record_id)

        record = {**data, "id": record_id}
        self.records[record_id] = record
        return record

    def require(self, record_id: str) -> Record:
        record = self.records.get(record_id)
        if record is None:
            raise NotFound(f"{self.name} record with id '{record_id}' not found")
        return record


class Store:
    """Holds the courses, students and enrollments collections."""

    def __init__(self, db_file: Optional[str] = None) -> None:
        self.db_file = Path(db_file) if db_file else None
        self.collections: Dict[str, Collection] = {
            name: Collection(name) for name in RESOURCES
        }
        self._file_lock = asyncio.Lock() if self.db_file else nullcontext()

    # ============ Lookup ============

    def collection(self, resource: str) -> Collection:
        collection = self.collections.get(resource)
        if collection is None:
            raise NotFound(f"Unknown resource '{resource}'")
        return collection

    def contains(self, resource: str, record_id: Any) -> bool:
        return isinstance(record_id, str) and record_id in self.collection(resource).records

    def snapshot(self) -> Dict[str, List[Record]]:
        return {
            name: [dict(record) for record in collection.records.values()]
            for name, collection in self.collections.items()
        }

    # ============ Reads ============

    async def list(self, resource: str, filters: Optional[Dict[str, str]] = None) -> List[Record]:
        records = self.collection(resource).records.values()
        if filters:
            records = [
                record for record in records
                if all(field in record and record[field] == value for field, value in filters.items())
            ]
        return [dict(record) for record in records]

    async def get(self, resource: str, record_id: str) -> Record:
        return dict(self.collection(resource).require(record_id))

    # ============ Writes ============

    async def create(self, resource: str, data: Record, validate: Validator = None) -> Record:
        collection = self.collection(resource)

        def apply() -> Record:
            if validate:
                validate(data)
            return collection.insert(data)

        return await self._write(collection, apply)

    async def replace(
        self, resource: str, record_id: str, data: Record, validate: Validator = None
    ) -> Record:
        collection = self.collection(resource)

        def apply() -> Record:
            collection.require(record_id)
            record = {**data, "id": record_id}
            if validate:
                validate(record)
            collection.records[record_id] = record
            return record

        return await self._write(collection, apply)

    async def merge(
        self, resource: str, record_id: str, partial: Record, validate: Validator = None
    ) -> Record:
        collection = self.collection(resource)

        def apply() -> Record:
            current = collection.require(record_id)
            record = {**current, **partial, "id": record_id}
            if validate:
                validate(record)
            collection.records[record_id] = record
            return record

        return await self._write(collection, apply)

    async def delete(self, resource: str, record_id: str) -> None:
        collection = self.collection(resource)

        def apply() -> None:
            collection.require(record_id)
            del collection.records[record_id]

        await self._write(collection, apply)

    async def _write(self, collection: Collection, apply: Callable[[], Any]) -> Any:
        async with collection.lock:
            async with self._file_lock:
                previous = dict(collection.records)
                try:
                    result = apply()
                    await self._persist()
                except Exception:
                    collection.records = previous
                    raise
                return dict(result) if result is not None else None

    # ============ File backing ============

    async def _persist(self) -> None:
        if self.db_file is None:
            return
        snapshot = self.snapshot()
        try:
            await asyncio.to_thread(self._write_file, snapshot)
        except OSError as e:
            logger.error(f"Failed to write db file {self.db_file}: {e}; changes rolled back")
            raise
        logger.debug(f"Persisted store to {self.db_file}")

    def _write_file(self, snapshot: Optional[Dict[str, List[Record]]] = None) -> None:
        if snapshot is None:
            snapshot = self.snapshot()
        tmp_path = self.db_file.with_name(self.db_file.name + ".tmp")
        try:
            with open(tmp_path, "w", encoding="utf-8") as handle:
                json.dump(snapshot, handle, indent=2)
                handle.write("\n")
            os.replace(tmp_path, self.db_file)
        finally:
            if tmp_path.exists():
                tmp_path.unlink()

    def load(self) -> None:
        """
        Fill the collections from the db file

        Creates the file with empty collections if it does not exist yet.
        Records are validated like request bodies; ids are kept (rendered as
        strings) or assigned when missing. References are not checked here
        because deletes do not cascade and the file may legitimately hold
        dangling enrollments.
        """
        if self.db_file is None:
            return

        if not self.db_file.exists():
            self.db_file.parent.mkdir(parents=True, exist_ok=True)
            self._write_file()
            logger.info(f"Created empty db file {self.db_file}")
            return

        with open(self.db_file, encoding="utf-8") as handle:
            data = json.load(handle)

        if not isinstance(data, dict):
            raise ValidationError(f"db file {self.db_file} must contain a JSON object")

        for name in data:
            if name not in self.collections:
                logger.warning(f"Ignoring unknown collection '{name}' in {self.db_file}")

        for name, collection in self.collections.items():
            raw_records = data.get(name, [])
            if not isinstance(raw_records, list):
                raise ValidationError(f"'{name}' in {self.db_file} must be a list", field=name)
            # Explicit ids raise the counter first so assigned ids never collide with them
            for raw in raw_records:
                if isinstance(raw, dict) and raw.get("id") is not None:
                    collection.observe_id(str(raw["id"]))
            for raw in raw_records:
                record = decode(name, raw)
                raw_id = raw.get("id")
                collection.insert(record, None if raw_id is None else str(raw_id))

        counts = ", ".join(f"{len(c.records)} {name}" for name, c in self.collections.items())
        logger.info(f"Loaded {counts} from {self.db_file}")
