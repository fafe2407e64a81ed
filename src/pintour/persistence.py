from __future__ import annotations

import csv
import logging
from datetime import datetime
from decimal import Decimal, InvalidOperation
from pathlib import Path
from typing import List, Optional
from uuid import UUID

from .schemas import LocationRecord
from .validity import is_valid_location

LOGGER = logging.getLogger(__name__)

COLUMNS = [
    "id",
    "timestamp",
    "latitude",
    "longitude",
    "description",
    "service",
    "user_type",
    "user_id",
    "stream_id",
]


class LocationStore:
    """Simple TSV-based append-only log of location pins."""

    def __init__(self, tsv_path: Path):
        self.tsv_path = tsv_path
        self.tsv_path.parent.mkdir(parents=True, exist_ok=True)

    def append(self, record: LocationRecord) -> None:
        """Append a single location record, writing the header on first use."""
        file_exists = self.tsv_path.exists()
        with self.tsv_path.open("a", encoding="utf-8", newline="") as fh:
            writer = csv.writer(fh, delimiter="\t")
            if not file_exists:
                writer.writerow(COLUMNS)
            writer.writerow(
                [
                    str(record.id),
                    record.timestamp.isoformat(),
                    str(record.latitude),
                    str(record.longitude),
                    record.description,
                    record.service,
                    record.user_type,
                    record.user_id,
                    record.stream_id,
                ]
            )

    def load(self, limit: Optional[int] = None) -> List[LocationRecord]:
        """Read records in file order, keeping only the most recent ``limit`` rows.

        Malformed rows are skipped.
        """
        if not self.tsv_path.exists():
            return []

        records: List[LocationRecord] = []
        with self.tsv_path.open("r", encoding="utf-8", newline="") as fh:
            reader = csv.DictReader(fh, delimiter="\t")
            for line_no, row in enumerate(reader, start=2):
                try:
                    records.append(
                        LocationRecord(
                            id=UUID(row["id"]),
                            timestamp=datetime.fromisoformat(row["timestamp"]),
                            latitude=Decimal(row["latitude"]),
                            longitude=Decimal(row["longitude"]),
                            description=row.get("description") or "",
                            service=row.get("service") or "Unknown",
                            user_type=row.get("user_type") or "user",
                            user_id=row.get("user_id") or "",
                            stream_id=row.get("stream_id") or "",
                        )
                    )
                except (KeyError, TypeError, ValueError, InvalidOperation):
                    LOGGER.debug("Skipping malformed row %d in %s", line_no, self.tsv_path)
                    continue

        if limit is not None:
            records = records[-limit:] if limit > 0 else []
        return records

    def load_valid(self, limit: int = 500, recent: Optional[int] = None) -> List[LocationRecord]:
        """Bulk-load path: drop unplottable records, then cap to the first ``limit``.

        With ``recent`` set, only the most recent ``recent`` rows are considered.
        """
        valid = [record for record in self.load(recent) if is_valid_location(record)]
        return valid[:limit]
