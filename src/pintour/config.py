from __future__ import annotations

from pathlib import Path
from typing import Optional

import yaml
from pydantic import BaseModel, Field


class DatabaseConfig(BaseModel):
    path: Path = Path("data/locations.tsv")
    bulk_load_limit: int = Field(default=500, ge=1)
    most_recent_locations: Optional[int] = Field(default=None, ge=1)


class TourConfig(BaseModel):
    max_locations: int = Field(default=200, ge=1)
    max_stops: int = Field(default=15, ge=1)
    max_zoom: int = Field(default=6, ge=1)
    sample_size: int = Field(default=10, ge=0)
    cluster_distance_km: float = Field(default=1000.0, gt=0)


class OutputConfig(BaseModel):
    output_dir: Path = Path("output")


class AppConfig(BaseModel):
    database: DatabaseConfig = Field(default_factory=DatabaseConfig)
    tour: TourConfig = Field(default_factory=TourConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)

    @classmethod
    def load(cls, path: Optional[Path]) -> "AppConfig":
        if path is None:
            return cls()
        with Path(path).expanduser().open("r", encoding="utf-8") as handle:
            raw = yaml.safe_load(handle)
        return cls.model_validate(raw or {})
