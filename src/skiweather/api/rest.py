"""REST API serving filtered views and exports of the weather dataset."""

import datetime
from threading import Lock
from typing import Any, Dict, List, Optional, Sequence
import logging

from fastapi import FastAPI, HTTPException, Query
from fastapi.responses import Response

from ..core.beaufort import BEAUFORT_MAX, BEAUFORT_MIN, describe_wind
from ..dataset import ALL_COUNTRIES, SkiWeatherDataset
from ..io.export import CSV_FILENAME, JSON_FILENAME, records_to_csv, records_to_json
from ..model.regions import Region, SKI_REGIONS, check_unique_names

logger = logging.getLogger(__name__)


def _attachment(content: str, media_type: str, filename: str) -> Response:
    return Response(
        content=content,
        media_type=media_type,
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )


class SkiWeatherAPI:
    """Ski region weather REST API.

    The dataset is generated once, on first use, and then served read-only
    for the lifetime of the process. Handlers that read the dataset are plain
    functions so FastAPI runs them in its threadpool.
    """

    def __init__(
        self,
        regions: Sequence[Region] = SKI_REGIONS,
        reference_date: Optional[datetime.date] = None,
        seed: Optional[int] = None,
        days: int = 365,
    ):
        """Initialize REST API.

        Args:
            regions: Region catalog to generate for
            reference_date: Day after the last generated day (default: today, UTC)
            seed: Random seed (default: OS entropy)
            days: Length of the trailing window
        """
        self.regions = tuple(check_unique_names(regions))
        self.reference_date = reference_date
        self.seed = seed
        self.days = days
        self._dataset: Optional[SkiWeatherDataset] = None
        self._lock = Lock()
        self.app = FastAPI(
            title="Ski Region Weather API",
            description="Synthetic daily weather for alpine ski regions",
            version="1.0.0",
        )

        # Setup routes
        self._setup_routes()

    @property
    def dataset(self) -> SkiWeatherDataset:
        """Session snapshot, generated on first access."""
        with self._lock:
            if self._dataset is None:
                self._dataset = SkiWeatherDataset.generate(
                    regions=self.regions,
                    reference_date=self.reference_date,
                    seed=self.seed,
                    days=self.days,
                )
                logger.info("Session dataset ready with %d records", len(self._dataset))
            return self._dataset

    def view(self, search: str = "", country: str = ALL_COUNTRIES, date: str = "") -> SkiWeatherDataset:
        """Filtered view of the session snapshot."""
        return self.dataset.filter(search=search, country=country, date=date)

    def _setup_routes(self) -> None:
        """Setup all API routes."""

        @self.app.get("/health")
        async def health_check():
            """Health check endpoint."""
            return {
                "status": "healthy",
                "generated": self._dataset is not None,
            }

        @self.app.get("/api/regions")
        async def get_regions():
            """Region catalog."""
            return [r.model_dump(by_alias=True) for r in self.regions]

        @self.app.get("/api/records")
        def get_records(
            search: str = "",
            country: str = ALL_COUNTRIES,
            date: str = "",
            limit: int = Query(100, ge=1, le=10000),
            offset: int = Query(0, ge=0),
        ) -> Dict[str, Any]:
            """Filtered, paged records."""
            view = self.view(search, country, date)
            return {
                "total": len(view),
                "limit": limit,
                "offset": offset,
                "records": [r.model_dump(mode="json", by_alias=True) for r in view.page(limit, offset)],
            }

        @self.app.get("/api/summary")
        def get_summary(search: str = "", country: str = ALL_COUNTRIES, date: str = ""):
            """Summary statistics for a filtered view."""
            return self.view(search, country, date).summary().model_dump()

        @self.app.get("/api/export.csv")
        def export_csv(search: str = "", country: str = ALL_COUNTRIES, date: str = ""):
            """Download a filtered view as CSV."""
            view = self.view(search, country, date)
            return _attachment(records_to_csv(view), "text/csv", CSV_FILENAME)

        @self.app.get("/api/export.json")
        def export_json(search: str = "", country: str = ALL_COUNTRIES, date: str = ""):
            """Download a filtered view as JSON."""
            view = self.view(search, country, date)
            return _attachment(records_to_json(view.records), "application/json", JSON_FILENAME)

        @self.app.get("/api/wind/{beaufort}")
        async def get_wind(beaufort: int):
            """Describe a Beaufort force."""
            if not BEAUFORT_MIN <= beaufort <= BEAUFORT_MAX:
                raise HTTPException(status_code=404, detail="Beaufort force must be between 0 and 12")
            return {"beaufort": beaufort, "description": describe_wind(beaufort)}

        @self.app.get("/api/countries")
        def get_countries() -> List[str]:
            """Countries present in the dataset."""
            return self.dataset.countries()
