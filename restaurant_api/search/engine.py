from __future__ import annotations

import math
from typing import Any

import numpy as np

from ..config import DEFAULT_APP_CONFIG, AppConfig
from ..dataset.records import Restaurant, coordinates, cuisine_labels, restaurant_name
from ..dataset.store import Dataset
from .errors import BadRequestError, DataUnavailableError
from .geo import haversine_km
from .models import RestaurantPage


def _contains(haystack: str, needle: str) -> bool:
    return needle in haystack.casefold()


class QueryEngine:
    """
    Read-only queries over a single dataset snapshot.

    The engine never mutates the dataset or its records; the location
    search returns copies with a ``distance`` field added.
    """

    def __init__(self, dataset: Dataset, config: AppConfig = DEFAULT_APP_CONFIG) -> None:
        self._dataset = dataset
        self._config = config

    @property
    def dataset(self) -> Dataset:
        return self._dataset

    def paginate(self, page: int | None = None, per_page: int | None = None) -> RestaurantPage:
        """Return one page of restaurants in dataset order."""
        if page is None or page < 1:
            page = 1
        if per_page is None or per_page < 1:
            per_page = self._config.default_per_page

        if not self._dataset:
            raise DataUnavailableError("No restaurant data available")

        start = (page - 1) * per_page
        records = self._dataset.records[start:start + per_page]
        return RestaurantPage(
            restaurants=list(records),
            total_pages=-(-len(self._dataset) // per_page),
            current_page=page,
        )

    def search_by_name(self, name: str | None) -> list[Restaurant]:
        if not name:
            raise BadRequestError("Name is required")
        needle = name.casefold()

        results: list[Restaurant] = []
        for record in self._dataset:
            value = restaurant_name(record)
            if value is not None and _contains(value, needle):
                results.append(record)
        return results

    def search_by_location(
        self,
        lat: float,
        lng: float,
        max_distance: float | None = None,
    ) -> list[dict[str, Any]]:
        """
        Restaurants within ``max_distance`` km of ``(lat, lng)``, nearest first.

        Records without numeric coordinates are skipped. Ties keep dataset
        order.
        """
        if not (math.isfinite(lat) and math.isfinite(lng)):
            raise BadRequestError("Invalid latitude or longitude")
        if max_distance is None:
            max_distance = self._config.default_max_distance_km

        located: list[Restaurant] = []
        points: list[tuple[float, float]] = []
        for record in self._dataset:
            point = coordinates(record)
            if point is not None:
                located.append(record)
                points.append(point)

        if not located:
            return []

        coords = np.asarray(points, dtype=float)
        distances = haversine_km(lat, lng, coords[:, 0], coords[:, 1])

        within = np.flatnonzero(distances <= max_distance)
        order = within[np.argsort(distances[within], kind="stable")]
        return [{**located[i], "distance": float(distances[i])} for i in order]

    def search_by_cuisine(self, cuisine: str | None) -> list[Restaurant]:
        if not cuisine:
            raise BadRequestError("Cuisine is required")
        needle = cuisine.casefold()

        results: list[Restaurant] = []
        for record in self._dataset:
            labels = cuisine_labels(record)
            if labels and any(_contains(label, needle) for label in labels):
                results.append(record)
        return results
