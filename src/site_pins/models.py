from __future__ import annotations

import sqlite3
from dataclasses import dataclass
from typing import Optional

# Wire names, in column order
MARKER_FIELDS = (
    "id",
    "latitude",
    "longitude",
    "website",
    "siteName",
    "siteDescription",
    "ownerName",
    "ownerDescription",
    "ownerWebsite",
    "isAnonymous",
    "created_at",
)


@dataclass(frozen=True)
class NewMarker:
    """A create payload that has passed validation."""

    latitude: float
    longitude: float
    website: str
    siteName: str
    siteDescription: Optional[str] = None
    ownerName: Optional[str] = None
    ownerDescription: Optional[str] = None
    ownerWebsite: Optional[str] = None
    isAnonymous: bool = False

    def to_params(self) -> dict:
        """Named parameters for the insert statement."""
        return {
            "latitude": self.latitude,
            "longitude": self.longitude,
            "website": self.website,
            "siteName": self.siteName,
            "siteDescription": self.siteDescription,
            "ownerName": self.ownerName,
            "ownerDescription": self.ownerDescription,
            "ownerWebsite": self.ownerWebsite,
            "isAnonymous": 1 if self.isAnonymous else 0,
        }


def row_to_marker(row: sqlite3.Row) -> dict:
    marker = {k: row[k] for k in row.keys()}
    marker["isAnonymous"] = bool(marker.get("isAnonymous"))
    return marker
