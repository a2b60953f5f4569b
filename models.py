"""
Response shapes.
Upstream records are plain dicts; these are what the front end receives.
"""

from dataclasses import dataclass, field
from typing import Optional

from summarizer import extract_short_summary


def _present(value, default):
    return default if value is None else value


@dataclass
class AppSummary:
    """One app from the developer listing, with defaults filled in."""
    app_id: str
    title: str = "Unknown"
    summary: str = ""
    icon: Optional[str] = None
    score: float = 0
    score_text: str = "0.0"
    installs: str = "N/A"
    price: float = 0
    free: bool = True
    developer: str = "Unknown"
    url: Optional[str] = None
    screenshots: list[str] = field(default_factory=list)

    @classmethod
    def from_record(cls, record: dict) -> "AppSummary":
        return cls(
            app_id=record["appId"],
            title=record.get("title") or "Unknown",
            summary=extract_short_summary(record.get("summary")),
            icon=record.get("icon"),
            score=_present(record.get("score"), 0),
            score_text=record.get("scoreText") or "0.0",
            installs=record.get("installs") or "N/A",
            price=_present(record.get("price"), 0),
            free=_present(record.get("free"), True),
            developer=record.get("developer") or "Unknown",
            url=record.get("url"),
            screenshots=list(record.get("screenshots") or []),
        )

    def to_dict(self) -> dict:
        return {
            "title": self.title,
            "summary": self.summary,
            "appId": self.app_id,
            "icon": self.icon,
            "score": self.score,
            "scoreText": self.score_text,
            "installs": self.installs,
            "price": self.price,
            "free": self.free,
            "developer": self.developer,
            "url": self.url,
            "screenshots": self.screenshots,
        }


@dataclass
class AppInstallInfo:
    """Narrow projection of a detail record. No defaults."""
    app_id: Optional[str]
    installs: Optional[str]
    genre: Optional[str]
    content_rating: Optional[str]

    @classmethod
    def from_record(cls, record: dict) -> "AppInstallInfo":
        return cls(
            app_id=record.get("appId"),
            installs=record.get("installs"),
            genre=record.get("genre"),
            content_rating=record.get("contentRating"),
        )

    def to_dict(self) -> dict:
        return {
            "appId": self.app_id,
            "installs": self.installs,
            "genre": self.genre,
            "contentRating": self.content_rating,
        }
