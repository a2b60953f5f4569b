"""
Aggregator: one developer listing call fanned out into per-app detail calls.

The two paths join their detail calls differently. The developer path is
tolerant: a failed detail call falls back to the listing record. The by-id
path is strict: any failed detail call fails the whole request.
"""

import logging
from concurrent.futures import ThreadPoolExecutor

from config import Config
from models import AppInstallInfo, AppSummary

logger = logging.getLogger("PlayStoreFacade")


class ClientInputError(ValueError):
    pass


def merge_records(partial: dict, detail: dict) -> dict:
    """Detail fields win on collision; listing-only fields are kept."""
    merged = dict(partial)
    merged.update(detail)
    return merged


class Aggregator:
    def __init__(self, config: Config, source):
        self.config = config
        self.source = source

    def _fetch_detail(self, app_id):
        return self.source.fetch_app(app_id, lang=self.config.lang, country=self.config.country)

    def _detail_or_partial(self, partial: dict) -> dict:
        app_id = partial.get("appId")
        try:
            detail = self._fetch_detail(app_id)
        except Exception as e:
            logger.error(f"Detail fetch failed for {app_id}, using listing record: {e}")
            return dict(partial)
        return merge_records(partial, detail)

    def _fan_out(self, func, items, max_workers=None):
        if not items:
            return []
        workers = len(items) if max_workers is None else max(1, min(len(items), max_workers))
        # map() yields in submission order and re-raises the first failure
        # in that order; leaving the block waits for every call to finish.
        with ThreadPoolExecutor(max_workers=workers) as executor:
            return list(executor.map(func, items))

    def fetch_developer_apps(self) -> list[dict]:
        cfg = self.config
        logger.info(f"Fetching apps for developer: {cfg.developer_id}")
        partials = self.source.list_developer_apps(
            cfg.developer_id, num=cfg.page_size, lang=cfg.lang, country=cfg.country
        )
        logger.info(f"Listed {len(partials)} apps, fetching details")

        records = self._fan_out(self._detail_or_partial, list(partials), self.config.max_workers)
        logger.info(f"Successfully fetched {len(records)} apps")
        return records

    def developer_app_summaries(self) -> list[AppSummary]:
        return [AppSummary.from_record(record) for record in self.fetch_developer_apps()]

    def fetch_apps_by_ids(self, ids) -> list[AppInstallInfo]:
        if isinstance(ids, str):
            ids = [ids] if ids else []
        ids = list(ids or [])
        if not ids:
            raise ClientInputError("At least one app id is required")

        logger.info(f"Fetching details for {len(ids)} apps")
        # One worker per id so no call queues behind another
        details = self._fan_out(self._fetch_detail, ids)
        return [AppInstallInfo.from_record(detail) for detail in details]
