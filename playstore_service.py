import logging
import os
import re
from urllib.parse import quote

import requests
from google_play_scraper import app as gplay_app

logger = logging.getLogger("PlayStoreFacade")

DEV_PAGE_URL_TEMPLATE = 'https://play.google.com/store/apps/dev?id={dev_id}&hl={lang}&gl={country}'
DEVELOPER_PAGE_URL_TEMPLATE = 'https://play.google.com/store/apps/developer?id={dev_id}&hl={lang}&gl={country}'
APP_URL_TEMPLATE = 'https://play.google.com/store/apps/details?id={app_id}'

APP_LINK_RE = re.compile(r'/store/apps/details\?id=([A-Za-z0-9_.]+)')


class UpstreamError(RuntimeError):
    pass


class UpstreamListError(UpstreamError):
    pass


class UpstreamDetailError(UpstreamError):
    def __init__(self, app_id, message):
        super().__init__(message)
        self.app_id = app_id


def configure_logging(log_dir="logs", quiet=False):
    logging.basicConfig(level=logging.INFO, format='[%(levelname)s] %(message)s')

    # Failure log
    os.makedirs(log_dir, exist_ok=True)
    failure_path = os.path.abspath(os.path.join(log_dir, "failures.log"))
    if not any(getattr(h, "baseFilename", None) == failure_path for h in logger.handlers):
        failure_log_handler = logging.FileHandler(failure_path)
        failure_log_handler.setLevel(logging.ERROR)
        failure_log_handler.setFormatter(logging.Formatter('[%(asctime)s] [%(levelname)s] %(message)s'))
        logger.addHandler(failure_log_handler)

    logger.setLevel(logging.ERROR if quiet else logging.INFO)


def developer_page_url(developer_id, lang, country):
    # Numeric ids have their own page; names go through /developer
    template = DEV_PAGE_URL_TEMPLATE if str(developer_id).isdigit() else DEVELOPER_PAGE_URL_TEMPLATE
    return template.format(dev_id=quote(str(developer_id)), lang=lang, country=country)


def parse_app_ids(html, num):
    app_ids = []
    for app_id in APP_LINK_RE.findall(html):
        if app_id not in app_ids:
            app_ids.append(app_id)
        if len(app_ids) >= num:
            break
    return app_ids


class PlayStoreSource:
    """Google Play metadata, reached through a developer listing and per-app detail."""

    def __init__(self, timeout=10):
        self.timeout = timeout

    def list_developer_apps(self, developer_id, num=50, lang="en", country="us"):
        url = developer_page_url(developer_id, lang, country)
        try:
            resp = requests.get(url, timeout=self.timeout)
            resp.raise_for_status()
        except requests.RequestException as e:
            logger.error(f"Failed to list apps for developer {developer_id}: {e}")
            raise UpstreamListError(str(e)) from e

        return [
            {
                "appId": app_id,
                "url": APP_URL_TEMPLATE.format(app_id=app_id),
                "developerId": str(developer_id),
            }
            for app_id in parse_app_ids(resp.text, num)
        ]

    def fetch_app(self, app_id, lang="en", country="us"):
        try:
            return gplay_app(app_id, lang=lang, country=country)
        except Exception as e:
            raise UpstreamDetailError(app_id, str(e) or f"App not found: {app_id}") from e
