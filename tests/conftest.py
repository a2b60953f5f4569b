import pytest

from config import Config


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch, tmp_path):
    for name in ("PLAY_DEVELOPER_ID", "PLAY_PAGE_SIZE", "PLAY_LANG", "PLAY_COUNTRY", "PORT",
                 "PLAY_MAX_WORKERS", "PLAY_REQUEST_TIMEOUT"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("LOG_DIR", str(tmp_path / "logs"))
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def config(tmp_path):
    return Config(developer_id="1234", page_size=10, lang="en", country="us", max_workers=8,
                  log_dir=str(tmp_path / "logs"))


@pytest.fixture
def partials():
    return [
        {"appId": "com.a", "url": "https://play.google.com/store/apps/details?id=com.a", "developerId": "1234"},
        {"appId": "com.b", "url": "https://play.google.com/store/apps/details?id=com.b", "developerId": "1234"},
        {"appId": "com.c", "url": "https://play.google.com/store/apps/details?id=com.c", "developerId": "1234"},
    ]


@pytest.fixture
def details():
    return {
        "com.a": {
            "appId": "com.a", "title": "Alpha", "summary": "<b>Alpha</b> app. More text.",
            "score": 4.5, "scoreText": "4.5", "installs": "1,000+", "price": 0, "free": True,
            "developer": "Dev", "genre": "Tools", "contentRating": "Everyone",
            "screenshots": ["https://img/a1", "https://img/a2"], "icon": "https://img/a",
        },
        "com.b": {
            "appId": "com.b", "title": "Beta", "summary": "Beta summary",
            "score": 3.9, "scoreText": "3.9", "installs": "10,000+", "price": 1.99, "free": False,
            "developer": "Dev", "genre": "Games", "contentRating": "Teen",
        },
        "com.c": {
            "appId": "com.c", "title": "Gamma", "installs": "500+", "genre": "Education",
            "contentRating": "Everyone",
        },
    }
