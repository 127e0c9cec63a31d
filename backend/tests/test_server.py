import uvicorn

from fitsync import __main__ as server
from fitsync.config import Settings


def test_main_runs_app_with_configured_address(monkeypatch):
    calls = []
    monkeypatch.setattr(server, "get_settings", lambda: Settings(HOST="0.0.0.0", PORT=9000))
    monkeypatch.setattr(uvicorn, "run", lambda app, **kwargs: calls.append((app, kwargs)))

    server.main()

    assert calls == [("fitsync.main:app", {"host": "0.0.0.0", "port": 9000})]
