import pytest

import config
import main
from database import Database
from errors import DatabaseUnavailable


@pytest.fixture
def unreachable_settings(tmp_path):
    # Parent directory does not exist, so sqlite cannot open the file
    return config.Settings(mode=config.TEST_MODE, database_url=f"sqlite:///{tmp_path / 'missing' / 'emails.db'}")


def test_ping_raises_when_database_unreachable(unreachable_settings):
    database = Database(unreachable_settings.sqlalchemy_url())
    with pytest.raises(DatabaseUnavailable):
        database.ping()


def test_create_app_refuses_unreachable_database(unreachable_settings):
    with pytest.raises(DatabaseUnavailable):
        main.create_app(unreachable_settings)


def test_run_exits_when_database_unreachable(monkeypatch, unreachable_settings):
    served = []
    monkeypatch.setattr(config, "load_settings", lambda: unreachable_settings)
    monkeypatch.setattr(main.uvicorn, "run", lambda *args, **kwargs: served.append(kwargs))

    with pytest.raises(SystemExit) as exc_info:
        main.run()

    assert exc_info.value.code == 1
    assert served == []


def test_run_serves_on_configured_port(monkeypatch, settings):
    served = []
    settings = settings.model_copy(update={"port": 6061})
    monkeypatch.setattr(config, "load_settings", lambda: settings)
    monkeypatch.setattr(main.uvicorn, "run", lambda app, **kwargs: served.append(kwargs))

    main.run()

    assert served[0]["port"] == 6061
    assert served[0]["access_log"] is False


def test_create_app_creates_missing_table(settings, database):
    main.create_app(settings, database)
    with database.engine.connect() as conn:
        assert database.engine.dialect.has_table(conn, "contas_email")
