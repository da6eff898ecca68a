import pytest

from passcraft.randomsource import reset_default_source


@pytest.fixture(autouse=True)
def fresh_default_source():
    reset_default_source()
    yield
    reset_default_source()


@pytest.fixture
def appdata(tmp_path, monkeypatch):
    # keep config files out of the real home directory
    monkeypatch.setenv("APPDATA", str(tmp_path))
    return tmp_path
