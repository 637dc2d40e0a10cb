from movies_api.config import load_settings


def test_defaults(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    for name in ["MONGO_URI", "DB_NAME", "MOVIES_COLLECTION_NAME", "GENRES_COLLECTION_NAME", "STORE_BACKEND", "PORT"]:
        monkeypatch.delenv(name, raising=False)

    settings = load_settings()

    assert settings.mongo_uri == "mongodb://localhost:27017"
    assert settings.movies_collection == "movies"
    assert settings.genres_collection == "genres"
    assert settings.store_backend == "mongo"
    assert settings.port == 3000


def test_environment_overrides(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("MONGO_URI", "mongodb://db:27017")
    monkeypatch.setenv("DB_NAME", "cinema")
    monkeypatch.setenv("STORE_BACKEND", "Memory")
    monkeypatch.setenv("PORT", "8080")

    settings = load_settings()

    assert settings.mongo_uri == "mongodb://db:27017"
    assert settings.db_name == "cinema"
    assert settings.store_backend == "memory"
    assert settings.port == 8080
