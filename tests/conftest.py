"""Shared test fixtures and configuration."""
from __future__ import annotations

import json
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from app.main import create_app
from langroute.config.settings import Settings
from langroute.translations.store import TranslationStore

EN_BUNDLE = {
    "nav.home": "Home",
    "nav.about": "About",
    "home.title": "Welcome",
    "home.body": "English home page.",
    "about.title": "About us",
    "about.body": "English about page.",
    "notFound.title": "Page not found",
    "notFound.body": "Nothing here.",
}

FR_BUNDLE = {
    "nav.home": "Accueil",
    "nav.about": "À propos",
    "home.title": "Bienvenue",
    "home.body": "Page d'accueil en français.",
    "about.title": "À propos de nous",
    "about.body": "Page à propos en français.",
    "notFound.title": "Page introuvable",
    "notFound.body": "Rien ici.",
}


@pytest.fixture
def translations_dir(tmp_path: Path) -> Path:
    """Return a translations directory with en, fr and a broken de bundle."""
    directory = tmp_path / "translations"
    directory.mkdir()
    (directory / "en.json").write_text(json.dumps(EN_BUNDLE), encoding="utf-8")
    (directory / "fr.json").write_text(json.dumps(FR_BUNDLE, ensure_ascii=False), encoding="utf-8")
    (directory / "de.json").write_text('{"nav.home": "Startseite",', encoding="utf-8")
    return directory


@pytest.fixture
def store(translations_dir: Path) -> TranslationStore:
    """Return a store reading the fixture directory."""
    return TranslationStore(translations_dir)


@pytest.fixture
def app_settings(monkeypatch) -> Settings:
    """Return settings unaffected by the caller's environment."""
    for name in (
        "LANGROUTE_DEBUG",
        "LANGROUTE_LOG_LEVEL",
        "LANGROUTE_HOST",
        "LANGROUTE_PORT",
        "LANGROUTE_ALLOWED_ORIGIN",
        "LANGROUTE_SERVER_URL",
        "LANGROUTE_REQUEST_TIMEOUT",
    ):
        monkeypatch.delenv(name, raising=False)
    return Settings()


@pytest.fixture
def client(app_settings: Settings, store: TranslationStore) -> TestClient:
    """Create test client for an app serving the fixture bundles."""
    return TestClient(create_app(app_settings, store))


@pytest.fixture
def en_bundle() -> dict[str, str]:
    return dict(EN_BUNDLE)


@pytest.fixture
def fr_bundle() -> dict[str, str]:
    return dict(FR_BUNDLE)
