"""Tests de la configuration (pydantic-settings)."""

from pathlib import Path

from src.config import Settings


class TestSettings:
    def test_valeurs_par_defaut(self, monkeypatch):
        for name in ("SITE_URL", "SUPABASE_URL", "SUPABASE_KEY"):
            monkeypatch.delenv(f"GRATUIT_STREAMING_{name}", raising=False)

        settings = Settings(_env_file=None)

        assert settings.site_url == "https://gratuit-streaming.fr"
        assert settings.supabase_url is None
        assert not settings.supabase_enabled

    def test_variables_d_environnement(self, monkeypatch):
        monkeypatch.setenv("GRATUIT_STREAMING_SITE_URL", "https://staging.example.org/")
        monkeypatch.setenv("GRATUIT_STREAMING_SUPABASE_URL", "https://proj.supabase.co/")
        monkeypatch.setenv("GRATUIT_STREAMING_SUPABASE_KEY", "anon")

        settings = Settings(_env_file=None)

        assert settings.site_url == "https://staging.example.org"
        assert settings.supabase_url == "https://proj.supabase.co"
        assert settings.supabase_enabled

    def test_expansion_du_chemin_de_log(self):
        settings = Settings(_env_file=None, log_file="~/logs/site.log")

        assert settings.log_file == Path("~/logs/site.log").expanduser()
