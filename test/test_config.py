import json
from pathlib import Path

import pytest

from portfolio.config import SiteConfig, load_config


class TestLoadConfig:
    def test_defaults_when_missing(self, tmp_path: Path):
        config = load_config(tmp_path / "config.json")
        assert config == SiteConfig()
        assert config.words_per_minute == 200
        assert config.excerpt_length == 150

    def test_reads_json(self, tmp_path: Path):
        path = tmp_path / "config.json"
        path.write_text(
            json.dumps({"site_name": "Jane", "site_url": "https://jane.dev/", "excerpt_length": 80}),
            encoding="utf-8",
        )

        config = load_config(path)

        assert config.site_name == "Jane"
        assert config.site_url == "https://jane.dev"
        assert config.excerpt_length == 80
        assert config.image_paths["blog"] == "/images/blog/"

    def test_env_overrides(self, tmp_path: Path, monkeypatch):
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"site_url": "https://file.dev"}), encoding="utf-8")
        monkeypatch.setenv("PORTFOLIO_SITE_URL", "https://env.dev/")
        monkeypatch.setenv("PORTFOLIO_CONTENT_DIR", "/srv/content")

        config = load_config(path)

        assert config.site_url == "https://env.dev"
        assert config.content_dir == "/srv/content"

    def test_invalid_json(self, tmp_path: Path):
        path = tmp_path / "config.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(ValueError):
            load_config(path)

    def test_non_object_json(self, tmp_path: Path):
        path = tmp_path / "config.json"
        path.write_text("[1, 2]", encoding="utf-8")
        with pytest.raises(ValueError):
            load_config(path)


class TestAbsoluteUrl:
    def test_relative_paths(self):
        config = SiteConfig(site_url="https://jane.dev")
        assert config.absolute_url("/blog/x") == "https://jane.dev/blog/x"
        assert config.absolute_url("images/a.png") == "https://jane.dev/images/a.png"

    def test_absolute_kept(self):
        assert SiteConfig().absolute_url("https://cdn.dev/a.png") == "https://cdn.dev/a.png"
