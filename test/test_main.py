"""Tests for the command line entry point."""

import json
from pathlib import Path

import main


def run(content_dir: Path, tmp_path: Path, *args):
    return main.main(
        ["--config", str(tmp_path / "missing.json"), "--content-dir", str(content_dir), *args]
    )


class TestCli:
    def test_no_command(self, capsys):
        assert main.main([]) == 1

    def test_list_published(self, content_dir, tmp_path, capsys):
        assert run(content_dir, tmp_path, "list", "blog") == 0
        out = capsys.readouterr().out
        assert "shipping-a-static-site" in out
        assert "half-written" not in out

    def test_list_with_drafts(self, content_dir, tmp_path, capsys):
        assert run(content_dir, tmp_path, "list", "blog", "--drafts") == 0
        assert "half-written" in capsys.readouterr().out

    def test_list_projects_order(self, content_dir, tmp_path, capsys):
        assert run(content_dir, tmp_path, "list", "projects") == 0
        out = capsys.readouterr().out
        assert out.index("old-tool") < out.index("site-engine")

    def test_slugs(self, content_dir, tmp_path, capsys):
        assert run(content_dir, tmp_path, "slugs", "page") == 0
        assert "about" in capsys.readouterr().out.splitlines()

    def test_show(self, content_dir, tmp_path, capsys):
        assert run(content_dir, tmp_path, "show", "blog", "half-written") == 0
        out = capsys.readouterr().out
        payload = json.loads(out[out.index("{"):])
        assert payload["slug"] == "half-written"
        assert payload["metadata"]["status"] == "draft"

    def test_meta(self, content_dir, tmp_path, capsys):
        assert run(content_dir, tmp_path, "meta", "project", "site-engine") == 0
        out = capsys.readouterr().out
        payload = json.loads(out[out.index("{"):])
        assert payload["title"] == "Site Engine - Project | Portfolio"
        assert payload["json_ld"]["programmingLanguage"] == ["Python", "Markdown"]

    def test_show_missing(self, content_dir, tmp_path, capsys):
        assert run(content_dir, tmp_path, "show", "blog", "nope") == 1
        assert "Not found" in capsys.readouterr().err

    def test_new(self, tmp_path, monkeypatch, capsys):
        replies = iter(["Fresh Idea", "", "", ""])
        monkeypatch.setattr("builtins.input", lambda _: next(replies))

        assert run(tmp_path / "content", tmp_path, "new", "blog") == 0
        assert (tmp_path / "content" / "blog" / "fresh-idea.md").exists()

    def test_feeds(self, content_dir, tmp_path):
        out_dir = tmp_path / "public"
        assert run(content_dir, tmp_path, "feeds", "--output-dir", str(out_dir)) == 0
        assert (out_dir / "sitemap.xml").exists()
        assert (out_dir / "rss.xml").exists()
