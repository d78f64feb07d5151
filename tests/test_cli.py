"""Tests for the command-line interface."""

import json

import pytest

from url_registry.cli import main, build_parser
from url_registry.registry import URLRegistry


@pytest.fixture
def run_cli(storage_file, monkeypatch, tmp_path):
    """Run the CLI against a temporary registry file."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("BASE_URL", raising=False)
    
    def _run(*args):
        return main(["--storage-file", storage_file, *args])
    
    return _run


class TestParser:
    """Test argument parsing."""
    
    def test_shorten_optional_custom_code(self):
        parser = build_parser()
        
        args = parser.parse_args(["shorten", "https://example.com"])
        assert args.custom_code is None
        
        args = parser.parse_args(["shorten", "https://example.com", "ex1"])
        assert args.custom_code == "ex1"
    
    def test_no_command(self):
        assert build_parser().parse_args([]).command is None


class TestCommands:
    """Test CLI commands."""
    
    def test_shorten(self, run_cli, capsys):
        assert run_cli("shorten", "https://example.com", "ex1") == 0
        
        out = capsys.readouterr().out
        assert "Short URL: https://short.ly/ex1" in out
        assert "Code: ex1" in out
    
    def test_shorten_with_base_url(self, run_cli, capsys):
        assert run_cli("--base-url", "http://localhost:3000", "shorten", "https://example.com", "ex1") == 0
        assert "http://localhost:3000/ex1" in capsys.readouterr().out
    
    def test_shorten_invalid_url(self, run_cli, capsys):
        assert run_cli("shorten", "not-a-url") == 1
        assert "Invalid URL" in capsys.readouterr().err
    
    def test_shorten_taken_code(self, run_cli, capsys):
        run_cli("shorten", "https://example.com/a", "ex1")
        
        assert run_cli("shorten", "https://example.com/b", "ex1") == 1
        assert "already exists" in capsys.readouterr().err
    
    def test_expand_does_not_count_click(self, run_cli, storage_file, capsys):
        run_cli("shorten", "https://example.com", "ex1")
        
        assert run_cli("expand", "ex1") == 0
        assert "Original URL: https://example.com" in capsys.readouterr().out
        
        record = URLRegistry(storage_file=storage_file).list_urls()[0]
        assert record.click_count == 0
    
    def test_expand_not_found(self, run_cli, capsys):
        assert run_cli("expand", "missing") == 1
        assert "not found" in capsys.readouterr().err
    
    def test_stats_for_code(self, run_cli, capsys):
        run_cli("shorten", "https://example.com", "ex1")
        capsys.readouterr()
        
        assert run_cli("stats", "ex1") == 0
        
        out = capsys.readouterr().out
        stats = json.loads(out.split("\n", 1)[1])
        assert stats["shortCode"] == "ex1"
        assert stats["clickCount"] == 0
        assert "lastAccessed" not in stats
    
    def test_stats_overall(self, run_cli, capsys):
        run_cli("shorten", "https://example.com", "ex1")
        capsys.readouterr()
        
        assert run_cli("stats") == 0
        
        out = capsys.readouterr().out
        stats = json.loads(out.split("\n", 1)[1])
        assert stats["totalUrls"] == 1
        assert stats["totalClicks"] == 0
        assert stats["topUrls"][0]["shortCode"] == "ex1"
    
    def test_stats_not_found(self, run_cli, capsys):
        assert run_cli("stats", "missing") == 1
        assert "not found" in capsys.readouterr().err
    
    def test_list(self, run_cli, capsys):
        run_cli("shorten", "https://example.com/a", "a1")
        run_cli("shorten", "https://example.com/b", "b1")
        capsys.readouterr()
        
        assert run_cli("list") == 0
        
        lines = capsys.readouterr().out.splitlines()
        assert lines[0] == "Registered URLs (2):"
        assert lines[1] == "a1 -> https://example.com/a (0 clicks)"
        assert lines[2] == "b1 -> https://example.com/b (0 clicks)"
    
    def test_delete(self, run_cli, capsys):
        run_cli("shorten", "https://example.com", "ex1")
        
        assert run_cli("delete", "ex1") == 0
        assert "Deleted short URL ex1" in capsys.readouterr().out
        
        assert run_cli("delete", "ex1") == 1
        assert "not found" in capsys.readouterr().err
    
    def test_demo(self, run_cli, storage_file, capsys):
        """No command runs the demonstration sequence."""
        assert run_cli() == 0
        
        out = capsys.readouterr().out
        assert "=== URL Registry Demo ===" in out
        assert "Custom URL: https://short.ly/example" in out
        assert "Total URLs: 4" in out
        assert "Total clicks: 1" in out
        
        records = URLRegistry(storage_file=storage_file).list_urls()
        assert [r.original_url for r in records][:3] == [
            "https://www.google.com",
            "https://github.com/microsoft/typescript",
            "https://nodejs.org/en/docs/",
        ]
        assert records[0].click_count == 1
    
    def test_demo_is_repeatable(self, run_cli, capsys):
        """A second run reuses existing records instead of failing."""
        run_cli()
        capsys.readouterr()
        
        assert run_cli() == 0
        
        out = capsys.readouterr().out
        assert "Total URLs: 4" in out
        assert "Total clicks: 2" in out
