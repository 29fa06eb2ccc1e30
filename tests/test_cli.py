"""
ClipNotes v1 - CLI Tests
"""

import pytest
from click.testing import CliRunner

from note_service import cli as cli_module
from note_service.parsers import ParserRegistry, TikTokParser

from conftest import CANONICAL_URL


@pytest.fixture
def runner(monkeypatch, tiktok_config, sync_http_client) -> CliRunner:
    def build_registry():
        registry = ParserRegistry()
        registry.register(TikTokParser(tiktok_config, client=sync_http_client))
        return registry

    monkeypatch.setattr(cli_module, "_build_registry", build_registry)
    return CliRunner()


class TestCheckCommand:

    def test_accepted(self, runner):
        result = runner.invoke(cli_module.cli, ["check", CANONICAL_URL])

        assert result.exit_code == 0
        assert "TikTokParser" in result.output

    def test_rejected(self, runner):
        result = runner.invoke(cli_module.cli, ["check", "not a url at all"])

        assert result.exit_code == 1
        assert "No parser accepts" in result.output


class TestNoteCommand:

    def test_prints_note(self, runner):
        result = runner.invoke(cli_module.cli, ["note", CANONICAL_URL])

        assert result.exit_code == 0
        assert "videoDescription=desc" in result.output

    def test_writes_note_to_output_dir(self, runner, tmp_path):
        result = runner.invoke(cli_module.cli, ["note", CANONICAL_URL, "--output-dir", str(tmp_path)])

        assert result.exit_code == 0
        written = list(tmp_path.glob("*.md"))
        assert len(written) == 1
        assert written[0].name.startswith("@someuser ")
        assert "videoId=1234567890123456789" in written[0].read_text(encoding="utf-8")

    def test_fetch_failure_exits_nonzero(self, runner, fake_tiktok):
        fake_tiktok.add(CANONICAL_URL, 500)

        result = runner.invoke(cli_module.cli, ["note", CANONICAL_URL])

        assert result.exit_code == 1
        assert "Fetch failed" in result.output

    def test_shared_client_is_reused_across_commands(self, runner, sync_http_client, fake_tiktok):
        first = runner.invoke(cli_module.cli, ["note", CANONICAL_URL])
        second = runner.invoke(cli_module.cli, ["check", CANONICAL_URL])

        assert first.exit_code == 0
        assert second.exit_code == 0
        assert not sync_http_client.is_closed
        assert fake_tiktok.requested_urls == [CANONICAL_URL]
