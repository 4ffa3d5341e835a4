"""Integration tests for the contribwall CLI.

Exit status is 0 on success and 1 for a missing token, an API failure or
an unwritable output path.
"""

import json

import httpx
import respx
from typer.testing import CliRunner

from contribwall import __version__
from contribwall.cli import app
from payloads import CONTRIBUTORS_URL, OWNER, REPO, make_page

runner = CliRunner()


class TestBuild:
    """contribwall build OWNER REPO"""

    @respx.mock
    def test_writes_svg(self, tmp_path, monkeypatch):
        monkeypatch.setenv("GH_TOKEN", "t0ken")
        respx.get(CONTRIBUTORS_URL).mock(
            side_effect=[
                httpx.Response(200, json=make_page(0, 13)),
                httpx.Response(200, json=[]),
            ]
        )
        target = tmp_path / "contributors.svg"

        result = runner.invoke(app, ["build", OWNER, REPO, "--output", str(target), "--quiet"])

        assert result.exit_code == 0, result.output
        document = target.read_text(encoding="utf-8")
        assert 'width="664" height="104"' in document
        assert document.count("<image ") == 13

    @respx.mock
    def test_json_summary(self, tmp_path, monkeypatch):
        monkeypatch.setenv("GH_TOKEN", "t0ken")
        respx.get(CONTRIBUTORS_URL).mock(
            side_effect=[
                httpx.Response(200, json=make_page(0, 100)),
                httpx.Response(200, json=make_page(100, 37)),
                httpx.Response(200, json=[]),
            ]
        )
        target = tmp_path / "contributors.svg"

        result = runner.invoke(app, ["build", OWNER, REPO, "-o", str(target), "--json"])

        assert result.exit_code == 0, result.output
        data = json.loads(result.stdout)
        assert data["contributor_count"] == 137
        assert data["rows"] == 12
        assert data["width"] == 664
        assert data["output"] == str(target)
        assert data["contribwall_version"] == __version__

    @respx.mock
    def test_token_option(self, tmp_path):
        route = respx.get(CONTRIBUTORS_URL).mock(return_value=httpx.Response(200, json=[]))

        result = runner.invoke(
            app,
            ["build", OWNER, REPO, "--token", "cli-token", "-o", str(tmp_path / "w.svg"), "-q"],
        )

        assert result.exit_code == 0, result.output
        assert route.calls[0].request.headers["Authorization"] == "Bearer cli-token"

    def test_missing_token_exits_without_request(self, tmp_path):
        target = tmp_path / "contributors.svg"
        with respx.mock(assert_all_called=False) as respx_mock:
            route = respx_mock.get(url__regex=r".*").mock(return_value=httpx.Response(200, json=[]))

            result = runner.invoke(app, ["build", OWNER, REPO, "-o", str(target)])
            assert route.call_count == 0

        assert result.exit_code == 1
        assert not target.exists()
        assert "GH_TOKEN" in result.output

    @respx.mock
    def test_api_error_exits_1(self, tmp_path, monkeypatch):
        monkeypatch.setenv("GH_TOKEN", "t0ken")
        respx.get(CONTRIBUTORS_URL).mock(
            return_value=httpx.Response(404, json={"message": "Not Found"})
        )
        target = tmp_path / "contributors.svg"

        result = runner.invoke(app, ["build", OWNER, REPO, "-o", str(target)])

        assert result.exit_code == 1
        assert "404" in result.output
        assert not target.exists()

    @respx.mock
    def test_unwritable_output_exits_1(self, tmp_path, monkeypatch):
        monkeypatch.setenv("GH_TOKEN", "t0ken")
        respx.get(CONTRIBUTORS_URL).mock(return_value=httpx.Response(200, json=[]))

        result = runner.invoke(app, ["build", OWNER, REPO, "-o", str(tmp_path)])

        assert result.exit_code == 1

    @respx.mock
    def test_columns_option(self, tmp_path, monkeypatch):
        monkeypatch.setenv("GH_TOKEN", "t0ken")
        respx.get(CONTRIBUTORS_URL).mock(
            side_effect=[
                httpx.Response(200, json=make_page(0, 5)),
                httpx.Response(200, json=[]),
            ]
        )

        result = runner.invoke(
            app, ["build", OWNER, REPO, "-o", str(tmp_path / "w.svg"), "--columns", "2", "--json"]
        )

        assert result.exit_code == 0, result.output
        data = json.loads(result.stdout)
        assert data["rows"] == 3
        assert data["width"] == 104


class TestConfigCommand:
    """contribwall config"""

    def test_shows_redacted_settings(self, monkeypatch):
        monkeypatch.setenv("GH_TOKEN", "super-secret")

        result = runner.invoke(app, ["config", "--json"])

        assert result.exit_code == 0, result.output
        data = json.loads(result.stdout)
        assert data["token"] == "***"
        assert data["api_url"] == "https://api.github.com"
        assert "super-secret" not in result.output

    def test_missing_token_is_reported(self):
        result = runner.invoke(app, ["config", "--json"])

        assert result.exit_code == 0, result.output
        data = json.loads(result.stdout)
        assert data["token"] == "(missing)"

    def test_malformed_config_exits_1(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("output: 5\n", encoding="utf-8")

        result = runner.invoke(app, ["config", "--config", str(path)])

        assert result.exit_code == 1
        assert "output" in result.output
        assert result.exception is None or isinstance(result.exception, SystemExit)


class TestVersion:
    def test_version(self):
        result = runner.invoke(app, ["version"])
        assert result.exit_code == 0
        assert __version__ in result.output
