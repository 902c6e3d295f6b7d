"""
tests/unit/test_cli.py
──────────────────────────────────────────────────────────────────────────────
Unit tests for the harvey-lookup CLI.  get_client() is patched to return a
client wired with the in-memory fetcher from conftest.py.
"""
from __future__ import annotations

import json
from unittest.mock import patch

import pytest

from harvey_client.domain.exceptions import ConfigurationError, HTTPStatusError
from harvey_client.interfaces.cli import _build_parser, parse_filters, run


class TestParseFilters:
    def test_single_values(self):
        assert parse_filters(["name=SOŠ", "code=123"]) == {"name": "SOŠ", "code": "123"}

    def test_repeated_name_builds_list(self):
        assert parse_filters(["revisions=1", "revisions=2", "revisions=3"]) == {
            "revisions": ["1", "2", "3"]
        }

    def test_value_may_contain_equals(self):
        assert parse_filters(["title=a=b"]) == {"title": "a=b"}

    @pytest.mark.parametrize("bad", ["name", "=x"])
    def test_malformed_raises(self, bad):
        with pytest.raises(ValueError):
            parse_filters([bad])


class TestRun:
    def _run(self, client, argv):
        args = _build_parser().parse_args(argv)
        with patch("harvey_client.interfaces.cli.get_client", return_value=client):
            return run(args)

    def test_get_prints_json(self, client, capsys):
        assert self._run(client, ["get", "school", "42"]) == 0
        assert json.loads(capsys.readouterr().out)["id"] == 42

    def test_search_passes_filters_and_paging(self, client, fetcher):
        code = self._run(client, ["search", "school", "-f", "name=SOŠ", "--per-page", "0"])
        assert code == 0
        assert fetcher.calls[-1] == ("school", {"name": "SOŠ", "pagination": False}, None)

    def test_fulltext_code(self, client, fetcher, capsys):
        fetcher.routes["isco"] = [{"code": "7233011", "title": "Agromechatronik"}]
        assert self._run(client, ["fulltext", "7233011"]) == 0
        assert json.loads(capsys.readouterr().out)[0]["code"] == "7233011"

    def test_api_error_exit_code(self, client, fetcher, capsys):
        fetcher.routes["school/1"] = HTTPStatusError(404, "https://h/api/school/1")
        assert self._run(client, ["get", "school", "1"]) == 1
        assert "404" in capsys.readouterr().err

    def test_bad_filter_exit_code(self, client):
        assert self._run(client, ["search", "kov", "-f", "oops"]) == 2

    def test_unknown_filter_exit_code(self, client):
        assert self._run(client, ["search", "isco", "-f", "colour=red"]) == 2

    def test_negative_per_page_exit_code(self, client, fetcher):
        assert self._run(client, ["search", "kov", "--per-page", "-1"]) == 2
        assert fetcher.calls == []

    def test_unknown_filter_exit_code_for_any_resource(self, client):
        assert self._run(client, ["search", "kov", "-f", "colour=red"]) == 2

    def test_missing_url_exit_code(self, capsys):
        args = _build_parser().parse_args(["get", "school", "1"])
        error = ConfigurationError("HARVEY_URL is not set.")
        with patch("harvey_client.interfaces.cli.get_client", side_effect=error):
            assert run(args) == 1
        assert "HARVEY_URL" in capsys.readouterr().err
