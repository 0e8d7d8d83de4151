"""
Tests for the gcp-project-id command line.
"""

import json
import os
from unittest import mock

import pytest

from gcp_project_id import CredentialsLookupError, EnvironmentSearcher, ProjectIdResolver
from gcp_project_id.cli import EXIT_NOT_FOUND, EXIT_OK, EXIT_SEARCHER_FAILED, main


class TestMain:
    """Tests for main function."""

    def test_prints_project_id(self, capsys, stub_searcher):
        """Should print the resolved ID and exit 0."""
        resolver = ProjectIdResolver([stub_searcher("gcp-project-id")])

        assert main([], resolver) == EXIT_OK
        assert capsys.readouterr().out == "gcp-project-id\n"

    def test_prints_empty_line_when_not_found(self, capsys, stub_searcher):
        """Should print an empty line and exit 0 without --strict."""
        resolver = ProjectIdResolver([stub_searcher()])

        assert main([], resolver) == EXIT_OK
        assert capsys.readouterr().out == "\n"

    def test_strict_not_found(self, capsys, stub_searcher):
        """Should exit 1 with the guidance message under --strict."""
        resolver = ProjectIdResolver([stub_searcher()])

        assert main(["--strict"], resolver) == EXIT_NOT_FOUND
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "gcloud init" in captured.err

    def test_searcher_failure(self, capsys, stub_searcher):
        """Should exit 3 and report the failing searcher."""
        failing = stub_searcher(error=CredentialsLookupError("find credentials: boom"))
        resolver = ProjectIdResolver([failing])

        assert main([], resolver) == EXIT_SEARCHER_FAILED
        assert "find credentials: boom" in capsys.readouterr().err

    def test_passes_options(self, stub_searcher):
        """Should build Options from the command line."""
        searcher = stub_searcher()
        resolver = ProjectIdResolver([searcher])

        main(["--timeout", "5", "--scope", "a", "--scope", "b"], resolver)

        ctx, scopes = searcher.calls[0]
        assert scopes == ("a", "b")
        assert ctx.deadline is not None

    def test_json_output(self, capsys, stub_searcher):
        """Should print the full result as JSON."""
        resolver = ProjectIdResolver([stub_searcher("gcp-project-id")])

        assert main(["--json"], resolver) == EXIT_OK
        payload = json.loads(capsys.readouterr().out)
        assert payload["project_id"] == "gcp-project-id"
        assert payload["searcher"] == "StubSearcher"
        assert payload["error"] is None
        assert payload["error_kind"] is None

    def test_json_output_for_strict_failure(self, capsys, stub_searcher):
        """Should include the error kind in JSON output."""
        resolver = ProjectIdResolver([stub_searcher()])

        assert main(["--json", "--strict"], resolver) == EXIT_NOT_FOUND
        payload = json.loads(capsys.readouterr().out)
        assert payload["error_kind"] == "not_found"

    @pytest.mark.parametrize("timeout", ["-1", "nan"])
    def test_rejects_invalid_timeout(self, stub_searcher, timeout):
        """Should exit 2 on a negative or NaN timeout."""
        searcher = stub_searcher()
        with pytest.raises(SystemExit) as exc_info:
            main(["--timeout", timeout], ProjectIdResolver([searcher]))
        assert exc_info.value.code == 2
        assert not searcher.called

    def test_env_file_is_loaded(self, clean_env, capsys, tmp_path):
        """Should load variables from --env-file before resolving."""
        env_file = tmp_path / ".env"
        env_file.write_text("GCP_PROJECT=from-dotenv\n")
        resolver = ProjectIdResolver([EnvironmentSearcher()])

        assert main(["--env-file", str(env_file)], resolver) == EXIT_OK
        assert capsys.readouterr().out == "from-dotenv\n"

    def test_env_file_does_not_override(self, clean_env, capsys, tmp_path):
        """Should keep variables that are already set."""
        env_file = tmp_path / ".env"
        env_file.write_text("GCP_PROJECT=from-dotenv\n")
        resolver = ProjectIdResolver([EnvironmentSearcher()])

        with mock.patch.dict(os.environ, {"GCP_PROJECT": "from-env"}):
            main(["--env-file", str(env_file)], resolver)
        assert capsys.readouterr().out == "from-env\n"

    def test_missing_env_file(self, tmp_path, stub_searcher):
        """Should exit 2 when the env file does not exist."""
        with pytest.raises(SystemExit) as exc_info:
            main(["--env-file", str(tmp_path / "missing.env")], ProjectIdResolver([stub_searcher()]))
        assert exc_info.value.code == 2
