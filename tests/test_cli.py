"""Tests for the openaix-check command."""

from unittest.mock import patch

from openai import OpenAIError
from openaix.cli import main


class TestCheckCommand:
    """Test cases for the configuration check CLI."""

    def test_standard(self, standard_env, capsys):
        assert main([]) == 0

        out = capsys.readouterr().out
        assert "kind: openai" in out
        assert "client: OpenAI" in out
        assert "sk-test" not in out

    def test_azure(self, azure_env, capsys):
        assert main([]) == 0

        out = capsys.readouterr().out
        assert "kind: azure" in out
        assert "endpoint: https://x.openai.azure.com" in out
        assert "api_version: 2024-05-01" in out
        assert "client: AzureOpenAI" in out
        assert "sk-test" not in out

    def test_unknown_type(self, monkeypatch, capsys):
        monkeypatch.setenv("OPENAI_TYPE", "bogus")

        assert main([]) == 1
        assert "unknown OPENAI_TYPE: bogus" in capsys.readouterr().out

    def test_missing_key_fails_before_building_client(self, capsys):
        """A blank key is reported without handing it to the SDK."""
        with patch("openaix.cli.resolve_client") as mock_resolve:
            assert main([]) == 1

        mock_resolve.assert_not_called()
        assert "OPENAI_API_KEY is not set" in capsys.readouterr().out

    def test_sdk_error_is_reported(self, standard_env, capsys):
        with patch("openaix.cli.resolve_client", side_effect=OpenAIError("Missing credentials")):
            assert main([]) == 1

        assert "❌ Missing credentials" in capsys.readouterr().out
