"""Tests for CLI wiring and the serve command runner."""

import sys
import tempfile
import unittest
from pathlib import Path
from unittest.mock import MagicMock, patch

REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT / "src"))

import click
from click.testing import CliRunner

from FederalRegisterMCP.cli import CommandRunner, cli
from FederalRegisterMCP.config import load_config
from FederalRegisterMCP.server import SessionRegistry


class TestCliWiring(unittest.TestCase):
    def setUp(self) -> None:
        self.runner = CliRunner()

    def test_no_subcommand_serves_stdio(self) -> None:
        with patch.object(CommandRunner, "run_serve") as run_serve:
            result = self.runner.invoke(cli, [])
        self.assertEqual(result.exit_code, 0, result.output)
        run_serve.assert_called_once_with(action="serve", use_http=False, host=None, port=None)

    def test_serve_http_with_overrides(self) -> None:
        with patch.object(CommandRunner, "run_serve") as run_serve:
            result = self.runner.invoke(cli, ["serve", "--http", "--host", "0.0.0.0", "--port", "8080"])
        self.assertEqual(result.exit_code, 0, result.output)
        run_serve.assert_called_once_with(action="serve", use_http=True, host="0.0.0.0", port=8080)

    def test_port_from_environment(self) -> None:
        with patch.object(CommandRunner, "run_serve") as run_serve:
            result = self.runner.invoke(cli, ["serve", "--http"], env={"MCP_PORT": "4100"})
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertEqual(run_serve.call_args.kwargs["port"], 4100)

    def test_config_file_is_loaded(self) -> None:
        captured = {}

        def fake_run_serve(runner_self, **kwargs) -> None:
            captured["config"] = runner_self.config

        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "config.yml"
            config_path.write_text("server:\n  port: 9000\n", encoding="utf-8")
            with patch.object(CommandRunner, "run_serve", autospec=True, side_effect=fake_run_serve):
                result = self.runner.invoke(cli, ["--config", str(config_path), "serve"])

        self.assertEqual(result.exit_code, 0, result.output)
        self.assertEqual(captured["config"].server.port, 9000)

    def test_missing_config_file_is_usage_error(self) -> None:
        result = self.runner.invoke(cli, ["--config", "/nonexistent/config.yml", "serve"])
        self.assertEqual(result.exit_code, 2)


@patch("FederalRegisterMCP.cli.runner.configure_logging")
class TestCommandRunner(unittest.TestCase):
    def setUp(self) -> None:
        self.config = load_config()
        self.service = MagicMock()

    def test_stdio_by_default(self, _configure_logging: MagicMock) -> None:
        with patch("FederalRegisterMCP.cli.runner.create_service", return_value=self.service), patch(
            "FederalRegisterMCP.cli.runner.run_stdio"
        ) as run_stdio, patch("FederalRegisterMCP.cli.runner.run_http") as run_http:
            CommandRunner(self.config).run_serve("serve")

        run_stdio.assert_called_once()
        run_http.assert_not_called()
        self.service.close.assert_called_once()

    def test_http_uses_config_defaults(self, _configure_logging: MagicMock) -> None:
        with patch("FederalRegisterMCP.cli.runner.create_service", return_value=self.service), patch(
            "FederalRegisterMCP.cli.runner.run_http"
        ) as run_http:
            CommandRunner(self.config).run_serve("serve", use_http=True, port=8123)

        args, kwargs = run_http.call_args
        self.assertIsInstance(args[1], SessionRegistry)
        self.assertEqual(kwargs["host"], "127.0.0.1")
        self.assertEqual(kwargs["port"], 8123)
        self.assertEqual(kwargs["path"], "/mcp")

    def test_failure_aborts_and_closes(self, _configure_logging: MagicMock) -> None:
        with patch("FederalRegisterMCP.cli.runner.create_service", return_value=self.service), patch(
            "FederalRegisterMCP.cli.runner.run_stdio", side_effect=RuntimeError("boom")
        ):
            with self.assertRaises(click.Abort):
                CommandRunner(self.config).run_serve("serve")
        self.service.close.assert_called_once()

    def test_interrupt_is_clean_exit(self, _configure_logging: MagicMock) -> None:
        with patch("FederalRegisterMCP.cli.runner.create_service", return_value=self.service), patch(
            "FederalRegisterMCP.cli.runner.run_stdio", side_effect=KeyboardInterrupt
        ):
            CommandRunner(self.config).run_serve("serve")
        self.service.close.assert_called_once()


if __name__ == "__main__":
    unittest.main()
