"""Tests for the demo CLI and the demo programs."""

import io

import pytest

from cod.cli import demos
from cod.core.style import Attribute
from cod.session import Session

from conftest import sgr_params

typer_testing = pytest.importorskip("typer.testing")

from cod.cli.app import create_app  # noqa: E402


@pytest.fixture
def runner() -> "typer_testing.CliRunner":
    return typer_testing.CliRunner()


class TestDemos:
    """The demo programs leave the terminal reset."""

    @pytest.mark.parametrize("name", sorted(demos.DEMOS))
    def test_demo_resets(self, name: str, session: Session, stream: io.StringIO) -> None:
        demos.run(name, session)
        assert session.state.is_default()
        assert stream.getvalue().endswith("\x1b[0m")

    def test_style_demo(self, session: Session, stream: io.StringIO) -> None:
        demos.style(session)
        output = stream.getvalue()
        assert output.startswith("\x1b[1mThis is \x1b[3mitalic and bold text\x1b[23m")
        assert session.state.attributes == {Attribute.BOLD}

    def test_faint_demo_restores_color(self, session: Session, stream: io.StringIO) -> None:
        demos.faint(session)
        params = sgr_params(stream.getvalue())
        assert params[:2] == ["1", "22"]
        assert "38;5;7" in params
        assert params[-1] == "39"


class TestCli:
    """Typer commands."""

    def test_list(self, runner: "typer_testing.CliRunner") -> None:
        result = runner.invoke(create_app(), ["list"])
        assert result.exit_code == 0
        for name in demos.DEMOS:
            assert name in result.output

    def test_demo(self, runner: "typer_testing.CliRunner") -> None:
        result = runner.invoke(create_app(), ["demo", "colors"])
        assert result.exit_code == 0
        assert "\x1b[38;5;1mFailure\x1b[39m!" in result.output

    def test_unknown_demo(self, runner: "typer_testing.CliRunner") -> None:
        result = runner.invoke(create_app(), ["demo", "nope"])
        assert result.exit_code == 1
        assert "Unknown demo" in result.output

    def test_size_fallback(self, runner: "typer_testing.CliRunner") -> None:
        result = runner.invoke(create_app(), ["size", "--fallback", "100x40"])
        assert result.exit_code == 0
        assert "100x40" in result.output

    def test_size_invalid(self, runner: "typer_testing.CliRunner") -> None:
        result = runner.invoke(create_app(), ["size", "--fallback", "wide"])
        assert result.exit_code == 1
