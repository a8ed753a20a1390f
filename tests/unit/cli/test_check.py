"""Tests for the cxplan CLI."""

import json

from typer.testing import CliRunner

from cxplan.cli import app
from cxplan.cli.check_cmd import classify
from cxplan.core.gateway import ResponseClass
from tests.conftest import VALID_BPNL, VALID_MATERIAL

runner = CliRunner()


class TestClassify:
    """Offline validation gate."""

    def test_accepted(self) -> None:
        assert classify(VALID_BPNL, VALID_MATERIAL, "$value") is None

    def test_bad_request_first(self) -> None:
        assert classify("bad", VALID_MATERIAL, "json") is ResponseClass.BAD_REQUEST

    def test_not_implemented(self) -> None:
        assert classify(VALID_BPNL, VALID_MATERIAL, "json") is ResponseClass.NOT_IMPLEMENTED

    def test_unsafe_representation_is_not_implemented(self) -> None:
        assert classify(VALID_BPNL, VALID_MATERIAL, "x\nINJECTED") is ResponseClass.NOT_IMPLEMENTED

    def test_invalid_identifiers_win_over_representation(self) -> None:
        assert classify(VALID_BPNL, "not-a-material", "json") is ResponseClass.BAD_REQUEST


class TestCheckCommand:
    """cxplan check."""

    def test_accepted_exit_zero(self) -> None:
        result = runner.invoke(
            app, ["check", "--partner", VALID_BPNL, "--material", VALID_MATERIAL]
        )

        assert result.exit_code == 0
        assert "Accepted" in result.output

    def test_rejected_exit_one(self) -> None:
        result = runner.invoke(
            app, ["check", "-p", VALID_BPNL, "-m", VALID_MATERIAL, "-r", "json"]
        )

        assert result.exit_code == 1
        assert "NotImplemented" in result.output

    def test_unsafe_representation_not_echoed(self) -> None:
        result = runner.invoke(
            app,
            ["check", "-p", VALID_BPNL, "-m", VALID_MATERIAL, "-r", "x\nINJECTED", "-f", "json"],
        )

        assert result.exit_code == 1
        assert "INJECTED" not in result.output
        data = json.loads(result.output)
        assert data["representation"] == "<REPLACED_INVALID_REPRESENTATION>"
        assert data["status"] == 501
        assert data["accepted"] is False

    def test_markup_like_representation_in_json(self) -> None:
        result = runner.invoke(
            app,
            ["check", "-p", VALID_BPNL, "-m", VALID_MATERIAL, "-r", "[/x]", "-f", "json"],
        )

        assert result.exit_code == 1
        data = json.loads(result.output)
        assert data["representation"] == "[/x]"
        assert data["status"] == 501

    def test_long_representation_not_wrapped_in_json(self) -> None:
        representation = " ".join(["word"] * 30)

        result = runner.invoke(
            app,
            ["check", "-p", VALID_BPNL, "-m", VALID_MATERIAL, "-f", "json"]
            + ["-r", representation],
        )

        assert result.exit_code == 1
        data = json.loads(result.output)
        assert data["representation"] == representation

    def test_markup_like_representation_in_text(self) -> None:
        result = runner.invoke(
            app, ["check", "-p", VALID_BPNL, "-m", VALID_MATERIAL, "-r", "[/x]"]
        )

        assert result.exit_code == 1
        assert "[/x]" in result.output
