"""Tests for the format_result dispatcher and OutputSettings."""

import json

from bentoctl.output.formatters import OutputSettings, format_result
from bentoctl.services.result import ServiceResult


def _ok() -> ServiceResult:
    return ServiceResult(
        ok=True,
        op="validate",
        data={"valid": False, "findings": [{"message": "m", "severity": "error"}]},
    )


class TestFormatResult:
    def test_defaults(self) -> None:
        s = OutputSettings()
        assert (s.json_output, s.quiet, s.verbose) == (False, False, False)

    def test_json_mode(self) -> None:
        data = json.loads(format_result(_ok(), settings=OutputSettings(json_output=True)))
        assert data["ok"] is True
        assert data["data"]["findings"][0]["message"] == "m"

    def test_json_beats_quiet(self) -> None:
        output = format_result(_ok(), settings=OutputSettings(json_output=True, quiet=True))
        assert json.loads(output)["op"] == "validate"

    def test_quiet_mode(self) -> None:
        assert format_result(_ok(), settings=OutputSettings(quiet=True)) == "m"

    def test_human_mode_default(self) -> None:
        assert "Validation Issues:" in format_result(_ok())
