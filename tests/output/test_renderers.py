"""Tests for the per-operation Rich renderers."""

from __future__ import annotations

from goldsphere_contracts.domain.envelope import error_envelope, success_envelope
from goldsphere_contracts.output.renderers import render_envelope, render_quiet

BATCH_DATA = {
    "results": [
        {"index": 0, "status": "success"},
        {"index": 1, "status": "error", "error": "weight: Input should be greater than 0"},
    ],
    "summary": {"total": 2, "successful": 1, "failed": 1},
}


class TestErrorRendering:
    def test_message_and_details(self) -> None:
        envelope = error_envelope(
            "VALIDATION_ERROR",
            "Validation failed",
            [{"path": "last4", "message": "String should have at least 4 characters"}],
        )
        output = render_envelope("validate", envelope)
        assert output.startswith("ERROR")
        assert "Validation failed" in output
        assert "last4" in output
        assert "at least 4 characters" in output
        assert "VALIDATION_ERROR" not in output

    def test_verbose_shows_code(self) -> None:
        output = render_envelope("validate", error_envelope("X_CODE", "Bad"), verbose=True)
        assert "code: X_CODE" in output

    def test_root_path_label(self) -> None:
        envelope = error_envelope("VALIDATION_ERROR", "Bad", [{"path": "", "message": "m"}])
        assert "(root)" in render_envelope("validate", envelope)

    def test_markup_in_messages_is_literal(self) -> None:
        output = render_envelope("validate", error_envelope("E", "Bad [bold]value[/bold]"))
        assert "[bold]value[/bold]" in output


class TestOperationRenderers:
    def test_schemas(self) -> None:
        output = render_envelope("schemas", success_envelope({"schemas": ["a", "b"]}))
        assert "  a" in output
        assert output.endswith("2 schemas")

    def test_batch_shows_failures_only(self) -> None:
        output = render_envelope("batch", success_envelope(BATCH_DATA))
        assert "total: 2" in output
        assert "failed: 1" in output
        assert "weight: Input should be greater than 0" in output
        assert "success" not in output.split("failed: 1", 1)[1]

    def test_batch_verbose_shows_all_rows(self) -> None:
        output = render_envelope("batch", success_envelope(BATCH_DATA), verbose=True)
        assert "success" in output.split("failed: 1", 1)[1]

    def test_batch_all_ok_has_no_table(self) -> None:
        data = {
            "results": [{"index": 0, "status": "success"}],
            "summary": {"total": 1, "successful": 1, "failed": 0},
        }
        output = render_envelope("batch", success_envelope(data))
        assert "Index" not in output

    def test_config_show(self) -> None:
        data = {"environment": {"debug": True}, "cache": None}
        output = render_envelope("config_show", success_envelope(data))
        assert "environment" in output
        assert "debug: True" in output
        assert "cache: None" in output

    def test_config_check_clean(self) -> None:
        output = render_envelope("config_check", success_envelope({"issues": []}))
        assert output == "OK  No issues found."

    def test_config_check_warnings(self) -> None:
        issue = {
            "check": "production_debug",
            "severity": "warning",
            "path": "environment.debug",
            "message": "Debug mode is enabled in production",
        }
        output = render_envelope("config_check", success_envelope({"issues": [issue]}))
        assert "warning environment.debug: Debug mode is enabled in production" in output
        assert output.endswith("0 errors, 1 warnings")
        assert "production_debug" not in output

    def test_generic_fallback(self) -> None:
        output = render_envelope("something_else", success_envelope({"k": [1, 2]}))
        assert output.startswith("OK")
        assert "k: [1,2]" in output


class TestRenderQuiet:
    def test_error(self) -> None:
        assert render_quiet("batch", error_envelope("E", "nope")) == "ERROR: batch — nope"

    def test_schemas(self) -> None:
        assert render_quiet("schemas", success_envelope({"schemas": ["a", "b"]})) == "a\nb"

    def test_batch(self) -> None:
        assert render_quiet("batch", success_envelope(BATCH_DATA)) == "1/2"

    def test_other(self) -> None:
        assert render_quiet("config_show", success_envelope({})) == "OK: config_show"
