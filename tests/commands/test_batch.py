"""Tests for the batch CLI command."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest
from click.testing import CliRunner

from goldsphere_contracts.cli import cli


@pytest.fixture
def write_doc(tmp_path: Path) -> Any:
    def _write(data: Any, name: str = "bulk.json") -> str:
        path = tmp_path / name
        path.write_text(json.dumps(data))
        return str(path)

    return _write


@pytest.fixture
def five_products(product_factory: Any) -> list[dict[str, Any]]:
    """Indices 1 and 3 are invalid."""
    return [
        product_factory(name="A"),
        product_factory(weight=-1),
        product_factory(name="C"),
        product_factory(metal="copper"),
        product_factory(name="E"),
    ]


@pytest.mark.usefixtures("_isolated_cwd")
class TestBatchCommand:
    def test_summary_and_failures(
        self, cli_runner: CliRunner, write_doc: Any, five_products: list[dict[str, Any]]
    ) -> None:
        doc = write_doc({"products": five_products})
        result = cli_runner.invoke(cli, ["--json", "batch", "product_registration", doc])
        assert result.exit_code == 0, result.output
        data = json.loads(result.stdout)["data"]
        assert data["summary"] == {"total": 5, "successful": 3, "failed": 2}
        assert [r["status"] for r in data["results"]] == [
            "success",
            "error",
            "success",
            "error",
            "success",
        ]
        assert data["results"][1]["error"].startswith("weight: ")
        assert data["results"][3]["details"][0]["path"] == "metal"
        assert "error" not in data["results"][0]

    def test_bare_array(
        self, cli_runner: CliRunner, write_doc: Any, five_products: list[dict[str, Any]]
    ) -> None:
        result = cli_runner.invoke(
            cli, ["-q", "batch", "product_registration", write_doc(five_products)]
        )
        assert result.exit_code == 0
        assert result.stdout.strip() == "3/5"

    def test_custom_key(
        self, cli_runner: CliRunner, write_doc: Any, card_method: dict[str, Any]
    ) -> None:
        doc = write_doc({"paymentMethods": [card_method, {"type": "crypto"}]})
        result = cli_runner.invoke(
            cli, ["--json", "batch", "payment_method", doc, "--key", "paymentMethods"]
        )
        assert result.exit_code == 0
        data = json.loads(result.stdout)["data"]
        assert data["summary"] == {"total": 2, "successful": 1, "failed": 1}
        assert data["results"][1]["details"][0]["path"] == "type"

    def test_human_output_lists_failures(
        self, cli_runner: CliRunner, write_doc: Any, five_products: list[dict[str, Any]]
    ) -> None:
        doc = write_doc({"products": five_products})
        result = cli_runner.invoke(cli, ["batch", "product_registration", doc])
        assert result.exit_code == 0
        assert "failed: 2" in result.stdout
        assert "weight: Input should be greater than 0" in result.stdout

    def test_empty_batch(self, cli_runner: CliRunner, write_doc: Any) -> None:
        doc = write_doc({"products": []})
        result = cli_runner.invoke(cli, ["--json", "batch", "product_registration", doc])
        assert result.exit_code == 0
        data = json.loads(result.stdout)["data"]
        assert data == {"results": [], "summary": {"total": 0, "successful": 0, "failed": 0}}


@pytest.mark.usefixtures("_isolated_cwd")
class TestBatchRejections:
    def test_too_large(
        self, cli_runner: CliRunner, write_doc: Any, product_factory: Any
    ) -> None:
        doc = write_doc({"products": [product_factory() for _ in range(101)]})
        result = cli_runner.invoke(cli, ["--json", "batch", "product_registration", doc])
        assert result.exit_code == 1
        assert result.stdout == ""
        assert "BATCH_TOO_LARGE" in result.output

    def test_max_size_flag(
        self, cli_runner: CliRunner, write_doc: Any, product_factory: Any
    ) -> None:
        doc = write_doc([product_factory() for _ in range(3)])
        result = cli_runner.invoke(cli, ["batch", "product_registration", doc, "--max-size", "2"])
        assert result.exit_code == 1
        assert "exceeds the maximum of 2" in result.output

    def test_max_size_from_env(
        self, cli_runner: CliRunner, write_doc: Any, product_factory: Any
    ) -> None:
        doc = write_doc([product_factory() for _ in range(3)])
        result = cli_runner.invoke(
            cli, ["batch", "product_registration", doc], env={"GSCTL_MAX_BATCH_SIZE": "2"}
        )
        assert result.exit_code == 1
        assert "exceeds the maximum of 2" in result.output

    def test_missing_key(self, cli_runner: CliRunner, write_doc: Any) -> None:
        doc = write_doc({"items": []})
        result = cli_runner.invoke(cli, ["--json", "batch", "product_registration", doc])
        assert result.exit_code == 1
        assert "INVALID_ENVELOPE" in result.output
        assert "'products' array" in result.output

    def test_currency_policy(
        self,
        cli_runner: CliRunner,
        write_doc: Any,
        write_config: Any,
        product_factory: Any,
    ) -> None:
        doc = write_doc([product_factory(), product_factory(price=50)])
        args = [
            "--json",
            "-c",
            str(write_config()),
            "batch",
            "product_registration",
            doc,
            "--currency-policy",
            "--amount-field",
            "price",
        ]
        result = cli_runner.invoke(cli, args)
        assert result.exit_code == 0
        data = json.loads(result.stdout)["data"]
        assert data["summary"]["failed"] == 1
        assert data["results"][1]["details"][0]["path"] == "price"
