"""Command: dry-run a batch of documents against a named schema."""

from __future__ import annotations

from typing import IO, TYPE_CHECKING, Any

import click

from goldsphere_contracts.commands._base import GsCommand

if TYPE_CHECKING:
    from goldsphere_contracts.commands._context import AppContext
    from goldsphere_contracts.services.batch import BatchItemOutcome


@click.command(
    cls=GsCommand,
    examples="""\
  gsctl batch product_registration bulk.json
  gsctl batch product_registration bulk.json --currency-policy --amount-field price
  gsctl batch payment_method methods.json --key paymentMethods
  gsctl --json batch product_registration bulk.json --max-size 500""",
)
@click.argument("schema_name", metavar="SCHEMA")
@click.argument("document", type=click.File("r", encoding="utf-8"))
@click.option(
    "--key",
    default="products",
    show_default=True,
    help="Array key when DOCUMENT is an object.",
)
@click.option("--max-size", type=int, default=None, help="Largest accepted batch.")
@click.option(
    "--currency-policy",
    is_flag=True,
    help="Also enforce the configured currencies and amount limits.",
)
@click.option(
    "--amount-field",
    default="amount",
    show_default=True,
    help="Field checked against amount limits (with --currency-policy).",
)
@click.pass_obj
def batch(
    app: AppContext,
    schema_name: str,
    document: IO[str],
    key: str,
    max_size: int | None,
    currency_policy: bool,
    amount_field: str,
) -> None:
    """Validate every item of DOCUMENT against SCHEMA without committing.

    DOCUMENT is a JSON array, or an object holding the array under --key.
    Item failures are reported per index; only an oversized or malformed
    batch is an error.
    """
    from goldsphere_contracts.commands._helpers import lookup_schema, policy_schema
    from goldsphere_contracts.domain.envelope import success_envelope
    from goldsphere_contracts.services.batch import (
        BatchRejection,
        process_batch,
        process_envelope,
    )
    from goldsphere_contracts.services.responses import rejection_envelope

    schema = lookup_schema(app, "batch", schema_name)
    if currency_policy:
        schema = policy_schema(app, "batch", schema, amount_field=amount_field)
    data = app.read_json("batch", document)
    limit = max_size if max_size is not None else app.settings.max_batch_size

    if isinstance(data, list):
        outcome = process_batch(schema, data, validate_only=True, max_size=limit)
    else:
        outcome = process_envelope(schema, data, key, validate_only=True, max_size=limit)

    if isinstance(outcome, BatchRejection):
        app.emit("batch", rejection_envelope(outcome))
        return

    app.emit(
        "batch",
        success_envelope(
            {
                "results": [_result_row(item) for item in outcome.items],
                "summary": outcome.summary.model_dump(),
            }
        ),
    )


def _result_row(item: BatchItemOutcome) -> dict[str, Any]:
    row: dict[str, Any] = {"index": item.index, "status": item.status}
    if not item.ok:
        row["error"] = item.error
        row["details"] = [e.detail() for e in item.errors]
    return row
