"""Command: validate one JSON document against a named schema."""

from __future__ import annotations

from typing import IO, TYPE_CHECKING

import click

from goldsphere_contracts.commands._base import GsCommand

if TYPE_CHECKING:
    from goldsphere_contracts.commands._context import AppContext


@click.command(
    cls=GsCommand,
    examples="""\
  gsctl validate payment_method card.json
  gsctl validate product_registration product.json --currency-policy
  cat intent.json | gsctl --json validate create_payment_intent_request -""",
)
@click.argument("schema_name", metavar="SCHEMA")
@click.argument("document", type=click.File("r", encoding="utf-8"))
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
def validate(
    app: AppContext,
    schema_name: str,
    document: IO[str],
    currency_policy: bool,
    amount_field: str,
) -> None:
    """Validate DOCUMENT (a JSON file, or - for stdin) against SCHEMA."""
    from goldsphere_contracts.commands._helpers import lookup_schema, policy_schema
    from goldsphere_contracts.services.responses import envelope_from_result
    from goldsphere_contracts.validation.schema import validate as run_validation

    schema = lookup_schema(app, "validate", schema_name)
    if currency_policy:
        schema = policy_schema(app, "validate", schema, amount_field=amount_field)
    data = app.read_json("validate", document)
    app.emit("validate", envelope_from_result(run_validation(schema, data)))
