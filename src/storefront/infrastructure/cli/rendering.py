"""Shared console formatting for the demo commands."""

from __future__ import annotations

import json
from dataclasses import asdict, is_dataclass
from typing import Any

import click

from storefront.application.dto import CheckoutResult

RULE = "=" * 50


def echo_json(data: Any) -> None:
    """Pretty-print a snapshot (dict or DTO) as indented JSON."""
    if is_dataclass(data) and not isinstance(data, type):
        data = asdict(data)
    click.echo(json.dumps(data, indent=2, ensure_ascii=False))


def checkout_result_to_dict(result: CheckoutResult) -> dict[str, Any]:
    return {
        "order": asdict(result.order),
        "discount": str(result.discount),
        "total": str(result.total),
        "final_total": str(result.final_total),
    }
