#!/usr/bin/env python3
"""
Basket Pricing Commands

CLI commands for pricing baskets against the configured catalog, delivery
tiers and offers, including the canonical Acme Widget Co examples.
"""

import json
import logging

import click

from config import get_config
from config.schema import validate_config_completeness
from domain.value_objects.money import format_money
from logging_config import configure_logging
from services.application.checkout_service import CheckoutService
from shared.exceptions import BasketError, ProductNotFoundError, create_error_response

_LOG = logging.getLogger(__name__)

EXAMPLE_BASKETS = [
    ["B01", "G01"],
    ["R01", "R01"],
    ["R01", "G01"],
    ["B01", "B01", "R01", "R01", "R01"],
]


def _build_service(ctx) -> CheckoutService:
    """Build the checkout service for the selected environment, or exit."""
    try:
        return CheckoutService.from_config(ctx.obj["config"])
    except BasketError as e:
        raise click.ClickException(e.message)


@click.group()
@click.option('--env', 'env', default=None, help='Configuration environment (development, production, testing)')
@click.option('--verbose', '-v', is_flag=True, help='Verbose output')
@click.pass_context
def basket(ctx, env, verbose):
    """Basket Pricing Commands."""
    ctx.ensure_object(dict)

    # Environment config sets its LOG_LEVEL default, so load it before logging
    ctx.obj["config"] = get_config(env)
    configure_logging("DEBUG" if verbose else None)


@basket.command()
@click.pass_context
def examples(ctx):
    """Price the standard Acme Widget Co example baskets."""
    service = _build_service(ctx)

    click.echo("Acme Widget Co - Shopping Basket Examples\n")
    for codes in EXAMPLE_BASKETS:
        summary = service.price(codes)
        click.echo(f"{', '.join(codes)}: {format_money(summary.total)}")


@basket.command()
@click.argument('codes', nargs=-1)
@click.option('--breakdown', is_flag=True, help='Show subtotal, discount and delivery')
@click.option('--json', 'as_json', is_flag=True, help='Print the result as JSON')
@click.pass_context
def total(ctx, codes, breakdown, as_json):
    """Price a basket of product CODES (e.g. R01 G01 B01)."""
    service = _build_service(ctx)

    try:
        summary = service.price(codes)
    except ProductNotFoundError as e:
        _LOG.debug(f"Pricing failed for {list(codes)}: {e.message}")
        if as_json:
            click.echo(json.dumps(create_error_response(e)))
        else:
            click.echo(f"❌ {e.message}", err=True)
        ctx.exit(1)

    if as_json:
        click.echo(json.dumps({
            "success": True,
            "items": list(codes),
            "subtotal": str(summary.subtotal),
            "discount": str(summary.discount),
            "delivery": str(summary.delivery),
            "total": format_money(summary.total, symbol=False),
        }))
        return

    if breakdown:
        click.echo(f"Subtotal: {format_money(summary.subtotal, exact=True)}")
        click.echo(f"Discount: {format_money(summary.discount, exact=True)}")
        click.echo(f"Delivery: {format_money(summary.delivery, exact=True)}")
    click.echo(f"Total: {format_money(summary.total)}")


@basket.command()
@click.pass_context
def catalog(ctx):
    """List catalog products and active offers."""
    service = _build_service(ctx)

    click.echo("Products:")
    for product in service.catalog.all():
        click.echo(f"  {product.code}  {product.name:<20} {format_money(product.price)}")

    if service.offers:
        click.echo("Offers:")
        for offer in service.offers:
            click.echo(f"  {offer.description}")


@basket.command('check-config')
@click.pass_context
def check_config(ctx):
    """Validate the configuration for the selected environment."""
    config = ctx.obj["config"]
    issues = validate_config_completeness(config)

    if not issues:
        click.echo(f"✅ Configuration OK ({config.environment})")
        return

    for issue in issues:
        click.echo(f"❌ {issue}", err=True)
    ctx.exit(1)


if __name__ == '__main__':
    basket()
