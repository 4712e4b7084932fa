"""Shared plumbing for the CLI command modules.

The Storefront is built lazily, on the first command that needs it, and
closed when the root click context closes.
"""

from __future__ import annotations

import functools
from dataclasses import dataclass

import click
import httpx

from storefront.application.dto import OperationResult
from storefront.infrastructure.bootstrap import Storefront, build_storefront
from storefront.infrastructure.config import Settings


@dataclass
class CliState:
    settings: Settings
    transport: httpx.BaseTransport | None = None
    storefront: Storefront | None = None


def storefront_from(ctx: click.Context) -> Storefront:
    state = ctx.find_object(CliState)
    if state.storefront is None:
        state.storefront = build_storefront(state.settings, transport=state.transport)
        ctx.find_root().call_on_close(state.storefront.close)
    return state.storefront


def pass_storefront(f):
    """Like ``click.pass_obj``, but hands over the built Storefront."""

    @click.pass_context
    def new_func(ctx, *args, **kwargs):
        return ctx.invoke(f, storefront_from(ctx), *args, **kwargs)

    return functools.update_wrapper(new_func, f)


def ensure_ok(result: OperationResult) -> OperationResult:
    if not result.success:
        raise click.ClickException(result.message)
    return result
