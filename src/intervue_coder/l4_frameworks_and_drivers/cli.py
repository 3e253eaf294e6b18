"""CLI entry point for intervue-coder settings."""

from __future__ import annotations

import asyncio
import sys
from pathlib import Path

import click

from intervue_coder import __version__
from intervue_coder.l1_entities.config import AppConfig
from intervue_coder.l1_entities.model_catalog import ModelRole
from intervue_coder.l1_entities.provider import Provider
from intervue_coder.l1_entities.provider_policy import catalog_for, defaults_for, detect_provider, mask_api_key

_PROVIDER_CHOICE = click.Choice([p.value for p in Provider], case_sensitive=False)


def _format_config(config: AppConfig) -> list[str]:
    return [
        f'  provider: {config.provider.value} ({config.provider.label})',
        f'  api_key: {mask_api_key(config.api_key) or ("set" if config.api_key else "not set")}',
        f'  extraction_model: {config.extraction_model}',
        f'  solution_model: {config.solution_model}',
        f'  debugging_model: {config.debugging_model}',
        f'  language: {config.language}',
        f'  opacity: {config.opacity:g}',
        f'  ollama_base_url: {config.ollama_base_url}',
    ]


def _container(ctx: click.Context):
    from intervue_coder.l4_frameworks_and_drivers.container import (  # noqa: PLC0415 -- deferred: openai SDK not loaded on --help
        DependencyContainer,
    )

    if ctx.obj.get('container') is None:
        ctx.obj['container'] = DependencyContainer(ctx.obj['infra'], link_opener=click.launch)
    return ctx.obj['container']


@click.group()
@click.option(
    '-c',
    '--config-file',
    'config_file',
    default=None,
    envvar='INTERVUE_CONFIG_FILE',
    type=click.Path(dir_okay=False, path_type=Path),
    help='Path to the JSON config file (default: per-user config dir).',
)
@click.option(
    '--timeout',
    default=None,
    type=float,
    envvar='INTERVUE_PROBE_TIMEOUT',
    help='Seconds to wait for a live key probe.',
)
@click.option('-d', '--debug', is_flag=True, help='Write debug logging next to the config file.')
@click.version_option(version=__version__)
@click.pass_context
def cli(ctx, config_file, timeout, debug):
    """intervue-coder -- manage AI provider settings and test API keys."""
    from intervue_coder.l4_frameworks_and_drivers.infra_config import (  # noqa: PLC0415 -- deferred: pydantic not loaded on --help
        build_infra_config,
    )

    try:
        infra = build_infra_config({'config_path': config_file, 'probe_timeout': timeout})
    except ValueError as e:
        click.echo(f'Error: {e}', err=True)
        sys.exit(2)
    ctx.obj = {'infra': infra, 'container': None}

    if debug:
        from intervue_coder.l3_interface_adapters.gateways.paths import (  # noqa: PLC0415 -- deferred: only with --debug
            CONFIG_DIR,
        )
        from intervue_coder.l4_frameworks_and_drivers.logging_setup import (  # noqa: PLC0415 -- deferred: only with --debug
            setup_file_logging,
        )

        setup_file_logging(infra.config_path.parent if infra.config_path else CONFIG_DIR)


@cli.command()
@click.pass_context
def show(ctx):
    """Print the current configuration (API key masked)."""
    controller = _container(ctx).controller
    config = controller.get_config()
    click.echo(f'Configuration at {controller.store.path}')
    for line in _format_config(config):
        click.echo(line)
    if not controller.has_credential():
        click.echo(f'Warning: no API key configured for {config.provider.label}.', err=True)


@cli.command(name='set')
@click.option(
    '--api-key', default=None, help='API key. Provider is detected from its prefix unless --provider is given.'
)
@click.option('--provider', default=None, type=_PROVIDER_CHOICE, help='AI provider.')
@click.option('--extraction-model', default=None, help='Model for problem extraction (vision).')
@click.option('--solution-model', default=None, help='Model for solution generation.')
@click.option('--debugging-model', default=None, help='Model for debugging.')
@click.option('--language', default=None, help='Solution language (e.g. python).')
@click.option('--opacity', default=None, type=float, help='Window opacity, clamped to 0.1-1.0.')
@click.option('--ollama-base-url', default=None, help='Base URL of the local OpenAI-compatible server.')
@click.pass_context
def set_(ctx, **options):
    """Update one or more settings."""
    partial = {name: value for name, value in options.items() if value is not None}
    if not partial:
        raise click.UsageError('Nothing to update; pass at least one option.')
    if 'provider' in partial:
        partial['provider'] = partial['provider'].lower()

    controller = _container(ctx).controller
    updated = controller.update_config(partial)
    click.echo(f'Configuration saved to {controller.store.path}')
    for line in _format_config(updated):
        click.echo(line)


@cli.command(name='test-key')
@click.argument('key', required=False)
@click.option('--provider', default=None, help='Provider to test against (default: detected from the key).')
@click.pass_context
def test_key(ctx, key, provider):
    """Check that KEY (default: the stored key) is usable. Stored settings are not changed."""
    controller = _container(ctx).controller
    if key is None:
        config = controller.store.peek()
        key = config.api_key
        provider = provider or config.provider

    verdict = asyncio.run(controller.test_credential(key, provider))
    if not verdict.valid:
        click.echo(f'Error: {verdict.error}', err=True)
        sys.exit(1)
    if verdict.verified:
        click.echo('Key is valid.')
    else:
        click.echo('Key format looks valid (format check only; not verified with the provider).')


@cli.command()
@click.argument('key')
def detect(key):
    """Print the provider a KEY would be assigned to."""
    provider = detect_provider(key)
    click.echo(f'{provider.value} ({provider.label})')


@cli.command()
@click.option('--provider', default=None, type=_PROVIDER_CHOICE, help='Provider (default: the configured one).')
@click.pass_context
def models(ctx, provider):
    """List selectable models per role."""
    if provider is None:
        resolved = _container(ctx).controller.get_config().provider
    else:
        resolved = Provider(provider.lower())

    defaults = defaults_for(resolved)
    catalog = catalog_for(resolved)
    click.echo(f'{resolved.label} models')
    for role in ModelRole:
        click.echo(f'\n{role.title} -- {role.description}')
        default = defaults.for_role(role)
        if resolved.open_catalog:
            click.echo(f'  any model id (default: {default})')
            continue
        for m in catalog:
            marker = '*' if m.id == default else ' '
            click.echo(f' {marker} {m.id:<40} {m.name} -- {m.description}')


@cli.command()
@click.pass_context
def path(ctx):
    """Print the config file path."""
    click.echo(str(_container(ctx).store.path))


@cli.command(name='open-link')
@click.argument('url')
@click.pass_context
def open_link(ctx, url):
    """Open URL with the system handler."""
    _container(ctx).controller.open_external_link(url)
