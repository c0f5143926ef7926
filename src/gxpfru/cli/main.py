"""gxp-fru-device CLI - FRU inventory daemon and EEPROM dump tool."""

from __future__ import annotations

import json

import click

from gxpfru.utils.logging import setup_logging

_eeprom_option = click.option(
    "--eeprom",
    "eeprom_paths",
    multiple=True,
    help="Candidate EEPROM path, highest priority first (repeatable)",
)
_server_id_option = click.option(
    "--server-id-path", default=None, help="File holding the server identifier"
)
_trim_option = click.option(
    "--trim", is_flag=True, help="Strip NUL/0xFF padding from ASCII fields"
)


@click.group()
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.option("--json-output", is_flag=True, help="Output in JSON format")
@click.pass_context
def cli(ctx: click.Context, debug: bool, json_output: bool) -> None:
    """GXP FRU device - publish EEPROM inventory on the management bus."""
    ctx.ensure_object(dict)
    ctx.obj["debug"] = debug
    ctx.obj["json_output"] = json_output
    setup_logging(level="DEBUG" if debug else "INFO", json_output=json_output)


@cli.command()
@_eeprom_option
@_server_id_option
@_trim_option
@click.pass_context
def dump(
    ctx: click.Context,
    eeprom_paths: tuple[str, ...],
    server_id_path: str | None,
    trim: bool,
) -> None:
    """Decode the inventory once and print it without publishing."""
    from gxpfru.bus.context import BusContext
    from gxpfru.config import load_config
    from gxpfru.core.publisher import InventoryPublisher

    config = load_config(
        eeprom_paths=eeprom_paths, server_id_path=server_id_path, trim_fields=trim or None
    )
    publisher = InventoryPublisher(BusContext(config.bus_name), config)
    record = publisher.read_inventory()

    if ctx.obj.get("json_output"):
        click.echo(json.dumps(record.model_dump(), indent=2))
    else:
        for name, value in record.bus_properties().items():
            click.echo(f"{name}={value}")
        click.echo(f"# source: {record.source or 'none'}")


@cli.command()
@click.option("--host", default="127.0.0.1", help="Bind address")
@click.option("--port", type=int, default=8000, help="HTTP port")
@_eeprom_option
@_server_id_option
@_trim_option
def serve(
    host: str,
    port: int,
    eeprom_paths: tuple[str, ...],
    server_id_path: str | None,
    trim: bool,
) -> None:
    """Run the daemon: publish the FRU object and serve the bus over HTTP."""
    import uvicorn
    from gxpfru.api.app import create_app
    from gxpfru.config import load_config

    config = load_config(
        eeprom_paths=eeprom_paths, server_id_path=server_id_path, trim_fields=trim or None
    )
    # Logging is already configured by the cli group
    app = create_app(config=config, configure_logging=False)
    uvicorn.run(app, host=host, port=port)


if __name__ == "__main__":
    cli()
