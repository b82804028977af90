"""
Main CLI entry point for credcodec.
"""

import json
import logging

import click

from credcodec.core import Config, derive_schema_hash, derive_storage_slot, load_config
from credcodec.core.contracts import BYTEORDERS
from credcodec.core.errors import CredCodecError
from credcodec.encoding import decode_chunks_to_string, pack_string_to_chunks


def parse_chunk(value: str) -> int:
    """Parse a chunk given as decimal or 0x-prefixed hex."""
    text = value.strip()
    if text.lower().startswith("0x"):
        return int(text[2:], 16)
    return int(text, 10)


class ChunkParamType(click.ParamType):
    name = "chunk"

    def convert(self, value, param, ctx):
        if isinstance(value, int):
            return value
        try:
            return parse_chunk(value)
        except ValueError:
            self.fail(f"{value!r} is not a decimal or 0x-hex integer", param, ctx)


CHUNK = ChunkParamType()


def emit(output_format: str, text: str, payload: dict):
    """Print a result as plain text or as a JSON object."""
    if output_format == "json":
        click.echo(json.dumps(payload, indent=2))
    else:
        click.echo(text)


def pick(option, default):
    """Command-line value if given, else the config value."""
    return default if option is None else option


def format_option(f):
    return click.option(
        "--format", "output_format", default="text", type=click.Choice(["text", "json"])
    )(f)


def layout_options(f):
    f = click.option(
        "--bytes-per-chunk", type=int, default=None, help="Bytes per chunk (default from config: 31)"
    )(f)
    f = click.option(
        "--byteorder", type=click.Choice(list(BYTEORDERS)), default=None, help="Chunk byte order"
    )(f)
    return f


@click.group()
@click.option("--config", "config_path", type=click.Path(exists=True, dir_okay=False), help="JSON config file")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx, config_path, verbose):
    """credcodec - Storage slots, schema hashes and chunk packing for credentials."""
    logging.basicConfig(
        format="%(asctime)s %(levelname)-7s %(name)s: %(message)s",
        datefmt="%H:%M:%S",
        level=logging.DEBUG if verbose else logging.WARNING,
    )
    try:
        ctx.obj = load_config(config_path) if config_path else Config()
    except CredCodecError as e:
        raise click.ClickException(str(e))


@cli.command("storage-slot")
@click.argument("name")
@format_option
def storage_slot(name, output_format):
    """Derive the namespaced storage slot for NAME."""
    slot = derive_storage_slot(name)
    emit(output_format, slot, {"name": name, "slot": slot})


@cli.command("schema-hash")
@click.argument("url")
@click.argument("type_name", metavar="TYPE")
@format_option
def schema_hash(url, type_name, output_format):
    """Derive the schema hash for a JSON-LD URL and credential TYPE."""
    digest = derive_schema_hash(url, type_name)
    emit(output_format, digest, {"url": url, "type": type_name, "schema_hash": digest})


@cli.command("decode-chunks")
@click.argument("chunks", nargs=-1, type=CHUNK)
@layout_options
@format_option
@click.pass_obj
def decode_chunks(config, chunks, byteorder, bytes_per_chunk, output_format):
    """Decode packed CHUNKS (decimal or 0x-hex) back into text."""
    try:
        text = decode_chunks_to_string(
            list(chunks),
            bytes_per_chunk=pick(bytes_per_chunk, config.bytes_per_chunk),
            byteorder=pick(byteorder, config.byteorder),
        )
    except CredCodecError as e:
        raise click.ClickException(str(e))
    emit(output_format, text, {"chunks": [str(c) for c in chunks], "text": text})


@cli.command("pack-string")
@click.argument("text")
@layout_options
@click.option("--num-chunks", type=int, default=None, help="Pad with zero chunks to this count")
@format_option
@click.pass_obj
def pack_string(config, text, byteorder, bytes_per_chunk, num_chunks, output_format):
    """Pack TEXT into field-element chunks, one per line."""
    try:
        chunks = pack_string_to_chunks(
            text,
            bytes_per_chunk=pick(bytes_per_chunk, config.bytes_per_chunk),
            byteorder=pick(byteorder, config.byteorder),
            num_chunks=pick(num_chunks, config.num_chunks),
        )
    except CredCodecError as e:
        raise click.ClickException(str(e))
    # JSON carries chunks as decimal strings; they exceed 2**53
    emit(output_format, "\n".join(str(c) for c in chunks), {"text": text, "chunks": [str(c) for c in chunks]})


def main():
    """Main entry point."""
    cli()


if __name__ == "__main__":
    main()
