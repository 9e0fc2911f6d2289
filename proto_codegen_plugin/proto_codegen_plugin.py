import logging
import sys

import click

from .pipeline import Plugin, PluginError


@click.command()
@click.option("--verbose", "-v", is_flag=True, default=False, help="Log the plugin run to stderr")
@click.argument("encoded_config_path", required=False, default=None, type=str)
def proto_codegen_plugin(verbose, encoded_config_path):
    """Read a CodeGeneratorRequest from stdin and write the response to stdout.

    ENCODED_CONFIG_PATH is the base64-encoded path of the JSON configuration;
    when omitted, the request parameter is used.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        stream=sys.stderr,
        format="%(levelname)s %(name)s: %(message)s",
    )

    request = click.get_binary_stream("stdin").read()
    try:
        response = Plugin().handle(request, encoded_config_path)
    except PluginError as e:
        # Nothing is written to stdout, so protoc never sees a partial response
        raise click.ClickException(str(e)) from e

    stdout = click.get_binary_stream("stdout")
    stdout.write(response)
    stdout.flush()
