"""CLI entrypoint: Typer app definition and command registration"""

import typer

from mdblocks.cli.commands import convert_cmd, export_cmd


app = typer.Typer(name="mdblocks", no_args_is_help=True, help="Markdown to Slack Block Kit converter")

app.command(name="convert")(convert_cmd)
app.command(name="export")(export_cmd)
