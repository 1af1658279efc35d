"""Click options."""

import click

app = click.option(
    "-a",
    "--app",
    metavar="<app-name>",
    help="Only destroy deployments of this application when no IDs are given.",
)

ci = click.option(
    "--ci",
    "--force",
    "ci",
    default=False,
    envvar="CI",
    is_flag=True,
    help="Run in non-interactive mode. Yes to all confirmations.",
)

debug = click.option(
    "--debug",
    count=True,
    envvar="DEBUG",
    help="Supply once to display Rundown debug logs. Supply twice to display all debug logs.",
)

no_color = click.option(
    "--no-color",
    default=False,
    envvar="RUNDOWN_NO_COLOR",
    is_flag=True,
    help="Disable color in Rundown's logs.",
)

verbose = click.option(
    "--verbose",
    default=False,
    envvar="VERBOSE",
    is_flag=True,
    help="Display Rundown verbose logs.",
)

workspace = click.option(
    "-w",
    "--workspace",
    envvar="RUNDOWN_WORKSPACE",
    metavar="<workspace>",
    help="Workspace to operate in. Overrides the value in the config file.",
)
