"""``rundown deployment destroy`` command."""

from __future__ import annotations

import logging
from typing import Any

import click
import yaml
from pydantic import ValidationError

from ....core.components import AllDeploymentsRequest, destroy_request_from_ids
from ....exceptions import ConfigNotFound, UnknownApplication
from ... import options

LOGGER = logging.getLogger(__name__.replace("._", "."))


@click.command("destroy", short_help="destroy one or more deployments")
@click.argument("ids", metavar="[<id>...]", nargs=-1)
@options.app
@options.ci
@options.debug
@options.no_color
@options.verbose
@options.workspace
@click.pass_context
def destroy(
    ctx: click.Context,
    app: str | None,
    debug: int,
    ids: tuple[str, ...],
    workspace: str | None,
    **_: Any,
) -> None:
    """Destroy one or more deployments.

    This will "undeploy" specific instances of an application.

    \b
    Process
    -------
    1. Determines the deployments to destroy.
        - (ids) each deployment is looked up by ID, in the order given
        - (default) every deployment of every application in the config
          (or only "-a, --app") whose infrastructure still exists,
          latest completed first
    2. Skips deployments that did not deploy successfully.
    3. Destroys the remaining deployments one at a time, stopping at the
       first error.

    When no IDs are given, this requires interactive confirmation unless
    "--force" (or "--ci") is specified.

    """  # noqa: D301
    request = destroy_request_from_ids(ids)
    try:
        scope = ctx.obj.get_scope(app=app, workspace=workspace)
    except ValidationError as err:
        LOGGER.error(err, exc_info=debug)
        ctx.exit(1)
    except yaml.YAMLError as err:
        LOGGER.error("config file is not valid YAML: %s", err, exc_info=debug)
        ctx.exit(1)
    except (ConfigNotFound, UnknownApplication) as err:
        LOGGER.error(err.message, exc_info=debug)
        ctx.exit(1)

    if isinstance(request, AllDeploymentsRequest) and not ctx.obj.ci:
        click.secho(
            "[WARNING] ALL deployments of "
            f"{', '.join(a.application for a in scope.applications)} "
            f'in workspace "{scope.workspace}" will be irrecoverably DESTROYED.',
            bold=True,
            fg="red",
        )
        if not click.confirm("\nProceed?"):
            ctx.exit(0)
        click.echo("")

    with ctx.obj.cancel_on_interrupt():
        result = ctx.obj.get_rundown(scope).destroy(request)
    if not result.ok:
        ctx.exit(1)
