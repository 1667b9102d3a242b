"""AppContext: shared Click context for all commands.

Created once by the root CLI group and passed to subcommands via
``@click.pass_obj``. Builds the dispatcher and resource catalog lazily and
owns result emission (stdout/stderr routing and exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from gridstack_mcp.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from gridstack_mcp.config.settings import GridSettings
    from gridstack_mcp.services.dispatch import Dispatcher
    from gridstack_mcp.services.resources import ResourceCatalog
    from gridstack_mcp.services.result import ServiceResult


class AppContext:
    """Shared context flowing through Click's command hierarchy.

    The catalog is only built on first use, so ``--help`` and
    ``--version`` stay cheap.
    """

    def __init__(self, settings: GridSettings) -> None:
        self.settings = settings
        self._dispatcher: Dispatcher | None = None
        self._resources: ResourceCatalog | None = None

        from gridstack_mcp.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

        if settings.verbose:
            from gridstack_mcp.services.telemetry import enable_telemetry

            enable_telemetry()

    @property
    def dispatcher(self) -> Dispatcher:
        if self._dispatcher is None:
            from gridstack_mcp.catalog import default_catalog
            from gridstack_mcp.services.dispatch import Dispatcher
            from gridstack_mcp.services.synthesis import SynthesisEngine

            catalog = default_catalog()
            engine = SynthesisEngine(
                catalog,
                json_indent=self.settings.synthesis.json_indent,
                echo_parameters=self.settings.synthesis.echo_parameters,
            )
            self._dispatcher = Dispatcher(catalog, engine)
        return self._dispatcher

    @property
    def resources(self) -> ResourceCatalog:
        if self._resources is None:
            from gridstack_mcp.services.resources import ResourceCatalog

            self._resources = ResourceCatalog(
                self.dispatcher.catalog,
                cdn_base=self.settings.resources.cdn_base,
                template_dir=self.settings.resolved_template_dir(),
            )
        return self._resources

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success (``result.ok``): writes to stdout, returns normally.
        * Failure: writes to stderr, exits with code 1.
        """
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )
        output = format_result(result, settings=settings)
        if result.ok:
            click.echo(output)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
