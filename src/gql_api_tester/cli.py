from typing import Optional
import typer
from rich.console import Console
from rich.table import Table
from rich.text import Text
from .config import CONFIG_FILE_NAME, Config, load_or_default, resolve_endpoint, write_default_config
from .logging import setup_logging
from .run_logger import LogLevel
from .runners.runner import DEFAULT_TIMEOUT_S, SuiteRunner
from .reporters.console import ConsoleReporter

app = typer.Typer(add_completion=False, help="GraphQL API Tester - run GraphQL tests against configured environments")
config_app = typer.Typer(help="Interact with the configuration")
app.add_typer(config_app, name="config")

def _parse_level(value: str) -> LogLevel:
    try:
        return LogLevel.parse(value)
    except ValueError as e:
        raise typer.BadParameter(str(e))

@app.command()
def test(
    path: str = typer.Argument("./gql_tests/", help="Directory or file to run tests from"),
    env: Optional[str] = typer.Option(None, "--env", help="Environment to run against, e.g. development or production"),
    config: str = typer.Option(CONFIG_FILE_NAME, "--config", "-c", help="Path to config YAML"),
    log_level: str = typer.Option("INFO", "--log-level", "-l", help="Minimum level of case logs to show: DEBUG, INFO, WARN, ERROR"),
    timeout: float = typer.Option(DEFAULT_TIMEOUT_S, "--timeout", help="Connect timeout in seconds"),
):
    """Run a particular set of tests or an individual test."""
    min_level = _parse_level(log_level)
    cfg, warning = load_or_default(config)
    if warning:
        typer.echo(warning)

    setup_logging("DEBUG" if min_level is LogLevel.DEBUG else "INFO")
    endpoint = resolve_endpoint(cfg, env)
    result = SuiteRunner(endpoint, timeout).run(path)
    ConsoleReporter(min_level).emit(result)
    typer.echo(f"Done. {result.passed} passed, {result.failed} failed, {result.skipped} skipped.")
    raise typer.Exit(code=0 if result.failed == 0 else 1)

def _environments_table(cfg: Config, env: Optional[str]) -> Table:
    table = Table("env", "endpoint")
    for e in cfg.environments:
        if env is not None and e.name != env:
            continue
        table.add_row(Text(e.name, style="green"), Text(resolve_endpoint(cfg, e.name)))
    return table

@config_app.command("view")
def config_view(
    env: Optional[str] = typer.Option(None, "--env", help="Only show this environment. By default all are shown."),
    yaml_out: bool = typer.Option(False, "--yaml", help="Print the configuration as YAML. Ignores --env."),
    config: str = typer.Option(CONFIG_FILE_NAME, "--config", "-c", help="Path to config YAML"),
):
    """Load and view the current configuration."""
    cfg, warning = load_or_default(config)
    if yaml_out:
        # warning is suppressed so the output stays valid YAML
        typer.echo(cfg.to_yaml(), nl=False)
        raise typer.Exit(code=0)

    if warning:
        typer.echo(warning)
    if env is not None and cfg.environment(env) is None:
        typer.echo(f"No environment named {env!r} in the configuration.")
        raise typer.Exit(code=1)
    Console().print(_environments_table(cfg, env))

@config_app.command("init")
def config_init(
    config: str = typer.Option(CONFIG_FILE_NAME, "--config", "-c", help="Where to write the config YAML"),
    force: bool = typer.Option(False, "--force", help="Overwrite an existing config file"),
):
    """Write the default configuration file."""
    try:
        p = write_default_config(config, force=force)
    except FileExistsError as e:
        typer.echo(f"{e}. Use --force to overwrite.")
        raise typer.Exit(code=1)
    typer.echo(f"Wrote default config to {p}")
