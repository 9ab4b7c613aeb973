# Lightweight package init: the CLI imports typer/rich, keep library users off that path.
__all__ = ["Config", "Environment", "RunLogger", "LogLevel", "Verdict", "resolve_endpoint"]

def __getattr__(name):
    if name in ("Config", "Environment", "resolve_endpoint"):
        from . import config as _config
        return getattr(_config, name)
    if name in ("RunLogger", "LogLevel", "Verdict"):
        from . import run_logger as _run_logger
        return getattr(_run_logger, name)
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
