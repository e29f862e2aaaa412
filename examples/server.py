"""
Minimal server entry point built from argloom descriptors.

    python examples/server.py --host 0.0.0.0 -p 9000 -v
    python examples/server.py --help
"""
from argloom import flag, map_all, opt
from argloom.console import console


def serve(host: str, port: int, verbose: bool, workers: int | None) -> None:
    console.print(f"Serving on [bold]{host}:{port}[/]", highlight=False)
    if verbose:
        console.print(f"workers: {workers or 'auto'}")


cli = map_all(
    serve,
    opt("", "host", "host to bind", "HOST").required(),
    opt("p", "port", "port to listen on", "PORT", type=int).with_default(8080),
    flag("v", "verbose", "chatty logs"),
    opt("w", "workers", "worker processes", "N", type=int),
).with_help_default()

if __name__ == "__main__":
    cli.parse_env_or_exit()
