"""Entry point: ``python -m artseed``.

Supports two modes:
  - ``python -m artseed``            → Launch the FastAPI sketch server
  - ``python -m artseed sample``     → Print seeded samples to stdout
"""

from __future__ import annotations

import argparse
import logging

logger = logging.getLogger(__name__)

SAMPLE_KINDS = ("uniform", "int", "gaussian", "circle", "disk")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Seeded generative-art sketch runner")
    sub = parser.add_subparsers(dest="command")

    # --- Server mode (default) ---
    srv = sub.add_parser("serve", help="Start the FastAPI sketch server (default)")
    srv.add_argument("--host", type=str, default="127.0.0.1")
    srv.add_argument("--port", type=int, default=8000)
    srv.add_argument("--seed", type=str, default=None, help="Integer seed or a phrase")
    srv.add_argument("--width", type=int, default=1200)
    srv.add_argument("--height", type=int, default=800)
    srv.add_argument("--log-level", type=str, default="INFO", choices=["DEBUG", "INFO", "WARNING"])

    # --- Headless sampling ---
    smp = sub.add_parser("sample", help="Print seeded samples, one per line")
    smp.add_argument("--seed", type=str, default=None, help="Integer seed or a phrase")
    smp.add_argument("--count", type=int, default=10)
    smp.add_argument("--kind", type=str, default="uniform", choices=SAMPLE_KINDS)
    smp.add_argument("--max", type=int, default=100, help="Upper bound for --kind int")
    smp.add_argument("--log-level", type=str, default="WARNING", choices=["DEBUG", "INFO", "WARNING"])

    return parser


def _run_server(args: argparse.Namespace) -> None:
    import uvicorn

    from artseed.api.app import create_app
    from artseed.config import SketchConfig
    from artseed.systems.seeding import resolve_seed

    config = SketchConfig(
        seed=resolve_seed(args.seed) if args.seed is not None else None,
        width=args.width,
        height=args.height,
        host=args.host,
        port=args.port,
        log_level=args.log_level,
    )
    app = create_app(config)
    uvicorn.run(app, host=config.host, port=config.port, log_level=config.log_level.lower())


def _format_sample(engine, kind: str, max_value: int) -> str:
    if kind == "uniform":
        return repr(engine.uniform())
    if kind == "int":
        return str(engine.int_value(max_value))
    if kind == "gaussian":
        return repr(engine.gaussian())
    if kind == "circle":
        x, y = engine.on_circle()
        return f"{x!r} {y!r}"
    x, y = engine.inside_circle()
    return f"{x!r} {y!r}"


def _run_sample(args: argparse.Namespace) -> None:
    from artseed.systems.rng import RandomEngine
    from artseed.systems.seeding import resolve_seed
    from artseed.utils.logging import setup_logging

    setup_logging(args.log_level)

    engine = RandomEngine(resolve_seed(args.seed))
    logger.info("Sampling %d %s values from seed=%d", args.count, args.kind, engine.seed)
    for _ in range(args.count):
        print(_format_sample(engine, args.kind, args.max))


def main(argv: list[str] | None = None) -> None:
    parser = _build_parser()
    args = parser.parse_args(argv)

    # Default to serve mode if no subcommand given
    if args.command is None:
        args = parser.parse_args(["serve"])

    if args.command == "serve":
        _run_server(args)
    elif args.command == "sample":
        _run_sample(args)


if __name__ == "__main__":
    main()
