"""CLI entrypoint for ground-check — typer app with a `check` command."""

import sys
from pathlib import Path

import structlog
import typer
from rich.console import Console

from ground_check.chat.infrastructure.factory import LiteLLMChatClientFactory
from ground_check.chat.infrastructure.observer import StructlogChatObserver
from ground_check.config.infrastructure.observer import StructlogConfigObserver
from ground_check.config.infrastructure.yaml_loader import YamlConfigLoader
from ground_check.core.errors import GroundCheckError
from ground_check.evaluation.application.fact_checking import FactCheckingEvaluator
from ground_check.evaluation.domain.request import EvaluationRequest
from ground_check.evaluation.infrastructure.observer import StructlogEvaluationObserver

app = typer.Typer(add_completion=False)

EXIT_SUPPORTED = 0
EXIT_UNSUPPORTED = 1
EXIT_ERROR = 2


def _configure_structlog(log_format: str) -> None:
    """Configure structlog based on the requested format. Logs go to stderr."""
    if log_format == "console":
        renderer: structlog.types.Processor = structlog.dev.ConsoleRenderer()
    elif log_format == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        typer.echo(
            f"Invalid log format: {log_format!r}. Must be 'console' or 'json'.",
            err=True,
        )
        raise typer.Exit(code=EXIT_ERROR)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(0),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
    )


def _read_document(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        typer.echo(f"Failed to read document {path}: {exc}", err=True)
        raise typer.Exit(code=EXIT_ERROR) from exc


@app.command()
def check(
    config_path: Path = typer.Argument(..., help="Path to ground-check config YAML"),
    document: Path = typer.Option(
        ...,
        "--document",
        "-d",
        exists=True,
        dir_okay=False,
        readable=True,
        help="File holding the supporting document",
    ),
    claim: str = typer.Option(..., "--claim", "-c", help="Claim to fact-check"),
    bespoke_minicheck: bool = typer.Option(
        False,
        "--bespoke-minicheck",
        help="Use the bare document/claim prompt regardless of config",
    ),
    log_format: str = typer.Option(
        "console",
        "--log-format",
        help="Log format: 'console' or 'json'",
    ),
) -> None:
    """Check whether CLAIM is supported by the document. Exits 0 if it is, 1 if not."""
    _configure_structlog(log_format=log_format)
    console = Console()

    try:
        config = YamlConfigLoader(observer=StructlogConfigObserver()).load(
            path=config_path
        )
        client_factory = LiteLLMChatClientFactory(
            config=config.chat,
            observer=StructlogChatObserver(),
        )
        evaluation_observer = StructlogEvaluationObserver()
        if bespoke_minicheck:
            evaluator = FactCheckingEvaluator.for_bespoke_minicheck(
                client_factory=client_factory,
                observer=evaluation_observer,
            )
        else:
            evaluator = FactCheckingEvaluator(
                client_factory=client_factory,
                observer=evaluation_observer,
                evaluation_prompt=config.evaluator.resolved_prompt(),
            )
        request = EvaluationRequest(
            response_content=claim,
            supporting_data=_read_document(path=document),
        )
        result = evaluator.evaluate(request)
    except KeyboardInterrupt:
        typer.echo("Fact check interrupted.", err=True)
        raise typer.Exit(code=EXIT_ERROR)
    except GroundCheckError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=EXIT_ERROR) from exc

    if result.passed:
        console.print(
            "[bold green]PASS[/bold green] claim is supported by the document"
        )
        raise typer.Exit(code=EXIT_SUPPORTED)
    console.print("[bold red]FAIL[/bold red] claim is not supported by the document")
    raise typer.Exit(code=EXIT_UNSUPPORTED)


if __name__ == "__main__":
    app()
