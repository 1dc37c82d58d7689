"""CLI interface for KnowledgeQuest."""

import json
from datetime import datetime

import typer
from rich.console import Console
from rich.markdown import Markdown
from rich.markup import escape
from rich.panel import Panel
from rich.prompt import Prompt
from rich.table import Table

from ....config.logging import setup_logging
from ....config.settings import settings
from ....core.domain import DEFAULT_CATEGORY, DOCUMENT_CATEGORIES, SearchResult
from ....core.domain.exceptions import KnowledgeQuestError
from ....core.domain.utils import preview
from ...common.exception_handler import error_code, error_payload

app = typer.Typer(
    name="kquest",
    help="KnowledgeQuest - ask questions across your stored documents using Gemini",
    add_completion=False,
)

console = Console()


def handle_cli_error(exc: Exception) -> None:
    """Print exc as ``Error [CODE]: message``, or the full payload in debug mode."""
    if settings.debug:
        console.print(
            Panel(
                json.dumps(error_payload(exc, include_trace=True), indent=2),
                title="[bold red]Error Details[/]",
                border_style="red",
            )
        )
        return

    message = exc.message if isinstance(exc, KnowledgeQuestError) else str(exc)
    console.print(f"\n[red]Error [{error_code(exc)}]:[/] {escape(message)}")
    console.print(f"[dim]Type: {type(exc).__name__}[/]")
    console.print("[dim]Set DEBUG=true for full details[/]")



def get_service():
    """Get or create the knowledge service instance."""
    from ....composition.container import get_knowledge_service

    return get_knowledge_service()


def _format_timestamp(updated_at: int) -> str:
    return datetime.fromtimestamp(updated_at / 1000).strftime("%Y-%m-%d")


def _print_result(result: SearchResult) -> None:
    console.print(
        Panel(
            Markdown(result.answer),
            title="[bold blue]AI Synthesis[/]",
            border_style="blue",
        )
    )

    if result.relevant_documents:
        console.print(f"[dim]Sources referenced ({len(result.relevant_documents)}):[/]")
        for doc in result.relevant_documents:
            console.print(f"  [dim]• {escape(doc.title)}[/]")


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
) -> None:
    """KnowledgeQuest - knowledge base Q&A powered by Gemini."""
    setup_logging(
        "DEBUG" if verbose else settings.log_level,
        json_format=settings.log_json,
    )


@app.command("list")
def list_documents() -> None:
    """List all documents in the knowledge base."""
    try:
        documents = get_service().list_documents()
    except Exception as exc:
        handle_cli_error(exc)
        raise typer.Exit(1)

    table = Table(title=f"Knowledge Base ({len(documents)})")
    table.add_column("ID", style="dim", no_wrap=True)
    table.add_column("Title", style="bold")
    table.add_column("Category")
    table.add_column("Updated")
    table.add_column("Content")

    for doc in documents:
        table.add_row(
            doc.id,
            escape(doc.title),
            escape(doc.category),
            _format_timestamp(doc.updated_at),
            escape(preview(doc.content, limit=60)),
        )

    console.print(table)


@app.command()
def add(
    title: str = typer.Option(..., "--title", "-t", help="Document title"),
    content: str = typer.Option(..., "--content", "-c", help="Document content"),
    category: str = typer.Option(
        DEFAULT_CATEGORY,
        "--category",
        help=f"Category ({', '.join(DOCUMENT_CATEGORIES)})",
    ),
) -> None:
    """Add a document to the knowledge base."""
    try:
        document = get_service().add_document(title, content, category)
    except Exception as exc:
        handle_cli_error(exc)
        raise typer.Exit(1)

    console.print(f"[green]✓[/] Added [bold]{escape(document.title)}[/] [dim]({document.id})[/]")


@app.command()
def delete(
    doc_id: str = typer.Argument(..., help="Identifier of the document to delete"),
) -> None:
    """Delete a document from the knowledge base."""
    try:
        removed = get_service().delete_document(doc_id)
    except Exception as exc:
        handle_cli_error(exc)
        raise typer.Exit(1)

    if removed:
        console.print(f"[green]✓[/] Deleted {doc_id}")
    else:
        console.print(f"[yellow]No document with id {doc_id}; nothing to delete.[/]")


@app.command()
def ask(
    question: str = typer.Argument(..., help="Question to answer from your documents"),
) -> None:
    """Ask a single question and get an answer."""
    try:
        service = get_service()
        with console.status("[bold green]Analyzing...[/]"):
            result = service.ask(question)
    except Exception as exc:
        handle_cli_error(exc)
        raise typer.Exit(1)

    _print_result(result)


@app.command()
def chat() -> None:
    """Start an interactive question session."""
    console.print(
        Panel.fit(
            "[bold blue]KnowledgeQuest AI[/]\n"
            "[dim]Ask questions across all your stored documents.[/]\n\n"
            "Example:\n"
            "• What are the office hours on Fridays?\n\n"
            "[dim]Type 'quit' or 'exit' to leave[/]",
            title="Search Your Knowledge",
            border_style="blue",
        )
    )

    try:
        service = get_service()
    except Exception as exc:
        handle_cli_error(exc)
        raise typer.Exit(1)

    while True:
        try:
            query = Prompt.ask("\n[bold cyan]You[/]")

            if query.lower() in ("quit", "exit", "q"):
                console.print("[dim]Goodbye![/]")
                break

            if not query.strip():
                continue

            with console.status("[bold green]Analyzing...[/]"):
                result = service.ask(query)

            console.print()
            _print_result(result)

        except (KeyboardInterrupt, EOFError):
            console.print("\n[dim]Goodbye![/]")
            break
        except Exception as exc:
            handle_cli_error(exc)


@app.command()
def status() -> None:
    """Show configuration and knowledge base status."""
    console.print("[bold]KnowledgeQuest Status[/]\n")

    if settings.google_api_key:
        console.print("✅ Google API key configured")
    else:
        console.print("❌ Google API key not set (set GOOGLE_API_KEY in .env)")

    console.print(f"Model: [bold]{settings.llm_model}[/]")
    console.print(
        f"Sampling: temperature={settings.llm_temperature}, "
        f"top_p={settings.llm_top_p}, top_k={settings.llm_top_k}"
    )
    console.print(f"Storage: [bold]{settings.storage_backend}[/] ({settings.data_dir})")

    try:
        count = len(get_service().list_documents())
    except Exception as exc:
        handle_cli_error(exc)
        raise typer.Exit(1)

    console.print(f"Documents indexed: [bold]{count}[/]")


@app.command()
def serve(
    host: str = typer.Option("127.0.0.1", help="Bind address"),
    port: int = typer.Option(8000, help="Port"),
    reload: bool = typer.Option(False, help="Auto-reload on code changes"),
) -> None:
    """Run the HTTP API with uvicorn."""
    import uvicorn

    uvicorn.run(
        "knowledgequest.adapters.inbound.api.main:app",
        host=host,
        port=port,
        reload=reload,
    )


if __name__ == "__main__":
    app()
