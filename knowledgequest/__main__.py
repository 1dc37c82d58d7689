"""Entry point for ``python -m knowledgequest``."""

from .adapters.inbound.cli.commands import app

if __name__ == "__main__":
    app()
