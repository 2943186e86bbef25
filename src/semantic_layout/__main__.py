from semantic_layout.cli import cli

cli()
