"""Main CLI entry point for the contact intake service."""

import json
from pathlib import Path
from typing import Annotated

import typer

from portfolio_contact.cli.display import (
    console,
    create_submission_panel,
    create_submissions_table,
    print_error,
    print_info,
    print_success,
    print_warning,
)
from portfolio_contact.config import Settings, build_service, configure_logging
from portfolio_contact.storage.store import StorageCorruptError

app = typer.Typer(
    name="contact",
    help="Contact form intake service for the portfolio site.",
    no_args_is_help=True,
)

DataFileOption = Annotated[
    Path | None,
    typer.Option(
        "--data-file",
        help="Submission store file (overrides CONTACT_DATA_FILE)",
    ),
]


def _load_settings(data_file: Path | None) -> Settings:
    settings = Settings.from_env()
    if data_file is not None:
        settings.data_file = data_file
    return settings


@app.command("serve")
def serve_command(
    host: Annotated[
        str | None,
        typer.Option("--host", help="Bind address (overrides HOST)"),
    ] = None,
    port: Annotated[
        int | None,
        typer.Option("--port", "-p", help="Bind port (overrides PORT)"),
    ] = None,
    data_file: DataFileOption = None,
) -> None:
    """Run the HTTP API.

    Example:
        contact serve --port 5000
    """
    import uvicorn

    from portfolio_contact.api.app import create_app

    settings = _load_settings(data_file)
    if host is not None:
        settings.host = host
    if port is not None:
        settings.port = port
    configure_logging(settings.log_level)

    service = build_service(settings)
    if not service.mail_config.is_configured:
        print_warning(
            "Mail transport is not configured; submissions will be rejected. "
            f"Missing: {', '.join(service.mail_config.missing_settings())}"
        )

    uvicorn.run(
        create_app(service, settings),
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


@app.command("submit")
def submit_command(
    name: Annotated[str, typer.Option("--name", help="Sender's name")],
    email: Annotated[str, typer.Option("--email", help="Sender's email")],
    subject: Annotated[str, typer.Option("--subject", help="Message subject")],
    message: Annotated[str, typer.Option("--message", help="Message body")],
    data_file: DataFileOption = None,
    output_json: Annotated[
        bool,
        typer.Option(
            "--json",
            "-j",
            help="Output result as JSON instead of formatted display",
        ),
    ] = False,
) -> None:
    """Submit a contact message through the full intake pipeline.

    Example:
        contact submit --name Ann --email ann@example.com --subject Hi --message "Hello"
    """
    settings = _load_settings(data_file)
    configure_logging(settings.log_level)
    service = build_service(settings)

    result = service.submit(
        {"name": name, "email": email, "subject": subject, "message": message}
    )

    if output_json:
        console.print_json(json.dumps(result.to_response()))
    elif result.success:
        print_success(result.message)
        print_info(f"Submission ID: {result.submission_id}")
    else:
        print_error(result.message)
        if result.submission_id:
            print_info(f"Submission {result.submission_id} was stored.")

    if not result.success:
        raise typer.Exit(code=1)


@app.command("list")
def list_command(
    data_file: DataFileOption = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Show full message bodies"),
    ] = False,
    output_json: Annotated[
        bool,
        typer.Option(
            "--json",
            "-j",
            help="Output submissions as JSON instead of a table",
        ),
    ] = False,
) -> None:
    """List stored submissions in the order they were received.

    Example:
        contact list --verbose
    """
    settings = _load_settings(data_file)
    service = build_service(settings)

    try:
        submissions = service.list()
    except StorageCorruptError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from None

    if output_json:
        console.print_json(
            json.dumps([s.model_dump(mode="json") for s in submissions])
        )
        return

    if not submissions:
        print_info(f"No submissions stored in {settings.data_file}")
        return

    console.print(create_submissions_table(submissions))
    if verbose:
        for submission in submissions:
            console.print()
            console.print(create_submission_panel(submission))


def main() -> None:
    """Entry point for the contact CLI."""
    app()


if __name__ == "__main__":
    main()
