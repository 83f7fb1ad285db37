"""
Command-line interface for the report engine
"""
import json

import click

from core.config import get_settings, settings
from core.exceptions import ArtifactWriteError, ValidationError
from core.logging import get_logger

logger = get_logger(__name__)


@click.group()
@click.version_option(version=settings.app_version)
def cli():
    """Report Engine CLI - generate report designs from library components"""
    pass


@cli.command()
@click.option("--host", default="0.0.0.0", help="Host to bind to")
@click.option("--port", default=8080, help="Port to bind to")
@click.option("--reload", is_flag=True, help="Enable auto-reload")
def runserver(host: str, port: int, reload: bool):
    """Run the FastAPI development server"""
    import uvicorn

    click.echo(f"Starting {settings.app_name} on {host}:{port}")
    click.echo(f"Environment: {settings.environment}")

    uvicorn.run(
        "main:app",
        host=host,
        port=port,
        reload=reload,
        log_level=settings.log_level.lower(),
    )


@cli.command()
@click.argument("config_file", type=click.File("r", encoding="utf-8"))
@click.option("--template-dir", default=None, help="Directory for template artifacts")
@click.option("--output-dir", default=None, help="Directory for output artifacts")
@click.pass_context
def generate(ctx, config_file, template_dir, output_dir):
    """Generate report artifacts from a dynamic request JSON file"""
    from report_engine.service import DynamicReportService, get_renderer
    from report_engine.validation import validate_dynamic_request

    try:
        payload = json.load(config_file)
    except json.JSONDecodeError as e:
        click.echo(f"✗ Invalid JSON in {config_file.name}: {e}", err=True)
        ctx.exit(1)

    try:
        request = validate_dynamic_request(payload)
    except ValidationError as e:
        click.echo("✗ Validation failed:", err=True)
        for field, reason in e.field_errors.items():
            click.echo(f"  {field}: {reason}", err=True)
        ctx.exit(1)

    current = get_settings()
    service = DynamicReportService(
        renderer=get_renderer(),
        template_dir=template_dir or current.template_dir,
        output_dir=output_dir or current.output_dir,
        template_extension=current.template_extension,
    )

    try:
        result = service.generate_dynamic_report(request)
    except ArtifactWriteError as e:
        click.echo(f"✗ {e.message}", err=True)
        ctx.exit(2)

    click.echo(f"✓ Report generated: {result.report_id}")
    click.echo(f"  Template: {result.template_path}")
    click.echo(f"  Output:   {result.output_path}")


@cli.command()
def templates():
    """List available report templates"""
    for name in get_settings().available_templates:
        click.echo(name)


@cli.command()
def env_info():
    """Display environment information"""
    click.echo(f"{settings.app_name} v{settings.app_version}")
    click.echo(f"Environment: {settings.environment}")
    click.echo(f"Template dir: {settings.template_dir}")
    click.echo(f"Output dir: {settings.output_dir}")


def main():
    """Main entry point"""
    cli()


if __name__ == "__main__":
    main()
