"""
Click CLI for phpplan.
"""

import json
import logging
import sys

import click

from .analyzer import analyze_repo
from .analyzer.report import REPORT_FORMATS, emit_report, plan_as_dict, render_summary


@click.group()
@click.option('--log-level', envvar='PHPPLAN_LOG_LEVEL', default='WARNING',
              help='Logging level (env: PHPPLAN_LOG_LEVEL)')
def main(log_level):
    """phpplan - infer build settings for PHP projects from composer.json."""
    level = getattr(logging, str(log_level).upper(), None)
    if not isinstance(level, int):
        raise click.BadParameter(f"unknown log level '{log_level}'", param_hint='--log-level')
    logging.basicConfig(level=level, format='%(levelname)s %(name)s: %(message)s')


@main.command('plan')
@click.argument('path', type=click.Path(exists=True, file_okay=False))
@click.option('--server', envvar='PHPPLAN_SERVER', default='', help='Application server in use, e.g. swoole')
@click.option('--json', 'output_json', is_flag=True, help='Output machine-readable JSON')
def plan_cmd(path, server, output_json):
    """Print the inferred build plan for PATH."""
    plan = analyze_repo(path, server)
    if output_json:
        click.echo(json.dumps(plan_as_dict(plan)))
    else:
        click.echo(render_summary(plan))


@main.command('report')
@click.argument('path', type=click.Path(exists=True, file_okay=False))
@click.argument('dest', type=click.Path(file_okay=False))
@click.option('--server', envvar='PHPPLAN_SERVER', default='', help='Application server in use, e.g. swoole')
@click.option('--format', 'fmt', type=click.Choice(REPORT_FORMATS), default='json', show_default=True)
def report_cmd(path, dest, server, fmt):
    """Write the build plan for PATH into DEST."""
    plan = analyze_repo(path, server)
    try:
        plan_file = emit_report(plan, dest, fmt)
    except OSError as e:
        click.echo(f"Failed to write report: {e}", err=True)
        sys.exit(1)
    click.echo(f"Plan written to {plan_file}")


if __name__ == '__main__':
    main()
