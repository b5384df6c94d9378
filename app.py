# /app.py

import click

from ean_eic_checker import app, db
from ean_eic_checker.checker.codes import CheckResultCode, classify
from ean_eic_checker.models import CodeCheck


@app.shell_context_processor
def make_shell_context():
    """Create a shell context for the application -
    for working with the check history database in the Flask shell"""
    return {'db': db, 'CodeCheck': CodeCheck, 'CheckResultCode': CheckResultCode, 'classify': classify}


@app.cli.command("check-code")
@click.argument("code")
def check_code(code):
    """Classify CODE as EAN or EIC and print the result code."""
    result = classify(code)
    click.echo(result.value)
