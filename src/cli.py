#!/usr/bin/env python3
"""
CLI for x-to-md.
"""

import logging

import click
from importlib.metadata import version
from commands import post
from settings import DEBUG


@click.group()
@click.version_option(version=version("x-to-md"))
@click.option('--debug', is_flag=True, default=DEBUG, help='Log extraction details to stderr')
def cli(debug):
    """X to Markdown CLI - Convert saved X posts and articles into Markdown."""
    if debug:
        logging.basicConfig(
            level=logging.DEBUG,
            format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
        )


# Register command groups
cli.add_command(post.post)


if __name__ == "__main__":
    cli()
