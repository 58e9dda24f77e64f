"""
Post conversion commands.
"""

from pathlib import Path

import click
from tabulate import tabulate

from extractors import extract_post, parse_html
from renderers import derive_filename, get_labels, render_markdown
from renderers.labels import LABELS
from settings import MARKDOWN_LANGUAGE, OUTPUT_DIR, get_display_timezone


def _convert_page(html_content, url, language=None, timezone_name=None):
    """
    Extract a post from saved page HTML and render it.

    Shared by the convert and show commands.

    Args:
        html_content: Page HTML as saved from the browser
        url: URL the page was saved from
        language: Label language for the Markdown output
        timezone_name: IANA zone for timestamps (None: DISPLAY_TIMEZONE)

    Returns:
        Dictionary with:
            - 'success': bool
            - 'post': ExtractedPost if success, None otherwise
            - 'markdown': str if success, None otherwise
            - 'error': str if not success, None otherwise
    """
    labels = get_labels(language)
    root = parse_html(html_content)

    result = extract_post(
        root,
        url,
        tz=get_display_timezone(timezone_name),
        image_alt=labels['image'],
    )
    if not result.success:
        return {
            'success': False,
            'post': None,
            'markdown': None,
            'error': result.error
        }

    return {
        'success': True,
        'post': result.post,
        'markdown': render_markdown(result.post, language),
        'error': None
    }


@click.group()
def post():
    """Convert saved X posts and articles."""
    pass


@post.command()
@click.argument('source', type=click.File('r', encoding='utf-8'))
@click.option('--url', '-u', required=True, help='URL the page was saved from (post detail URL)')
@click.option('--output', '-o', type=click.Path(dir_okay=False, path_type=Path), default=None,
              help='Write Markdown to this file')
@click.option('--save-dir', '-d', type=click.Path(file_okay=False, path_type=Path), default=None,
              help='Write Markdown to this directory using a name derived from the post')
@click.option('--save', is_flag=True, default=False, help='Same as --save-dir with the OUTPUT_DIR setting')
@click.option('--lang', type=click.Choice(sorted(LABELS)), default=MARKDOWN_LANGUAGE,
              show_default=True, help='Language of headings and labels')
@click.option('--tz', 'timezone_name', default=None, help='IANA timezone for timestamps (default: DISPLAY_TIMEZONE or local)')
@click.option('--quiet', '-q', is_flag=True, default=False, help='Only print the Markdown')
def convert(source, url, output, save_dir, save, lang, timezone_name, quiet):
    """
    Convert a saved post page to Markdown.

    SOURCE is an HTML file saved from the browser, or - to read stdin.
    Markdown goes to stdout unless --output, --save-dir or --save is given.

    Examples:
        x-to-md post convert page.html --url "https://x.com/alice/status/1"
        x-to-md post convert page.html -u "https://x.com/alice/status/1" --save
        cat page.html | x-to-md post convert - -u "https://x.com/alice/status/1" -o alice.md
    """
    def status(message, **style):
        if not quiet:
            click.echo(click.style(message, **style), err=True)

    status(f"Extracting post from {source.name}...")
    result = _convert_page(source.read(), url, language=lang, timezone_name=timezone_name)

    if not result['success']:
        click.echo(click.style(f"✗ {result['error']}", fg="red"), err=True)
        raise click.Abort()

    extracted = result['post']
    kind = "article" if extracted.is_long_form else "post"
    status(f"✓ Extracted {kind} by @{extracted.username}", fg="green")

    if save and save_dir is None:
        save_dir = Path(OUTPUT_DIR)
    if save_dir is not None:
        save_dir.mkdir(parents=True, exist_ok=True)
        output = save_dir / derive_filename(extracted)

    if output is None:
        click.echo(result['markdown'], nl=False)
        return

    output.write_text(result['markdown'], encoding='utf-8')
    status(f"✓ Saved to {output}", fg="green")


@post.command()
@click.argument('source', type=click.File('r', encoding='utf-8'))
@click.option('--url', '-u', required=True, help='URL the page was saved from (post detail URL)')
@click.option('--tz', 'timezone_name', default=None, help='IANA timezone for timestamps')
def show(source, url, timezone_name):
    """
    Show the fields extracted from a saved post page.

    Example:
        x-to-md post show page.html --url "https://x.com/alice/status/1"
    """
    result = _convert_page(source.read(), url, timezone_name=timezone_name)

    if not result['success']:
        click.echo(click.style(f"✗ {result['error']}", fg="red"))
        raise click.Abort()

    extracted = result['post']
    stats = extracted.stats
    quoted = extracted.quoted_post

    rows = [
        ['Type', 'Article' if extracted.is_long_form else 'Post'],
        ['URL', extracted.source_url or 'N/A'],
        ['Username', f"@{extracted.username}"],
        ['Display name', extracted.display_name or 'N/A'],
        ['Title', extracted.title or 'N/A'],
        ['Published', extracted.timestamp or 'N/A'],
        ['Body', f"{len(extracted.body)} characters"],
        ['Images', len(extracted.media)],
        ['Video', extracted.video_thumbnail or 'No'],
        ['Quoted post', f"@{quoted.username}" if quoted else 'No'],
    ]
    for key in ('replies', 'retweets', 'likes', 'views'):
        rows.append([key.capitalize(), stats.get(key, 'N/A')])
    rows.append(['File name', derive_filename(extracted)])

    click.echo(tabulate(rows, tablefmt='plain'))
