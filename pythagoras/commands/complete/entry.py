"""The ``complete`` command: fill in a right angle from the command line."""

from __future__ import annotations

import sys

import click

from ...core import complete
from ...lib.triangle_utils import handle_error, log
from ...models import RightAngleError, RightAngleInput, RightAngleParseError
from ...serialization import dump_right_angle, parse_and_complete

CMD_NAME = 'complete'


@click.command(name=CMD_NAME)
@click.option('--rise', type=float, default=None, help='Side opposite the angle.')
@click.option('--run', type=float, default=None, help='Side adjacent to the angle.')
@click.option('--diagonal', type=float, default=None, help='Hypotenuse.')
@click.option('--radians', type=float, default=None, help='Angle between run and diagonal, in radians.')
@click.option(
    '--json',
    'json_text',
    default=None,
    type=str,
    help='Partial record as a JSON object, e.g. \'{"rise": 3, "run": 4}\'. Use "-" to read stdin.',
)
@click.option('--strict', is_flag=True, help='Fail when a result is NaN or infinite.')
@click.option('--indent', type=int, default=None, help='Indent the JSON output.')
def complete_command(
    rise: float | None,
    run: float | None,
    diagonal: float | None,
    radians: float | None,
    json_text: str | None,
    strict: bool,
    indent: int | None,
) -> None:
    """
    Complete a right angle and print it as JSON.

    Give one side and --radians, or any two or three sides.
    """
    has_fields = any(v is not None for v in (rise, run, diagonal, radians))
    if json_text is not None and has_fields:
        raise click.UsageError('--json cannot be combined with field options')

    try:
        if json_text is not None:
            if json_text == '-':
                json_text = click.get_text_stream('stdin').read()
            result = parse_and_complete(json_text, strict=strict)
        else:
            partial = RightAngleInput(radians=radians, rise=rise, run=run, diagonal=diagonal)
            log(f'{CMD_NAME}: {partial!r}')
            result = complete(partial, strict=strict)
    except (RightAngleError, RightAngleParseError) as e:
        handle_error(CMD_NAME, show_traceback=False)
        click.echo(f'Error: {e}', err=True)
        sys.exit(1)

    click.echo(dump_right_angle(result, indent=indent))
