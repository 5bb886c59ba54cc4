import logging
import sys
from typing import Any, Callable

import click
import pydantic
import yaml

from word_muse.cli.state import AppState
from word_muse.cli.state import ConfigurationState
from word_muse.output import OUTPUTS


def configuration_option(function: Callable):
    """Decorator for the `config` option. Not exposed to the underlying command."""

    def callback(context: click.Context, parameter: click.Parameter, value: Any):
        state = context.ensure_object(AppState)
        if value:
            with open(value, "rt") as file:
                contents = yaml.safe_load(file) or {}
            try:
                configuration = ConfigurationState.model_validate(contents)
            except pydantic.ValidationError as exception:
                raise click.BadParameter(str(exception)) from exception

            for name in configuration.model_fields_set:
                setting = getattr(configuration, name)
                if setting is not None:
                    setattr(state, name, setting)
        return value

    return click.option(
        "--config",
        default=None,
        type=click.types.Path(exists=True, file_okay=True, dir_okay=False),
        callback=callback,
        expose_value=False,  # Must be False
        is_eager=True,  # Must be True
        help="Path to the yaml configuration file.",
    )(function)


def debug_option(function: Callable):
    """
    Decorator for the `debug` command line option. Not exposed underlying command.

    The `debug` option prints debugging information to stdout. Forces quiet mode
    so that no animation is mixed with the log output.
    """

    def callback(context: click.Context, parameter: click.Parameter, value: Any):
        state = context.ensure_object(AppState)
        if value is not None:
            state.debug = value
        if state.debug:
            logging.basicConfig(
                format="%(filename)s: %(message)s",
                stream=sys.stdout,
                level=logging.DEBUG,
            )
            state.quiet = True  # no animation / status in debug mode
        return state.debug

    return click.option(
        "-d",
        "--debug",
        is_flag=True,
        default=None,  # Must be None
        callback=callback,
        expose_value=False,  # Must be False
        is_eager=False,  # Must be False
        help="Enable debugging output. Automatically enters quiet mode.",
    )(function)


def limit_option(function: Callable):
    """Decorator for the `max` option. Not exposed to the underlying command."""

    def callback(context: click.Context, parameter: click.Parameter, value: Any):
        state = context.ensure_object(AppState)
        if value is not None:
            state.limit = value
        return state.limit

    return click.option(
        "-n",
        "--max",
        "limit",
        type=click.types.IntRange(min=1),
        default=None,  # Must be None
        callback=callback,
        expose_value=False,  # Must be False
        is_eager=False,  # Must be False
        help="Maximum number of words requested from the lookup service.",
    )(function)


def output_option(function: Callable):
    """Decorator for the `output` option. Not exposed to the underlying command."""

    def callback(context: click.Context, parameter: click.Parameter, value: Any):
        state = context.ensure_object(AppState)
        if value is not None:
            state.output = value
        return state.output

    return click.option(
        "--output",
        default=None,  # Must be None
        metavar="OUTPUT",
        type=click.types.Choice(OUTPUTS),
        callback=callback,
        expose_value=False,  # Must be False
        is_eager=False,  # Must be False
        help=(
            "Specifies the format of the results. Allowed values: "
            f"{{{', '.join(OUTPUTS)}}}. [table]"
        ),
    )(function)


def quiet_option(function: Callable):
    """Decorator for the `quiet` option. Not exposed to the underlying command."""

    def callback(context: click.Context, parameter: click.Parameter, value: Any):
        state = context.ensure_object(AppState)
        if value is not None:
            state.quiet = value
        if state.debug:
            state.quiet = True
        return state.quiet

    return click.option(
        "--quiet",
        is_flag=True,
        default=None,  # Must be None
        callback=callback,
        expose_value=False,  # Must be False
        is_eager=False,  # Must be False
        help="Quiet mode. Suppresses all animations and status related output.",
    )(function)


def timeout_option(function: Callable):
    """Decorator for the `timeout` option. Not exposed to the underlying command."""

    def callback(context: click.Context, parameter: click.Parameter, value: Any):
        state = context.ensure_object(AppState)
        if value is not None:
            state.timeout = value
        return state.timeout

    return click.option(
        "--timeout",
        type=click.types.FloatRange(min=0, min_open=True),
        default=None,  # Must be None
        callback=callback,
        expose_value=False,  # Must be False
        is_eager=False,  # Must be False
        help="Seconds to wait for the lookup service. [10]",
    )(function)


def url_option(function: Callable):
    """Decorator for the `url` option. Not exposed to the underlying command."""

    def callback(context: click.Context, parameter: click.Parameter, value: Any):
        state = context.ensure_object(AppState)
        if value:
            state.url = value
        return state.url

    return click.option(
        "--url",
        type=click.types.STRING,
        callback=callback,
        expose_value=False,  # Must be False
        is_eager=False,  # Must be False
        help=(
            "URL of the Datamuse words endpoint. "
            "[https://api.datamuse.com/words]"
        ),
    )(function)
