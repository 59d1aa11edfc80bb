from __future__ import annotations

import os
from dataclasses import dataclass

import typer

from tagrelease.core.config import ActionConfig, ConfigOverrides, load_config
from tagrelease.core.result import Err
from tagrelease.github.http import HttpClient, RealHttpClient
from tagrelease.output.console import ConsoleProtocol, RichConsole
from tagrelease.output.errors import print_run_error, run_error_exit_code


@dataclass(frozen=True, slots=True)
class CLIContext:
    config: ActionConfig
    http: HttpClient
    console: ConsoleProtocol


def build_context(overrides: ConfigOverrides) -> CLIContext:
    config_result = load_config(os.environ, overrides)
    if isinstance(config_result, Err):
        error = config_result.error
        print_run_error(error, RichConsole(debug=overrides.verbose))
        raise typer.Exit(code=run_error_exit_code(error))

    config = config_result.value
    return CLIContext(
        config=config,
        http=RealHttpClient(token=config.token, timeout=config.timeout),
        console=RichConsole(debug=config.debug),
    )
