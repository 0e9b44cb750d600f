from __future__ import annotations

import os
from dataclasses import dataclass

import typer

from create_release.actions.runtime import ActionsRuntime, EnvRuntime
from create_release.core.context import ActionContext, load_context
from create_release.core.errors import ErrorCode
from create_release.core.result import Err
from create_release.github.http import HttpClient, RealHttpClient
from create_release.output.console import ConsoleProtocol, RichConsole


@dataclass(frozen=True, slots=True)
class CLIContext:
    runtime: ActionsRuntime
    context: ActionContext
    http: HttpClient
    console: ConsoleProtocol


def build_context(*, timeout: float = 30.0) -> CLIContext:
    """Wire the real collaborators from the process environment."""
    environ = dict(os.environ)
    runtime = EnvRuntime(environ)

    context_result = load_context(environ)
    if isinstance(context_result, Err):
        runtime.set_failed(context_result.error.message)
        raise typer.Exit(code=int(ErrorCode.USER_ERROR))

    return CLIContext(
        runtime=runtime,
        context=context_result.value,
        http=RealHttpClient(timeout=timeout),
        console=RichConsole(),
    )
