"""Notary CLI actor implemented with Typer."""

from __future__ import annotations

import dataclasses
import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import typer

from packages.notary_sdk import (
    ArtifactError,
    ConfigurationError,
    Es256Signer,
    Notarizer,
    NotarySdkError,
    PollState,
    SubmissionResult,
    SubmissionTimeoutError,
    TransportError,
    UnexpectedTerminalStatusError,
    load_private_key_from_env_base64,
    options_from_settings,
)
from packages.notary_shared.config import NotarySettings, load_settings
from packages.notary_shared.logging import configure_logging, get_logger

SUCCESS_EXIT_CODE = 0
CONFIGURATION_ERROR_EXIT_CODE = 2
SUBMISSION_ERROR_EXIT_CODE = 3
TRANSPORT_ERROR_EXIT_CODE = 4


@dataclass(frozen=True)
class CliConfig:
    """Global CLI options applied on top of loaded settings."""

    config_path: Path | None
    issuer_id: str | None
    key_id: str | None
    key_env: str | None
    as_json: bool


def _emit_output(result: SubmissionResult, as_json: bool) -> None:
    """Render one accepted submission."""
    if as_json:
        payload = {"state": PollState.ACCEPTED.value, **dataclasses.asdict(result)}
        typer.echo(json.dumps(payload, sort_keys=True, separators=(",", ":")))
        return
    typer.echo(
        f"Accepted: {result.name} (id {result.submission_id}, "
        f"sha256 {result.checksum}, {result.attempts} status checks)"
    )


def _error_state(exc: NotarySdkError) -> str:
    """Return the poll state name that best describes one failure."""
    if isinstance(exc, SubmissionTimeoutError):
        return PollState.TIMED_OUT.value
    return PollState.FAILED.value


def _emit_error(exc: NotarySdkError, as_json: bool) -> None:
    """Render one SDK error to stderr."""
    if as_json:
        payload: dict[str, Any] = {"error": str(exc), "state": _error_state(exc)}
        if isinstance(exc, UnexpectedTerminalStatusError):
            payload["status"] = exc.status
            payload["developer_log_url"] = exc.developer_log_url
        typer.echo(json.dumps(payload, sort_keys=True), err=True)
        return
    typer.echo(f"error: {exc}", err=True)


def _exit_code(exc: NotarySdkError) -> int:
    """Map SDK error families to process exit codes."""
    if isinstance(exc, (ConfigurationError, ArtifactError)):
        return CONFIGURATION_ERROR_EXIT_CODE
    if isinstance(exc, TransportError):
        return TRANSPORT_ERROR_EXIT_CODE
    return SUBMISSION_ERROR_EXIT_CODE


def _load_settings(cfg: CliConfig, timeout: float | None) -> NotarySettings:
    """Resolve settings and fold CLI overrides into them."""
    settings = load_settings(config_path=cfg.config_path)
    api = settings.api.model_copy(
        update={
            key: value
            for key, value in {
                "issuer_id": cfg.issuer_id,
                "key_id": cfg.key_id,
                "private_key_env": cfg.key_env,
            }.items()
            if value is not None
        }
    )
    submission = settings.submission
    if timeout is not None:
        submission = submission.model_copy(update={"submission_timeout_seconds": timeout})
    return settings.model_copy(update={"api": api, "submission": submission})


def _build_notarizer(settings: NotarySettings) -> Notarizer:
    """Return one notarizer signing with the ES256 key named in settings."""
    signer = Es256Signer(load_private_key_from_env_base64(settings.api.private_key_env))
    options = options_from_settings(
        settings,
        signer=signer,
        info_logger=get_logger("notary").info,
    )
    return Notarizer(options)


def _require_config(ctx: typer.Context) -> CliConfig:
    """Return required CLI config from Typer context."""
    config = ctx.obj
    if not isinstance(config, CliConfig):
        raise RuntimeError("CLI configuration not initialized")
    return config


app = typer.Typer(no_args_is_help=True, help="Notary submission command-line interface")


@app.callback()
def main(
    ctx: typer.Context,
    config_path: Path | None = typer.Option(
        None, "--config", help="YAML settings file (default ~/.config/notary/notary.yaml)"
    ),
    issuer_id: str | None = typer.Option(
        None, envvar="NOTARY_ISSUER_ID", help="App Store Connect issuer ID"
    ),
    key_id: str | None = typer.Option(
        None, envvar="NOTARY_KEY_ID", help="App Store Connect private key ID"
    ),
    key_env: str | None = typer.Option(
        None, help="Environment variable holding the base64 PEM private key"
    ),
    as_json: bool = typer.Option(False, "--json", help="Emit JSON output"),
) -> None:
    """Store global options for all commands."""
    ctx.obj = CliConfig(
        config_path=config_path,
        issuer_id=issuer_id,
        key_id=key_id,
        key_env=key_env,
        as_json=as_json,
    )


@app.command("submit")
def submit_command(
    ctx: typer.Context,
    path: Path = typer.Argument(..., help="Artifact to notarize, usually a .zip"),
    timeout: float | None = typer.Option(
        None, min=0.001, help="Seconds to wait for a terminal status"
    ),
) -> None:
    """Submit one file and wait until it is accepted."""
    cfg = _require_config(ctx)
    settings = _load_settings(cfg, timeout)
    configure_logging(
        level=settings.logging.level,
        json_output=settings.logging.json_output,
        service=settings.logging.service,
        environment=settings.logging.environment,
    )

    try:
        with _build_notarizer(settings) as notarizer:
            result = notarizer.submit(path)
    except NotarySdkError as exc:
        _emit_error(exc, cfg.as_json)
        raise typer.Exit(code=_exit_code(exc)) from exc

    _emit_output(result, cfg.as_json)
    raise typer.Exit(code=SUCCESS_EXIT_CODE)


if __name__ == "__main__":
    app()
