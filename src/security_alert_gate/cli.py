"""Command-line entry point: resolve configuration, run the gate, exit."""

import argparse
import asyncio
import logging
import os
import sys

from dotenv import load_dotenv

from security_alert_gate.api import GitHubClient
from security_alert_gate.config import ConfigurationError, GateConfig
from security_alert_gate.core import GatePipeline
from security_alert_gate.domain import GateResult
from security_alert_gate.logging_setup import parse_runner_debug, setup_logging
from security_alert_gate.output import ActionsCommandOutput, ConsoleGateOutput, GateOutput
from security_alert_gate.output.actions import escape_data
from security_alert_gate.sources import SourceRegistry

logger = logging.getLogger(__name__)

INPUT_FLAGS = {
    "repository": "repository",
    "severity": "severity",
    "allow_not_found": "allow-not-found",
    "fail_action": "fail-action",
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="security-alert-gate",
        description=(
            "Fail or warn a build when GitHub code scanning, Dependabot or "
            "secret scanning report open alerts at or above a severity."
        ),
    )
    parser.add_argument("--repository", help="owner/name (default: INPUT_REPOSITORY or workflow context)")
    parser.add_argument(
        "--severity",
        help="critical, high, moderate, medium or low (required unless INPUT_SEVERITY is set)",
    )
    parser.add_argument(
        "--allow-not-found",
        choices=["true", "false"],
        help="do not fail when code scanning has no analysis yet",
    )
    parser.add_argument(
        "--fail-action",
        choices=["true", "false"],
        help="fail instead of warn when alerts are found",
    )
    parser.add_argument(
        "--output",
        choices=["actions", "console"],
        default="actions",
        help="how outcomes are reported (default: actions)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")
    return parser


def resolve_environ(args: argparse.Namespace) -> dict[str, str]:
    env = dict(os.environ)
    for attr, input_name in INPUT_FLAGS.items():
        value = getattr(args, attr)
        if value is not None:
            env[f"INPUT_{input_name.upper()}"] = value
    return env


async def run_gate(config: GateConfig, outputs: list[GateOutput]) -> GateResult:
    async with GitHubClient(
        token=config.token, base_url=config.api_url, graphql_url=config.graphql_url
    ) as client:
        pipeline = GatePipeline(client, SourceRegistry.default(), config, outputs)
        return await pipeline.run()


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    load_dotenv()

    try:
        setup_logging(verbose=args.verbose or parse_runner_debug())
        config = GateConfig.from_env(resolve_environ(args))
    except ConfigurationError as exc:
        if args.output == "actions":
            print(f"::error::{escape_data(str(exc))}")
        else:
            print(f"ERROR: {exc}", file=sys.stderr)
        return 1

    logger.info(
        "Checking %s for security alerts with %s severity and above",
        config.repository,
        config.severity,
    )

    output: GateOutput = ActionsCommandOutput() if args.output == "actions" else ConsoleGateOutput()
    result = asyncio.run(run_gate(config, [output]))
    return result.exit_code


if __name__ == "__main__":
    sys.exit(main())
