import logging
import os
import sys
from collections.abc import Mapping

from security_alert_gate.config import ConfigurationError

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def parse_runner_debug(environ: Mapping[str, str] | None = None) -> bool:
    """Return True when the workflow was re-run with debug logging enabled."""
    env = os.environ if environ is None else environ
    raw = env.get("RUNNER_DEBUG")
    if raw is None or raw == "":
        return False
    if raw not in {"0", "1"}:
        raise ConfigurationError("RUNNER_DEBUG must be '0' or '1' when set")
    return raw == "1"


def setup_logging(verbose: bool = False) -> None:
    # stdout is reserved for workflow commands
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format=LOG_FORMAT,
        handlers=[logging.StreamHandler(sys.stderr)],
        force=True,
    )
    logging.getLogger("httpx").setLevel(logging.DEBUG if verbose else logging.WARNING)
