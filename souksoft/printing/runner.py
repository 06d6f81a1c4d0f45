"""External command execution and ordered fallback chains.

Both printer discovery and print dispatch come down to the same pattern:
run a list of OS commands in order, stop at the first one whose result is
acceptable, and otherwise report the most specific diagnostic collected
along the way.
"""

import logging
import subprocess
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CommandOutcome:
    """Normalized result of running one external command.

    Attributes:
        succeeded: True if the process exited with status zero.
        stdout: Captured standard output.
        stderr: Captured standard error.
        invocation_error: Set when the process could not be started at all
            (missing executable, permission denied, timeout).
        returncode: Process exit status, None if it never ran.
    """

    succeeded: bool
    stdout: str = ""
    stderr: str = ""
    invocation_error: str | None = None
    returncode: int | None = None

    @property
    def lines(self) -> list[str]:
        """Non-blank stdout lines, trimmed."""
        return [line.strip() for line in self.stdout.splitlines() if line.strip()]


def exited_zero(outcome: CommandOutcome) -> bool:
    """Default acceptance test for a mechanism."""
    return outcome.succeeded


@dataclass(frozen=True)
class Mechanism:
    """One entry of a fallback chain.

    Attributes:
        name: Short name used in log messages.
        argv: Full process argument vector.
        error_prefix: Prefix for invocation errors (e.g. 'lp error').
        accept: Decides whether an outcome ends the chain.
    """

    name: str
    argv: Sequence[str]
    error_prefix: str
    accept: Callable[[CommandOutcome], bool] = exited_zero


@dataclass
class ChainResult:
    """Outcome of running a fallback chain."""

    mechanism: Mechanism | None = None
    outcome: CommandOutcome | None = None
    attempts: list[tuple[Mechanism, CommandOutcome]] = field(default_factory=list)

    @property
    def succeeded(self) -> bool:
        return self.mechanism is not None

    def diagnostic(self, default: str) -> str:
        """Most specific error message across every attempt.

        Args:
            default: Message used when no attempt left a diagnostic.

        Returns:
            str: Error message.
        """
        return describe_failure([outcome for _, outcome in self.attempts], default)


def describe_failure(outcomes: Sequence[CommandOutcome], default: str) -> str:
    """Pick the first non-empty diagnostic in attempt order.

    For each outcome the invocation error is preferred over stderr.

    Args:
        outcomes: Outcomes in the order the mechanisms were tried.
        default: Message used when every diagnostic is empty.

    Returns:
        str: Error message.
    """
    for outcome in outcomes:
        if outcome.invocation_error:
            return outcome.invocation_error
        stderr = outcome.stderr.strip()
        if stderr:
            return stderr
    return default


def run_command(
    argv: Sequence[str],
    error_prefix: str,
    timeout: float | None = None,
) -> CommandOutcome:
    """Run an external command and capture its result.

    Never raises for process-level problems; they are reported through
    CommandOutcome.invocation_error instead.

    Args:
        argv: Process argument vector (no shell involved).
        error_prefix: Prefix for invocation error messages.
        timeout: Optional limit in seconds (None = wait forever).

    Returns:
        CommandOutcome: Normalized result.
    """
    try:
        result = subprocess.run(
            list(argv),
            capture_output=True,
            text=True,
            encoding="utf-8",
            errors="replace",
            timeout=timeout,
        )
    except subprocess.TimeoutExpired:
        return CommandOutcome(
            succeeded=False,
            invocation_error=f"{error_prefix}: timed out after {timeout}s",
        )
    except OSError as e:
        return CommandOutcome(succeeded=False, invocation_error=f"{error_prefix}: {e}")

    return CommandOutcome(
        succeeded=result.returncode == 0,
        stdout=result.stdout or "",
        stderr=result.stderr or "",
        returncode=result.returncode,
    )


def run_chain(mechanisms: Sequence[Mechanism], timeout: float | None = None) -> ChainResult:
    """Try mechanisms in order until one is accepted.

    Mechanisms after the accepted one are never started.

    Args:
        mechanisms: Ordered fallback chain.
        timeout: Per-command timeout in seconds.

    Returns:
        ChainResult: Accepted mechanism (if any) and every attempt made.
    """
    result = ChainResult()
    for mechanism in mechanisms:
        logger.debug(f"Running {mechanism.name}: {' '.join(mechanism.argv)}")
        outcome = run_command(mechanism.argv, mechanism.error_prefix, timeout)
        result.attempts.append((mechanism, outcome))
        if mechanism.accept(outcome):
            result.mechanism = mechanism
            result.outcome = outcome
            return result
        logger.debug(f"{mechanism.name} was not accepted (rc={outcome.returncode})")
    return result


def first_column(text: str, skip: int = 0) -> list[str]:
    """First whitespace-delimited token of each line.

    Args:
        text: Command output.
        skip: Number of leading lines to ignore (e.g. a header row).

    Returns:
        list[str]: Tokens in line order, blank lines dropped.
    """
    tokens = []
    for line in text.splitlines()[skip:]:
        parts = line.split()
        if parts:
            tokens.append(parts[0])
    return tokens
