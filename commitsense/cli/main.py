"""CLI Main Entry Point"""

import os
import sys

from commitsense.config import load_config
from commitsense.llm import get_client, LLMError
from commitsense.output import dim, print_error
from commitsense.requester import ChangeSummaryRequester, WorkingDirectoryContext, DeliveryOutcome

from commitsense.cli.args import parse_args
from commitsense.cli.commands import display_config
from commitsense.cli.sinks import PipeSink, TerminalSink


def _resolve_settings(args, config):
    """Resolve model and max_tokens.

    Precedence: CLI args > config file > defaults
    """
    model = args.model or config.model
    max_tokens = args.max_tokens or config.max_tokens
    return model, max_tokens


def _print_verbose_stats(outcome: DeliveryOutcome) -> None:
    """Print verbose timing and token statistics."""
    timings = outcome.timings
    print()
    print(dim(f"  Outcome: {outcome.kind.value}"))
    if outcome.prompt_chars:
        print(dim(f"  Prompt: ~{outcome.prompt_chars//4} tokens ({outcome.prompt_chars} chars)"))
    if outcome.tokens_used:
        print(dim(f"  Tokens: {outcome.tokens_used}"))
    print(dim(f"  Timings: git={timings.get('git', 0):.2f}s, generate={timings.get('generate', 0):.2f}s"))


def main(argv=None) -> int:
    """Main entry point for the CLI."""
    args = parse_args(argv)

    if args.display_config:
        return display_config()

    config = load_config()
    model, max_tokens = _resolve_settings(args, config)
    is_pipe = not sys.stdout.isatty()

    # Fail fast on a missing credential, before git or the network are touched
    try:
        client = get_client(model=model, max_tokens=max_tokens, endpoint=config.endpoint, timeout=config.timeout)
    except LLMError as e:
        print_error(str(e))
        return 1

    sink = PipeSink() if is_pipe else TerminalSink(copy=not args.no_copy)
    context = WorkingDirectoryContext.from_path(args.directory or os.getcwd())

    outcome = ChangeSummaryRequester(client, sink).run(context)

    if args.verbose and not is_pipe:
        _print_verbose_stats(outcome)

    return 1 if outcome.is_failed else 0
