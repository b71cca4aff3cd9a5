#!/usr/bin/env python3
"""gitguide CLI entrypoint."""

import sys
import logging
import argparse

from gitguide.context import CommandContext
from gitguide.dispatch import execute
from gitguide.lib.config import GuideConfig, load_guide_config, resolve_config_path
from gitguide.output import ConsoleSink
from gitguide.scenarios import (
    DEFAULT_SCENARIO,
    UnknownScenario,
    apply_scenario,
    describe,
    get_scenario,
    load_scenarios,
)
from gitguide.store import JsonFileStatePort, RepositoryStore
from gitguide.views import status_summary

EXIT_WORDS = ('exit', 'quit')


def get_config(args) -> GuideConfig:
    """Load guide.env from --config, $GITGUIDE_CONFIG or the working directory."""
    try:
        return load_guide_config(resolve_config_path(args.config))
    except ValueError as e:
        print(f"ERROR: {e}")
        sys.exit(2)


def setup_logging(args, config: GuideConfig) -> None:
    level = logging.DEBUG if args.verbose else getattr(logging, config.log_level)
    logging.basicConfig(level=level, format='%(levelname)s %(name)s: %(message)s')


def build_context(config: GuideConfig, sink=None) -> CommandContext:
    store = RepositoryStore(JsonFileStatePort(config.state_path), config=config)
    return CommandContext(store=store, out=sink or ConsoleSink())


def join_line(words: list[str]) -> str:
    """Rebuild a command line from shell words, quoting words with spaces."""
    return ' '.join(f'"{w}"' if ' ' in w else w for w in words)


def cmd_run(args, config: GuideConfig) -> int:
    ctx = build_context(config)
    return execute(join_line(args.line), ctx, echo=True)


def cmd_shell(args, config: GuideConfig) -> int:
    """Interactive loop. Each line is one guide command."""
    ctx = build_context(config)
    ctx.out.output('Welcome to the Git guide terminal.')
    ctx.out.output('Type "help" to see available commands, "exit" to leave.')

    while True:
        ctx.out.output(status_summary(ctx.store).render())
        try:
            line = input('$ ')
        except (EOFError, KeyboardInterrupt):
            print()
            return 0
        if line.strip().lower() in EXIT_WORDS:
            return 0
        execute(line, ctx)


def cmd_scenario_list(args, config: GuideConfig) -> int:
    sink = ConsoleSink()
    for scenario in load_scenarios().values():
        marker = '*' if scenario.id == DEFAULT_SCENARIO else ' '
        sink.output(f"{marker} {scenario.id:<16} {scenario.title} ({scenario.difficulty})")
        sink.output(f"    {scenario.description}")
    return 0


def cmd_scenario_use(args, config: GuideConfig) -> int:
    ctx = build_context(config)
    try:
        scenario = get_scenario(args.id)
    except UnknownScenario:
        ctx.out.error(f"Unknown scenario: {args.id}")
        ctx.out.output("Run 'gitguide scenario list' to see available scenarios.")
        return 1
    apply_scenario(scenario, ctx.store)
    for line in describe(scenario):
        ctx.out.output(line)
    return 0


def cmd_reset(args, config: GuideConfig) -> int:
    ctx = build_context(config)
    ctx.store.port.clear()
    ctx.store.reset_to_initial()
    ctx.out.success('Repository state reset.')
    return 0


def cmd_summary(args, config: GuideConfig) -> int:
    ctx = build_context(config)
    ctx.out.output(status_summary(ctx.store).render())
    return 0


def main(argv=None):
    parser = argparse.ArgumentParser(prog='gitguide', description='Simulated Git/GitHub practice terminal')
    parser.add_argument('--config', '-c', help='Path to guide.env')
    parser.add_argument('--verbose', '-v', action='store_true', help='Debug logging')
    subparsers = parser.add_subparsers(dest='command', required=True)

    # gitguide run
    p_run = subparsers.add_parser('run', help='Run one command line, e.g. gitguide run git status')
    p_run.add_argument('line', nargs=argparse.REMAINDER, help='Command line to run')
    p_run.set_defaults(func=cmd_run)

    # gitguide shell
    p_shell = subparsers.add_parser('shell', help='Interactive terminal')
    p_shell.set_defaults(func=cmd_shell)

    # gitguide scenario
    p_scenario = subparsers.add_parser('scenario', help='Practice scenarios')
    p_scenario.set_defaults(func=cmd_scenario_list)
    scenario_sub = p_scenario.add_subparsers(dest='scenario_cmd')

    # gitguide scenario list
    p_scenario_list = scenario_sub.add_parser('list', help='List scenarios')
    p_scenario_list.set_defaults(func=cmd_scenario_list)

    # gitguide scenario use
    p_scenario_use = scenario_sub.add_parser('use', help='Start a scenario (replaces current state)')
    p_scenario_use.add_argument('id', help='Scenario ID')
    p_scenario_use.set_defaults(func=cmd_scenario_use)

    # gitguide reset
    p_reset = subparsers.add_parser('reset', help='Forget all state and start over')
    p_reset.set_defaults(func=cmd_reset)

    # gitguide summary
    p_summary = subparsers.add_parser('summary', help='One-line repository status')
    p_summary.set_defaults(func=cmd_summary)

    args = parser.parse_args(argv)
    config = get_config(args)
    setup_logging(args, config)
    return args.func(args, config)


if __name__ == '__main__':
    sys.exit(main())
