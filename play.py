#!/usr/bin/env python3
"""
Feud Board Console

Runs the guess-the-popular-answer board in a terminal. Type a guess to
try it against the hidden answers, or a command:

    :next          next level
    :level ID      jump to a level
    :levels        list level ids
    :restart       replay the current level
    :reveal        show every answer
    :award 1|2     give the round score to a team (team mode)
    :quit          leave

Usage:
    python play.py
    python play.py --teams --catalog data/levels.json --level vacation
    python play.py --validate --catalog data/levels.json
"""

import argparse
import logging
import sys
from pathlib import Path

from feud import (
    RoundController,
    level_warnings,
    load_catalog,
    validate_level,
)
from feud.config import get_config
from feud.logging_config import setup_logging
from feud.schemas import CatalogFile
from feud.utils import validate_json_file


def render(controller: RoundController) -> str:
    """Format the board as text."""
    view = controller.snapshot()
    lines = ['', '=' * 60, view['question'], '=' * 60]

    for position, answer in enumerate(view['answers'], start=1):
        if answer['revealed']:
            lines.append(f'  {position}. {answer["text"]:<30} {answer["points"]:>4}')
        else:
            lines.append(f'  {position}. {"?" * 12:<30} {"--":>4}')

    hearts = '♥' * max(view['lives'], 0) or '-'
    lines.append(f'\n  Score: {view["round_score"]}   Lives: {hearts}')
    if controller.is_team_mode:
        lines.append(f'  Team 1: {view["team1_total"]}   Team 2: {view["team2_total"]}')
    if view['exhausted']:
        lines.append('  Out of lives! Board revealed.')
    elif view['round_complete']:
        lines.append('  Round complete.')
    if view['can_award']:
        lines.append('  Award with :award 1 or :award 2')
    return '\n'.join(lines)


def run_command(controller: RoundController, command: str) -> bool:
    """Run a ':' command. Returns False when the session should end."""
    name, _, arg = command[1:].strip().partition(' ')
    arg = arg.strip()

    if name in ('quit', 'q'):
        return False
    if name == 'next':
        controller.next_level()
    elif name == 'level':
        if not controller.go_to_level(arg):
            print(f'❌ Unknown level: {arg!r} (try :levels)')
    elif name == 'levels':
        for level in controller.catalog:
            marker = '*' if level.id == controller.level_id else ' '
            print(f' {marker} {level.id}: {level.question}')
    elif name == 'restart':
        controller.restart()
    elif name == 'reveal':
        controller.reveal_all()
    elif name == 'award':
        if arg not in ('1', '2'):
            print('Usage: :award 1|2')
        elif not controller.award_team(int(arg)):
            print('⚠️  Nothing to award yet')
    else:
        print(f'Unknown command: {command}')
    return True


def validate_catalog(catalog_path: Path) -> int:
    """Check a catalog file, print findings, and return an exit code."""
    is_valid, error = validate_json_file(catalog_path, CatalogFile)
    if not is_valid:
        print(f'❌ {error}')
        return 1

    catalog = load_catalog(catalog_path)
    errors: list[str] = []
    warnings: list[str] = []
    for level in catalog:
        errors.extend(validate_level(level))
        warnings.extend(level_warnings(level))

    for warning in warnings:
        print(f'⚠️  {warning}')
    for error in errors:
        print(f'❌ {error}')

    if errors:
        return 1
    print(f'✓ {len(catalog)} levels OK')
    return 0


def main():
    parser = argparse.ArgumentParser(description="Feud board console")
    parser.add_argument(
        "--catalog", "-c",
        default=None,
        help="Path to levels JSON (defaults to the built-in levels)",
    )
    parser.add_argument(
        "--teams", "-t",
        action="store_true",
        help="Two-team mode (4 lives, award rounds to teams)",
    )
    parser.add_argument(
        "--level", "-l",
        default=None,
        help="Level id to start on",
    )
    parser.add_argument(
        "--validate",
        action="store_true",
        help="Validate the catalog and exit",
    )
    parser.add_argument(
        "--log-dir",
        default=None,
        help="Directory for log files (file logging is off unless set)",
    )
    parser.add_argument(
        "--quiet", "-q",
        action="store_true",
        help="Only log warnings to the console",
    )

    args = parser.parse_args()

    setup_logging(
        log_dir=Path(args.log_dir) if args.log_dir else None,
        level=logging.WARNING if args.quiet else logging.INFO,
        log_to_file=args.log_dir is not None,
    )

    config = get_config()
    catalog_path = args.catalog or config.catalog_path

    if args.validate:
        if not catalog_path:
            print("❌ --validate needs --catalog")
            sys.exit(1)
        sys.exit(validate_catalog(Path(catalog_path)))

    try:
        catalog = load_catalog(catalog_path)
    except (FileNotFoundError, ValueError) as e:
        print(f"❌ Could not load catalog: {e}")
        sys.exit(1)

    mode = 'team' if args.teams else config.mode
    if args.level and args.level not in catalog:
        print(f"❌ Unknown level: {args.level}")
        sys.exit(1)

    controller = RoundController(catalog, mode=mode, level_id=args.level)
    controller.subscribe(lambda c: print(render(c)))
    print(render(controller))

    while True:
        try:
            line = input('\nGuess> ')
        except (EOFError, KeyboardInterrupt):
            print()
            break

        if line.strip().startswith(':'):
            if not run_command(controller, line.strip()):
                break
            continue

        if controller.is_exhausted:
            print('Out of lives. Use :next, :level or :restart.')
            continue

        controller.set_guess_input(line)
        result = controller.submit_guess()
        if result.outcome in ('miss', 'exhausted'):
            print(f'✗ No "{result.guess.strip()}" on the board')


if __name__ == "__main__":
    main()
