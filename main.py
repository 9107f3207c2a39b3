"""Finds the six words to play in today's Wordle so the board looks like a crewmate"""
import argparse
import logging
import sys

from search import InputShapeError, NoSolutionFound, normalize_target, solve
from wordle import WIDTH, as_str, score
from words import WORDS_FILE, load_words

EXIT_USAGE = 1
EXIT_BAD_WORD = 2
EXIT_NO_SOLUTION = 3


class _Parser(argparse.ArgumentParser):
    def error(self, message):
        self.print_usage(sys.stderr)
        self.exit(EXIT_USAGE, f'Error: {message}\n')


def _parser() -> argparse.ArgumentParser:
    p = _Parser(
        prog='wordsus',
        description='Finds the 6 words to use in today\'s Wordle to obtain a "SUS" looking board.',
        epilog=f'The word must be exactly {WIDTH} characters long.')
    p.add_argument('word', help="today's Wordle answer")
    p.add_argument('--words', default=WORDS_FILE, help='word list to search, one word per line, in order')
    p.add_argument('--show', action='store_true', help='show the colours each word produces')
    p.add_argument('--progress', action='store_true', help='show a progress bar while searching')
    p.add_argument('-v', '--verbose', action='store_true', help='log details of the search')
    return p


def _configure_logging(verbose: bool):
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s'))
    root = logging.getLogger()
    root.handlers = [handler]
    root.setLevel(logging.DEBUG if verbose else logging.WARNING)


def run(argv=None) -> int:
    args = _parser().parse_args(argv)
    _configure_logging(args.verbose)

    try:
        target = normalize_target(args.word)
    except InputShapeError:
        print(f'Error: The word must be exactly {WIDTH} characters long.', file=sys.stderr)
        return EXIT_BAD_WORD

    try:
        words = load_words(args.words)
    except (OSError, UnicodeDecodeError) as e:
        print(f'Error: Cannot read word list: {e}', file=sys.stderr)
        return EXIT_USAGE

    try:
        board = solve(target, words, progress=args.progress)
    except NoSolutionFound as e:
        print(e)
        return EXIT_NO_SOLUTION

    for word in board:
        if args.show:
            print(word, '->', as_str(score(target, word)))
        else:
            print(word)
    return 0


if __name__ == '__main__':
    sys.exit(run())
