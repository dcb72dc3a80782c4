#! /usr/bin/env python
import sys
from contextlib import nullcontext
from inspect import signature
from pathlib import Path
from time import perf_counter_ns
from typing import IO, ContextManager, List, Optional

from bourbaki.application.cli import CommandLineInterface  # type: ignore

from snafu import decode, encode, parse_snafu, render_snafu
from snafu import driver

INPUT_DIR = Path("inputs/")
DEFAULT_INPUT = INPUT_DIR / "input.txt"


def get_input(path: Optional[Path] = None) -> ContextManager[IO[str]]:
    if path is None and not sys.stdin.isatty():
        return nullcontext(sys.stdin)
    return open(path or DEFAULT_INPUT)


cli = CommandLineInterface(
    prog="main",
    require_options=False,
    require_subcommand=True,
    implicit_flags=True,
    use_verbose_flag=True,
)


@cli.definition
class SNAFU:
    """Convert between balanced base-5 (SNAFU) numerals and ordinary integers"""

    def run(self, path: Optional[Path] = None, show_values: bool = False):
        """Sum a list of SNAFU numbers, one per line, and print the total in decimal and in SNAFU.
        The default input is inputs/input.txt, but input will be read from stdin if input is
        piped there.

        :param path: a file of newline-delimited SNAFU numbers to read instead of the default
        :param show_values: print each line's decoded value and the total to stderr
        """
        print("Summing SNAFU numbers...", file=sys.stderr)
        tic = perf_counter_ns()
        with get_input(path) as input_:
            total, snafu = driver.run(input_, verbose=show_values)
        toc = perf_counter_ns()
        print(f"Ran in {(toc - tic) / 1000000} ms", file=sys.stderr)
        print(f"Sum in normal number {total}")
        print(f"Sum in SNAFU {snafu}")

    def encode(self, values: List[int]):
        """Print the SNAFU representation of each of the given non-negative integers

        :param values: the integers to encode
        """
        for value in values:
            print(render_snafu(encode(value)))

    def decode(self, numbers: List[str]):
        """Print the integer value of each of the given SNAFU numbers

        :param numbers: the SNAFU numbers to decode
        """
        for text in numbers:
            print(decode(parse_snafu(text)))

    def test(self):
        """Run the self-check on the worked example and the known reference conversions"""
        driver.test()
        print("Tests pass!")

    def info(self):
        """Print some details about the methodology, and the signature of the summing routine"""
        if driver.__doc__:
            print(driver.__doc__, end="\n\n")
        print("Signature:")
        print(signature(driver.run))

    def input(self, path: Optional[Path] = None):
        """Print the input text to stdout

        :param path: the input file to print instead of the default
        """
        with open(path or DEFAULT_INPUT, "r") as f:
            for line in f:
                print(line, file=sys.stdout, end="")


if __name__ == "__main__":
    cli.run()
