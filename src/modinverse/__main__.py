"""The Command Line Interface for the utility, including Interactive elements.

A hybrid CLI/ICLI (Command Line Interface/Interactive Command Line Interface) that asks for whatever the command line
left out, including the subcommand itself.

Typical usage example:

    modinverse inverse --a 3 --m 26
    OR
    python -m modinverse
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
import argparse
import sys
import typing

import modinverse


class HelpData(typing.NamedTuple):
    description: str
    format: typing.Type = str
    choices: list[str] | None = None


help_dict: dict[str, HelpData] = {
    "subcommand":
        HelpData(
            description="The available subcommands in Mod Inverse.",
            choices=["egcd", "modfloor", "inverse"],
        ),
    "egcd":
        HelpData("Greatest common divisor and Bezout coefficients of a and b."),
    "modfloor":
        HelpData("Floored modulus of a with respect to m."),
    "inverse":
        HelpData("Modular multiplicative inverse of a modulo m."),
    "a":
        HelpData(
            description="The first operand.",
            format=int,
        ),
    "b":
        HelpData(
            description="The second operand.",
            format=int,
        ),
    "m":
        HelpData(
            description="The modulus. Must be non-zero.",
            format=int,
        ),
}

needs = {
    "egcd": ("a", "b"),
    "modfloor": ("a", "m"),
    "inverse": ("a", "m"),
}

first = argparse.ArgumentParser(add_help=False)
first.add_argument("--a", "-a", type=help_dict["a"].format, help=help_dict["a"].description)
modulus = argparse.ArgumentParser(add_help=False)
modulus.add_argument("--m", "-m", type=help_dict["m"].format, help=help_dict["m"].description)
corep = argparse.ArgumentParser(prog="modinverse")
corep.add_argument("--version", "-v", action="version", version=f"%(prog)s {modinverse.__version__}")
corep.add_argument("--non-interactive", "-n", action="store_true", help="Enable non-interactive mode")
commands = corep.add_subparsers(dest="subcommand", title="Subcommands")

egcd = commands.add_parser("egcd", parents=[first], help=help_dict["egcd"].description)
egcd.add_argument("--b", "-b", type=help_dict["b"].format, help=help_dict["b"].description)
modfloor = commands.add_parser("modfloor", parents=[first, modulus], help=help_dict["modfloor"].description)
inverse = commands.add_parser("inverse", parents=[first, modulus], help=help_dict["inverse"].description)


def checkmodes(arg: str, non_interactive: bool) -> HelpData:
    if non_interactive:
        raise IOError(f"Argument {arg} is missing and non-interactive mode is active.")
    return help_dict[arg]


def choice_handler(arg: str, non_interactive: bool):
    helper_data = checkmodes(arg, non_interactive)
    print(f"Please specify the {arg}!")
    print("Description: " + helper_data.description)
    vald = set(helper_data.choices)
    for choice in helper_data.choices:
        print(f"{choice} - {help_dict[choice].description}")
    while True:
        ch = input(f"{arg}: ")
        if ch in vald:
            return ch
        print("Please select an option from the list.")


def input_handler(arg: str, non_interactive: bool):
    helper_data = checkmodes(arg, non_interactive)
    print(f"Please specify the {arg}!")
    print("Description: " + helper_data.description)
    cls = helper_data.format
    while True:
        ch = input(f"{arg}: ")
        if ch == "":
            print("Please provide a value.")
            continue
        try:
            return cls(ch)
        except ValueError:
            print(f"We could not convert your value to {cls.__name__}.")


def main():
    """Core Hybrid CLI/ICLI (Command Line Interface/Interactive Command Line Interface)"""
    args = corep.parse_args()
    non_interactive = args.non_interactive

    def pspr(text: str):
        """Print only if not in non-interactive mode."""
        if not non_interactive:
            print(text)

    pspr("Welcome to Mod Inverse!\n")
    if not args.subcommand:
        args.subcommand = choice_handler("subcommand", non_interactive)
    for reqs in needs[args.subcommand]:
        if getattr(args, reqs, None) is None:
            setattr(args, reqs, input_handler(reqs, non_interactive))
        else:
            pspr(f"{reqs}: {getattr(args, reqs)}")
    pspr("\nInput Complete! Executing...")
    try:
        match args.subcommand:
            case "egcd":
                g, x, y = modinverse.egcd(args.a, args.b)
                pspr("GCD and Bezout coefficients (g x y):")
                print(f"{g} {x} {y}")
            case "modfloor":
                r = modinverse.mod_floor(args.a, args.m)
                pspr("Floored modulus:")
                print(r)
            case "inverse":
                inv = modinverse.modinverse(args.a, args.m)
                if inv is None:
                    print("No modular inverse exists.")
                    sys.exit(1)
                pspr("Modular inverse:")
                print(inv)
    except ZeroDivisionError:
        print("The modulus must be non-zero!")
        sys.exit(2)
    pspr("Thank you for using Mod Inverse!")
    pspr("Goodbye!")


if __name__ == "__main__":
    main()
