"""The Command Line Interface for the utility, including Interactive elements.

A hybrid CLI/ICLI (Command Line Interface/Interactive Command Line Interface): every argument that is missing from
the command line is asked for interactively, unless non-interactive mode is active, in which case defaults are
used where they exist and anything else is an error.

Typical usage example:

    ecrypt keygen --digits 64 -p key.pub -P key
    ecrypt -n encrypt -p key.pub --message 42
    python -m ecrypt is-prime --number 561
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
import argparse
import logging
import pathlib
import sys
import typing

import ecrypt
from ecrypt import rsa


class HelpData(typing.NamedTuple):
    description: str
    format: typing.Type = str
    choices: list[str] | None = None
    default: typing.Any = None
    advanced: bool = False


help_dict: dict[str, HelpData] = {
    "subcommand":
        HelpData(
            description="The available subcommands in ecrypt.",
            choices=["keygen", "encrypt", "decrypt", "is-prime", "prime"],
        ),
    "keygen":
        HelpData("Key generation utility."),
    "encrypt":
        HelpData("Encryption utility."),
    "decrypt":
        HelpData("Decryption utility."),
    "is-prime":
        HelpData("Primality test."),
    "prime":
        HelpData("Random prime generation."),
    "public_key":
        HelpData(
            description="Location of the public key file.",
            format=pathlib.Path,
        ),
    "private_key":
        HelpData(
            description="Location of the private key file.",
            format=pathlib.Path,
        ),
    "message":
        HelpData(
            description="Integer message or ciphertext.",
            format=int,
        ),
    "number":
        HelpData(
            description="Integer to test for primality.",
            format=int,
        ),
    "digits":
        HelpData(
            description="Magnitude of the primes, in the chosen unit.",
            format=int,
            default=rsa.DEFAULT_DIGITS,
        ),
    "unit":
        HelpData(description="Unit of the magnitude.", choices=["digits", "bytes"], advanced=True, default="digits"),
    "padded":
        HelpData(
            description="Whether to use the numeric padding. Warning! Unsecure.",
            format=bool,
            advanced=True,
            default=False,
        ),
    "overwrite":
        HelpData(
            description="Overwrite specified destination files if they exist?",
            choices=["Y", "N"],
            default="N",
        )
}

needs = {
    "keygen": ("public_key", "private_key", "digits", "unit"),
    "encrypt": ("public_key", "message", "padded"),
    "decrypt": ("private_key", "message", "padded"),
    "is-prime": ("number",),
    "prime": ("digits", "unit"),
}

pubkey = argparse.ArgumentParser(add_help=False)
pubkey.add_argument("--public_key", "-p", type=help_dict["public_key"].format, help=help_dict["public_key"].description)
privkey = argparse.ArgumentParser(add_help=False)
privkey.add_argument("--private_key",
                     "-P",
                     type=help_dict["private_key"].format,
                     help=help_dict["private_key"].description)
payloads = argparse.ArgumentParser(add_help=False)
payloads.add_argument("--message", "-m", type=help_dict["message"].format, help=help_dict["message"].description)
payloads.add_argument("--padded", action="store_true", default=None, help=help_dict["padded"].description)
magnitude = argparse.ArgumentParser(add_help=False)
magnitude.add_argument("--digits", "-d", type=help_dict["digits"].format, help=help_dict["digits"].description)
magnitude.add_argument("--unit", "-u", choices=help_dict["unit"].choices, help=help_dict["unit"].description)
corep = argparse.ArgumentParser(prog="ecrypt")
corep.add_argument("--version", "-v", action="version", version=f"%(prog)s {ecrypt.__version__}")
corep.add_argument("--non-interactive", "-n", action="store_true", help="Enable non-interactive mode")
corep.add_argument("--advanced", "-a", action="store_true", help="Enable advanced mode, for interactive mode")
corep.add_argument("--log-level", default="WARNING", help="Logging level (DEBUG, INFO, WARNING, ...)")
commands = corep.add_subparsers(dest="subcommand", title="Subcommands")

keygen = commands.add_parser("keygen", parents=[privkey, pubkey, magnitude], help=help_dict["keygen"].description)
keygen.add_argument("--overwrite", "-o", action="store_const", const="Y", help=help_dict["overwrite"].description)
encrypt = commands.add_parser("encrypt", parents=[pubkey, payloads], help=help_dict["encrypt"].description)
decrypt = commands.add_parser("decrypt", parents=[privkey, payloads], help=help_dict["decrypt"].description)
isprime = commands.add_parser("is-prime", help=help_dict["is-prime"].description)
isprime.add_argument("--number", type=help_dict["number"].format, help=help_dict["number"].description)
prime = commands.add_parser("prime", parents=[magnitude], help=help_dict["prime"].description)


def checkmodes(arg: str, mode: tuple[bool, bool]):
    helper_data = help_dict[arg]
    if (mode[0] or (helper_data.advanced and not mode[1])) and helper_data.default is not None:
        return helper_data.default
    if mode[0]:
        raise IOError(f"Argument {arg} is missing and non-interactive mode is active.")
    return helper_data


def choice_handler(arg: str, mode: tuple[bool, bool], prntr: typing.Callable = print):
    helper_data = checkmodes(arg, mode)
    if not isinstance(helper_data, HelpData):
        return helper_data
    prntr(f"Please specify the {arg}!")
    prntr("Description: " + helper_data.description)
    choices = helper_data.choices
    vald = set(choices)
    for choice in choices:
        defstring = " (Default)" if choice == helper_data.default else ""
        if help_dict.get(choice, None):
            prntr(f"{choice} - {help_dict[choice].description}" + defstring)
        else:
            prntr(f"{choice}" + defstring)
    if helper_data.default is not None:
        prntr("To accept default just click enter. Otherwise specify value.")
    while True:
        ch = input(f"{arg}: ")
        if ch in vald:
            return ch
        if not ch and helper_data.default is not None:
            return helper_data.default
        prntr("Please select an option from the list.")


def input_handler(arg: str, mode: tuple[bool, bool], prntr: typing.Callable = print):
    helper_data = checkmodes(arg, mode)
    if not isinstance(helper_data, HelpData):
        return helper_data
    prntr(f"Please specify the {arg}!")
    prntr("Description: " + helper_data.description)
    if helper_data.default is not None:
        prntr(f"Default value: {helper_data.default}")
        prntr("To accept default just click enter. Otherwise specify value.")
    cls = helper_data.format
    while True:
        ch = input(f"{arg}: ")
        if not ch and helper_data.default is not None:
            return helper_data.default
        if ch == "":
            prntr("Please provide a value.")
            continue
        if cls is bool:
            return ch.strip().lower() in ("y", "yes", "true", "1")
        try:
            return cls(ch)
        except ValueError:
            prntr(f"We could not convert your value to {cls.__name__}.")


def run(args: argparse.Namespace, pspr: typing.Callable[[str], None]) -> int:
    """Execute a fully populated subcommand, returning the exit code."""
    pstatus = (args.non_interactive, args.advanced)
    match args.subcommand:
        case "keygen":
            if args.private_key.exists() or args.public_key.exists():
                rs = getattr(args, "overwrite", None)
                if rs is None:
                    rs = choice_handler("overwrite", pstatus, pspr)
                if rs == "N":
                    print("Destination private or public key already exists!")
                    return 1
            keys = ecrypt.keygen(args.digits, unit=args.unit)
            keys.private.export(args.private_key)
            keys.public.export(args.public_key)
            pspr(f"\nKey pair generated! Maximum message size: {keys.max_message_size}")
        case "encrypt":
            pub = rsa.PublicKey.import_key(args.public_key)
            ciph = pub.padded_encrypt(args.message) if args.padded else pub.encrypt(args.message)
            pspr("Ciphertext:")
            print(ciph)
        case "decrypt":
            priv = rsa.PrivateKey.import_key(args.private_key)
            clear = priv.padded_decrypt(args.message) if args.padded else priv.decrypt(args.message)
            pspr("Cleartext:")
            print(clear)
        case "is-prime":
            if ecrypt.is_prime(args.number):
                print(f"{args.number} is prime.")
            else:
                print(f"{args.number} is composite.")
                return 1
        case "prime":
            print(ecrypt.prime(args.digits, args.unit))
    return 0


def main(argv: list[str] | None = None) -> int:
    """Core Hybrid CLI/ICLI (Command Line Interface/Interactive Command Line Interface)"""
    args = corep.parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level.upper(), logging.WARNING),
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    pstatus = (args.non_interactive, args.advanced)

    def pspr(text: str):
        """Print only if not in non-interactive mode."""
        if not pstatus[0]:
            print(text)

    pspr("Welcome to ecrypt!\n")
    try:
        if not args.subcommand:
            args.subcommand = choice_handler("subcommand", pstatus)
        for reqs in needs[args.subcommand]:
            if getattr(args, reqs, None) is None:
                if help_dict[reqs].choices is not None:
                    res = choice_handler(reqs, pstatus)
                else:
                    res = input_handler(reqs, pstatus)
                setattr(args, reqs, res)
            else:
                pspr(f"{reqs}: {getattr(args, reqs)}")
        pspr("\nInput Complete! Executing...")
        code = run(args, pspr)
    except (ValueError, IOError) as err:
        print(f"Error: {err}", file=sys.stderr)
        return 2
    pspr("Thank you for using ecrypt!")
    pspr("Goodbye!")
    return code


if __name__ == "__main__":
    sys.exit(main())
