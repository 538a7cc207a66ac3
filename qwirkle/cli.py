"""The main menu that starts, loads and ends games."""

from __future__ import annotations

import argparse
import sys
from typing import Optional, Sequence, TextIO

from .gameplay import Prompt, create_ai_game, create_new_game, load_game

NEW_GAME = "1"
AI_GAME = "2"
LOAD_GAME = "3"
CREDITS = "4"
QUIT = "5"

CREDITS_FILE = "credits.txt"
_CREDIT_LABELS = ("Name", "Student ID", "Email")


def _console_prompt(output: TextIO) -> Prompt:
    def prompt() -> str:
        output.write("> ")
        output.flush()
        line = sys.stdin.readline()
        if not line:
            raise EOFError
        return line.rstrip("\n")

    return prompt


def _print_main_menu(output: TextIO) -> None:
    output.write(
        "\n--- Main Menu ---\n"
        f"{NEW_GAME}. New Multi-Player Game (2-4 Players) \n"
        f"{AI_GAME}. New Single-Player Game (You vs AI player)\n"
        f"{LOAD_GAME}. Load Game\n"
        f"{CREDITS}. Credits\n"
        f"{QUIT}. Exit\n\n"
    )


def print_credits(output: TextIO, path: str = CREDITS_FILE) -> None:
    """Show the developers listed in ``path``, three lines per person."""
    output.write("\n--------- Developers ---------\n\n")
    try:
        with open(path, encoding="utf-8") as file:
            lines = file.read().splitlines()
    except OSError:
        lines = []
    for number, line in enumerate(lines):
        label = _CREDIT_LABELS[number % len(_CREDIT_LABELS)]
        output.write(f"{label}: {line}\n")
        if label == "Email":
            output.write("\n")
    output.write("------------------------------\n")


def main_menu_option(choice: str, prompt: Prompt, output: TextIO) -> bool:
    """Carry out a menu choice. False once the player has chosen to exit."""
    if choice == NEW_GAME:
        create_new_game(prompt, output)
    elif choice == AI_GAME:
        create_ai_game(prompt, output)
    elif choice == LOAD_GAME:
        load_game(prompt, output)
    elif choice == CREDITS:
        print_credits(output)
    elif choice == QUIT:
        output.write("Exiting game...\nGoodbye\n")
        return False
    else:
        output.write("Valid option not selected\n")
    return True


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Show the main menu until the player exits or input runs out."""
    parser = argparse.ArgumentParser(prog="qwirkle", description="Play Qwirkle at the console.")
    parser.parse_args(argv)

    output = sys.stdout
    prompt = _console_prompt(output)
    output.write("\nWelcome to Qwirkle!\n-------------------\n")
    try:
        while True:
            _print_main_menu(output)
            if not main_menu_option(prompt(), prompt, output):
                break
    except EOFError:
        output.write("\nGoodbye\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())