"""Interactive AFL score tracker for two teams."""

from __future__ import annotations

import argparse

from aflscore.console import Console
from aflscore.team import Team, result_message

_QUIT_PROMPT = "Are you sure you want to quit? [Y/n]: "


class ScoreTracker:
    """Keeps two teams' scores and drives the menu over a console."""

    def __init__(self, console: Console):
        self.console = console
        self.team1 = Team()
        self.team2 = Team()

    def _read_team(self, team: Team) -> None:
        team.name = self.console.read_word("name: ")
        team.goals = self.console.read_whole_number("goals: ")
        team.behinds = self.console.read_whole_number("behinds: ")

    def initialize_teams(self) -> None:
        """Greet the user and read both teams' names and starting scores."""
        self.console.write("Welcome to the AFL score calculator!\n\n")
        self.console.write("Enter team 1 details:\n")
        self._read_team(self.team1)
        self.console.write("\nEnter team 2 details:\n")
        self._read_team(self.team2)

    def show_details(self) -> None:
        """Write who is winning and each team's details."""
        self.console.write("\nCalculating details...\n")
        self.console.write(result_message(self.team1, self.team2) + "\n")
        self.console.write(self.team1.details() + "\n")
        self.console.write(self.team2.details() + "\n")

    def _menu_text(self) -> str:
        return (
            "\nMenu:\n"
            f"1: Update {self.team1.name} goals\n"
            f"2: Update {self.team1.name} behinds\n"
            f"3: Update {self.team2.name} goals\n"
            f"4: Update {self.team2.name} behinds\n"
            "5: Print details\n"
            "6: Quit\n"
            "Option: "
        )

    def menu_option(self) -> int:
        """Show the menu until a whole number is chosen, and return it."""
        return self.console.read_whole_number(self._menu_text())

    def handle_option(self, option: int) -> bool:
        """Carry out a menu choice; return True when the user quits."""
        match option:
            case 1:
                self.team1.goals = self.console.read_whole_number("goals: ")
            case 2:
                self.team1.behinds = self.console.read_whole_number("behinds: ")
            case 3:
                self.team2.goals = self.console.read_whole_number("goals: ")
            case 4:
                self.team2.behinds = self.console.read_whole_number("behinds: ")
            case 5:
                self.show_details()
            case 6:
                if self.console.read_yes_no(_QUIT_PROMPT):
                    self.console.write("\nBye!\n")
                    return True
            case _:
                self.console.write("Please enter a number between 1 and 6\n")
        return False

    def run(self) -> None:
        """Show the scores and handle menu choices until the user quits."""
        while True:
            self.show_details()
            if self.handle_option(self.menu_option()):
                break


def main(argv: list[str] | None = None) -> int:
    """Run the interactive tracker on standard input and output."""
    parser = argparse.ArgumentParser(
        prog="aflscore",
        description="Track the scores of two AFL teams interactively.",
    )
    parser.parse_args(argv)
    tracker = ScoreTracker(Console())
    try:
        tracker.initialize_teams()
        tracker.run()
    except EOFError:
        return 1
    return 0