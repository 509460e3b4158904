"""Teams and the AFL scoring rule."""

from __future__ import annotations

from dataclasses import dataclass

POINTS_PER_GOAL = 6
POINTS_PER_BEHIND = 1


@dataclass
class Team:
    """A team with its goals and behinds."""

    name: str = ""
    goals: int = 0
    behinds: int = 0

    def score(self) -> int:
        """Total points: six for each goal and one for each behind."""
        return self.goals * POINTS_PER_GOAL + self.behinds * POINTS_PER_BEHIND

    def details(self) -> str:
        """One line with the name, goals, behinds and total score."""
        return f"{self.name}: {self.goals}, {self.behinds}, {self.score()}"


def result_message(team1: Team, team2: Team) -> str:
    """Say which team is winning, or that the match is a draw."""
    score1, score2 = team1.score(), team2.score()
    if score1 > score2:
        return f"The {team1.name} are winning"
    if score2 > score1:
        return f"The {team2.name} are winning"
    return "It is currently a draw!"