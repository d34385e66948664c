"""Value objects for problem metadata."""

from dataclasses import dataclass

DIFFICULTIES = ("easy", "medium", "hard")


@dataclass(frozen=True)
class QuestionInfo:
    """Frontend problem number and difficulty folder of a problem."""

    qid: str
    difficulty: str

    @property
    def has_known_difficulty(self) -> bool:
        return self.difficulty in DIFFICULTIES
