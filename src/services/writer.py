"""Writes solution source files into difficulty folders."""

from pathlib import Path

from loguru import logger

from domain.languages import extension_for
from domain.models.question import DIFFICULTIES


class SolutionWriter:
    """Stores solutions as <root>/<difficulty>/<qid>.<ext>."""

    def __init__(self, root: Path):
        self.root = Path(root)

    def prepare(self) -> None:
        """Create the standard difficulty folders."""
        for difficulty in DIFFICULTIES:
            (self.root / difficulty).mkdir(parents=True, exist_ok=True)

    def path_for(self, language: str, qid: str, difficulty: str) -> Path:
        return self.root / difficulty / f"{qid}.{extension_for(language)}"

    def write(self, code: str, language: str, qid: str, difficulty: str) -> Path:
        """Write source code, replacing any previous file for the same problem."""
        path = self.path_for(language, qid, difficulty)
        path.parent.mkdir(parents=True, exist_ok=True)

        logger.info(f"Writing solution {qid} to {difficulty}/")
        path.write_text(code, encoding="utf-8")
        return path
