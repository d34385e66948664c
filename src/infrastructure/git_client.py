"""Git adapter that shells out to the git binary."""

import asyncio
from pathlib import Path

from loguru import logger

from infrastructure.errors import GitCommandError
from infrastructure.interfaces import GitProtocol


class GitCLI(GitProtocol):
    """Runs git commands inside a working directory."""

    def __init__(self, work_dir: Path, executable: str = "git"):
        """
        Initialize adapter.

        Args:
            work_dir: Directory every command runs in
            executable: git binary name or path
        """
        self.work_dir = Path(work_dir)
        self.executable = executable

    async def _run(self, *args: str) -> str:
        """Run a git command and return its stdout, raising on non-zero exit."""
        logger.debug(f"Running git {' '.join(args)} in {self.work_dir}")

        process = await asyncio.create_subprocess_exec(
            self.executable,
            *args,
            cwd=self.work_dir,
            stdout=asyncio.subprocess.PIPE,
            stderr=asyncio.subprocess.PIPE,
        )
        stdout, stderr = await process.communicate()
        output = stdout.decode(errors="replace")

        if process.returncode != 0:
            raise GitCommandError(args, process.returncode, stderr.decode(errors="replace"))

        if output.strip():
            logger.debug(output.rstrip())
        return output

    async def _succeeds(self, *args: str) -> bool:
        try:
            await self._run(*args)
        except GitCommandError:
            return False
        return True

    async def ensure_repository(self, branch: str) -> None:
        self.work_dir.mkdir(parents=True, exist_ok=True)

        if not await self._succeeds("rev-parse", "--is-inside-work-tree"):
            logger.info(f"Initializing git repository in {self.work_dir}")
            await self._run("init")

        await self._run("branch", "-M", branch)

    async def configure_remote(self, name: str, url: str) -> None:
        if await self._succeeds("remote", "get-url", name):
            await self._run("remote", "set-url", name, url)
        else:
            await self._run("remote", "add", name, url)

    async def fetch_and_reset(self, remote: str, branch: str) -> None:
        await self._run("fetch", remote)
        await self._run("reset", "--soft", f"{remote}/{branch}")

    async def status(self) -> list[str]:
        output = await self._run("status", "--porcelain")
        return [line for line in output.split("\n") if line.strip()]

    async def commit_and_push(self, message: str, remote: str) -> None:
        await self._run("add", ".")
        await self._run("commit", "-m", message)
        await self._run("push", "-u", remote, "HEAD")
