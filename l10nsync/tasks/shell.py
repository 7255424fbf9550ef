"""Invocation of external command-line tools (xcodebuild)."""

import logging
import shlex
import subprocess
from typing import Optional, Sequence

from ..config import config
from ..errors import ExternalToolFailed, ProcessLaunchFailed

logger = logging.getLogger(__name__)


class ToolRunner:
    """Runs a tool to completion and turns failures into L10nErrors."""

    def __init__(self, executable: Optional[str] = None):
        """
        Args:
            executable: Tool to launch. Uses L10N_XCODEBUILD from environment if not provided.
        """
        self.executable = executable or config.xcodebuild_path

    def command_line(self, arguments: Sequence[str]) -> list:
        return [self.executable, *arguments]

    def run(self, arguments: Sequence[str], description: str) -> None:
        """
        Run the tool with the given arguments and wait for it to exit.

        Args:
            arguments: Arguments passed after the executable
            description: Short name of the command used in error messages

        Raises:
            ProcessLaunchFailed: If the process could not be started
            ExternalToolFailed: If the process exited with a non-zero status
        """
        command = self.command_line(arguments)
        logger.debug("Running %s", shlex.join(command))
        try:
            result = subprocess.run(command, check=False)
        except OSError as e:
            raise ProcessLaunchFailed(description, e) from e

        if result.returncode != 0:
            raise ExternalToolFailed(description, result.returncode)
