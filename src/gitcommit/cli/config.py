"""Runtime configuration for the gitcommit CLI."""

from typing import List

from pydantic import BaseModel

from gitcommit import __version__
from gitcommit.cli.errors import MissingArgumentsError

# Normal operation takes exactly a date and a message.
REQUIRED_ARGUMENTS = 2

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")
DEFAULT_LOG_LEVEL = "INFO"
LOG_LEVEL_ENVVAR = "GITCOMMIT_LOG_LEVEL"


class Config(BaseModel):
    """Settings collected from the command line and environment."""

    version: str = __version__
    args: List[str] = []
    log_level: str = DEFAULT_LOG_LEVEL

    def validate_args(self) -> None:
        """Ensure exactly a date and a message were given."""
        if len(self.args) != REQUIRED_ARGUMENTS:
            raise MissingArgumentsError(REQUIRED_ARGUMENTS, len(self.args))

    @property
    def date(self) -> str:
        return self.args[0] if len(self.args) >= 1 else ""

    @property
    def message(self) -> str:
        return self.args[1] if len(self.args) >= REQUIRED_ARGUMENTS else ""
