"""Registry for CLI subcommands."""

from .filelist_command import FilelistCommand
from .paths_command import PathsCommand
from .profile_command import ProfileCommand
from .regulation_command import RegulationCommand

COMMANDS = (
    PathsCommand,
    RegulationCommand,
    ProfileCommand,
    FilelistCommand,
)

__all__ = ["COMMANDS", "PathsCommand", "RegulationCommand", "ProfileCommand", "FilelistCommand"]
