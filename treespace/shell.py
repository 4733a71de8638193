"""Line-oriented command dispatcher over a NamespaceContext."""

from __future__ import annotations

import logging
import shlex
from collections.abc import Callable

from rich.console import Console
from rich.markup import escape

from treespace.namespace import DirectoryCreator, NamespaceContext, PathResolver
from treespace.render import build_tree

logger = logging.getLogger(__name__)

HELP_TEXT = """\
mkdir <path>   create a directory
cd [<path>]    change the current directory (default: /)
pwd            print the current directory
tree           show the whole namespace
split <path>   show how a path splits and where it resolves
quit | exit    leave the shell"""


class Shell:
    """Executes one command line at a time against *ctx*."""

    def __init__(self, ctx: NamespaceContext, console: Console | None = None) -> None:
        self.ctx = ctx
        self.console = console or Console()
        self.resolver = PathResolver(ctx)
        self.creator = DirectoryCreator(ctx, self.resolver)
        self._commands: dict[str, Callable[[list[str]], None]] = {
            "mkdir": self._mkdir,
            "cd": self._cd,
            "pwd": self._pwd,
            "tree": self._tree,
            "split": self._split,
            "help": self._help,
        }

    @property
    def prompt(self) -> str:
        return f"{self.ctx.path_of(self.ctx.current)}$ "

    def execute(self, line: str) -> bool:
        """Run *line*. Returns False when the shell should stop."""
        try:
            argv = shlex.split(line)
        except ValueError as e:
            self._error(f"ERROR: {e}")
            return True
        if not argv:
            return True

        name, args = argv[0], argv[1:]
        if name in ("quit", "exit"):
            return False
        handler = self._commands.get(name)
        if handler is None:
            self._error(f"ERROR: unknown command {name}")
            return True
        logger.debug("dispatch %s %s", name, args)
        handler(args)
        return True

    def run(self) -> None:
        """Read commands until EOF or quit."""
        while True:
            try:
                line = self.console.input(escape(self.prompt))
            except EOFError:
                break
            if not self.execute(line):
                break

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def _mkdir(self, args: list[str]) -> None:
        result = self.creator.create(args[0] if args else None)
        if result.ok:
            self.console.print(escape(result.message), style="green")
        else:
            self._error(result.message)

    def _cd(self, args: list[str]) -> None:
        path = args[0] if args else None
        resolution = self.resolver.resolve(path)
        if resolution.error is not None:
            self._error(resolution.error.message)
            return
        target = self.resolver.lookup(path)
        if target is None:
            self._error(f"CD ERROR: {path} is not a directory")
            return
        self.ctx.chdir(target)

    def _pwd(self, args: list[str]) -> None:
        self.console.print(escape(self.ctx.path_of(self.ctx.current)))

    def _tree(self, args: list[str]) -> None:
        self.console.print(build_tree(self.ctx))

    def _split(self, args: list[str]) -> None:
        resolution = self.resolver.resolve(args[0] if args else None)
        if resolution.error is not None:
            self._error(resolution.error.message)
            return
        parent_path = self.ctx.path_of(resolution.parent)
        self.console.print(
            escape(
                f"dirname={resolution.dir_name!r} basename={resolution.base_name!r} "
                f"parent={parent_path}"
            )
        )

    def _help(self, args: list[str]) -> None:
        self.console.print(escape(HELP_TEXT))

    def _error(self, message: str) -> None:
        self.console.print(escape(message), style="red")
