"""Run configuration for the defineOptions injector.

InjectConfig is the only input the injector needs: where the route file
is, where the views live, and which directories to leave alone.
"""

from dataclasses import dataclass
from pathlib import Path

DEFAULT_VIEWS_DIR = "./src/views"


@dataclass(frozen=True)
class InjectConfig:
    """Configuration for one injection run.

    Frozen dataclass; build one with `InjectConfig.from_paths()` to get
    paths resolved against a working directory, the way the CLI does.

    Attributes:
        route_file: Route definition file (e.g. src/router/modules/auth.ts)
        views_dir: Root directory that "@/views/" points to
        exclude_dirs: Directory names whose components are never touched
    """

    route_file: Path
    views_dir: Path
    exclude_dirs: tuple[str, ...] = ()

    @classmethod
    def from_paths(
        cls,
        route_file: str | Path,
        views_dir: str | Path = DEFAULT_VIEWS_DIR,
        exclude_dirs: list[str] | tuple[str, ...] | None = None,
        cwd: Path | None = None,
    ) -> "InjectConfig":
        """Resolve paths relative to `cwd` (default: the process working directory)."""
        base = cwd if cwd is not None else Path.cwd()
        return cls(
            route_file=(base / Path(route_file)).resolve(),
            views_dir=(base / Path(views_dir)).resolve(),
            exclude_dirs=tuple(exclude_dirs or ()),
        )
