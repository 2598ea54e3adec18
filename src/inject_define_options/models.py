"""Domain models shared by the route extractor and the component patcher.

- MatchedRoute: a (name, relative_path) pair pulled out of the route file
- PatchOutcome: what happened to one route's component file
- ScriptBlock: the first <script> region found in a component file
- PatchedSource: result of the pure text transformation
"""

from dataclasses import dataclass
from enum import Enum

from pydantic import BaseModel, ConfigDict, field_validator

VIEWS_PREFIX = "@/views/"
"""Import alias prefix that marks a component living under the views directory."""


class MatchedRoute(BaseModel):
    """A route whose component is lazily imported from the views directory.

    Attributes:
        name: Logical route name, injected as the component name
        relative_path: Import path with the views prefix stripped
            (e.g. "user/list.vue" for "@/views/user/list.vue")
    """

    model_config = ConfigDict(frozen=True)

    name: str
    relative_path: str

    @field_validator("name")
    @classmethod
    def _name_not_empty(cls, value: str) -> str:
        if not value:
            raise ValueError("route name must not be empty")
        return value

    @field_validator("relative_path")
    @classmethod
    def _relative_path_stripped(cls, value: str) -> str:
        if not value:
            raise ValueError("relative path must not be empty")
        if value.startswith(VIEWS_PREFIX):
            raise ValueError(f"relative path still carries the {VIEWS_PREFIX!r} prefix")
        return value


class PatchOutcome(str, Enum):
    """Per-route result of the component patcher."""

    PATCHED = "patched"  # existing <script> updated
    CREATED = "created"  # new <script setup> block prepended
    EXCLUDED = "excluded"
    MISSING = "missing"


@dataclass(frozen=True)
class ScriptBlock:
    """The first <script ...>...</script> region of a component file.

    `start` and `end` are character offsets of the whole block in the
    file text, so `text[start:end]` is the block including its tags.
    """

    attrs: str  # raw attribute text after "<script", e.g. ' setup lang="ts"'
    content: str
    start: int
    end: int


@dataclass(frozen=True)
class PatchedSource:
    """New component file text plus whether a script block was synthesized."""

    text: str
    created_script: bool
