"""Shared types for colour-namer: ColourEntry, SimilarityCandidate, ColorInfo, Command, Report."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class ColourEntry:
    """One named colour from a reference dictionary."""

    name: str
    hex: str


@dataclass
class SimilarityCandidate:
    """A dictionary colour that scored under the similarity threshold."""

    hex: str
    score: float
    luminance: int  # HSL lightness percent, not WCAG luminance
    lum_diff: int  # target lightness minus candidate lightness; > 0 means darker

    def to_dict(self) -> dict[str, Any]:
        return {
            'hex': self.hex,
            'score': self.score,
            'luminance': self.luminance,
            'lumDiff': self.lum_diff,
        }


@dataclass
class ColorInfo:
    """A fully described colour, ready for rendering or sending to a host."""

    name: str
    color: str  # hex as given by the caller
    rgb: str  # 'rgb(r, g, b)'
    hsl: str  # 'hsl(h, s%, l%)'
    luminance: float  # WCAG relative luminance
    contrast_text: str  # '#000000' or '#FFFFFF'
    is_selected: bool = False
    type: str | None = None  # 'darker', 'selected' or 'lighter'

    def to_dict(self) -> dict[str, Any]:
        """Wire form with camelCase keys. `type` is omitted when unset."""
        obj: dict[str, Any] = {
            'name': self.name,
            'color': self.color,
            'rgb': self.rgb,
            'hsl': self.hsl,
            'luminance': self.luminance,
            'contrastText': self.contrast_text,
            'isSelected': self.is_selected,
        }
        if self.type is not None:
            obj['type'] = self.type
        return obj

    @classmethod
    def from_dict(cls, obj: dict[str, Any]) -> ColorInfo:
        return cls(
            name=obj['name'],
            color=obj['color'],
            rgb=obj['rgb'],
            hsl=obj['hsl'],
            luminance=obj['luminance'],
            contrast_text=obj['contrastText'],
            is_selected=obj.get('isSelected', False),
            type=obj.get('type'),
        )


class Command:
    """A self-registering CLI command.

    Usage in a command module:

        command = Command(name='name', help='Closest dictionary name')

        @command.run
        def run(colours, dictionary, report, args):
            ...
    """

    def __init__(self, name: str, help: str = ''):
        self.name = name
        self.help = help
        self._run_fn: Callable | None = None

    def run(self, fn: Callable) -> Callable:
        """Decorator to register the run function."""
        self._run_fn = fn
        return fn

    def execute(self, colours: list[str], dictionary: Any, report: Report, args: Any) -> None:
        """Execute the command's run function."""
        if self._run_fn is None:
            raise RuntimeError(f'Command {self.name} has no run function')
        self._run_fn(colours, dictionary, report, args)


@dataclass
class Report:
    """Accumulates results from commands for text/JSON output."""

    dictionary_source: str = ''
    dictionary_size: int = 0
    colours: dict[str, dict[str, Any]] = field(default_factory=dict)

    def add(self, colour: str, command_name: str, data: Any) -> None:
        """Add command results for a colour."""
        if colour not in self.colours:
            self.colours[colour] = {}
        self.colours[colour][command_name] = data
