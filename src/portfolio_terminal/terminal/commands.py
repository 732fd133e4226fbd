"""
Command registry for the portfolio terminal.

Commands are looked up by name and run without arguments; each returns a
pre-formatted text block. The built-ins that need session state (clear,
echo, history) live in the executor, not here.
"""

from dataclasses import dataclass
from datetime import datetime
from itertools import zip_longest
from typing import Callable, Dict, Iterable, Iterator, List, Optional, Union

from rich.text import Text

from portfolio_terminal.profile import Profile, SkillGroup
from portfolio_terminal.terminal.autocomplete import complete

Output = Union[str, Text]

BAR_WIDTH = 24
BOX_WIDTH = 43


@dataclass(frozen=True)
class CommandSpec:
    """Definition of a terminal command: name, description and action."""

    name: str
    description: str
    action: Callable[[], Output]


class CommandRegistry:
    """Case-insensitive mapping of command names to their specs."""

    def __init__(self, commands: Iterable[CommandSpec] = ()) -> None:
        self._commands: Dict[str, CommandSpec] = {}
        for spec in commands:
            self.register(spec)

    def register(self, spec: CommandSpec) -> None:
        key = spec.name.lower()
        if key in self._commands:
            raise ValueError(f"Command already registered: {key}")
        self._commands[key] = spec

    def lookup(self, name: str) -> Optional[CommandSpec]:
        return self._commands.get(name.lower())

    def names(self) -> List[str]:
        return list(self._commands)

    def complete(self, partial: str) -> List[str]:
        """Return command names starting with ``partial`` (case insensitive)."""
        return complete(partial, self._commands)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and name.lower() in self._commands

    def __iter__(self) -> Iterator[CommandSpec]:
        return iter(self._commands.values())

    def __len__(self) -> int:
        return len(self._commands)


HELP_TEXT = """Available commands:
  help          - Show this help message
  whoami        - Display information about me
  skills        - List my technical skills
  projects      - Show featured projects
  contact       - Get contact information
  social        - Display social links
  clear         - Clear the terminal
  date          - Show current date and time
  echo [text]   - Echo back text
  history       - Show command history
  neofetch      - System information (fun)
  matrix        - Enter the matrix

Tip: Use Tab for autocomplete, ↑↓ for history"""

MATRIX_TEXT = """Wake up, Neo...
The Matrix has you...
Follow the white rabbit.

Knock, knock, Neo.

█▀▀▀▀▀█ ▄▄▄▄▄ █▀▀▀▀▀█
█ ███ █ █▀▀▀█ █ ███ █
█ ▀▀▀ █ ▀▄▄▄▀ █ ▀▀▀ █
▀▀▀▀▀▀▀ ▀ ▀ ▀ ▀▀▀▀▀▀▀
▀▄▀▄▀ ▀▀▀▄▄▄▄▀▀▄▄ ▄▀▄
█▄▄█▄▀▀▄█▀██▄ ▀▄█▄▄ █
▀▀▀▀▀▀▀ █▄▄▄  ▄ ▀▄  █
█▀▀▀▀▀█ ▀▄▀██▀▀▀  ▄ █
█ ███ █ ▀█▀ ▄▄█▄█▄▀▄▀
█ ▀▀▀ █ █▀▀▀▄██ ▄▄█▄█
▀▀▀▀▀▀▀ ▀▀  ▀▀ ▀▀▀▀▀▀"""

NEOFETCH_ART = (
    "⠀⠀⠀⠀⠀⠀⣀⣤⣴⣶⣶⣶⣶⣦⣤⣀⠀⠀⠀⠀⠀⠀",
    "⠀⠀⠀⣠⣴⣿⣿⣿⣿⣿⣿⣿⣿⣿⣿⣿⣿⣦⣄⠀⠀⠀",
    "⠀⣠⣾⣿⣿⣿⣿⣿⣿⣿⣿⣿⣿⣿⣿⣿⣿⣿⣿⣷⣄⠀",
    "⣴⣿⣿⣿⣿⣿⡿⠛⠉⠉⠉⠛⢿⣿⣿⣿⣿⣿⣿⣿⣿⣦",
    "⣿⣿⣿⣿⣿⠏⠀⢀⣤⣤⡀⠀⠀⠹⣿⣿⣿⣿⣿⣿⣿⣿",
    "⣿⣿⣿⣿⡏⠀⠀⣿⣿⣿⣿⠀⠀⠀⢹⣿⣿⣿⣿⣿⣿⣿",
    "⣿⣿⣿⣿⣧⠀⠀⠻⠿⠿⠃⠀⠀⢀⣾⣿⣿⣿⣿⣿⣿⣿",
    "⠻⣿⣿⣿⣿⣷⣄⠀⠀⠀⠀⢀⣴⣿⣿⣿⣿⣿⣿⣿⡿⠟",
    "⠀⠙⢿⣿⣿⣿⣿⣿⣶⣶⣿⣿⣿⣿⣿⣿⣿⣿⡿⠋⠀⠀",
    "⠀⠀⠀⠙⠻⢿⣿⣿⣿⣿⣿⣿⣿⣿⣿⡿⠟⠋⠀⠀⠀⠀",
    "⠀⠀⠀⠀⠀⠀⠈⠉⠛⠛⠛⠛⠋⠉⠀⠀⠀⠀⠀⠀⠀⠀",
)


def format_locale_datetime(now: datetime) -> str:
    """Format like a browser's en-US toLocaleString: ``10/18/2026, 3:04:05 PM``."""
    hour = now.hour % 12 or 12
    return f"{now.month}/{now.day}/{now.year}, {hour}:{now:%M:%S} {now:%p}"


def skill_bar(level: int) -> str:
    filled = min(max(level, 0), 100) // 5
    return "█" * filled + "░" * (BAR_WIDTH - filled)


def _skill_box(group: SkillGroup) -> List[str]:
    header = f"┌─ {group.category} "
    lines = [header + "─" * max(BOX_WIDTH - len(header) - 1, 1) + "┐"]
    for skill in group.skills:
        lines.append(f"│ {skill.name:<10} {skill_bar(skill.level)}{skill.level:>3}% │")
    lines.append("└" + "─" * (BOX_WIDTH - 2) + "┘")
    return lines


def _contact_row(text: str, inner: int = 23) -> str:
    # Rows too long for the box are left open on the right
    return f"│{text:<{inner}}│" if len(text) <= inner else f"│{text}"


def render_whoami(profile: Profile) -> str:
    rule = "─" * (BOX_WIDTH - 2)
    return "\n".join(
        [
            f"╭{rule}╮",
            f"│           {profile.name}",
            f"│{rule}│",
            f"│  Role: {profile.role}",
            "│",
            f"│  {profile.bio}",
            "│",
            f"│  Location: {profile.location}",
            f"│  Status: {profile.status}",
            f"╰{rule}╯",
        ]
    )


def render_skills(profile: Profile) -> str:
    if not profile.skills:
        return "No skills listed yet."
    blocks = ["\n".join(_skill_box(group)) for group in profile.skills]
    return "\n\n".join(blocks)


def render_projects(profile: Profile) -> str:
    lines = ["Featured Projects:", "──────────────────", ""]
    if not profile.projects:
        lines.append("No projects listed yet.")
    for i, project in enumerate(profile.projects, start=1):
        lines.append(f"[{i}] {project.title}")
        if project.tech:
            lines.append(f"    Tech: {', '.join(project.tech)}")
        if project.summary:
            lines.append(f"    {project.summary}")
        lines.append("")
    lines.append("→ Visit #projects section for more details")
    return "\n".join(lines)


def render_contact(profile: Profile) -> str:
    lines = [
        "╭─ Contact Information ─╮",
        _contact_row(""),
        "│  📧 Email:            │",
        _contact_row(f"     {profile.email}"),
        _contact_row(""),
    ]
    if profile.open_to:
        lines.append("│  💼 Open to:          │")
        lines.extend(_contact_row(f"     • {item} ") for item in profile.open_to)
        lines.append(_contact_row(""))
    lines.extend(
        [
            "│  📍 Response time:    │",
            _contact_row(f"     {profile.response_time}"),
            _contact_row(""),
            "╰───────────────────────╯",
            "",
            "→ Or visit #contact section",
        ]
    )
    return "\n".join(lines)


def render_social(profile: Profile) -> str:
    lines = ["Social Links:", "─────────────", ""]
    if not profile.socials:
        lines.append("  No social links listed yet.")
    lines.extend(f"  {link.label:<10}→ {link.url}" for link in profile.socials)
    return "\n".join(lines)


def render_neofetch(profile: Profile) -> str:
    info = (
        f"{profile.name}@portfolio",
        "─" * 22,
        "OS: Portfolio v2.0",
        "Kernel: Python 3",
        "Shell: portfolio-terminal",
        "Theme: Cyan Dark",
        "UI: prompt_toolkit + Rich",
        f"Role: {profile.role}",
        "Uptime: Always improving",
        "",
        "█" * 20,
    )
    rows = zip_longest(NEOFETCH_ART, info, fillvalue="")
    return "\n".join(f"{art}     {text}".rstrip() for art, text in rows)


def build_default_registry(
    profile: Profile, clock: Callable[[], datetime] = datetime.now
) -> CommandRegistry:
    """Return the registry of built-in portfolio commands for ``profile``.

    ``clock`` is read by ``date`` each time it runs.
    """
    return CommandRegistry(
        [
            CommandSpec("help", "Show available commands", lambda: HELP_TEXT),
            CommandSpec(
                "whoami",
                "Display information about me",
                lambda: render_whoami(profile),
            ),
            CommandSpec(
                "skills", "List my technical skills", lambda: render_skills(profile)
            ),
            CommandSpec(
                "projects", "Show featured projects", lambda: render_projects(profile)
            ),
            CommandSpec(
                "contact", "Get contact information", lambda: render_contact(profile)
            ),
            CommandSpec(
                "social", "Display social links", lambda: render_social(profile)
            ),
            CommandSpec(
                "date",
                "Show current date and time",
                lambda: format_locale_datetime(clock()),
            ),
            CommandSpec(
                "neofetch",
                "System information (fun)",
                lambda: render_neofetch(profile),
            ),
            CommandSpec("matrix", "Enter the matrix", lambda: MATRIX_TEXT),
        ]
    )
