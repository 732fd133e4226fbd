"""
Author profile shown by the terminal commands.

The profile is plain data: the commands in ``terminal.commands`` format it
into text blocks. ``load_profile`` reads an optional JSON file whose keys
override any subset of the defaults below.
"""

import json
import logging
from dataclasses import dataclass, field, fields, replace
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

from portfolio_terminal.runtime_config import get_config_dir

logger = logging.getLogger(__name__)


class ProfileError(Exception):
    """Raised when a profile file cannot be read or has the wrong shape."""


@dataclass(frozen=True)
class SocialLink:
    label: str
    url: str


@dataclass(frozen=True)
class Skill:
    name: str
    level: int


@dataclass(frozen=True)
class SkillGroup:
    category: str
    skills: Tuple[Skill, ...]


@dataclass(frozen=True)
class ProjectSummary:
    title: str
    tech: Tuple[str, ...]
    summary: str


DEFAULT_SOCIALS: Tuple[SocialLink, ...] = (
    SocialLink("GitHub", "github.com/username"),
    SocialLink("LinkedIn", "linkedin.com/in/username"),
    SocialLink("Twitter", "twitter.com/username"),
)

DEFAULT_SKILLS: Tuple[SkillGroup, ...] = (
    SkillGroup(
        "Frontend",
        (
            Skill("React", 95),
            Skill("Next.js", 90),
            Skill("TypeScript", 90),
            Skill("Tailwind", 95),
        ),
    ),
    SkillGroup(
        "Backend",
        (
            Skill("Node.js", 85),
            Skill("PostgreSQL", 80),
            Skill("Prisma", 85),
            Skill("REST APIs", 90),
        ),
    ),
    SkillGroup(
        "Tools",
        (
            Skill("Git", 90),
            Skill("Docker", 75),
            Skill("AWS", 70),
        ),
    ),
)

DEFAULT_PROJECTS: Tuple[ProjectSummary, ...] = (
    ProjectSummary(
        "Portfolio Website",
        ("Next.js", "TypeScript", "Tailwind", "Prisma"),
        "A modern animated portfolio with GSAP & Framer Motion",
    ),
    ProjectSummary(
        "E-Commerce Platform",
        ("React", "Node.js", "PostgreSQL"),
        "Full-stack e-commerce solution",
    ),
    ProjectSummary(
        "Task Management App",
        ("Next.js", "Prisma", "tRPC"),
        "Real-time collaborative task manager",
    ),
)


@dataclass(frozen=True)
class Profile:
    """
    Author information consumed by the terminal commands.

    Attributes:
        name: Display name, also used in the welcome message and neofetch.
        role: Job title shown by whoami.
        bio: One or two sentences shown by whoami.
        email: Contact address shown by contact.
        location: Free-form location line.
        status: Availability line.
        open_to: Kinds of work listed by contact.
        response_time: Expected reply time listed by contact.
        socials: Links listed by social.
        skills: Skill boxes rendered by skills.
        projects: Entries listed by projects.
    """

    name: str = "Alex Carter"
    role: str = "Full-Stack Developer"
    bio: str = "I build fast, animated web experiences."
    email: str = "hello@example.com"
    location: str = "Based remotely"
    status: str = "Available for work ✓"
    open_to: Tuple[str, ...] = ("Full-time roles", "Contract work", "Collaborations")
    response_time: str = "Usually < 24hrs"
    socials: Tuple[SocialLink, ...] = field(default=DEFAULT_SOCIALS)
    skills: Tuple[SkillGroup, ...] = field(default=DEFAULT_SKILLS)
    projects: Tuple[ProjectSummary, ...] = field(default=DEFAULT_PROJECTS)


_STRING_FIELDS = ("name", "role", "bio", "email", "location", "status", "response_time")


def _expect(value: Any, kind: type, where: str) -> Any:
    if not isinstance(value, kind) or (kind is int and isinstance(value, bool)):
        raise ProfileError(f"{where}: expected {kind.__name__}, got {type(value).__name__}")
    return value


def _parse_socials(raw: Any) -> Tuple[SocialLink, ...]:
    links: List[SocialLink] = []
    for i, item in enumerate(_expect(raw, list, "socials")):
        item = _expect(item, dict, f"socials[{i}]")
        links.append(
            SocialLink(
                label=_expect(item.get("label"), str, f"socials[{i}].label"),
                url=_expect(item.get("url"), str, f"socials[{i}].url"),
            )
        )
    return tuple(links)


def _parse_skills(raw: Any) -> Tuple[SkillGroup, ...]:
    groups: List[SkillGroup] = []
    for category, skills in _expect(raw, dict, "skills").items():
        parsed: List[Skill] = []
        for name, level in _expect(skills, dict, f"skills.{category}").items():
            level = _expect(level, int, f"skills.{category}.{name}")
            if not 0 <= level <= 100:
                raise ProfileError(
                    f"skills.{category}.{name}: level must be between 0 and 100"
                )
            parsed.append(Skill(name, level))
        groups.append(SkillGroup(category, tuple(parsed)))
    return tuple(groups)


def _parse_projects(raw: Any) -> Tuple[ProjectSummary, ...]:
    projects: List[ProjectSummary] = []
    for i, item in enumerate(_expect(raw, list, "projects")):
        item = _expect(item, dict, f"projects[{i}]")
        tech = _expect(item.get("tech", []), list, f"projects[{i}].tech")
        projects.append(
            ProjectSummary(
                title=_expect(item.get("title"), str, f"projects[{i}].title"),
                tech=tuple(_expect(t, str, f"projects[{i}].tech") for t in tech),
                summary=_expect(item.get("summary", ""), str, f"projects[{i}].summary"),
            )
        )
    return tuple(projects)


def profile_from_dict(data: Dict[str, Any], base: Optional[Profile] = None) -> Profile:
    """Return ``base`` (or the default profile) with the keys of ``data`` applied."""
    known = {f.name for f in fields(Profile)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise ProfileError(f"Unknown profile field(s): {', '.join(unknown)}")

    overrides: Dict[str, Any] = {}
    for key in _STRING_FIELDS:
        if key in data:
            overrides[key] = _expect(data[key], str, key)
    if "open_to" in data:
        overrides["open_to"] = tuple(
            _expect(v, str, "open_to") for v in _expect(data["open_to"], list, "open_to")
        )
    if "socials" in data:
        overrides["socials"] = _parse_socials(data["socials"])
    if "skills" in data:
        overrides["skills"] = _parse_skills(data["skills"])
    if "projects" in data:
        overrides["projects"] = _parse_projects(data["projects"])

    return replace(base or Profile(), **overrides)


def default_profile_path() -> Path:
    """Profile picked up when no ``--profile`` is given."""
    return get_config_dir() / "profile.json"


def load_profile(path: Optional[Path] = None) -> Profile:
    """
    Load the author profile.

    Args:
        path: JSON file to read. ``None`` reads ``default_profile_path()``
            if that file exists, otherwise returns the built-in defaults.

    Raises:
        ProfileError: if the file is unreadable, is not valid JSON, or has
            fields of the wrong type.
    """
    if path is None:
        path = default_profile_path()
        if not path.is_file():
            return Profile()

    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ProfileError(f"Cannot read profile {path}: {e}") from e

    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise ProfileError(f"Invalid JSON in profile {path}: {e}") from e

    if not isinstance(data, dict):
        raise ProfileError(f"Profile {path} must contain a JSON object")

    profile = profile_from_dict(data)
    logger.info("Loaded profile for %s from %s", profile.name, path)
    return profile
