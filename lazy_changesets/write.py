"""Writing changesets to ``.changeset/<id>.md``."""

from __future__ import annotations

import json
import random
from pathlib import Path

from .models import Changeset

CHANGESET_DIR = ".changeset"

_ADJECTIVES = (
    "brave", "calm", "clever", "cool", "cuddly", "dirty", "eager", "early",
    "fair", "fast", "fluffy", "funny", "gentle", "giant", "great", "happy",
    "heavy", "hungry", "late", "lazy", "little", "loud", "lucky", "mean",
    "modern", "nasty", "neat", "nice", "odd", "old", "polite", "proud",
    "quick", "quiet", "rare", "rich", "shaggy", "sharp", "shiny", "short",
    "silly", "slimy", "slow", "smart", "smooth", "soft", "sour", "spicy",
    "strong", "sweet", "tall", "tame", "thick", "tidy", "tiny", "tough",
    "warm", "weak", "wet", "wicked", "wide", "wild", "wise", "young",
)
_NOUNS = (
    "ants", "apes", "bags", "bananas", "bats", "beans", "bears", "bees",
    "birds", "boats", "books", "boxes", "cameras", "carrots", "cats", "chairs",
    "clocks", "cows", "crabs", "cups", "deer", "dogs", "doors", "dots",
    "dragons", "ducks", "eagles", "eels", "eggs", "falcons", "files", "fishes",
    "flowers", "foxes", "frogs", "geese", "ghosts", "goats", "grapes", "hats",
    "hornets", "horses", "islands", "jars", "kids", "kings", "kiwis", "lamps",
    "lemons", "lions", "mails", "mangos", "mice", "moles", "monkeys", "moons",
    "nails", "owls", "pandas", "pans", "pears", "pens", "pigs", "planets",
)
_VERBS = (
    "accept", "add", "admire", "allow", "appear", "argue", "arrive", "attack",
    "beam", "beg", "behave", "bake", "begin", "bow", "breathe", "brush",
    "burn", "buy", "call", "care", "carry", "change", "cheat", "check",
    "clap", "clean", "count", "cover", "cross", "cry", "dance", "decide",
    "draw", "dream", "drive", "drum", "eat", "enjoy", "explain", "fail",
    "fetch", "film", "fix", "float", "fly", "fold", "give", "glow",
    "greet", "grin", "grow", "guess", "hang", "heal", "help", "hide",
    "hope", "hug", "hunt", "invent", "itch", "jam", "joke", "judge",
)


def human_id(rng: random.Random | None = None) -> str:
    """Generate a readable id such as "lazy-cats-dance"."""
    rng = rng or random.Random()
    return "-".join(
        (rng.choice(_ADJECTIVES), rng.choice(_NOUNS), rng.choice(_VERBS))
    )


def changeset_path(root: Path, changeset_id: str) -> Path:
    """Absolute path of the record for ``changeset_id``."""
    return (root / CHANGESET_DIR / f"{changeset_id}.md").resolve()


def render_changeset(changeset: Changeset) -> str:
    """Render a changeset as markdown with a release frontmatter block."""
    releases = "".join(
        f"{json.dumps(r.name)}: {r.type.value}\n" for r in changeset.releases
    )
    return f"---\n{releases}---\n\n{changeset.summary.strip()}\n"


def write_changeset(changeset: Changeset, root: Path) -> str:
    """Persist a changeset under ``<root>/.changeset`` and return its id.

    A fresh id is drawn until it does not collide with an existing record.
    """
    changeset_dir = root / CHANGESET_DIR
    changeset_dir.mkdir(parents=True, exist_ok=True)

    changeset_id = human_id()
    while (changeset_dir / f"{changeset_id}.md").exists():
        changeset_id = human_id()

    (changeset_dir / f"{changeset_id}.md").write_text(render_changeset(changeset))
    return changeset_id
