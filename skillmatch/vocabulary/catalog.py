"""
Skill catalog and normalization.

`TECH_SKILLS` is the curated list of skill labels the recognizer looks
for.  It is a tuple so it cannot be mutated after import; every request
shares the same instance.  `normalize` is the one rule used to decide
whether two skill strings name the same skill.
"""

from __future__ import annotations

import logging
import re
from typing import FrozenSet, Iterable, NewType, Tuple

import yaml  # type: ignore

from ..errors import ConfigError

logger = logging.getLogger(__name__)

NormalizedSkill = NewType("NormalizedSkill", str)

_NOT_SKILL_CHAR = re.compile(r"[^a-z0-9+#.]")

TECH_SKILLS: Tuple[str, ...] = (
    # Programming languages
    "javascript", "python", "java", "c++", "c#", "ruby", "php", "swift", "kotlin", "go",
    "rust", "typescript", "scala", "perl", "r", "matlab", "dart", "lua", "haskell",
    # Frontend
    "react", "reactjs", "react.js", "angular", "angularjs", "vue", "vuejs", "vue.js",
    "svelte", "next.js", "nextjs", "nuxt", "gatsby", "html", "html5", "css", "css3",
    "sass", "scss", "less", "tailwind", "tailwindcss", "bootstrap", "material-ui",
    "jquery", "redux", "mobx", "webpack", "vite", "parcel", "babel",
    # Backend
    "node", "nodejs", "node.js", "express", "expressjs", "nestjs", "fastify", "koa",
    "django", "flask", "fastapi", "spring", "spring boot", "rails", "ruby on rails",
    "laravel", "symfony", "asp.net", ".net", "dotnet",
    # Databases
    "mongodb", "mongoose", "mysql", "postgresql", "postgres", "sqlite", "oracle",
    "sql server", "redis", "elasticsearch", "cassandra", "dynamodb", "firebase",
    "firestore", "supabase", "prisma", "sequelize", "typeorm",
    # Cloud and DevOps
    "aws", "amazon web services", "azure", "gcp", "google cloud", "heroku", "vercel",
    "netlify", "digitalocean", "docker", "kubernetes", "k8s", "jenkins", "ci/cd",
    "github actions", "gitlab ci", "terraform", "ansible", "nginx", "apache",
    # Mobile
    "react native", "flutter", "ionic", "xamarin", "android", "ios", "swift ui",
    # Tools
    "git", "github", "gitlab", "bitbucket", "jira", "confluence", "slack",
    "figma", "sketch", "photoshop", "illustrator", "xd",
    # Data and ML
    "machine learning", "ml", "deep learning", "ai", "artificial intelligence",
    "tensorflow", "pytorch", "keras", "scikit-learn", "pandas", "numpy",
    "data science", "data analysis", "big data", "hadoop", "spark", "tableau",
    "power bi",
    # Testing
    "jest", "mocha", "chai", "cypress", "selenium", "puppeteer", "playwright",
    "junit", "pytest", "testing", "unit testing", "e2e testing", "tdd",
    # Methodologies and concepts
    "agile", "scrum", "kanban", "rest", "restful", "graphql", "api", "microservices",
    "serverless", "oop", "functional programming", "design patterns", "solid",
    # Soft skills
    "leadership", "communication", "teamwork", "problem solving", "project management",
)


def normalize(value: str) -> NormalizedSkill:
    """Return the comparison form of a skill string.

    Lower-cases and trims the value, then drops every character outside
    ``a-z``, ``0-9``, ``+``, ``#`` and ``.``.  ``"Node.js"`` becomes
    ``"node.js"`` and ``"Spring Boot"`` becomes ``"springboot"``; the
    rule does not merge spellings that differ in kept characters, so
    ``"node.js"`` and ``"nodejs"`` remain distinct.
    """
    return NormalizedSkill(_NOT_SKILL_CHAR.sub("", value.lower().strip()))


def catalog() -> Tuple[str, ...]:
    """Return the built-in skill labels in their declared order."""
    return TECH_SKILLS


def catalog_as_normalized_set(skills: Iterable[str] | None = None) -> FrozenSet[NormalizedSkill]:
    """Normalize every catalog label into a set.

    Labels that normalize to the same value collapse into one entry.
    """
    source = TECH_SKILLS if skills is None else skills
    return frozenset(normalize(skill) for skill in source)


def load_catalog_file(path: str) -> Tuple[str, ...]:
    """Load an alternative catalog from a YAML file.

    The file holds either a plain list of labels or a mapping of
    category names to lists.  Labels are stripped and lower-cased and
    duplicates are dropped, keeping the first occurrence.

    Raises:
        FileNotFoundError: If the file does not exist.
        ConfigError: If the YAML cannot be parsed or is neither a list
            nor a mapping of lists.
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse catalog file {path}: {exc}") from exc
    if isinstance(data, dict) and all(isinstance(v, (list, type(None))) for v in data.values()):
        entries = [item for values in data.values() for item in (values or [])]
    elif isinstance(data, list):
        entries = data
    else:
        raise ConfigError(f"Catalog file {path} must contain a list or a mapping of lists")
    seen = set()
    labels = []
    for entry in entries:
        label = str(entry).strip().lower()
        if label and label not in seen:
            seen.add(label)
            labels.append(label)
    logger.info("Loaded %d catalog skills from %s", len(labels), path)
    return tuple(labels)
