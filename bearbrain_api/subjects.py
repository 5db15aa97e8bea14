"""
Subject catalogue.

Defines the subjects the tutor supports together with the lexical data the
policy uses to decide whether a question fits a subject. The tables are built
once at import time and never mutated.
"""

import re
from enum import Enum
from typing import Optional


class Subject(Enum):
    """Subjects the tutor can be scoped to."""

    MATH = "math"
    BIOLOGY = "biology"
    PHYSICS = "physics"
    CHEMISTRY = "chemistry"

    @property
    def display_name(self) -> str:
        return _DISPLAY_NAMES[self]

    @property
    def icon(self) -> str:
        return _ICONS[self]

    @property
    def description(self) -> str:
        """One-line scope used in redirect messages."""
        return _DESCRIPTIONS[self]

    @property
    def keywords(self) -> frozenset[str]:
        return SUBJECT_KEYWORDS[self]

    @property
    def patterns(self) -> tuple[re.Pattern, ...]:
        return SUBJECT_PATTERNS[self]

    @classmethod
    def from_name(cls, name: Optional[str]) -> Optional["Subject"]:
        """
        Resolve a subject from its display name or id (case-insensitive).

        Returns None for anything that is not a known subject.
        """
        if not name:
            return None
        key = name.strip().lower()
        for subject in cls:
            if key in (subject.value, subject.display_name.lower()):
                return subject
        return None


_DISPLAY_NAMES = {
    Subject.MATH: "Math",
    Subject.BIOLOGY: "Biology",
    Subject.PHYSICS: "Physics",
    Subject.CHEMISTRY: "Chemistry",
}

_ICONS = {
    Subject.MATH: "📊",
    Subject.BIOLOGY: "🧬",
    Subject.PHYSICS: "⚛️",
    Subject.CHEMISTRY: "🧪",
}

_DESCRIPTIONS = {
    Subject.MATH: "for mathematics, algebra, calculus, statistics",
    Subject.BIOLOGY: "for cells, genetics, evolution, ecosystems",
    Subject.PHYSICS: "for mechanics, electricity, waves, energy",
    Subject.CHEMISTRY: "for reactions, molecules, elements, compounds",
}

SUBJECT_KEYWORDS: dict[Subject, frozenset[str]] = {
    Subject.MATH: frozenset({
        "algebra", "geometry", "calculus", "trigonometry", "statistics", "probability",
        "equation", "formula", "solve", "calculate", "derivative", "integral", "function",
        "variable", "graph", "theorem", "proof", "number", "fraction", "decimal",
        "polynomial", "logarithm", "matrix", "vector", "limit", "infinite", "sum",
        "product", "ratio", "percentage", "square root", "exponent", "factorial",
    }),
    Subject.BIOLOGY: frozenset({
        "biology", "cell", "dna", "rna", "protein", "enzyme", "genetics", "evolution",
        "organism", "ecosystem", "photosynthesis", "respiration", "metabolism",
        "anatomy", "physiology", "taxonomy", "species", "mutation", "chromosome",
        "mitosis", "meiosis", "bacteria", "virus", "plant", "animal", "fungi",
        "biodiversity", "adaptation", "natural selection", "heredity", "gene",
    }),
    Subject.PHYSICS: frozenset({
        "force", "energy", "motion", "velocity", "acceleration", "gravity", "friction",
        "momentum", "wave", "light", "sound", "electricity", "magnetism", "circuit",
        "voltage", "current", "resistance", "power", "work", "heat", "temperature",
        "pressure", "mass", "weight", "density", "volume", "time", "speed", "newton",
        "joule", "watt", "volt", "ohm", "quantum", "atom", "electron", "proton", "neutron",
    }),
    Subject.CHEMISTRY: frozenset({
        "element", "compound", "molecule", "atom", "ion", "bond", "reaction", "equation",
        "solution", "solvent", "solute", "concentration", "molarity", "ph", "acid",
        "base", "salt", "oxidation", "reduction", "catalyst", "enzyme", "organic",
        "inorganic", "carbon", "hydrogen", "oxygen", "nitrogen", "periodic table",
        "electron", "proton", "neutron", "isotope", "chemical", "formula",
    }),
}

# Patterns are matched against the raw question text
_PATTERN_SOURCES: dict[Subject, list[tuple[str, int]]] = {
    Subject.MATH: [
        (r"[+\-*/=<>^√∫∑π∞]", 0),  # Math symbols
        (r"\b(sin|cos|tan|log|ln)\b", re.IGNORECASE),
        (r"\b\d+\s*[+\-*/^%]\s*\d+", 0),  # Arithmetic like "12 * 4"
        (r"\b(x|y|n)\s*[+\-*/=]", re.IGNORECASE),  # Variables in equations
    ],
    Subject.BIOLOGY: [
        (r"\bbio\w*", re.IGNORECASE),  # biome, biochemistry, biosphere
        (r"\b(photo|chloro)\w+", re.IGNORECASE),
        (r"\b\w+cytes?\b", re.IGNORECASE),  # leukocyte, lymphocytes
        (r"\b(atp|mrna|trna)\b", re.IGNORECASE),
    ],
    Subject.PHYSICS: [
        (r"\b\d+(\.\d+)?\s*(m/s2?|km/h|n|j|w|kg|hz|v|a)\b", re.IGNORECASE),  # Quantities with units
        (r"\bf\s*=\s*m\s*\*?\s*a\b", re.IGNORECASE),
        (r"\be\s*=\s*m\s*c", re.IGNORECASE),
        (r"\b(kinetic|potential|thermo\w*)\b", re.IGNORECASE),
    ],
    Subject.CHEMISTRY: [
        (r"\b(?=\w*\d)(?:[A-Z][a-z]?\d*)+\b", 0),  # Formulas like H2O, CO2, C6H12O6
        (r"->|→|⇌", 0),  # Reaction arrows
        (r"\bmol(e|es|ar|arity)?\b", re.IGNORECASE),
        (r"\b(stoichiometr\w*|titrat\w*|electrolys\w*)\b", re.IGNORECASE),
    ],
}

SUBJECT_PATTERNS: dict[Subject, tuple[re.Pattern, ...]] = {
    subject: tuple(re.compile(source, flags) for source, flags in sources)
    for subject, sources in _PATTERN_SOURCES.items()
}
