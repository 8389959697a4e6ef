"""Curated alias data for skills and education fields.

Alias groups are maintained by hand: every name in a group denotes the same
competency. No string-distance heuristics are applied anywhere, so a match
can always be traced back to an entry in these tables.
"""

import json
import logging
import re
from collections.abc import Iterable, Mapping
from pathlib import Path

from models.schemas.candidate_profile import normalize_name

logger = logging.getLogger(__name__)

# canonical name -> alternative spellings
SKILL_ALIASES: dict[str, list[str]] = {
    # Frontend
    "React": ["ReactJS", "React.js", "React JS"],
    "React Native": ["ReactNative", "RN"],
    "Vue.js": ["Vue", "VueJS", "Vue JS"],
    "Angular": ["AngularJS", "Angular.js", "Angular 2+"],
    "Next.js": ["Next", "NextJS", "Next JS"],
    "Nuxt": ["Nuxt.js", "NuxtJS"],
    "Svelte": ["SvelteKit"],
    "HTML": ["HTML5"],
    "CSS": ["CSS3"],
    "Tailwind CSS": ["Tailwind", "TailwindCSS"],
    "Sass": ["SCSS"],
    # Languages
    "JavaScript": ["JS", "ECMAScript", "ES6", "ES2015"],
    "TypeScript": ["TS"],
    "Python": ["Python3", "Python 3"],
    "Go": ["Golang"],
    "C#": ["CSharp", "C Sharp"],
    "C++": ["CPP", "C Plus Plus"],
    "Objective-C": ["ObjC", "Objective C"],
    "Shell": ["Bash", "Shell Scripting"],
    # Backend
    "Node.js": ["Node", "NodeJS", "Node JS"],
    "Express.js": ["Express", "ExpressJS"],
    "Ruby on Rails": ["Rails", "RoR"],
    "Spring Boot": ["SpringBoot"],
    ".NET": ["dotnet", "dot net", ".NET Core"],
    "ASP.NET": ["ASP.NET Core", "ASPNET"],
    "REST": ["RESTful", "REST API", "RESTful APIs"],
    "GraphQL": ["GQL"],
    # Data stores
    "PostgreSQL": ["Postgres", "PSQL"],
    "MongoDB": ["Mongo"],
    "Microsoft SQL Server": ["SQL Server", "MSSQL", "MS SQL"],
    "Elasticsearch": ["Elastic Search"],
    "DynamoDB": ["Amazon DynamoDB", "Dynamo"],
    # Cloud and DevOps
    "Amazon Web Services": ["AWS"],
    "Google Cloud Platform": ["GCP", "Google Cloud"],
    "Microsoft Azure": ["Azure"],
    "Kubernetes": ["K8s", "Kube"],
    "CI/CD": ["CICD", "Continuous Integration", "Continuous Delivery"],
    "GitHub Actions": ["GH Actions"],
    "Terraform": ["HCL"],
    # Data and ML
    "Machine Learning": ["ML"],
    "Deep Learning": ["DL"],
    "Natural Language Processing": ["NLP"],
    "Computer Vision": ["CV"],
    "scikit-learn": ["sklearn", "scikit learn"],
    "PyTorch": ["Torch"],
    "TensorFlow": ["TF"],
    "Large Language Models": ["LLM", "LLMs"],
    "Power BI": ["PowerBI"],
    # Practices
    "Test-Driven Development": ["TDD"],
    "Behavior-Driven Development": ["BDD"],
    "Agile": ["Agile Methodology", "Agile Development"],
    "Object-Oriented Programming": ["OOP"],
}

FIELD_ALIASES: dict[str, list[str]] = {
    "Computer Science": ["CS", "Computing", "Informatics", "Computer Engineering", "Software Engineering"],
    "Information Technology": ["Information Systems"],
    "Electrical Engineering": ["EE", "Electronics Engineering", "Electrical and Electronic Engineering"],
    "Mathematics": ["Math", "Maths", "Applied Mathematics"],
    "Statistics": ["Statistical Science", "Biostatistics"],
    "Data Science": ["Data Analytics", "Analytics"],
    "Business Administration": ["Business", "MBA", "Management"],
    "Economics": ["Econ"],
    "Physics": ["Applied Physics"],
    "Mechanical Engineering": ["Mechanical"],
}

_PARENTHETICAL = re.compile(r"^([^(]+?)\s*\(([^)]*)\)$")


def base_skill_name(name: str) -> str:
    """Drop a trailing parenthetical detail: 'react (hooks)' -> 'react'."""
    match = _PARENTHETICAL.match(name.strip())
    if match:
        return normalize_name(match.group(1))
    return normalize_name(name)


def build_alias_index(groups: Mapping[str, Iterable[str]]) -> dict[str, frozenset[str]]:
    """Map every normalized name in every group to the group's full name set.

    A name listed in two groups belongs to their union, so lookups stay
    symmetric whichever spelling is used as the key.
    """
    index: dict[str, frozenset[str]] = {}
    for canonical, aliases in groups.items():
        members = {normalize_name(canonical)}
        members.update(normalize_name(a) for a in aliases if a.strip())
        for name in list(members):
            if name in index:
                members |= index[name]
        group = frozenset(members)
        for name in group:
            index[name] = group
    return index


def load_alias_file(path: str | Path) -> dict[str, list[str]]:
    """Read extra alias groups from a JSON object of ``{canonical: [aliases]}``."""
    path = Path(path)
    with path.open(encoding="utf-8") as fh:
        data = json.load(fh)
    if not isinstance(data, dict) or not all(
        isinstance(k, str) and isinstance(v, list) and all(isinstance(a, str) for a in v)
        for k, v in data.items()
    ):
        raise ValueError(f"{path}: expected a JSON object mapping names to lists of aliases")
    logger.info("Loaded %d alias groups from %s", len(data), path)
    return data


def merge_alias_groups(*sources: Mapping[str, Iterable[str]]) -> dict[str, list[str]]:
    """Combine alias tables; aliases for the same canonical name are concatenated."""
    merged: dict[str, list[str]] = {}
    for source in sources:
        for canonical, aliases in source.items():
            merged.setdefault(canonical, []).extend(aliases)
    return merged
