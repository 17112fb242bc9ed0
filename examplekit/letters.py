"""Rendering LaTeX letters for a list of people."""

from __future__ import annotations

import datetime
import json
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any

import jinja2


@dataclass
class Person:
    title: str = ""
    first: str = ""
    middle: str = ""
    last: str = ""
    street: str = ""
    zip: str = ""
    location: str = ""
    country: str = ""
    phone: str = ""
    mobile: str = ""
    email: str = ""
    web: str = ""
    gender: str = ""
    birthday: str = ""


_SECTIONS = {
    "name": ("title", "first", "middle", "last"),
    "address": ("street", "zip", "location", "country"),
    "contact": ("phone", "mobile", "email", "web"),
}

_TEMPLATE = r"""
\documentclass[
    sender,
    paper=a4,
    version=last,
    fontsize=12pt,
    DIV=13,
    BCOR=0mm]{scrlttr2}
\parskip4mm
\parindent0mm
\usepackage[english,ngerman]{babel}
\usepackage[utf8]{inputenc}
\usepackage{csquotes}

\usepackage{lmodern}
\renewcommand*\familydefault{\sfdefault}
\usepackage[T1]{fontenc}

\usepackage{changepage}
\changepage{+3cm}{}{}{}{}{}{}{}{-5cm}
\LoadLetterOption{sender}

\begin{document}
<% for person in people %>
\newpage
\setkomavar*{enclseparator}{Appendix}
\setkomavar{subject}{Subject: This is an Example}
\setkomavar{date}{<< date >>}
\setkomavar{place}{<< place >>}

\begin{letter}{
    << person.title >> << person.first >> << person.middle | short_middle_name >> << person.last >> \\
    << person.street >>\\
    << person.zip >> << person.location >>
}
\opening{Dear Recipient}

\selectlanguage{english}
Lorem ipsum dolor sit amet, consetetur sadipscing elitr, sed diam nonumy eirmod tempor invidunt ut labore et dolore magna aliquyam erat, sed diam voluptua.

\closing{kind regards}
<% endfor %>
\end{letter}

\end{document}
"""


def short_middle_name(text: str) -> str:
    """Abbreviate a middle name to its first character and a dot."""
    return text[0] + "." if text else ""


def _lookup(mapping: Mapping[str, Any], key: str) -> Any:
    for name, value in mapping.items():
        if name.lower() == key:
            return value
    return None


def _person(entry: Any) -> Person:
    if not isinstance(entry, dict):
        raise ValueError(f"person entry must be an object, got {type(entry).__name__}")
    fields: dict[str, str] = {}
    sections = dict(_SECTIONS, **{"": ("gender", "birthday")})
    for section, names in sections.items():
        source = entry if not section else _lookup(entry, section)
        if source is None:
            continue
        if not isinstance(source, dict):
            raise ValueError(f"{section} must be an object")
        for name in names:
            value = _lookup(source, name)
            if value is None:
                continue
            if not isinstance(value, str):
                raise ValueError(f"{name} must be a string")
            fields[name] = value
    return Person(**fields)


def load_people(text: str) -> list[Person]:
    """Parse a JSON array of people; object keys match case-insensitively."""
    data = json.loads(text)
    if not isinstance(data, list):
        raise ValueError("expected a JSON array of people")
    return [_person(entry) for entry in data]


def render_letters(
    people: Iterable[Person],
    date: str | None = None,
    place: str = "Munich",
) -> str:
    """Render one LaTeX letter page per person; ``date`` defaults to today."""
    env = jinja2.Environment(
        block_start_string="<%",
        block_end_string="%>",
        variable_start_string="<<",
        variable_end_string=">>",
        comment_start_string="<#",
        comment_end_string="#>",
        keep_trailing_newline=True,
        undefined=jinja2.StrictUndefined,
        autoescape=False,
    )
    env.filters["short_middle_name"] = short_middle_name
    when = date if date is not None else datetime.date.today().strftime("%Y-%m-%d")
    return env.from_string(_TEMPLATE).render(people=list(people), date=when, place=place)