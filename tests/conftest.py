"""Shared test fixtures."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from resume_forge.models.theme import FormatDescriptor, FreshTheme, OutputFormat
from resume_forge.options import BuildOptions


@pytest.fixture
def fresh_data() -> dict:
    return {
        "name": "Jane Doe",
        "meta": {"format": "FRESH@1.0.0"},
        "info": {"label": "Backend Engineer", "brief": "Builds **reliable** services."},
        "contact": {"email": "jane@example.com", "phone": "555-0100", "website": "https://jane.dev"},
        "location": {"city": "Portland", "region": "OR", "country": "US"},
        "social": [{"network": "GitHub", "user": "janedoe", "url": "https://github.com/janedoe"}],
        "employment": {
            "history": [
                {
                    "employer": "Acme",
                    "position": "Engineer",
                    "start": "2016-01",
                    "end": "2019-06",
                    "highlights": ["Shipped billing"],
                },
                {
                    "employer": "Globex",
                    "position": "Senior Engineer",
                    "start": "2019-07",
                    "summary": "Leads the platform team.",
                },
            ]
        },
        "education": {
            "history": [
                {"institution": "State University", "area": "Computer Science", "studyType": "BS",
                 "start": "2011", "end": "2015"},
            ]
        },
        "skills": {"sets": [{"name": "Languages", "level": "expert", "skills": ["Python", "Go"]}]},
        "languages": [{"language": "English", "level": "native"}],
    }


@pytest.fixture
def jrs_data() -> dict:
    return {
        "basics": {
            "name": "John Roe",
            "label": "Designer",
            "email": "john@example.com",
            "summary": "Designs things.",
            "location": {"city": "Austin", "countryCode": "US"},
            "profiles": [{"network": "Dribbble", "username": "jroe", "url": "https://dribbble.com/jroe"}],
        },
        "work": [
            {"name": "Initech", "position": "Designer", "startDate": "2018-02-01", "highlights": ["Rebrand"]},
        ],
        "education": [{"institution": "Art School", "area": "Design", "startDate": "2010", "endDate": "2014"}],
        "skills": [{"name": "Design", "keywords": ["Figma", "Sketch"]}],
    }


@pytest.fixture
def write_json(tmp_path):
    """Write a dict as JSON under tmp_path and return the path."""

    def _write(name: str, data) -> Path:
        path = tmp_path / name
        path.write_text(json.dumps(data), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def fresh_source(write_json, fresh_data) -> Path:
    return write_json("fresh.json", fresh_data)


@pytest.fixture
def jrs_source(write_json, jrs_data) -> Path:
    return write_json("jrs.json", jrs_data)


@pytest.fixture
def fresh_theme_dir(tmp_path) -> Path:
    """A small FRESH theme declaring html, md and txt."""
    folder = tmp_path / "themes" / "plain"
    folder.mkdir(parents=True)
    (folder / "theme.json").write_text(
        json.dumps({
            "name": "plain",
            "css": "style.css",
            "formats": {
                "html": {"templates": ["resume.html"]},
                "md": {"templates": ["resume.md"]},
                "txt": {"templates": ["resume.txt"]},
            },
        }),
        encoding="utf-8",
    )
    (folder / "style.css").write_text("h1 { color: #123456; }", encoding="utf-8")
    (folder / "resume.html").write_text(
        "<html><head>{% if css %}<style>{{ css }}</style>{% elif css_href %}"
        '<link rel="stylesheet" href="{{ css_href }}">{% endif %}</head>'
        "<body><h1>{{ r.name }}</h1><h2>{{ titles.employment }}</h2>"
        "{% for job in r.employment.history %}<p>{{ job.employer }}</p>{% endfor %}</body></html>",
        encoding="utf-8",
    )
    (folder / "resume.md").write_text("# {{ r.name }}\n\n## {{ titles.skills }}\n", encoding="utf-8")
    (folder / "resume.txt").write_text("{{ r.info.brief | wrap }}\n", encoding="utf-8")
    return folder


@pytest.fixture
def jrs_theme_dir(tmp_path) -> Path:
    folder = tmp_path / "jsonresume-theme-plain"
    folder.mkdir()
    (folder / "resume.html").write_text(
        "<html><head>{% if css %}<style>{{ css }}</style>{% elif css_href %}"
        '<link rel="stylesheet" href="{{ css_href }}">{% endif %}</head>'
        "<body><h1>{{ resume.basics.name }}</h1>"
        "{% for job in resume.work %}<p>{{ job.name }}</p>{% endfor %}</body></html>",
        encoding="utf-8",
    )
    (folder / "style.css").write_text("body { margin: 0; }", encoding="utf-8")
    return folder


@pytest.fixture
def make_theme(tmp_path):
    """Build a FreshTheme declaring the given format names, without templates."""

    def _make(*names: str) -> FreshTheme:
        formats = {}
        for name in names:
            fmt = OutputFormat(name)
            formats[fmt] = FormatDescriptor(name=fmt, ext=fmt.value, title=fmt.value)
        return FreshTheme(name="test", folder=tmp_path, formats=formats)

    return _make


@pytest.fixture
def fpdf_options() -> BuildOptions:
    """Options that avoid WeasyPrint's system libraries."""
    return BuildOptions(pdf="fpdf")
