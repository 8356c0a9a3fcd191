"""Tests for FRESH <-> JSON Resume conversion."""

import copy

import pytest

from resume_forge.converters.schema_converter import convert, to_fresh, to_jrs
from resume_forge.errors import BuildError, ErrorKind
from resume_forge.models.resume import Dialect


class TestToJrs:
    def test_basics(self, fresh_data):
        jrs = to_jrs(fresh_data)
        basics = jrs["basics"]
        assert basics["name"] == "Jane Doe"
        assert basics["label"] == "Backend Engineer"
        assert basics["email"] == "jane@example.com"
        assert basics["url"] == "https://jane.dev"
        assert basics["location"] == {"city": "Portland", "countryCode": "US", "region": "OR"}
        assert basics["profiles"][0]["username"] == "janedoe"

    def test_work(self, fresh_data):
        work = to_jrs(fresh_data)["work"]
        assert work[0] == {
            "name": "Acme",
            "position": "Engineer",
            "startDate": "2016-01",
            "endDate": "2019-06",
            "highlights": ["Shipped billing"],
        }

    def test_skills_sets(self, fresh_data):
        assert to_jrs(fresh_data)["skills"] == [
            {"name": "Languages", "level": "expert", "keywords": ["Python", "Go"]}
        ]

    def test_skills_list_fallback(self):
        jrs = to_jrs({"name": "X", "skills": {"list": [{"name": "Python", "level": "expert"}]}})
        assert jrs["skills"] == [{"name": "Python", "level": "expert"}]

    def test_empty_sections_dropped(self):
        jrs = to_jrs({"name": "Solo"})
        assert jrs == {"basics": {"name": "Solo"}}

    def test_result_is_jrs(self, fresh_data):
        assert Dialect.detect(to_jrs(fresh_data)) is Dialect.JRS


class TestToFresh:
    def test_basics(self, jrs_data):
        fresh = to_fresh(jrs_data)
        assert fresh["name"] == "John Roe"
        assert fresh["info"] == {"label": "Designer", "brief": "Designs things."}
        assert fresh["contact"] == {"email": "john@example.com"}
        assert fresh["location"] == {"city": "Austin", "country": "US"}
        assert fresh["meta"]["format"].startswith("FRESH@")

    def test_employment_history(self, jrs_data):
        history = to_fresh(jrs_data)["employment"]["history"]
        assert history == [
            {"employer": "Initech", "position": "Designer", "start": "2018-02-01", "highlights": ["Rebrand"]}
        ]

    def test_skills(self, jrs_data):
        assert to_fresh(jrs_data)["skills"] == {"sets": [{"name": "Design", "skills": ["Figma", "Sketch"]}]}

    def test_result_is_fresh(self, jrs_data):
        assert Dialect.detect(to_fresh(jrs_data)) is Dialect.FRESH

    def test_projects_roles_joined(self):
        fresh = to_fresh({"basics": {"name": "P"}, "projects": [{"name": "App", "roles": ["Lead", "Dev"]}]})
        assert fresh["projects"] == [{"title": "App", "role": "Lead, Dev"}]


class TestConvert:
    def test_same_dialect_is_copy(self, fresh_data):
        result = convert(fresh_data, Dialect.FRESH)
        assert result == fresh_data
        assert result is not fresh_data

    def test_does_not_mutate_input(self, fresh_data):
        before = copy.deepcopy(fresh_data)
        convert(fresh_data, Dialect.JRS)
        assert fresh_data == before

    def test_fresh_jrs_fresh_keeps_core_fields(self, fresh_data):
        back = convert(convert(fresh_data, Dialect.JRS), Dialect.FRESH)
        assert back["name"] == fresh_data["name"]
        assert back["employment"]["history"][1]["employer"] == "Globex"
        assert back["education"]["history"][0]["institution"] == "State University"

    def test_malformed_input_raises_conversion_failure(self):
        with pytest.raises(BuildError) as exc_info:
            convert({"basics": {"name": "X"}, "work": ["not a mapping"]}, Dialect.FRESH)
        assert exc_info.value.kind is ErrorKind.CONVERSION_FAILURE
        assert exc_info.value.fatal is True
