"""Tests for multi-source merging."""

from pathlib import Path

import pytest

from resume_forge.errors import BuildError, ErrorKind
from resume_forge.models.resume import Dialect, SourceDocument
from resume_forge.pipeline.merger import deep_extend, is_mixed, merge_sources


def _source(name: str, data: dict) -> SourceDocument:
    return SourceDocument(path=Path(name), data=data, dialect=Dialect.detect(data))


class TestDeepExtend:
    def test_nested_dicts_merge(self):
        base = {"contact": {"email": "a@x.com", "phone": "1"}}
        override = {"contact": {"phone": "2"}}
        assert deep_extend(base, override) == {"contact": {"email": "a@x.com", "phone": "2"}}

    def test_lists_replace(self):
        assert deep_extend({"skills": [1, 2, 3]}, {"skills": [4]}) == {"skills": [4]}

    def test_inputs_untouched(self):
        base = {"a": {"b": 1}}
        override = {"a": {"c": 2}}
        deep_extend(base, override)
        assert base == {"a": {"b": 1}}
        assert override == {"a": {"c": 2}}


class TestMergeSources:
    def test_single_source_returned_as_is(self, fresh_data):
        source = _source("one.json", fresh_data)
        merged = merge_sources([source])
        assert merged.data == fresh_data
        assert merged.dialect is Dialect.FRESH
        assert merged.source == Path("one.json")

    def test_rightmost_source_wins(self):
        left = _source("a.json", {"name": "Left", "contact": {"email": "l@x.com", "phone": "1"}})
        right = _source("b.json", {"name": "Right", "contact": {"phone": "2"}})
        merged = merge_sources([left, right])
        assert merged.data == {"name": "Right", "contact": {"email": "l@x.com", "phone": "2"}}

    def test_three_way_merge(self):
        sources = [
            _source("a.json", {"name": "A", "info": {"label": "a"}}),
            _source("b.json", {"info": {"label": "b", "brief": "b"}}),
            _source("c.json", {"info": {"brief": "c"}}),
        ]
        merged = merge_sources(sources)
        assert merged.data == {"name": "A", "info": {"label": "b", "brief": "c"}}

    def test_sources_not_mutated(self):
        left = _source("a.json", {"info": {"label": "a"}})
        right = _source("b.json", {"info": {"brief": "b"}})
        merge_sources([left, right])
        assert left.data == {"info": {"label": "a"}}
        assert right.data == {"info": {"brief": "b"}}

    @pytest.mark.parametrize("jrs_first", [False, True])
    def test_mixed_dialects_rejected(self, fresh_data, jrs_data, jrs_first):
        sources = [_source("f.json", fresh_data), _source("j.json", jrs_data)]
        if jrs_first:
            sources.reverse()
        assert is_mixed(sources)
        with pytest.raises(BuildError) as exc_info:
            merge_sources(sources)
        assert exc_info.value.kind is ErrorKind.MIXED_DIALECT_MERGE
        assert "j.json (JRS)" in exc_info.value.attempted

    def test_same_dialect_not_mixed(self, jrs_data):
        assert not is_mixed([_source("a.json", jrs_data), _source("b.json", jrs_data)])

    def test_no_sources(self):
        with pytest.raises(BuildError) as exc_info:
            merge_sources([])
        assert exc_info.value.kind is ErrorKind.SOURCE_NOT_FOUND

    def test_mixed_dialect_later_in_list(self, fresh_data, jrs_data):
        sources = [_source("a.json", jrs_data), _source("b.json", jrs_data), _source("c.json", fresh_data)]
        with pytest.raises(BuildError) as exc_info:
            merge_sources(sources)
        assert exc_info.value.kind is ErrorKind.MIXED_DIALECT_MERGE

    def test_merge_is_associative(self):
        a = _source("a.json", {"name": "A", "info": {"label": "a", "brief": "a"}, "skills": ["x"]})
        b = _source("b.json", {"info": {"label": "b"}, "contact": {"email": "b@x.com"}})
        c = _source("c.json", {"info": {"brief": "c"}, "contact": {"phone": "3"}, "skills": ["y"]})

        inner = merge_sources([b, c])
        nested = merge_sources([a, SourceDocument(path=Path("bc.json"), data=inner.data, dialect=inner.dialect)])

        assert merge_sources([a, b, c]).data == nested.data
