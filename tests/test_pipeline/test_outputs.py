"""Tests for destination validation, freebie formats and target expansion."""

from pathlib import Path

from resume_forge.models.theme import OutputFormat
from resume_forge.pipeline.outputs import (
    add_freebie_formats,
    expand_targets,
    requested_format,
    verify_outputs,
)


class TestRequestedFormat:
    def test_extension(self):
        assert requested_format("out/resume.PDF") == "pdf"

    def test_no_extension_means_all(self):
        assert requested_format("out/resume") == "all"
        assert requested_format("out/resume.all") == "all"

    def test_trailing_dot_is_empty_extension(self):
        assert requested_format("out/resume.") == ""

    def test_dotfile_wildcard(self):
        assert requested_format("out/.all") == "all"


class TestVerifyOutputs:
    def test_all_valid(self, make_theme):
        theme = make_theme("html", "pdf")
        assert verify_outputs(["a.html", "b.pdf", "c.all", "d"], theme) == []

    def test_unknown_extension_reported(self, make_theme):
        theme = make_theme("html")
        invalid = verify_outputs(["a.html", "b.xyz"], theme)
        assert len(invalid) == 1
        assert invalid[0].file == "b.xyz"
        assert invalid[0].format == "xyz"

    def test_alias_extension_accepted(self, make_theme):
        theme = make_theme("docx", "yml")
        assert verify_outputs(["a.doc", "b.yaml"], theme) == []

    def test_trailing_dot_rejected(self, make_theme):
        invalid = verify_outputs(["out/resume."], make_theme("html"))
        assert [(i.file, i.format) for i in invalid] == [("out/resume.", "")]

    def test_runs_before_freebies(self, make_theme):
        theme = make_theme("html")
        assert [i.format for i in verify_outputs(["a.json"], theme)] == ["json"]


class TestFreebies:
    def test_json_yml_png_added(self, make_theme):
        theme = add_freebie_formats(make_theme("html", "pdf"))
        assert list(theme.formats) == [
            OutputFormat.HTML,
            OutputFormat.PDF,
            OutputFormat.JSON,
            OutputFormat.YML,
            OutputFormat.PNG,
        ]
        assert theme.formats[OutputFormat.PNG].ext == "png"
        assert theme.formats[OutputFormat.JSON].freebie

    def test_no_png_without_html(self, make_theme):
        theme = add_freebie_formats(make_theme("md"))
        assert OutputFormat.PNG not in theme.formats
        assert OutputFormat.YML in theme.formats

    def test_declared_json_left_alone(self, make_theme):
        theme = make_theme("json")
        declared = theme.formats[OutputFormat.JSON]
        add_freebie_formats(theme)
        assert theme.formats[OutputFormat.JSON] is declared

    def test_idempotent(self, make_theme):
        theme = add_freebie_formats(make_theme("html"))
        before = dict(theme.formats)
        add_freebie_formats(theme)
        assert theme.formats == before


class TestExpandTargets:
    def test_all_expands_per_format(self, make_theme, tmp_path):
        theme = add_freebie_formats(make_theme("html", "pdf", "json"))
        targets = expand_targets([str(tmp_path / "out" / "resume.all")], theme)
        assert [t.file.name for t in targets] == [
            "resume.html",
            "resume.pdf",
            "resume.json",
            "resume.yml",
            "resume.png",
        ]
        assert all(t.file.parent == (tmp_path / "out").resolve() for t in targets)

    def test_single_extension(self, make_theme, tmp_path):
        theme = make_theme("html", "pdf")
        targets = expand_targets([str(tmp_path / "cv.pdf")], theme)
        assert len(targets) == 1
        assert targets[0].fmt.name is OutputFormat.PDF

    def test_no_extension_expands(self, make_theme, tmp_path):
        theme = make_theme("md", "txt")
        targets = expand_targets([str(tmp_path / "cv")], theme)
        assert [t.file.suffix for t in targets] == [".md", ".txt"]

    def test_default_destination_relative_to_cwd(self, make_theme, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        theme = make_theme("html")
        targets = expand_targets(None, theme)
        assert targets[0].file == (Path.cwd() / "out" / "resume.html").resolve()

    def test_unknown_extension_has_no_format(self, make_theme, tmp_path):
        theme = make_theme("html")
        targets = expand_targets([str(tmp_path / "cv.xyz")], theme)
        assert targets[0].fmt is None
        assert targets[0].format_name == "xyz"

    def test_dotted_stem_keeps_stem(self, make_theme, tmp_path):
        theme = make_theme("html", "pdf")
        targets = expand_targets([str(tmp_path / "jane.doe.all")], theme)
        assert [t.file.name for t in targets] == ["jane.doe.html", "jane.doe.pdf"]

    def test_dotfile_uses_default_stem(self, make_theme, tmp_path):
        theme = make_theme("html", "md")
        targets = expand_targets([str(tmp_path / "out" / ".all")], theme)
        assert [t.file.name for t in targets] == ["resume.html", "resume.md"]
