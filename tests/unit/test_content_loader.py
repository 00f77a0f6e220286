"""Unit tests for content loading and load-time validation."""

from types import MappingProxyType

import pytest

from sidebyside.contexts.content import (
    ContentModel,
    InvalidContentEntry,
    InvalidContentFile,
    build_content_model,
    load_content,
)
from sidebyside.contexts.content.loader import BUNDLED_CONTENT_PATH


def make_entry(title="Counter", **variant_overrides):
    variants = {
        "A": {"code": "\n  a = 1\n"},
        "B": {"code": "\n  b = 2\n", "notes": "\n  **note**\n"},
    }
    variants.update(variant_overrides)
    return {"title": title, "description": "\n  Hi\n", "variants": variants}


def make_document(*entries, **extra):
    doc = {"title": "Test page", "home_language": "python", "entries": list(entries)}
    doc.update(extra)
    return doc


class TestBuildContentModel:
    """Tests for build_content_model() with in-memory documents."""

    @pytest.mark.unit
    def test_default_frameworks(self):
        model = build_content_model(make_document(make_entry()))

        assert isinstance(model, ContentModel)
        assert model.framework_keys == ("A", "B")
        assert model.frameworks[0].language == "python"
        assert model.frameworks[1].language is None
        assert model.frameworks[1].auto_detect

    @pytest.mark.unit
    def test_explicit_frameworks(self):
        doc = make_document(
            {
                "title": "Counter",
                "description": "",
                "variants": {"vue": {"code": "x"}, "react": {"code": "y"}},
            },
            frameworks=[
                {"key": "react", "label": "React", "language": "jsx"},
                {"key": "vue", "label": "Vue", "language": "auto"},
            ],
        )
        model = build_content_model(doc)

        assert [fw.label for fw in model.frameworks] == ["React", "Vue"]
        assert model.frameworks[1].language is None
        # Variants follow framework order, not file order
        assert list(model.entries[0].variants) == ["react", "vue"]

    @pytest.mark.unit
    def test_entry_order_preserved(self):
        titles = ["Zeta", "Alpha", "Mu"]
        model = build_content_model(make_document(*[make_entry(t) for t in titles]))
        assert list(model.titles) == titles

    @pytest.mark.unit
    def test_variants_are_read_only(self):
        model = build_content_model(make_document(make_entry()))
        variants = model.entries[0].variants

        assert isinstance(variants, MappingProxyType)
        with pytest.raises(TypeError):
            variants["C"] = variants["A"]

    @pytest.mark.unit
    def test_optional_fields(self):
        model = build_content_model(make_document(make_entry()))
        entry = model.entries[0]

        assert entry.variants["A"].notes is None
        assert entry.variants["B"].notes == "\n  **note**\n"
        assert entry.variants["A"].language is None

    @pytest.mark.unit
    def test_missing_code_names_entry(self):
        doc = make_document(make_entry("Fine"), make_entry("Broken", B={"notes": "no code"}))

        with pytest.raises(InvalidContentEntry) as exc_info:
            build_content_model(doc)

        err = exc_info.value
        assert err.index == 1
        assert err.title == "Broken"
        assert err.field == "variants.B.code"
        assert "entry #1" in str(err)
        assert "'Broken'" in str(err)

    @pytest.mark.unit
    def test_non_string_code_rejected(self):
        with pytest.raises(InvalidContentEntry, match="code must be a string"):
            build_content_model(make_document(make_entry(A={"code": 12})))

    @pytest.mark.unit
    def test_wrong_variant_keys_rejected(self):
        entry = make_entry()
        entry["variants"]["C"] = {"code": "z"}

        with pytest.raises(InvalidContentEntry) as exc_info:
            build_content_model(make_document(entry))
        assert exc_info.value.field == "variants"

    @pytest.mark.unit
    def test_missing_variant_rejected(self):
        entry = make_entry()
        del entry["variants"]["B"]

        with pytest.raises(InvalidContentEntry):
            build_content_model(make_document(entry))

    @pytest.mark.unit
    def test_missing_title_rejected(self):
        entry = make_entry()
        del entry["title"]

        with pytest.raises(InvalidContentEntry) as exc_info:
            build_content_model(make_document(entry))
        assert exc_info.value.index == 0
        assert exc_info.value.field == "title"

    @pytest.mark.unit
    def test_duplicate_title_rejected(self):
        doc = make_document(make_entry("Same"), make_entry("Other"), make_entry("Same"))

        with pytest.raises(InvalidContentEntry, match="first used by entry #0") as exc_info:
            build_content_model(doc)
        assert exc_info.value.index == 2

    @pytest.mark.unit
    def test_non_mapping_entry_rejected(self):
        with pytest.raises(InvalidContentEntry):
            build_content_model(make_document("just a string"))

    @pytest.mark.unit
    def test_missing_entries_rejected(self):
        with pytest.raises(InvalidContentFile, match="'entries'"):
            build_content_model({"title": "No entries"})

    @pytest.mark.unit
    def test_framework_count_rejected(self):
        doc = make_document(make_entry(), frameworks=[{"key": "A"}])
        with pytest.raises(InvalidContentFile, match="exactly two"):
            build_content_model(doc)

    @pytest.mark.unit
    def test_duplicate_framework_keys_rejected(self):
        doc = make_document(make_entry(), frameworks=[{"key": "A"}, {"key": "A"}])
        with pytest.raises(InvalidContentFile, match="Duplicate framework key"):
            build_content_model(doc)


class TestLoadContent:
    """Tests for load_content() reading YAML files."""

    @pytest.mark.unit
    def test_bundled_content_loads(self):
        model = load_content(BUNDLED_CONTENT_PATH)

        assert len(model) > 0
        assert model.framework_keys == ("react", "vue")
        assert model.frameworks[0].language == "jsx"
        assert model.frameworks[1].auto_detect
        assert model.titles[0] == "Reactive state"

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "code",
        [
            "const s = `${name}`",
            "const msg = `Sum: ${a + b}`;",
            "const n = `${items.length * 2}`;",
            "const v = `${fn()}`;",
            "const c = `${a ? b : c}`;",
        ],
    )
    def test_yaml_file_keeps_template_literals(self, tmp_path, code):
        content_file = tmp_path / "content.yaml"
        content_file.write_text(
            "title: Tiny\n"
            "home_language: python\n"
            "entries:\n"
            "  - title: X\n"
            "    description: |2\n"
            "          Hi\n"
            "    variants:\n"
            "      A:\n"
            "        code: |2\n"
            "              a = 1\n"
            "      B:\n"
            "        code: |2\n"
            f"              {code}\n",
            encoding="utf-8",
        )

        model = load_content(content_file)

        assert model.title == "Tiny"
        assert model.titles == ("X",)
        assert model.entries[0].variants["B"].code.strip() == code

    @pytest.mark.unit
    def test_bundled_template_literal_survives(self):
        model = load_content(BUNDLED_CONTENT_PATH)
        entry = model.entries[model.titles.index("Watching state")]

        assert "`Theme: ${theme.toUpperCase()}`" in entry.variants["react"].code

    @pytest.mark.unit
    def test_unparseable_yaml(self, tmp_path):
        content_file = tmp_path / "content.yaml"
        content_file.write_text("entries: [unclosed\n", encoding="utf-8")

        with pytest.raises(InvalidContentFile, match="Could not parse"):
            load_content(content_file)

    @pytest.mark.unit
    def test_missing_file(self, tmp_path):
        with pytest.raises(InvalidContentFile, match="not found"):
            load_content(tmp_path / "nope.yaml")

    @pytest.mark.unit
    def test_invalid_entry_in_file(self, tmp_path):
        content_file = tmp_path / "content.yaml"
        content_file.write_text(
            "entries:\n"
            "  - title: Half done\n"
            "    variants:\n"
            "      A: {code: x}\n"
            "      B: {notes: y}\n",
            encoding="utf-8",
        )

        with pytest.raises(InvalidContentEntry, match="Half done"):
            load_content(content_file)
