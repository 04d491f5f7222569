"""Tests for the emitter capability set."""
from __future__ import annotations

from src.schematic.document import Document
from src.schematic.helpers import TemplateHelpers
from src.schematic.pointers import HRef
from src.shared.models.schema import Link


def _link(document: Document, resource: str, title: str) -> Link:
    return next(
        link
        for link in document.lookup(f"#/definitions/{resource}").links
        if link.title == title
    )


class TestTemplateHelpers:
    def test_params_for_placeholder(self, document: Document):
        helpers = TemplateHelpers(document)
        assert helpers.params(_link(document, "app", "Delete")) == "appIdentity string"

    def test_params_for_listing(self, document: Document):
        helpers = TemplateHelpers(document)
        assert helpers.params(_link(document, "app", "List")) == "lr *ListRange"

    def test_params_with_body(self, document: Document):
        helpers = TemplateHelpers(document)
        params = helpers.params(_link(document, "app", "Update"))
        assert params == (
            "appIdentity string, o struct {\n"
            'Maintenance *bool `json:"maintenance,omitempty"`\n'
            "}"
        )

    def test_values(self, document: Document):
        helpers = TemplateHelpers(document)
        assert helpers.values(_link(document, "app", "Info")) == "App, error"
        assert helpers.values(_link(document, "app", "Delete")) == "error"

    def test_args(self):
        href = HRef("/results/{(%23%2Fdefinitions%2Fstruct%2Fdefinitions%2Fuuid)}")
        assert TemplateHelpers.args(href) == "structUUID"

    def test_go_type(self, document: Document):
        helpers = TemplateHelpers(document)
        rendered = helpers.go_type(document.lookup("#/definitions/config-var"))
        assert rendered == "map[string]*string"

    def test_link_and_target_type(self, document: Document):
        helpers = TemplateHelpers(document)
        create = _link(document, "app", "Create")
        assert 'Name *string `json:"name,omitempty"`' in helpers.link_type(create)
        assert 'Name string `json:"name"`' in helpers.target_type(create)

    def test_identifier_helpers(self, document: Document):
        helpers = TemplateHelpers(document)
        assert helpers.initial_cap("config-var") == "ConfigVar"
        assert helpers.initial_low("config-var") == "configVar"
        assert helpers.method_cap("GetItem") == "Getitem"
        assert helpers.json_tag("id", True) == '`json:"id"`'
        assert helpers.as_comment("hi") == "// hi\n"

    def test_as_funcs(self, document: Document):
        funcs = TemplateHelpers(document).as_funcs()
        assert set(funcs) == {
            "initialCap", "initialLow", "methodCap", "asComment", "jsonTag",
            "params", "args", "values", "goType", "linkType", "targetType",
        }
        assert funcs["initialCap"]("app") == "App"
        assert funcs["values"](_link(document, "app", "Delete")) == "error"


def test_args_fill_every_path_slot(generator_config):
    document = Document.from_dict(
        {"definitions": {"app": {"definitions": {"id": {"type": "string"}}}}},
        generator_config,
    )
    link = Link(
        href="/a/{(%23%2Fdefinitions%2Fapp%2Fdefinitions%2Fid)}"
        "/b/{(%23%2Fdefinitions%2Fapp%2Fdefinitions%2Fid)}"
    )
    helpers = TemplateHelpers(document)
    assert helpers.args(link.href) == "appID, appID"
    assert helpers.params(link) == "appID string"
    assert link.href.path_format.count("%v") == 2
