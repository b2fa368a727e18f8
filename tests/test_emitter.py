"""Tests for assembling ordered declarations into output text."""

from __future__ import annotations

import pytest

from swagger_types.codegen.core.emitter import Emitter
from swagger_types.codegen.core.errors import MissingDefinitionError
from swagger_types.codegen.core.graph import DependencyGraph


def _pet_order_graph() -> DependencyGraph:
    graph = DependencyGraph()
    graph.add_node("Order")
    graph.add_node("Pet")
    graph.add_dependency("Order", "Pet")
    return graph


def test_header_first_then_blocks_in_dependency_order() -> None:
    rendered = {"Order": "export type Order = {}", "Pet": "export type Pet = {}"}

    blocks = Emitter("// @flow").emit(_pet_order_graph(), rendered)

    assert blocks == ["// @flow", "export type Pet = {}", "export type Order = {}"]


def test_render_separates_blocks_with_blank_lines() -> None:
    rendered = {"Order": "export type Order = {}", "Pet": "export type Pet = {}"}

    text = Emitter("// @flow").render(_pet_order_graph(), rendered)

    assert text == "// @flow\n\nexport type Pet = {}\n\nexport type Order = {}\n"


def test_empty_graph_emits_header_only() -> None:
    assert Emitter("// @flow").render(DependencyGraph(), {}) == "// @flow\n"


def test_node_without_rendered_text_fails() -> None:
    with pytest.raises(MissingDefinitionError) as excinfo:
        Emitter("// @flow").emit(_pet_order_graph(), {"Order": "export type Order = {}"})

    assert excinfo.value.type_name == "Pet"
