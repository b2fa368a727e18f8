"""Tests for the command line entry point."""

from __future__ import annotations

import pytest

from swagger_types.cli import create_parser, main


def test_prints_generated_types(write_json, pet_order_document, capsys) -> None:
    path = write_json(pet_order_document)

    exit_code = main(["-p", str(path)])

    out = capsys.readouterr().out
    assert exit_code == 0
    assert out == (
        "// @flow\n\nexport type Pet = {\n\tname: string\n}\n\n"
        "export type Order = {\n\tpet: Pet\n}\n"
    )


def test_naming_flags(write_json, capsys) -> None:
    path = write_json(
        {"definitions": {"pet_item": {"type": "object", "properties": {"ID": {"type": "integer"}}}}}
    )

    assert main(["-p", str(path), "-t", "firstCaseLower", "-c"]) == 0

    assert "export type PetItem = {\n\tid: number\n}" in capsys.readouterr().out


def test_node_style_flag_spellings(write_json, capsys) -> None:
    path = write_json(
        {"definitions": {"pet_item": {"type": "object", "properties": {"ID": {"type": "integer"}}}}}
    )

    assert main(["--path", str(path), "--transformProperty", "firstCaseLower", "--changeTypeCase"]) == 0

    assert "export type PetItem = {\n\tid: number\n}" in capsys.readouterr().out


def test_writes_output_file(write_json, pet_order_document, tmp_path, capsys) -> None:
    path = write_json(pet_order_document)
    output = tmp_path / "types.d.ts"

    exit_code = main(["-p", str(path), "-l", "ts", "-o", str(output), "--array-style", "shorthand"])

    assert exit_code == 0
    assert output.read_text(encoding="utf-8").startswith(
        "// Generated by swagger-types. Do not edit.\n\nexport type Pet = {\n  name: string;\n};"
    )
    assert capsys.readouterr().out == ""


def test_generation_failure_exits_non_zero(write_json, capsys) -> None:
    path = write_json({"definitions": {"Status": {"type": "string"}}})

    exit_code = main(["-p", str(path)])

    captured = capsys.readouterr()
    assert exit_code == 1
    assert captured.out == ""
    assert "Status" in captured.err


def test_missing_input_file_exits_non_zero(tmp_path, capsys) -> None:
    exit_code = main(["-p", str(tmp_path / "missing.json")])

    assert exit_code == 1
    assert "not found" in capsys.readouterr().err


def test_unknown_language_exits_non_zero(write_json, pet_order_document) -> None:
    path = write_json(pet_order_document)

    assert main(["-p", str(path), "-l", "go"]) == 1


def test_path_is_required() -> None:
    with pytest.raises(SystemExit) as excinfo:
        main([])

    assert excinfo.value.code == 2


def test_invalid_transform_choice_is_rejected() -> None:
    with pytest.raises(SystemExit):
        create_parser().parse_args(["-p", "x.json", "-t", "upper"])


def test_list_languages(capsys) -> None:
    assert main(["--list-languages"]) == 0

    err = capsys.readouterr().err
    assert "flow" in err
    assert "typescript" in err


def test_undecodable_input_exits_non_zero(tmp_path, capsys) -> None:
    path = tmp_path / "swagger.json"
    path.write_bytes(b'{"definitions": {"A\xff": {}}}')

    assert main(["-p", str(path)]) == 1
    assert "UTF-8" in capsys.readouterr().err


def test_array_style_is_rejected_for_flow(write_json, pet_order_document, capsys) -> None:
    path = write_json(pet_order_document)

    exit_code = main(["-p", str(path), "--array-style", "shorthand"])

    captured = capsys.readouterr()
    assert exit_code == 1
    assert captured.out == ""
    assert "--array-style" in captured.err


def test_invalid_config_file_exits_non_zero(write_json, pet_order_document, capsys) -> None:
    path = write_json(pet_order_document)
    config = write_json({"type_overrides": "Blob", "indent_size": "4"}, "config.json")

    exit_code = main(["-p", str(path), "--config", str(config)])

    assert exit_code == 1
    assert "Invalid configuration" in capsys.readouterr().err
