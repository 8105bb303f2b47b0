import pytest

from relambda.ast import FormatError, K, Variable
from relambda.cli import TranslationError, main, missing_names, translate
from relambda.converter import to_ski
from relambda.parser import parse_definitions, parse_string_expression


def test_missing_names_free_variable():
    expr = parse_string_expression("\\x.x y")
    assert missing_names(expr, set()) == ["y"]


def test_missing_names_keeps_order_and_duplicates():
    expr = parse_string_expression("x (\\x.x) x")
    assert missing_names(expr, set()) == ["x", "x"]


def test_missing_names_respects_bound_and_leaves_it_unchanged():
    bound = {"y"}
    expr = parse_string_expression('\\x.x y "s"')
    assert missing_names(expr, bound) == []
    assert bound == {"y"}


def test_missing_names_rejects_combinators():
    with pytest.raises(TypeError):
        missing_names(K(), set())


def test_translate_empty():
    assert translate([], False) == ""


def test_translate_duplicate_definition():
    defs = parse_definitions("let a = x let a = y")
    with pytest.raises(TranslationError) as info:
        translate(defs, True)
    assert info.value.messages == ['multiple definitions for "a" detected.']


def test_translate_undefined_name():
    defs = parse_definitions("let main = \\x.z")
    with pytest.raises(TranslationError) as info:
        translate(defs, True)
    assert info.value.messages == ["undefined name: z"]


def test_translate_self_reference():
    defs = parse_definitions("let f = \\x.f x let main = f")
    with pytest.raises(TranslationError) as info:
        translate(defs, True)
    assert "circular dependencies not yet allowed for: f" in info.value.messages


def test_translate_without_main():
    defs = parse_definitions("let id = \\x.x")
    with pytest.raises(TranslationError) as info:
        translate(defs, False)
    assert str(info.value) == "no main detected"


def test_translate_ski_matches_converter():
    source = "\\f.(\\x.x x) (\\x.f(x x))"
    defs = parse_definitions(f"let main = {source}")
    expected = to_ski(parse_string_expression(source)).format()
    assert translate(defs, True) == expected


def test_translate_ski_keeps_references():
    defs = parse_definitions("let id = \\x.x let main = id")
    assert translate(defs, True) == "id"


def test_translate_unlambda_inlines_definitions():
    inlined = translate(parse_definitions("let id = \\x.x let main = id"), False)
    direct = translate(parse_definitions("let main = \\x.x"), False)
    assert inlined == direct == "`ki"


def test_translate_unlambda_single_character_string():
    assert translate(parse_definitions('let main = "a"'), False) == "`k.a"


def test_translate_unlambda_long_string_fails():
    with pytest.raises(FormatError):
        translate(parse_definitions('let main = "ab"'), False)


def test_translate_does_not_modify_input():
    defs = parse_definitions("let main = \\x.x x")
    original = parse_string_expression("\\x.x x")
    translate(defs, True)
    assert defs[0].value == original


def test_main_without_arguments(capsys):
    assert main([]) == 1
    assert capsys.readouterr().err == "must provide a filename\n"


def test_main_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "absent.lam")]) == 1
    assert "file_not_found" in capsys.readouterr().err


def test_main_prints_unlambda(tmp_path, capsys):
    path = tmp_path / "prog.lam"
    path.write_text("let id = \\x.x\nlet main = id\n", encoding="utf-8")
    assert main([str(path)]) == 0
    expected = translate(parse_definitions(path.read_text(encoding="utf-8")), False)
    assert capsys.readouterr().out == expected + "\n"


def test_main_prints_ski_with_second_argument(tmp_path, capsys):
    path = tmp_path / "prog.lam"
    path.write_text("let main = \\x.x x\n", encoding="utf-8")
    assert main([str(path), "ski"]) == 0
    expected = to_ski(parse_string_expression("\\x.x x")).format()
    assert capsys.readouterr().out == expected + "\n"


def test_main_parse_error(tmp_path, capsys):
    path = tmp_path / "bad.lam"
    path.write_text("main = x", encoding="utf-8")
    assert main([str(path)]) == 1
    assert capsys.readouterr().out == ""


def test_main_translation_error_reported(tmp_path, capsys):
    path = tmp_path / "nomain.lam"
    path.write_text("let id = \\x.x", encoding="utf-8")
    assert main([str(path)]) == 0
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err == "no main detected\n"


def test_main_format_error(tmp_path, capsys):
    path = tmp_path / "long.lam"
    path.write_text('let main = "ab"', encoding="utf-8")
    assert main([str(path)]) == 1
    assert "strings of sizes other than 1" in capsys.readouterr().err


def test_missing_names_variable_bound_by_argument():
    assert missing_names(Variable("x"), {"x"}) == []