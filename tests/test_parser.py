import pytest

from graph_metrics.errors import ParseError
from graph_metrics.parser import parse_edge_list, read_edge_list

from conftest import PATH4_TEXT, TRIANGLE_TEXT


def test_triangle_with_comment():
    graph = parse_edge_list(TRIANGLE_TEXT)
    assert graph.vertex_count == 3
    assert graph.edge_count == 3
    assert graph.sorted_vertices() == [1, 2, 3]


def test_result_is_frozen():
    assert parse_edge_list(PATH4_TEXT).is_frozen


def test_blank_lines_and_short_lines_are_skipped():
    graph = parse_edge_list("\n1 2\n\n5\n   \n2 3\n")
    assert graph.vertex_count == 3
    assert graph.edge_count == 2
    assert 5 not in graph


def test_comment_line_is_not_parsed():
    graph = parse_edge_list("%%MatrixMarket matrix coordinate pattern symmetric\n% abc def\n1 2\n")
    assert graph.edge_count == 1


def test_extra_fields_are_ignored():
    plain = parse_edge_list("1 2\n")
    weighted = parse_edge_list("1 2 7.5\n")
    assert sorted(weighted.edges()) == sorted(plain.edges())
    assert weighted.sorted_vertices() == plain.sorted_vertices()


def test_tabs_and_carriage_returns():
    graph = parse_edge_list("1\t2\r\n2  3\r\n")
    assert graph.edge_count == 2
    assert graph.sorted_vertices() == [1, 2, 3]


def test_duplicates_and_self_loops_are_kept():
    graph = parse_edge_list("1 2\n1 2\n3 3\n")
    assert graph.edge_count == 3
    assert graph.degree(1) == 2
    assert graph.degree(3) == 2


def test_malformed_line_raises():
    with pytest.raises(ParseError) as excinfo:
        parse_edge_list("1 2\nabc def\n3 4\n")
    assert excinfo.value.line_number == 2
    assert excinfo.value.line == "abc def"


def test_non_integer_second_field_raises():
    with pytest.raises(ParseError):
        parse_edge_list("1 2.5\n")


def test_parse_error_is_value_error():
    with pytest.raises(ValueError):
        parse_edge_list("x y\n")


def test_reparse_is_idempotent():
    first = parse_edge_list(TRIANGLE_TEXT)
    second = parse_edge_list(TRIANGLE_TEXT)
    assert first.sorted_vertices() == second.sorted_vertices()
    assert sorted(first.edges()) == sorted(second.edges())


def test_empty_text():
    graph = parse_edge_list("")
    assert graph.vertex_count == 0
    assert graph.edge_count == 0


def test_read_edge_list(tmp_path):
    path = tmp_path / "triangle.edges"
    path.write_text(TRIANGLE_TEXT, encoding="utf-8")
    graph = read_edge_list(path)
    assert graph.name == "triangle.edges"
    assert graph.edge_count == 3


def test_read_edge_list_records_path_on_error(tmp_path):
    path = tmp_path / "bad.edges"
    path.write_text("1 2\nfoo bar\n", encoding="utf-8")
    with pytest.raises(ParseError) as excinfo:
        read_edge_list(path)
    assert excinfo.value.path == str(path)
    assert str(path) in str(excinfo.value)


def test_read_edge_list_rejects_binary(tmp_path):
    path = tmp_path / "blob.bin"
    path.write_bytes(b"\xff\xfe\x00\x81")
    with pytest.raises(ParseError):
        read_edge_list(path)


def test_read_edge_list_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_edge_list(tmp_path / "missing.edges")


@pytest.mark.parametrize("line", ["1_0 2", "١ 2", "1 0x2", "+ 2", "1 2e3", "1.0 2"])
def test_only_plain_decimal_ids_are_accepted(line):
    with pytest.raises(ParseError):
        parse_edge_list(line + "\n")


def test_signed_ids_are_accepted():
    graph = parse_edge_list("-1 +2\n")
    assert graph.sorted_vertices() == [-1, 2]
