import logging

import pytest

from hashrelation.loader import load_pairs, load_relation


def write(tmp_path, text, name="pairs.csv"):
    p = tmp_path / name
    p.write_text(text, encoding="utf-8")
    return str(p)


def test_load_pairs_skips_header_and_blank_lines(tmp_path):
    path = write(tmp_path, "x,y\n1,a\n\n 1 , b \n2,a\n")
    assert load_pairs(path) == [("1", "a"), ("1", "b"), ("2", "a")]


def test_header_only_recognised_on_first_row(tmp_path):
    path = write(tmp_path, "1,a\nx,y\n")
    assert load_pairs(path) == [("1", "a"), ("x", "y")]


def test_header_after_byte_order_mark_is_skipped(tmp_path):
    p = tmp_path / "excel.csv"
    p.write_bytes("\ufeffx,y\r\n1,a\r\n".encode("utf-8"))
    assert load_pairs(str(p)) == [("1", "a")]


def test_header_after_leading_blank_lines_is_skipped(tmp_path):
    path = write(tmp_path, "\n\nx,y\n1,a\n")
    assert load_pairs(path) == [("1", "a")]


def test_bad_row_reports_line_number(tmp_path):
    path = write(tmp_path, "1,a\n2,b,extra\n")
    with pytest.raises(ValueError, match=":2:"):
        load_pairs(path)


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_pairs(str(tmp_path / "nope.csv"))


def test_load_relation_dedupes_and_logs(tmp_path, caplog):
    path = write(tmp_path, "1,a\n1,b\n2,a\n1,a\n")
    with caplog.at_level(logging.INFO, logger="hashrelation.loader"):
        rel = load_relation(path, buckets=4)
    assert len(rel) == 3
    assert rel.bucket_count == 4
    assert rel.y_values_given_x("1") == {"a", "b"}
    assert "3 new, 1 duplicate" in caplog.text
