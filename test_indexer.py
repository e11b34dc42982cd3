import json
import os

import pytest

from indexer.lexer import Lexer, query_terms, to_term, tokenize
from indexer.tf_index import build_tf, check_index, index_folder, load_index, save_index, top_terms
from indexer.xml_reader import extract_text, read_entire_xml_file


def test_lexer_splits_words_numbers_and_symbols():
    assert tokenize("  glBindTexture(GL_TEXTURE_2D, 42);") == [
        "glBindTexture", "(", "GL", "_", "TEXTURE", "_", "2", "D", ",", "42", ")", ";"
    ]


def test_lexer_is_an_iterator():
    lexer = Lexer("one 2")
    assert next(lexer) == "one"
    assert next(lexer) == "2"
    with pytest.raises(StopIteration):
        next(lexer)


def test_lexer_handles_unicode_letters():
    assert tokenize("naïve café") == ["naïve", "café"]


def test_query_terms_keep_words_and_numbers_once():
    assert query_terms('{ "name": "John Doe" }') == ["NAME", "JOHN", "DOE"]
    assert query_terms("bind texture to texture 2") == ["BIND", "TEXTURE", "TO", "2"]


def test_extract_text_skips_comments_and_declarations():
    markup = '<?xml version="1.0"?><a>Hello<b>World</b><!-- hidden --></a>'
    assert extract_text(markup) == "Hello World "


def test_read_entire_xml_file(xml_corpus):
    assert read_entire_xml_file(str(xml_corpus / "people.xml")) == "John Doe 42 "


def test_build_tf_counts_upper_cased_terms():
    assert build_tf("Texture texture, 2") == {"TEXTURE": 2, ",": 1, "2": 1}


def test_top_terms_orders_by_frequency():
    tf = {"A": 1, "B": 3, "C": 3, "D": 2}
    assert top_terms(tf, 3) == [("B", 3), ("C", 3), ("D", 2)]


def test_index_folder_indexes_files_only(xml_corpus, capsys):
    tf_index = index_folder(str(xml_corpus))

    names = sorted(os.path.basename(path) for path in tf_index)
    assert names == ["empty.xml", "opengl.xml", "people.xml"]

    opengl = tf_index[str(xml_corpus / "opengl.xml")]
    assert opengl["TEXTURE"] == 2
    assert opengl["BIND"] == 1
    assert "NOT" not in opengl
    assert tf_index[str(xml_corpus / "empty.xml")] == {}
    assert "indexing" in capsys.readouterr().out


def test_index_folder_missing_directory(tmp_path):
    with pytest.raises(FileNotFoundError):
        index_folder(str(tmp_path / "nope"))


def test_save_and_load_index(tmp_path):
    path = str(tmp_path / "index.json")
    tf_index = {"doc.xml": {"TERM": 3}}

    save_index(tf_index, path)

    with open(path, encoding="utf-8") as f:
        assert json.load(f) == tf_index
    assert load_index(path) == tf_index


def test_load_index_rejects_wrong_shape(tmp_path):
    path = tmp_path / "index.json"
    path.write_text("[1, 2, 3]", encoding="utf-8")
    with pytest.raises(ValueError):
        load_index(str(path))

    path.write_text('{"doc.xml": {"TERM": "many"}}', encoding="utf-8")
    with pytest.raises(ValueError):
        load_index(str(path))


def test_check_index_reports_document_count(index_file, capsys):
    assert check_index(str(index_file)) == 3

    out = capsys.readouterr().out
    assert f"Reading {index_file} index file..." in out
    assert f"{index_file} contains 3 documents" in out


def test_check_index_missing_file(tmp_path):
    with pytest.raises(OSError):
        check_index(str(tmp_path / "missing.json"))


def test_to_term_upper_cases_ascii_letters_only():
    assert to_term("café") == "CAFé"
    assert to_term("straße") == "STRAßE"
    assert build_tf("café straße Café") == {"CAFé": 2, "STRAßE": 1}


def test_extract_text_drops_cdata_sections():
    assert extract_text("<a>x<![CDATA[secret]]></a>") == "x "
