"""
Tests for the console wrappers and the command-line interface
"""

import json

import pytest

from SearchServer.document import DocumentResult, DocumentStatus
from SearchServer.main import (
    add_document,
    add_documents,
    find_top_documents,
    main,
    match_documents,
    print_document,
    print_match_document_result,
)
from SearchServer.tfidf_search.tfidf_search import SearchServer


@pytest.fixture
def search_server():
    server = SearchServer("and in on")
    server.add_document(1, "fluffy cat fluffy tail", DocumentStatus.ACTUAL, [7, 2, 7])
    server.add_document(2, "white cat and fashionable collar", DocumentStatus.ACTUAL, [8, -3])
    return server


def test_print_document(capsys):
    print_document(DocumentResult(1, 0.5, 5))
    assert capsys.readouterr().out == "{ document_id = 1, relevance = 0.5, rating = 5 }\n"


def test_print_match_document_result(capsys):
    print_match_document_result(1, ["cat", "fluffy"], DocumentStatus.BANNED)
    print_match_document_result(2, [], DocumentStatus.ACTUAL)
    assert capsys.readouterr().out.splitlines() == [
        "{ document_id = 1, status = 2, words = cat fluffy}",
        "{ document_id = 2, status = 0, words =}",
    ]


def test_add_document_prints_error(search_server, capsys):
    assert not add_document(search_server, 1, "fluffy dog", DocumentStatus.ACTUAL, [1, 2])
    assert not add_document(search_server, -1, "fluffy dog", DocumentStatus.ACTUAL, [1, 2])
    assert add_document(search_server, 3, "fluffy dog", DocumentStatus.ACTUAL, [1, 2])

    out = capsys.readouterr().out
    assert "Error in adding document 1: duplicate document id" in out
    assert "Error in adding document -1: negative document id" in out
    assert search_server.get_document_count() == 3


def test_add_documents_skips_rejected(search_server, capsys):
    documents = [
        {"id": 3, "text": "big dog star\x12ling", "ratings": [1]},
        {"id": 4, "text": "big dog starling", "status": "IRRELEVANT", "ratings": [1]},
        {"id": 5, "text": "big dog", "status": "SECRET"},
        {"id": 6, "text": "groomed dog"},
    ]
    assert add_documents(search_server, documents) == 2
    assert list(search_server) == [1, 2, 4, 6]
    assert search_server.match_document("dog", 4) == (["dog"], DocumentStatus.IRRELEVANT)

    out = capsys.readouterr().out
    assert "Error in adding document 3: invalid characters" in out
    assert "Error in adding document 5: unknown document status: SECRET" in out


def test_find_top_documents_prints_results(search_server, capsys):
    results = find_top_documents(search_server, "fluffy -collar")
    assert [document.id for document in results] == [1]

    out = capsys.readouterr().out
    assert "Results for request: fluffy -collar" in out
    assert "{ document_id = 1, relevance = " in out


def test_find_top_documents_prints_error(search_server, capsys):
    assert find_top_documents(search_server, "fluffy --cat") == []
    assert "Error in searching: more than one minus" in capsys.readouterr().out


def test_match_documents(search_server, capsys):
    match_documents(search_server, "fluffy cat -collar")
    assert capsys.readouterr().out.splitlines() == [
        "Matching for request: fluffy cat -collar",
        "{ document_id = 1, status = 0, words = cat fluffy}",
        "{ document_id = 2, status = 0, words =}",
    ]


def test_match_documents_prints_error(search_server, capsys):
    match_documents(search_server, "fluffy - tail")
    assert "Error in matching request fluffy - tail: no text after minus" in capsys.readouterr().out


def test_main_with_sample_documents(capsys):
    assert main([]) == 0

    out = capsys.readouterr().out
    assert "Error in adding document 1: duplicate document id" in out
    assert "Error in adding document -1: negative document id" in out
    assert "Error in adding document 3: invalid characters" in out
    assert "Added 5 of 8 documents" in out
    assert "Results for request: fluffy -dog" in out
    assert "Matching for request: fashionable -cat" in out


def test_main_with_documents_file(tmp_path, capsys):
    documents_path = tmp_path / "documents.json"
    documents_path.write_text(json.dumps([
        {"id": 0, "text": "white cat fluffy tail", "status": "ACTUAL", "ratings": [7, 2, 7]},
        {"id": 1, "text": "fluffy well groomed cat", "status": "ACTUAL", "ratings": [8, -3]},
    ]), encoding="utf-8")

    assert main(["--documents", str(documents_path), "--stop-words", "well",
                 "--query", "fluffy cat -groomed", "--match", "groomed cat"]) == 0

    out = capsys.readouterr().out
    assert "{ document_id = 0, relevance = 0.0, rating = 5 }" in out
    assert "document_id = 1, relevance" not in out
    assert "{ document_id = 0, status = 0, words = cat}" in out
    assert "{ document_id = 1, status = 0, words = cat groomed}" in out


def test_main_with_missing_documents_file(tmp_path, capsys):
    assert main(["--documents", str(tmp_path / "missing.json")]) == 1
    assert "Error loading documents" in capsys.readouterr().out


def test_main_with_unknown_status(capsys):
    assert main(["--status", "secret"]) == 2


def test_add_documents_skips_malformed_entries(capsys):
    server = SearchServer()
    documents = [
        {"text": "no id"},
        {"id": "7", "text": "string id"},
        "not a document",
        {"id": 3, "text": ["not", "text"]},
        {"id": 4, "text": "odd status", "status": 1},
        {"id": 2, "text": "cat"},
    ]
    assert add_documents(server, documents) == 1
    assert list(server) == [2]

    out = capsys.readouterr().out
    assert "Error in adding document None: document id must be an integer" in out
    assert "Error in adding document '7': document id must be an integer" in out
    assert "Error in adding document: not a document object" in out
    assert "Error in adding document 3: document text must be a string" in out
    assert "Error in adding document 4: unknown document status: 1" in out


def test_long_match_result_stays_on_one_line(capsys):
    words = [f"word{i:02d}" for i in range(20)]
    print_match_document_result(1, words, DocumentStatus.ACTUAL)
    assert capsys.readouterr().out == "{ document_id = 1, status = 0, words = " + " ".join(words) + "}\n"


def test_long_document_result_stays_on_one_line(capsys):
    print_document(DocumentResult(123456789012345678901234567890, 0.123456789012345, 987654321098765432109876))
    assert len(capsys.readouterr().out.splitlines()) == 1


def test_main_rejects_negative_top(capsys):
    assert main(["--top", "-1"]) == 1
    assert "max_result_document_count must not be negative" in capsys.readouterr().out
