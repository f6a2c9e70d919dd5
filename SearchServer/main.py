#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""
SearchServer - command-line interface

Loads documents into a search server, runs ranked queries and reports
which query words every document matches. Engine errors are caught here
and printed; a rejected document is skipped and loading continues.
"""

import argparse
import json
import logging
import sys
from typing import Any, Dict, List, Sequence

from rich import box
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from SearchServer.config import create_search_server, get_default_status, load_config
from SearchServer.document import DocumentResult, DocumentStatus
from SearchServer.errors import SearchServerError
from SearchServer.tfidf_search.tfidf_search import SearchServer

logger = logging.getLogger(__name__)

# Initialize rich console
console = Console()

SAMPLE_STOP_WORDS = "and in on"

SAMPLE_DOCUMENTS = [
    {"id": 1, "text": "fluffy cat fluffy tail", "status": "ACTUAL", "ratings": [7, 2, 7]},
    {"id": 1, "text": "fluffy dog and fashionable collar", "status": "ACTUAL", "ratings": [1, 2]},
    {"id": -1, "text": "fluffy dog and fashionable collar", "status": "ACTUAL", "ratings": [1, 2]},
    {"id": 3, "text": "big dog star\x12ling eugene", "status": "ACTUAL", "ratings": [1, 3, 2]},
    {"id": 4, "text": "big dog starling eugene", "status": "ACTUAL", "ratings": [1, 1, 1]},
    {"id": 5, "text": "white cat and fashionable collar", "status": "ACTUAL", "ratings": [8, -3]},
    {"id": 6, "text": "groomed dog expressive eyes", "status": "ACTUAL", "ratings": [5, -12, 2, 1]},
    {"id": 7, "text": "groomed starling eugene", "status": "BANNED", "ratings": [9]},
]

SAMPLE_QUERIES = ["fluffy -dog", "fluffy --cat", "fluffy -", "fluffy groomed cat"]

SAMPLE_MATCH_QUERIES = ["fluffy dog", "fashionable -cat", "fashionable --dog", "fluffy - tail"]


def setup_logging(verbose: bool = False) -> None:
    """Route log records through the rich console."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, show_path=False)]
    )


def print_document(document: DocumentResult) -> None:
    console.print(str(document), highlight=False, soft_wrap=True)


def print_match_document_result(document_id: int, words: Sequence[str], status: DocumentStatus) -> None:
    console.print(
        f"{{ document_id = {document_id}, status = {status.value}, words ="
        + "".join(f" {escape(word)}" for word in words) + "}",
        highlight=False,
        soft_wrap=True
    )


def add_document(search_server: SearchServer, document_id: int, document: str,
                 status: DocumentStatus, ratings: Sequence[int]) -> bool:
    """
    Add a document, printing the error instead of raising it.

    Returns:
        bool: True if the document was added, False otherwise
    """
    try:
        search_server.add_document(document_id, document, status, ratings)
        return True
    except SearchServerError as e:
        console.print(f"[red]Error in adding document {document_id}:[/red] {escape(str(e))}")
        return False


def find_top_documents(search_server: SearchServer, raw_query: str, status: DocumentStatus = None) -> List[DocumentResult]:
    """Run a ranked query and print every result."""
    console.print(f"Results for request: [cyan]{escape(raw_query)}[/cyan]")
    try:
        results = search_server.find_top_documents(raw_query, status)
    except SearchServerError as e:
        console.print(f"[red]Error in searching:[/red] {escape(str(e))}")
        return []

    for document in results:
        print_document(document)
    return results


def match_documents(search_server: SearchServer, raw_query: str) -> None:
    """Print the matched query words of every document, in the order documents were added."""
    console.print(f"Matching for request: [cyan]{escape(raw_query)}[/cyan]")
    try:
        for index in range(search_server.get_document_count()):
            document_id = search_server.get_document_id(index)
            words, status = search_server.match_document(raw_query, document_id)
            print_match_document_result(document_id, words, status)
    except SearchServerError as e:
        console.print(f"[red]Error in matching request {escape(raw_query)}:[/red] {escape(str(e))}")


def display_results(results: List[DocumentResult], raw_query: str) -> None:
    """Render ranked results as a table"""
    if not results:
        console.print("[yellow]No matching documents found.[/yellow]")
        return

    table = Table(
        box=box.HEAVY_EDGE,
        show_header=True,
        header_style="bold magenta",
        title=f"[bold]Found {len(results)} document(s) for '{escape(raw_query)}'[/bold]",
        title_style="yellow"
    )
    table.add_column("#", style="dim", width=4)
    table.add_column("Document", style="cyan bold")
    table.add_column("Relevance", style="yellow")
    table.add_column("Rating", style="green", justify="right")

    for i, document in enumerate(results):
        table.add_row(str(i + 1), str(document.id), f"{document.relevance:.6f}", str(document.rating))

    console.print(table)


def parse_status(name: str) -> DocumentStatus:
    try:
        return DocumentStatus[name.upper()]
    except (AttributeError, KeyError):
        raise ValueError(f"unknown document status: {name}") from None


def load_documents(documents_path: str) -> List[Dict[str, Any]]:
    """
    Load documents from a JSON file.

    The file holds a list of objects with "id", "text", and optionally
    "status" (a DocumentStatus name) and "ratings".

    Args:
        documents_path: Path to the JSON file with documents

    Returns:
        List of document dictionaries
    """
    with open(documents_path, "r", encoding="utf-8") as f:
        documents = json.load(f)

    if not isinstance(documents, list):
        raise ValueError(f"{documents_path} does not contain a list of documents")

    logger.debug("Loaded %d documents from %s", len(documents), documents_path)
    return documents


def add_documents(search_server: SearchServer, documents: List[Dict[str, Any]]) -> int:
    """
    Add a batch of documents, skipping the ones the server rejects.

    Returns:
        Number of documents added
    """
    added = 0
    for doc_data in documents:
        if not isinstance(doc_data, dict):
            console.print(f"[red]Error in adding document:[/red] not a document object: {escape(repr(doc_data))}")
            continue
        document_id = doc_data.get("id")
        if not isinstance(document_id, int) or isinstance(document_id, bool):
            console.print(f"[red]Error in adding document {escape(repr(document_id))}:[/red] document id must be an integer")
            continue
        text = doc_data.get("text", "")
        if not isinstance(text, str):
            console.print(f"[red]Error in adding document {document_id}:[/red] document text must be a string")
            continue

        try:
            status = parse_status(doc_data.get("status", DocumentStatus.ACTUAL.name))
        except ValueError as e:
            console.print(f"[red]Error in adding document {document_id}:[/red] {escape(str(e))}")
            continue

        if add_document(search_server, document_id, text,
                        status, doc_data.get("ratings", [])):
            added += 1
    return added


def main(argv: Sequence[str] = None) -> int:
    """Main entry point for the CLI application"""
    parser = argparse.ArgumentParser(
        description="SearchServer - TF-IDF search with plus/minus queries"
    )
    parser.add_argument("--documents", help="Path to documents JSON file (sample documents if omitted)")
    parser.add_argument("--config", help="Path to a config.json file")
    parser.add_argument("--stop-words", help="Space-separated stop words (overrides the config)")
    parser.add_argument("--query", action="append", default=[],
                        help="Query to rank documents for (repeatable)")
    parser.add_argument("--match", action="append", default=[],
                        help="Query to match against every document (repeatable)")
    parser.add_argument("--status", help="Only rank documents with this status")
    parser.add_argument("--top", type=int, help="Number of top results to display")
    parser.add_argument("--table", action="store_true", help="Show ranked results as a table")
    parser.add_argument("--verbose", action="store_true", help="Show debug logging")
    args = parser.parse_args(argv)

    setup_logging(args.verbose)

    config = load_config(args.config)
    if args.stop_words is not None:
        config["stop_words"] = args.stop_words.split(" ")
    if args.top is not None:
        config["ranking"]["max_result_document_count"] = args.top

    try:
        status = parse_status(args.status) if args.status else get_default_status(config)
    except ValueError as e:
        console.print(f"[bold red]{escape(str(e))}[/bold red]")
        return 2

    if args.documents:
        try:
            documents = load_documents(args.documents)
        except (OSError, ValueError) as e:
            console.print(f"[bold red]Error loading documents:[/bold red] {escape(str(e))}")
            return 1
        queries, match_queries = args.query, args.match
    else:
        if args.stop_words is None:
            config["stop_words"] = SAMPLE_STOP_WORDS.split(" ")
        documents = SAMPLE_DOCUMENTS
        queries = args.query or SAMPLE_QUERIES
        match_queries = args.match or SAMPLE_MATCH_QUERIES

    try:
        search_server = create_search_server(config)
    except (SearchServerError, ValueError) as e:
        console.print(f"[bold red]Error creating search server:[/bold red] {escape(str(e))}", soft_wrap=True)
        return 1

    console.print(Panel(
        "[bold blue]SearchServer[/bold blue] [yellow]TF-IDF Search[/yellow]",
        border_style="blue",
        width=80
    ))

    added = add_documents(search_server, documents)
    console.print(f"[green]Added [bold]{added}[/bold] of {len(documents)} documents[/green]")

    for raw_query in queries:
        console.rule(style="yellow")
        results = find_top_documents(search_server, raw_query, status)
        if args.table:
            display_results(results, raw_query)

    for raw_query in match_queries:
        console.rule(style="yellow")
        match_documents(search_server, raw_query)

    return 0


if __name__ == "__main__":
    sys.exit(main())
