#!/usr/bin/env python3
"""
Quick Start Guide for typed XML decoding and encoding.

Decodes a small library catalog into dictionaries, shows the error trace for
a broken document, and encodes the decoded data back to markup.
"""

import sys
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from typed_xml import Codec, CodecConfig
from typed_xml.decode import decoders as D
from typed_xml.encode import data, tag

CATALOG = """<?xml version="1.0" encoding="UTF-8"?>
<catalog>
  <!-- Books first, magazines later -->
  <book isbn="0441172717" lang="en"><title>Dune</title></book>
  <book isbn="0345391802"><title>The Hitchhiker's Guide</title></book>
  <magazine issue="12"/>
</catalog>
"""

BROKEN = """<catalog>
  <book isbn="0441172717"><title>Dune</title></book>
  <book><title>No ISBN</title></book>
</catalog>
"""


def book_decoder():
    fields = D.sequence([
        D.attr("isbn"),
        D.attr_opt("lang"),
        D.child("title", D.children(D.data).map("".join)),
    ])
    return D.tag("book").bind(lambda _: fields.map(lambda f: {
        "isbn": f[0],
        "lang": f[1] or "unknown",
        "title": f[2],
    }))


def catalog_decoder():
    # Magazines and indentation are skipped by the selector
    return D.tag("catalog").bind(
        lambda _: D.pick_children(D.by_tag({"book": book_decoder()}))
    )


def book_encoder(book):
    return tag(
        "book",
        [tag("title", [data(book["title"])])],
        attrs=[("isbn", book["isbn"]), ("lang", book["lang"])],
    )


def catalog_encoder(books):
    return tag("catalog", [book_encoder(book) for book in books])


def quick_start_example():
    """Quick start example showing basic usage."""
    codec = Codec(CodecConfig())

    print("Step 1: Decoding a catalog")
    print("-" * 30)
    result = codec.decode_string(catalog_decoder(), CATALOG)
    for book in result.unwrap():
        print(f"  {book['isbn']}  {book['title']} ({book['lang']})")

    print("\nStep 2: Reading an error trace")
    print("-" * 30)
    failure = codec.decode_string(catalog_decoder(), BROKEN)
    print(codec.render_error(failure.error))

    print("\nStep 3: Encoding the books again")
    print("-" * 30)
    codec.reconfigure(serializer__pretty_print=True)
    print(codec.encode_string(catalog_encoder, result.value))


if __name__ == "__main__":
    quick_start_example()
