#!/usr/bin/env python3
"""
Quick Start Guide for xmldelta.

Records the edits between two small documents by hand, the way a tree
matching driver would, and prints the resulting DUL document in both the
default and the legacy flavour.
"""

import sys
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from lxml import etree

from xmldelta import ChangeLog, DeltaConfig, from_lxml, to_dul
from xmldelta.tree import Element


OLD = '<catalog><book id="1" genre="poetry"><title>Odes</title></book><book id="2"/></catalog>'
NEW = '<catalog><book id="1" genre="fiction"><title>Odes</title></book><magazine issue="7"/></catalog>'


def quick_start_example():
    """Quick start example showing basic usage."""

    print("QUICK START - xmldelta")
    print("=" * 45)

    old = from_lxml(etree.fromstring(OLD))
    new = from_lxml(etree.fromstring(NEW))
    old_first, old_second = old.root.children
    new_first = new.root.children[0]

    # Step 1: record the edits in discovery order
    log = ChangeLog(correlation_id="quick-start")
    log.update(old_first, new_first)
    log.delete_node(old_second)
    log.insert(Element("magazine", attributes={"issue": "7"}), "/node()[1]", 2, 1)

    print(f"\nRecorded changes: {log.statistics().to_dict()}")

    # Step 2: encode with the default configuration
    print("\nDUL (default):")
    print(to_dul(log, DeltaConfig(pretty_print=True)))

    # Step 3: encode for consumers expecting legacy output
    print("DUL (legacy):")
    print(to_dul(log, DeltaConfig.legacy().override(pretty_print=True)))


if __name__ == "__main__":
    quick_start_example()
