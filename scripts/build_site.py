#!/usr/bin/env python3
"""
Build the resume site and blog from static content.

Usage:
    python scripts/build_site.py build
    python scripts/build_site.py build --content content/ --output outs/site --lenient
    python scripts/build_site.py check
    python scripts/build_site.py posts --category "Web Development"
    python scripts/build_site.py preview resume
    python scripts/build_site.py preview 2024-05-25-couchdb-keycloak-part-1
"""

from folio.cli import app

if __name__ == "__main__":
    app()
