#! /usr/bin/env python
"""The module creates some basic constants to describe the tagkit package."""

title_name = "tagkit"
name = "tagkit"
copyright = "\xA92024, tagkit contributors"

major_version = "0.1"
build_date = "20241019"
version = "%s.%s" % (major_version, build_date)

title = (
    "tagkit: "
    "HTML and XSL-FO tag builders with entity and URL utilities")

home = "https://github.com/tagkit/tagkit"
